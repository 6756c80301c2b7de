"""
Tests for JSON export — key order, list order, formatting.
"""

import json

from modlist.core.models import Action, Item
from modlist.core.services.json_export import items_to_json, print_items_json


class TestItemsToJson:
    def test_two_items(self):
        items = [
            Item(filename="a.zip", action=Action.ADD, download_link="u1"),
            Item(filename="b.zip", action=Action.DELETE, download_link="u2"),
        ]
        data = json.loads(items_to_json(items))
        assert len(data) == 2
        assert data[0] == {"mod_filename": "a.zip", "action": "ADD", "download_link": "u1"}
        assert data[1]["mod_filename"] == "b.zip"
        assert data[1]["action"] == "DELETE"
        assert data[1]["download_link"] == "u2"

    def test_field_order(self, sample_items):
        data = json.loads(items_to_json(sample_items))
        for obj in data:
            assert list(obj) == ["mod_filename", "action", "download_link"]

    def test_list_order_preserved(self, sample_items):
        data = json.loads(items_to_json(sample_items))
        assert [o["mod_filename"] for o in data] == ["a.zip", "b.zip", "c.zip"]

    def test_pretty_printed(self):
        text = items_to_json([Item(filename="a.zip", download_link="u1")])
        assert text == (
            "[\n"
            "  {\n"
            '    "mod_filename": "a.zip",\n'
            '    "action": "ADD",\n'
            '    "download_link": "u1"\n'
            "  }\n"
            "]"
        )

    def test_non_ascii_kept(self):
        text = items_to_json([Item(filename="café.zip", download_link="u")])
        assert "café.zip" in text


class TestPrintItemsJson:
    def test_blank_separator_before_json(self, capsys, sample_items):
        print_items_json(sample_items)
        out = capsys.readouterr().out
        assert out.startswith("\n\n[")
        assert json.loads(out) == json.loads(items_to_json(sample_items))
