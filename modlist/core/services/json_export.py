"""
JSON export — the list as the ModsUpgrader client reads it.
"""

from __future__ import annotations

import json
from collections.abc import Sequence

import click

from modlist.core.models.item import Item


def items_to_json(items: Sequence[Item]) -> str:
    """Render items as a pretty-printed JSON array, keeping list order."""
    return json.dumps([item.to_dict() for item in items], indent=2, ensure_ascii=False)


def print_items_json(items: Sequence[Item]) -> None:
    """Print the JSON after a blank separator line."""
    click.echo(f"\n\n{items_to_json(items)}")
