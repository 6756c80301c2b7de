"""
Shared test fixtures and configuration.
"""

import io
import logging
from collections.abc import Callable

import pytest

from modlist.core.models import Action, Item


@pytest.fixture
def feed_stdin(monkeypatch: pytest.MonkeyPatch) -> Callable[..., None]:
    """Replace stdin with the given answer lines (str or raw bytes)."""

    def _feed(*lines: str | bytes) -> None:
        raw = b"".join(
            (line if isinstance(line, bytes) else line.encode("utf-8")) + b"\n"
            for line in lines
        )
        monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(raw), encoding="utf-8"))

    return _feed


@pytest.fixture
def sample_items() -> list[Item]:
    """Three distinct items, one per action."""
    return [
        Item(filename="a.zip", action=Action.ADD, download_link="u1"),
        Item(filename="b.zip", action=Action.DELETE, download_link="u2"),
        Item(filename="c.zip", action=Action.UPDATE, download_link="u3"),
    ]


@pytest.fixture
def restore_root_logging():
    """Put the root logger back the way pytest configured it."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
