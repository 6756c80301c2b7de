"""
Item prompts — the interactive sub-flows shared by the commands.

    read_new_item      → collect filename, action and link for a new item
    read_item_index    → list the items and ask which one to work on
    modify_item        → ask which field to change and overwrite it

Each prompt loops until it gets a valid answer; nothing here touches
the item list itself.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence

import click

from modlist.core.models.action import Action, InvalidActionError
from modlist.core.models.item import Item
from modlist.core.services.console_io import (
    EMPTY_FIELD_MSG,
    INVALID_INPUT_MSG,
    OUT_OF_BOUNDS_MSG,
    read_user_input,
    warn,
)

logger = logging.getLogger(__name__)

_INDEX_RE = re.compile(r"\+?[0-9]+")

# Largest item number accepted as a number; bigger ones are invalid input.
MAX_ITEM_NUMBER = 2**64 - 1

FIELD_MENU = "1: Filename\n2: Action\n3: Direct download link\n-> "


# ── Generic loops ───────────────────────────────────────────────


def _read_non_empty(message: str, warning: str) -> str:
    """Re-prompt until the reply is not empty."""
    while True:
        user_input = read_user_input(message)
        if user_input:
            return user_input
        warn(warning)


def _read_action(message: str) -> Action:
    """Re-prompt until the reply names an action."""
    while True:
        user_input = read_user_input(message)
        try:
            return Action.parse(user_input)
        except InvalidActionError as e:
            logger.debug("%s", e)
            warn(INVALID_INPUT_MSG)


# ── New item ────────────────────────────────────────────────────


def read_new_item() -> Item:
    """Collect a complete item from three prompts."""
    click.echo("\n--- Adding a new item ---\n")

    filename = _read_non_empty("Filename: ", EMPTY_FIELD_MSG)
    click.echo("\n")

    action = _read_action("Action (ADD, DELETE, UPDATE): ")
    click.echo("\n")

    # The link prompt reuses the filename warning text.
    download_link = _read_non_empty("Direct download link: ", EMPTY_FIELD_MSG)

    return Item(filename=filename, action=action, download_link=download_link)


# ── Index selection ─────────────────────────────────────────────


def print_enumerated_items(items: Sequence[Item]) -> None:
    """List items numbered from 1."""
    click.echo("\n\n-- ITEMS LISTED --\n\n")
    for idx, item in enumerate(items, start=1):
        click.echo(f"{idx}: {item!r}")


def parse_item_number(text: str, count: int) -> int | None:
    """Convert a 1-based item number to a zero-based index.

    Returns:
        The index, or None when the number is 0 or past ``count``.

    Raises:
        ValueError: If ``text`` is not an unsigned integer, or is
            larger than ``MAX_ITEM_NUMBER``.
    """
    if not _INDEX_RE.fullmatch(text):
        raise ValueError(f"not an item number: {text!r}")
    digits = text.lstrip("+").lstrip("0") or "0"
    if len(digits) > len(str(MAX_ITEM_NUMBER)) or int(digits) > MAX_ITEM_NUMBER:
        raise ValueError(f"item number too large: {text!r}")
    idx = int(digits) - 1
    if 0 <= idx < count:
        return idx
    return None


def read_item_index(items: Sequence[Item]) -> int:
    """Show the list and ask for an item number until one is valid.

    ``items`` must not be empty, otherwise this never returns.
    """
    while True:
        print_enumerated_items(items)
        user_input = read_user_input("Enter the item number you wish to change: ")
        try:
            idx = parse_item_number(user_input, len(items))
        except ValueError:
            warn(INVALID_INPUT_MSG)
            continue
        if idx is None:
            warn(OUT_OF_BOUNDS_MSG)
            continue
        return idx


# ── Field modification ──────────────────────────────────────────


def _set_filename(item: Item) -> None:
    item.filename = _read_non_empty("Filename new value: ", INVALID_INPUT_MSG)


def _set_action(item: Item) -> None:
    item.action = _read_action("Action new value (ADD, DELETE, UPDATE) : ")


def _set_download_link(item: Item) -> None:
    item.download_link = _read_non_empty("Direct download link new value: ", INVALID_INPUT_MSG)


_FIELD_EDITORS: dict[str, Callable[[Item], None]] = {
    "1": _set_filename,
    "2": _set_action,
    "3": _set_download_link,
}


def read_field_choice() -> str:
    """Ask which field to modify; returns "1", "2" or "3"."""
    click.echo("What do you want to modify?")
    while True:
        user_input = read_user_input(FIELD_MENU)
        if user_input in _FIELD_EDITORS:
            return user_input
        warn(INVALID_INPUT_MSG)


def modify_item(item: Item) -> None:
    """Overwrite one user-chosen field of ``item`` in place."""
    choice = read_field_choice()
    _FIELD_EDITORS[choice](item)
    logger.debug("Modified field %s: %r", choice, item)
