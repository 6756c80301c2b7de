"""
Dispatcher — the top-level read-command / execute-command loop.

The loop owns the item list. Each recognised token builds a fresh
command bound to that list; Quit is the only way out.
"""

from __future__ import annotations

import logging
from enum import StrEnum

from modlist.core.engine.commands import (
    AddItemCommand,
    DeleteItemCommand,
    ModifyItemCommand,
    QuitCommand,
    ShowItemsCommand,
    TerminalCommand,
)
from modlist.core.models.item import Item
from modlist.core.services.console_io import INVALID_INPUT_MSG, read_user_input, warn

logger = logging.getLogger(__name__)

COMMAND_PROMPT = "Enter command (q: Quit, a: Add, m: Modify, d: Delete, s: Show): "


class TerminalAction(StrEnum):
    """Command tokens accepted at the top-level prompt."""

    QUIT = "q"
    ADD_ITEM = "a"
    MODIFY_ITEM = "m"
    DELETE_ITEM = "d"
    SHOW = "s"


_COMMANDS: dict[TerminalAction, type[TerminalCommand]] = {
    TerminalAction.QUIT: QuitCommand,
    TerminalAction.ADD_ITEM: AddItemCommand,
    TerminalAction.MODIFY_ITEM: ModifyItemCommand,
    TerminalAction.DELETE_ITEM: DeleteItemCommand,
    TerminalAction.SHOW: ShowItemsCommand,
}


def read_terminal_action() -> TerminalAction:
    """Prompt until the user enters a known command letter."""
    while True:
        user_input = read_user_input(COMMAND_PROMPT).lower()
        try:
            return TerminalAction(user_input)
        except ValueError:
            warn(INVALID_INPUT_MSG)


def build_command(action: TerminalAction, items: list[Item]) -> TerminalCommand:
    """Bind the command for ``action`` to ``items``."""
    return _COMMANDS[action](items)


def execute_command(action: TerminalAction, items: list[Item]) -> None:
    logger.info("Running command: %s", action.name.lower())
    build_command(action, items).execute()


def run(items: list[Item] | None = None) -> None:
    """Run the interactive loop until Quit exits the process.

    Args:
        items: Optional starting list. A new empty list by default.
    """
    if items is None:
        items = []
    while True:
        action = read_terminal_action()
        execute_command(action, items)
