"""
Terminal commands — the five operations a user can run on the list.

A command is built with the dispatcher's item list, executed once,
and thrown away. It never keeps the list past ``execute()``.
"""

from __future__ import annotations

import logging
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass

from modlist.core.models.item import Item
from modlist.core.services.console_io import warn
from modlist.core.services.item_prompts import modify_item, read_item_index, read_new_item
from modlist.core.services.json_export import print_items_json

logger = logging.getLogger(__name__)


class TerminalCommand(ABC):
    """One interactive operation on the item list."""

    @abstractmethod
    def execute(self) -> None:
        """Run the command: mutate the list, print, or exit."""


@dataclass
class AddItemCommand(TerminalCommand):
    """Prompt for a new item and append it."""

    items: list[Item]

    def execute(self) -> None:
        item = read_new_item()
        self.items.append(item)
        logger.debug("Appended item #%d: %r", len(self.items), item)


@dataclass
class DeleteItemCommand(TerminalCommand):
    """Ask for an item number and remove that item."""

    items: list[Item]

    def execute(self) -> None:
        if not self.items:
            warn("WARNING: no items, cannot delete.")
            return
        idx = read_item_index(self.items)
        removed = self.items.pop(idx)
        logger.debug("Deleted item #%d: %r", idx + 1, removed)


@dataclass
class ModifyItemCommand(TerminalCommand):
    """Ask for an item number, then overwrite one of its fields."""

    items: list[Item]

    def execute(self) -> None:
        if not self.items:
            warn("WARNING: no items, cannot modify.")
            return
        idx = read_item_index(self.items)
        modify_item(self.items[idx])


@dataclass
class ShowItemsCommand(TerminalCommand):
    """Print the current list as JSON."""

    items: list[Item]

    def execute(self) -> None:
        if not self.items:
            warn("WARNING: no items, cannot show.")
            return
        print_items_json(self.items)


@dataclass
class QuitCommand(TerminalCommand):
    """Print the final JSON (if any) and exit with status 0."""

    items: list[Item]

    def execute(self) -> None:
        if self.items:
            print_items_json(self.items)
        logger.info("Quitting with %d item(s)", len(self.items))
        sys.exit(0)
