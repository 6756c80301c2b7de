"""
Action model — what the upgrader client does with an item's file.

The canonical string form is uppercase and is what ends up in the
exported JSON. Parsing is case-insensitive.
"""

from __future__ import annotations

from enum import StrEnum


class InvalidActionError(ValueError):
    """Raised when text does not name a known action."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Invalid action: {text}")
        self.text = text


class Action(StrEnum):
    """Operation tag attached to an item."""

    ADD = "ADD"
    DELETE = "DELETE"
    UPDATE = "UPDATE"

    @property
    def canonical(self) -> str:
        """Uppercase form used for display and serialization."""
        return self.value

    @classmethod
    def parse(cls, text: str) -> Action:
        """Match ``text`` case-insensitively against the canonical names.

        Raises:
            InvalidActionError: If no action matches.
        """
        wanted = text.upper()
        for action in cls:
            if action.value == wanted:
                return action
        raise InvalidActionError(text)
