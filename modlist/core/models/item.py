"""
Item model — one entry of the ModsUpgrader JSON list.

An item is first of all a file: ``filename`` is the name the client
saves it under, ``action`` says what the client does with it, and
``download_link`` is the direct link to the file.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from modlist.core.models.action import Action


class Item(BaseModel):
    """A single mod upgrade entry.

    Both text fields must be non-empty; assignment is validated too,
    so an in-place edit can never store an empty value.
    """

    model_config = ConfigDict(validate_assignment=True)

    filename: str = Field(min_length=1, serialization_alias="mod_filename")
    action: Action = Action.ADD
    download_link: str = Field(min_length=1)

    def to_dict(self) -> dict[str, Any]:
        """Export shape: ``mod_filename``, ``action``, ``download_link``."""
        return self.model_dump(mode="json", by_alias=True)
