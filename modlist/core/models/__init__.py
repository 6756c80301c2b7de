"""
Domain models — the item record and its action tag.

    from modlist.core.models import Action, InvalidActionError, Item
"""

from modlist.core.models.action import Action, InvalidActionError
from modlist.core.models.item import Item

__all__ = [
    # action.py
    "Action",
    "InvalidActionError",
    # item.py
    "Item",
]
