"""Cart repository interface.

Every lookup is scoped to the owning user: an entry that belongs to
someone else is indistinguishable from one that does not exist.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.cart.models import CartEntry


class ICartRepository(IRepository["CartEntry"]):
    @abstractmethod
    def add_quantity(
        self, user_id: str, restaurant_id: str, menu_id: str, quantity: int
    ) -> CartEntry:
        """Create the entry or atomically increment its quantity."""

    @abstractmethod
    def get_for_user(self, entry_id: str, user_id: str) -> Optional[CartEntry]:
        """Entry by id, only if owned by *user_id*."""

    @abstractmethod
    def set_quantity(self, entry: CartEntry, quantity: int) -> CartEntry:
        """Replace the stored quantity."""

    @abstractmethod
    def list_for_user(self, user_id: str) -> List[CartEntry]:
        """Entries newest first, with restaurant and menu loaded."""

    @abstractmethod
    def list_for_checkout(self, user_id: str) -> List[CartEntry]:
        """Entries oldest first, locked for the current transaction."""

    @abstractmethod
    def clear(self, user_id: str) -> int:
        """Delete every entry of the user; returns how many were removed."""
