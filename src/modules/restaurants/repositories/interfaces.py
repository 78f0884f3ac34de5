"""Restaurant repository interface.

Covers the restaurant aggregate and its menu items.  ``rating`` writes go
through ``update_rating`` only; callers hold the row lock from
``get_for_update`` while recomputing it.
"""

from __future__ import annotations

from abc import abstractmethod
from decimal import Decimal
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from django.db.models import QuerySet

    from modules.restaurants.models import Menu, Restaurant


class IRestaurantRepository(IRepository["Restaurant"]):
    @abstractmethod
    def list_with_stats(self) -> QuerySet:
        """Restaurants annotated with ``review_count``, ``menu_count``,
        ``min_price`` and ``max_price``."""

    @abstractmethod
    def get_with_stats(self, id: str) -> Optional[Restaurant]:
        """Single restaurant with the ``list_with_stats`` annotations."""

    @abstractmethod
    def get_for_update(self, id: str) -> Optional[Restaurant]:
        """Restaurant row locked with ``SELECT FOR UPDATE``."""

    @abstractmethod
    def update_rating(self, id: str, rating: Decimal) -> None:
        """Overwrite the cached rating."""

    @abstractmethod
    def top_rated(self, min_rating: Decimal, limit: int) -> List[Restaurant]:
        """Best rated then most reviewed restaurants at or above *min_rating*."""

    @abstractmethod
    def get_menu(self, restaurant_id: str, menu_id: str) -> Optional[Menu]:
        """Menu item, only if it belongs to the given restaurant."""

    @abstractmethod
    def latest_menus(self, restaurant_id: str, limit: int) -> List[Menu]:
        """Newest menu items of a restaurant."""

    @abstractmethod
    def sample_menus(
        self, restaurant_ids: Iterable[str], per_restaurant: int
    ) -> Dict[str, List[Menu]]:
        """Up to *per_restaurant* menu items for each restaurant, keyed by id."""
