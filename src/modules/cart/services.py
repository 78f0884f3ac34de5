"""Cart service layer (Use Cases).

Each user has one cart made of ``CartEntry`` rows.  Prices are never
stored on the cart: line totals always use the menu's current price.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from django.db import transaction

from modules.cart.dtos import CartGroup, CartSummary, CartView
from modules.cart.exceptions import CartEntryNotFound
from modules.restaurants.exceptions import MenuNotFound, RestaurantNotFound
from shared.domain.money import group_by_restaurant

if TYPE_CHECKING:
    from modules.cart.dtos import AddCartItemDTO, UpdateQuantityDTO
    from modules.cart.models import CartEntry
    from modules.cart.repositories.interfaces import ICartRepository
    from modules.restaurants.repositories.interfaces import IRestaurantRepository

logger = structlog.get_logger(__name__)


class CartService:
    """Application service for cart use-cases.

    Receives repositories via constructor injection.
    """

    def __init__(
        self,
        cart_repository: ICartRepository,
        restaurant_repository: IRestaurantRepository,
    ) -> None:
        self._cart_repo = cart_repository
        self._restaurant_repo = restaurant_repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def add_item(self, user_id: str, dto: AddCartItemDTO) -> CartEntry:
        """Add *quantity* of a menu item, merging with an existing entry.

        Raises:
            RestaurantNotFound: restaurant does not exist.
            MenuNotFound: menu does not exist or belongs to another restaurant.
        """
        log = logger.bind(
            user_id=str(user_id),
            restaurant_id=str(dto.restaurant_id),
            menu_id=str(dto.menu_id),
        )

        if self._restaurant_repo.get_by_id(str(dto.restaurant_id)) is None:
            raise RestaurantNotFound()
        if self._restaurant_repo.get_menu(str(dto.restaurant_id), str(dto.menu_id)) is None:
            raise MenuNotFound()

        entry = self._cart_repo.add_quantity(
            user_id, dto.restaurant_id, dto.menu_id, dto.quantity
        )
        log.info("cart.item_added", added=dto.quantity, quantity=entry.quantity)
        return entry

    @transaction.atomic
    def update_quantity(self, user_id: str, entry_id: str, dto: UpdateQuantityDTO) -> CartEntry:
        """Raises ``CartEntryNotFound`` unless the entry is the user's."""
        entry = self._get_owned(user_id, entry_id)
        entry = self._cart_repo.set_quantity(entry, dto.quantity)
        logger.info(
            "cart.quantity_updated",
            user_id=str(user_id),
            entry_id=str(entry_id),
            quantity=dto.quantity,
        )
        return entry

    @transaction.atomic
    def remove_item(self, user_id: str, entry_id: str) -> None:
        """Raises ``CartEntryNotFound`` unless the entry is the user's."""
        entry = self._get_owned(user_id, entry_id)
        self._cart_repo.delete(str(entry.id))
        logger.info("cart.item_removed", user_id=str(user_id), entry_id=str(entry_id))

    def clear(self, user_id: str) -> int:
        """Remove everything from the cart.  Clearing an empty cart is fine."""
        removed = self._cart_repo.clear(user_id)
        logger.info("cart.cleared", user_id=str(user_id), removed=removed)
        return removed

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_grouped(self, user_id: str) -> CartView:
        """Entries grouped by restaurant with per-group subtotals and a summary."""
        entries = self._cart_repo.list_for_user(user_id)
        groups = group_by_restaurant(
            entries,
            restaurant_of=lambda e: e.restaurant_id,
            total_of=lambda e: e.item_total,
        )
        cart_groups = [
            CartGroup(
                restaurant=group.items[0].restaurant,
                items=group.items,
                subtotal=group.subtotal,
            )
            for group in groups
        ]
        summary = CartSummary(
            total_items=sum(e.quantity for e in entries),
            total_price=sum(g.subtotal for g in cart_groups),
            restaurant_count=len(cart_groups),
        )
        return CartView(groups=cart_groups, summary=summary)

    def _get_owned(self, user_id: str, entry_id: str) -> CartEntry:
        entry = self._cart_repo.get_for_user(entry_id, user_id)
        if entry is None:
            raise CartEntryNotFound()
        return entry
