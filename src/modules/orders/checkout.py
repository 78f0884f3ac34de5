"""Checkout engine: turns a user's cart into an Order.

The whole conversion is one database transaction.  The cart rows are
locked first, so a concurrent add or a second checkout for the same user
waits until this one commits; if anything fails (pricing, order number
generation, a constraint) the transaction rolls back and the cart is left
exactly as it was.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from django.db import transaction

from modules.orders.constants import OrderStatus
from modules.orders.dtos import OrderLineDTO
from modules.orders.exceptions import EmptyCartCheckout
from shared.domain.money import price_lines

if TYPE_CHECKING:
    from modules.cart.models import CartEntry
    from modules.cart.repositories.interfaces import ICartRepository
    from modules.orders.dtos import CheckoutDTO
    from modules.orders.models import Order
    from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class CheckoutService:
    def __init__(
        self,
        cart_repository: ICartRepository,
        order_repository: IOrderRepository,
        service_fee: int,
        delivery_fee: int,
    ) -> None:
        self._cart_repo = cart_repository
        self._order_repo = order_repository
        self._service_fee = service_fee
        self._delivery_fee = delivery_fee

    @transaction.atomic
    def checkout(self, user_id: str, dto: CheckoutDTO) -> Order:
        """Create an order from the cart and empty the cart.

        Steps:
        1. Lock and load the cart entries.
        2. Freeze each entry at the menu's current price.
        3. Subtotal plus the flat service and delivery fees.
        4. Persist the order, its items and the first history record.
        5. Clear the cart.

        Raises:
            EmptyCartCheckout: the cart has no entries.
        """
        log = logger.bind(user_id=str(user_id), payment_method=dto.payment_method)
        log.info("order.checkout_started")

        entries = self._cart_repo.list_for_checkout(user_id)
        if not entries:
            log.warning("order.checkout_empty_cart")
            raise EmptyCartCheckout()

        lines = [self._freeze(entry) for entry in entries]
        pricing = price_lines(
            (line.item_total for line in lines), self._service_fee, self._delivery_fee
        )

        order = self._order_repo.create(
            {
                "user_id": user_id,
                "payment_method": dto.payment_method,
                "delivery_address": dto.delivery_address,
                "notes": dto.notes,
                "pricing": pricing,
                "lines": lines,
            }
        )
        self._order_repo.add_history(
            order_id=order.id,
            status=OrderStatus.PREPARING,
            notes="Order placed",
            user_id=user_id,
        )

        cleared = self._cart_repo.clear(user_id)

        log.info(
            "order.checkout_completed",
            order_id=str(order.id),
            order_number=order.order_number,
            subtotal=pricing.subtotal,
            total_price=pricing.total_price,
            cleared_entries=cleared,
        )
        return self._order_repo.get_by_id(str(order.id)) or order

    @staticmethod
    def _freeze(entry: CartEntry) -> OrderLineDTO:
        return OrderLineDTO(
            restaurant_id=entry.restaurant_id,
            restaurant_name=entry.restaurant.name,
            menu_id=entry.menu_id,
            menu_name=entry.menu.food_name,
            unit_price=entry.menu.price,
            quantity=entry.quantity,
        )
