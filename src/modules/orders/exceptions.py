"""Order domain exceptions.

Raised by the checkout engine and ``OrderService``; the API exception
handler renders them through their base error kind.
"""

from __future__ import annotations

from modules.core.exceptions import EmptyCart, InvalidStatus, NotFound


class OrderNotFound(NotFound):
    """The order does not exist or belongs to another user."""

    default_detail = "Order not found."


class InvalidOrderStatus(InvalidStatus):
    """Unknown status, or a transition the state machine forbids."""


class EmptyCartCheckout(EmptyCart):
    """Checkout attempted with no cart entries."""

    default_detail = "Cart is empty. Add items before checkout."
