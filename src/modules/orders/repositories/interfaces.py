"""Order repository interface.

Extends ``IRepository[Order]`` with what the checkout engine, the status
state machine and the review rules need.  Lookups that take a ``user_id``
only return orders owned by that user.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Optional, Set

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from django.db.models import QuerySet

    from modules.orders.models import Order, OrderStatusHistory


class IOrderRepository(IRepository["Order"]):
    """Repository contract for the Order aggregate root.

    The aggregate includes OrderItem children and OrderStatusHistory
    records.  Mutations must be atomic.
    """

    @abstractmethod
    def create(self, data: Dict[str, Any]) -> Order:
        """Create an order with its frozen items atomically.

        ``data`` must include ``user_id``, ``payment_method``, ``pricing``
        (a ``PricingBreakdown``) and ``lines`` (``OrderLineDTO`` list), and
        optionally ``delivery_address`` and ``notes``.
        """

    @abstractmethod
    def get_for_user(self, order_id: str, user_id: str) -> Optional[Order]:
        """Order with items and history, if owned by the user."""

    @abstractmethod
    def get_by_number_for_user(self, order_number: str, user_id: str) -> Optional[Order]:
        """Order looked up by its public number, if owned by the user."""

    @abstractmethod
    def get_for_update(self, order_id: str, user_id: str) -> Optional[Order]:
        """Owned order with a row-level lock (``SELECT FOR UPDATE``)."""

    @abstractmethod
    def list_for_user(self, user_id: str) -> QuerySet:
        """User's orders newest first, items prefetched."""

    @abstractmethod
    def add_history(
        self,
        order_id: Any,
        status: str,
        notes: str = "",
        old_status: Optional[str] = None,
        user_id: Optional[Any] = None,
    ) -> OrderStatusHistory:
        """Record a status change in the order's audit trail."""

    @abstractmethod
    def has_item_from_restaurant(self, order_id: Any, restaurant_id: Any) -> bool:
        """Whether any line of the order came from the restaurant."""

    @abstractmethod
    def restaurant_ids_for_user(self, user_id: str) -> Set[Any]:
        """Every restaurant the user has ever ordered from."""
