"""Django ORM implementation of the Order repository.

All write operations run inside ``transaction.atomic()`` so the Order
aggregate (Order + OrderItems + first history row) is persisted as a unit.
Status updates lock the order row with ``select_for_update()``.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Set

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import QuerySet

from modules.orders.models import Order, OrderItem, OrderStatusHistory
from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class OrderDjangoRepository(IOrderRepository):
    """Concrete Order repository backed by Django ORM."""

    # ------------------------------------------------------------------
    # Create (aggregate root + children)
    # ------------------------------------------------------------------

    @transaction.atomic
    def create(self, data: Dict[str, Any]) -> Order:
        pricing = data["pricing"]
        order = Order(
            user_id=data["user_id"],
            payment_method=data["payment_method"],
            delivery_address=data.get("delivery_address") or "",
            notes=data.get("notes") or "",
            subtotal=pricing.subtotal,
            service_fee=pricing.service_fee,
            delivery_fee=pricing.delivery_fee,
            total_price=pricing.total_price,
        )
        order.save()

        lines = data.get("lines", [])
        for line in lines:
            OrderItem(
                order=order,
                restaurant_id=line.restaurant_id,
                restaurant_name=line.restaurant_name,
                menu_id=line.menu_id,
                menu_name=line.menu_name,
                unit_price=line.unit_price,
                quantity=line.quantity,
            ).save()

        logger.info(
            "order.persisted",
            order_id=str(order.id),
            order_number=order.order_number,
            item_count=len(lines),
        )
        return order

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def _with_relations(self) -> QuerySet:
        return Order.objects.prefetch_related("items", "status_history")

    def get_by_id(self, id: str) -> Optional[Order]:
        """Returns ``None`` for non-existent or invalid IDs."""
        try:
            return self._with_relations().filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def get_for_user(self, order_id: str, user_id: str) -> Optional[Order]:
        try:
            return self._with_relations().filter(id=order_id, user_id=user_id).first()
        except (ValueError, ValidationError):
            return None

    def get_by_number_for_user(self, order_number: str, user_id: str) -> Optional[Order]:
        return self._with_relations().filter(
            order_number=order_number, user_id=user_id
        ).first()

    def get_for_update(self, order_id: str, user_id: str) -> Optional[Order]:
        try:
            return (
                Order.objects.select_for_update()
                .filter(id=order_id, user_id=user_id)
                .first()
            )
        except (ValueError, ValidationError):
            return None

    def list_for_user(self, user_id: str) -> QuerySet:
        return (
            Order.objects.filter(user_id=user_id)
            .prefetch_related("items")
            .order_by("-created_at", "-id")
        )

    def has_item_from_restaurant(self, order_id: Any, restaurant_id: Any) -> bool:
        return OrderItem.objects.filter(
            order_id=order_id, restaurant_id=restaurant_id
        ).exists()

    def restaurant_ids_for_user(self, user_id: str) -> Set[Any]:
        return set(
            OrderItem.objects.filter(order__user_id=user_id)
            .values_list("restaurant_id", flat=True)
            .distinct()
        )

    # ------------------------------------------------------------------
    # Save / Delete (IRepository contract)
    # ------------------------------------------------------------------

    def save(self, entity: Order) -> Order:
        entity.save()
        logger.info("order.saved", order_id=str(entity.id), status=entity.status)
        return entity

    @transaction.atomic
    def delete(self, id: str) -> bool:
        try:
            deleted, _ = Order.objects.filter(id=id).delete()
        except (ValueError, ValidationError):
            return False
        return deleted > 0

    # ------------------------------------------------------------------
    # History
    # ------------------------------------------------------------------

    def add_history(
        self,
        order_id: Any,
        status: str,
        notes: str = "",
        old_status: Optional[str] = None,
        user_id: Optional[Any] = None,
    ) -> OrderStatusHistory:
        history = OrderStatusHistory.objects.create(
            order_id=order_id,
            old_status=old_status,
            new_status=status,
            user_id=user_id,
            notes=notes,
        )
        logger.info(
            "order.history_added",
            order_id=str(order_id),
            old_status=old_status,
            new_status=status,
        )
        return history
