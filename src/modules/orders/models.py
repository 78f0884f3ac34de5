"""Order, OrderItem and OrderStatusHistory models.

- ``order_number`` is the public transaction id (``TXN<millis><user><random>``),
  generated on first save and retried on collision.
- Order amounts are whole currency units; the database checks that
  ``total_price = subtotal + service_fee + delivery_fee``.
- OrderItem is a frozen snapshot of the cart line: restaurant and menu ids
  and names plus the unit price at checkout.  They are plain columns, not
  foreign keys, so later catalog edits or deletions never alter an order.
- Every status change appends an OrderStatusHistory row.
"""

from __future__ import annotations

import secrets
import time
from typing import Any
from uuid import UUID

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import BaseModel
from modules.orders.constants import (
    ORDER_NUMBER_MAX_RETRIES,
    ORDER_NUMBER_PREFIX,
    TERMINAL_STATES,
    VALID_TRANSITIONS,
    OrderStatus,
)
from shared.domain.money import PricingBreakdown, line_total


class Order(BaseModel):
    """Order aggregate root."""

    order_number: models.CharField = models.CharField(
        max_length=40, unique=True, editable=False
    )
    user: models.ForeignKey = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="orders",
    )
    status: models.CharField = models.CharField(
        max_length=20,
        choices=OrderStatus.choices,
        default=OrderStatus.PREPARING,
    )
    payment_method: models.CharField = models.CharField(max_length=50)
    delivery_address: models.TextField = models.TextField(blank=True, default="")
    notes: models.TextField = models.TextField(blank=True, default="")
    subtotal: models.PositiveIntegerField = models.PositiveIntegerField(default=0)
    service_fee: models.PositiveIntegerField = models.PositiveIntegerField(default=0)
    delivery_fee: models.PositiveIntegerField = models.PositiveIntegerField(default=0)
    total_price: models.PositiveIntegerField = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = "orders"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["user", "-created_at"], name="orders_user_created_idx"),
            models.Index(fields=["status"], name="orders_status_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(
                    total_price=models.F("subtotal")
                    + models.F("service_fee")
                    + models.F("delivery_fee")
                ),
                name="orders_total_matches_breakdown",
            ),
        ]

    # ------------------------------------------------------------------
    # State Machine helpers
    # ------------------------------------------------------------------

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATES

    def can_transition_to(self, new_status: str, strict: bool = True) -> bool:
        """Unknown statuses are always rejected; *strict* also walks the map."""
        if new_status not in OrderStatus.values:
            return False
        if not strict:
            return True
        return new_status in VALID_TRANSITIONS.get(self.status, set())

    # ------------------------------------------------------------------
    # Pricing
    # ------------------------------------------------------------------

    @property
    def pricing(self) -> PricingBreakdown:
        return PricingBreakdown(
            subtotal=self.subtotal,
            service_fee=self.service_fee,
            delivery_fee=self.delivery_fee,
        )

    # ------------------------------------------------------------------
    # Order number generation
    # ------------------------------------------------------------------

    @staticmethod
    def generate_order_number(user_id: Any) -> str:
        """``TXN`` + epoch millis + user fragment + random hex."""
        millis = int(time.time() * 1000)
        user_fragment = UUID(str(user_id)).hex[-6:].upper()
        return f"{ORDER_NUMBER_PREFIX}{millis}{user_fragment}{secrets.token_hex(2).upper()}"

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save(self, *args: Any, **kwargs: Any) -> None:
        if not self.order_number:
            for _ in range(ORDER_NUMBER_MAX_RETRIES):
                candidate = self.generate_order_number(self.user_id)
                if not Order.objects.filter(order_number=candidate).exists():
                    self.order_number = candidate
                    break
            else:
                raise RuntimeError(
                    f"Failed to generate unique order_number after "
                    f"{ORDER_NUMBER_MAX_RETRIES} attempts"
                )
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return f"{self.order_number} ({self.status})"


class OrderItem(BaseModel):
    """Frozen line of an order.

    ``item_total`` is always ``unit_price * quantity``, recalculated on save.
    """

    order: models.ForeignKey = models.ForeignKey(
        "orders.Order",
        on_delete=models.CASCADE,
        related_name="items",
    )
    restaurant_id: models.UUIDField = models.UUIDField(db_index=True)
    restaurant_name: models.CharField = models.CharField(max_length=150)
    menu_id: models.UUIDField = models.UUIDField()
    menu_name: models.CharField = models.CharField(max_length=150)
    unit_price: models.PositiveIntegerField = models.PositiveIntegerField()
    quantity: models.PositiveIntegerField = models.PositiveIntegerField(
        default=1,
        validators=[MinValueValidator(1)],
    )
    item_total: models.PositiveIntegerField = models.PositiveIntegerField(editable=False)

    class Meta:
        db_table = "order_items"
        ordering = ["created_at"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(quantity__gte=1),
                name="order_items_quantity_positive",
            ),
            models.CheckConstraint(
                condition=models.Q(
                    item_total=models.F("unit_price") * models.F("quantity")
                ),
                name="order_items_total_matches_price",
            ),
        ]

    def save(self, *args: Any, **kwargs: Any) -> None:
        self.item_total = line_total(self.unit_price, self.quantity)
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return f"{self.menu_name} x{self.quantity} ({self.item_total})"


class OrderStatusHistory(BaseModel):
    """Append-only audit trail for order status transitions.

    ``user`` is nullable: ``None`` means the change was made by the system.
    """

    order: models.ForeignKey = models.ForeignKey(
        "orders.Order",
        on_delete=models.CASCADE,
        related_name="status_history",
    )
    old_status: models.CharField = models.CharField(  # noqa: DJ01
        max_length=20,
        choices=OrderStatus.choices,
        null=True,
        blank=True,
    )
    new_status: models.CharField = models.CharField(
        max_length=20,
        choices=OrderStatus.choices,
    )
    user: models.ForeignKey = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
    )
    notes: models.TextField = models.TextField(blank=True, default="")

    class Meta:
        db_table = "order_status_history"
        ordering = ["-created_at"]
        indexes = [
            models.Index(
                fields=["order", "-created_at"],
                name="osh_order_created_idx",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.order} : {self.old_status} -> {self.new_status}"
