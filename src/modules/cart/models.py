"""Cart entries.

One row per (user, restaurant, menu) triple; adding the same menu again
increments ``quantity`` instead of creating a second row.  The database
enforces both the uniqueness and ``quantity >= 1``.
"""

from __future__ import annotations

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import BaseModel
from shared.domain.money import line_total


class CartEntry(BaseModel):
    user: models.ForeignKey = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="cart_entries",
    )
    restaurant: models.ForeignKey = models.ForeignKey(
        "restaurants.Restaurant",
        on_delete=models.CASCADE,
        related_name="cart_entries",
    )
    menu: models.ForeignKey = models.ForeignKey(
        "restaurants.Menu",
        on_delete=models.CASCADE,
        related_name="cart_entries",
    )
    quantity: models.PositiveIntegerField = models.PositiveIntegerField(
        default=1,
        validators=[MinValueValidator(1)],
    )

    class Meta:
        db_table = "cart_entries"
        ordering = ["-created_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["user", "restaurant", "menu"],
                name="cart_entries_unique_user_restaurant_menu",
            ),
            models.CheckConstraint(
                condition=models.Q(quantity__gte=1),
                name="cart_entries_quantity_positive",
            ),
        ]

    @property
    def item_total(self) -> int:
        """Line total at the menu's current price."""
        return line_total(self.menu.price, self.quantity)

    def __str__(self) -> str:
        return f"{self.menu_id} x{self.quantity}"
