"""Restaurant and Menu models.

``rating`` is a cached aggregate: it only changes when the review
aggregator recomputes it from the restaurant's reviews.  Menu prices are
whole currency units and may change at any time; orders keep their own
frozen copy of the price.
"""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from modules.core.models import BaseModel


class MenuType(models.TextChoices):
    FOOD = "food", "Food"
    DRINK = "drink", "Drink"


class Restaurant(BaseModel):
    name: models.CharField = models.CharField(max_length=150)
    rating: models.DecimalField = models.DecimalField(
        max_digits=2,
        decimal_places=1,
        default=Decimal("0.0"),
        validators=[MinValueValidator(Decimal("0.0")), MaxValueValidator(Decimal("5.0"))],
    )
    place: models.CharField = models.CharField(max_length=255)
    latitude: models.FloatField = models.FloatField()
    longitude: models.FloatField = models.FloatField()
    logo: models.CharField = models.CharField(max_length=500, blank=True, default="")
    images: models.JSONField = models.JSONField(default=list, blank=True)

    class Meta:
        db_table = "restaurants"
        ordering = ["-rating", "name"]
        indexes = [
            models.Index(fields=["-rating"], name="restaurants_rating_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(rating__gte=0) & models.Q(rating__lte=5),
                name="restaurants_rating_range",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.rating})"


class Menu(BaseModel):
    restaurant: models.ForeignKey = models.ForeignKey(
        "restaurants.Restaurant",
        on_delete=models.CASCADE,
        related_name="menus",
    )
    food_name: models.CharField = models.CharField(max_length=150)
    price: models.PositiveIntegerField = models.PositiveIntegerField()
    type: models.CharField = models.CharField(
        max_length=10,
        choices=MenuType.choices,
        default=MenuType.FOOD,
    )
    image: models.CharField = models.CharField(max_length=500, blank=True, default="")

    class Meta:
        db_table = "restaurant_menus"
        ordering = ["created_at"]
        indexes = [
            models.Index(fields=["restaurant", "price"], name="menus_restaurant_price_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.food_name} @ {self.price}"
