"""Restaurant reviews.

One review per (user, restaurant).  ``order`` remembers which order made
the user eligible; it is cleared rather than cascaded if the order goes.
"""

from __future__ import annotations

from django.conf import settings
from django.core.validators import MaxLengthValidator, MaxValueValidator, MinValueValidator
from django.db import models

from modules.core.models import BaseModel

MIN_STAR = 1
MAX_STAR = 5
MAX_COMMENT_LENGTH = 500


class Review(BaseModel):
    user: models.ForeignKey = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="reviews",
    )
    restaurant: models.ForeignKey = models.ForeignKey(
        "restaurants.Restaurant",
        on_delete=models.CASCADE,
        related_name="reviews",
    )
    order: models.ForeignKey = models.ForeignKey(
        "orders.Order",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="reviews",
    )
    star: models.PositiveSmallIntegerField = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(MIN_STAR), MaxValueValidator(MAX_STAR)]
    )
    comment: models.TextField = models.TextField(
        blank=True,
        default="",
        validators=[MaxLengthValidator(MAX_COMMENT_LENGTH)],
    )

    class Meta:
        db_table = "restaurant_reviews"
        ordering = ["-created_at"]
        indexes = [
            models.Index(
                fields=["restaurant", "-created_at"], name="reviews_restaurant_idx"
            ),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=["user", "restaurant"],
                name="reviews_unique_user_restaurant",
            ),
            models.CheckConstraint(
                condition=models.Q(star__gte=MIN_STAR) & models.Q(star__lte=MAX_STAR),
                name="reviews_star_range",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.restaurant_id} {self.star}*"
