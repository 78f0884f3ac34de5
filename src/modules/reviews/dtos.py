"""Review DTOs."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Dict, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator

from modules.reviews.models import MAX_COMMENT_LENGTH, MAX_STAR, MIN_STAR

if TYPE_CHECKING:
    from django.db.models import QuerySet

    from modules.restaurants.models import Restaurant


class CreateReviewDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    order_number: str = Field(min_length=1)
    restaurant_id: UUID
    star: int = Field(ge=MIN_STAR, le=MAX_STAR)
    comment: str = Field(default="", max_length=MAX_COMMENT_LENGTH)


class UpdateReviewDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    star: Optional[int] = Field(default=None, ge=MIN_STAR, le=MAX_STAR)
    comment: Optional[str] = Field(default=None, max_length=MAX_COMMENT_LENGTH)

    @model_validator(mode="after")
    def at_least_one_field(self) -> "UpdateReviewDTO":
        if self.star is None and self.comment is None:
            raise ValueError("Provide a star or a comment to update.")
        return self


@dataclass(frozen=True)
class ReviewStatistics:
    total_reviews: int
    average_rating: Decimal
    rating_distribution: Dict[int, int]


@dataclass(frozen=True)
class RestaurantReviews:
    restaurant: Restaurant
    reviews: QuerySet
    statistics: ReviewStatistics
