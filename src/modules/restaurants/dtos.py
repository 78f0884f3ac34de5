"""Restaurant DTOs (query parameters and read models)."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import TYPE_CHECKING, List, Optional

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from modules.restaurants.models import Menu, Restaurant
    from modules.reviews.models import Review


class LocationSearchDTO(BaseModel):
    """Distance filter: both ``location`` and ``range_km`` must be given to apply."""

    model_config = ConfigDict(frozen=True)

    location: Optional[str] = None
    range_km: Optional[float] = Field(default=None, ge=0)

    @property
    def active(self) -> bool:
        return bool(self.location) and self.range_km is not None


class DetailQueryDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    limit_menu: int = Field(default=10, ge=1, le=50)
    limit_review: int = Field(default=6, ge=1, le=50)


@dataclass
class RestaurantDetail:
    restaurant: Restaurant
    menus: List[Menu]
    reviews: List[Review]
    average_rating: Decimal
    total_menus: int
    total_reviews: int


@dataclass
class Recommendation:
    restaurant: Restaurant
    previously_ordered: bool
    sample_menus: List[Menu] = field(default_factory=list)
