"""Restaurant rating aggregation.

A restaurant's ``rating`` is the arithmetic mean of its review stars,
rounded half-up to one decimal.  With no reviews the stored rating is left
alone (seeded restaurants keep their initial rating).

``recompute`` runs in the caller's transaction and locks the restaurant
row first, so concurrent recomputations for the same restaurant serialise
and the last one to commit always sees every committed review.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING, Iterable, Optional

import structlog
from django.db import transaction

if TYPE_CHECKING:
    from modules.restaurants.repositories.interfaces import IRestaurantRepository
    from modules.reviews.repositories.interfaces import IReviewRepository

logger = structlog.get_logger(__name__)

ONE_DECIMAL = Decimal("0.1")


def mean_rating(stars: Iterable[int]) -> Decimal:
    """Mean of *stars* rounded half-up to one decimal; ``ValueError`` if empty."""
    values = list(stars)
    if not values:
        raise ValueError("Cannot average an empty set of ratings.")
    mean = Decimal(sum(values)) / Decimal(len(values))
    return mean.quantize(ONE_DECIMAL, rounding=ROUND_HALF_UP)


class RatingAggregator:
    def __init__(
        self,
        review_repository: IReviewRepository,
        restaurant_repository: IRestaurantRepository,
    ) -> None:
        self._review_repo = review_repository
        self._restaurant_repo = restaurant_repository

    @transaction.atomic
    def recompute(self, restaurant_id) -> Optional[Decimal]:
        """Refresh the cached rating; returns the rating now stored.

        Returns ``None`` when the restaurant no longer exists.
        """
        restaurant = self._restaurant_repo.get_for_update(str(restaurant_id))
        if restaurant is None:
            logger.warning("review.rating_restaurant_missing", restaurant_id=str(restaurant_id))
            return None

        stars = self._review_repo.stars_for_restaurant(restaurant.id)
        if not stars:
            logger.info(
                "review.rating_unchanged",
                restaurant_id=str(restaurant.id),
                rating=str(restaurant.rating),
            )
            return restaurant.rating

        rating = mean_rating(stars)
        self._restaurant_repo.update_rating(restaurant.id, rating)
        logger.info(
            "review.rating_recomputed",
            restaurant_id=str(restaurant.id),
            review_count=len(stars),
            rating=str(rating),
        )
        return rating
