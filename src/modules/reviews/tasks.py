"""Periodic review maintenance."""

import structlog
from celery import shared_task

from modules.restaurants.repositories.django_repository import RestaurantDjangoRepository
from modules.reviews.aggregator import RatingAggregator
from modules.reviews.repositories.django_repository import ReviewDjangoRepository

logger = structlog.get_logger(__name__)


@shared_task(name="reviews.reconcile_restaurant_ratings")
def reconcile_restaurant_ratings():
    """Recompute the cached rating of every reviewed restaurant."""
    review_repository = ReviewDjangoRepository()
    aggregator = RatingAggregator(review_repository, RestaurantDjangoRepository())

    restaurant_ids = review_repository.reviewed_restaurant_ids()
    for restaurant_id in restaurant_ids:
        aggregator.recompute(restaurant_id)

    logger.info("reviews.ratings_reconciled", restaurants=len(restaurant_ids))
    return len(restaurant_ids)
