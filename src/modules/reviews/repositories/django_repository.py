"""Django ORM implementation of the Review repository."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db.models import Count, QuerySet

from modules.reviews.models import MAX_STAR, MIN_STAR, Review
from modules.reviews.repositories.interfaces import IReviewRepository

logger = structlog.get_logger(__name__)


class ReviewDjangoRepository(IReviewRepository):
    """Concrete Review repository backed by Django ORM."""

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def create(self, data: Dict[str, Any]) -> Review:
        review = Review.objects.create(
            user_id=data["user_id"],
            restaurant_id=data["restaurant_id"],
            order_id=data.get("order_id"),
            star=data["star"],
            comment=data.get("comment") or "",
        )
        logger.info("review.persisted", review_id=str(review.id))
        return review

    def save(self, entity: Review) -> Review:
        entity.save()
        return entity

    def delete(self, id: str) -> bool:
        try:
            deleted, _ = Review.objects.filter(id=id).delete()
        except (ValueError, ValidationError):
            return False
        return deleted > 0

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def get_by_id(self, id: str) -> Optional[Review]:
        try:
            return Review.objects.select_related("user", "restaurant").filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def get_for_user(self, review_id: str, user_id: str) -> Optional[Review]:
        try:
            return (
                Review.objects.select_related("restaurant")
                .filter(id=review_id, user_id=user_id)
                .first()
            )
        except (ValueError, ValidationError):
            return None

    def exists_for(self, user_id: Any, restaurant_id: Any) -> bool:
        return Review.objects.filter(user_id=user_id, restaurant_id=restaurant_id).exists()

    def stars_for_restaurant(self, restaurant_id: Any) -> List[int]:
        return list(
            Review.objects.filter(restaurant_id=restaurant_id).values_list("star", flat=True)
        )

    def star_distribution(self, restaurant_id: Any) -> Dict[int, int]:
        distribution = {star: 0 for star in range(MIN_STAR, MAX_STAR + 1)}
        rows = (
            Review.objects.filter(restaurant_id=restaurant_id)
            .order_by()
            .values("star")
            .annotate(total=Count("id"))
        )
        for row in rows:
            distribution[row["star"]] = row["total"]
        return distribution

    def latest_for_restaurant(self, restaurant_id: Any, limit: int) -> List[Review]:
        return list(self.list_for_restaurant(restaurant_id)[:limit])

    def list_for_restaurant(self, restaurant_id: Any, star: Optional[int] = None) -> QuerySet:
        queryset = Review.objects.select_related("user").filter(restaurant_id=restaurant_id)
        if star is not None:
            queryset = queryset.filter(star=star)
        return queryset.order_by("-created_at", "-id")

    def list_for_user(self, user_id: Any) -> QuerySet:
        return (
            Review.objects.select_related("restaurant")
            .filter(user_id=user_id)
            .order_by("-created_at", "-id")
        )

    def reviewed_restaurant_ids(self) -> List[Any]:
        return list(
            Review.objects.order_by().values_list("restaurant_id", flat=True).distinct()
        )
