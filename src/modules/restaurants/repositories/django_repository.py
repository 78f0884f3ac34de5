"""Django ORM implementation of the Restaurant repository."""

from __future__ import annotations

from collections import defaultdict
from decimal import Decimal
from typing import Dict, Iterable, List, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db.models import Count, Max, Min, QuerySet
from django.utils import timezone

from modules.restaurants.models import Menu, Restaurant
from modules.restaurants.repositories.interfaces import IRestaurantRepository

logger = structlog.get_logger(__name__)


class RestaurantDjangoRepository(IRestaurantRepository):
    """Concrete Restaurant repository backed by Django ORM."""

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def list_with_stats(self) -> QuerySet:
        return Restaurant.objects.annotate(
            review_count=Count("reviews", distinct=True),
            menu_count=Count("menus", distinct=True),
            min_price=Min("menus__price"),
            max_price=Max("menus__price"),
        ).order_by("-rating", "name")

    def get_by_id(self, id: str) -> Optional[Restaurant]:
        try:
            return Restaurant.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def get_with_stats(self, id: str) -> Optional[Restaurant]:
        try:
            return self.list_with_stats().filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def get_for_update(self, id: str) -> Optional[Restaurant]:
        try:
            return Restaurant.objects.select_for_update().filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def top_rated(self, min_rating: Decimal, limit: int) -> List[Restaurant]:
        queryset = (
            Restaurant.objects.filter(rating__gte=min_rating)
            .annotate(review_count=Count("reviews"))
            .order_by("-rating", "-review_count", "name")
        )
        return list(queryset[:limit])

    def get_menu(self, restaurant_id: str, menu_id: str) -> Optional[Menu]:
        try:
            return (
                Menu.objects.select_related("restaurant")
                .filter(id=menu_id, restaurant_id=restaurant_id)
                .first()
            )
        except (ValueError, ValidationError):
            return None

    def latest_menus(self, restaurant_id: str, limit: int) -> List[Menu]:
        return list(
            Menu.objects.filter(restaurant_id=restaurant_id).order_by("-created_at")[:limit]
        )

    def sample_menus(
        self, restaurant_ids: Iterable[str], per_restaurant: int
    ) -> Dict[str, List[Menu]]:
        samples: Dict[str, List[Menu]] = defaultdict(list)
        for menu in Menu.objects.filter(restaurant_id__in=list(restaurant_ids)).order_by(
            "created_at"
        ):
            bucket = samples[str(menu.restaurant_id)]
            if len(bucket) < per_restaurant:
                bucket.append(menu)
        return dict(samples)

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def update_rating(self, id: str, rating: Decimal) -> None:
        Restaurant.objects.filter(id=id).update(rating=rating, updated_at=timezone.now())
        logger.info("restaurant.rating_updated", restaurant_id=str(id), rating=str(rating))

    def save(self, entity: Restaurant) -> Restaurant:
        entity.save()
        return entity

    def delete(self, id: str) -> bool:
        deleted, _ = Restaurant.objects.filter(id=id).delete()
        return deleted > 0
