"""Review repository interface."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from django.db.models import QuerySet

    from modules.reviews.models import Review


class IReviewRepository(IRepository["Review"]):
    @abstractmethod
    def create(self, data: Dict[str, Any]) -> Review:
        """Insert a review; the (user, restaurant) unique constraint may fire."""

    @abstractmethod
    def get_for_user(self, review_id: str, user_id: str) -> Optional[Review]:
        """Review by id, only if written by the user."""

    @abstractmethod
    def exists_for(self, user_id: Any, restaurant_id: Any) -> bool:
        """Whether the user already reviewed the restaurant."""

    @abstractmethod
    def stars_for_restaurant(self, restaurant_id: Any) -> List[int]:
        """Every star value of the restaurant's reviews."""

    @abstractmethod
    def star_distribution(self, restaurant_id: Any) -> Dict[int, int]:
        """Review count per star value, all of 1..5 present."""

    @abstractmethod
    def latest_for_restaurant(self, restaurant_id: Any, limit: int) -> List[Review]:
        """Newest reviews with their authors."""

    @abstractmethod
    def list_for_restaurant(self, restaurant_id: Any, star: Optional[int] = None) -> QuerySet:
        """Restaurant's reviews newest first, authors joined, optionally one star value."""

    @abstractmethod
    def list_for_user(self, user_id: Any) -> QuerySet:
        """User's reviews newest first, restaurants joined."""

    @abstractmethod
    def reviewed_restaurant_ids(self) -> List[Any]:
        """Ids of restaurants with at least one review."""
