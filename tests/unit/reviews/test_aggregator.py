"""Unit tests for rating aggregation."""

from __future__ import annotations

from decimal import Decimal
from uuid import uuid4

import pytest

from modules.restaurants.models import Restaurant
from modules.restaurants.repositories.django_repository import RestaurantDjangoRepository
from modules.reviews.aggregator import RatingAggregator, mean_rating
from modules.reviews.models import Review
from modules.reviews.repositories.django_repository import ReviewDjangoRepository

pytestmark = pytest.mark.unit


@pytest.fixture()
def aggregator():
    return RatingAggregator(ReviewDjangoRepository(), RestaurantDjangoRepository())


@pytest.fixture()
def reviewers(django_user_model):
    return [
        django_user_model.objects.create_user(f"reviewer{i}@example.com", password="secret123", name=f"Reviewer {i}")
        for i in range(3)
    ]


class TestMeanRating:
    @pytest.mark.parametrize(
        "stars, expected",
        [
            ([5, 4, 3], Decimal("4.0")),
            ([5], Decimal("5.0")),
            ([4, 5], Decimal("4.5")),
            ([5, 5, 4], Decimal("4.7")),
            ([1, 2], Decimal("1.5")),
        ],
    )
    def test_rounds_to_one_decimal(self, stars, expected):
        assert mean_rating(stars) == expected

    def test_half_rounds_up(self):
        assert mean_rating([5, 4, 4, 4]) == Decimal("4.3")

    def test_empty_raises(self):
        with pytest.raises(ValueError):
            mean_rating([])


class TestRecompute:
    def test_writes_mean(self, aggregator, restaurant, reviewers):
        for reviewer, star in zip(reviewers, [5, 4, 3]):
            Review.objects.create(user=reviewer, restaurant=restaurant, star=star)

        assert aggregator.recompute(restaurant.id) == Decimal("4.0")
        restaurant.refresh_from_db()
        assert restaurant.rating == Decimal("4.0")

    def test_single_review(self, aggregator, restaurant, reviewers):
        Review.objects.create(user=reviewers[0], restaurant=restaurant, star=5)

        aggregator.recompute(restaurant.id)

        restaurant.refresh_from_db()
        assert restaurant.rating == Decimal("5.0")

    def test_no_reviews_leaves_rating(self, aggregator, restaurant):
        assert aggregator.recompute(restaurant.id) == Decimal("4.5")
        restaurant.refresh_from_db()
        assert restaurant.rating == Decimal("4.5")

    def test_unknown_restaurant(self, aggregator):
        assert aggregator.recompute(uuid4()) is None

    def test_other_restaurants_untouched(self, aggregator, restaurant, second_restaurant, reviewers):
        Review.objects.create(user=reviewers[0], restaurant=restaurant, star=1)

        aggregator.recompute(restaurant.id)

        assert Restaurant.objects.get(id=second_restaurant.id).rating == Decimal("4.2")
