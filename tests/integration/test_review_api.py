"""Integration tests for the review endpoints."""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.orders.models import Order, OrderItem
from modules.reviews.models import Review

pytestmark = pytest.mark.integration

REVIEWS_URL = "/api/v1/reviews/"


def _place_order(user, menu):
    order = Order.objects.create(
        user=user,
        payment_method="cash",
        subtotal=menu.price,
        service_fee=1000,
        delivery_fee=10000,
        total_price=menu.price + 11000,
    )
    OrderItem.objects.create(
        order=order,
        restaurant_id=menu.restaurant_id,
        restaurant_name=menu.restaurant.name,
        menu_id=menu.id,
        menu_name=menu.food_name,
        unit_price=menu.price,
        quantity=1,
    )
    return order


@pytest.fixture()
def order(user, burger):
    return _place_order(user, burger)


def _post(client, order, restaurant, star=5, comment="Mantap"):
    return client.post(
        REVIEWS_URL,
        {
            "order_number": order.order_number,
            "restaurant_id": str(restaurant.id),
            "star": star,
            "comment": comment,
        },
        format="json",
    )


class TestCreateReview:
    def test_create_updates_rating(self, auth_client, order, restaurant):
        response = _post(auth_client, order, restaurant, star=3)

        assert response.status_code == 201
        data = response.json()
        assert data["star"] == 3
        assert data["order_number"] == order.order_number
        assert data["user"]["name"] == "Budi"
        restaurant.refresh_from_db()
        assert restaurant.rating == Decimal("3.0")

    def test_duplicate_conflicts(self, auth_client, order, restaurant):
        _post(auth_client, order, restaurant)

        response = _post(auth_client, order, restaurant, star=1)

        assert response.status_code == 409
        assert Review.objects.count() == 1

    def test_restaurant_not_in_order_is_forbidden(self, auth_client, order, second_restaurant):
        response = _post(auth_client, order, second_restaurant)

        assert response.status_code == 403
        assert response.json()["errors"][0]["code"] == "restaurant_not_in_order"

    def test_star_out_of_range(self, auth_client, order, restaurant):
        response = _post(auth_client, order, restaurant, star=6)

        assert response.status_code == 400
        assert response.json()["errors"][0]["attr"] == "star"

    def test_requires_authentication(self, api_client, order, restaurant):
        assert _post(api_client, order, restaurant).status_code == 401


class TestModifyReview:
    def test_update_star(self, auth_client, order, restaurant):
        review_id = _post(auth_client, order, restaurant, star=5).json()["id"]

        response = auth_client.patch(f"{REVIEWS_URL}{review_id}/", {"star": 1}, format="json")

        assert response.status_code == 200
        restaurant.refresh_from_db()
        assert restaurant.rating == Decimal("1.0")

    def test_empty_update_rejected(self, auth_client, order, restaurant):
        review_id = _post(auth_client, order, restaurant).json()["id"]

        response = auth_client.put(f"{REVIEWS_URL}{review_id}/", {}, format="json")

        assert response.status_code == 400

    def test_other_user_cannot_delete(self, auth_client, other_client, order, restaurant):
        review_id = _post(auth_client, order, restaurant).json()["id"]

        assert other_client.delete(f"{REVIEWS_URL}{review_id}/").status_code == 404
        assert Review.objects.filter(id=review_id).exists()

    def test_delete(self, auth_client, order, restaurant):
        review_id = _post(auth_client, order, restaurant).json()["id"]

        assert auth_client.delete(f"{REVIEWS_URL}{review_id}/").status_code == 204
        assert not Review.objects.filter(id=review_id).exists()


class TestListReviews:
    def test_restaurant_reviews_are_public(self, api_client, auth_client, order, restaurant):
        _post(auth_client, order, restaurant, star=4)

        response = api_client.get(f"{REVIEWS_URL}restaurant/{restaurant.id}/")

        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 1
        assert data["restaurant"]["name"] == "Burger King"
        assert data["statistics"]["total_reviews"] == 1
        assert data["statistics"]["average_rating"] == "4.0"
        assert data["statistics"]["rating_distribution"]["4"] == 1

    def test_filter_by_star(self, api_client, auth_client, other_client, other_user, order, restaurant, burger):
        _post(auth_client, order, restaurant, star=4)
        _post(other_client, _place_order(other_user, burger), restaurant, star=2)

        data = api_client.get(f"{REVIEWS_URL}restaurant/{restaurant.id}/", {"star": 2}).json()

        assert data["count"] == 1
        assert data["results"][0]["star"] == 2
        assert data["statistics"]["total_reviews"] == 1
        assert data["statistics"]["rating_distribution"] == {"1": 0, "2": 1, "3": 0, "4": 1, "5": 0}

    def test_unknown_restaurant(self, api_client):
        response = api_client.get(
            f"{REVIEWS_URL}restaurant/00000000-0000-0000-0000-000000000000/"
        )

        assert response.status_code == 404

    def test_mine(self, auth_client, order, restaurant):
        _post(auth_client, order, restaurant)

        data = auth_client.get(f"{REVIEWS_URL}mine/").json()

        assert data["count"] == 1
        assert data["results"][0]["restaurant"]["name"] == "Burger King"
