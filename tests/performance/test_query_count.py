"""Performance regression tests: constant query count (N+1 prevention).

List and detail endpoints must run a bounded number of SQL queries no
matter how many rows they return.
"""

from __future__ import annotations

import pytest

from modules.cart.models import CartEntry
from modules.orders.models import Order, OrderItem
from modules.reviews.models import Review

pytestmark = pytest.mark.performance


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def orders_with_items(user, burger, fries, cola):
    orders = []
    for _ in range(10):
        order = Order.objects.create(
            user=user,
            payment_method="cash",
            subtotal=90000,
            service_fee=1000,
            delivery_fee=10000,
            total_price=101000,
        )
        for menu in (burger, fries, cola):
            OrderItem.objects.create(
                order=order,
                restaurant_id=menu.restaurant_id,
                restaurant_name="Burger King",
                menu_id=menu.id,
                menu_name=menu.food_name,
                unit_price=menu.price,
                quantity=1,
            )
        orders.append(order)
    return orders


@pytest.fixture()
def many_reviews(restaurant, django_user_model):
    for i in range(12):
        reviewer = django_user_model.objects.create_user(
            f"perf{i}@example.com", password="secret123", name=f"Perf {i}"
        )
        Review.objects.create(user=reviewer, restaurant=restaurant, star=(i % 5) + 1)


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


class TestOrderQueryCount:
    def test_list_query_count_is_constant(
        self, auth_client, orders_with_items, django_assert_max_num_queries
    ):
        """COUNT, orders page, prefetched items."""
        with django_assert_max_num_queries(4):
            response = auth_client.get("/api/v1/orders/")

        assert response.status_code == 200
        assert response.data["count"] == 10

    def test_retrieve_query_count_is_constant(
        self, auth_client, orders_with_items, django_assert_max_num_queries
    ):
        """Order, prefetched items, prefetched history."""
        order = orders_with_items[0]

        with django_assert_max_num_queries(4):
            response = auth_client.get(f"/api/v1/orders/{order.id}/")

        assert response.status_code == 200
        assert len(response.data["restaurants"][0]["items"]) == 3


class TestCatalogQueryCount:
    def test_cart_view(self, auth_client, user, burger, fries, cola, django_assert_max_num_queries):
        for menu in (burger, fries, cola):
            CartEntry.objects.create(user=user, restaurant=menu.restaurant, menu=menu, quantity=1)

        with django_assert_max_num_queries(2):
            response = auth_client.get("/api/v1/cart/")

        assert response.status_code == 200
        assert response.data["summary"]["total_items"] == 3

    def test_restaurant_reviews(self, api_client, restaurant, many_reviews, django_assert_max_num_queries):
        with django_assert_max_num_queries(5):
            response = api_client.get(f"/api/v1/reviews/restaurant/{restaurant.id}/")

        assert response.status_code == 200
        assert response.data["count"] == 12
