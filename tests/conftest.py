from decimal import Decimal

import pytest
from django.contrib.auth import get_user_model
from django.core.cache import cache
from rest_framework.test import APIClient

from modules.restaurants.models import Menu, MenuType, Restaurant

User = get_user_model()


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture(autouse=True)
def _clear_cache():
    """Throttle counters live in the cache; start every test from zero."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def request_id_client(api_client):
    """APIClient that sends a fixed X-Request-ID on every call."""
    request_id = "fixture-request-id"
    api_client.defaults["HTTP_X_REQUEST_ID"] = request_id
    return api_client, request_id


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------


@pytest.fixture()
def user():
    return User.objects.create_user(
        "budi@example.com", password="secret123", name="Budi", phone="081234567890"
    )


@pytest.fixture()
def other_user():
    return User.objects.create_user(
        "sari@example.com", password="secret123", name="Sari", phone="081298765432"
    )


@pytest.fixture()
def auth_client(user):
    client = APIClient()
    client.force_authenticate(user=user)
    return client


@pytest.fixture()
def other_client(other_user):
    client = APIClient()
    client.force_authenticate(user=other_user)
    return client


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------


@pytest.fixture()
def restaurant():
    return Restaurant.objects.create(
        name="Burger King",
        rating=Decimal("4.5"),
        place="Jakarta Selatan",
        latitude=-6.2615,
        longitude=106.8106,
    )


@pytest.fixture()
def second_restaurant():
    return Restaurant.objects.create(
        name="Pizza Hut",
        rating=Decimal("4.2"),
        place="Jakarta Pusat",
        latitude=-6.1865,
        longitude=106.8343,
    )


@pytest.fixture()
def burger(restaurant):
    return Menu.objects.create(
        restaurant=restaurant, food_name="Burger", price=50000, type=MenuType.FOOD
    )


@pytest.fixture()
def fries(restaurant):
    return Menu.objects.create(
        restaurant=restaurant, food_name="Fries", price=25000, type=MenuType.FOOD
    )


@pytest.fixture()
def cola(restaurant):
    return Menu.objects.create(
        restaurant=restaurant, food_name="Coca Cola", price=15000, type=MenuType.DRINK
    )


@pytest.fixture()
def pizza(second_restaurant):
    return Menu.objects.create(
        restaurant=second_restaurant, food_name="Pizza", price=80000, type=MenuType.FOOD
    )
