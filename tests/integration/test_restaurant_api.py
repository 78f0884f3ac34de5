"""Integration tests for the restaurant catalog endpoints."""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.restaurants.models import Restaurant

pytestmark = pytest.mark.integration

RESTAURANTS_URL = "/api/v1/restaurants/"


@pytest.fixture()
def catalog(restaurant, second_restaurant, burger, fries, cola, pizza):
    Restaurant.objects.create(
        name="Bandung Bistro",
        rating=Decimal("3.5"),
        place="Bandung",
        latitude=-6.9175,
        longitude=107.6191,
    )


class TestRestaurantList:
    def test_public_list(self, api_client, catalog):
        response = api_client.get(RESTAURANTS_URL)

        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 3
        first = data["results"][0]
        assert first["name"] == "Burger King"
        assert first["rating"] == "4.5"
        assert first["menu_count"] == 3
        assert first["price_range"] == {"min": 15000, "max": 50000}

    def test_filter_by_rating(self, api_client, catalog):
        data = api_client.get(RESTAURANTS_URL, {"rating": "4.3"}).json()

        assert [r["name"] for r in data["results"]] == ["Burger King"]

    def test_filter_by_price(self, api_client, catalog):
        data = api_client.get(RESTAURANTS_URL, {"price_min": 60000}).json()

        assert [r["name"] for r in data["results"]] == ["Pizza Hut"]

    def test_location_range(self, api_client, catalog):
        data = api_client.get(RESTAURANTS_URL, {"location": "Jakarta", "range": 10}).json()

        assert {r["name"] for r in data["results"]} == {"Burger King", "Pizza Hut"}
        assert all("distance" in r for r in data["results"])

    def test_negative_range_rejected(self, api_client, catalog):
        response = api_client.get(RESTAURANTS_URL, {"location": "Jakarta", "range": -1})

        assert response.status_code == 400


class TestRestaurantDetail:
    def test_detail(self, api_client, restaurant, burger, fries):
        response = api_client.get(f"{RESTAURANTS_URL}{restaurant.id}/", {"limit_menu": 1})

        assert response.status_code == 200
        data = response.json()
        assert data["total_menus"] == 2
        assert len(data["menus"]) == 1
        assert data["coordinates"] == {"lat": -6.2615, "long": 106.8106}
        assert data["average_rating"] == "4.5"

    def test_unknown_restaurant(self, api_client):
        response = api_client.get(f"{RESTAURANTS_URL}00000000-0000-0000-0000-000000000000/")

        assert response.status_code == 404
        assert response.json()["errors"][0]["code"] == "not_found"


class TestRecommendations:
    def test_requires_authentication(self, api_client):
        assert api_client.get(f"{RESTAURANTS_URL}recommended/").status_code == 401

    def test_recommended(self, auth_client, catalog):
        data = auth_client.get(f"{RESTAURANTS_URL}recommended/").json()

        names = [r["name"] for r in data["results"]]
        assert names == ["Burger King", "Pizza Hut"]
        assert len(data["results"][0]["sample_menus"]) == 3
