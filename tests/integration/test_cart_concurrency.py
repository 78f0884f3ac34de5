"""Concurrent cart adds and checkouts.

Row locks and ``F()`` increments only show their worth with real
concurrent transactions, so these tests use ``TransactionTestCase`` and
need a server database; SQLite serialises writers and is skipped.
"""

from __future__ import annotations

import unittest
from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal

import django
from django.contrib.auth import get_user_model
from django.db import connection
from django.test import TransactionTestCase

from modules.cart.dtos import AddCartItemDTO
from modules.cart.models import CartEntry
from modules.cart.repositories.django_repository import CartDjangoRepository
from modules.cart.services import CartService
from modules.orders.checkout import CheckoutService
from modules.orders.dtos import CheckoutDTO
from modules.orders.exceptions import EmptyCartCheckout
from modules.orders.models import Order
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.restaurants.models import Menu, MenuType, Restaurant
from modules.restaurants.repositories.django_repository import RestaurantDjangoRepository

NUM_WORKERS = 8


@unittest.skipIf(connection.vendor == "sqlite", "needs row-level locking")
class TestCartConcurrency(TransactionTestCase):
    def setUp(self):
        self.user = get_user_model().objects.create_user(
            "race@example.com", password="secret123", name="Race"
        )
        self.restaurant = Restaurant.objects.create(
            name="KFC", rating=Decimal("4.0"), place="Jakarta Utara", latitude=-6.13, longitude=106.86
        )
        self.menu = Menu.objects.create(
            restaurant=self.restaurant, food_name="Burger", price=50000, type=MenuType.FOOD
        )

    def _add_in_thread(self, _: int) -> None:
        django.db.connections.close_all()
        service = CartService(CartDjangoRepository(), RestaurantDjangoRepository())
        service.add_item(
            str(self.user.id),
            AddCartItemDTO(restaurant_id=self.restaurant.id, menu_id=self.menu.id, quantity=1),
        )

    def _checkout_in_thread(self, _: int) -> str:
        django.db.connections.close_all()
        service = CheckoutService(
            CartDjangoRepository(), OrderDjangoRepository(), service_fee=1000, delivery_fee=10000
        )
        try:
            service.checkout(str(self.user.id), CheckoutDTO(payment_method="cash"))
        except EmptyCartCheckout:
            return "empty"
        return "ok"

    def test_concurrent_adds_are_all_counted(self):
        with ThreadPoolExecutor(max_workers=NUM_WORKERS) as pool:
            list(pool.map(self._add_in_thread, range(NUM_WORKERS)))

        entry = CartEntry.objects.get(user=self.user)
        self.assertEqual(entry.quantity, NUM_WORKERS)

    def test_only_one_concurrent_checkout_wins(self):
        CartEntry.objects.create(
            user=self.user, restaurant=self.restaurant, menu=self.menu, quantity=2
        )

        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(self._checkout_in_thread, range(4)))

        self.assertEqual(results.count("ok"), 1)
        self.assertEqual(results.count("empty"), 3)
        self.assertEqual(Order.objects.filter(user=self.user).count(), 1)
