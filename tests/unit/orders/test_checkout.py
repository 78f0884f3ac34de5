"""Unit tests for the checkout engine.

Covers:
- Pricing: subtotal plus flat service and delivery fees.
- Frozen line snapshot (later menu edits never change the order).
- Empty cart rejection.
- Atomicity: a failure after pricing leaves the cart untouched.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from modules.cart.models import CartEntry
from modules.cart.repositories.django_repository import CartDjangoRepository
from modules.orders.checkout import CheckoutService
from modules.orders.constants import OrderStatus
from modules.orders.dtos import CheckoutDTO
from modules.orders.exceptions import EmptyCartCheckout
from modules.orders.models import Order, OrderStatusHistory
from modules.orders.repositories.django_repository import OrderDjangoRepository

pytestmark = pytest.mark.unit


@pytest.fixture()
def order_repository():
    return OrderDjangoRepository()


@pytest.fixture()
def service(order_repository):
    return CheckoutService(
        cart_repository=CartDjangoRepository(),
        order_repository=order_repository,
        service_fee=1000,
        delivery_fee=10000,
    )


@pytest.fixture()
def filled_cart(user, burger, cola):
    CartEntry.objects.create(user=user, restaurant=burger.restaurant, menu=burger, quantity=2)
    CartEntry.objects.create(user=user, restaurant=cola.restaurant, menu=cola, quantity=1)


DTO = CheckoutDTO(payment_method="gopay", delivery_address="Jl. Sudirman 1")


# ---------------------------------------------------------------------------
# Happy path
# ---------------------------------------------------------------------------


class TestCheckout:
    def test_prices_order(self, service, user, filled_cart):
        order = service.checkout(str(user.id), DTO)

        assert order.subtotal == 115000
        assert order.service_fee == 1000
        assert order.delivery_fee == 10000
        assert order.total_price == 126000

    def test_order_starts_preparing(self, service, user, filled_cart):
        order = service.checkout(str(user.id), DTO)

        assert order.status == OrderStatus.PREPARING
        assert order.order_number.startswith("TXN")
        assert order.payment_method == "gopay"

    def test_creates_frozen_items(self, service, user, filled_cart, burger):
        order = service.checkout(str(user.id), DTO)

        items = {item.menu_name: item for item in order.items.all()}
        assert set(items) == {"Burger", "Coca Cola"}
        assert items["Burger"].unit_price == 50000
        assert items["Burger"].quantity == 2
        assert items["Burger"].item_total == 100000
        assert items["Burger"].restaurant_name == "Burger King"
        assert items["Burger"].menu_id == burger.id

    def test_clears_cart(self, service, user, filled_cart):
        service.checkout(str(user.id), DTO)

        assert not CartEntry.objects.filter(user=user).exists()

    def test_records_first_history_entry(self, service, user, filled_cart):
        order = service.checkout(str(user.id), DTO)

        history = OrderStatusHistory.objects.get(order=order)
        assert history.old_status is None
        assert history.new_status == OrderStatus.PREPARING

    def test_later_price_change_does_not_touch_order(self, service, user, filled_cart, burger):
        order = service.checkout(str(user.id), DTO)

        burger.price = 99000
        burger.save()
        order.refresh_from_db()

        item = order.items.get(menu_name="Burger")
        assert item.unit_price == 50000
        assert order.total_price == 126000

    def test_deleted_menu_keeps_order_lines(self, service, user, filled_cart, burger):
        order = service.checkout(str(user.id), DTO)

        burger.delete()

        assert order.items.filter(menu_name="Burger").exists()

    def test_uses_price_at_checkout_time(self, service, user, filled_cart, burger):
        burger.price = 40000
        burger.save()

        order = service.checkout(str(user.id), DTO)

        assert order.subtotal == 95000
        assert order.total_price == 106000


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------


class TestCheckoutFailures:
    def test_empty_cart(self, service, user):
        with pytest.raises(EmptyCartCheckout):
            service.checkout(str(user.id), DTO)

        assert not Order.objects.filter(user=user).exists()

    def test_other_users_cart_is_not_used(self, service, user, other_user, filled_cart):
        with pytest.raises(EmptyCartCheckout):
            service.checkout(str(other_user.id), DTO)

    def test_failure_rolls_back_and_keeps_cart(self, service, order_repository, user, filled_cart):
        with patch.object(
            order_repository, "add_history", side_effect=RuntimeError("boom")
        ):
            with pytest.raises(RuntimeError):
                service.checkout(str(user.id), DTO)

        assert not Order.objects.filter(user=user).exists()
        assert CartEntry.objects.filter(user=user).count() == 2

    def test_blank_payment_method_rejected(self):
        with pytest.raises(ValueError):
            CheckoutDTO(payment_method="   ")
