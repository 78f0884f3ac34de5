"""Unit tests for CartService."""

from __future__ import annotations

from uuid import uuid4

import pytest

from modules.cart.dtos import AddCartItemDTO, UpdateQuantityDTO
from modules.cart.exceptions import CartEntryNotFound
from modules.cart.models import CartEntry
from modules.cart.repositories.django_repository import CartDjangoRepository
from modules.cart.services import CartService
from modules.restaurants.exceptions import MenuNotFound, RestaurantNotFound
from modules.restaurants.repositories.django_repository import RestaurantDjangoRepository

pytestmark = pytest.mark.unit


@pytest.fixture()
def service():
    return CartService(
        cart_repository=CartDjangoRepository(),
        restaurant_repository=RestaurantDjangoRepository(),
    )


def _add(service, user, menu, quantity=1):
    return service.add_item(
        str(user.id),
        AddCartItemDTO(restaurant_id=menu.restaurant_id, menu_id=menu.id, quantity=quantity),
    )


# ---------------------------------------------------------------------------
# add_item
# ---------------------------------------------------------------------------


class TestAddItem:
    def test_creates_entry(self, service, user, burger):
        entry = _add(service, user, burger, 2)

        assert entry.quantity == 2
        assert entry.item_total == 100000

    def test_same_menu_merges_quantities(self, service, user, burger):
        _add(service, user, burger, 2)
        entry = _add(service, user, burger, 3)

        assert entry.quantity == 5
        assert CartEntry.objects.filter(user=user).count() == 1

    def test_unknown_restaurant(self, service, user, burger):
        with pytest.raises(RestaurantNotFound):
            service.add_item(
                str(user.id),
                AddCartItemDTO(restaurant_id=uuid4(), menu_id=burger.id),
            )

    def test_menu_from_other_restaurant(self, service, user, burger, second_restaurant):
        with pytest.raises(MenuNotFound):
            service.add_item(
                str(user.id),
                AddCartItemDTO(restaurant_id=second_restaurant.id, menu_id=burger.id),
            )

    def test_zero_quantity_rejected_by_dto(self, burger):
        with pytest.raises(ValueError):
            AddCartItemDTO(restaurant_id=burger.restaurant_id, menu_id=burger.id, quantity=0)


# ---------------------------------------------------------------------------
# update / remove / clear
# ---------------------------------------------------------------------------


class TestModifyEntries:
    def test_update_quantity(self, service, user, burger):
        entry = _add(service, user, burger)

        updated = service.update_quantity(str(user.id), str(entry.id), UpdateQuantityDTO(quantity=4))

        assert updated.quantity == 4
        assert updated.item_total == 200000

    def test_update_other_users_entry(self, service, user, other_user, burger):
        entry = _add(service, user, burger)

        with pytest.raises(CartEntryNotFound):
            service.update_quantity(
                str(other_user.id), str(entry.id), UpdateQuantityDTO(quantity=4)
            )

    def test_remove_item(self, service, user, burger):
        entry = _add(service, user, burger)

        service.remove_item(str(user.id), str(entry.id))

        assert not CartEntry.objects.filter(id=entry.id).exists()

    def test_remove_unknown_entry(self, service, user):
        with pytest.raises(CartEntryNotFound):
            service.remove_item(str(user.id), str(uuid4()))

    def test_clear_only_touches_own_cart(self, service, user, other_user, burger, fries):
        _add(service, user, burger)
        _add(service, user, fries)
        _add(service, other_user, burger)

        assert service.clear(str(user.id)) == 2
        assert CartEntry.objects.filter(user=other_user).count() == 1

    def test_clear_empty_cart(self, service, user):
        assert service.clear(str(user.id)) == 0


# ---------------------------------------------------------------------------
# list_grouped
# ---------------------------------------------------------------------------


class TestListGrouped:
    def test_groups_by_restaurant(self, service, user, burger, cola, pizza):
        _add(service, user, burger, 2)
        _add(service, user, cola)
        _add(service, user, pizza)

        view = service.list_grouped(str(user.id))

        subtotals = {g.restaurant.name: g.subtotal for g in view.groups}
        assert subtotals == {"Burger King": 115000, "Pizza Hut": 80000}
        assert view.summary.total_items == 4
        assert view.summary.total_price == 195000
        assert view.summary.restaurant_count == 2

    def test_uses_current_menu_price(self, service, user, burger):
        _add(service, user, burger)
        burger.price = 60000
        burger.save()

        view = service.list_grouped(str(user.id))

        assert view.summary.total_price == 60000

    def test_empty_cart(self, service, user):
        view = service.list_grouped(str(user.id))

        assert view.groups == []
        assert view.summary.total_items == 0
        assert view.summary.total_price == 0
