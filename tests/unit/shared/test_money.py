"""Unit tests for integer money helpers."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from shared.domain.money import PricingBreakdown, group_by_restaurant, line_total, price_lines

pytestmark = pytest.mark.unit


@dataclass
class Line:
    restaurant: str
    total: int


class TestLineTotal:
    def test_multiplies_price_by_quantity(self):
        assert line_total(50000, 2) == 100000

    def test_zero_price_is_allowed(self):
        assert line_total(0, 3) == 0

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_rejects_non_positive_quantity(self, quantity):
        with pytest.raises(ValueError):
            line_total(50000, quantity)

    def test_rejects_negative_price(self):
        with pytest.raises(ValueError):
            line_total(-1, 1)

    @pytest.mark.parametrize("price, quantity", [(1.5, 1), (100, True), ("100", 1)])
    def test_rejects_non_integers(self, price, quantity):
        with pytest.raises(ValueError):
            line_total(price, quantity)


class TestPriceLines:
    def test_adds_flat_fees(self):
        pricing = price_lines([100000, 15000], service_fee=1000, delivery_fee=10000)

        assert pricing.subtotal == 115000
        assert pricing.total_price == 126000

    def test_as_dict(self):
        pricing = PricingBreakdown(subtotal=25000, service_fee=1000, delivery_fee=10000)

        assert pricing.as_dict() == {
            "subtotal": 25000,
            "service_fee": 1000,
            "delivery_fee": 10000,
            "total_price": 36000,
        }

    def test_rejects_negative_fees(self):
        with pytest.raises(ValueError):
            price_lines([1000], service_fee=-1, delivery_fee=0)


class TestGroupByRestaurant:
    def test_groups_in_first_seen_order(self):
        lines = [Line("b", 10), Line("a", 5), Line("b", 20)]

        groups = group_by_restaurant(lines, lambda l: l.restaurant, lambda l: l.total)

        assert [g.restaurant_id for g in groups] == ["b", "a"]
        assert [g.subtotal for g in groups] == [30, 5]
        assert len(groups[0].items) == 2

    def test_empty_input(self):
        assert group_by_restaurant([], lambda l: l, lambda l: 0) == []
