"""Integer money and quantity arithmetic shared by cart and checkout.

Prices are whole currency units (Rupiah has no minor unit in practice),
so every amount here is a plain ``int``.  Nothing in this module touches
Django: callers pass in whatever objects they hold and tell the helpers
how to read the restaurant key and the line total from them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Generic, Hashable, Iterable, List, TypeVar

T = TypeVar("T")


def line_total(unit_price: int, quantity: int) -> int:
    """Return ``unit_price * quantity`` after validating both operands."""
    if isinstance(unit_price, bool) or not isinstance(unit_price, int):
        raise ValueError("Unit price must be an integer.")
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise ValueError("Quantity must be an integer.")
    if unit_price < 0:
        raise ValueError("Unit price cannot be negative.")
    if quantity < 1:
        raise ValueError("Quantity must be at least 1.")
    return unit_price * quantity


@dataclass(frozen=True)
class PricingBreakdown:
    subtotal: int
    service_fee: int
    delivery_fee: int

    @property
    def total_price(self) -> int:
        return self.subtotal + self.service_fee + self.delivery_fee

    def as_dict(self) -> dict:
        return {
            "subtotal": self.subtotal,
            "service_fee": self.service_fee,
            "delivery_fee": self.delivery_fee,
            "total_price": self.total_price,
        }


def price_lines(
    line_totals: Iterable[int], service_fee: int, delivery_fee: int
) -> PricingBreakdown:
    """Sum line totals and attach the flat fees."""
    if service_fee < 0 or delivery_fee < 0:
        raise ValueError("Fees cannot be negative.")
    return PricingBreakdown(
        subtotal=sum(line_totals),
        service_fee=service_fee,
        delivery_fee=delivery_fee,
    )


@dataclass
class RestaurantGroup(Generic[T]):
    restaurant_id: Hashable
    items: List[T] = field(default_factory=list)
    subtotal: int = 0


def group_by_restaurant(
    lines: Iterable[T],
    restaurant_of: Callable[[T], Hashable],
    total_of: Callable[[T], int],
) -> List[RestaurantGroup[T]]:
    """Group *lines* by restaurant, keeping the order restaurants first appear in."""
    groups: dict[Hashable, RestaurantGroup[T]] = {}
    for line in lines:
        key = restaurant_of(line)
        group = groups.get(key)
        if group is None:
            group = groups[key] = RestaurantGroup(restaurant_id=key)
        group.items.append(line)
        group.subtotal += total_of(line)
    return list(groups.values())
