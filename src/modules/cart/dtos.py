"""Cart DTOs.

``AddCartItemDTO`` / ``UpdateQuantityDTO`` are service inputs; ``CartView``
and friends are the grouped read model returned by ``list_grouped``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator

if TYPE_CHECKING:
    from modules.cart.models import CartEntry
    from modules.restaurants.models import Restaurant


def _positive(v: int) -> int:
    if v < 1:
        raise ValueError("Quantity must be at least 1.")
    return v


class AddCartItemDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    restaurant_id: UUID
    menu_id: UUID
    quantity: int = 1

    @field_validator("quantity")
    @classmethod
    def quantity_must_be_positive(cls, v: int) -> int:
        return _positive(v)


class UpdateQuantityDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    quantity: int

    @field_validator("quantity")
    @classmethod
    def quantity_must_be_positive(cls, v: int) -> int:
        return _positive(v)


@dataclass(frozen=True)
class CartGroup:
    restaurant: Restaurant
    items: List[CartEntry]
    subtotal: int


@dataclass(frozen=True)
class CartSummary:
    total_items: int
    total_price: int
    restaurant_count: int


@dataclass(frozen=True)
class CartView:
    groups: List[CartGroup]
    summary: CartSummary
