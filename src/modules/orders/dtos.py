"""Order DTOs for the Service Layer.

Pydantic v2 input DTOs (immutable) for checkout and status changes, plus
the frozen line snapshot used while building an order.
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from shared.domain.money import line_total

# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CheckoutDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    payment_method: str = Field(min_length=1, max_length=50)
    delivery_address: Optional[str] = ""
    notes: Optional[str] = ""

    @field_validator("payment_method")
    @classmethod
    def strip_payment_method(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Payment method is required.")
        return v


class StatusChangeDTO(BaseModel):
    """The status is kept as free text: the state machine decides validity."""

    model_config = ConfigDict(frozen=True)

    status: str
    notes: str = ""


# ---------------------------------------------------------------------------
# Line snapshot
# ---------------------------------------------------------------------------


class OrderLineDTO(BaseModel):
    """Cart line frozen at checkout time."""

    model_config = ConfigDict(frozen=True)

    restaurant_id: UUID
    restaurant_name: str
    menu_id: UUID
    menu_name: str
    unit_price: int
    quantity: int

    @property
    def item_total(self) -> int:
        return line_total(self.unit_price, self.quantity)
