"""Cart exceptions."""

from __future__ import annotations

from modules.core.exceptions import NotFound


class CartEntryNotFound(NotFound):
    default_detail = "Cart item not found."
