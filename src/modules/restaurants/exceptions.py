"""Restaurant catalog exceptions."""

from __future__ import annotations

from modules.core.exceptions import NotFound


class RestaurantNotFound(NotFound):
    default_detail = "Restaurant not found."


class MenuNotFound(NotFound):
    default_detail = "Menu item not found for this restaurant."
