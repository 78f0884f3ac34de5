"""Review exceptions."""

from __future__ import annotations

from modules.core.exceptions import Conflict, Forbidden, NotFound


class ReviewNotFound(NotFound):
    default_detail = "Review not found."


class ReviewAlreadyExists(Conflict):
    default_detail = "You have already reviewed this restaurant."


class RestaurantNotInOrder(Forbidden):
    code = "restaurant_not_in_order"
    default_detail = "This restaurant is not part of the referenced order."
