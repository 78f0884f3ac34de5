"""Order domain constants.

Statuses of the delivery lifecycle and the transition map used when
strict transitions are enabled (``ORDER_STRICT_TRANSITIONS``).
"""

from django.db import models


class OrderStatus(models.TextChoices):
    PREPARING = "preparing", "Preparing"
    ON_THE_WAY = "on_the_way", "On the way"
    DELIVERED = "delivered", "Delivered"
    DONE = "done", "Done"
    CANCELLED = "cancelled", "Cancelled"


VALID_TRANSITIONS: dict[str, set[str]] = {
    OrderStatus.PREPARING: {OrderStatus.ON_THE_WAY, OrderStatus.CANCELLED},
    OrderStatus.ON_THE_WAY: {OrderStatus.DELIVERED, OrderStatus.CANCELLED},
    OrderStatus.DELIVERED: {OrderStatus.DONE, OrderStatus.CANCELLED},
    OrderStatus.DONE: set(),
    OrderStatus.CANCELLED: set(),
}

TERMINAL_STATES: set[str] = {OrderStatus.DONE, OrderStatus.CANCELLED}

ORDER_NUMBER_PREFIX = "TXN"
ORDER_NUMBER_MAX_RETRIES = 5
