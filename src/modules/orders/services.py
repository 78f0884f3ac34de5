"""Order service layer (Use Cases).

Status management and order queries.  Order creation lives in
``modules.orders.checkout``.

Transition rules:
- Unknown statuses are always rejected with ``InvalidOrderStatus``.
- Loose mode (default) accepts any known status from any state.
- Strict mode walks ``VALID_TRANSITIONS``: forward only, ``cancelled``
  from any non-terminal state, nothing out of ``done`` / ``cancelled``.
- Every accepted change appends a history record.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from django.db import transaction

from modules.orders.exceptions import InvalidOrderStatus, OrderNotFound

if TYPE_CHECKING:
    from django.db.models import QuerySet

    from modules.orders.dtos import StatusChangeDTO
    from modules.orders.models import Order
    from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class OrderService:
    """Application service for Order use-cases.

    Receives the repository via constructor injection.
    """

    def __init__(self, order_repository: IOrderRepository, strict_transitions: bool = False) -> None:
        self._order_repo = order_repository
        self._strict = strict_transitions

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def set_status(self, user_id: str, order_id: str, dto: StatusChangeDTO) -> Order:
        """Move an order to ``dto.status``.

        The order row is locked before the transition is checked, so two
        concurrent changes are applied one after the other.

        Raises:
            OrderNotFound: order does not exist or is not the user's.
            InvalidOrderStatus: unknown status or forbidden transition.
        """
        order = self._order_repo.get_for_update(order_id, user_id)
        if order is None:
            raise OrderNotFound()

        log = logger.bind(
            order_id=str(order.id),
            current_status=order.status,
            new_status=dto.status,
            strict=self._strict,
        )

        if not order.can_transition_to(dto.status, strict=self._strict):
            log.warning("order.invalid_transition")
            raise InvalidOrderStatus(
                f"Cannot change status from {order.status} to {dto.status}.",
                attr="status",
            )

        old_status = order.status
        order.status = dto.status
        self._order_repo.save(order)

        self._order_repo.add_history(
            order_id=order.id,
            status=dto.status,
            notes=dto.notes,
            old_status=old_status,
            user_id=user_id,
        )

        log.info("order.status_updated")
        return self._order_repo.get_by_id(str(order.id))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_order(self, user_id: str, order_id: str) -> Order:
        """Raises ``OrderNotFound`` unless the order is the user's."""
        order = self._order_repo.get_for_user(order_id, user_id)
        if order is None:
            raise OrderNotFound()
        return order

    def list_orders(self, user_id: str) -> QuerySet:
        """User's orders, newest first.  Filtering and paging happen in the view."""
        return self._order_repo.list_for_user(user_id)
