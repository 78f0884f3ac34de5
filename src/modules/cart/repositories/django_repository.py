"""Django ORM implementation of the Cart repository."""

from __future__ import annotations

from typing import List, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import F
from django.utils import timezone

from modules.cart.models import CartEntry
from modules.cart.repositories.interfaces import ICartRepository

logger = structlog.get_logger(__name__)


class CartDjangoRepository(ICartRepository):
    """Concrete Cart repository backed by Django ORM."""

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    @transaction.atomic
    def add_quantity(
        self, user_id: str, restaurant_id: str, menu_id: str, quantity: int
    ) -> CartEntry:
        """Upsert on the (user, restaurant, menu) unique constraint.

        ``get_or_create`` retries the lookup if a concurrent insert wins the
        race, and the increment is an ``F()`` expression evaluated by the
        database, so simultaneous adds never lose a quantity.
        """
        entry, created = CartEntry.objects.get_or_create(
            user_id=user_id,
            restaurant_id=restaurant_id,
            menu_id=menu_id,
            defaults={"quantity": quantity},
        )
        if not created:
            CartEntry.objects.filter(pk=entry.pk).update(
                quantity=F("quantity") + quantity,
                updated_at=timezone.now(),
            )
        return CartEntry.objects.select_related("restaurant", "menu").get(pk=entry.pk)

    def set_quantity(self, entry: CartEntry, quantity: int) -> CartEntry:
        entry.quantity = quantity
        entry.save(update_fields=["quantity"])
        return entry

    @transaction.atomic
    def clear(self, user_id: str) -> int:
        deleted, _ = CartEntry.objects.filter(user_id=user_id).delete()
        return deleted

    def save(self, entity: CartEntry) -> CartEntry:
        entity.save()
        return entity

    def delete(self, id: str) -> bool:
        try:
            deleted, _ = CartEntry.objects.filter(id=id).delete()
        except (ValueError, ValidationError):
            return False
        return deleted > 0

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def get_by_id(self, id: str) -> Optional[CartEntry]:
        try:
            return CartEntry.objects.select_related("restaurant", "menu").filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def get_for_user(self, entry_id: str, user_id: str) -> Optional[CartEntry]:
        try:
            return (
                CartEntry.objects.select_related("restaurant", "menu")
                .filter(id=entry_id, user_id=user_id)
                .first()
            )
        except (ValueError, ValidationError):
            return None

    def list_for_user(self, user_id: str) -> List[CartEntry]:
        return list(
            CartEntry.objects.select_related("restaurant", "menu")
            .filter(user_id=user_id)
            .order_by("-created_at", "-id")
        )

    def list_for_checkout(self, user_id: str) -> List[CartEntry]:
        return list(
            CartEntry.objects.select_for_update(of=("self",))
            .select_related("restaurant", "menu")
            .filter(user_id=user_id)
            .order_by("created_at", "id")
        )
