"""Abstract base model shared by every persisted entity.

``BaseModel`` gives each table a UUIDv7 primary key (time-ordered, so
``id`` order follows insertion order) plus ``created_at`` / ``updated_at``.
Its ``save()`` guard keeps ``updated_at`` fresh when ``update_fields``
is passed, which Django otherwise skips for ``auto_now`` fields.
"""

from __future__ import annotations

import uuid6
from django.db import models


class BaseModel(models.Model):
    """Abstract base with UUIDv7 PK and timestamp bookkeeping."""

    id = models.UUIDField(
        primary_key=True,
        default=uuid6.uuid7,
        editable=False,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True

    def save(self, *args, **kwargs) -> None:
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "updated_at" not in update_fields:
            kwargs["update_fields"] = list(update_fields) + ["updated_at"]
        super().save(*args, **kwargs)
