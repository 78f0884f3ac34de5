"""Django ORM implementation of the User repository."""

from __future__ import annotations

from typing import Optional

import structlog
from django.core.exceptions import ValidationError

from modules.accounts.models import User
from modules.accounts.repositories.interfaces import IUserRepository

logger = structlog.get_logger(__name__)


class UserDjangoRepository(IUserRepository):
    def create_user(self, *, name: str, email: str, phone: str, password: str) -> User:
        user = User.objects.create_user(
            email=email, password=password, name=name, phone=phone
        )
        logger.info("user.created", user_id=str(user.id))
        return user

    def get_by_id(self, id: str) -> Optional[User]:
        try:
            return User.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def get_by_email(self, email: str) -> Optional[User]:
        return User.objects.filter(email__iexact=email).first()

    def get_by_phone(self, phone: str) -> Optional[User]:
        return User.objects.filter(phone=phone).first()

    def save(self, entity: User) -> User:
        entity.save()
        return entity

    def delete(self, id: str) -> bool:
        deleted, _ = User.objects.filter(id=id).delete()
        return deleted > 0
