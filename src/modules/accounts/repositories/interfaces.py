"""User repository interface."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.accounts.models import User


class IUserRepository(IRepository["User"]):
    @abstractmethod
    def create_user(self, *, name: str, email: str, phone: str, password: str) -> User:
        """Create an account, hashing ``password``."""

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[User]:
        """Case-insensitive lookup by email."""

    @abstractmethod
    def get_by_phone(self, phone: str) -> Optional[User]:
        """Lookup by phone number."""
