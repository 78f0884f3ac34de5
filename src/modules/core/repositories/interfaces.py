"""Generic repository interface.

``IRepository[T]`` is the base contract every module-specific repository
interface extends.  Services depend on these abstractions and receive the
Django ORM implementations through their constructors.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    ``T`` is the entity managed by the repository (``Restaurant``,
    ``CartEntry``, ``Order``...).
    """

    @abstractmethod
    def get_by_id(self, id: str) -> Optional[T]:
        """Retrieve an entity by primary key; ``None`` when absent or malformed."""

    @abstractmethod
    def save(self, entity: T) -> T:
        """Persist (create or update) an entity."""

    @abstractmethod
    def delete(self, id: str) -> bool:
        """Remove an entity by ID; ``False`` when nothing was deleted."""
