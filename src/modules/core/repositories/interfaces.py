"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on a concrete storage backend.

Implementations follow the Null Object convention: look-ups return
``None`` / ``False`` for missing rows instead of raising, and the
Service Layer decides what a miss means.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the immutable record managed by the
    repository (e.g. ``CustomerRecord``).  Identifiers are integers
    assigned by storage on insert.
    """

    @abstractmethod
    def get_by_id(self, id: int) -> Optional[T]:
        """Retrieve a record by its primary key."""

    @abstractmethod
    def list(self) -> List[T]:
        """List all records ordered by primary key."""

    @abstractmethod
    def insert(self, entity: T) -> T:
        """Persist a new record and return a copy carrying the assigned id."""

    @abstractmethod
    def update(self, entity: T) -> Optional[T]:
        """Overwrite the stored record with the same id.

        Returns ``None`` when no record has that id.
        """

    @abstractmethod
    def delete(self, id: int) -> bool:
        """Remove a record by ID.  Returns ``False`` if it did not exist."""
