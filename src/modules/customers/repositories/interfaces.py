"""Customer repository interface.

Extends ``IRepository[CustomerRecord]`` with the existence look-ups
the service needs to enforce email uniqueness and to check an id
before deleting it.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.customers.entities import CustomerRecord


class ICustomerRepository(IRepository["CustomerRecord"]):
    """Repository contract for the Customer aggregate."""

    @abstractmethod
    def list(self) -> List[CustomerRecord]:
        """List every customer ordered by id."""

    @abstractmethod
    def get_by_id(self, id: int) -> Optional[CustomerRecord]:
        """Retrieve a customer by id, or ``None``."""

    @abstractmethod
    def exists_with_email(self, email: str) -> bool:
        """Whether any customer holds ``email``."""

    @abstractmethod
    def exists_with_id(self, id: int) -> bool:
        """Whether a customer with ``id`` exists."""
