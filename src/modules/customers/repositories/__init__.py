"""Customer repository selection.

``CUSTOMER_REPOSITORY`` picks the storage backend the API uses:

- ``"orm"`` (default): ``CustomerDjangoRepository``.
- ``"sql"``: ``CustomerSQLRepository``, hand-written statements.
- ``"memory"``: ``CustomerInMemoryRepository``, one instance for the
  lifetime of the process (until ``reset_customer_repository``).
"""

from __future__ import annotations

from functools import lru_cache

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.repositories.interfaces import ICustomerRepository
from modules.customers.repositories.memory_repository import CustomerInMemoryRepository
from modules.customers.repositories.sql_repository import CustomerSQLRepository

__all__ = [
    "CustomerDjangoRepository",
    "CustomerInMemoryRepository",
    "CustomerSQLRepository",
    "ICustomerRepository",
    "get_customer_repository",
    "reset_customer_repository",
]


@lru_cache(maxsize=1)
def _memory_repository() -> CustomerInMemoryRepository:
    return CustomerInMemoryRepository()


def get_customer_repository() -> ICustomerRepository:
    backend = getattr(settings, "CUSTOMER_REPOSITORY", "orm")
    if backend == "orm":
        return CustomerDjangoRepository()
    if backend == "sql":
        return CustomerSQLRepository()
    if backend == "memory":
        return _memory_repository()
    raise ImproperlyConfigured(
        f"CUSTOMER_REPOSITORY must be 'orm', 'sql' or 'memory', got {backend!r}."
    )


def reset_customer_repository() -> None:
    """Discard the shared in-memory repository (used by tests)."""
    _memory_repository.cache_clear()
