"""In-memory implementation of the Customer repository.

Each instance owns its own collection, so tests and processes never
share hidden state through a module-level list.  Ids come from a
monotonic counter and are never handed out twice, even after a delete.

Email uniqueness is not enforced here: the service-level check is the
only guard, which is enough for a single-threaded caller.
"""

from __future__ import annotations

from dataclasses import replace
from itertools import count
from typing import Dict, List, Optional

import structlog

from modules.customers.entities import CustomerRecord
from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerInMemoryRepository(ICustomerRepository):
    """Concrete Customer repository backed by a dict keyed by id."""

    def __init__(self) -> None:
        self._rows: Dict[int, CustomerRecord] = {}
        self._ids = count(1)

    def list(self) -> List[CustomerRecord]:
        return [self._rows[id] for id in sorted(self._rows)]

    def get_by_id(self, id: int) -> Optional[CustomerRecord]:
        return self._rows.get(id)

    def exists_with_email(self, email: str) -> bool:
        return any(row.email == email for row in self._rows.values())

    def exists_with_id(self, id: int) -> bool:
        return id in self._rows

    def insert(self, entity: CustomerRecord) -> CustomerRecord:
        record = replace(entity, id=next(self._ids))
        self._rows[record.id] = record
        logger.info("customer.inserted", customer_id=record.id)
        return record

    def update(self, entity: CustomerRecord) -> Optional[CustomerRecord]:
        if entity.id not in self._rows:
            return None
        self._rows[entity.id] = entity
        logger.info("customer.updated_row", customer_id=entity.id)
        return entity

    def delete(self, id: int) -> bool:
        if self._rows.pop(id, None) is None:
            return False
        logger.info("customer.deleted_row", customer_id=id)
        return True

