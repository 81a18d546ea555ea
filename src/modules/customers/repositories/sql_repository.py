"""Hand-written SQL implementation of the Customer repository.

Runs plain statements through Django's connection (``%s`` placeholders
work on every backend Django supports) against the same ``customer``
table the ORM model maps, and turns each result row into a
``CustomerRecord`` with ``map_row``.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence

import structlog
from django.db import IntegrityError, connections, transaction

from modules.customers.entities import CustomerRecord
from modules.customers.exceptions import CustomerAlreadyExists
from modules.customers.models import Customer
from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)

TABLE = Customer._meta.db_table


def map_row(row: Sequence[Any]) -> CustomerRecord:
    """Map an ``(id, name, email, age)`` row to a record."""
    id, name, email, age = row
    return CustomerRecord(id=int(id), name=name, email=email, age=int(age))


class CustomerSQLRepository(ICustomerRepository):
    """Concrete Customer repository issuing SQL directly."""

    def __init__(self, using: str = "default") -> None:
        self._using = using

    @property
    def _connection(self):
        return connections[self._using]

    def _query(self, sql: str, params: Sequence[Any] = ()) -> List[CustomerRecord]:
        with self._connection.cursor() as cursor:
            cursor.execute(sql, params)
            return [map_row(row) for row in cursor.fetchall()]

    def _execute(self, sql: str, params: Sequence[Any]) -> int:
        with self._connection.cursor() as cursor:
            cursor.execute(sql, params)
            return cursor.rowcount

    def _storable_id(self, id: int) -> bool:
        low, high = self._connection.ops.integer_field_range("BigAutoField")
        return low <= id <= high

    def list(self) -> List[CustomerRecord]:
        return self._query(f"SELECT id, name, email, age FROM {TABLE} ORDER BY id")

    def get_by_id(self, id: int) -> Optional[CustomerRecord]:
        if not self._storable_id(id):
            return None
        rows = self._query(
            f"SELECT id, name, email, age FROM {TABLE} WHERE id = %s", [id]
        )
        return rows[0] if rows else None

    def exists_with_email(self, email: str) -> bool:
        return bool(
            self._query(
                f"SELECT id, name, email, age FROM {TABLE} WHERE email = %s", [email]
            )
        )

    def exists_with_id(self, id: int) -> bool:
        return self.get_by_id(id) is not None

    def insert(self, entity: CustomerRecord) -> CustomerRecord:
        sql = f"INSERT INTO {TABLE} (name, email, age) VALUES (%s, %s, %s)"
        params = [entity.name, entity.email, entity.age]
        connection = self._connection
        try:
            with transaction.atomic(using=self._using):
                with connection.cursor() as cursor:
                    if connection.features.can_return_columns_from_insert:
                        cursor.execute(sql + " RETURNING id", params)
                        new_id = cursor.fetchone()[0]
                    else:
                        cursor.execute(sql, params)
                        new_id = cursor.lastrowid
        except IntegrityError as exc:
            logger.warning("customer.insert_rejected", email=entity.email)
            raise CustomerAlreadyExists("Email already taken") from exc
        logger.info("customer.inserted", customer_id=new_id, rows=1)
        return CustomerRecord(
            id=int(new_id), name=entity.name, email=entity.email, age=entity.age
        )

    def update(self, entity: CustomerRecord) -> Optional[CustomerRecord]:
        if entity.id is None or not self._storable_id(entity.id):
            return None
        sql = f"UPDATE {TABLE} SET name = %s, email = %s, age = %s WHERE id = %s"
        try:
            with transaction.atomic(using=self._using):
                count = self._execute(
                    sql, [entity.name, entity.email, entity.age, entity.id]
                )
        except IntegrityError as exc:
            logger.warning(
                "customer.update_rejected", customer_id=entity.id, email=entity.email
            )
            raise CustomerAlreadyExists("Email already taken") from exc
        logger.info("customer.updated_row", customer_id=entity.id, rows=count)
        return entity if count else None

    def delete(self, id: int) -> bool:
        if not self._storable_id(id):
            return False
        with transaction.atomic(using=self._using):
            count = self._execute(f"DELETE FROM {TABLE} WHERE id = %s", [id])
        logger.info("customer.deleted_row", customer_id=id, rows=count)
        return count > 0
