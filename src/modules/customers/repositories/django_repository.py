"""Django ORM implementation of the Customer repository.

Satisfies ``ICustomerRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: methods return ``None``
or ``False`` instead of raising, and the Service Layer decides how to
translate a missing row into an API response.  The one exception is a
``UNIQUE`` violation on email, which is reported as
``CustomerAlreadyExists``.
"""

from __future__ import annotations

from typing import List, Optional

import structlog
from django.db import IntegrityError, transaction

from modules.customers.entities import CustomerRecord
from modules.customers.exceptions import CustomerAlreadyExists
from modules.customers.models import Customer
from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerDjangoRepository(ICustomerRepository):
    """Concrete Customer repository backed by Django ORM."""

    def list(self) -> List[CustomerRecord]:
        return [row.to_record() for row in Customer.objects.order_by("id")]

    def get_by_id(self, id: int) -> Optional[CustomerRecord]:
        row = Customer.objects.filter(id=id).first()
        return row.to_record() if row else None

    def exists_with_email(self, email: str) -> bool:
        return Customer.objects.filter(email=email).exists()

    def exists_with_id(self, id: int) -> bool:
        return Customer.objects.filter(id=id).exists()

    def insert(self, entity: CustomerRecord) -> CustomerRecord:
        """Create a row and return the record with its assigned id."""
        try:
            with transaction.atomic():
                row = Customer.objects.create(
                    name=entity.name, email=entity.email, age=entity.age
                )
        except IntegrityError as exc:
            logger.warning("customer.insert_rejected", email=entity.email)
            raise CustomerAlreadyExists("Email already taken") from exc
        logger.info("customer.inserted", customer_id=row.id)
        return row.to_record()

    def update(self, entity: CustomerRecord) -> Optional[CustomerRecord]:
        """Overwrite name, email and age of the row with ``entity.id``."""
        try:
            with transaction.atomic():
                count = Customer.objects.filter(id=entity.id).update(
                    name=entity.name, email=entity.email, age=entity.age
                )
        except IntegrityError as exc:
            logger.warning(
                "customer.update_rejected", customer_id=entity.id, email=entity.email
            )
            raise CustomerAlreadyExists("Email already taken") from exc
        if count == 0:
            return None
        logger.info("customer.updated_row", customer_id=entity.id)
        return entity

    @transaction.atomic
    def delete(self, id: int) -> bool:
        """Hard-delete a customer.  Returns ``False`` if no row matched."""
        count, _ = Customer.objects.filter(id=id).delete()
        if count:
            logger.info("customer.deleted_row", customer_id=id)
        return bool(count)
