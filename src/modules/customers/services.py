"""Customer service layer (Use Cases).

Orchestrates business logic for the Customer aggregate, delegating
persistence to the injected ``ICustomerRepository``.

Business rules enforced here:
- Email must be unique across customers (registration and update).
- Reads, updates and deletes of an unknown id fail with ``CustomerNotFound``.
- An update that changes nothing is rejected.

Records are immutable: an update builds a new ``CustomerRecord`` and
never touches the one fetched from storage.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, Any, Dict, List

import structlog

from modules.customers.entities import CustomerRecord
from modules.customers.exceptions import (
    CustomerAlreadyExists,
    CustomerNotFound,
    InvalidCustomerRequest,
)

if TYPE_CHECKING:
    from modules.customers.dtos import CreateCustomerDTO, UpdateCustomerDTO
    from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)

EMAIL_TAKEN = "Email already taken"


def _not_found(id: int) -> CustomerNotFound:
    return CustomerNotFound(f"Customer with id [{id}] not found")


class CustomerService:
    """Application service for Customer use-cases.

    Receives an ``ICustomerRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: ICustomerRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_customers(self) -> List[CustomerRecord]:
        """Return every customer ordered by id."""
        return self._repo.list()

    def get_customer(self, id: int) -> CustomerRecord:
        """Retrieve a single customer by ID.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        customer = self._repo.get_by_id(id)
        if customer is None:
            raise _not_found(id)
        return customer

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def register_customer(self, dto: CreateCustomerDTO) -> CustomerRecord:
        """Register a new customer; storage assigns the id.

        Raises:
            CustomerAlreadyExists: if the email is already taken.
        """
        log = logger.bind(email=dto.email)

        if self._repo.exists_with_email(dto.email):
            log.warning("customer.duplicate_email")
            raise CustomerAlreadyExists(EMAIL_TAKEN)

        customer = self._repo.insert(
            CustomerRecord(name=dto.name, email=dto.email, age=dto.age)
        )
        log.info("customer.registered", customer_id=customer.id)
        return customer

    def update_customer(self, id: int, dto: UpdateCustomerDTO) -> CustomerRecord:
        """Apply the fields of ``dto`` that differ from the stored customer.

        A field set to ``None`` is left alone.  The merged record is
        persisted only when at least one field actually changes.

        Raises:
            CustomerNotFound: if the customer does not exist.
            CustomerAlreadyExists: if the new email belongs to someone else.
            InvalidCustomerRequest: if nothing would change.
        """
        customer = self.get_customer(id)
        log = logger.bind(customer_id=id)
        changes: Dict[str, Any] = {}

        if dto.name is not None and dto.name != customer.name:
            changes["name"] = dto.name

        if dto.age is not None and dto.age != customer.age:
            changes["age"] = dto.age

        if dto.email is not None and dto.email != customer.email:
            if self._repo.exists_with_email(dto.email):
                log.warning("customer.duplicate_email", email=dto.email)
                raise CustomerAlreadyExists(EMAIL_TAKEN)
            changes["email"] = dto.email

        if not changes:
            log.info("customer.update_without_changes")
            raise InvalidCustomerRequest("No data changes found")

        updated = self._repo.update(replace(customer, **changes))
        if updated is None:
            raise _not_found(id)
        log.info("customer.updated", fields=sorted(changes))
        return updated

    def delete_customer(self, id: int) -> None:
        """Delete a customer by ID.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        if not self._repo.exists_with_id(id):
            raise _not_found(id)
        self._repo.delete(id)
        logger.info("customer.deleted", customer_id=id)
