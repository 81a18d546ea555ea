"""Customer domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations


class CustomerAlreadyExists(Exception):
    """Another customer already holds the requested email."""


class CustomerNotFound(Exception):
    """The requested customer does not exist."""


class InvalidCustomerRequest(Exception):
    """The request is well-formed but cannot be applied (e.g. no changes)."""
