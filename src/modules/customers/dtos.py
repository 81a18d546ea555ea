"""Customer DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF views) and the
Service layer.  DTOs are immutable (``frozen=True``).

- ``CreateCustomerDTO``: input for customer registration.
- ``UpdateCustomerDTO``: input for partial updates.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

# Upper bound of the age column (PositiveIntegerField).
MAX_AGE = 2147483647


class CreateCustomerDTO(BaseModel):
    """Immutable DTO for customer registration requests.

    Every field is required: a customer never exists without a name,
    an email and a positive age.  ``age`` is strict so booleans and
    numeric strings are rejected rather than coerced.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    age: int = Field(gt=0, le=MAX_AGE, strict=True)


class UpdateCustomerDTO(BaseModel):
    """Immutable DTO for customer update requests.

    All fields are optional.  ``None`` means "no change requested";
    supplied values obey the same constraints as registration.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    age: Optional[int] = Field(default=None, gt=0, le=MAX_AGE, strict=True)
