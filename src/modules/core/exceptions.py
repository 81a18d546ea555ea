"""HTTP exceptions shared by every API module.

DRF ships ``NotFound`` and ``ValidationError`` but nothing for 409;
``Conflict`` fills that gap so views can raise it and let the
standardized exception handler render the error envelope.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.exceptions import APIException


class Conflict(APIException):
    """The request collides with the current state of a resource."""

    status_code = status.HTTP_409_CONFLICT
    default_detail = "Resource already exists."
    default_code = "conflict"
