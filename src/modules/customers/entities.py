"""Immutable customer record shared by every storage backend.

Repositories map their rows to ``CustomerRecord`` and the service
layer never mutates one in place: changes are expressed as a new value
built with ``dataclasses.replace``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CustomerRecord:
    """A customer as seen by the service layer.

    ``id`` is ``None`` until storage assigns one on insert.
    """

    name: str
    email: str
    age: int
    id: Optional[int] = None
