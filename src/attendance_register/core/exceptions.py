from __future__ import annotations

from typing import Mapping, Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules.

    ``errors`` maps a field name to the message shown next to that field.
    """

    def __init__(self, message: str, errors: Optional[Mapping[str, str]] = None):
        super().__init__(message)
        self.errors: dict[str, str] = dict(errors or {})


class NotFoundError(DomainError):
    """Raised when a lookup by id finds nothing."""


class StorageError(DomainError):
    """Raised when the storage backend fails to persist a value."""
