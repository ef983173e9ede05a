from __future__ import annotations

from typing import Mapping, Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class WorkTimeValidationError(ValidationError):
    """Field-level validation failure for a work time entry.

    ``errors`` maps the failing field name to its message.
    """

    def __init__(self, errors: Mapping[str, str], message: Optional[str] = None):
        self.errors = dict(errors)
        super().__init__(message or "; ".join(f"{k}: {v}" for k, v in self.errors.items()))


class InvalidArgumentError(DomainError, ValueError):
    """Raised when a required argument is missing."""


class NotFoundError(DomainError, LookupError):
    """Raised when an operation assumes a row exists and it does not."""
