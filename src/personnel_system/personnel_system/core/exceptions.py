from __future__ import annotations

from typing import Dict, Optional, Sequence


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules.

    ``field`` names the form field (or field group) the message belongs to,
    so the presentation layer can render it next to the right input.
    """

    status_code = 400

    def __init__(self, message: str, *, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field

    @property
    def errors(self) -> Dict[str, str]:
        return {self.field or "form": self.message}


class MissingFieldsError(ValidationError):
    """Raised when one or more required fields are absent or blank."""

    def __init__(self, fields: Sequence[str]):
        self.fields = list(fields)
        super().__init__(f"Missing required fields: {', '.join(self.fields)}")

    @property
    def errors(self) -> Dict[str, str]:
        return {name: "This field is required." for name in self.fields}


class NotFoundError(DomainError):
    """Raised when a referenced record id does not exist."""

    status_code = 404


class AttachmentStoreError(DomainError):
    """Raised when an attachment cannot be written to disk or uploaded."""

    status_code = 500
