"""
Domain-specific exception hierarchy for the form service.

All service exceptions inherit from FormServiceError so callers can
catch broadly or narrowly as needed.  The API layer maps each subclass
to its own response envelope (see ``main.py`` exception handlers), so
callers can tell "fix your input" apart from "try again later".
"""

from __future__ import annotations


class FormServiceError(Exception):
    """Base exception for all form service errors."""

    def __init__(
        self,
        message: str,
        *,
        details: dict | None = None,
    ) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)


class SubmissionValidationError(FormServiceError):
    """A submission failed schema validation.  User-correctable."""

    def __init__(self, errors: dict[str, str], **kwargs) -> None:
        self.errors = dict(errors)
        super().__init__(
            f"Submission failed validation on {len(self.errors)} field(s)",
            **kwargs,
        )


class StorageError(FormServiceError):
    """The persistence layer could not complete an insert or read."""

    def __init__(
        self,
        message: str,
        *,
        operation: str | None = None,
        **kwargs,
    ) -> None:
        self.operation = operation
        super().__init__(message, **kwargs)
