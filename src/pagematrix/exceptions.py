"""Unified exception hierarchy for pagematrix.

All pagematrix exceptions inherit from PageMatrixError, enabling:
- Catching all pagematrix errors with `except PageMatrixError`
- Error context preservation via the `context` attribute
- Causality chains via `raise ... from e` patterns
"""

from typing import Any


class PageMatrixError(Exception):
    """Base exception for all pagematrix errors.

    Args:
        message: Human-readable error description
        context: Optional dict of contextual information (kind, value, etc.)
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.context = context or {}

    def __str__(self) -> str:
        base = super().__str__()
        if self.context:
            details = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{base} [{details}]"
        return base


class InvalidArgumentError(PageMatrixError):
    """Raised when a parameter has the wrong type or shape."""


class EmptyStackError(PageMatrixError):
    """Raised when popping a matrix without a matching push."""


class SingularMatrixError(PageMatrixError):
    """Raised when inverting a matrix whose determinant is (nearly) zero."""


class ConfigError(PageMatrixError):
    """Raised when a session configuration is invalid or cannot be loaded.

    Args:
        message: The error message
        field: Name of the field with the error (if applicable)
        suggestion: Suggested fix for the error (if applicable)
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        suggestion: str | None = None,
    ):
        self.field = field
        self.suggestion = suggestion
        super().__init__(message, context={"field": field} if field else None)

    def __str__(self) -> str:
        base = super().__str__()
        if self.suggestion:
            return f"{base}\nSuggestion: {self.suggestion}"
        return base
