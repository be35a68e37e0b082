"""
Domain exceptions - Semantic error types for user registration.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.

Every error carries an ErrorKind discriminant so boundary adapters can
map failures to external status codes without inspecting messages.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Discriminant shared by all domain errors."""

    INVALID_VALUE_OBJECT = "invalid_value_object"
    MISSING_ARGUMENT = "missing_argument"
    VALIDATION_FAILED = "validation_failed"
    DUPLICATE_CONFLICT = "duplicate_conflict"
    NOT_FOUND = "not_found"


class UserError(Exception):
    """Base class for user domain errors."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidValueObject(UserError):
    """Malformed email or national id at construction time."""

    kind = ErrorKind.INVALID_VALUE_OBJECT


class MissingArgument(UserError):
    """A required argument was None."""

    kind = ErrorKind.MISSING_ARGUMENT

    def __init__(self, field: str) -> None:
        super().__init__(f"{field} null")
        self.field = field


class ValidationFailed(UserError):
    """User entity failed validation."""

    kind = ErrorKind.VALIDATION_FAILED


class DuplicateConflict(UserError):
    """Email is already registered."""

    kind = ErrorKind.DUPLICATE_CONFLICT


class NotFound(UserError):
    """No user exists with the requested id."""

    kind = ErrorKind.NOT_FOUND
