"""
Domain layer - Pure business logic with zero framework imports.

This package contains the core business logic for user registration:
self-validating value objects, the User entity, and the use-case service.
It defines its own port interfaces for infrastructure abstraction,
ensuring true hexagonal architecture decoupling.
"""

from .exceptions import (
    DuplicateConflict,
    ErrorKind,
    InvalidValueObject,
    MissingArgument,
    NotFound,
    UserError,
    ValidationFailed,
)
from .ports import UserInboundPort, UserRepository
from .user import User
from .users import UserService
from .value_objects import Email, NationalId

__all__ = [
    "DuplicateConflict",
    "Email",
    "ErrorKind",
    "InvalidValueObject",
    "MissingArgument",
    "NationalId",
    "NotFound",
    "User",
    "UserError",
    "UserInboundPort",
    "UserRepository",
    "UserService",
    "ValidationFailed",
]
