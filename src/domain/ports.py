"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) crossing the domain boundary:
- UserRepository: outbound port the domain requires from storage
- UserInboundPort: inbound port the domain offers to callers

Adapters implement these protocols through structural subtyping.
"""

from collections.abc import Sequence
from typing import Protocol

from .user import User
from .value_objects import Email, NationalId


class UserRepository(Protocol):
    """Port interface for user persistence."""

    def save(self, user: User) -> User:
        """
        Persist a user.

        Args:
            user: Transient (id None) or persisted user

        Returns:
            Stored form of the user, with id assigned if it was new
        """
        ...

    def find_by_id(self, user_id: int) -> User | None:
        """Return the user with this id, or None."""
        ...

    def find_all(self) -> Sequence[User]:
        """Return every stored user (possibly empty)."""
        ...

    def delete(self, user_id: int) -> None:
        """Remove the user with this id."""
        ...

    def find_by_email(self, email: str) -> User | None:
        """
        Return the user registered with this email, or None.

        Args:
            email: Normalized email string (Email.value)
        """
        ...


class UserInboundPort(Protocol):
    """Port interface for user registration operations."""

    def create(
        self, name: str | None, email: Email | None, national_id: NationalId | None
    ) -> User:
        """
        Register a new user.

        Raises:
            MissingArgument: If any argument is None
            ValidationFailed: If the resulting user is invalid
            DuplicateConflict: If the email is already registered
        """
        ...

    def find_by_id(self, user_id: int) -> User:
        """
        Raises:
            NotFound: If no user has this id
        """
        ...

    def list_all(self) -> Sequence[User]:
        ...

    def remove(self, user_id: int) -> None:
        """
        Raises:
            NotFound: If no user has this id
        """
        ...
