"""
User domain service - Registration use cases.

This module contains the core business logic for user registration.
UserService implements the inbound port using only the outbound port.

Business Rules
==============

- create: all of name, email and national id are required; the user must
  pass entity validation; the email must not already be registered.
- find_by_id: absence is an error (NotFound).
- remove: existence is confirmed before deleting.

Note: The duplicate-email check and the save are two separate repository
calls. Concurrent creations with the same email can both pass the check;
the storage unique constraint on email is the backstop, and its failure
propagates unchanged (not as DuplicateConflict).
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from .exceptions import DuplicateConflict, MissingArgument, NotFound, ValidationFailed
from .ports import UserRepository
from .user import User
from .value_objects import Email, NationalId

logger = logging.getLogger(__name__)


@dataclass
class UserService:
    """
    Domain service for user registration.

    Stateless apart from the injected repository; safe to share across
    concurrent requests.
    """

    repository: UserRepository

    def create(self, name: str | None, email: Email | None, national_id: NationalId | None) -> User:
        """
        Register a new user.

        Args:
            name: User's display name
            email: Validated Email value object
            national_id: Validated NationalId value object

        Returns:
            Stored user with its assigned id

        Raises:
            MissingArgument: If name, email or national_id is None
            ValidationFailed: If the user data is invalid
            DuplicateConflict: If the email is already registered
        """
        if name is None:
            raise MissingArgument("name")
        if email is None:
            raise MissingArgument("email")
        if national_id is None:
            raise MissingArgument("national_id")

        user = User(name, email, national_id)
        if not user.is_valid():
            raise ValidationFailed("user data is invalid")

        if self.repository.find_by_email(email.value) is not None:
            logger.warning("Rejected duplicate registration for %s", email.value)
            raise DuplicateConflict(f"a user with this email already exists: {email.value}")

        saved = self.repository.save(user)
        logger.info("Created user %s (%s)", saved.id, email.value)
        return saved

    def find_by_id(self, user_id: int) -> User:
        """
        Raises:
            NotFound: If no user has this id
        """
        user = self.repository.find_by_id(user_id)
        if user is None:
            raise NotFound(f"no user found with id: {user_id}")
        return user

    def list_all(self) -> Sequence[User]:
        return self.repository.find_all()

    def remove(self, user_id: int) -> None:
        """
        Remove a user after confirming it exists.

        Raises:
            NotFound: If no user has this id (delete is not attempted)
        """
        self.find_by_id(user_id)
        self.repository.delete(user_id)
        logger.info("Removed user %s", user_id)
