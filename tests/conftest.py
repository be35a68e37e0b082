"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- An in-memory UserRepository (outbound port fake)
- A UserService wired to it
"""

import itertools
import threading

import pytest

from src.domain.user import User
from src.domain.users import UserService


class InMemoryUserRepository:
    """
    Implements UserRepository protocol with a dict.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Counts calls so tests can assert which outbound operations ran.
    """

    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()
        self.save_calls = 0
        self.delete_calls = 0

    def save(self, user: User) -> User:
        with self._lock:
            self.save_calls += 1
            user_id = user.id if user.id is not None else next(self._ids)
            stored = User(user.name, user.email, user.national_id, id=user_id)
            self._users[user_id] = stored
            return stored

    def find_by_id(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    def find_all(self) -> list[User]:
        return [self._users[k] for k in sorted(self._users)]

    def delete(self, user_id: int) -> None:
        with self._lock:
            self.delete_calls += 1
            self._users.pop(user_id, None)

    def find_by_email(self, email: str) -> User | None:
        for user in self._users.values():
            if user.email_value == email:
                return user
        return None


@pytest.fixture
def repository() -> InMemoryUserRepository:
    """Fresh in-memory repository for each test."""
    return InMemoryUserRepository()


@pytest.fixture
def service(repository: InMemoryUserRepository) -> UserService:
    """UserService wired to the in-memory repository."""
    return UserService(repository=repository)
