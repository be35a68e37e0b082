"""
User entity - Identity composed with value objects.

A User has an identity (id) and mutable attributes. Email and NationalId
are value objects and already valid by construction; replacing one swaps
the whole value.

Lifecycle
=========

    transient (id is None) -> persisted (id assigned by storage) -> removed

The id is set once at construction and never reassigned. Storage returns
a new User instance carrying the id.
"""

from .exceptions import ValidationFailed
from .value_objects import Email, NationalId


class User:
    """Domain entity for a registered user."""

    def __init__(
        self,
        name: str | None,
        email: Email | None,
        national_id: NationalId | None = None,
        id: int | None = None,
    ) -> None:
        self._id = id
        self._name = name
        self._email = email
        self._national_id = national_id

    @classmethod
    def from_raw(
        cls,
        name: str,
        email: str,
        national_id: str | None = None,
        id: int | None = None,
    ) -> "User":
        """
        Build a User from raw strings, converting them to value objects.

        A None or blank national id yields a user without one.

        Raises:
            InvalidValueObject: If email or a non-blank national id is malformed
        """
        nid = NationalId.of(national_id) if national_id and national_id.strip() else None
        return cls(name, Email.of(email), nid, id=id)

    @property
    def id(self) -> int | None:
        return self._id

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def email(self) -> Email | None:
        return self._email

    @property
    def national_id(self) -> NationalId | None:
        return self._national_id

    @property
    def email_value(self) -> str | None:
        return self._email.value if self._email is not None else None

    @property
    def national_id_value(self) -> str | None:
        return self._national_id.value if self._national_id is not None else None

    def is_valid(self) -> bool:
        """
        Check entity-level rules.

        Name is required and non-blank; email is required. A present
        national id needs no re-check.
        """
        if self._name is None or not self._name.strip():
            return False
        return self._email is not None

    def rename(self, new_name: str | None) -> None:
        if new_name is None or not new_name.strip():
            raise ValidationFailed("name must not be blank")
        self._name = new_name

    def reassign_email(self, new_email: Email | None) -> None:
        if new_email is None:
            raise ValidationFailed("email must not be null")
        self._email = new_email

    def reassign_national_id(self, new_national_id: NationalId | None) -> None:
        """Replace the national id; None clears it."""
        self._national_id = new_national_id

    def has_national_id(self) -> bool:
        return self._national_id is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        if self._id is None or other._id is None:
            return self is other
        return self._id == other._id

    def __hash__(self) -> int:
        if self._id is None:
            return object.__hash__(self)
        return hash((User, self._id))

    def __repr__(self) -> str:
        return f"User(id={self._id!r}, name={self._name!r}, email={self.email_value!r})"
