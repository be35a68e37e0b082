"""
Value objects - Self-validating identity values.

Email and NationalId are immutable and compared by value. Both validate
on construction, so an instance that exists is always valid.

NationalId Checksum (two-pass mod 11)
=====================================

    d1 = 11 - (sum(digit[i] * (10 - i) for i in 0..8) % 11)    -> 0 if >= 10
    d2 = 11 - (sum(digit[i] * (11 - i) for i in 0..9) % 11)    -> 0 if >= 10

The number is valid when d1 == digit[9] and d2 == digit[10].
"""

import re
from dataclasses import dataclass

from .exceptions import InvalidValueObject

EMAIL_PATTERN = re.compile(r"^[a-z0-9+_.-]+@[a-z0-9.-]+\.[a-z]{2,}$")

_NON_DIGITS = re.compile(r"[^0-9]")

NATIONAL_ID_LENGTH = 11


@dataclass(frozen=True)
class Email:
    """Value object representing a normalized email address."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise InvalidValueObject("email must not be null or blank")

        normalized = self.value.strip().lower()

        if not EMAIL_PATTERN.match(normalized):
            raise InvalidValueObject(f"invalid email: {self.value}")

        # Frozen dataclass: store the normalized form
        object.__setattr__(self, "value", normalized)

    @classmethod
    def of(cls, raw: str | None) -> "Email":
        """
        Build an Email from raw input.

        Applies: strip whitespace + lowercase, then pattern check.

        Raises:
            InvalidValueObject: If raw is None, blank or malformed
        """
        return cls(raw)

    @property
    def domain(self) -> str:
        """Part after '@' (e.g. "example.com" for "user@example.com")."""
        return self.value[self.value.index("@") + 1 :]

    @property
    def local_part(self) -> str:
        """Part before '@' (e.g. "user" for "user@example.com")."""
        return self.value[: self.value.index("@")]

    def is_from_domain(self, domain: str) -> bool:
        return self.domain.lower() == domain.lower()

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class NationalId:
    """
    Value object for an 11-digit national identification number.

    Accepts formatted input ("123.456.789-09") and keeps only the digits.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise InvalidValueObject("national id must not be null or blank")

        digits = _NON_DIGITS.sub("", self.value)

        if len(digits) != NATIONAL_ID_LENGTH:
            raise InvalidValueObject(f"national id must have {NATIONAL_ID_LENGTH} digits")

        if len(set(digits)) == 1:
            raise InvalidValueObject("invalid national id: all digits are equal")

        if not _checksum_matches(digits):
            raise InvalidValueObject(f"invalid national id: {self.value}")

        object.__setattr__(self, "value", digits)

    @classmethod
    def of(cls, raw: str | None) -> "NationalId":
        """
        Build a NationalId from raw input.

        Raises:
            InvalidValueObject: If raw is None/blank, does not hold exactly
                11 digits, has all digits equal, or fails the checksum
        """
        return cls(raw)

    @property
    def formatted(self) -> str:
        """XXX.XXX.XXX-XX"""
        v = self.value
        return f"{v[0:3]}.{v[3:6]}.{v[6:9]}-{v[9:11]}"

    @property
    def masked(self) -> str:
        """Display form exposing only the last five digits."""
        v = self.value
        return f"***.***. {v[6:9]}-{v[9:11]}"

    def __str__(self) -> str:
        return self.formatted


def _check_digit(digits: list[int], weight_start: int) -> int:
    total = sum(d * (weight_start - i) for i, d in enumerate(digits))
    digit = 11 - (total % 11)
    return 0 if digit >= 10 else digit


def _checksum_matches(cleaned: str) -> bool:
    digits = [int(c) for c in cleaned]

    if _check_digit(digits[:9], 10) != digits[9]:
        return False

    return _check_digit(digits[:10], 11) == digits[10]
