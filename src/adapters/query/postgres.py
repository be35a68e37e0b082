"""
PostgreSQL query adapter - Read-only bypass path.

Simple listings and lookups that carry no business rule go straight to
the database and skip the domain entirely: no value objects are built
and no entity validation runs.

Anything that needs the duplicate-email rule or an existence check
(create, remove) must go through UserService instead.
"""

import logging
from dataclasses import dataclass

from psycopg_pool import ConnectionPool

logger = logging.getLogger(__name__)

_COLUMNS = "id, name, email, national_id"


@dataclass(frozen=True)
class UserRecord:
    """Plain row from the users table."""

    id: int
    name: str
    email: str
    national_id: str | None

    @property
    def national_id_formatted(self) -> str | None:
        """Stored digits as XXX.XXX.XXX-XX; no check-digit validation."""
        v = self.national_id
        if not v:
            return None
        return f"{v[0:3]}.{v[3:6]}.{v[6:9]}-{v[9:11]}"


class PostgresUserQueryService:
    """Read-only queries against the users table (bypasses the domain)."""

    def __init__(self, pool: ConnectionPool) -> None:
        self._pool = pool

    def list_users(self) -> list[UserRecord]:
        logger.info("Query: list users (bypass domain)")

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(f"SELECT {_COLUMNS} FROM users ORDER BY id")
            rows = cursor.fetchall()

        return [UserRecord(*row) for row in rows]

    def find_by_id(self, user_id: int) -> UserRecord | None:
        logger.info("Query: find user by id %s (bypass domain)", user_id)

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(f"SELECT {_COLUMNS} FROM users WHERE id = %s", (user_id,))
            row = cursor.fetchone()

        return UserRecord(*row) if row is not None else None

    def find_by_email(self, email: str) -> UserRecord | None:
        """Lookup by email; input is stripped and lowercased to match stored form."""
        normalized = email.strip().lower()
        logger.info("Query: find user by email %s (bypass domain)", normalized)

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(f"SELECT {_COLUMNS} FROM users WHERE email = %s", (normalized,))
            row = cursor.fetchone()

        return UserRecord(*row) if row is not None else None

    def count_users(self) -> int:
        logger.info("Query: count users (bypass domain)")

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute("SELECT COUNT(*) FROM users")
            row = cursor.fetchone()

        return row[0] if row is not None else 0
