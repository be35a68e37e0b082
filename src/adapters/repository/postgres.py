"""
PostgreSQL repository adapter - Implements UserRepository protocol.

This module provides the PostgreSQL implementation of the domain's
outbound port using psycopg3 with raw SQL.

Mapping
-------
Rows store plain strings; the domain uses value objects. Rows are turned
back into User entities via User.from_raw(), which re-validates email and
national id on the way in.

Uniqueness
----------
The UNIQUE constraint on users.email is the backstop for the
check-then-save race in UserService.create(). A concurrent loser gets
psycopg.errors.UniqueViolation from save(); it is not translated here.
"""

import logging
from pathlib import Path

from psycopg_pool import ConnectionPool

from src.domain.exceptions import NotFound
from src.domain.user import User

logger = logging.getLogger(__name__)

_COLUMNS = "id, name, email, national_id"
MIGRATIONS_DIR = Path(__file__).resolve().parents[3] / "migrations"


class PostgresUserRepository:
    """
    Implements UserRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries for security.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    def save(self, user: User) -> User:
        """
        Insert a transient user or update a persisted one.

        Returns:
            User rebuilt from the stored row (with id)

        Raises:
            NotFound: If an update targets an id that no longer has a row
        """
        if user.id is None:
            sql = f"""
                INSERT INTO users (name, email, national_id)
                VALUES (%s, %s, %s)
                RETURNING {_COLUMNS}
            """
            params: tuple = (user.name, user.email_value, user.national_id_value)
        else:
            sql = f"""
                UPDATE users
                SET name = %s, email = %s, national_id = %s
                WHERE id = %s
                RETURNING {_COLUMNS}
            """
            params = (user.name, user.email_value, user.national_id_value, user.id)

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, params)
            row = cursor.fetchone()
            conn.commit()

        if row is None:
            raise NotFound(f"no user found with id: {user.id}")
        return _to_domain(row)

    def find_by_id(self, user_id: int) -> User | None:
        sql = f"SELECT {_COLUMNS} FROM users WHERE id = %s"

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (user_id,))
            row = cursor.fetchone()

        return _to_domain(row) if row is not None else None

    def find_all(self) -> list[User]:
        sql = f"SELECT {_COLUMNS} FROM users ORDER BY id"

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql)
            rows = cursor.fetchall()

        return [_to_domain(row) for row in rows]

    def delete(self, user_id: int) -> None:
        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute("DELETE FROM users WHERE id = %s", (user_id,))
            conn.commit()

    def find_by_email(self, email: str) -> User | None:
        """
        Look up a user by normalized email.

        Args:
            email: Normalized email address (lowercase, stripped)
        """
        sql = f"SELECT {_COLUMNS} FROM users WHERE email = %s"

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (email,))
            row = cursor.fetchone()

        return _to_domain(row) if row is not None else None


def _to_domain(row: tuple) -> User:
    user_id, name, email, national_id = row
    return User.from_raw(name, email, national_id, id=user_id)


def run_migrations(pool: ConnectionPool, migrations_dir: Path = MIGRATIONS_DIR) -> list[str]:
    """
    Apply every *.sql file in migrations_dir, in filename order.

    Files must be idempotent; they are re-applied on every startup.

    Returns:
        Names of the files applied (empty if the directory is missing)

    Raises:
        RuntimeError: If a file fails; the remaining files are not applied
    """
    if not migrations_dir.is_dir():
        logger.warning("Migrations directory not found: %s", migrations_dir)
        return []

    applied: list[str] = []
    for sql_file in sorted(migrations_dir.glob("*.sql")):
        try:
            with pool.connection() as conn:
                conn.execute(sql_file.read_text())
        except Exception as e:
            logger.error("Migration %s failed: %s", sql_file.name, e)
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
        logger.debug("Applied migration %s", sql_file.name)
        applied.append(sql_file.name)

    return applied
