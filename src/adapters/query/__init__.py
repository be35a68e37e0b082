"""Query adapters - Read-only paths that bypass the domain."""

from .postgres import PostgresUserQueryService, UserRecord

__all__ = ["PostgresUserQueryService", "UserRecord"]
