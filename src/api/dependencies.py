"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.

Composition is explicit: the repository adapter is built over the
connection pool and passed into UserService. The bypass query service
is wired separately and never goes through the domain.
"""

from fastapi import Request
from psycopg_pool import ConnectionPool

from src.adapters.query.postgres import PostgresUserQueryService
from src.adapters.repository.postgres import PostgresUserRepository
from src.domain.users import UserService


def get_pool(request: Request) -> ConnectionPool:
    """
    Get connection pool from app state.

    The pool is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.pool


def get_repository(request: Request) -> PostgresUserRepository:
    """Create repository with connection pool from app state."""
    return PostgresUserRepository(get_pool(request))


def get_user_service(request: Request) -> UserService:
    """Create user service with the injected outbound port."""
    return UserService(repository=get_repository(request))


def get_user_query_service(request: Request) -> PostgresUserQueryService:
    """Create the read-only bypass query service."""
    return PostgresUserQueryService(get_pool(request))
