"""
API v1 routes.

Defines REST endpoints for the user registry API.

Writes (create, remove) go through the domain's UserService.
Simple reads (list, lookup, count) use the bypass query service.
"""

from fastapi import APIRouter, Depends, HTTPException, Response, status

from src.adapters.query.postgres import PostgresUserQueryService, UserRecord
from src.api.dependencies import get_user_query_service, get_user_service
from src.api.models import (
    CountResponse,
    ErrorResponse,
    UserListResponse,
    UserRequest,
    UserResponse,
)
from src.domain.exceptions import ErrorKind, UserError
from src.domain.user import User
from src.domain.users import UserService
from src.domain.value_objects import Email, NationalId

router = APIRouter(tags=["v1"])

_STATUS_BY_KIND = {
    ErrorKind.INVALID_VALUE_OBJECT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.MISSING_ARGUMENT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    ErrorKind.DUPLICATE_CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


def _http_error(error: UserError) -> HTTPException:
    return HTTPException(status_code=_STATUS_BY_KIND[error.kind], detail=error.message)


def _user_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        name=user.name,
        email=user.email_value,
        national_id=user.national_id_value,
        national_id_formatted=user.national_id.formatted if user.has_national_id() else None,
    )


def _record_response(record: UserRecord) -> UserResponse:
    return UserResponse(
        id=record.id,
        name=record.name,
        email=record.email,
        national_id=record.national_id,
        national_id_formatted=record.national_id_formatted,
    )


@router.post(
    "/users",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid user data"},
        409: {"model": ErrorResponse, "description": "Email already registered"},
    },
    summary="Create a user",
    description="Register a user with name, email and national id. "
    "The email must not already be registered.",
)
def create_user(
    request_data: UserRequest,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """
    Create a user.

    - **name**: Display name (required, non-blank)
    - **email**: Email address
    - **national_id**: 11-digit national id (formatted or digits only)
    """
    try:
        email = Email.of(request_data.email)
        national_id = NationalId.of(request_data.national_id)
        user = service.create(request_data.name, email, national_id)
    except UserError as e:
        raise _http_error(e) from None
    return _user_response(user)


@router.get(
    "/users",
    response_model=list[UserListResponse],
    summary="List users",
)
def list_users(
    queries: PostgresUserQueryService = Depends(get_user_query_service),
) -> list[UserListResponse]:
    return [
        UserListResponse(id=record.id, name=record.name, email=record.email)
        for record in queries.list_users()
    ]


@router.get(
    "/users/count",
    response_model=CountResponse,
    summary="Count users",
)
def count_users(
    queries: PostgresUserQueryService = Depends(get_user_query_service),
) -> CountResponse:
    return CountResponse(count=queries.count_users())


@router.get(
    "/users/email/{email}",
    response_model=UserResponse,
    responses={404: {"model": ErrorResponse, "description": "User not found"}},
    summary="Find a user by email",
)
def find_user_by_email(
    email: str,
    queries: PostgresUserQueryService = Depends(get_user_query_service),
) -> UserResponse:
    record = queries.find_by_email(email)
    if record is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"no user found with email: {email.strip().lower()}",
        )
    return _record_response(record)


@router.get(
    "/users/{user_id}",
    response_model=UserResponse,
    responses={404: {"model": ErrorResponse, "description": "User not found"}},
    summary="Find a user by id",
)
def find_user(
    user_id: int,
    queries: PostgresUserQueryService = Depends(get_user_query_service),
) -> UserResponse:
    record = queries.find_by_id(user_id)
    if record is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"no user found with id: {user_id}",
        )
    return _record_response(record)


@router.delete(
    "/users/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": ErrorResponse, "description": "User not found"}},
    summary="Remove a user",
)
def remove_user(
    user_id: int,
    service: UserService = Depends(get_user_service),
) -> Response:
    try:
        service.remove(user_id)
    except UserError as e:
        raise _http_error(e) from None
    return Response(status_code=status.HTTP_204_NO_CONTENT)
