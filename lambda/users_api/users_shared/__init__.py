"""Shared utilities for the Users API."""

from .types import (
    User,
    RouteTarget,
    RouteRequest,
    ApiResponse,
    ErrorResponse,
    empty_user
)

from .errors import (
    DomainError,
    FetchFailedError,
    DeserializeFailedError,
    InvalidUserDataError,
    MarshalFailedError,
    PutFailedError,
    DeleteFailedError,
    UserAlreadyExistsError,
    UserDoesNotExistError,
    MethodNotAllowedError
)

from .responses import (
    create_response,
    create_success_response,
    create_error_response
)

__all__ = [
    # Types
    'User',
    'RouteTarget',
    'RouteRequest',
    'ApiResponse',
    'ErrorResponse',
    'empty_user',
    # Errors
    'DomainError',
    'FetchFailedError',
    'DeserializeFailedError',
    'InvalidUserDataError',
    'MarshalFailedError',
    'PutFailedError',
    'DeleteFailedError',
    'UserAlreadyExistsError',
    'UserDoesNotExistError',
    'MethodNotAllowedError',
    # Responses
    'create_response',
    'create_success_response',
    'create_error_response',
]
