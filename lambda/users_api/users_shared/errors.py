"""
Domain error classes for the Users API.

Each class is one flat failure category raised by the user service and mapped
to an HTTP response by the handler layer. The message is the human-readable
label returned to the caller; the code is the stable machine-readable key.
"""

from typing import Dict, Any, Optional


class DomainError(Exception):
    """
    Base class for all domain errors.

    Domain errors are expected failures that the handler maps to an HTTP
    response. They never carry stack traces or store internals to the caller.
    """

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}


class FetchFailedError(DomainError):
    """
    Raised when the store cannot serve a read (get or scan).

    Maps to HTTP 500.
    """

    def __init__(self, details: Optional[Dict[str, Any]] = None):
        super().__init__('FETCH_FAILED', 'Failed to fetch record', details)


class DeserializeFailedError(DomainError):
    """
    Raised when a stored item does not map onto the User shape.

    Maps to HTTP 500.
    """

    def __init__(self, details: Optional[Dict[str, Any]] = None):
        super().__init__('DESERIALIZE_FAILED', 'Failed to unmarshal record', details)


class InvalidUserDataError(DomainError):
    """
    Raised when a request body is malformed or fails validation.

    Maps to HTTP 400.
    Details should contain field-level validation errors.
    """

    def __init__(self, details: Optional[Dict[str, Any]] = None):
        super().__init__('INVALID_USER_DATA', 'Invalid user data', details)


class MarshalFailedError(DomainError):
    """Raised when a User cannot be converted to a DynamoDB item. Maps to HTTP 500."""

    def __init__(self, details: Optional[Dict[str, Any]] = None):
        super().__init__('MARSHAL_FAILED', 'Could not marshal item', details)


class PutFailedError(DomainError):
    """Raised when the store rejects a write. Maps to HTTP 500."""

    def __init__(self, details: Optional[Dict[str, Any]] = None):
        super().__init__('PUT_FAILED', 'Could not dynamo put item', details)


class DeleteFailedError(DomainError):
    """Raised when the store rejects a delete. Maps to HTTP 500."""

    def __init__(self, details: Optional[Dict[str, Any]] = None):
        super().__init__('DELETE_FAILED', 'Could not delete item', details)


class UserAlreadyExistsError(DomainError):
    """
    Raised when creating a user whose email is already stored.

    Maps to HTTP 400.
    """

    def __init__(self, details: Optional[Dict[str, Any]] = None):
        super().__init__('USER_ALREADY_EXISTS', 'User already exists', details)


class UserDoesNotExistError(DomainError):
    """
    Raised when updating a user whose email is not stored.

    Maps to HTTP 400.
    """

    def __init__(self, details: Optional[Dict[str, Any]] = None):
        super().__init__('USER_DOES_NOT_EXIST', 'User does not exist', details)


class MethodNotAllowedError(DomainError):
    """Raised by the router for an unsupported HTTP method. Maps to HTTP 400."""

    def __init__(self, method: str):
        super().__init__('METHOD_NOT_ALLOWED', 'Method not allowed', {'method': method})
