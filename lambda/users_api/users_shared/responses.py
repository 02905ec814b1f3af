"""
Response helper functions for the Users API handler.

These functions create consistent Lambda proxy responses. Every response
carries a JSON content type and a JSON-encoded body.
"""

import json
from typing import Dict, Any

from users_shared.types import ApiResponse, ErrorResponse


JSON_HEADERS = {
    'Content-Type': 'application/json'
}


def create_response(status_code: int, data: Any) -> ApiResponse:
    """
    Create a Lambda proxy integration response.

    Serialization failures do not propagate: the body is left empty instead.

    Args:
        status_code: HTTP status code
        data: Response payload to be JSON serialized

    Returns:
        Lambda proxy integration response object
    """
    try:
        body = json.dumps(data)
    except (TypeError, ValueError):
        body = ''

    return {
        'statusCode': status_code,
        'headers': dict(JSON_HEADERS),
        'body': body
    }


def create_success_response(status_code: int, data: Any) -> ApiResponse:
    """
    Create a successful HTTP response.

    Args:
        status_code: HTTP status code (200)
        data: Response payload (a User, a list of Users or None)

    Returns:
        Lambda proxy integration response object
    """
    return create_response(status_code, data)


def create_error_response(
    status_code: int,
    code: str,
    message: str,
    details: Dict[str, Any]
) -> ApiResponse:
    """
    Create an error HTTP response with consistent structure.

    All error responses follow the format:
    {
        "code": "ERROR_CODE",
        "message": "Human-readable message",
        "details": { ... }
    }

    Args:
        status_code: HTTP status code (400, 500)
        code: Error code string (INVALID_USER_DATA, USER_ALREADY_EXISTS, etc.)
        message: Human-readable error message
        details: Additional error context (field errors, offending email, etc.)

    Returns:
        Lambda proxy integration response object
    """
    error: ErrorResponse = {
        'code': code,
        'message': message,
        'details': details
    }
    return create_response(status_code, error)
