"""
User request validation.

This module implements input validation for the Users API:
- Email format (used to gate user creation)
- Request body decoding into a JSON object
- Field types of the User shape

Unknown fields in a request body are ignored; missing User fields default
to empty strings.
"""

import json
import re
from typing import Dict, Any, List, Optional

from users_shared.errors import InvalidUserDataError
from users_shared.types import User


USER_FIELDS = ('email', 'firstName', 'lastName')

# RFC 5322 simplified: atext local part, dotted domain of LDH labels.
# The domain must contain at least one dot.
EMAIL_PATTERN = re.compile(
    r"[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r'@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?'
    r'(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)+'
)

EMAIL_MIN_LENGTH = 3
EMAIL_MAX_LENGTH = 254


def validate_email_format(email: Any) -> bool:
    """
    Validate email format using regex.

    The input is not stripped: any whitespace makes the address invalid.

    Args:
        email: Email address to validate

    Returns:
        True if email format is valid, False otherwise

    Examples:
        >>> validate_email_format('user@example.com')
        True

        >>> validate_email_format('invalid-email')
        False

        >>> validate_email_format('user@localhost')
        False
    """
    if not email or not isinstance(email, str):
        return False

    if not EMAIL_MIN_LENGTH <= len(email) <= EMAIL_MAX_LENGTH:
        return False

    return EMAIL_PATTERN.fullmatch(email) is not None


def parse_request_body(body: Optional[str]) -> Dict[str, Any]:
    """
    Decode a raw request body into a JSON object.

    Args:
        body: Raw request body from the API Gateway event

    Returns:
        Decoded JSON object

    Raises:
        InvalidUserDataError: If the body is missing, not JSON, or not an object
    """
    if body is None or body == '':
        raise InvalidUserDataError({'body': 'Request body is required'})

    try:
        request = json.loads(body)
    except (TypeError, ValueError):
        raise InvalidUserDataError({'body': 'Request body must be valid JSON'})

    if not isinstance(request, dict):
        raise InvalidUserDataError({'body': 'Request body must be a JSON object'})

    return request


def validate_user_request(request: Dict[str, Any]) -> List[Dict[str, str]]:
    """
    Validate the field types of a user request.

    Args:
        request: Decoded request payload

    Returns:
        List of validation errors. Empty list if validation passes.
        Each error is a dict with 'field' and 'message' keys.

    Examples:
        >>> validate_user_request({'email': 'a@b.com', 'firstName': 'A'})
        []

        >>> validate_user_request({'email': 42})
        [{'field': 'email', 'message': 'Field must be a string'}]
    """
    errors: List[Dict[str, str]] = []

    for field in USER_FIELDS:
        if field in request and not isinstance(request[field], str):
            errors.append({
                'field': field,
                'message': 'Field must be a string'
            })

    return errors


def to_user(request: Dict[str, Any]) -> User:
    """Project a validated request onto the User shape."""
    return {
        'email': request.get('email', ''),
        'firstName': request.get('firstName', ''),
        'lastName': request.get('lastName', '')
    }


def parse_user(body: Optional[str]) -> User:
    """
    Decode and validate a request body into a User.

    Raises:
        InvalidUserDataError: If the body is malformed or a field has the wrong type
    """
    request = parse_request_body(body)

    errors = validate_user_request(request)
    if errors:
        raise InvalidUserDataError({'errors': errors})

    return to_user(request)
