"""
Shared type definitions for the Users API.

This module defines TypedDict classes for the domain model and the
API Gateway proxy shapes the handler consumes and produces.
"""

from typing import TypedDict, Literal, Dict, Any, Optional

# Routing target: a single user (email given) or the whole table
RouteTarget = Literal['item', 'collection']


class User(TypedDict):
    """User domain model. The email is the table's partition key."""
    email: str
    firstName: str
    lastName: str


class RouteRequest(TypedDict):
    """Parts of an API Gateway event the router dispatches on."""
    method: str
    email: str
    body: Optional[str]


class ApiResponse(TypedDict):
    """Lambda proxy integration response."""
    statusCode: int
    headers: Dict[str, str]
    body: str


class ErrorResponse(TypedDict):
    """Standard error response structure."""
    code: str
    message: str
    details: Dict[str, Any]


def empty_user() -> User:
    """Return a User with every field empty."""
    return {'email': '', 'firstName': '', 'lastName': ''}
