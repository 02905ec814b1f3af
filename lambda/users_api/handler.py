"""
Users API Lambda handler.

This handler is the single API entry point for the /user resource. It
boots once per cold start and routes each invocation by HTTP method and by
whether an email query parameter identifies a single user:

    GET    /user                -> list every user
    GET    /user?email=<e>      -> fetch one user
    POST   /user                -> create a user from the body
    PUT    /user                -> overwrite a user from the body
    DELETE /user?email=<e>      -> delete a user

Separation of concerns:
- Handler: Parse request, dispatch, map errors to HTTP responses
- Service: Store operations and failure categories (in service.py)
- Validation: Body decoding and email format (in validation.py)
"""

import base64
import binascii
import os
from typing import Any, Callable, Dict, Tuple

import boto3
from botocore.exceptions import BotoCoreError

from service import UserService
from users_shared.errors import DomainError, InvalidUserDataError, MethodNotAllowedError
from users_shared.logger import StructuredLogger, create_logger
from users_shared.responses import create_error_response, create_success_response
from users_shared.types import ApiResponse, RouteRequest, RouteTarget


OPERATION = 'users-api'

# Table holding User records; the deployment may override it
DEFAULT_USERS_TABLE_NAME = 'users'

STATUS_CODE_MAP = {
    'INVALID_USER_DATA': 400,
    'USER_ALREADY_EXISTS': 400,
    'USER_DOES_NOT_EXIST': 400,
    'METHOD_NOT_ALLOWED': 400,
    'FETCH_FAILED': 500,
    'DESERIALIZE_FAILED': 500,
    'MARSHAL_FAILED': 500,
    'PUT_FAILED': 500,
    'DELETE_FAILED': 500,
}


def _load_config() -> Dict[str, str]:
    """
    Load and validate environment variables at startup.

    Returns:
        Configuration dictionary with aws_region and users_table_name

    Raises:
        ValueError: If AWS_REGION is missing
    """
    region = os.environ.get('AWS_REGION')
    if not region:
        raise ValueError('Missing required environment variables: AWS_REGION')

    return {
        'aws_region': region,
        'users_table_name': os.environ.get('USERS_TABLE_NAME') or DEFAULT_USERS_TABLE_NAME,
    }


def _connect(region: str) -> Any:
    """
    Create the DynamoDB client shared by every invocation.

    The process cannot serve any request without a store connection, so a
    failure here exits immediately.

    Raises:
        SystemExit: If the client cannot be created
    """
    try:
        session = boto3.session.Session(region_name=region)
        return session.client('dynamodb')
    except BotoCoreError as error:
        StructuredLogger('boot', OPERATION).log_fatal(
            'DynamoDB client could not be established',
            region=region,
            errorType=type(error).__name__,
            errorMessage=str(error)
        )
        raise SystemExit(1) from error


def _list_users(service: UserService, request: RouteRequest) -> Any:
    return service.fetch_users()


def _get_user(service: UserService, request: RouteRequest) -> Any:
    return service.fetch_user(request['email'])


def _create_user(service: UserService, request: RouteRequest) -> Any:
    return service.create_user(request['body'])


def _update_user(service: UserService, request: RouteRequest) -> Any:
    return service.update_user(request['body'])


def _delete_user(service: UserService, request: RouteRequest) -> Any:
    service.delete_user(request['email'])
    return None


def _reject_missing_email(service: UserService, request: RouteRequest) -> Any:
    raise InvalidUserDataError({'email': 'Query parameter is required'})


Route = Callable[[UserService, RouteRequest], Any]

ROUTES: Dict[Tuple[str, RouteTarget], Route] = {
    ('GET', 'collection'): _list_users,
    ('GET', 'item'): _get_user,
    ('POST', 'collection'): _create_user,
    ('POST', 'item'): _create_user,
    ('PUT', 'collection'): _update_user,
    ('PUT', 'item'): _update_user,
    ('DELETE', 'item'): _delete_user,
    ('DELETE', 'collection'): _reject_missing_email,
}


def _parse_request(event: Dict[str, Any]) -> RouteRequest:
    """
    Extract the method, email query parameter and body from an event.

    Base64-encoded bodies are decoded; an undecodable body is passed on as
    None so that body-reading routes reject it as invalid user data.
    """
    query_params = event.get('queryStringParameters') or {}
    body = event.get('body')

    if body is not None and event.get('isBase64Encoded'):
        try:
            body = base64.b64decode(body, validate=True).decode('utf-8')
        except (binascii.Error, UnicodeDecodeError):
            body = None

    return {
        'method': (event.get('httpMethod') or '').upper(),
        'email': query_params.get('email') or '',
        'body': body,
    }


def route(event: Dict[str, Any], service: UserService) -> ApiResponse:
    """
    Dispatch one API Gateway event to the user service.

    Request flow:
    1. Create structured logger with correlation ID
    2. Resolve (method, target) to a route
    3. Run the route against the service
    4. Map domain errors to HTTP responses

    Args:
        event: API Gateway Lambda proxy integration event
        service: User service bound to the users table

    Returns:
        API Gateway Lambda proxy integration response

    Response codes:
        200: Success
        400: Invalid user data, user exists / does not exist, unsupported method
        500: Store failure or unexpected error
    """
    logger = create_logger(event, operation=OPERATION)
    request = _parse_request(event)
    target: RouteTarget = 'item' if request['email'] else 'collection'

    logger.log_request_start(
        path=event.get('path', '/user'),
        method=request['method'],
        target=target
    )

    try:
        operation = ROUTES.get((request['method'], target))
        if operation is None:
            raise MethodNotAllowedError(request['method'])

        result = operation(service, request)

    except DomainError as error:
        status_code = STATUS_CODE_MAP.get(error.code, 500)
        logger.log_domain_error(
            error_code=error.code,
            error_message=error.message,
            statusCode=status_code
        )
        return create_error_response(
            status_code,
            error.code,
            error.message,
            error.details
        )

    except Exception as error:
        # Do not expose internal details to client
        logger.log_unexpected_error(
            error_type=type(error).__name__,
            error_message=str(error)
        )
        return create_error_response(
            500,
            'INTERNAL_ERROR',
            'An unexpected error occurred',
            {}
        )

    logger.log_request_complete(status_code=200, route=operation.__name__.lstrip('_'))
    return create_success_response(200, result)


# Configuration and store connection are built once per cold start
config = _load_config()
dynamodb_client = _connect(config['aws_region'])
user_service = UserService(dynamodb_client, config['users_table_name'])


def handler(event: Dict[str, Any], context: Any) -> ApiResponse:
    """
    Lambda handler for the /user resource.

    Args:
        event: API Gateway Lambda proxy integration event
        context: Lambda context object

    Returns:
        API Gateway Lambda proxy integration response
    """
    return route(event, user_service)
