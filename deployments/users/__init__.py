"""Users API CDK constructs."""

from .table_construct import UsersTableConstruct
from .lambda_constructs import UsersApiLambdaConstruct
from .api_construct import UsersApiConstruct

__all__ = [
    "UsersTableConstruct",
    "UsersApiLambdaConstruct",
    "UsersApiConstruct",
]
