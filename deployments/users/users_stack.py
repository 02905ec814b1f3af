"""
Users API CDK Stack.

This module defines the CDK stack for the Users API: the users table, the
Lambda function serving /user, and the REST API in front of it.

Stack naming convention: <service>-<env>-stack (e.g., users-api-prod-stack)

Usage Example:
    from aws_cdk import App
    from users.users_stack import UsersApiStack

    app = App()
    UsersApiStack(app, 'users-api-dev-stack', env_name='dev')
    app.synth()
"""

from aws_cdk import (
    Stack,
    CfnOutput,
    Tags,
)
from constructs import Construct

from .table_construct import UsersTableConstruct
from .lambda_constructs import UsersApiLambdaConstruct
from .api_construct import UsersApiConstruct


DEFAULT_USERS_TABLE_NAME = 'users'


class UsersApiStack(Stack):
    """
    Main CDK stack for the Users API.

    Attributes:
        table: DynamoDB table construct
        function: Lambda function construct
        api: API Gateway construct
    """

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        env_name: str = 'dev',
        table_name: str = DEFAULT_USERS_TABLE_NAME,
        **kwargs
    ) -> None:
        """
        Initialize Users API Stack.

        Args:
            scope: CDK app scope
            construct_id: Stack identifier (should follow <service>-<env>-stack convention)
            env_name: Environment name (dev, staging, prod, etc.)
            table_name: Physical name of the users table
            **kwargs: Additional stack properties (env, description, etc.)
        """
        super().__init__(scope, construct_id, **kwargs)

        self.env_name = env_name

        Tags.of(self).add('Service', 'users-api')
        Tags.of(self).add('Environment', env_name)
        Tags.of(self).add('ManagedBy', 'CDK')

        # Table first: the function's environment and grants reference it
        self.table = UsersTableConstruct(
            self,
            'Table',
            table_name=table_name,
        )

        self.function = UsersApiLambdaConstruct(
            self,
            'Function',
            users_table=self.table.users_table,
        )

        self.api = UsersApiConstruct(
            self,
            'Api',
            api_lambda=self.function.api_lambda,
        )

        CfnOutput(
            self,
            'ApiEndpointUrl',
            value=self.api.api.url,
            description='Users API endpoint URL',
            export_name=f'{construct_id}-api-url',
        )

        CfnOutput(
            self,
            'UsersTableName',
            value=self.table.users_table.table_name,
            description='Users DynamoDB table name',
            export_name=f'{construct_id}-users-table',
        )
