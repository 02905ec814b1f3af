"""
Lambda function construct for the Users API.

A single function serves every method on /user and routes internally by
HTTP method. Its code is the lambda/users_api directory; boto3 is provided
by the Lambda runtime, so no layer is attached.
"""

from aws_cdk import (
    aws_lambda as lambda_,
    aws_dynamodb as dynamodb,
    Duration,
)
from constructs import Construct


class UsersApiLambdaConstruct(Construct):
    """
    Construct that creates the Users API Lambda function.

    Attributes:
        api_lambda: Lambda function handling /user requests
    """

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        users_table: dynamodb.Table,
        **kwargs
    ) -> None:
        """
        Initialize Lambda function construct.

        Args:
            scope: CDK construct scope
            construct_id: Unique construct identifier
            users_table: DynamoDB users table
        """
        super().__init__(scope, construct_id, **kwargs)

        # AWS_REGION is set by the Lambda runtime itself
        self.api_lambda = lambda_.Function(
            self,
            'UsersApiLambda',
            function_name='users-api',
            description='Users API - get, list, create, update and delete users by email',
            code=lambda_.Code.from_asset('../lambda/users_api'),
            handler='handler.handler',
            runtime=lambda_.Runtime.PYTHON_3_12,
            memory_size=256,
            timeout=Duration.seconds(30),
            environment={
                'USERS_TABLE_NAME': users_table.table_name,
            },
        )

        # Get, scan, put and delete on the users table
        users_table.grant_read_write_data(self.api_lambda)
