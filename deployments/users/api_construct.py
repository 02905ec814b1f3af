"""
API Gateway construct for the Users API.

This module defines the REST API exposing the /user resource through a
Lambda proxy integration. Every method goes to the same function, which
routes by HTTP method and the optional email query parameter.

API Endpoints:
1. GET /user[?email=<e>] - List users, or fetch one user
2. POST /user - Create a user
3. PUT /user - Overwrite a user
4. DELETE /user?email=<e> - Delete a user

Body and email validation happen in the function, not at the gateway.
"""

from aws_cdk import (
    aws_apigateway as apigw,
    aws_lambda as lambda_,
)
from constructs import Construct


USER_METHODS = ('GET', 'POST', 'PUT', 'DELETE')


class UsersApiConstruct(Construct):
    """
    Construct that creates the REST API Gateway for the Users API.

    Attributes:
        api: The REST API Gateway instance
        user_resource: The /user resource
    """

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        api_lambda: lambda_.Function,
        **kwargs
    ) -> None:
        """
        Initialize API Gateway construct.

        Args:
            scope: CDK construct scope
            construct_id: Unique construct identifier
            api_lambda: Lambda function handling /user requests
        """
        super().__init__(scope, construct_id, **kwargs)

        self.api = apigw.RestApi(
            self,
            'UsersApi',
            rest_api_name='users-api',
            description='Users API',
            deploy=True,
            deploy_options=apigw.StageOptions(
                stage_name='prod',
                throttling_rate_limit=1000,  # requests per second
                throttling_burst_limit=2000,  # concurrent requests
                logging_level=apigw.MethodLoggingLevel.INFO,
                metrics_enabled=False,
            ),
            cloud_watch_role=True,
        )

        integration = apigw.LambdaIntegration(api_lambda)

        self.user_resource = self.api.root.add_resource('user')

        for method in USER_METHODS:
            self.user_resource.add_method(
                method,
                integration,
                authorization_type=apigw.AuthorizationType.NONE,
                request_parameters={
                    'method.request.querystring.email': False,
                },
                method_responses=[
                    apigw.MethodResponse(
                        status_code='200',
                        response_models={
                            'application/json': apigw.Model.EMPTY_MODEL
                        }
                    ),
                    apigw.MethodResponse(status_code='400'),
                    apigw.MethodResponse(status_code='500'),
                ]
            )
