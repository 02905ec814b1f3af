"""
DynamoDB table construct for the Users API.

One table holds every User record, keyed by email:
- Partition key: email (string), no sort key
- No GSIs or LSIs; listing is a full table scan
- On-demand billing mode for variable workloads

Access Patterns:
1. Get User by email: email=<e>
2. List Users: Scan
"""

from aws_cdk import (
    aws_dynamodb as dynamodb,
    RemovalPolicy,
)
from constructs import Construct


class UsersTableConstruct(Construct):
    """
    Construct that creates the users DynamoDB table.

    Attributes:
        users_table: The users DynamoDB table
    """

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        table_name: str,
        **kwargs
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        self.users_table = dynamodb.Table(
            self,
            "UsersTable",
            table_name=table_name,
            partition_key=dynamodb.Attribute(
                name="email",
                type=dynamodb.AttributeType.STRING
            ),
            billing_mode=dynamodb.BillingMode.PAY_PER_REQUEST,
            point_in_time_recovery=True,
            # Retain user data when the stack is deleted
            removal_policy=RemovalPolicy.RETAIN,
        )
