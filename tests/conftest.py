"""
Shared fixtures for the Users API tests.

The Lambda code lives in lambda/users_api and imports its siblings as
top-level modules, exactly as it does inside the Lambda runtime.
"""

import os
import sys

import boto3
import pytest
from moto import mock_aws

LAMBDA_DIR = os.path.abspath(
    os.path.join(os.path.dirname(__file__), '..', 'lambda', 'users_api')
)
sys.path.insert(0, LAMBDA_DIR)

# Environment for handler.py, read once when it is first imported.
# Fake credentials keep boto3 away from any real account.
REGION = 'us-east-1'
TABLE_NAME = 'users-test'

os.environ['AWS_REGION'] = REGION
os.environ['AWS_DEFAULT_REGION'] = REGION
os.environ['AWS_ACCESS_KEY_ID'] = 'testing'
os.environ['AWS_SECRET_ACCESS_KEY'] = 'testing'
os.environ['AWS_SECURITY_TOKEN'] = 'testing'
os.environ['AWS_SESSION_TOKEN'] = 'testing'
os.environ['USERS_TABLE_NAME'] = TABLE_NAME


@pytest.fixture
def table_name():
    return TABLE_NAME


@pytest.fixture
def dynamodb_client():
    """DynamoDB client against an in-memory users table."""
    with mock_aws():
        client = boto3.client('dynamodb', region_name=REGION)
        client.create_table(
            TableName=TABLE_NAME,
            KeySchema=[{'AttributeName': 'email', 'KeyType': 'HASH'}],
            AttributeDefinitions=[{'AttributeName': 'email', 'AttributeType': 'S'}],
            BillingMode='PAY_PER_REQUEST'
        )
        yield client


@pytest.fixture
def user_service(dynamodb_client):
    from service import UserService
    return UserService(dynamodb_client, TABLE_NAME)


@pytest.fixture
def ada():
    return {'email': 'ada@example.com', 'firstName': 'Ada', 'lastName': 'Lovelace'}
