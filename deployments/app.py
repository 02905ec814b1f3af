#!/usr/bin/env python3
"""
CDK Application Entry Point.

Usage:
    # Synthesize CloudFormation templates
    cdk synth

    # Deploy to development environment
    cdk deploy users-api-dev-stack

Environment Configuration:
    - CDK_DEFAULT_ACCOUNT: AWS account ID
    - CDK_DEFAULT_REGION: AWS region
    - USERS_TABLE_NAME: Physical table name (default: users)
"""

import os
from aws_cdk import App, Environment

from users.users_stack import UsersApiStack, DEFAULT_USERS_TABLE_NAME


app = App()

account = os.environ.get('CDK_DEFAULT_ACCOUNT')
region = os.environ.get('CDK_DEFAULT_REGION')

env = None
if account and region:
    env = Environment(account=account, region=region)

dev_stack = UsersApiStack(
    app,
    'users-api-dev-stack',
    env_name='dev',
    table_name=os.environ.get('USERS_TABLE_NAME', DEFAULT_USERS_TABLE_NAME),
    env=env,
    description='Users API - Development Environment',
)

app.synth()
