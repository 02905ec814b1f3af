"""
Integration tests for the Users API.

Tests the complete flow against a deployed stack.
Requires AWS credentials and USERS_API_ENDPOINT, the stack's ApiEndpointUrl
output (e.g. https://abc123.execute-api.us-east-1.amazonaws.com/prod).
"""

import json
import os
import time
import uuid

import boto3
import pytest
import requests
from botocore.auth import SigV4Auth
from botocore.awsrequest import AWSRequest

API_ENDPOINT = os.environ.get('USERS_API_ENDPOINT', '').rstrip('/')
REGION = os.environ.get('USERS_API_REGION', os.environ.get('AWS_REGION', 'us-east-1'))

pytestmark = pytest.mark.skipif(
    not API_ENDPOINT,
    reason='USERS_API_ENDPOINT is not set'
)


class TestUsersApi:
    """Integration tests for the /user resource."""

    def setup_method(self):
        """Setup for each test."""
        self.session = boto3.Session()
        self.credentials = self.session.get_credentials()
        self.test_email = f"test-{int(time.time())}-{uuid.uuid4().hex[:8]}@example.com"
        self.url = f"{API_ENDPOINT}/user"

    def teardown_method(self):
        """Remove the test user."""
        self._send('DELETE', params={'email': self.test_email})

    def _send(self, method: str, body: dict = None, params: dict = None) -> requests.Response:
        """Send a request, signing it with SigV4 when credentials are available."""
        data = json.dumps(body) if body is not None else None
        prepared = requests.Request(method, self.url, params=params, data=data).prepare()
        headers = dict(prepared.headers)

        if self.credentials is not None:
            aws_request = AWSRequest(method=method, url=prepared.url, data=data)
            SigV4Auth(self.credentials, 'execute-api', REGION).add_auth(aws_request)
            headers.update(dict(aws_request.headers))

        return requests.request(method, prepared.url, headers=headers, data=data, timeout=30)

    def _user(self, **overrides) -> dict:
        user = {'email': self.test_email, 'firstName': 'Test', 'lastName': 'User'}
        user.update(overrides)
        return user

    def test_create_and_get_user(self):
        response = self._send('POST', body=self._user())
        assert response.status_code == 200, f"Expected 200, got {response.status_code}: {response.text}"
        assert response.json() == self._user()

        response = self._send('GET', params={'email': self.test_email})
        assert response.status_code == 200
        assert response.json() == self._user()

    def test_duplicate_create_is_rejected(self):
        assert self._send('POST', body=self._user()).status_code == 200

        response = self._send('POST', body=self._user())

        assert response.status_code == 400
        assert response.json()['message'] == 'User already exists'

    def test_invalid_email_is_rejected(self):
        for invalid_email in ['not-an-email', '@example.com', 'user@', 'user space@example.com']:
            response = self._send('POST', body=self._user(email=invalid_email))
            assert response.status_code == 400, f"Email '{invalid_email}' should be invalid"

    def test_update_user(self):
        assert self._send('POST', body=self._user()).status_code == 200

        response = self._send('PUT', body=self._user(lastName='Updated'))

        assert response.status_code == 200
        assert response.json()['lastName'] == 'Updated'

    def test_update_missing_user_is_rejected(self):
        response = self._send('PUT', body=self._user())

        assert response.status_code == 400
        assert response.json()['message'] == 'User does not exist'

    def test_delete_then_get_returns_empty_user(self):
        assert self._send('POST', body=self._user()).status_code == 200

        response = self._send('DELETE', params={'email': self.test_email})
        assert response.status_code == 200

        response = self._send('GET', params={'email': self.test_email})
        assert response.status_code == 200
        assert response.json() == {'email': '', 'firstName': '', 'lastName': ''}

    def test_list_users_includes_created_user(self):
        assert self._send('POST', body=self._user()).status_code == 200

        response = self._send('GET')

        assert response.status_code == 200
        assert self._user() in response.json()
