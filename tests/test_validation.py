"""
Unit tests for validation functions.
Tests email format checks and request body decoding.
"""

import json

import pytest

from users_shared.errors import InvalidUserDataError
from validation import (
    parse_request_body,
    parse_user,
    to_user,
    validate_email_format,
    validate_user_request,
)


class TestEmailFormat:
    """Test email format validation."""

    @pytest.mark.parametrize('email', [
        'user@example.com',
        'user.name@example.com',
        'user+tag@example.co.uk',
        'user_name@sub.example.com',
        'user123@example.org',
        'first.last@example.com',
        'a@b.co',
        "o'brien@example-mail.com",
    ])
    def test_valid_email_formats(self, email):
        """Test various valid email formats are accepted."""
        assert validate_email_format(email) is True

    @pytest.mark.parametrize('email', [
        'notanemail',
        'user@',
        '@example.com',
        'user@localhost',
        'user@@example.com',
        'user@-example.com',
        'user@example-.com',
        'user@example..com',
        'user@.example.com',
        'user@example.com.',
    ])
    def test_invalid_email_formats(self, email):
        """Test malformed emails are rejected."""
        assert validate_email_format(email) is False

    @pytest.mark.parametrize('email', [
        'user name@example.com',
        ' user@example.com',
        'user@example.com ',
        'user@example.com\n',
        'user@exa\tmple.com',
    ])
    def test_whitespace_is_rejected(self, email):
        """Test emails are not stripped before matching."""
        assert validate_email_format(email) is False

    @pytest.mark.parametrize('email', ['', None, 42, ['a@b.com']])
    def test_empty_and_non_string(self, email):
        """Test empty and non-string input is invalid."""
        assert validate_email_format(email) is False

    def test_length_limit(self):
        """Test addresses longer than 254 characters are rejected."""
        domain = '.'.join(['a' * 63] * 4) + '.com'
        assert validate_email_format('u@' + domain) is False
        assert validate_email_format('u@' + '.'.join(['a' * 60] * 3) + '.com') is True


class TestParseRequestBody:
    """Test request body decoding."""

    def test_valid_object(self):
        assert parse_request_body('{"email": "a@b.com"}') == {'email': 'a@b.com'}

    @pytest.mark.parametrize('body', [None, ''])
    def test_missing_body(self, body):
        with pytest.raises(InvalidUserDataError) as exc_info:
            parse_request_body(body)
        assert exc_info.value.details == {'body': 'Request body is required'}

    def test_invalid_json(self):
        with pytest.raises(InvalidUserDataError) as exc_info:
            parse_request_body('{"email": ')
        assert exc_info.value.message == 'Invalid user data'

    @pytest.mark.parametrize('body', ['[]', '"a@b.com"', '42', 'null'])
    def test_non_object_json(self, body):
        with pytest.raises(InvalidUserDataError):
            parse_request_body(body)


class TestUserRequest:
    """Test User field validation and projection."""

    def test_valid_request(self):
        request = {'email': 'a@b.com', 'firstName': 'A', 'lastName': 'B'}
        assert validate_user_request(request) == []

    def test_wrong_field_types(self):
        request = {'email': 42, 'firstName': None, 'lastName': ['B']}
        errors = validate_user_request(request)
        assert {e['field'] for e in errors} == {'email', 'firstName', 'lastName'}
        assert all(e['message'] == 'Field must be a string' for e in errors)

    def test_unknown_fields_ignored(self):
        request = {'email': 'a@b.com', 'nickname': 7}
        assert validate_user_request(request) == []
        assert to_user(request) == {'email': 'a@b.com', 'firstName': '', 'lastName': ''}

    def test_parse_user(self):
        body = json.dumps({'email': 'a@b.com', 'firstName': 'A', 'lastName': 'B'})
        assert parse_user(body) == {'email': 'a@b.com', 'firstName': 'A', 'lastName': 'B'}

    def test_parse_user_rejects_wrong_types(self):
        with pytest.raises(InvalidUserDataError) as exc_info:
            parse_user(json.dumps({'email': 'a@b.com', 'firstName': 1}))
        assert exc_info.value.details['errors'] == [
            {'field': 'firstName', 'message': 'Field must be a string'}
        ]
