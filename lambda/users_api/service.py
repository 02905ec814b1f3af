"""
User service.

This module implements the four store operations of the Users API against a
single DynamoDB table keyed by email:
- Fetch one user by email, or every user with a full table scan
- Create and update (full overwrite) a user
- Delete a user by email

Store failures are translated into the flat domain error categories in
users_shared.errors. The DynamoDB client is injected once at cold start and
shared by every invocation; the service itself holds no mutable state.
"""

from typing import Any, Dict, List, Optional, Type

from boto3.dynamodb.types import TypeDeserializer, TypeSerializer
from botocore.exceptions import BotoCoreError, ClientError

from users_shared.errors import (
    DeleteFailedError,
    DeserializeFailedError,
    DomainError,
    FetchFailedError,
    InvalidUserDataError,
    MarshalFailedError,
    PutFailedError,
    UserAlreadyExistsError,
    UserDoesNotExistError,
)
from users_shared.types import User, empty_user
from validation import USER_FIELDS, parse_user, validate_email_format


CONDITIONAL_CHECK_FAILED = 'ConditionalCheckFailedException'


class UserService:
    """
    Service class for user operations.

    Every public method is a single synchronous round trip to DynamoDB,
    except create_user and update_user, which read before they write. The
    write is conditional on the key's absence (create) or presence (update),
    so a concurrent writer between the read and the write is rejected by
    DynamoDB rather than silently overwritten.
    """

    def __init__(self, dynamodb_client: Any, table_name: str):
        """
        Initialize the UserService.

        Args:
            dynamodb_client: Low-level boto3 DynamoDB client
            table_name: Name of the DynamoDB table holding users
        """
        self.dynamodb_client = dynamodb_client
        self.table_name = table_name
        self._serializer = TypeSerializer()
        self._deserializer = TypeDeserializer()

    def find_user(self, email: str) -> Optional[User]:
        """
        Look up a user by email.

        Args:
            email: Partition key of the user

        Returns:
            The stored user, or None if no item has this email

        Raises:
            FetchFailedError: If the store read fails
            DeserializeFailedError: If the stored item is not a User
        """
        try:
            response = self.dynamodb_client.get_item(
                TableName=self.table_name,
                Key={'email': {'S': email}}
            )
        except (ClientError, BotoCoreError) as error:
            raise FetchFailedError({'email': email}) from error

        item = response.get('Item')
        if not item:
            return None

        return self._unmarshal(item)

    def _user_exists(self, email: str) -> bool:
        """
        Check whether an item with this email is stored.

        Only the key is read, so a stored item that is not a valid User
        still counts as present and can be overwritten by update_user.

        Raises:
            FetchFailedError: If the store read fails
        """
        try:
            response = self.dynamodb_client.get_item(
                TableName=self.table_name,
                Key={'email': {'S': email}},
                ProjectionExpression='email'
            )
        except (ClientError, BotoCoreError) as error:
            raise FetchFailedError({'email': email}) from error

        return bool(response.get('Item'))

    def fetch_user(self, email: str) -> User:
        """
        Fetch a user by email.

        An absent user is returned as a User with every field empty rather
        than as an error; callers that need to tell the two apart use
        find_user.

        Raises:
            FetchFailedError: If the store read fails
            DeserializeFailedError: If the stored item is not a User
        """
        user = self.find_user(email)
        if user is None:
            return empty_user()
        return user

    def fetch_users(self) -> List[User]:
        """
        Fetch every user with a full table scan.

        Follows LastEvaluatedKey until the table is exhausted, so the call
        blocks for as long as the whole table takes to read.

        Raises:
            FetchFailedError: If any scan page fails
            DeserializeFailedError: If any stored item is not a User
        """
        items: List[Dict[str, Any]] = []
        paginator = self.dynamodb_client.get_paginator('scan')

        try:
            for page in paginator.paginate(TableName=self.table_name):
                items.extend(page.get('Items', []))
        except (ClientError, BotoCoreError) as error:
            raise FetchFailedError({'table': self.table_name}) from error

        return [self._unmarshal(item) for item in items]

    def create_user(self, body: Optional[str]) -> User:
        """
        Create a user from a JSON request body.

        Args:
            body: Raw JSON body with email, firstName and lastName

        Returns:
            The created user

        Raises:
            InvalidUserDataError: If the body is malformed or the email is invalid
            UserAlreadyExistsError: If a user with this email is already stored
            FetchFailedError: If the existence check fails
            MarshalFailedError: If the user cannot be converted to an item
            PutFailedError: If the store write fails
        """
        user = parse_user(body)

        if not validate_email_format(user['email']):
            raise InvalidUserDataError({
                'errors': [{'field': 'email', 'message': 'Invalid email format'}]
            })

        if self._user_exists(user['email']):
            raise UserAlreadyExistsError({'email': user['email']})

        self._put_user(
            user,
            condition_expression='attribute_not_exists(email)',
            conflict_error=UserAlreadyExistsError
        )
        return user

    def update_user(self, body: Optional[str]) -> User:
        """
        Overwrite an existing user from a JSON request body.

        The stored item is fully replaced; fields missing from the body are
        stored as empty strings. The email format is not re-validated here.

        Args:
            body: Raw JSON body with email, firstName and lastName

        Returns:
            The updated user

        Raises:
            InvalidUserDataError: If the body is malformed
            UserDoesNotExistError: If no user with this email is stored
            FetchFailedError: If the existence check fails
            MarshalFailedError: If the user cannot be converted to an item
            PutFailedError: If the store write fails
        """
        user = parse_user(body)

        # An empty string can never be a stored partition key
        if not user['email'] or not self._user_exists(user['email']):
            raise UserDoesNotExistError({'email': user['email']})

        self._put_user(
            user,
            condition_expression='attribute_exists(email)',
            conflict_error=UserDoesNotExistError
        )
        return user

    def delete_user(self, email: str) -> None:
        """
        Delete a user by email.

        Deleting an email that is not stored succeeds.

        Raises:
            DeleteFailedError: If the store delete fails
        """
        try:
            self.dynamodb_client.delete_item(
                TableName=self.table_name,
                Key={'email': {'S': email}}
            )
        except (ClientError, BotoCoreError) as error:
            raise DeleteFailedError({'email': email}) from error

    def _put_user(
        self,
        user: User,
        condition_expression: str,
        conflict_error: Type[DomainError]
    ) -> None:
        item = self._marshal(user)

        try:
            self.dynamodb_client.put_item(
                TableName=self.table_name,
                Item=item,
                ConditionExpression=condition_expression
            )
        except ClientError as error:
            if error.response.get('Error', {}).get('Code') == CONDITIONAL_CHECK_FAILED:
                raise conflict_error({'email': user['email']}) from error
            raise PutFailedError({'email': user['email']}) from error
        except BotoCoreError as error:
            raise PutFailedError({'email': user['email']}) from error

    def _marshal(self, user: User) -> Dict[str, Any]:
        """Convert a User into a DynamoDB attribute-value map."""
        try:
            return {key: self._serializer.serialize(value) for key, value in user.items()}
        except (TypeError, ValueError) as error:
            raise MarshalFailedError({'email': user.get('email', '')}) from error

    def _unmarshal(self, item: Dict[str, Any]) -> User:
        """
        Convert a DynamoDB attribute-value map into a User.

        Attributes outside the User shape are dropped; missing ones are empty.
        Any User attribute that is not a string fails the whole item.
        """
        try:
            record = {key: self._deserializer.deserialize(value) for key, value in item.items()}
        except (TypeError, ValueError) as error:
            raise DeserializeFailedError() from error

        user = empty_user()
        for field in USER_FIELDS:
            value = record.get(field, '')
            if not isinstance(value, str):
                raise DeserializeFailedError({'field': field})
            user[field] = value

        return user
