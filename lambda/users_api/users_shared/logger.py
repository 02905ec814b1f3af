"""
Structured logging utility for the Users API handler.

Every log entry is a single JSON line on stdout, which Lambda forwards to
CloudWatch Logs. Entries carry the API Gateway request id as correlation id
and, for terminal events, the request latency.
"""

import json
import time
from typing import Dict, Any
from datetime import datetime, timezone


# Field names that are never written to the log
SENSITIVE_FIELDS = {
    'password',
    'token',
    'secret',
    'apikey',
    'api_key',
    'authorization',
    'auth',
    'credentials',
    'privatekey',
    'private_key',
    'accesstoken',
    'access_token',
    'refreshtoken',
    'refresh_token',
    'sessionid',
    'session_id'
}


class StructuredLogger:
    """
    Structured logger for one request.

    Usage:
        logger = StructuredLogger(correlation_id='abc-123', operation='users-api')
        logger.log_request_start(path='/user', method='POST')
        # ... process request ...
        logger.log_request_complete(status_code=200, route='create_user')
    """

    def __init__(self, correlation_id: str, operation: str):
        """
        Initialize the structured logger.

        Args:
            correlation_id: Unique identifier for request tracing
            operation: Operation name written with every entry (e.g., 'users-api')
        """
        self.correlation_id = correlation_id
        self.operation = operation
        self.start_time = time.time()

    def _sanitize_data(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Redact sensitive fields from log data, recursing into dicts and lists.

        Args:
            data: Dictionary that may contain sensitive fields

        Returns:
            Sanitized copy of the dictionary
        """
        if not isinstance(data, dict):
            return data

        sanitized = {}
        for key, value in data.items():
            if key.lower() in SENSITIVE_FIELDS:
                sanitized[key] = '[REDACTED]'
            elif isinstance(value, dict):
                sanitized[key] = self._sanitize_data(value)
            elif isinstance(value, list):
                sanitized[key] = [
                    self._sanitize_data(item) if isinstance(item, dict) else item
                    for item in value
                ]
            else:
                sanitized[key] = value

        return sanitized

    def _latency_ms(self) -> int:
        return int((time.time() - self.start_time) * 1000)

    def _log(self, event: str, **kwargs: Any) -> None:
        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
            'correlationId': self.correlation_id,
            'operation': self.operation,
            'event': event,
            **self._sanitize_data(kwargs)
        }

        # Use print for CloudWatch Logs
        print(json.dumps(log_entry, default=str))

    def log_request_start(self, path: str, method: str, **additional_fields: Any) -> None:
        """
        Log request start event.

        Args:
            path: Request path (e.g., '/user')
            method: HTTP method (e.g., 'POST', 'GET')
            **additional_fields: Additional fields to include in log
        """
        self._log(
            'request_start',
            path=path,
            httpMethod=method,
            **additional_fields
        )

    def log_request_complete(self, status_code: int, **additional_fields: Any) -> None:
        """
        Log request completion event with latency.

        Args:
            status_code: HTTP status code (e.g., 200)
            **additional_fields: Additional fields to include in log
        """
        self._log(
            'request_complete',
            statusCode=status_code,
            latencyMs=self._latency_ms(),
            **additional_fields
        )

    def log_domain_error(
        self,
        error_code: str,
        error_message: str,
        **additional_fields: Any
    ) -> None:
        """
        Log domain error event.

        Domain errors are expected failures (e.g., user already exists,
        store write rejected).

        Args:
            error_code: Error code (e.g., 'USER_ALREADY_EXISTS')
            error_message: Human-readable error message
            **additional_fields: Additional fields to include in log
        """
        self._log(
            'domain_error',
            errorCode=error_code,
            errorMessage=error_message,
            latencyMs=self._latency_ms(),
            **additional_fields
        )

    def log_unexpected_error(
        self,
        error_type: str,
        error_message: str,
        **additional_fields: Any
    ) -> None:
        """
        Log unexpected error event.

        Args:
            error_type: Error type/class name
            error_message: Error message
            **additional_fields: Additional fields to include in log
        """
        self._log(
            'unexpected_error',
            errorType=error_type,
            errorMessage=error_message,
            latencyMs=self._latency_ms(),
            **additional_fields
        )

    def log_fatal(self, message: str, **additional_fields: Any) -> None:
        """Log an unrecoverable error raised before any request is served."""
        self._log(
            'fatal',
            message=message,
            **additional_fields
        )


def create_logger(event: Dict[str, Any], operation: str) -> StructuredLogger:
    """
    Create a structured logger from a Lambda event.

    The correlation ID is the API Gateway request id, or 'unknown' when the
    event carries no request context.

    Args:
        event: API Gateway Lambda proxy integration event
        operation: Operation name (e.g., 'users-api')

    Returns:
        StructuredLogger instance
    """
    request_context = event.get('requestContext') or {}
    correlation_id = request_context.get('requestId', 'unknown')
    return StructuredLogger(correlation_id, operation)
