"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.
Every error raised by the client, the resource models or the agent derives
from ApplicationError and carries a stable code.
"""

from typing import Any


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class ConfigError(ApplicationError):
    """Raised when configuration is missing, unknown or invalid."""

    def __init__(self, message: str = "Invalid configuration") -> None:
        super().__init__(message, code="CFG_INVALID")


class ValidationError(ApplicationError):
    """Raised when caller input fails validation."""

    def __init__(self, message: str = "Validation failed", details: dict | None = None) -> None:
        self.details = details or {}
        super().__init__(message, code="VAL_VALIDATION_ERROR")


class ResourceError(ApplicationError):
    """Raised when a decoded payload does not fit its resource type."""

    def __init__(self, message: str, resource: str, payload: Any = None) -> None:
        self.resource = resource
        self.payload = payload
        super().__init__(message, code="RES_INVALID_PAYLOAD")


class TransportError(ApplicationError):
    """Raised when an HTTP exchange with the API fails."""

    def __init__(
        self,
        message: str,
        request: Any = None,
        response: Any = None,
        code: str = "SYS_TRANSPORT_ERROR",
    ) -> None:
        self.request = request
        self.response = response
        super().__init__(message, code=code)


class ApiError(TransportError):
    """Raised when the API answers with a non-2xx status."""

    def __init__(self, request: Any, response: Any, code: str = "API_RESPONSE_ERROR") -> None:
        self.status_code = response.status_code
        self.body = response.text
        super().__init__(
            f"API Response error! Code: {self.status_code}, body: {self.body}",
            request=request,
            response=response,
            code=code,
        )


class AuthError(ApiError):
    """Raised when the API rejects the credentials."""

    def __init__(self, request: Any, response: Any) -> None:
        super().__init__(request, response, code="AUTH_UNAUTHORIZED")
