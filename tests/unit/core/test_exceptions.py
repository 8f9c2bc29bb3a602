"""Unit tests for custom exceptions."""

import httpx

from mms_api.core.exceptions import (
    ApiError,
    ApplicationError,
    AuthError,
    ConfigError,
    ResourceError,
    TransportError,
    ValidationError,
)


def _response(status_code: int, text: str) -> httpx.Response:
    request = httpx.Request("GET", "https://mms.example.com/api/public/v1.0/groups")
    return httpx.Response(status_code, text=text, request=request)


class TestApplicationError:
    """Tests for the base exception."""

    def test_default_code(self) -> None:
        """Test base error carries the internal error code."""
        error = ApplicationError("Something failed")
        assert error.message == "Something failed"
        assert error.code == "SYS_INTERNAL_ERROR"
        assert str(error) == "Something failed"


class TestConfigError:
    def test_code(self) -> None:
        """Test config error code."""
        error = ConfigError("Config option `foo` from file `~/.mms-api` is not allowed!")
        assert error.code == "CFG_INVALID"
        assert isinstance(error, ApplicationError)


class TestValidationError:
    def test_details_default_to_empty(self) -> None:
        """Test validation error without details."""
        error = ValidationError("Bad input")
        assert error.details == {}
        assert error.code == "VAL_VALIDATION_ERROR"

    def test_details(self) -> None:
        """Test validation error keeps details."""
        error = ValidationError("Bad source", details={"source": "yesterday"})
        assert error.details == {"source": "yesterday"}


class TestResourceError:
    def test_resource_and_payload(self) -> None:
        """Test resource error names the resource type and keeps the payload."""
        error = ResourceError("Invalid Host payload", resource="Host", payload={"id": 1})
        assert error.resource == "Host"
        assert error.payload == {"id": 1}
        assert error.code == "RES_INVALID_PAYLOAD"


class TestApiErrors:
    """Tests for HTTP level errors."""

    def test_api_error_message(self) -> None:
        """Test API error message includes status code and body."""
        response = _response(500, "Internal failure")
        error = ApiError(response.request, response)

        assert error.status_code == 500
        assert error.body == "Internal failure"
        assert error.message == "API Response error! Code: 500, body: Internal failure"
        assert error.code == "API_RESPONSE_ERROR"
        assert error.response is response

    def test_auth_error_is_api_error(self) -> None:
        """Test auth error is a specialised API error."""
        response = _response(401, "Unauthorized")
        error = AuthError(response.request, response)

        assert isinstance(error, ApiError)
        assert isinstance(error, TransportError)
        assert error.status_code == 401
        assert error.code == "AUTH_UNAUTHORIZED"

    def test_transport_error(self) -> None:
        """Test transport error without a response."""
        error = TransportError("Connection refused")
        assert error.response is None
        assert error.code == "SYS_TRANSPORT_ERROR"
