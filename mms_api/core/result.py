"""
Operation Results.

The CLI never lets agent errors propagate as control flow. Each agent call is
wrapped with capture(), which returns either Ok(value) or Err(kind, ...).
The presentation layer branches on the variant and maps the error kind to a
message and an exit status.

Usage:
    result = capture(agent.list_hosts)
    if isinstance(result, Err):
        ...
    hosts = result.value
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

from mms_api.core.exceptions import (
    ApiError,
    ApplicationError,
    AuthError,
    ConfigError,
    ResourceError,
    TransportError,
    ValidationError,
)

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Classified failure categories."""

    CONFIG = "config"
    VALIDATION = "validation"
    RESOURCE = "resource"
    TRANSPORT = "transport"
    API = "api"
    AUTH = "auth"


EXIT_CODES: dict[ErrorKind, int] = {
    ErrorKind.CONFIG: 2,
    ErrorKind.VALIDATION: 2,
    ErrorKind.AUTH: 3,
    ErrorKind.API: 4,
    ErrorKind.TRANSPORT: 5,
    ErrorKind.RESOURCE: 6,
}
"""Process exit status per error kind. Unclassified errors exit with 1."""


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful operation outcome."""

    value: T


@dataclass(frozen=True)
class Err:
    """Failed operation outcome."""

    kind: ErrorKind
    message: str
    error: ApplicationError

    @property
    def exit_code(self) -> int:
        return EXIT_CODES[self.kind]


Result = Ok[T] | Err


def classify(error: ApplicationError) -> ErrorKind:
    """Map an application error to its kind. Most specific class wins."""
    # AuthError < ApiError < TransportError
    if isinstance(error, AuthError):
        return ErrorKind.AUTH
    if isinstance(error, ApiError):
        return ErrorKind.API
    if isinstance(error, TransportError):
        return ErrorKind.TRANSPORT
    if isinstance(error, ResourceError):
        return ErrorKind.RESOURCE
    if isinstance(error, ConfigError):
        return ErrorKind.CONFIG
    if isinstance(error, ValidationError):
        return ErrorKind.VALIDATION
    raise TypeError(f"Unclassified application error: {type(error).__name__}")


def capture(operation: Callable[..., T], *args: Any, **kwargs: Any) -> Result[T]:
    """
    Run an operation and return its outcome as a result variant.

    Only ApplicationError subclasses are captured; anything else propagates.
    """
    try:
        return Ok(operation(*args, **kwargs))
    except ApplicationError as e:
        return Err(kind=classify(e), message=e.message, error=e)
