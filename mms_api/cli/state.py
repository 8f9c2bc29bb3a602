"""
CLI Invocation State.

Holds the merged configuration and output flags for one command-line
invocation and builds the Agent on first use. Stored as the Typer context
object by the root callback.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, TypeVar

import typer

from mms_api.cli.client import APIClient
from mms_api.cli.display import report_error
from mms_api.core.config import MMSConfig
from mms_api.core.exceptions import ValidationError
from mms_api.core.result import Err, ErrorKind, capture
from mms_api.repositories.agent import Agent

T = TypeVar("T")


@dataclass
class CLIState:
    """Per-invocation settings shared by all commands."""

    config: MMSConfig
    ignore: bool = False
    json_output: bool = False
    _agent: Agent | None = field(default=None, repr=False)

    @property
    def agent(self) -> Agent:
        if self._agent is None:
            client = APIClient(
                self.config.apiurl,
                username=self.config.username,
                apikey=self.config.apikey,
                timeout=self.config.timeout,
            )
            self._agent = Agent(client)
        return self._agent

    def close(self) -> None:
        if self._agent is not None:
            self._agent.client.close()


def get_state(ctx: typer.Context) -> CLIState:
    """Return the invocation state set up by the root callback."""
    return ctx.find_object(CLIState)


def execute(operation: Callable[..., T], *args: Any, **kwargs: Any) -> T:
    """
    Run an agent operation; report a failure and exit with its status.

    Raises:
        typer.Exit: With the error kind's exit code when the operation fails.
    """
    result = capture(operation, *args, **kwargs)
    if isinstance(result, Err):
        report_error(result)
        raise typer.Exit(result.exit_code)
    return result.value


def require(value: str | None, what: str, hint: str) -> str:
    """
    Return a mandatory command value or stop with a validation failure.

    Raises:
        typer.Exit: With the validation exit code when the value is missing.
    """
    if value is None:
        message = f"Missing {what}. Use {hint}."
        err = Err(kind=ErrorKind.VALIDATION, message=message, error=ValidationError(message))
        report_error(err)
        raise typer.Exit(err.exit_code)
    return value
