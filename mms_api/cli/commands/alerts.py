"""
Alert Commands.
"""

from typing import Optional

import typer

from mms_api.cli.display import console, print_resources
from mms_api.cli.state import execute, get_state
from mms_api.repositories.agent import ACK_FOREVER, ALL_ALERTS
from mms_api.schemas.alert import Alert

app = typer.Typer(help="Alerts list")


@app.callback(invoke_without_command=True)
def alerts(ctx: typer.Context) -> None:
    """
    Manage alerts. Lists all alerts when no subcommand is given.

    Examples:
        mms-api alerts
        mms-api alerts list --status OPEN
        mms-api alerts ack
        mms-api alerts ack 53569159300495c7702ee3a3 5196d3628d022db4cbc11111 2026-12-24T00:00:00Z
    """
    if ctx.invoked_subcommand is None:
        list_alerts(ctx, status=None)


@app.command("list")
def list_alerts(
    ctx: typer.Context,
    status: Optional[str] = typer.Option(None, "--status", "-s", help="Only alerts with this status (OPEN, CLOSED)"),
) -> None:
    """Alerts list"""
    state = get_state(ctx)
    alert_list = execute(state.agent.list_alerts, status=status.upper() if status else None)
    print_resources(Alert, alert_list, state.config, state.json_output, state.ignore)


@app.command("ack")
def ack_alert(
    ctx: typer.Context,
    alert_id: str = typer.Argument(ALL_ALERTS, help="Alert ID, or `all` for every open alert"),
    group_id: Optional[str] = typer.Argument(None, help="Group ID (default: --default-group-id)"),
    timestamp: str = typer.Argument(ACK_FOREVER, help="Postpone to timestamp: now | forever | ISO-8601"),
) -> None:
    """Acknowledge alert"""
    state = get_state(ctx)
    execute(state.agent.ack_alert, alert_id, timestamp, group_id or state.config.default_group_id)
    console.print("Done.")
