"""
Snapshot Commands.
"""

import typer

from mms_api.cli.display import print_resources
from mms_api.cli.state import execute, get_state
from mms_api.schemas.snapshot import Snapshot

app = typer.Typer(help="Snapshot lists")


@app.callback(invoke_without_command=True)
def snapshots(ctx: typer.Context) -> None:
    """
    List backup snapshots of all clusters.

    Examples:
        mms-api snapshots
        mms-api --json --limit 5 snapshots
    """
    if ctx.invoked_subcommand is None:
        list_snapshots(ctx)


@app.command("list")
def list_snapshots(ctx: typer.Context) -> None:
    """List backup snapshots of all clusters."""
    state = get_state(ctx)
    snapshot_list = execute(state.agent.list_snapshots)
    print_resources(Snapshot, snapshot_list, state.config, state.json_output, state.ignore)
