"""
Restore Job Commands.
"""

from typing import Optional

import typer

from mms_api.cli.display import console, print_resources
from mms_api.cli.state import execute, get_state
from mms_api.schemas.restorejob import NOW, RestoreJob

app = typer.Typer(help="Restorejobs list")


@app.callback(invoke_without_command=True)
def restorejobs(ctx: typer.Context) -> None:
    """
    Manage restore jobs. Lists all restore jobs when no subcommand is given.

    Examples:
        mms-api restorejobs
        mms-api restorejobs create now
        mms-api restorejobs create 53bd5fb5e4b0774946a16fad
        mms-api restorejobs create 2026-10-01T12:00:00Z 5196d3628d022db4cbc11111 533d7d4730040be257defe88
    """
    if ctx.invoked_subcommand is None:
        list_restorejobs(ctx)


@app.command("list")
def list_restorejobs(ctx: typer.Context) -> None:
    """Restore jobs of all clusters."""
    state = get_state(ctx)
    job_list = execute(state.agent.list_restorejobs)
    print_resources(RestoreJob, job_list, state.config, state.json_output, state.ignore)


@app.command("create")
def create_restorejob(
    ctx: typer.Context,
    snapshot_source: str = typer.Argument(NOW, help="Restore from source. Options: now | timestamp | snapshot-id"),
    group_id: Optional[str] = typer.Argument(None, help="Group ID (default: --default-group-id)"),
    cluster_id: Optional[str] = typer.Argument(None, help="Cluster ID (default: --default-cluster-id)"),
) -> None:
    """Create a restore job from the latest state, a point in time or a snapshot."""
    state = get_state(ctx)
    job = execute(
        state.agent.create_restorejob,
        snapshot_source,
        group_id or state.config.default_group_id,
        cluster_id or state.config.default_cluster_id,
    )
    if state.json_output:
        print_resources(RestoreJob, [job], state.config, json_output=True)
    else:
        console.print(f"Done. Restore job {job.id} is {job.status}.")
