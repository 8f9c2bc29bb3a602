"""
Cluster Commands.
"""

from typing import Optional

import typer

from mms_api.cli.display import print_resources
from mms_api.cli.state import execute, get_state, require
from mms_api.schemas.cluster import Cluster

app = typer.Typer(help="Clusters list in the mms groups")


@app.callback(invoke_without_command=True)
def clusters(ctx: typer.Context) -> None:
    """
    Manage clusters. Lists all clusters when no subcommand is given.

    Only the default cluster is listed unless --ignore is given.

    Examples:
        mms-api clusters
        mms-api clusters rename 533d7d4730040be257defe88 Animals2
    """
    if ctx.invoked_subcommand is None:
        list_clusters(ctx)


@app.command("list")
def list_clusters(ctx: typer.Context) -> None:
    """List clusters of all groups."""
    state = get_state(ctx)
    cluster_list = execute(state.agent.list_clusters)

    default_cluster_id = state.config.default_cluster_id
    if default_cluster_id is not None and not state.ignore:
        cluster_list = [cluster for cluster in cluster_list if cluster.id == default_cluster_id]

    print_resources(Cluster, cluster_list, state.config, state.json_output, state.ignore)


@app.command("rename")
def rename_cluster(
    ctx: typer.Context,
    cluster_id: str = typer.Argument(help="Cluster ID"),
    name: str = typer.Argument(help="New cluster name"),
    group_id: Optional[str] = typer.Option(None, "--group-id", "-g", help="Group ID (default: --default-group-id)"),
) -> None:
    """Give a cluster a new name."""
    state = get_state(ctx)
    group_id = require(group_id or state.config.default_group_id, "group id", "--group-id or --default-group-id")
    cluster = execute(state.agent.update_cluster, group_id, cluster_id, name)
    print_resources(Cluster, [cluster], state.config, state.json_output, ignore=True)
