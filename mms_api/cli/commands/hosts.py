"""
Host Commands.

List, add, change and remove monitored hosts.
"""

from typing import Optional

import typer

from mms_api.cli.display import console, print_resources
from mms_api.cli.state import CLIState, execute, get_state, require
from mms_api.schemas.host import Host, HostOptions

app = typer.Typer(help="Hosts list in the mms group")


def _group_id(state: CLIState, group_id: str | None) -> str:
    return require(group_id or state.config.default_group_id, "group id", "--group-id or --default-group-id")


def _options(
    ssl: bool | None,
    logs: bool | None,
    alerts: bool | None,
    profiler: bool | None,
    journaling: bool | None,
    enabled: bool | None,
) -> HostOptions:
    return HostOptions(
        ssl_enabled=ssl,
        logs_enabled=logs,
        alerts_enabled=alerts,
        profiler_enabled=profiler,
        journaling_enabled=journaling,
        host_enabled=enabled,
    )


@app.callback(invoke_without_command=True)
def hosts(ctx: typer.Context) -> None:
    """
    Manage hosts. Lists all hosts when no subcommand is given.

    Examples:
        mms-api hosts
        mms-api hosts create db1.example.com 27017 --ssl
        mms-api hosts update 56e9378f601dc49360a40949c8a6df6c --logs
        mms-api hosts delete 56e9378f601dc49360a40949c8a6df6c
    """
    if ctx.invoked_subcommand is None:
        list_hosts(ctx)


@app.command("list")
def list_hosts(ctx: typer.Context) -> None:
    """List hosts of all groups."""
    state = get_state(ctx)
    host_list = execute(state.agent.list_hosts)
    print_resources(Host, host_list, state.config, state.json_output, state.ignore)


@app.command("create")
def create_host(
    ctx: typer.Context,
    hostname: str = typer.Argument(help="Hostname of the mongod/mongos"),
    port: int = typer.Argument(help="Port of the mongod/mongos"),
    group_id: Optional[str] = typer.Option(None, "--group-id", "-g", help="Group ID (default: --default-group-id)"),
    ssl: Optional[bool] = typer.Option(None, "--ssl/--no-ssl", help="Connect over SSL"),
    logs: Optional[bool] = typer.Option(None, "--logs/--no-logs", help="Collect logs"),
    alerts: Optional[bool] = typer.Option(None, "--alerts/--no-alerts", help="Send alerts"),
    profiler: Optional[bool] = typer.Option(None, "--profiler/--no-profiler", help="Collect profiler data"),
    journaling: Optional[bool] = typer.Option(None, "--journaling/--no-journaling", help="Collect journaling metrics"),
    enabled: Optional[bool] = typer.Option(None, "--enabled/--disabled", help="Monitor the host"),
) -> None:
    """Add a host to a group."""
    state = get_state(ctx)
    options = _options(ssl, logs, alerts, profiler, journaling, enabled)
    host = execute(state.agent.create_host, _group_id(state, group_id), hostname, port, options)
    print_resources(Host, [host], state.config, state.json_output, ignore=True)


@app.command("update")
def update_host(
    ctx: typer.Context,
    host_id: str = typer.Argument(help="Host ID"),
    group_id: Optional[str] = typer.Option(None, "--group-id", "-g", help="Group ID (default: --default-group-id)"),
    ssl: Optional[bool] = typer.Option(None, "--ssl/--no-ssl", help="Connect over SSL"),
    logs: Optional[bool] = typer.Option(None, "--logs/--no-logs", help="Collect logs"),
    alerts: Optional[bool] = typer.Option(None, "--alerts/--no-alerts", help="Send alerts"),
    profiler: Optional[bool] = typer.Option(None, "--profiler/--no-profiler", help="Collect profiler data"),
    journaling: Optional[bool] = typer.Option(None, "--journaling/--no-journaling", help="Collect journaling metrics"),
    enabled: Optional[bool] = typer.Option(None, "--enabled/--disabled", help="Monitor the host"),
) -> None:
    """Change settings of a host. Only the given flags are sent."""
    state = get_state(ctx)
    options = _options(ssl, logs, alerts, profiler, journaling, enabled)
    host = execute(state.agent.update_host, _group_id(state, group_id), host_id, options)
    print_resources(Host, [host], state.config, state.json_output, ignore=True)


@app.command("delete")
def delete_host(
    ctx: typer.Context,
    host_id: str = typer.Argument(help="Host ID"),
    group_id: Optional[str] = typer.Option(None, "--group-id", "-g", help="Group ID (default: --default-group-id)"),
) -> None:
    """Remove a host from monitoring."""
    state = get_state(ctx)
    if execute(state.agent.delete_host, _group_id(state, group_id), host_id):
        console.print("Done.")
    else:
        console.print("[yellow]Server did not confirm the deletion.[/yellow]")
        raise typer.Exit(1)
