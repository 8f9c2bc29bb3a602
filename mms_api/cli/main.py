"""
MMS API CLI.

Command-line client for the MMS public API.
Built with Typer for type-safe commands and Rich for formatted output.

Usage:
    mms-api --help
    mms-api groups
    mms-api --ignore --json hosts
    mms-api -g 5196d3628d022db4cbc11111 clusters
    mms-api alerts ack all
    mms-api restorejobs create now

Options:
    --username, -u          MMS user
    --apikey, -k            MMS api-key
    --apiurl, -a            Full API url including version
    --default-group-id, -g  Default MMS group id
    --default-cluster-id, -c  Default MMS cluster id
    --cfg                   Config file path (default ~/.mms-api)
    --ignore, -i            Ignore default group and cluster ids
    --json, -j              Print JSON output
    --limit, -l             Limit for result items
    --verbose, -v           INFO level logging
    --debug, -d             DEBUG level logging
    --log-file              Rotating JSON log file
"""

import sys
from typing import Optional

import structlog
import typer
from rich.markup import escape

from mms_api import __version__
from mms_api.cli.commands import (
    alerts_app,
    clusters_app,
    groups_app,
    hosts_app,
    restorejobs_app,
    snapshots_app,
)
from mms_api.cli.display import err_console
from mms_api.cli.state import CLIState, execute
from mms_api.core.config import build_config
from mms_api.core.logging import get_logger, setup_logging

logger = get_logger(__name__)

app = typer.Typer(
    name="mms-api",
    help="MMS API CLI - groups, hosts, clusters, alerts, snapshots and restore jobs.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.add_typer(groups_app, name="groups")
app.add_typer(hosts_app, name="hosts")
app.add_typer(clusters_app, name="clusters")
app.add_typer(alerts_app, name="alerts")
app.add_typer(snapshots_app, name="snapshots")
app.add_typer(restorejobs_app, name="restorejobs")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"mms-api v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    username: Optional[str] = typer.Option(None, "--username", "-u", help="MMS user"),
    apikey: Optional[str] = typer.Option(None, "--apikey", "-k", help="MMS api-key"),
    apiurl: Optional[str] = typer.Option(
        None,
        "--apiurl",
        "-a",
        help="MMS api url. Full url including version: https://mms.mydomain.tld/api/public/v1.0",
    ),
    default_group_id: Optional[str] = typer.Option(None, "--default-group-id", "-g", help="Default MMS group id"),
    default_cluster_id: Optional[str] = typer.Option(
        None, "--default-cluster-id", "-c", help="Default MMS cluster id"
    ),
    cfg: Optional[str] = typer.Option(None, "--cfg", help="Config file path (default: ~/.mms-api)"),
    ignore: bool = typer.Option(False, "--ignore", "-i", help="Ignore flag of --group-id and --cluster-id"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Print JSON output"),
    limit: Optional[int] = typer.Option(None, "--limit", "-l", help="Limit for result items"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output (INFO level logging)"),
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug mode (DEBUG level logging)"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Also write JSON log records to this file"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
) -> None:
    """
    MMS API CLI.

    Settings come from command-line options, then the config file
    (~/.mms-api, key=value lines), then MMS_* environment variables.
    """
    if debug:
        setup_logging(level="DEBUG", format_type="console", log_file=log_file)
    elif verbose:
        setup_logging(level="INFO", format_type="console", log_file=log_file)
    else:
        setup_logging(level="WARNING", format_type="console", log_file=log_file)

    structlog.contextvars.bind_contextvars(source="cli")

    config = execute(
        build_config,
        cfg,
        username=username,
        apikey=apikey,
        apiurl=apiurl,
        default_group_id=default_group_id,
        default_cluster_id=default_cluster_id,
        limit=limit,
    )

    logger.debug("CLI invoked", command=ctx.invoked_subcommand, apiurl=config.apiurl)

    state = CLIState(config=config, ignore=ignore, json_output=json_output)
    ctx.obj = state
    ctx.call_on_close(state.close)


def run() -> None:
    """Console script entry point. Unclassified errors exit with status 1."""
    try:
        app()
    except Exception as e:
        logger.exception("Unhandled error")
        err_console.print(f"[red]{escape(str(e)) or 'Unknown error/Interrupt'}[/red]")
        sys.exit(1)


if __name__ == "__main__":
    run()
