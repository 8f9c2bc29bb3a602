"""
Output Rendering.

Resources are shown either as a Rich table (header from the resource type,
rows from each resource's table_section) or as a JSON array of to_hash()
maps. Errors go to stderr so --json output stays parseable.
"""

import json
from collections.abc import Sequence

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from mms_api.core.config import MMSConfig
from mms_api.core.result import Err, ErrorKind
from mms_api.schemas.base import ApiResource

console = Console()
err_console = Console(stderr=True)


def print_resources(
    resource_type: type[ApiResource],
    resources: Sequence[ApiResource],
    config: MMSConfig,
    json_output: bool = False,
    ignore: bool = False,
) -> None:
    """Print at most config.limit resources in the selected format."""
    shown = list(resources)[: config.limit]

    if json_output:
        print_json(shown)
    else:
        print_human(resource_type, shown)
        if not ignore:
            print_tips(config)


def print_json(resources: Sequence[ApiResource]) -> None:
    typer.echo(json.dumps([resource.to_hash() for resource in resources], indent=2))


def print_human(resource_type: type[ApiResource], resources: Sequence[ApiResource]) -> None:
    table = Table(title=resource_type.table_title, show_header=True)
    for column in resource_type.table_header:
        table.add_column(column, style="cyan" if column == resource_type.table_header[0] else None)

    for resource in resources:
        for row in resource.table_section():
            table.add_row(*(escape(cell) for cell in row))

    console.print(table)


def print_tips(config: MMSConfig) -> None:
    """Remind the user which default ids narrow the listing."""
    if config.default_group_id is not None:
        console.print(f"Default group: {escape(config.default_group_id)}")
    if config.default_cluster_id is not None:
        console.print(f"Default cluster: {escape(config.default_cluster_id)}")

    if config.default_group_id is not None or config.default_cluster_id is not None:
        console.print(
            "[dim]Add flag --ignore or update --default-group-id, --default-cluster-id "
            "or update your `~/.mms-api` to see all resources[/dim]"
        )


def report_error(err: Err) -> None:
    """Print a failed operation's message according to its kind."""
    if err.kind is ErrorKind.AUTH:
        err_console.print("[red]Authorisation problem. Please check your credentials![/red]")
    elif err.kind is ErrorKind.RESOURCE:
        err_console.print(f"[red]Resource {escape(err.error.resource)} problem:[/red]")
        err_console.print(escape(err.message))
    else:
        err_console.print(f"[red]{escape(err.message)}[/red]")
