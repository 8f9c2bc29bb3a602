"""
Group Commands.
"""

import typer

from mms_api.cli.display import print_resources
from mms_api.cli.state import execute, get_state
from mms_api.schemas.group import Group

app = typer.Typer(help="Groups list")


@app.callback(invoke_without_command=True)
def groups(ctx: typer.Context) -> None:
    """
    List MMS groups.

    Only the default group is shown unless --ignore is given.

    Examples:
        mms-api groups
        mms-api --ignore groups
    """
    if ctx.invoked_subcommand is None:
        list_groups(ctx)


@app.command("list")
def list_groups(ctx: typer.Context) -> None:
    """List MMS groups."""
    state = get_state(ctx)
    group_list = execute(state.agent.list_groups)

    default_group_id = state.config.default_group_id
    if default_group_id is not None and not state.ignore:
        group_list = [group for group in group_list if group.id == default_group_id]

    print_resources(Group, group_list, state.config, state.json_output, state.ignore)
