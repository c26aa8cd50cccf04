import click

from branchstack.cli.core import execute_listing
from branchstack.cli.output import machine_output
from branchstack.core.commands import ListCommand
from branchstack.core.context import BranchStackContext


@click.command("list")
@click.pass_obj
def list_cmd(ctx: BranchStackContext) -> None:
    """List the current branch followed by the stack, one per line."""
    listing = execute_listing(ctx, ListCommand())

    for name in listing.lines():
        machine_output(name)
