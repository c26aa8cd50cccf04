import click

from branchstack.cli.core import execute_switch
from branchstack.cli.output import machine_output, user_output
from branchstack.core.commands import PopCommand
from branchstack.core.context import BranchStackContext


@click.command("pop")
@click.pass_obj
def pop_cmd(ctx: BranchStackContext) -> None:
    """Remove the top of the stack and switch to it.

    The entry stays on the stack if the switch fails.
    """
    result = execute_switch(ctx, PopCommand())

    machine_output(result.branch)
    user_output(
        click.style("✓", fg="green") + f" Switched to {click.style(result.branch, fg='yellow')}"
    )
