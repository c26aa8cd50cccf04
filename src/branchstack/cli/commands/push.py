import click

from branchstack.cli.commands.completions import complete_branch_names
from branchstack.cli.core import execute_switch, handle_errors
from branchstack.cli.output import machine_output, user_output
from branchstack.core.commands import RotateCommand, parse_push_argument
from branchstack.core.context import BranchStackContext


@click.command(
    "push",
    # Lets `push -1` through as the argument instead of an unknown option
    context_settings={"ignore_unknown_options": True},
)
@click.argument("branch", metavar="BRANCH", shell_complete=complete_branch_names)
@click.pass_obj
def push_cmd(ctx: BranchStackContext, branch: str) -> None:
    """Push the current branch onto the stack and switch to BRANCH.

    A number like +1 or -1 rotates the stack instead: +N brings the Nth
    entry counting from the bottom (starting at 0) to the top, -N brings
    the Nth entry counting from the top.

    Tracked files are reset to match BRANCH. Uncommitted changes to
    tracked files are discarded; untracked and ignored files are kept.
    """
    with handle_errors():
        command = parse_push_argument(branch)

    result = execute_switch(ctx, command)

    if isinstance(command, RotateCommand):
        machine_output(result.branch)
    user_output(
        click.style("✓", fg="green") + f" Switched to {click.style(result.branch, fg='yellow')}"
    )
