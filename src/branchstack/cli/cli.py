import logging
import os

import click

from branchstack.cli.commands.config import config_group
from branchstack.cli.commands.list_cmd import list_cmd
from branchstack.cli.commands.pop import pop_cmd
from branchstack.cli.commands.push import push_cmd
from branchstack.cli.core import fail
from branchstack.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

DEBUG_ENV_VAR = "BRANCHSTACK_DEBUG"


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="branchstack")
@click.option(
    "--dry-run",
    is_flag=True,
    help="Print git changes instead of running them and leave the stack file unchanged.",
)
@click.pass_context
def cli(ctx: click.Context, dry_run: bool) -> None:
    """Maintain a stack of branches for easy navigation.

    Works like the shell's pushd, popd and dirs, but for git branches.
    """
    if os.getenv(DEBUG_ENV_VAR):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context(dry_run=dry_run)
        except ValueError as e:
            fail(str(e))


cli.add_command(push_cmd)
cli.add_command(pop_cmd)
cli.add_command(list_cmd)
cli.add_command(config_group)


def main() -> None:
    """CLI entry point used by the `branchstack` console script."""
    cli()
