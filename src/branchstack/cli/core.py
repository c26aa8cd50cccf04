"""Shared plumbing for CLI commands: repo checks, error mapping, stack scope."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import NoReturn

import click

from branchstack.cli.output import user_output
from branchstack.core.commands import Command
from branchstack.core.context import BranchStackContext
from branchstack.core.errors import BranchStackError
from branchstack.core.repo_discovery import NoRepoSentinel, RepoContext
from branchstack.core.stack import open_stack
from branchstack.core.workflows import BranchListing, CommandResult, SwitchResult, run_command


def fail(message: str) -> NoReturn:
    """Print a styled error and exit with status 1."""
    user_output(click.style("Error: ", fg="red") + message)
    raise SystemExit(1)


@contextmanager
def handle_errors() -> Iterator[None]:
    """Turn BranchStackError into a styled message and exit status 1."""
    try:
        yield
    except BranchStackError as e:
        user_output(click.style("Error: ", fg="red") + str(e))
        raise SystemExit(1) from None


def discover_repo_context(ctx: BranchStackContext) -> RepoContext:
    """Return the repository context, or exit if not inside a repository."""
    if isinstance(ctx.repo, NoRepoSentinel):
        fail(ctx.repo.message)
    return ctx.repo


def execute_command(ctx: BranchStackContext, command: Command) -> CommandResult:
    """Run `command` inside a locked stack scope that flushes on exit.

    In dry-run mode the stack is loaded and mutated in memory but never saved,
    and no lock file is created.
    """
    repo = discover_repo_context(ctx)
    config = ctx.global_config
    with handle_errors():
        with open_stack(
            repo.stack_path,
            strict_save=config.strict_save,
            lock=config.lock_stack and not ctx.dry_run,
            persist=not ctx.dry_run,
        ) as stack:
            return run_command(ctx, repo, stack, command)


def execute_switch(ctx: BranchStackContext, command: Command) -> SwitchResult:
    """Run a command that changes the checked-out branch."""
    result = execute_command(ctx, command)
    if not isinstance(result, SwitchResult):
        fail(f"{type(command).__name__} did not switch branches")
    return result


def execute_listing(ctx: BranchStackContext, command: Command) -> BranchListing:
    """Run a command that reports the current branch and the stack."""
    result = execute_command(ctx, command)
    if not isinstance(result, BranchListing):
        fail(f"{type(command).__name__} did not produce a branch listing")
    return result
