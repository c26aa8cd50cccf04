"""Command workflows composing the branch stack and branch switches.

Each workflow reads the current branch, mutates the stack and switches
branches in an order that keeps the stack unchanged when the switch fails.
"""

import logging
from dataclasses import dataclass

from branchstack.core.commands import (
    Command,
    ListCommand,
    PopCommand,
    PushCommand,
    RotateCommand,
    RotateDirection,
)
from branchstack.core.context import BranchStackContext
from branchstack.core.errors import EmptyStackError, InvalidCommandError, NoStackEntryError
from branchstack.core.repo_discovery import RepoContext
from branchstack.core.stack import BranchStack
from branchstack.core.switcher import change_branch, current_branch_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SwitchResult:
    """Outcome of a command that changed the checked-out branch."""

    previous: str | None
    branch: str


@dataclass(frozen=True)
class BranchListing:
    """The current branch followed by the stack, top first."""

    current: str
    entries: list[str]

    def lines(self) -> list[str]:
        return [self.current, *self.entries]


CommandResult = SwitchResult | BranchListing


def push_branch(
    ctx: BranchStackContext, repo: RepoContext, stack: BranchStack, branch: str
) -> SwitchResult:
    """Switch to `branch` and save the branch being left on the stack.

    The switch happens before the push, so a failed switch leaves the stack
    untouched.
    """
    current = current_branch_name(ctx.git, ctx.cwd)
    change_branch(ctx.git, repo.root, branch)
    stack.push(current)
    logger.debug("Pushed %s, now on %s", current, branch)
    return SwitchResult(previous=current, branch=branch)


def pop_branch(ctx: BranchStackContext, repo: RepoContext, stack: BranchStack) -> SwitchResult:
    """Switch to the top of the stack and remove it.

    The entry is removed only after the switch succeeds.

    Raises:
        EmptyStackError: If the stack is empty
    """
    branch = stack.peek()
    if branch is None:
        raise EmptyStackError()

    previous = ctx.git.get_current_branch(ctx.cwd)
    change_branch(ctx.git, repo.root, branch)
    stack.pop()
    logger.debug("Popped %s, %d entries left", branch, len(stack))
    return SwitchResult(previous=previous, branch=branch)


def rotate_branch(
    ctx: BranchStackContext,
    repo: RepoContext,
    stack: BranchStack,
    direction: RotateDirection,
    n: int,
) -> SwitchResult:
    """Rotate the current branch and the stack, then switch to the new top.

    The current branch is treated as an implicit top entry. After rotating,
    the new top is checked out and removed from the stack, leaving the
    previously current branch embedded at its rotated position. Any failure
    restores the stack.

    Raises:
        NoStackEntryError: If `n` is out of range for the stack
    """
    current = current_branch_name(ctx.git, ctx.cwd)

    with stack.transaction():
        stack.push(current)
        match direction:
            case RotateDirection.UP:
                stack.rotate_up(n)
            case RotateDirection.DOWN:
                stack.rotate_down(n)

        target = stack.peek()
        if target is None:
            raise NoStackEntryError(n, 0)

        change_branch(ctx.git, repo.root, target)
        stack.pop()

    logger.debug("Rotated %s%d from %s to %s", direction.value, n, current, target)
    return SwitchResult(previous=current, branch=target)


def list_branch_stack(ctx: BranchStackContext, stack: BranchStack) -> BranchListing:
    """Return the current branch and the stack entries, top first."""
    current = current_branch_name(ctx.git, ctx.cwd)
    return BranchListing(current=current, entries=stack.entries())


def run_command(
    ctx: BranchStackContext, repo: RepoContext, stack: BranchStack, command: Command
) -> CommandResult:
    """Run one branch stack command.

    Raises:
        InvalidCommandError: If `command` is not a known command
    """
    logger.debug("Running %s against %s", command, repo.stack_path)
    match command:
        case PushCommand(branch=branch):
            return push_branch(ctx, repo, stack, branch)
        case RotateCommand(direction=direction, n=n):
            return rotate_branch(ctx, repo, stack, direction, n)
        case PopCommand():
            return pop_branch(ctx, repo, stack)
        case ListCommand():
            return list_branch_stack(ctx, stack)
        case _:
            raise InvalidCommandError(command)
