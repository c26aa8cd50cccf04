"""Tests for the push, pop, rotate and list workflows."""

from pathlib import Path

import pytest

from branchstack.core.commands import (
    ListCommand,
    PopCommand,
    PushCommand,
    RotateCommand,
    RotateDirection,
)
from branchstack.core.context import BranchStackContext
from branchstack.core.errors import (
    EmptyStackError,
    InvalidBranchNameError,
    InvalidCommandError,
    NoCurrentBranchError,
    NoStackEntryError,
    RepositoryError,
)
from branchstack.core.repo_discovery import RepoContext
from branchstack.core.stack import BranchStack
from branchstack.core.workflows import (
    BranchListing,
    SwitchResult,
    list_branch_stack,
    pop_branch,
    push_branch,
    rotate_branch,
    run_command,
)
from tests.fakes.git import FakeGit


def _setup(
    tmp_path: Path,
    *,
    current: str | None,
    entries: list[str],
    branches: list[str],
    reset_failures: set[str] | None = None,
) -> tuple[BranchStackContext, RepoContext, BranchStack, FakeGit]:
    git = FakeGit(
        current_branches={tmp_path: current},
        local_branches={tmp_path: branches},
        reset_failures=reset_failures,
    )
    repo = RepoContext(root=tmp_path, git_dir=tmp_path, stack_path=tmp_path / "branch-stack")
    ctx = BranchStackContext.for_test(git=git, cwd=tmp_path, repo=repo)
    return ctx, repo, BranchStack(repo.stack_path, entries), git


def test_push_switches_and_saves_previous_branch(tmp_path: Path) -> None:
    ctx, repo, stack, git = _setup(
        tmp_path, current="master", entries=[], branches=["master", "second"]
    )

    result = push_branch(ctx, repo, stack, "second")

    assert result == SwitchResult(previous="master", branch="second")
    assert git.get_current_branch(tmp_path) == "second"
    assert stack.entries() == ["master"]


def test_push_failed_switch_leaves_stack_unchanged(tmp_path: Path) -> None:
    ctx, repo, stack, _ = _setup(tmp_path, current="master", entries=["old"], branches=["master"])

    with pytest.raises(InvalidBranchNameError):
        push_branch(ctx, repo, stack, "missing")

    assert stack.entries() == ["old"]


def test_push_detached_head_raises(tmp_path: Path) -> None:
    ctx, repo, stack, git = _setup(tmp_path, current=None, entries=[], branches=["master"])

    with pytest.raises(NoCurrentBranchError):
        push_branch(ctx, repo, stack, "master")

    assert git.head_updates == []
    assert stack.entries() == []


def test_push_then_pop_round_trip(tmp_path: Path) -> None:
    ctx, repo, stack, git = _setup(
        tmp_path, current="master", entries=[], branches=["master", "second"]
    )

    push_branch(ctx, repo, stack, "second")
    result = pop_branch(ctx, repo, stack)

    assert result == SwitchResult(previous="second", branch="master")
    assert git.get_current_branch(tmp_path) == "master"
    assert stack.entries() == []

    with pytest.raises(EmptyStackError):
        pop_branch(ctx, repo, stack)
    assert git.get_current_branch(tmp_path) == "master"


def test_pop_failed_switch_keeps_entry(tmp_path: Path) -> None:
    ctx, repo, stack, _ = _setup(
        tmp_path, current="master", entries=["gone", "next"], branches=["master", "next"]
    )

    with pytest.raises(InvalidBranchNameError):
        pop_branch(ctx, repo, stack)

    assert stack.entries() == ["gone", "next"]


def test_pop_works_from_detached_head(tmp_path: Path) -> None:
    ctx, repo, stack, git = _setup(tmp_path, current=None, entries=["main"], branches=["main"])

    result = pop_branch(ctx, repo, stack)

    assert result == SwitchResult(previous=None, branch="main")
    assert git.get_current_branch(tmp_path) == "main"


def test_rotate_up_brings_entry_forward(tmp_path: Path) -> None:
    ctx, repo, stack, git = _setup(
        tmp_path, current="c", entries=["a", "b"], branches=["a", "b", "c"]
    )

    result = rotate_branch(ctx, repo, stack, RotateDirection.UP, 1)

    assert result == SwitchResult(previous="c", branch="a")
    assert git.get_current_branch(tmp_path) == "a"
    assert stack.entries() == ["b", "c"]


def test_rotate_up_zero_raises_bottom(tmp_path: Path) -> None:
    ctx, repo, stack, git = _setup(
        tmp_path,
        current="third",
        entries=["second", "master"],
        branches=["master", "second", "third"],
    )

    rotate_branch(ctx, repo, stack, RotateDirection.UP, 0)

    assert git.get_current_branch(tmp_path) == "master"
    assert stack.entries() == ["third", "second"]


def test_rotate_sequence_matches_pushd(tmp_path: Path) -> None:
    ctx, repo, stack, git = _setup(
        tmp_path,
        current="master",
        entries=["third-branch", "second-branch"],
        branches=["master", "second-branch", "third-branch"],
    )

    rotate_branch(ctx, repo, stack, RotateDirection.DOWN, 0)
    assert git.get_current_branch(tmp_path) == "master"
    assert stack.entries() == ["third-branch", "second-branch"]

    rotate_branch(ctx, repo, stack, RotateDirection.UP, 1)
    assert git.get_current_branch(tmp_path) == "third-branch"
    assert stack.entries() == ["second-branch", "master"]

    rotate_branch(ctx, repo, stack, RotateDirection.DOWN, 1)
    assert git.get_current_branch(tmp_path) == "second-branch"
    assert stack.entries() == ["master", "third-branch"]


def test_rotate_out_of_range_leaves_stack_unchanged(tmp_path: Path) -> None:
    ctx, repo, stack, git = _setup(
        tmp_path, current="c", entries=["a", "b"], branches=["a", "b", "c"]
    )

    with pytest.raises(NoStackEntryError):
        rotate_branch(ctx, repo, stack, RotateDirection.DOWN, 3)

    assert stack.entries() == ["a", "b"]
    assert git.head_updates == []


def test_rotate_failed_switch_restores_stack(tmp_path: Path) -> None:
    ctx, repo, stack, _ = _setup(
        tmp_path,
        current="c",
        entries=["a", "b"],
        branches=["a", "b", "c"],
        reset_failures={"a"},
    )

    with pytest.raises(RepositoryError):
        rotate_branch(ctx, repo, stack, RotateDirection.UP, 1)

    assert stack.entries() == ["a", "b"]


def test_list_returns_current_then_stack(tmp_path: Path) -> None:
    ctx, _, stack, _ = _setup(tmp_path, current="main", entries=["a", "b"], branches=["main"])

    listing = list_branch_stack(ctx, stack)

    assert listing == BranchListing(current="main", entries=["a", "b"])
    assert listing.lines() == ["main", "a", "b"]


def test_list_detached_head_raises(tmp_path: Path) -> None:
    ctx, _, stack, _ = _setup(tmp_path, current=None, entries=["a"], branches=["a"])

    with pytest.raises(NoCurrentBranchError):
        list_branch_stack(ctx, stack)


def test_run_command_dispatches_every_command(tmp_path: Path) -> None:
    ctx, repo, stack, git = _setup(tmp_path, current="a", entries=[], branches=["a", "b", "c"])

    run_command(ctx, repo, stack, PushCommand(branch="b"))
    run_command(ctx, repo, stack, PushCommand(branch="c"))
    assert run_command(ctx, repo, stack, ListCommand()) == BranchListing(
        current="c", entries=["b", "a"]
    )

    run_command(ctx, repo, stack, RotateCommand(direction=RotateDirection.UP, n=0))
    assert git.get_current_branch(tmp_path) == "a"
    assert stack.entries() == ["c", "b"]

    run_command(ctx, repo, stack, PopCommand())
    assert git.get_current_branch(tmp_path) == "c"
    assert stack.entries() == ["b"]


def test_run_command_rejects_unknown_command(tmp_path: Path) -> None:
    ctx, repo, stack, _ = _setup(tmp_path, current="a", entries=[], branches=["a"])

    with pytest.raises(InvalidCommandError):
        run_command(ctx, repo, stack, "checkout")  # type: ignore[arg-type]
