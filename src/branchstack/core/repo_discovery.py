"""Repository discovery functionality.

Finds the working tree root and git directory for a path, and from those the
location of the branch stack file.
"""

from dataclasses import dataclass
from pathlib import Path

from branchstack.core.git.abc import Git


@dataclass(frozen=True)
class RepoContext:
    """Represents a git working tree and where its branch stack lives."""

    root: Path
    git_dir: Path
    stack_path: Path  # <git_dir>/<stack_filename>


@dataclass(frozen=True)
class NoRepoSentinel:
    """Sentinel value indicating execution outside a git repository.

    Commands that require repo context can check for this sentinel and fail
    fast.
    """

    message: str = "Not inside a git repository"


def discover_repo_or_sentinel(
    cwd: Path, git: Git, stack_filename: str
) -> RepoContext | NoRepoSentinel:
    """Locate the git working tree containing `cwd`.

    The stack file is kept in the per-worktree git directory, so linked
    worktrees (each with its own HEAD) each get their own stack.

    Args:
        cwd: Current working directory to start search from
        git: Git operations interface
        stack_filename: File name of the stack inside the git directory

    Returns:
        RepoContext if inside a git repository, NoRepoSentinel otherwise
    """
    if not cwd.exists():
        return NoRepoSentinel(message=f"Start path '{cwd}' does not exist")

    root = git.get_repo_root(cwd)
    git_dir = git.get_git_dir(cwd)
    if root is None or git_dir is None:
        return NoRepoSentinel()

    return RepoContext(root=root, git_dir=git_dir, stack_path=git_dir / stack_filename)
