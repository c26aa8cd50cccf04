"""High-level git operations interface.

This module provides a clean abstraction over git subprocess calls, making the
codebase more testable and maintainable.

Architecture:
- Git: Abstract base class defining the interface
- RealGit: Production implementation using subprocess
- DryRunGit: Wrapper that prints mutations instead of running them
"""

from abc import ABC, abstractmethod
from pathlib import Path

LOCAL_BRANCH_PREFIX = "refs/heads/"


def local_branch_ref(branch: str) -> str:
    """Return the full ref name for a local branch."""
    return f"{LOCAL_BRANCH_PREFIX}{branch}"


# ============================================================================
# Abstract Interface
# ============================================================================


class Git(ABC):
    """Abstract interface for git operations.

    All implementations (real and fake) must implement this interface.
    This interface contains ONLY runtime operations - no test setup methods.
    """

    @abstractmethod
    def get_current_branch(self, cwd: Path) -> str | None:
        """Get the checked-out local branch, or None when HEAD is detached or unborn."""
        ...

    @abstractmethod
    def resolve_branch_ref(self, repo_root: Path, branch: str) -> str | None:
        """Resolve a local branch name to its full ref name.

        Args:
            repo_root: Path to the repository root
            branch: Local branch name (e.g., 'feature')

        Returns:
            Full ref name (e.g., 'refs/heads/feature'), or None if no such
            local branch exists
        """
        ...

    @abstractmethod
    def list_local_branches(self, repo_root: Path) -> list[str]:
        """List all local branch names in the repository."""
        ...

    @abstractmethod
    def set_head(self, repo_root: Path, ref: str) -> None:
        """Point HEAD at `ref` without touching the index or working tree.

        Args:
            repo_root: Path to the repository root
            ref: Full ref name (e.g., 'refs/heads/feature')
        """
        ...

    @abstractmethod
    def reset_hard(self, repo_root: Path, ref: str) -> None:
        """Force the index and working tree to match the commit at `ref`.

        Tracked files are overwritten or removed. Untracked and ignored files
        are left alone.
        """
        ...

    @abstractmethod
    def get_repo_root(self, cwd: Path) -> Path | None:
        """Get the top-level directory of the working tree containing `cwd`."""
        ...

    @abstractmethod
    def get_git_dir(self, cwd: Path) -> Path | None:
        """Get the absolute git directory for the working tree containing `cwd`.

        For linked worktrees this is the per-worktree directory, which holds
        that worktree's HEAD.
        """
        ...
