"""Dry-run Git wrapper.

This module provides a Git wrapper that prevents execution of destructive
operations while delegating read-only operations to the wrapped implementation.
"""

from pathlib import Path

from branchstack.cli.output import user_output
from branchstack.core.git.abc import Git

# ============================================================================
# Dry-run Wrapper
# ============================================================================


class DryRunGit(Git):
    """Wrapper that prints destructive operations instead of running them.

    Usage:
        real_ops = RealGit()
        dry_run_ops = DryRunGit(real_ops)

        # Prints a message instead of resetting the working tree
        dry_run_ops.reset_hard(repo_root, "refs/heads/main")
    """

    def __init__(self, wrapped: Git) -> None:
        """Create a dry-run wrapper around a Git implementation.

        Args:
            wrapped: The Git implementation to wrap (usually RealGit or FakeGit)
        """
        self._wrapped = wrapped

    # Read-only operations: delegate to wrapped implementation

    def get_current_branch(self, cwd: Path) -> str | None:
        return self._wrapped.get_current_branch(cwd)

    def resolve_branch_ref(self, repo_root: Path, branch: str) -> str | None:
        return self._wrapped.resolve_branch_ref(repo_root, branch)

    def list_local_branches(self, repo_root: Path) -> list[str]:
        return self._wrapped.list_local_branches(repo_root)

    def get_repo_root(self, cwd: Path) -> Path | None:
        return self._wrapped.get_repo_root(cwd)

    def get_git_dir(self, cwd: Path) -> Path | None:
        return self._wrapped.get_git_dir(cwd)

    # Destructive operations: print what would happen

    def set_head(self, repo_root: Path, ref: str) -> None:
        user_output(f"[DRY RUN] Would run: git symbolic-ref HEAD {ref}")

    def reset_hard(self, repo_root: Path, ref: str) -> None:
        user_output(f"[DRY RUN] Would run: git reset --hard {ref}")
