"""Production Git implementation using subprocess.

This module provides the real Git implementation that executes actual git
commands via subprocess.
"""

import logging
import subprocess
from pathlib import Path

from branchstack.core.git.abc import LOCAL_BRANCH_PREFIX, Git, local_branch_ref
from branchstack.core.subprocess import run_subprocess_with_context

logger = logging.getLogger(__name__)

# ============================================================================
# Production Implementation
# ============================================================================


class RealGit(Git):
    """Production implementation using subprocess.

    All git operations execute actual git commands via subprocess.
    """

    def get_current_branch(self, cwd: Path) -> str | None:
        """Get the checked-out local branch.

        Returns None when HEAD is detached or points at an unborn branch
        (a fresh repository or `git checkout --orphan`), since neither has a
        ref that can be switched back to.
        """
        result = subprocess.run(
            ["git", "symbolic-ref", "--quiet", "HEAD"],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            return None

        ref = result.stdout.strip()
        if not ref.startswith(LOCAL_BRANCH_PREFIX):
            return None

        branch = ref[len(LOCAL_BRANCH_PREFIX) :]
        if self.resolve_branch_ref(cwd, branch) is None:
            logger.debug("HEAD points at unborn branch %r", branch)
            return None
        return branch

    def resolve_branch_ref(self, repo_root: Path, branch: str) -> str | None:
        """Resolve a local branch name to its full ref name."""
        ref = local_branch_ref(branch)
        result = subprocess.run(
            ["git", "show-ref", "--verify", "--quiet", ref],
            cwd=repo_root,
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            logger.debug("No local branch %r in %s", branch, repo_root)
            return None
        return ref

    def list_local_branches(self, repo_root: Path) -> list[str]:
        """List all local branch names in the repository."""
        result = run_subprocess_with_context(
            ["git", "for-each-ref", "--format=%(refname:short)", "refs/heads/"],
            operation_context="list local branches",
            cwd=repo_root,
        )
        return [line.strip() for line in result.stdout.splitlines() if line.strip()]

    def set_head(self, repo_root: Path, ref: str) -> None:
        """Point HEAD at `ref` without touching the index or working tree."""
        run_subprocess_with_context(
            ["git", "symbolic-ref", "HEAD", ref],
            operation_context=f"point HEAD at {ref}",
            cwd=repo_root,
        )

    def reset_hard(self, repo_root: Path, ref: str) -> None:
        """Force the index and working tree to match the commit at `ref`."""
        run_subprocess_with_context(
            ["git", "reset", "--hard", "--quiet", ref],
            operation_context=f"reset working tree to {ref}",
            cwd=repo_root,
        )

    def get_repo_root(self, cwd: Path) -> Path | None:
        """Get the top-level directory of the working tree containing `cwd`."""
        result = subprocess.run(
            ["git", "rev-parse", "--show-toplevel"],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            return None
        return Path(result.stdout.strip())

    def get_git_dir(self, cwd: Path) -> Path | None:
        """Get the absolute git directory for the working tree containing `cwd`."""
        result = subprocess.run(
            ["git", "rev-parse", "--absolute-git-dir"],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            return None
        return Path(result.stdout.strip())
