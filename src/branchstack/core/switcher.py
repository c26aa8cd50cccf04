"""Branch switching on top of the Git gateway.

Switching is destructive: HEAD is repointed and the working tree is forced to
match the target commit, so uncommitted edits to tracked files are lost.
Untracked and ignored files survive.
"""

import logging
from pathlib import Path

from branchstack.core.errors import InvalidBranchNameError, NoCurrentBranchError
from branchstack.core.git.abc import Git

logger = logging.getLogger(__name__)


def current_branch_name(git: Git, cwd: Path) -> str:
    """Return the checked-out local branch.

    Raises:
        NoCurrentBranchError: If HEAD is detached or no branch is checked out
    """
    branch = git.get_current_branch(cwd)
    if branch is None:
        raise NoCurrentBranchError()
    return branch


def change_branch(git: Git, repo_root: Path, branch: str) -> None:
    """Check out `branch`, discarding tracked-file changes.

    HEAD is pointed at the branch first, then the index and working tree are
    hard-reset to its commit. A failure part way through is not rolled back.

    Raises:
        InvalidBranchNameError: If `branch` is not a local branch
        RepositoryError: If a git operation fails
    """
    ref = git.resolve_branch_ref(repo_root, branch)
    if ref is None:
        raise InvalidBranchNameError(branch)

    logger.debug("Switching %s to %s", repo_root, ref)
    git.set_head(repo_root, ref)
    git.reset_hard(repo_root, ref)
