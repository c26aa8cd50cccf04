"""Git operations subpackage.

This subpackage provides abstractions over git operations with support for
testing via fakes and dry-run via wrappers.
"""

from branchstack.core.git.abc import LOCAL_BRANCH_PREFIX, Git, local_branch_ref
from branchstack.core.git.dry_run import DryRunGit
from branchstack.core.git.real import RealGit

__all__ = [
    "Git",
    "RealGit",
    "DryRunGit",
    "LOCAL_BRANCH_PREFIX",
    "local_branch_ref",
]
