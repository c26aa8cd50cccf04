"""Shell completion callbacks."""

import click

from branchstack.core.context import BranchStackContext, create_context
from branchstack.core.errors import BranchStackError
from branchstack.core.repo_discovery import NoRepoSentinel


def complete_branch_names(
    ctx: click.Context, param: click.Parameter | None, incomplete: str
) -> list[str]:
    """Complete local branch names for the push argument.

    Completion must never crash the shell, so lookup failures yield no
    candidates.
    """
    try:
        root_obj = ctx.find_root().obj
        branchstack_ctx = (
            root_obj if isinstance(root_obj, BranchStackContext) else create_context(dry_run=False)
        )
        if isinstance(branchstack_ctx.repo, NoRepoSentinel):
            return []
        branches = branchstack_ctx.git.list_local_branches(branchstack_ctx.repo.root)
    except (BranchStackError, ValueError):
        return []
    return [name for name in branches if name.startswith(incomplete)]
