"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from branchstack.core.git.abc import Git
from branchstack.core.git.dry_run import DryRunGit
from branchstack.core.git.real import RealGit
from branchstack.core.global_config import GlobalConfig, global_config_path, load_global_config
from branchstack.core.repo_discovery import (
    NoRepoSentinel,
    RepoContext,
    discover_repo_or_sentinel,
)


@dataclass(frozen=True)
class BranchStackContext:
    """Immutable context holding all dependencies for branchstack operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    git: Git
    cwd: Path  # Current working directory at CLI invocation
    global_config: GlobalConfig
    config_path: Path
    repo: RepoContext | NoRepoSentinel
    dry_run: bool

    @staticmethod
    def for_test(
        git: Git | None = None,
        cwd: Path | None = None,
        global_config: GlobalConfig | None = None,
        config_path: Path | None = None,
        repo: RepoContext | NoRepoSentinel | None = None,
        dry_run: bool = False,
    ) -> "BranchStackContext":
        """Create test context with sensible defaults for anything unspecified.

        Args:
            git: Optional Git implementation. If None, creates empty FakeGit.
            cwd: Optional current working directory. If None, uses
                 Path("/test/default/cwd").
            global_config: Optional GlobalConfig. If None, uses defaults.
            config_path: Optional config file path. If None, uses a path under cwd.
            repo: Optional RepoContext or NoRepoSentinel. If None, uses NoRepoSentinel().
            dry_run: Whether to enable dry-run mode (default False).

        Returns:
            Frozen BranchStackContext for use in tests
        """
        from tests.fakes.git import FakeGit

        resolved_cwd = cwd if cwd is not None else Path("/test/default/cwd")
        return BranchStackContext(
            git=git if git is not None else FakeGit(),
            cwd=resolved_cwd,
            global_config=global_config if global_config is not None else GlobalConfig(),
            config_path=(
                config_path if config_path is not None else resolved_cwd / "config.toml"
            ),
            repo=repo if repo is not None else NoRepoSentinel(),
            dry_run=dry_run,
        )


def create_context(*, dry_run: bool) -> BranchStackContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.

    Args:
        dry_run: If True, wrap git with DryRunGit, which prints intended
                 mutations without executing them

    Returns:
        BranchStackContext with real implementations
    """
    # 1. Capture cwd (no deps)
    cwd = Path.cwd()

    # 2. Load global config (no deps)
    config_path = global_config_path()
    global_config = load_global_config(config_path)

    # 3. Create git ops and discover repo
    git: Git = RealGit()
    repo = discover_repo_or_sentinel(cwd, git, global_config.stack_filename)

    # 4. Apply dry-run wrapper if needed
    if dry_run:
        git = DryRunGit(git)

    return BranchStackContext(
        git=git,
        cwd=cwd,
        global_config=global_config,
        config_path=config_path,
        repo=repo,
        dry_run=dry_run,
    )
