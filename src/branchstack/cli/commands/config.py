import click

from branchstack.cli.core import fail
from branchstack.cli.output import machine_output, user_output
from branchstack.core.context import BranchStackContext
from branchstack.core.global_config import (
    CONFIG_KEYS,
    GlobalConfig,
    save_global_config,
    with_value,
)
from branchstack.core.repo_discovery import NoRepoSentinel


def _format_value(value: object) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)


def _get_config_value(config: GlobalConfig, key: str) -> str:
    if key not in CONFIG_KEYS:
        fail(f"Unknown config key '{key}'. Valid keys: {', '.join(CONFIG_KEYS)}")
    return _format_value(getattr(config, key))


@click.group("config")
def config_group() -> None:
    """Manage branchstack configuration."""


@config_group.command("list")
@click.pass_obj
def config_list(ctx: BranchStackContext) -> None:
    """Print configuration keys and values."""
    user_output(click.style(f"Global configuration ({ctx.config_path}):", bold=True))
    for key in CONFIG_KEYS:
        machine_output(f"{key}={_get_config_value(ctx.global_config, key)}")

    if isinstance(ctx.repo, NoRepoSentinel):
        user_output("  (not in a git repository)")
    else:
        user_output(f"  stack file: {ctx.repo.stack_path}")


@config_group.command("get")
@click.argument("key", metavar="KEY")
@click.pass_obj
def config_get(ctx: BranchStackContext, key: str) -> None:
    """Print the value of a given configuration key."""
    machine_output(_get_config_value(ctx.global_config, key))


@config_group.command("set")
@click.argument("key", metavar="KEY")
@click.argument("value", metavar="VALUE")
@click.pass_obj
def config_set(ctx: BranchStackContext, key: str, value: str) -> None:
    """Set a configuration key and write the config file."""
    try:
        new_config = with_value(ctx.global_config, key, value)
    except ValueError as e:
        fail(str(e))

    if ctx.dry_run:
        user_output(f"[DRY RUN] Would set {key}={value} in {ctx.config_path}")
        return

    save_global_config(new_config, ctx.config_path)
    user_output(f"Set {key}={_get_config_value(new_config, key)}")
