"""Global configuration data structures and loading.

Provides immutable global config data loaded from ~/.branchstack/config.toml.
Loaded eagerly at the CLI entry point.
"""

import os
import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path

import tomlkit

CONFIG_ENV_VAR = "BRANCHSTACK_CONFIG"
DEFAULT_STACK_FILENAME = "branch-stack"


@dataclass(frozen=True)
class GlobalConfig:
    """Immutable global configuration data.

    Loaded once at CLI entry point and stored in BranchStackContext.
    All fields are read-only after construction.
    """

    stack_filename: str = DEFAULT_STACK_FILENAME
    strict_save: bool = True
    lock_stack: bool = True


CONFIG_KEYS = tuple(f.name for f in fields(GlobalConfig))


def global_config_path() -> Path:
    """Get the path to the global config file.

    BRANCHSTACK_CONFIG overrides the default ~/.branchstack/config.toml.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".branchstack" / "config.toml"


def load_global_config(path: Path | None = None) -> GlobalConfig:
    """Load global config, falling back to defaults when the file is missing.

    Args:
        path: Config file path (defaults to global_config_path())

    Returns:
        GlobalConfig instance with loaded values

    Raises:
        ValueError: If the config is malformed or has invalid values
    """
    config_path = path if path is not None else global_config_path()

    if not config_path.exists():
        return GlobalConfig()

    try:
        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in {config_path}: {e}") from e

    config = GlobalConfig()
    for key in CONFIG_KEYS:
        if key in data:
            config = with_value(config, key, data[key])
    return config


def with_value(config: GlobalConfig, key: str, value: object) -> GlobalConfig:
    """Return a copy of `config` with `key` set to a validated `value`.

    String values for boolean keys accept 'true'/'false' so that values typed
    on the command line can be passed straight through.

    Raises:
        ValueError: If `key` is unknown or `value` has the wrong type
    """
    if key not in CONFIG_KEYS:
        raise ValueError(f"Unknown config key '{key}'. Valid keys: {', '.join(CONFIG_KEYS)}")

    current = getattr(config, key)
    if isinstance(current, bool):
        return replace(config, **{key: _parse_bool(key, value)})

    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Config key '{key}' must be a non-empty string")
    if key == "stack_filename" and ("/" in value or value in (".", "..")):
        raise ValueError(f"Config key '{key}' must be a plain file name, got '{value}'")
    return replace(config, **{key: value.strip()})


def _parse_bool(key: str, value: object) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.lower() in ("true", "false"):
        return value.lower() == "true"
    raise ValueError(f"Config key '{key}' must be true or false, got '{value}'")


def save_global_config(config: GlobalConfig, path: Path | None = None) -> None:
    """Save global config, preserving existing formatting and comments.

    Args:
        config: GlobalConfig instance to save
        path: Config file path (defaults to global_config_path())
    """
    config_path = path if path is not None else global_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    if config_path.exists():
        with config_path.open("r", encoding="utf-8") as f:
            doc = tomlkit.load(f)
    else:
        doc = tomlkit.document()
        doc.add(tomlkit.comment("Global branchstack configuration"))

    for key in CONFIG_KEYS:
        doc[key] = getattr(config, key)

    with config_path.open("w", encoding="utf-8") as f:
        tomlkit.dump(doc, f)
