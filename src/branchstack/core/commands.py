"""The closed set of branch stack commands.

Each command is a frozen dataclass. `Command` is their union and
`branchstack.core.workflows.run_command` matches on it exhaustively.
"""

import re
from dataclasses import dataclass
from enum import Enum

from branchstack.core.errors import ArgError

_ROTATION_PATTERN = re.compile(r"([+-])([0-9]+)")


class RotateDirection(Enum):
    """Which end of the stack a rotation counts from."""

    UP = "+"
    DOWN = "-"


@dataclass(frozen=True)
class PushCommand:
    branch: str


@dataclass(frozen=True)
class RotateCommand:
    direction: RotateDirection
    n: int


@dataclass(frozen=True)
class PopCommand:
    pass


@dataclass(frozen=True)
class ListCommand:
    pass


Command = PushCommand | RotateCommand | PopCommand | ListCommand


def parse_rotation(token: str) -> tuple[RotateDirection, int] | None:
    """Parse a rotation token like `+2` or `-0`.

    Returns:
        (direction, n) for `+N` / `-N` with an unsigned decimal N, otherwise
        None (the token is a branch name)
    """
    match = _ROTATION_PATTERN.fullmatch(token)
    if match is None:
        return None
    return RotateDirection(match.group(1)), int(match.group(2))


def parse_push_argument(value: str) -> PushCommand | RotateCommand:
    """Turn the argument of `push` into a command.

    Raises:
        ArgError: If the argument is empty
    """
    if not value.strip():
        raise ArgError("branch")

    rotation = parse_rotation(value)
    if rotation is not None:
        direction, n = rotation
        return RotateCommand(direction=direction, n=n)
    return PushCommand(branch=value)
