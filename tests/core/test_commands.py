"""Tests for rotation token parsing and push argument handling."""

import pytest

from branchstack.core.commands import (
    PushCommand,
    RotateCommand,
    RotateDirection,
    parse_push_argument,
    parse_rotation,
)
from branchstack.core.errors import ArgError


def test_parse_rotation_returns_none_on_branch() -> None:
    assert parse_rotation("master") is None


def test_parse_rotation_parses_positive_number() -> None:
    assert parse_rotation("+0") == (RotateDirection.UP, 0)


def test_parse_rotation_parses_negative_number() -> None:
    assert parse_rotation("-34") == (RotateDirection.DOWN, 34)


def test_parse_rotation_parses_negative_zero() -> None:
    assert parse_rotation("-0") == (RotateDirection.DOWN, 0)


@pytest.mark.parametrize("token", ["+", "-", "+abc", "+1a", "++1", "+-1", "1", "+ 1", "+1\n"])
def test_parse_rotation_rejects_non_numeric_suffix(token: str) -> None:
    assert parse_rotation(token) is None


def test_parse_push_argument_branch_name() -> None:
    assert parse_push_argument("feature/login") == PushCommand(branch="feature/login")


def test_parse_push_argument_rotation() -> None:
    assert parse_push_argument("+2") == RotateCommand(direction=RotateDirection.UP, n=2)
    assert parse_push_argument("-1") == RotateCommand(direction=RotateDirection.DOWN, n=1)


def test_parse_push_argument_malformed_rotation_is_a_branch_name() -> None:
    assert parse_push_argument("+abc") == PushCommand(branch="+abc")


def test_parse_push_argument_empty_raises_arg_error() -> None:
    with pytest.raises(ArgError):
        parse_push_argument("  ")
