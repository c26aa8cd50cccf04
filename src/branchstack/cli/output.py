"""Output utilities for CLI commands with clear intent.

user_output: messages for the person at the terminal (stderr)
machine_output: results other programs may parse (stdout)
"""

from typing import Any

import click


def user_output(message: Any = None, nl: bool = True) -> None:
    """Write a human-readable message to stderr."""
    click.echo(message, nl=nl, err=True)


def machine_output(message: Any = None, nl: bool = True) -> None:
    """Write parseable output to stdout."""
    click.echo(message, nl=nl)
