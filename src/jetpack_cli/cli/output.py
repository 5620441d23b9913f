"""Output utilities for CLI commands with clear intent.

user_output is for messages meant for a human (status, errors, progress).
It goes to stderr so the changelogger child keeps stdout to itself.

machine_output is for values other tools read, such as `config get`.
"""

from typing import Any

import click

JETPACK_GREEN = (6, 158, 8)


def user_output(message: Any = "", nl: bool = True) -> None:
    """Write a human-facing message to stderr."""
    click.echo(message, err=True, nl=nl)


def machine_output(message: Any = "", nl: bool = True) -> None:
    """Write a machine-readable value to stdout."""
    click.echo(message, nl=nl)
