"""
Console I/O — the single place that reads from stdin.

Every prompt in the tool goes through ``read_user_input``. Lines are
read as bytes and decoded as UTF-8 here, so a line that is not valid
UTF-8, a failed read, or an exhausted stream all come back as an empty
string and the calling prompt loop treats them like any other invalid
answer.
"""

from __future__ import annotations

import logging

import click

logger = logging.getLogger(__name__)

INVALID_INPUT_MSG = "WARNING: Invalid input, please try again."
EMPTY_FIELD_MSG = "WARNING: filename is empty, please try again."
OUT_OF_BOUNDS_MSG = "WARNING: index out of bounds, please try again."


def read_user_input(message: str) -> str:
    """Show ``message`` without a newline and return the trimmed reply."""
    click.echo(message, nl=False)

    try:
        raw = click.get_binary_stream("stdin").readline()
    except (OSError, RuntimeError, ValueError) as e:
        logger.debug("stdin read failed, treating as empty input: %s", e)
        return ""

    try:
        line = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        logger.debug("stdin line is not valid UTF-8, treating as empty input: %s", e)
        return ""

    return line.strip()


def warn(message: str) -> None:
    """Print a user-facing warning line."""
    click.secho(message, fg="yellow")
