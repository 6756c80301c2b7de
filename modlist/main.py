"""
Mod upgrade list builder — CLI entrypoint.

Usage:
    python -m modlist.main
    python -m modlist.main --debug
    python -m modlist.main --version
"""

from __future__ import annotations

import os

import click

from modlist import __version__
from modlist.core.observability.logging_config import setup_logging


@click.command()
@click.version_option(version=__version__, prog_name="modlist")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
def cli(verbose: bool, quiet: bool, debug: bool) -> None:
    """Build a ModsUpgrader item list interactively and print it as JSON."""
    # ── Logging setup (once, at process start) ──────────────────
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("MODLIST_LOG_LEVEL", "WARNING")

    setup_logging(
        level=level,
        log_file=os.environ.get("MODLIST_LOG_FILE"),
        log_file_level=os.environ.get("MODLIST_LOG_FILE_LEVEL"),
    )

    from modlist.core.engine.dispatcher import run

    run()


if __name__ == "__main__":
    cli()
