"""CLI handling for relayclip.

This module provides the command-line interface for relayclip, handling
argument parsing via click, logging configuration, configuration loading
and starting the sync engine.

Usage:
    relayclip [--config PATH] [--verbose]
"""

import sys
from pathlib import Path

import click

from relayclip.config import CONFIG_FILE_NAME
from relayclip.main_logging import configure_logging


@click.command()
@click.option(
    "--config",
    "config_path",
    default=CONFIG_FILE_NAME,
    show_default=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="JSON configuration file, created with defaults if missing",
)
@click.option(
    "--verbose",
    is_flag=True,
    help="Enable DEBUG-level logging",
)
def main(config_path: Path, verbose: bool) -> None:
    """Sync clipboard text between machines through an ntfy relay."""
    configure_logging(verbose)

    _run(config_path)


def _run(config_path: Path) -> None:
    """Load the configuration and run until interrupted.

    Args:
        config_path: Path to the JSON configuration file.
    """
    import asyncio

    from relayclip.app import run_app
    from relayclip.config import load_config
    from relayclip.errors import ConfigError

    try:
        config = load_config(config_path)
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    try:
        asyncio.run(run_app(config))
    except KeyboardInterrupt:
        pass
