"""Helpers shared by CLI commands."""

import logging
from pathlib import Path
from typing import NoReturn, Optional

import click

from chromatrix.exceptions import ChromatrixError, format_error_for_display
from chromatrix.models import AppConfig

logger = logging.getLogger(__name__)


def config_path(ctx: click.Context) -> Optional[Path]:
    """Config file chosen with --config-file, or None for the default."""
    obj = ctx.find_root().obj or {}
    return obj.get("config_path")


def load_config(ctx: click.Context) -> AppConfig:
    """Load the user configuration selected on the command line."""
    return AppConfig.load_or_default(config_path(ctx))


def report_error(ctx: click.Context, error: Exception) -> NoReturn:
    """Print a user-facing error and exit with status 1."""
    if isinstance(error, ChromatrixError):
        logger.error(error.log_message())
    else:
        logger.error(f"{type(error).__name__}: {error}")

    user_message, recovery_hint = format_error_for_display(error)

    click.echo(f"ERROR: {user_message}", err=True)
    if recovery_hint:
        click.echo(f"\n{recovery_hint}", err=True)

    log_path = (ctx.find_root().obj or {}).get("log_path")
    if log_path:
        click.echo(f"\nFor details, check the log file: {log_path}", err=True)

    ctx.exit(1)
