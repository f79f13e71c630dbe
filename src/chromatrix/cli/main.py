"""Main CLI entry point."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import click

from chromatrix import __version__

from .commands import config, devices_group, generate_group, inspect_effect, keyboards

logger = logging.getLogger(__name__)


def resolve_log_path(debug: bool, log_file: Optional[Path]) -> Path:
    """Pick the log file for the given flags."""
    if log_file:
        return log_file
    if debug:
        return Path.cwd() / "chromatrix-debug.log"
    return Path.home() / ".chromatrix" / "logs" / "chromatrix.log"


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> None:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug mode with file logging in the current directory
        log_file: Custom log file path (optional)
        log_level: Log level used together with --log-file
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    if log_file:
        level = getattr(logging, log_level.upper())

    log_path = resolve_log_path(debug, log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Rotating file handler (keeps last 5 files, max 10MB each)
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")


@click.group()
@click.version_option(version=__version__, prog_name="chromatrix")
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./chromatrix-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
@click.option(
    '--config-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Configuration file (default: ~/.chromatrix/config.json)'
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str,
    config_file: Optional[Path],
):
    """
    Chromatrix - per-key lighting effect generator for Razer keyboards.

    Builds animated effect files for the Polychromatic front end.

    \b
    Examples:
      # Show keyboards that support custom effects
      chromatrix keyboards --lighting-only

      # Detect the connected keyboard
      chromatrix devices detect

      # Generate a rainbow for the detected keyboard
      chromatrix generate rainbow --icon icon.png --output rainbow.json

      # Generate for a specific keyboard
      chromatrix generate pride --keyboard razer_ornata_chroma --output pride.json
    """
    setup_logging(verbose, debug, log_file, log_level)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_file
    ctx.obj["log_path"] = resolve_log_path(debug, log_file)


cli.add_command(keyboards)
cli.add_command(devices_group)
cli.add_command(generate_group)
cli.add_command(inspect_effect)
cli.add_command(config)

if __name__ == "__main__":
    cli()
