"""Configuration commands.

Commands:
    - config show                        # Display configuration
    - config set --option VALUE ...      # Update configuration
    - config reset [FIELD ...]           # Reset to defaults
"""

from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError

from chromatrix.exceptions import ChromatrixError, wrap_pydantic_error
from chromatrix.models import AppConfig
from chromatrix.models.config import default_config_path

from ..context import config_path, load_config, report_error


@click.group(name="config")
def config():
    """Configure chromatrix defaults."""
    pass


@config.command(name="show")
@click.pass_context
def show_config(ctx: click.Context):
    """Display configuration values."""
    try:
        current = load_config(ctx)
    except ChromatrixError as e:
        report_error(ctx, e)

    click.echo(f"Config file: {config_path(ctx) or default_config_path()}\n")
    for field, value in current.model_dump(mode="json").items():
        click.echo(f"  {field:<20} {value}")


@config.command(name="set")
@click.option("--author", type=str, default=None, help="Author written into generated effects")
@click.option("--icon", type=click.Path(exists=True, dir_okay=False, path_type=Path),
              default=None, help="Default icon file")
@click.option("--fps", type=int, default=None, help="Default frames per second (1-80)")
@click.option("--loop/--no-loop", default=None, help="Whether generated effects loop")
@click.option("--map-graphic", type=str, default=None, help="Layout graphic referenced by effects")
@click.option("--input-devices-path", type=click.Path(path_type=Path), default=None,
              help="Input device listing used for autodetection")
@click.option("--brand-marker", type=str, default=None,
              help="Device name substring used to pre-filter detection")
@click.option("--output-dir", type=click.Path(file_okay=False, path_type=Path), default=None,
              help="Directory for effects saved without an explicit path")
@click.pass_context
def set_config(ctx: click.Context, **options):
    """Update configuration values and save."""
    updates = {field: value for field, value in options.items() if value is not None}
    if not updates:
        click.echo("Nothing to update.")
        return

    path = config_path(ctx) or default_config_path()
    try:
        current = load_config(ctx)
        try:
            updated = AppConfig.model_validate({**current.model_dump(), **updates})
        except ValidationError as e:
            raise wrap_pydantic_error(e, str(path)) from e
        updated.save(path)
    except (ChromatrixError, OSError) as e:
        report_error(ctx, e)

    for field, value in updates.items():
        click.echo(f"  {field} = {value}")
    click.echo(f"Saved {path}")


@config.command(name="reset")
@click.argument("fields", nargs=-1)
@click.pass_context
def reset_config(ctx: click.Context, fields: tuple[str, ...]):
    """Reset FIELDS (or everything) to defaults."""
    path = config_path(ctx) or default_config_path()
    defaults = AppConfig()

    unknown = [field for field in fields if field not in AppConfig.model_fields]
    if unknown:
        raise click.BadParameter(f"Unknown field(s): {', '.join(unknown)}", param_hint="FIELDS")

    try:
        if fields:
            current = load_config(ctx)
            values = current.model_dump()
            values.update({field: getattr(defaults, field) for field in fields})
            updated = AppConfig.model_validate(values)
        else:
            updated = defaults
        updated.save(path)
    except (ChromatrixError, OSError) as e:
        report_error(ctx, e)

    click.echo(f"Reset {', '.join(fields) if fields else 'all fields'} in {path}")
