"""Host input device commands."""

import logging
from pathlib import Path
from typing import Optional

import click

from chromatrix.devices import detect_all, query_input_devices
from chromatrix.exceptions import ChromatrixError

from ..context import load_config, report_error

logger = logging.getLogger(__name__)

input_file_option = click.option(
    "--input-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Input device listing to read (default: from config, /proc/bus/input/devices)",
)


@click.group(name="devices")
def devices_group():
    """Host input device commands."""
    pass


@devices_group.command(name="list")
@input_file_option
@click.pass_context
def list_devices(ctx: click.Context, input_file: Optional[Path]):
    """List input devices reported by the host."""
    try:
        config = load_config(ctx)
        devices = query_input_devices(input_file or config.input_devices_path)
    except (ChromatrixError, OSError) as e:
        logger.error(f"Failed to list input devices: {e}")
        report_error(ctx, e)

    if not devices:
        click.echo("No input devices found.")
        return

    for i, device in enumerate(devices):
        click.echo(
            f"  [{i}] {device.id.vendor:04X}:{device.id.product:04X} "
            f"bus={device.id.bus_type:04X} {device.name}"
        )


@devices_group.command(name="detect")
@input_file_option
@click.option("--all", "show_all", is_flag=True, help="Show every detected keyboard")
@click.pass_context
def detect_devices(ctx: click.Context, input_file: Optional[Path], show_all: bool):
    """Detect connected keyboards that chromatrix supports."""
    try:
        config = load_config(ctx)
        detected = detect_all(
            input_devices_path=input_file or config.input_devices_path,
            brand_marker=config.brand_marker,
        )
    except (ChromatrixError, OSError) as e:
        logger.error(f"Keyboard detection failed: {e}")
        report_error(ctx, e)

    if not detected:
        click.echo("No supported keyboard detected.")
        ctx.exit(1)

    for keyboard in detected if show_all else detected[:1]:
        matrix = keyboard.matrix
        size = f"{matrix.cols}x{matrix.rows}" if matrix else "no lighting matrix"
        click.echo(f"  {keyboard.value}  {keyboard.display_name} ({size})")
