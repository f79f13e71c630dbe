"""Effect generation commands."""

import functools
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Optional

import click

from chromatrix import generators
from chromatrix.devices import Keyboard, detect_one
from chromatrix.exceptions import ChromatrixError, ErrorContext
from chromatrix.models import Effect

from ..context import load_config, report_error

logger = logging.getLogger(__name__)


def effect_options(default_frames: int) -> Callable:
    """Options shared by every generator command."""

    def decorator(func: Callable) -> Callable:
        options = [
            click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path),
                          default=None, help="Effect file to write (default: <output_dir>/<name>.json)"),
            click.option("--icon", "-i", type=click.Path(exists=True, dir_okay=False, path_type=Path),
                          default=None, help="Icon file (default: from config)"),
            click.option("--keyboard", "-k", type=str, default=None,
                          help="Target keyboard (default: autodetect)"),
            click.option("--fps", type=int, default=None, help="Frames per second, 1-80"),
            click.option("--frames", type=click.IntRange(min=1), default=default_frames,
                          show_default=True, help="Number of frames to generate"),
            click.option("--name", type=str, default=None,
                          help="Effect name (default: output file name)"),
            click.option("--summary", type=str, default=None, help="Effect description"),
            click.option("--author", type=str, default=None, help="Author (default: from config)"),
            click.option("--loop/--no-loop", default=None, help="Loop playback (default: from config)"),
        ]
        for option in reversed(options):
            func = option(func)
        return func

    return decorator


def build_effect(
    ctx: click.Context,
    default_name: str,
    paint: Callable[[Effect, int], None],
    *,
    output: Optional[Path],
    icon: Optional[Path],
    keyboard: Optional[str],
    fps: Optional[int],
    frames: int,
    name: Optional[str],
    summary: Optional[str],
    author: Optional[str],
    loop: Optional[bool],
) -> None:
    """Resolve options against the config, paint the effect and save it."""
    try:
        config = load_config(ctx)

        icon = icon or config.icon
        if icon is None:
            raise click.UsageError("No icon given; pass --icon or run 'chromatrix config set --icon PATH'")

        if keyboard:
            try:
                target = Keyboard.parse(keyboard)
            except ValueError as e:
                raise click.BadParameter(str(e), param_hint="--keyboard") from e
        else:
            target = detect_one(
                input_devices_path=config.input_devices_path,
                brand_marker=config.brand_marker,
            )

        effect = Effect(target, icon)
        effect.name = name or (output.stem if output else default_name)
        effect.author = author if author is not None else config.author
        effect.summary = summary or ""
        effect.loop = config.loop if loop is None else loop
        effect.map_graphic = config.map_graphic
        effect.set_fps(fps if fps is not None else config.fps)

        paint(effect, frames)

        if output is None:
            output = config.output_dir / f"{effect.name}.json"

        with ErrorContext(f"save effect to {output}", logger_instance=logger):
            effect.save(output)

    except (ChromatrixError, OSError) as e:
        report_error(ctx, e)

    click.echo(
        f"Wrote {effect.name!r} for {target.display_name}: "
        f"{len(effect)} frames @ {effect.fps} fps -> {output}"
    )


@click.group(name="generate")
def generate_group():
    """Generate lighting effects."""
    pass


@generate_group.command(name="rainbow")
@effect_options(default_frames=60)
@click.pass_context
def generate_rainbow(ctx: click.Context, **options):
    """Scrolling HSL rainbow; alternate rows run in opposite directions."""
    build_effect(ctx, "rainbow", lambda effect, frames: generators.rainbow(effect, frames), **options)


@generate_group.command(name="pride")
@effect_options(default_frames=400)
@click.option("--scale", type=click.FloatRange(min=0.0, min_open=True), default=0.15,
              show_default=True, help="Fraction of the palette visible across the keyboard")
@click.pass_context
def generate_pride(ctx: click.Context, scale: float, **options):
    """Eased blend through the pride flag palette, scrolling across columns."""
    paint = functools.partial(_paint_palette, scale=scale)
    build_effect(ctx, "pride", paint, **options)


def _paint_palette(effect: Effect, frames: int, scale: float) -> None:
    generators.palette_sweep(effect, generators.PRIDE_PALETTE, frames=frames, scale=scale)
