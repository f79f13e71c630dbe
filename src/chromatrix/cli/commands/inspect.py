"""Effect file inspection."""

from pathlib import Path

import click

from chromatrix.encoder import load_document
from chromatrix.exceptions import ChromatrixError

from ..context import report_error


@click.command(name="inspect")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def inspect_effect(ctx: click.Context, path: Path):
    """Validate an effect file and print a summary."""
    try:
        document = load_document(path)
    except (ChromatrixError, OSError) as e:
        report_error(ctx, e)

    duration = len(document.frames) / document.fps
    click.echo(f"Name:     {document.name}")
    if document.author:
        click.echo(f"Author:   {document.author}")
    if document.summary:
        click.echo(f"Summary:  {document.summary}")
    click.echo(f"Device:   {document.map_device} ({document.map_cols}x{document.map_rows})")
    click.echo(f"Frames:   {len(document.frames)} @ {document.fps} fps ({duration:.2f}s)")
    click.echo(f"Loop:     {'yes' if document.loop else 'no'}")
    click.echo(f"Lit:      {document.lit_pixels} pixel(s)")
