"""Keyboard registry listing."""

import click

from chromatrix.devices import get_registry


@click.command(name="keyboards")
@click.option(
    "--lighting-only",
    is_flag=True,
    help="Only list keyboards with a per-key lighting matrix",
)
def keyboards(lighting_only: bool):
    """List supported keyboards and their lighting matrix size."""
    registry = get_registry()
    entries = registry.lighting_keyboards() if lighting_only else registry.keyboards()

    for keyboard in entries:
        spec = registry.spec(keyboard)
        size = f"{spec.matrix.cols}x{spec.matrix.rows}" if spec.matrix else "-"
        usb_ids = ", ".join(str(usb_id) for usb_id in spec.usb_ids)
        click.echo(f"  {keyboard.value:<48} {size:>6}  [{usb_ids}]  {spec.name}")

    click.echo(f"\n{len(entries)} keyboard(s)")
