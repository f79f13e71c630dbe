"""Ready-made animations painted onto an ``Effect``.

Each generator appends frames to the effect it is given; metadata such as
name and fps is left to the caller.
"""

import logging
from collections.abc import Sequence

import numpy as np

from chromatrix.models.color import Color
from chromatrix.models.effect import Effect

logger = logging.getLogger(__name__)

# Pride, transgender, nonbinary, genderfluid, bisexual, pansexual, gay,
# lesbian, asexual, aromantic and polysexual flag stripes
PRIDE_PALETTE: tuple[str, ...] = (
    "#E50000", "#FF8D00", "#FFEE00", "#028121", "#004CFF", "#770088",
    "#55CDFD", "#F6AAB7", "#FFFFFF", "#F6AAB7", "#55CDFD",
    "#FCF431", "#FCFCFC", "#9D59D2", "#282828",
    "#FE76A2", "#FFFFFF", "#BF12D7", "#000000", "#303CBE",
    "#D60270", "#9B4F96", "#0038A8",
    "#FF1C8D", "#FFD700", "#1AB3FF",
    "#078D70", "#98E8C1", "#FFFFFF", "#7BADE2", "#3D1A78",
    "#D62800", "#FF9B56", "#FFFFFF", "#D462A6", "#A40062",
    "#000000", "#A4A4A4", "#FFFFFF", "#810081",
    "#3BA740", "#A8D47A", "#FFFFFF", "#ABABAB", "#000000",
    "#F714BA", "#01D66A", "#1594F6",
)


def simple_ease(t: np.ndarray) -> np.ndarray:
    """Quartic ease-in-out on 0..1."""
    return np.where(t > 0.5, 1.0 - (2.0 * (1.0 - t)) ** 4 / 2.0, (2.0 * t) ** 4 / 2.0)


def palette_colors(palette: Sequence[str | Color]) -> np.ndarray:
    """Stack a palette of hex strings or colors into an (n, 3) float array."""
    if not palette:
        raise ValueError("Palette must contain at least one color")
    colors = [c if isinstance(c, Color) else Color.from_hex(c) for c in palette]
    return np.array([(c.r, c.g, c.b) for c in colors], dtype=np.float64)


def sample_palette(palette: np.ndarray, positions: np.ndarray) -> np.ndarray:
    """
    Blend between consecutive palette entries at each position.

    Positions wrap modulo 1.0; each palette entry owns an equal slice and
    eases into the next one (the last wraps to the first).

    Returns:
        (len(positions), 3) array of RGB channels
    """
    n = len(palette)
    positions = np.mod(positions, 1.0)
    index = np.minimum((positions * n).astype(np.int64), n - 1)
    next_index = (index + 1) % n
    t = simple_ease(np.clip(positions * n - index, 0.0, 1.0))[:, np.newaxis]
    return (1.0 - t) * palette[index] + t * palette[next_index]


def rainbow(effect: Effect, frames: int = 60, lightness: float = 0.5) -> None:
    """
    Paint a scrolling HSL rainbow.

    Hue spreads once across the matrix width; odd rows run in the opposite
    direction. Over ``frames`` frames the hue rotates a full turn.
    """
    if frames < 1:
        raise ValueError(f"frames must be positive, got {frames}")

    column_hues = np.arange(effect.width, dtype=np.float64) / effect.width * 360.0

    for i in range(1, frames + 1):
        rotation = 360.0 * i / frames
        frame = effect.new_frame()
        for y in range(effect.height):
            hues = column_hues if y % 2 == 0 else -column_hues
            for x, hue in enumerate(hues + rotation):
                frame.set(x, y, Color.from_hsl(float(hue), 1.0, lightness))

    logger.debug(f"Painted {frames} rainbow frame(s) onto {effect.name!r}")


def palette_sweep(
    effect: Effect,
    palette: Sequence[str | Color] = PRIDE_PALETTE,
    frames: int = 400,
    scale: float = 0.15,
) -> None:
    """
    Scroll an eased palette blend across the columns.

    ``scale`` is the fraction of the palette visible across the full width.
    Each column is painted in a single color.
    """
    if frames < 1:
        raise ValueError(f"frames must be positive, got {frames}")

    colors = palette_colors(palette)
    columns = np.arange(effect.width, dtype=np.float64) / effect.width * scale

    for i in range(1, frames + 1):
        rgb = sample_palette(colors, columns + i / frames)
        column_colors = [Color(r=float(r), g=float(g), b=float(b)) for r, g, b in rgb]
        frame = effect.new_frame()
        frame.paint(lambda x, y, _color: column_colors[x])

    logger.debug(f"Painted {frames} palette frame(s) onto {effect.name!r}")
