"""Tests for the built-in effect generators."""

import numpy as np
import pytest

from chromatrix.devices import Keyboard
from chromatrix.generators import (
    PRIDE_PALETTE,
    palette_colors,
    palette_sweep,
    rainbow,
    sample_palette,
    simple_ease,
)
from chromatrix.models import Color, Effect


class TestRainbow:
    """Test the rainbow generator."""

    @pytest.mark.unit
    def test_frame_count(self, huntsman_effect):
        """One frame per requested step."""
        rainbow(huntsman_effect, frames=12)
        assert len(huntsman_effect) == 12

    @pytest.mark.unit
    def test_every_pixel_lit(self, huntsman_effect):
        """Full-saturation hues are never black."""
        rainbow(huntsman_effect, frames=2)
        assert all(frame.lit_count() == 22 * 6 for frame in huntsman_effect.frames)

    @pytest.mark.unit
    def test_last_frame_completes_turn(self, huntsman_effect):
        """The final frame is rotated a full 360 degrees."""
        rainbow(huntsman_effect, frames=4)
        assert huntsman_effect.frames[-1].get(0, 0).to_hex() == "#FF0000"

    @pytest.mark.unit
    def test_alternate_rows_mirror(self, huntsman_effect):
        """First column shares its hue across rows; others run opposite."""
        rainbow(huntsman_effect, frames=1)
        frame = huntsman_effect.frames[0]
        assert frame.get(0, 0) == frame.get(0, 1)
        assert frame.get(5, 0) != frame.get(5, 1)

    @pytest.mark.unit
    def test_rejects_zero_frames(self, huntsman_effect):
        """At least one frame is required."""
        with pytest.raises(ValueError):
            rainbow(huntsman_effect, frames=0)


class TestPaletteSweep:
    """Test the palette sweep generator."""

    @pytest.mark.unit
    def test_columns_are_uniform(self, huntsman_effect):
        """Each column has one color across every row."""
        palette_sweep(huntsman_effect, frames=3)
        assert len(huntsman_effect) == 3
        for frame in huntsman_effect.frames:
            for x in range(frame.width):
                column = {frame.get(x, y) for y in range(frame.height)}
                assert len(column) == 1

    @pytest.mark.unit
    def test_single_color_palette(self, icon_file):
        """A one-entry palette paints that color everywhere."""
        effect = Effect(Keyboard.RAZER_ORNATA_CHROMA, icon_file)
        palette_sweep(effect, palette=[Color(r=1.0)], frames=2)
        for frame in effect.frames:
            for _, _, color in frame.pixels():
                assert color.g == 0.0 and color.b == 0.0
                assert color.r == pytest.approx(1.0)

    @pytest.mark.unit
    def test_empty_palette(self, huntsman_effect):
        """Empty palettes are rejected."""
        with pytest.raises(ValueError):
            palette_sweep(huntsman_effect, palette=[], frames=1)


class TestPaletteHelpers:
    """Test palette math."""

    @pytest.mark.unit
    def test_pride_palette_parses(self):
        """Every palette entry is a valid hex color."""
        colors = palette_colors(PRIDE_PALETTE)
        assert colors.shape == (len(PRIDE_PALETTE), 3)
        assert colors[0] == pytest.approx([229 / 255, 0.0, 0.0])

    @pytest.mark.unit
    def test_ease_endpoints(self):
        """Easing maps 0 to 0, 0.5 to 0.5 and 1 to 1."""
        eased = simple_ease(np.array([0.0, 0.5, 1.0]))
        assert eased == pytest.approx([0.0, 0.5, 1.0])

    @pytest.mark.unit
    def test_sample_on_entries(self):
        """Positions at slice starts give the palette entry itself."""
        palette = palette_colors(["#FF0000", "#0000FF"])
        rgb = sample_palette(palette, np.array([0.0, 0.5, 1.0]))
        assert rgb[0] == pytest.approx([1.0, 0.0, 0.0])
        assert rgb[1] == pytest.approx([0.0, 0.0, 1.0])
        assert rgb[2] == pytest.approx([1.0, 0.0, 0.0])
