"""Color model for effect frames."""

import math
import re

from pydantic import BaseModel, ConfigDict

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")


def _quantize_channel(value: float) -> int:
    """Scale a normalized channel to 8 bits, clamping before truncation."""
    if math.isnan(value):
        return 0
    return int(min(max(value * 255.0, 0.0), 255.0))


class Color(BaseModel):
    """RGB color with normalized floating-point channels.

    Channels are nominally in the 0.0-1.0 range but are not validated at
    construction, so intermediate results of blending can overshoot. Values
    are clamped when the color is quantized to 8 bits for output.

    The model is frozen so colors are hashable and safe to share between
    frames.
    """

    model_config = ConfigDict(frozen=True)

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    @classmethod
    def black(cls) -> "Color":
        """Create an unlit (black) color."""
        return cls(r=0.0, g=0.0, b=0.0)

    @classmethod
    def from_quantized(cls, r: int, g: int, b: int) -> "Color":
        """Create a color from 8-bit channel values (0-255)."""
        return cls(r=r / 255.0, g=g / 255.0, b=b / 255.0)

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float) -> "Color":
        """Create a color from hue (degrees), saturation and lightness.

        Hue wraps modulo 360; saturation and lightness are clamped to 0.0-1.0.

        Example:
            >>> Color.from_hsl(120, 1.0, 0.5).to_hex()
            '#00FF00'
        """
        h = h % 360.0
        s = min(max(s, 0.0), 1.0)
        l = min(max(l, 0.0), 1.0)

        c = (1.0 - abs(2.0 * l - 1.0)) * s
        x = c * (1.0 - abs((h / 60.0) % 2.0 - 1.0))
        m = l - c / 2.0

        if h <= 60.0:
            r, g, b = c, x, 0.0
        elif h <= 120.0:
            r, g, b = x, c, 0.0
        elif h <= 180.0:
            r, g, b = 0.0, c, x
        elif h <= 240.0:
            r, g, b = 0.0, x, c
        elif h <= 300.0:
            r, g, b = x, 0.0, c
        else:
            r, g, b = c, 0.0, x

        return cls(r=r + m, g=g + m, b=b + m)

    @classmethod
    def from_hex(cls, text: str) -> "Color":
        """Parse a CSS-style hex color.

        Accepts ``RGB``, ``RGBA``, ``RRGGBB`` and ``RRGGBBAA`` with an optional
        leading ``#``. The alpha digits are ignored. The short forms only carry
        16 levels per channel (each digit is divided by 15).

        Raises:
            ValueError: If the string has another length or a non-hex digit
        """
        digits = text[1:] if text.startswith("#") else text
        if not _HEX_DIGITS.fullmatch(digits):
            raise ValueError(f"Invalid hex color: {text!r}")

        if len(digits) in (3, 4):
            return cls(
                r=int(digits[0], 16) / 15.0,
                g=int(digits[1], 16) / 15.0,
                b=int(digits[2], 16) / 15.0,
            )
        if len(digits) in (6, 8):
            return cls.from_quantized(
                int(digits[0:2], 16),
                int(digits[2:4], 16),
                int(digits[4:6], 16),
            )
        raise ValueError(f"Invalid hex color length {len(digits)}: {text!r}")

    def to_quantized(self) -> tuple[int, int, int]:
        """Convert to 8-bit RGB tuple (scale by 255, clamp, truncate)."""
        return (
            _quantize_channel(self.r),
            _quantize_channel(self.g),
            _quantize_channel(self.b),
        )

    def is_black(self) -> bool:
        """True when every channel quantizes to zero."""
        return self.to_quantized() == (0, 0, 0)

    def to_hex(self) -> str:
        """Convert to uppercase hex string (e.g., '#FF7F00')."""
        r, g, b = self.to_quantized()
        return f"#{r:02X}{g:02X}{b:02X}"

    def lerp(self, other: "Color", t: float) -> "Color":
        """Linearly interpolate towards ``other`` (t=0 is self, t=1 is other)."""
        return Color(
            r=(1.0 - t) * self.r + t * other.r,
            g=(1.0 - t) * self.g + t * other.g,
            b=(1.0 - t) * self.b + t * other.b,
        )
