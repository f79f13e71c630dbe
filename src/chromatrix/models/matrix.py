"""Single animation frame: a fixed-size grid of colors."""

from collections.abc import Callable, Iterator
from numbers import Integral

from .color import Color


def _is_coordinate(value: object) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


class EffectMatrix:
    """One frame of an effect, stored row-major.

    The size is fixed at construction and every pixel starts black.
    Coordinates outside the grid never raise: reads return None and
    writes are ignored (returning None).
    """

    def __init__(self, width: int, height: int):
        if width < 1 or height < 1:
            raise ValueError(f"Matrix must be at least 1x1, got {width}x{height}")
        self._width = width
        self._height = height
        self._values: list[Color] = [Color.black()] * (width * height)

    def __repr__(self) -> str:
        return f"EffectMatrix(width={self._width}, height={self._height}, lit={self.lit_count()})"

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def values(self) -> tuple[Color, ...]:
        """Snapshot of all pixels in row-major order."""
        return tuple(self._values)

    def index(self, x: int, y: int) -> int | None:
        """Flat index of (x, y), or None if it lies outside the grid.

        Only whole-number coordinates address a pixel; anything else
        (floats, bools) is treated as outside the grid.
        """
        if not (_is_coordinate(x) and _is_coordinate(y)):
            return None
        if not (0 <= x < self._width and 0 <= y < self._height):
            return None
        return x + y * self._width

    def get(self, x: int, y: int) -> Color | None:
        """Color at (x, y), or None if out of bounds."""
        i = self.index(x, y)
        if i is None:
            return None
        return self._values[i]

    def set(self, x: int, y: int, color: Color) -> Color | None:
        """Paint (x, y). Returns the stored color, or None if out of bounds."""
        i = self.index(x, y)
        if i is None:
            return None
        self._values[i] = color
        return color

    def fill(self, color: Color) -> None:
        """Paint every pixel with one color."""
        self._values = [color] * len(self._values)

    def paint(self, fn: Callable[[int, int, Color], Color]) -> None:
        """Replace every pixel with ``fn(x, y, current_color)``, row by row."""
        self._values = [fn(x, y, color) for x, y, color in self.pixels()]

    def pixels(self) -> Iterator[tuple[int, int, Color]]:
        """Iterate (x, y, color) in row-major order."""
        for i, color in enumerate(self._values):
            yield i % self._width, i // self._width, color

    def lit_count(self) -> int:
        """Number of pixels that do not quantize to black."""
        return sum(1 for color in self._values if not color.is_black())
