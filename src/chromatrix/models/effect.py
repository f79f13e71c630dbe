"""Effect model: an ordered sequence of frames bound to one keyboard."""

import logging
from pathlib import Path

from chromatrix.devices.registry import DeviceRegistry, Keyboard, get_registry
from chromatrix.exceptions import InvalidFpsError

from .document import EffectDocument
from .matrix import EffectMatrix

logger = logging.getLogger(__name__)

FPS_RANGE = range(1, 81)
DEFAULT_MAP_GRAPHIC = "blackwidow_v3_en_US.svg"


class Effect:
    """A named, timed animation for one keyboard's lighting matrix.

    The matrix size comes from the keyboard and is shared by every frame.
    Frames are only added through ``new_frame``, which appends a black frame
    and returns it for painting.

    Example:
        ```python
        effect = Effect(Keyboard.RAZER_HUNTSMAN, icon="icon.png")
        effect.set_fps(30)
        frame = effect.new_frame()
        frame.set(0, 0, Color.from_hex("#FF0000"))
        effect.save(Path("red.json"))
        ```
    """

    def __init__(
        self,
        keyboard: Keyboard,
        icon: str | Path,
        *,
        registry: DeviceRegistry | None = None,
    ):
        """
        Create an empty effect.

        Args:
            keyboard: Target keyboard
            icon: Icon file; resolved to an absolute path when encoding
            registry: Keyboard registry (defaults to the process-wide registry)

        Raises:
            UnsupportedDeviceError: If the keyboard has no lighting matrix
        """
        self._registry = registry or get_registry()
        geometry = self._registry.require_matrix(keyboard)

        self.name = "Unnamed"
        self.author = ""
        self.icon = Path(icon)
        self.summary = ""
        self.loop = True
        self.map_graphic = DEFAULT_MAP_GRAPHIC
        self._keyboard = keyboard
        self._fps = 1
        self._width = geometry.cols
        self._height = geometry.rows
        self._frames: list[EffectMatrix] = []

        logger.debug(f"Created effect for {keyboard.value} ({self._width}x{self._height})")

    def __len__(self) -> int:
        return len(self._frames)

    def __repr__(self) -> str:
        return (
            f"Effect(name={self.name!r}, keyboard={self._keyboard.value}, "
            f"fps={self._fps}, frames={len(self._frames)})"
        )

    @property
    def keyboard(self) -> Keyboard:
        return self._keyboard

    @property
    def registry(self) -> DeviceRegistry:
        return self._registry

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def frames(self) -> tuple[EffectMatrix, ...]:
        return tuple(self._frames)

    @property
    def fps(self) -> int:
        return self._fps

    @fps.setter
    def fps(self, value: int) -> None:
        self.set_fps(value)

    def set_fps(self, fps: int) -> None:
        """
        Set the playback rate.

        Raises:
            InvalidFpsError: If fps is not a whole number in 1..80
        """
        if isinstance(fps, bool) or not isinstance(fps, int) or fps not in FPS_RANGE:
            raise InvalidFpsError(fps)
        self._fps = fps

    def new_frame(self) -> EffectMatrix:
        """Append a black frame and return it for painting."""
        frame = EffectMatrix(self._width, self._height)
        self._frames.append(frame)
        return frame

    def to_document(self) -> EffectDocument:
        """Build the effect file document (see ``chromatrix.encoder``)."""
        from chromatrix.encoder import build_document

        return build_document(self)

    def to_json(self, indent: int | None = None) -> str:
        """Encode the effect file as a JSON string."""
        from chromatrix.encoder import encode_effect

        return encode_effect(self, indent=indent)

    def save(self, path: str | Path, indent: int | None = None) -> None:
        """Encode and write the effect file."""
        from chromatrix.encoder import save_effect

        save_effect(self, Path(path), indent=indent)
