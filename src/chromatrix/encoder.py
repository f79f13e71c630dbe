"""
Effect file encoder.

Turns an ``Effect`` into the JSON document the lighting front end loads.

Frames are encoded sparsely: only pixels that do not quantize to black are
written, keyed by row and then column as decimal strings. An omitted pixel
means "unlit", not "unchanged from the previous frame". A frame with no lit
pixels is still written, as an empty mapping, so frame timing is preserved.

Encoding is all-or-nothing: the whole document is built and serialized in
memory before anything is written, and the write itself goes through a temp
file, so a failure never leaves a partial effect file.
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from chromatrix.exceptions import EffectSerializationError
from chromatrix.models.document import EffectDocument, EffectFrame
from chromatrix.models.matrix import EffectMatrix
from chromatrix.utils.persistence import PydanticPersistence

if TYPE_CHECKING:
    from chromatrix.models.effect import Effect

logger = logging.getLogger(__name__)


def encode_frame(frame: EffectMatrix) -> EffectFrame:
    """Sparse mapping of a frame's lit pixels: {row: {col: "#RRGGBB"}}."""
    rows: EffectFrame = {}
    for x, y, color in frame.pixels():
        if color.is_black():
            continue
        rows.setdefault(str(y), {})[str(x)] = color.to_hex()
    return rows


def build_document(effect: "Effect") -> EffectDocument:
    """
    Build the effect file document.

    Raises:
        FileNotFoundError: If the icon path cannot be resolved
        EffectSerializationError: If the document fails validation
    """
    icon = effect.icon.resolve(strict=True)
    registry = effect.registry

    try:
        document = EffectDocument(
            name=effect.name,
            author=effect.author,
            icon=str(icon),
            summary=effect.summary,
            map_device=registry.display_name(effect.keyboard),
            map_device_icon=registry.device_icon,
            map_graphic=effect.map_graphic,
            map_cols=effect.width,
            map_rows=effect.height,
            fps=effect.fps,
            loop=effect.loop,
            frames=[encode_frame(frame) for frame in effect.frames],
        )
    except ValidationError as e:
        raise EffectSerializationError(effect.name, str(e)) from e

    logger.debug(
        f"Built document for {effect.name!r}: {len(document.frames)} frame(s), "
        f"{document.lit_pixels} lit pixel(s)"
    )
    return document


def encode_effect(effect: "Effect", indent: int | None = None) -> str:
    """
    Encode an effect as a JSON string.

    Raises:
        FileNotFoundError: If the icon path cannot be resolved
        EffectSerializationError: If the document cannot be built or serialized
    """
    document = build_document(effect)
    try:
        return document.model_dump_json(indent=indent)
    except PydanticSerializationError as e:
        raise EffectSerializationError(effect.name, str(e)) from e


def save_effect(effect: "Effect", path: Path, indent: int | None = None) -> None:
    """
    Encode an effect and write it to ``path``.

    The file is only touched once the full document has been serialized.

    Raises:
        OSError: If the icon cannot be resolved or the file cannot be written
        EffectSerializationError: If the document cannot be built or serialized
    """
    content = encode_effect(effect, indent=indent)
    PydanticPersistence.write_text_atomic(path, content)
    logger.info(f"Saved effect {effect.name!r} ({len(effect)} frames) to {path}")


def load_document(path: Path) -> EffectDocument:
    """
    Load and validate an effect file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ConfigFileInvalidError: If the JSON syntax is invalid
        ConfigValidationError: If the document does not match the format
    """
    return PydanticPersistence.load_json(path, EffectDocument)
