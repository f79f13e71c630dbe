"""Pydantic schema of the effect file read by the lighting front end.

Field order follows the file format. ``type``, ``save_format`` and
``revision`` identify the format version and never change.
"""

from typing import Literal

from pydantic import BaseModel, Field

EFFECT_TYPE = 3
SAVE_FORMAT = 8
REVISION = 1

# Frame: row index -> column index -> "#RRGGBB"; unlit pixels are omitted
EffectFrame = dict[str, dict[str, str]]


class EffectDocument(BaseModel):
    """A complete effect file."""

    name: str
    type: Literal[3] = EFFECT_TYPE
    author: str = ""
    icon: str = Field(description="Absolute path to the effect icon")
    summary: str = ""
    map_device: str = Field(description="Display name of the target keyboard")
    map_device_icon: str = "keyboard"
    map_graphic: str = Field(description="Layout graphic shown by the editor")
    map_cols: int = Field(ge=1)
    map_rows: int = Field(ge=1)
    save_format: Literal[8] = SAVE_FORMAT
    revision: Literal[1] = REVISION
    fps: int = Field(ge=1, le=80)
    loop: bool = True
    frames: list[EffectFrame] = Field(default_factory=list)

    @property
    def lit_pixels(self) -> int:
        """Total number of pixel entries across all frames."""
        return sum(len(cols) for frame in self.frames for cols in frame.values())
