"""Application configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field, field_serializer

from chromatrix.devices.input_devices import DEFAULT_INPUT_DEVICES_PATH
from chromatrix.utils.persistence import PydanticPersistence

from .effect import DEFAULT_MAP_GRAPHIC


def default_config_path() -> Path:
    """Location of the user configuration file."""
    return Path.home() / ".chromatrix" / "config.json"


class AppConfig(BaseModel):
    """User defaults applied to generated effects and device detection."""

    # Effect metadata defaults
    author: str = Field(default="", description="Author written into generated effects")
    icon: Path | None = Field(
        default=None, description="Default icon file for generated effects"
    )
    fps: int = Field(default=30, ge=1, le=80, description="Default frames per second")
    loop: bool = Field(default=True, description="Whether generated effects loop")
    map_graphic: str = Field(
        default=DEFAULT_MAP_GRAPHIC, description="Layout graphic referenced by effects"
    )

    # Detection
    input_devices_path: Path = Field(
        default=DEFAULT_INPUT_DEVICES_PATH,
        description="Input device listing used for keyboard autodetection",
    )
    brand_marker: str | None = Field(
        default=None,
        description="Override for the device name substring used to pre-filter detection",
    )

    # Output
    output_dir: Path = Field(
        default_factory=lambda: Path.home() / ".config" / "polychromatic" / "effects",
        description="Directory for effects saved without an explicit path",
    )

    @field_serializer("icon", "input_devices_path", "output_dir")
    def serialize_path(self, path: Path | None) -> str | None:
        """Serialize Path to string."""
        return str(path) if path is not None else None

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses ~/.chromatrix/config.json.

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        if path is None:
            path = default_config_path()
        return PydanticPersistence.load_or_default(path, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        if path is None:
            path = default_config_path()
        PydanticPersistence.save_json(self, path, backup=True)
