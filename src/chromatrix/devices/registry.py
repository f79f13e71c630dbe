"""
Keyboard capability registry.

Every supported keyboard is a member of the closed ``Keyboard`` enumeration.
Its display name, USB identifiers and lighting-matrix geometry live in the
packaged ``keyboards.json`` table, validated by Pydantic when the registry is
first used. Adding hardware means adding an enum member and a table row.

How Detection Uses the Registry
-------------------------------

::

    /proc/bus/input/devices record: Vendor=1532 Product=0203
                                  ↓
    DeviceRegistry.match_usb_id(0x1532, 0x0203)
                                  ↓
    Keyboard.RAZER_BLACKWIDOW_CHROMA  (22 x 6 matrix)

The registry is built once per process and never mutated afterwards, so it
can be read from any thread without locking.
"""

import logging
from enum import Enum
from pathlib import Path

from chromatrix.exceptions import ConfigValidationError, UnsupportedDeviceError
from chromatrix.utils.persistence import PydanticPersistence

from .schema import KeyboardSpec, MatrixGeometry, RegistrySchema, UsbId

logger = logging.getLogger(__name__)

DEFAULT_REGISTRY_PATH = Path(__file__).parent / "keyboards.json"


class Keyboard(str, Enum):
    """Supported keyboard variants, in table declaration order."""

    RAZER_BLACKWIDOW_ULTIMATE_2012 = "razer_blackwidow_ultimate_2012"
    RAZER_BLACKWIDOW_STEALTH_EDITION = "razer_blackwidow_stealth_edition"
    RAZER_ANANSI = "razer_anansi"
    RAZER_DEATHSTALKER_ESSENTIAL = "razer_deathstalker_essential"
    RAZER_BLACKWIDOW_ULTIMATE_2013 = "razer_blackwidow_ultimate_2013"
    RAZER_BLACKWIDOW_STEALTH = "razer_blackwidow_stealth"
    RAZER_BLACKWIDOW_TOURNAMENT_EDITION_2014 = "razer_blackwidow_tournament_edition_2014"
    RAZER_DEATHSTALKER_EXPERT = "razer_deathstalker_expert"
    RAZER_BLACKWIDOW_CHROMA = "razer_blackwidow_chroma"
    RAZER_DEATHSTALKER_CHROMA = "razer_deathstalker_chroma"
    RAZER_BLACKWIDOW_CHROMA_TOURNAMENT_EDITION = "razer_blackwidow_chroma_tournament_edition"
    RAZER_BLACKWIDOW_CHROMA_OVERWATCH = "razer_blackwidow_chroma_overwatch"
    RAZER_BLACKWIDOW_ULTIMATE_2016 = "razer_blackwidow_ultimate_2016"
    RAZER_BLACKWIDOW_X_CHROMA = "razer_blackwidow_x_chroma"
    RAZER_BLACKWIDOW_X_ULTIMATE = "razer_blackwidow_x_ultimate"
    RAZER_BLACKWIDOW_X_CHROMA_TOURNAMENT_EDITION = "razer_blackwidow_x_chroma_tournament_edition"
    RAZER_ORNATA_CHROMA = "razer_ornata_chroma"
    RAZER_ORNATA = "razer_ornata"
    RAZER_BLACKWIDOW_CHROMA_V2 = "razer_blackwidow_chroma_v2"
    RAZER_HUNTSMAN_ELITE = "razer_huntsman_elite"
    RAZER_HUNTSMAN = "razer_huntsman"
    RAZER_BLACKWIDOW_ELITE = "razer_blackwidow_elite"
    RAZER_CYNOSA_CHROMA = "razer_cynosa_chroma"
    RAZER_CYNOSA_CHROMA_PRO = "razer_cynosa_chroma_pro"
    RAZER_BLACKWIDOW_LITE = "razer_blackwidow_lite"
    RAZER_BLACKWIDOW_ESSENTIAL = "razer_blackwidow_essential"
    RAZER_CYNOSA_LITE = "razer_cynosa_lite"
    RAZER_BLACKWIDOW_2019 = "razer_blackwidow_2019"
    RAZER_HUNTSMAN_TOURNAMENT_EDITION = "razer_huntsman_tournament_edition"
    RAZER_BLACKWIDOW_V3 = "razer_blackwidow_v3"
    RAZER_HUNTSMAN_MINI = "razer_huntsman_mini"
    RAZER_BLACKWIDOW_V3_MINI_HYPERSPEED_WIRED = "razer_blackwidow_v3_mini_hyperspeed_wired"
    RAZER_BLACKWIDOW_V3_PRO_WIRED = "razer_blackwidow_v3_pro_wired"
    RAZER_BLACKWIDOW_V3_PRO_WIRELESS = "razer_blackwidow_v3_pro_wireless"
    RAZER_ORNATA_V2 = "razer_ornata_v2"
    RAZER_CYNOSA_V2 = "razer_cynosa_v2"
    RAZER_HUNTSMAN_V2_ANALOG = "razer_huntsman_v2_analog"
    RAZER_HUNTSMAN_MINI_JP = "razer_huntsman_mini_jp"
    RAZER_BOOK_13_2020 = "razer_book_13_2020"
    RAZER_HUNTSMAN_V2_TENKEYLESS = "razer_huntsman_v2_tenkeyless"
    RAZER_HUNTSMAN_V2 = "razer_huntsman_v2"
    RAZER_BLACKWIDOW_V3_MINI_HYPERSPEED_WIRELESS = "razer_blackwidow_v3_mini_hyperspeed_wireless"
    RAZER_HUNTSMAN_MINI_ANALOG = "razer_huntsman_mini_analog"
    RAZER_BLACKWIDOW_V4 = "razer_blackwidow_v4"
    RAZER_BLACKWIDOW_V4_PRO = "razer_blackwidow_v4_pro"
    RAZER_DEATHSTALKER_V2_PRO_WIRELESS = "razer_deathstalker_v2_pro_wireless"
    RAZER_DEATHSTALKER_V2_PRO_WIRED = "razer_deathstalker_v2_pro_wired"
    RAZER_BLACKWIDOW_V4_X = "razer_blackwidow_v4_x"
    RAZER_DEATHSTALKER_V2 = "razer_deathstalker_v2"
    RAZER_DEATHSTALKER_V2_PRO_TKL_WIRELESS = "razer_deathstalker_v2_pro_tkl_wireless"
    RAZER_DEATHSTALKER_V2_PRO_TKL_WIRED = "razer_deathstalker_v2_pro_tkl_wired"
    RAZER_ORNATA_V3 = "razer_ornata_v3"
    RAZER_ORNATA_V3_X = "razer_ornata_v3_x"
    RAZER_ORNATA_V3_TENKEYLESS = "razer_ornata_v3_tenkeyless"
    RAZER_BLACKWIDOW_V3_TENKEYLESS = "razer_blackwidow_v3_tenkeyless"

    def __str__(self) -> str:
        return self.display_name

    @property
    def display_name(self) -> str:
        """Name shown by the lighting front end (e.g. 'Razer Huntsman')."""
        return get_registry().display_name(self)

    @property
    def matrix(self) -> MatrixGeometry | None:
        """Lighting matrix geometry, or None when unsupported."""
        return get_registry().matrix(self)

    @property
    def has_matrix(self) -> bool:
        """Whether per-key lighting effects can target this keyboard."""
        return self.matrix is not None

    @property
    def usb_ids(self) -> tuple[UsbId, ...]:
        """USB identifiers for every known hardware revision."""
        return get_registry().spec(self).usb_ids

    @classmethod
    def parse(cls, text: str) -> "Keyboard":
        """
        Look up a keyboard by enum value, member name or display name.

        Matching is case-insensitive.

        Raises:
            ValueError: If nothing matches
        """
        wanted = text.strip().lower()
        for keyboard in cls:
            if wanted in (keyboard.value, keyboard.name.lower(), keyboard.display_name.lower()):
                return keyboard
        raise ValueError(f"Unknown keyboard: {text!r}")


class DeviceRegistry:
    """
    Registry of all supported keyboards.

    Loads the capability table using Pydantic validation and answers
    geometry, naming and USB identifier lookups.
    """

    def __init__(self, config_path: Path | None = None):
        """
        Initialize keyboard registry.

        Args:
            config_path: Path to a keyboards.json table.
                        If None, uses the packaged table.

        Raises:
            ConfigValidationError: If the table is inconsistent with ``Keyboard``
        """
        if config_path is None:
            config_path = DEFAULT_REGISTRY_PATH

        self.config_path = config_path
        self.schema: RegistrySchema = PydanticPersistence.load_json(config_path, RegistrySchema)
        self._specs: dict[Keyboard, KeyboardSpec] = self._index_specs()
        self._by_usb_id: dict[UsbId, Keyboard] = {
            usb_id: keyboard
            for keyboard, spec in self._specs.items()
            for usb_id in spec.usb_ids
        }
        logger.info(
            f"Loaded {len(self._specs)} keyboards ({len(self._by_usb_id)} USB IDs) "
            f"from {config_path}"
        )

    def _index_specs(self) -> dict[Keyboard, KeyboardSpec]:
        """Map each enum member to its table row, requiring a one-to-one match."""
        by_key = {spec.key: spec for spec in self.schema.keyboards}

        unknown = sorted(set(by_key) - {keyboard.value for keyboard in Keyboard})
        if unknown:
            raise ConfigValidationError(
                field="keyboards",
                value=unknown,
                error_msg=f"Unknown keyboard keys: {', '.join(unknown)}",
                file_path=str(self.config_path),
            )

        missing = [keyboard.value for keyboard in Keyboard if keyboard.value not in by_key]
        if missing:
            raise ConfigValidationError(
                field="keyboards",
                value=missing,
                error_msg=f"Missing keyboard entries: {', '.join(missing)}",
                file_path=str(self.config_path),
            )

        return {keyboard: by_key[keyboard.value] for keyboard in Keyboard}

    @property
    def brand_marker(self) -> str:
        """Substring every supported keyboard's input device name contains."""
        return self.schema.brand_marker

    @property
    def device_icon(self) -> str:
        """Device icon tag written into effect files."""
        return self.schema.device_icon

    def spec(self, keyboard: Keyboard) -> KeyboardSpec:
        """Get the full capability entry for a keyboard."""
        return self._specs[keyboard]

    def display_name(self, keyboard: Keyboard) -> str:
        """Get the display name of a keyboard."""
        return self._specs[keyboard].name

    def matrix(self, keyboard: Keyboard) -> MatrixGeometry | None:
        """Get lighting matrix geometry, or None when the keyboard has none."""
        return self._specs[keyboard].matrix

    def require_matrix(self, keyboard: Keyboard) -> MatrixGeometry:
        """
        Get lighting matrix geometry for a keyboard that must support effects.

        Raises:
            UnsupportedDeviceError: If the keyboard has no lighting matrix
        """
        geometry = self.matrix(keyboard)
        if geometry is None:
            raise UnsupportedDeviceError(keyboard, self.display_name(keyboard))
        return geometry

    def match_usb_id(self, vendor_id: int, product_id: int) -> Keyboard | None:
        """
        Find the keyboard claiming a USB identifier pair.

        Returns:
            Matching Keyboard or None if no keyboard claims the pair
        """
        return self._by_usb_id.get(UsbId(vendor_id=vendor_id, product_id=product_id))

    def keyboards(self) -> list[Keyboard]:
        """All keyboards in declaration order."""
        return list(self._specs)

    def lighting_keyboards(self) -> list[Keyboard]:
        """Keyboards with a lighting matrix, in declaration order."""
        return [keyboard for keyboard, spec in self._specs.items() if spec.matrix is not None]


# Singleton instance
_registry: DeviceRegistry | None = None


def get_registry() -> DeviceRegistry:
    """Get singleton DeviceRegistry instance."""
    global _registry
    if _registry is None:
        _registry = DeviceRegistry()
    return _registry
