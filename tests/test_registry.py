"""Tests for the keyboard capability registry."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from chromatrix.devices import DeviceRegistry, Keyboard, UsbId, get_registry
from chromatrix.devices.registry import DEFAULT_REGISTRY_PATH
from chromatrix.exceptions import ConfigValidationError, UnsupportedDeviceError


def write_table(path: Path, mutate) -> Path:
    """Copy the packaged table to ``path`` after applying ``mutate``."""
    table = json.loads(DEFAULT_REGISTRY_PATH.read_text(encoding="utf-8"))
    mutate(table)
    path.write_text(json.dumps(table), encoding="utf-8")
    return path


class TestRegistryTable:
    """Test the packaged table."""

    @pytest.mark.unit
    def test_every_keyboard_has_an_entry(self, registry):
        """The table covers the enumeration exactly, in declaration order."""
        assert registry.keyboards() == list(Keyboard)
        assert len(registry.keyboards()) == 55

    @pytest.mark.unit
    def test_usb_ids_are_unique(self, registry):
        """No identifier pair is claimed by two keyboards."""
        all_ids = [usb_id for kb in Keyboard for usb_id in registry.spec(kb).usb_ids]
        assert len(all_ids) == len(set(all_ids))

    @pytest.mark.unit
    def test_every_keyboard_is_detectable(self, registry):
        """Each keyboard has at least one identifier."""
        for keyboard in Keyboard:
            assert registry.spec(keyboard).usb_ids, f"{keyboard.value} has no USB IDs"

    @pytest.mark.unit
    def test_brand_marker_and_icon(self, registry):
        """Table-level metadata."""
        assert registry.brand_marker == "Razer"
        assert registry.device_icon == "keyboard"

    @pytest.mark.unit
    def test_singleton(self):
        """get_registry returns one shared instance."""
        assert get_registry() is get_registry()


class TestGeometry:
    """Test lighting matrix lookups."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "keyboard, size",
        [
            (Keyboard.RAZER_BLACKWIDOW_CHROMA, (22, 6)),
            (Keyboard.RAZER_HUNTSMAN_ELITE, (22, 9)),
            (Keyboard.RAZER_HUNTSMAN_MINI, (15, 5)),
            (Keyboard.RAZER_BLACKWIDOW_V4_PRO, (23, 8)),
            (Keyboard.RAZER_DEATHSTALKER_CHROMA, (6, 1)),
            (Keyboard.RAZER_ORNATA_V3_X, (1, 1)),
        ],
    )
    def test_matrix_sizes(self, registry, keyboard, size):
        """Known keyboards report their grid size."""
        geometry = registry.require_matrix(keyboard)
        assert (geometry.cols, geometry.rows) == size
        assert keyboard.has_matrix

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "keyboard",
        [Keyboard.RAZER_ANANSI, Keyboard.RAZER_BLACKWIDOW_LITE, Keyboard.RAZER_BOOK_13_2020],
    )
    def test_no_matrix(self, registry, keyboard):
        """Keyboards without per-key lighting fail explicitly."""
        assert registry.matrix(keyboard) is None
        assert not keyboard.has_matrix
        with pytest.raises(UnsupportedDeviceError) as exc_info:
            registry.require_matrix(keyboard)
        assert exc_info.value.keyboard is keyboard
        assert keyboard.display_name in exc_info.value.user_message

    @pytest.mark.unit
    def test_lighting_keyboards(self, registry):
        """Only keyboards with a matrix are listed."""
        lighting = registry.lighting_keyboards()
        assert Keyboard.RAZER_ANANSI not in lighting
        assert Keyboard.RAZER_HUNTSMAN in lighting
        assert all(registry.matrix(kb) is not None for kb in lighting)


class TestUsbLookup:
    """Test identifier matching."""

    @pytest.mark.unit
    def test_match(self, registry):
        """A known pair resolves to its keyboard."""
        assert registry.match_usb_id(0x1532, 0x0203) is Keyboard.RAZER_BLACKWIDOW_CHROMA

    @pytest.mark.unit
    def test_multiple_revisions(self, registry):
        """Both hardware revisions of the Ornata V3 match."""
        assert registry.match_usb_id(0x1532, 0x028F) is Keyboard.RAZER_ORNATA_V3
        assert registry.match_usb_id(0x1532, 0x02A1) is Keyboard.RAZER_ORNATA_V3
        assert len(Keyboard.RAZER_ORNATA_V3.usb_ids) == 2

    @pytest.mark.unit
    def test_no_match(self, registry):
        """Unknown pairs and other vendors return None."""
        assert registry.match_usb_id(0x1532, 0xFFFF) is None
        assert registry.match_usb_id(0x046D, 0x0203) is None

    @pytest.mark.unit
    def test_usb_id_notation(self):
        """USB IDs parse from and format to VVVV:PPPP."""
        usb_id = UsbId.model_validate("1532:0a24")
        assert usb_id == UsbId(vendor_id=0x1532, product_id=0x0A24)
        assert str(usb_id) == "1532:0A24"

    @pytest.mark.unit
    @pytest.mark.parametrize("text", ["1532-0203", "1532:203", "15320:0203", "zzzz:0203"])
    def test_bad_usb_id_notation(self, text):
        """Malformed identifiers are rejected."""
        with pytest.raises(ValidationError):
            UsbId.model_validate(text)


class TestKeyboardEnum:
    """Test Keyboard enum helpers."""

    @pytest.mark.unit
    def test_display_name(self):
        """Display names come from the table."""
        assert Keyboard.RAZER_HUNTSMAN_MINI_JP.display_name == "Razer Huntsman Mini (JP)"
        assert str(Keyboard.RAZER_HUNTSMAN) == "Razer Huntsman"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "text",
        ["razer_ornata_chroma", "RAZER_ORNATA_CHROMA", "Razer Ornata Chroma", "  razer ornata chroma "],
    )
    def test_parse(self, text):
        """Lookup by value, member name or display name."""
        assert Keyboard.parse(text) is Keyboard.RAZER_ORNATA_CHROMA

    @pytest.mark.unit
    def test_parse_unknown(self):
        """Unknown names raise ValueError."""
        with pytest.raises(ValueError):
            Keyboard.parse("Logitech G915")


class TestTableValidation:
    """Test that inconsistent tables are rejected at load time."""

    @pytest.mark.unit
    def test_duplicate_usb_id(self, temp_dir):
        """Two keyboards claiming one identifier is an error."""

        def mutate(table):
            table["keyboards"][1]["usb_ids"] = table["keyboards"][0]["usb_ids"]

        path = write_table(temp_dir / "keyboards.json", mutate)
        with pytest.raises(ConfigValidationError) as exc_info:
            DeviceRegistry(path)
        assert "claimed by both" in exc_info.value.user_message

    @pytest.mark.unit
    def test_missing_entry(self, temp_dir):
        """Every enum member needs a row."""
        path = write_table(temp_dir / "keyboards.json", lambda t: t["keyboards"].pop())
        with pytest.raises(ConfigValidationError) as exc_info:
            DeviceRegistry(path)
        assert "razer_blackwidow_v3_tenkeyless" in exc_info.value.user_message

    @pytest.mark.unit
    def test_unknown_entry(self, temp_dir):
        """Rows without an enum member are rejected."""

        def mutate(table):
            table["keyboards"].append(
                {"key": "razer_prototype", "name": "Prototype", "usb_ids": ["1532:FFFE"]}
            )

        path = write_table(temp_dir / "keyboards.json", mutate)
        with pytest.raises(ConfigValidationError) as exc_info:
            DeviceRegistry(path)
        assert "razer_prototype" in exc_info.value.user_message

    @pytest.mark.unit
    def test_zero_area_matrix(self, temp_dir):
        """Matrix dimensions must be at least 1."""

        def mutate(table):
            table["keyboards"][8]["matrix"] = {"cols": 0, "rows": 6}

        path = write_table(temp_dir / "keyboards.json", mutate)
        with pytest.raises(ConfigValidationError):
            DeviceRegistry(path)
