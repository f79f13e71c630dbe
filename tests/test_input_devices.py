"""Tests for the host input device listing parser."""

import pytest

from chromatrix.devices import (
    BusInputDeviceId,
    BusInputField,
    parse_input_devices,
    query_input_devices,
)
from chromatrix.exceptions import DeviceParseError

IDENTITY = "I: Bus=0003 Vendor=1532 Product=0203 Version=0111"


def record(*lines: str) -> str:
    return "\n".join(lines) + "\n"


class TestParseListing:
    """Test parsing well-formed listings."""

    @pytest.mark.unit
    def test_sample_listing(self, sample_listing):
        """Every record is parsed in order."""
        devices = parse_input_devices(sample_listing)
        assert len(devices) == 6
        assert devices[0].name == "Power Button"
        assert devices[1].name == "Razer Razer BlackWidow Chroma"
        assert devices[1].id == BusInputDeviceId(bus_type=0x0003, vendor=0x1532, product=0x0203, version=0x0111)

    @pytest.mark.unit
    def test_unparsed_fields_kept_in_order(self, sample_listing):
        """Unrecognized lines are preserved verbatim."""
        device = parse_input_devices(sample_listing)[0]
        tags = [f.tag for f in device.unparsed_fields]
        assert tags == ["P", "S", "U", "H", "B", "B"]
        assert device.unparsed_fields[2] == BusInputField("U", "Uniq=")
        assert device.unparsed_fields[3].value == "Handlers=kbd event0 "
        assert device.field_values("B") == ["PROP=0", "EV=3"]

    @pytest.mark.unit
    def test_lowercase_hex(self):
        """Hex identifiers are case-insensitive."""
        text = record("I: Bus=0003 Vendor=046d Product=c52b Version=0111", 'N: Name="Receiver"')
        device = parse_input_devices(text)[0]
        assert (device.id.vendor, device.id.product) == (0x046D, 0xC52B)

    @pytest.mark.unit
    def test_empty_listing(self):
        """No records parses to an empty list."""
        assert parse_input_devices("") == []
        assert parse_input_devices("\n\n") == []

    @pytest.mark.unit
    def test_extra_blank_lines(self):
        """Several blank lines between records are one separator."""
        text = record(IDENTITY, "N: Name=A") + "\n\n\n" + record(IDENTITY, "N: Name=B")
        assert [d.name for d in parse_input_devices(text)] == ["A", "B"]


class TestNameField:
    """Test N: line handling."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "line, expected",
        [
            ("N: MyDevice", "MyDevice"),
            ('N: "My Device"', "My Device"),
            ("N: Name=MyDevice", "MyDevice"),
            ('N: Name="My Device"', "My Device"),
            ('N: Name="', '"'),
            ('N: Name=Half"', 'Half"'),
            ("N: Name=", ""),
        ],
    )
    def test_name_forms(self, line, expected):
        """Quoted names lose their quotes, bare names are kept verbatim."""
        assert parse_input_devices(record(IDENTITY, line))[0].name == expected


class TestMalformedListing:
    """Test that structural violations abort the whole parse."""

    @pytest.mark.unit
    def test_missing_identity(self):
        """A record without an I: line names the identity field."""
        with pytest.raises(DeviceParseError) as exc_info:
            parse_input_devices(record('N: Name="Keyboard"', "P: Phys=usb"))
        assert exc_info.value.reason == "Device ID field is required"
        assert "ID" in str(exc_info.value)

    @pytest.mark.unit
    def test_missing_name(self):
        """A record without an N: line names the name field."""
        with pytest.raises(DeviceParseError) as exc_info:
            parse_input_devices(record(IDENTITY, "P: Phys=usb"))
        assert exc_info.value.reason == "Device name field is required"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "identity, reason",
        [
            ("I: Bus0003 Vendor=1532 Product=0203 Version=0111", "Device ID field malformed"),
            ("I: Bus=0003 Vendor=1532=1 Product=0203 Version=0111", "Device ID field malformed"),
            ("I: Bus=0003  Vendor=1532 Product=0203 Version=0111", "Device ID field malformed"),
            ("I: Bus=0003 Vendor=ZZZZ Product=0203 Version=0111", "ID field could not parse ID number from subfield"),
            ("I: Bus=0003 Vendor=15320 Product=0203 Version=0111", "ID field could not parse ID number from subfield"),
            ("I: Bus=0003 Vendor= Product=0203 Version=0111", "ID field could not parse ID number from subfield"),
            ("I: Vendor=1532 Product=0203 Version=0111", "ID field could not find bustype subfield"),
            ("I: Bus=0003 Product=0203 Version=0111", "ID field could not find vendor subfield"),
            ("I: Bus=0003 Vendor=1532 Version=0111", "ID field could not find product subfield"),
            ("I: Bus=0003 Vendor=1532 Product=0203", "ID field could not find version subfield"),
        ],
    )
    def test_bad_identity(self, identity, reason):
        """Each identity problem is reported specifically."""
        with pytest.raises(DeviceParseError) as exc_info:
            parse_input_devices(record(identity, "N: Name=Keyboard"))
        assert exc_info.value.reason == reason

    @pytest.mark.unit
    @pytest.mark.parametrize("line", ["P", "P:", "P:Phys=usb", "P Phys=usb", "PP: Phys=usb"])
    def test_bad_line_shape(self, line):
        """Lines must look like 'T: value'."""
        with pytest.raises(DeviceParseError) as exc_info:
            parse_input_devices(record(IDENTITY, "N: Name=Keyboard", line))
        assert exc_info.value.reason == "Failed to parse device field"

    @pytest.mark.unit
    def test_first_error_aborts_everything(self, sample_listing):
        """A bad record after good ones yields no partial result."""
        text = sample_listing + "\n" + record("N: Name=Broken")
        with pytest.raises(DeviceParseError) as exc_info:
            parse_input_devices(text)
        assert exc_info.value.record_index == 6

    @pytest.mark.unit
    def test_parse_error_is_value_error(self):
        """DeviceParseError can be caught as ValueError."""
        with pytest.raises(ValueError):
            parse_input_devices(record("N: Name=Keyboard"))


class TestQueryInputDevices:
    """Test reading the listing from disk."""

    @pytest.mark.unit
    def test_reads_file(self, listing_file):
        """The whole file is parsed."""
        assert len(query_input_devices(listing_file)) == 6

    @pytest.mark.unit
    def test_missing_file(self, temp_dir):
        """I/O errors propagate unchanged."""
        with pytest.raises(FileNotFoundError):
            query_input_devices(temp_dir / "nope")

    @pytest.mark.unit
    def test_invalid_utf8(self, temp_dir):
        """Undecodable bytes in a device name are a parse error."""
        path = temp_dir / "devices"
        path.write_bytes(
            b"I: Bus=0003 Vendor=1532 Product=0227 Version=0111\n"
            b'N: Name="Razer \xff Huntsman"\n'
        )
        with pytest.raises(DeviceParseError) as exc_info:
            query_input_devices(path)
        assert exc_info.value.reason == "Device listing is not valid UTF-8"
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)
