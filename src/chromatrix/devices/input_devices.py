"""Parser for the Linux input device listing (/proc/bus/input/devices).

The listing is a sequence of blank-line separated records::

    I: Bus=0003 Vendor=1532 Product=0203 Version=0111
    N: Name="Razer Razer BlackWidow Chroma"
    P: Phys=usb-0000:00:14.0-1/input0
    H: Handlers=sysrq kbd event3 leds

Only the identity (``I``) and name (``N``) lines are interpreted; every other
line is kept verbatim. Parsing is all-or-nothing: the first malformed record
raises ``DeviceParseError`` and no partial list is returned.
"""

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path

from chromatrix.exceptions import DeviceParseError

logger = logging.getLogger(__name__)

DEFAULT_INPUT_DEVICES_PATH = Path("/proc/bus/input/devices")

_RECORD_SEPARATOR = re.compile(r"\n(?:[ \t]*\n)+")
_HEX16 = re.compile(r"[0-9a-fA-F]{1,4}")

# Required identity subfields and the label used in error messages
_ID_SUBFIELDS = (
    ("Bus", "bustype"),
    ("Vendor", "vendor"),
    ("Product", "product"),
    ("Version", "version"),
)


@dataclass(frozen=True)
class BusInputDeviceId:
    """Identity quadruple from an ``I:`` line."""

    bus_type: int
    vendor: int
    product: int
    version: int


@dataclass(frozen=True)
class BusInputField:
    """A line the parser does not interpret, kept as (tag, raw value)."""

    tag: str
    value: str


@dataclass(frozen=True)
class BusInputDevice:
    """One input device record."""

    id: BusInputDeviceId
    name: str
    unparsed_fields: tuple[BusInputField, ...] = field(default=())

    def field_values(self, tag: str) -> list[str]:
        """Raw values of every unparsed line with the given tag."""
        return [f.value for f in self.unparsed_fields if f.tag == tag]


def _parse_id(value: str, record_index: int) -> BusInputDeviceId:
    ids: dict[str, int] = {}
    for token in value.split(" "):
        parts = token.split("=")
        if len(parts) != 2:
            raise DeviceParseError("Device ID field malformed", record_index, value)
        key, raw = parts
        if not _HEX16.fullmatch(raw):
            raise DeviceParseError(
                "ID field could not parse ID number from subfield", record_index, value
            )
        ids[key] = int(raw, 16)

    values = []
    for key, label in _ID_SUBFIELDS:
        if key not in ids:
            raise DeviceParseError(
                f"ID field could not find {label} subfield", record_index, value
            )
        values.append(ids[key])

    return BusInputDeviceId(*values)


def _parse_name(value: str) -> str:
    if value.startswith("Name="):
        value = value[len("Name="):]
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        return value[1:-1]
    return value


def _parse_record(record: str, record_index: int) -> BusInputDevice:
    device_id: BusInputDeviceId | None = None
    name: str | None = None
    unparsed: list[BusInputField] = []

    for line in record.splitlines():
        if len(line) < 3 or line[1:3] != ": ":
            raise DeviceParseError("Failed to parse device field", record_index, line)
        tag, value = line[0], line[3:]

        if tag == "I":
            device_id = _parse_id(value, record_index)
        elif tag == "N":
            name = _parse_name(value)
        else:
            unparsed.append(BusInputField(tag, value))

    if device_id is None:
        raise DeviceParseError("Device ID field is required", record_index)
    if name is None:
        raise DeviceParseError("Device name field is required", record_index)

    return BusInputDevice(id=device_id, name=name, unparsed_fields=tuple(unparsed))


def parse_input_devices(text: str) -> list[BusInputDevice]:
    """
    Parse a complete input device listing.

    Args:
        text: Entire listing document

    Returns:
        Devices in listing order

    Raises:
        DeviceParseError: On the first record that violates the expected structure
    """
    records = [chunk for chunk in _RECORD_SEPARATOR.split(text) if chunk.strip()]
    devices = [_parse_record(record, index) for index, record in enumerate(records)]
    logger.debug(f"Parsed {len(devices)} input device record(s)")
    return devices


def query_input_devices(path: Path = DEFAULT_INPUT_DEVICES_PATH) -> list[BusInputDevice]:
    """
    Read and parse the host's input device listing.

    Raises:
        OSError: If the listing cannot be read
        DeviceParseError: If the listing is malformed or not valid UTF-8
    """
    logger.debug(f"Reading input devices from {path}")
    try:
        text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise DeviceParseError("Device listing is not valid UTF-8", line=str(e)) from e
    return parse_input_devices(text)
