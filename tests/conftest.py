"""Pytest fixtures for tests."""

from pathlib import Path
from tempfile import TemporaryDirectory

import pytest

from chromatrix.devices import DeviceRegistry, Keyboard, get_registry
from chromatrix.models import Effect

# Trimmed copy of /proc/bus/input/devices from a machine with a
# BlackWidow Chroma (three interfaces) and an Ornata V3 (second revision)
SAMPLE_LISTING = """\
I: Bus=0019 Vendor=0000 Product=0001 Version=0000
N: Name="Power Button"
P: Phys=PNP0C0C/button/input0
S: Sysfs=/devices/LNXSYSTM:00/LNXSYBUS:00/PNP0C0C:00/input/input0
U: Uniq=
H: Handlers=kbd event0 
B: PROP=0
B: EV=3

I: Bus=0003 Vendor=1532 Product=0203 Version=0111
N: Name="Razer Razer BlackWidow Chroma"
P: Phys=usb-0000:00:14.0-2/input0
S: Sysfs=/devices/pci0000:00/0000:00:14.0/usb1/1-2/1-2:1.0/0003:1532:0203.0001/input/input5
U: Uniq=
H: Handlers=sysrq kbd leds event5
B: PROP=0
B: EV=120013

I: Bus=0003 Vendor=1532 Product=0203 Version=0111
N: Name="Razer Razer BlackWidow Chroma Keyboard"
P: Phys=usb-0000:00:14.0-2/input1
H: Handlers=sysrq kbd event6

I: Bus=0003 Vendor=046d Product=c52b Version=0111
N: Name="Logitech USB Receiver"
P: Phys=usb-0000:00:14.0-3/input0
H: Handlers=mouse0 event7

I: Bus=0003 Vendor=1532 Product=02A1 Version=0111
N: Name="Razer Razer Ornata V3"
P: Phys=usb-0000:00:14.0-4/input0
H: Handlers=sysrq kbd leds event8

I: Bus=0003 Vendor=1532 Product=0203 Version=0111
N: Name="Razer Razer BlackWidow Chroma Consumer Control"
P: Phys=usb-0000:00:14.0-2/input2
H: Handlers=kbd event9
"""


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def registry() -> DeviceRegistry:
    """The packaged keyboard registry."""
    return get_registry()


@pytest.fixture
def sample_listing() -> str:
    """Input device listing with two supported keyboards."""
    return SAMPLE_LISTING


@pytest.fixture
def listing_file(temp_dir, sample_listing) -> Path:
    """Input device listing written to disk."""
    path = temp_dir / "devices"
    path.write_text(sample_listing, encoding="utf-8")
    return path


@pytest.fixture
def icon_file(temp_dir) -> Path:
    """An icon file for effects to reference."""
    path = temp_dir / "icon.png"
    path.write_bytes(b"\x89PNG\r\n\x1a\n")
    return path


@pytest.fixture
def huntsman_effect(icon_file) -> Effect:
    """Empty effect for a 22x6 Razer Huntsman."""
    return Effect(Keyboard.RAZER_HUNTSMAN, icon_file)
