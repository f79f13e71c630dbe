"""Keyboard capability registry, host input device parsing and detection."""

from .detector import detect_all, detect_one
from .input_devices import (
    DEFAULT_INPUT_DEVICES_PATH,
    BusInputDevice,
    BusInputDeviceId,
    BusInputField,
    parse_input_devices,
    query_input_devices,
)
from .registry import DeviceRegistry, Keyboard, get_registry
from .schema import KeyboardSpec, MatrixGeometry, RegistrySchema, UsbId

__all__ = [
    "DEFAULT_INPUT_DEVICES_PATH",
    "BusInputDevice",
    "BusInputDeviceId",
    "BusInputField",
    "DeviceRegistry",
    "Keyboard",
    "KeyboardSpec",
    "MatrixGeometry",
    "RegistrySchema",
    "UsbId",
    "detect_all",
    "detect_one",
    "get_registry",
    "parse_input_devices",
    "query_input_devices",
]
