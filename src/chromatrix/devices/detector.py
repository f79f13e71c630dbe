"""Keyboard autodetection from the host's input device listing."""

import logging
from collections.abc import Iterable
from pathlib import Path

from chromatrix.exceptions import DeviceNotFoundError

from .input_devices import DEFAULT_INPUT_DEVICES_PATH, BusInputDevice, query_input_devices
from .registry import DeviceRegistry, Keyboard, get_registry

logger = logging.getLogger(__name__)


def detect_all(
    devices: Iterable[BusInputDevice] | None = None,
    *,
    registry: DeviceRegistry | None = None,
    brand_marker: str | None = None,
    input_devices_path: Path = DEFAULT_INPUT_DEVICES_PATH,
) -> list[Keyboard]:
    """
    Detect every supported keyboard among the input devices.

    Records whose name lacks the brand marker are skipped before their USB
    identifiers are looked up. A keyboard usually registers several input
    interfaces, so each keyboard is reported once, in the order it first
    appears in the listing.

    Args:
        devices: Parsed input devices; read from the host when None
        registry: Keyboard registry (defaults to the process-wide registry)
        brand_marker: Name substring filter (defaults to the registry's marker)
        input_devices_path: Listing to read when ``devices`` is None

    Returns:
        Detected keyboards, possibly empty
    """
    if registry is None:
        registry = get_registry()
    if brand_marker is None:
        brand_marker = registry.brand_marker
    if devices is None:
        devices = query_input_devices(input_devices_path)

    detected: list[Keyboard] = []
    scanned = 0
    for device in devices:
        scanned += 1
        if brand_marker not in device.name:
            continue

        keyboard = registry.match_usb_id(device.id.vendor, device.id.product)
        if keyboard is None:
            logger.debug(
                f"No keyboard matches {device.name!r} "
                f"({device.id.vendor:04X}:{device.id.product:04X})"
            )
            continue

        if keyboard not in detected:
            logger.debug(f"Detected {keyboard.display_name} from {device.name!r}")
            detected.append(keyboard)

    logger.info(f"Detected {len(detected)} keyboard(s) among {scanned} input device(s)")
    return detected


def detect_one(
    devices: Iterable[BusInputDevice] | None = None,
    *,
    registry: DeviceRegistry | None = None,
    brand_marker: str | None = None,
    input_devices_path: Path = DEFAULT_INPUT_DEVICES_PATH,
) -> Keyboard:
    """
    Detect the first supported keyboard.

    Raises:
        DeviceNotFoundError: If no supported keyboard is present
    """
    devices = list(devices) if devices is not None else query_input_devices(input_devices_path)

    detected = detect_all(devices, registry=registry, brand_marker=brand_marker)
    if not detected:
        marker = brand_marker or (registry or get_registry()).brand_marker
        raise DeviceNotFoundError(scanned=len(devices), brand_marker=marker)
    return detected[0]
