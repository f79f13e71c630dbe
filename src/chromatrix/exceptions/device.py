"""Device-related exceptions.

This module defines exceptions for keyboard lookup and detection:
- DeviceError: Base class for device errors
- UnsupportedDeviceError: Keyboard has no addressable lighting matrix
- DeviceNotFoundError: Detection matched no supported keyboard
- DeviceParseError: Host input device listing is malformed
"""

from typing import TYPE_CHECKING

from .base import ChromatrixError

if TYPE_CHECKING:
    from chromatrix.devices.registry import Keyboard


class DeviceError(ChromatrixError):
    """Keyboard lookup or detection failed."""
    pass


class UnsupportedDeviceError(DeviceError):
    """Keyboard does not support customizable per-key lighting."""

    def __init__(self, keyboard: "Keyboard", display_name: str | None = None):
        """
        Initialize unsupported-device error.

        Args:
            keyboard: The keyboard variant that has no lighting matrix
            display_name: Human-readable keyboard name (defaults to the enum value)
        """
        name = display_name or keyboard.value
        super().__init__(
            user_message=f"{name} doesn't support customizable lighting.",
            technical_message=f"{keyboard!r} has no lighting matrix geometry",
            recoverable=False,
            recovery_hint="Run 'chromatrix keyboards --lighting-only' to see keyboards with a lighting matrix.",
        )
        self.keyboard = keyboard


class DeviceNotFoundError(DeviceError):
    """No supported keyboard was detected."""

    def __init__(self, scanned: int = 0, brand_marker: str | None = None):
        """
        Initialize device-not-found error.

        Args:
            scanned: Number of host input devices that were examined
            brand_marker: Name substring used to pre-filter devices
        """
        tech_msg = f"No supported keyboard among {scanned} input device(s)"
        if brand_marker:
            tech_msg += f" (brand marker {brand_marker!r})"

        super().__init__(
            user_message="No supported keyboard was detected.",
            technical_message=tech_msg,
            recoverable=True,
            recovery_hint=(
                "Check that the keyboard is plugged in, or pass --keyboard explicitly. "
                "Run 'chromatrix devices list' to see what the host reports."
            ),
        )
        self.scanned = scanned
        self.brand_marker = brand_marker


class DeviceParseError(DeviceError, ValueError):
    """Host input device listing does not have the expected structure."""

    def __init__(self, reason: str, record_index: int | None = None, line: str | None = None):
        """
        Initialize device parse error.

        Args:
            reason: Static description of which field or line failed
            record_index: Zero-based index of the offending record
            line: The offending line, if known
        """
        tech_msg = f"Cannot parse input device listing: {reason}"
        if record_index is not None:
            tech_msg += f" (record {record_index})"
        if line is not None:
            tech_msg += f": {line!r}"

        super().__init__(
            user_message=f"Cannot parse device: {reason}",
            technical_message=tech_msg,
            recoverable=False,
        )
        self.reason = reason
        self.record_index = record_index
        self.line = line
