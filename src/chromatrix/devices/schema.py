"""Pydantic models for the keyboard capability table.

This module defines the structure of the packaged keyboards.json file
using Pydantic v2 for type safety and validation.
"""

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

_USB_ID_PATTERN = re.compile(r"([0-9a-fA-F]{4}):([0-9a-fA-F]{4})")


class UsbId(BaseModel):
    """A (vendor, product) pair of 16-bit USB identifiers."""

    model_config = ConfigDict(frozen=True)

    vendor_id: int = Field(ge=0, le=0xFFFF, description="USB vendor ID")
    product_id: int = Field(ge=0, le=0xFFFF, description="USB product ID")

    @model_validator(mode="before")
    @classmethod
    def parse_hex_pair(cls, data: Any) -> Any:
        """Accept the compact ``"VVVV:PPPP"`` hex notation used in keyboards.json."""
        if isinstance(data, str):
            match = _USB_ID_PATTERN.fullmatch(data)
            if match is None:
                raise ValueError(f"USB ID must look like '1532:0203', got {data!r}")
            return {"vendor_id": int(match.group(1), 16), "product_id": int(match.group(2), 16)}
        return data

    def __str__(self) -> str:
        return f"{self.vendor_id:04X}:{self.product_id:04X}"


class MatrixGeometry(BaseModel):
    """Size of a keyboard's addressable lighting grid."""

    model_config = ConfigDict(frozen=True)

    cols: int = Field(ge=1, description="Number of matrix columns")
    rows: int = Field(ge=1, description="Number of matrix rows")


class KeyboardSpec(BaseModel):
    """Capabilities of one keyboard variant."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(min_length=1, description="Keyboard enum value (e.g. 'razer_huntsman')")
    name: str = Field(min_length=1, description="Display name shown by the lighting front end")
    usb_ids: tuple[UsbId, ...] = Field(
        default=(), description="Identifiers used for autodetection, one per hardware revision"
    )
    matrix: MatrixGeometry | None = Field(
        None, description="Lighting matrix size, or null when per-key effects are unsupported"
    )


class RegistrySchema(BaseModel):
    """Root schema for the keyboards.json capability table."""

    model_config = ConfigDict(frozen=True)

    brand_marker: str = Field(
        min_length=1, description="Substring of input device names used to pre-filter detection"
    )
    device_icon: str = Field(default="keyboard", description="Device icon tag for effect files")
    keyboards: tuple[KeyboardSpec, ...] = Field(default=(), description="Keyboard variants")

    @field_validator("keyboards")
    @classmethod
    def validate_unique(cls, v: tuple[KeyboardSpec, ...]) -> tuple[KeyboardSpec, ...]:
        """Reject duplicate keys and identifiers claimed by two keyboards."""
        keys: set[str] = set()
        owners: dict[UsbId, str] = {}
        for spec in v:
            if spec.key in keys:
                raise ValueError(f"Duplicate keyboard key: {spec.key}")
            keys.add(spec.key)
            for usb_id in spec.usb_ids:
                if usb_id in owners:
                    raise ValueError(
                        f"USB ID {usb_id} claimed by both {owners[usb_id]} and {spec.key}"
                    )
                owners[usb_id] = spec.key
        return v
