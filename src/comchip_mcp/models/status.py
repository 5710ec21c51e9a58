"""Decoded battery status model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..protocol.variants import StatusBits


@dataclass(frozen=True)
class BatteryStatus:
    """Fields decoded from a validated battery-status frame.

    ``voltage`` is the raw big-endian value in millivolts. ``bits`` is the
    layout of the variant that decoded the frame, ``None`` when unknown.
    """

    voltage: int
    has_error: bool
    is_under_voltage: bool
    is_supported: bool
    command: int
    discharge_allowed: bool | None = None
    battery_present: bool = True
    secondary_status: int | None = None
    variant: str = ""
    bits: StatusBits | None = None

    @property
    def is_voltage_ok(self) -> bool:
        return not self.is_under_voltage

    def to_dict(self) -> dict:
        return {
            "variant": self.variant,
            "command": f"0x{self.command:02X}",
            "voltage_mv": self.voltage,
            "has_error": self.has_error,
            "is_under_voltage": self.is_under_voltage,
            "is_voltage_ok": self.is_voltage_ok,
            "is_supported": self.is_supported,
            "discharge_allowed": self.discharge_allowed,
            "battery_present": self.battery_present,
            "secondary_status": (
                f"0x{self.secondary_status:02X}"
                if self.secondary_status is not None
                else None
            ),
        }
