"""Protocol variants: frame length, status bit layout and checksum span.

Devices in the field answer the battery-status request in slightly
different shapes::

    six_byte    55 | CID | STATUS | V_HI | V_LO | CS
    seven_byte  55 | 81  | STATUS | V_HI | V_LO | STATUS2 | CS
    alarm       55 | CID | ALARM  | V_HI | V_LO | CS

The checksum always covers STATUS up to the byte before CS, seeded with CID.
In every layout a set status bit reports the unfavourable condition.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .commands import Command, OFF_STATUS


@dataclass(frozen=True)
class StatusBits:
    """Single-bit masks within the status byte.

    ``None`` means the variant does not report that flag.
    """

    error: int | None = None
    under_voltage: int | None = None
    not_supported: int | None = None
    discharge_blocked: int | None = None
    no_battery: int | None = None

    def to_dict(self) -> dict[str, str | None]:
        return {
            name: (f"0x{mask:02X}" if mask is not None else None)
            for name, mask in (
                ("error", self.error),
                ("under_voltage", self.under_voltage),
                ("not_supported", self.not_supported),
                ("discharge_blocked", self.discharge_blocked),
                ("no_battery", self.no_battery),
            )
        }


@dataclass(frozen=True)
class ProtocolVariant:
    """Configuration selecting one frame shape."""

    name: str
    frame_length: int
    bits: StatusBits
    expected_command: int | None = None
    description: str = ""
    checksum_span: slice = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.frame_length not in (6, 7):
            raise ValueError(
                f"Frame length must be 6 or 7, got {self.frame_length}"
            )
        object.__setattr__(
            self, "checksum_span", slice(OFF_STATUS, self.frame_length - 1)
        )

    @property
    def checksum_offset(self) -> int:
        return self.frame_length - 1

    @property
    def has_secondary_status(self) -> bool:
        return self.frame_length == 7

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "frame_length": self.frame_length,
            "expected_command": (
                f"0x{self.expected_command:02X}"
                if self.expected_command is not None
                else None
            ),
            "checksum_span": [self.checksum_span.start, self.checksum_span.stop],
            "has_secondary_status": self.has_secondary_status,
            "status_bits": self.bits.to_dict(),
        }


SIX_BYTE = ProtocolVariant(
    name="six_byte",
    frame_length=6,
    bits=StatusBits(
        error=1 << 7,
        under_voltage=1 << 6,
        not_supported=1 << 5,
        discharge_blocked=1 << 0,
    ),
    description="6-byte status response, any CID, discharge flag in bit 0",
)

SEVEN_BYTE = ProtocolVariant(
    name="seven_byte",
    frame_length=7,
    bits=StatusBits(
        error=1 << 7,
        under_voltage=1 << 6,
        not_supported=1 << 5,
    ),
    expected_command=Command.GET_BATTERY_STATUS_RESP,
    description="7-byte Get Battery Status response with secondary status byte",
)

ALARM = ProtocolVariant(
    name="alarm",
    frame_length=6,
    bits=StatusBits(no_battery=1 << 0),
    description="6-byte alarm frame, bit 0 raises the no-battery alarm",
)

VARIANTS: dict[str, ProtocolVariant] = {
    v.name: v for v in (SIX_BYTE, SEVEN_BYTE, ALARM)
}

DEFAULT_VARIANT = SIX_BYTE


def get_variant(name: str | None) -> ProtocolVariant:
    """Look up a variant by name, or the default for ``None``/empty.

    Raises:
        ValueError: If the name is unknown.
    """
    if not name:
        return DEFAULT_VARIANT
    key = name.strip().lower().replace("-", "_")
    if key not in VARIANTS:
        raise ValueError(
            f"Unknown protocol variant '{name}'. Valid: {list(VARIANTS)}"
        )
    return VARIANTS[key]
