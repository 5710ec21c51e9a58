"""Battery-status decoding for validated frames."""

from __future__ import annotations

from typing import Sequence

from ..models.status import BatteryStatus
from .commands import (
    OFF_SECONDARY_STATUS,
    OFF_STATUS,
    OFF_VOLTAGE_HIGH,
    OFF_VOLTAGE_LOW,
)
from .framing import Frame, validate_frame
from .variants import DEFAULT_VARIANT, ProtocolVariant


def _flag(status: int, mask: int | None) -> bool:
    """True when the variant defines ``mask`` and it is set in ``status``."""
    return mask is not None and bool(status & mask)


def decode_frame(frame: Frame) -> BatteryStatus:
    """Extract the battery status from an already validated frame.

    The bit layout comes from the variant that validated the frame. Payload
    offsets are relative to the status byte, which follows the sync and
    command bytes.
    """
    variant = frame.variant
    payload = frame.payload
    status = payload[0]
    high = payload[OFF_VOLTAGE_HIGH - OFF_STATUS]
    low = payload[OFF_VOLTAGE_LOW - OFF_STATUS]
    bits = variant.bits

    secondary = None
    if variant.has_secondary_status:
        secondary = payload[OFF_SECONDARY_STATUS - OFF_STATUS]

    discharge_allowed = None
    if bits.discharge_blocked is not None:
        discharge_allowed = not _flag(status, bits.discharge_blocked)

    return BatteryStatus(
        voltage=(high << 8) | low,
        has_error=_flag(status, bits.error),
        is_under_voltage=_flag(status, bits.under_voltage),
        is_supported=not _flag(status, bits.not_supported),
        command=frame.command,
        discharge_allowed=discharge_allowed,
        battery_present=not _flag(status, bits.no_battery),
        secondary_status=secondary,
        variant=variant.name,
        bits=bits,
    )


def decode(
    data: bytes | Sequence[int],
    variant: ProtocolVariant = DEFAULT_VARIANT,
) -> BatteryStatus:
    """Validate a received frame and decode its battery status.

    Args:
        data: The complete received frame.
        variant: Frame shape to decode.

    Returns:
        The decoded ``BatteryStatus``.

    Raises:
        FrameError: The subclass for the first framing check that failed.
    """
    return decode_frame(validate_frame(data, variant))
