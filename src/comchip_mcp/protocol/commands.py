"""Frame constants and command identifiers.

Every COMChip frame starts with the sync byte and carries a single-byte
command id that also seeds the checksum.
"""

from __future__ import annotations

from enum import IntEnum

SYNC_BYTE = 0x55

# Fixed offsets shared by every variant
OFF_SYNC = 0
OFF_COMMAND = 1
OFF_STATUS = 2
OFF_VOLTAGE_HIGH = 3
OFF_VOLTAGE_LOW = 4
OFF_SECONDARY_STATUS = 5  # 7-byte variant only


class Command(IntEnum):
    """Command identifiers."""

    GET_BATTERY_STATUS_RESP = 0x81


def command_name(command: int) -> str:
    """Return the enum name for a known command id, else its hex form."""
    try:
        return Command(command).name
    except ValueError:
        return f"0x{command:02X}"
