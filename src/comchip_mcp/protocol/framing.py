"""Frame validation for fixed-length COMChip responses.

Frame layout::

    +------+---------+----------------------------+----------+
    | Sync | Command |          Payload           | Checksum |
    | 0x55 | 1 byte  | 3 or 4 bytes (per variant) |  1 byte  |
    +------+---------+----------------------------+----------+

- Sync: always 0x55
- Command: response id, also the checksum seed
- Checksum: see :mod:`comchip_mcp.utils.checksum`, computed over the payload

Validation is all-or-nothing: :func:`validate_frame` either returns a
:class:`Frame` or raises the :class:`~.errors.FrameError` subclass for the
first check that failed.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Sequence

from ..utils.checksum import frame_checksum
from .commands import SYNC_BYTE, OFF_COMMAND, OFF_SYNC, command_name
from .errors import BadCommandId, BadSync, ChecksumMismatch, LengthMismatch
from .variants import DEFAULT_VARIANT, ProtocolVariant

_HEX_SEPARATORS = re.compile(r"[\s,:;\-]+")


@dataclass(frozen=True)
class Frame:
    """A validated protocol frame."""

    command: int
    payload: bytes
    checksum: int
    variant: ProtocolVariant

    def __repr__(self) -> str:
        return (
            f"Frame(command={command_name(self.command)}, "
            f"payload={self.payload.hex(' ')}, checksum=0x{self.checksum:02X}, "
            f"variant={self.variant.name})"
        )


def validate_frame(
    data: bytes | Sequence[int],
    variant: ProtocolVariant = DEFAULT_VARIANT,
) -> Frame:
    """Check a received frame against the variant's framing rules.

    Args:
        data: The complete received frame.
        variant: Frame shape to validate against.

    Returns:
        The validated ``Frame``.

    Raises:
        LengthMismatch: Wrong number of bytes.
        BadSync: First byte is not 0x55.
        BadCommandId: Variant requires a specific command id and got another.
        ChecksumMismatch: Trailing byte disagrees with the computed checksum.
    """
    data = bytes(data)

    if len(data) != variant.frame_length:
        raise LengthMismatch(variant.frame_length, len(data))

    if data[OFF_SYNC] != SYNC_BYTE:
        raise BadSync(SYNC_BYTE, data[OFF_SYNC])

    command = data[OFF_COMMAND]
    if variant.expected_command is not None and command != variant.expected_command:
        raise BadCommandId(variant.expected_command, command)

    calculated = frame_checksum(data, variant.checksum_span)
    received = data[variant.checksum_offset]
    if calculated != received:
        raise ChecksumMismatch(calculated, received)

    return Frame(
        command=command,
        payload=data[variant.checksum_span],
        checksum=received,
        variant=variant,
    )


def parse_hex(text: str) -> bytes:
    """Parse a hex dump such as ``"55 81 00 96 FE E8"`` into bytes.

    Bytes may be separated by whitespace, commas, colons or dashes and may
    carry a ``0x`` prefix. Without separators the text is read as a
    contiguous hex string.

    Raises:
        ValueError: If the text is empty or not valid hex.
    """
    tokens = [t for t in _HEX_SEPARATORS.split(text.strip()) if t]
    if not tokens:
        raise ValueError("No hex bytes given")

    if len(tokens) == 1:
        token = tokens[0]
        if token[:2].lower() == "0x":
            token = token[2:]
        if len(token) > 2:
            try:
                return bytes.fromhex(token)
            except ValueError:
                raise ValueError(f"Invalid hex string: {text!r}") from None
        tokens = [token]

    out = bytearray()
    for token in tokens:
        digits = token[2:] if token[:2].lower() == "0x" else token
        if not 1 <= len(digits) <= 2:
            raise ValueError(f"Invalid hex byte {token!r}")
        try:
            out.append(int(digits, 16))
        except ValueError:
            raise ValueError(f"Invalid hex byte {token!r}") from None
    return bytes(out)
