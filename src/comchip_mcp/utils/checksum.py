"""8-bit COMChip checksum.

The accumulator is seeded with the command id and every data byte is added
to it. When the sum reaches 256 the device firmware subtracts 255, not 256,
so a carry out of bit 7 is folded back in as +1. The final checksum is the
bitwise complement of the low byte.
"""

from __future__ import annotations

from typing import Sequence


def compute_checksum(seed: int, data: bytes | Sequence[int] = b"") -> int:
    """Compute the checksum of ``data`` seeded with a command id.

    Args:
        seed: Command id byte (0-255).
        data: Bytes following the command id, up to the checksum byte.

    Returns:
        Checksum byte (0-255).

    Raises:
        ValueError: If the seed or any data value is not a byte.

    Example:
        >>> hex(compute_checksum(0x81, bytes([0x00, 0x96, 0xFE])))
        '0xe8'
    """
    if not 0 <= seed <= 0xFF:
        raise ValueError(f"Checksum seed must be 0-255, got {seed}")
    acc = seed
    for b in data:
        if not 0 <= b <= 0xFF:
            raise ValueError(f"Data values must be 0-255, got {b}")
        acc += b
        if acc >= 256:
            acc -= 255
    return (~acc) & 0xFF


def frame_checksum(frame: bytes | Sequence[int], span: slice) -> int:
    """Checksum of a whole frame: seed ``frame[1]``, data ``frame[span]``."""
    return compute_checksum(frame[1], frame[span])
