"""Frame validation errors.

Each structural check in :func:`~comchip_mcp.protocol.framing.validate_frame`
raises its own subclass of :class:`FrameError` so callers can tell which
invariant failed and read the offending values from attributes.
"""

from __future__ import annotations

from typing import Any


class FrameError(ValueError):
    """Base class for a frame that failed validation."""

    kind = "frame_error"

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "message": str(self)}


class LengthMismatch(FrameError):
    """Frame has the wrong number of bytes."""

    kind = "length_mismatch"

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Invalid frame size. Expected {expected} bytes, got {actual}."
        )

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result.update(expected=self.expected, actual=self.actual)
        return result


class BadSync(FrameError):
    """First byte is not the sync sentinel."""

    kind = "bad_sync"

    def __init__(self, expected: int, received: int) -> None:
        self.expected = expected
        self.received = received
        super().__init__(
            f"Invalid SYNC byte. Expected 0x{expected:02X}, got 0x{received:02X}."
        )

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result.update(expected=self.expected, received=self.received)
        return result


class BadCommandId(FrameError):
    """Command id is not the response code the variant expects."""

    kind = "bad_command_id"

    def __init__(self, expected: int, received: int) -> None:
        self.expected = expected
        self.received = received
        super().__init__(
            f"Invalid CID. Expected 0x{expected:02X}, got 0x{received:02X}."
        )

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result.update(expected=self.expected, received=self.received)
        return result


class ChecksumMismatch(FrameError):
    """Computed checksum disagrees with the trailing checksum byte."""

    kind = "checksum_mismatch"

    def __init__(self, calculated: int, received: int) -> None:
        self.calculated = calculated
        self.received = received
        super().__init__(
            f"Checksum mismatch. Calculated 0x{calculated:02X}, "
            f"Received 0x{received:02X}."
        )

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result.update(calculated=self.calculated, received=self.received)
        return result
