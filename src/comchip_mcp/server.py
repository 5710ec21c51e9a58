"""MCP server entry point for the COMChip battery-status decoder.

Exposes checksum, validation and decoding tools, a protocol resource and a
diagnosis prompt via the Model Context Protocol using the official Python
MCP SDK with stdio transport.

Configuration is read from the environment:

- ``COMCHIP_VARIANT``: default protocol variant (``six_byte``)
- ``COMCHIP_LOG_LEVEL``: logging level (``INFO``)
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any

from mcp.server.fastmcp import FastMCP

from .protocol.errors import FrameError
from .protocol.framing import parse_hex
from .protocol.framing import validate_frame as _validate_frame
from .protocol.parser import decode_frame as _decode_frame
from .protocol.variants import VARIANTS, ProtocolVariant, get_variant
from .report import format_error, format_status, millivolts_to_volts, status_lines
from .utils.checksum import compute_checksum as _compute_checksum

logger = logging.getLogger(__name__)

DEFAULT_VARIANT_NAME = os.environ.get("COMCHIP_VARIANT", "six_byte")
LOG_LEVEL = os.environ.get("COMCHIP_LOG_LEVEL", "INFO")

# Fail at import time on a misconfigured variant name
_default_variant: ProtocolVariant = get_variant(DEFAULT_VARIANT_NAME)

mcp = FastMCP(
    "comchip",
    instructions="Validate and decode COMChip battery-status frames",
)


def _resolve_variant(name: str | None) -> ProtocolVariant:
    return get_variant(name) if name else _default_variant


def _read_frame(frame_hex: str, variant: str | None):
    """Parse tool arguments, returning (data, variant) or an error dict."""
    try:
        proto = _resolve_variant(variant)
        data = parse_hex(frame_hex)
    except ValueError as e:
        return None, {"error": {"kind": "invalid_argument", "message": str(e)}}
    return (data, proto), None


def _frame_error(err: FrameError, data: bytes, proto: ProtocolVariant) -> dict[str, Any]:
    logger.debug("Rejected %s frame %s: %s", proto.name, data.hex(" "), err)
    return {"valid": False, "variant": proto.name, "error": err.to_dict()}


# ─── PROTOCOL TOOLS ──────────────────────────────────────────────────

@mcp.tool()
def list_variants() -> dict[str, Any]:
    """List the supported frame variants and their status bit layouts."""
    return {
        "default": _default_variant.name,
        "variants": [v.to_dict() for v in VARIANTS.values()],
    }


@mcp.tool()
def compute_checksum(seed: int, data: str = "") -> dict[str, Any]:
    """Compute the COMChip checksum for a command id and data bytes.

    Args:
        seed: Command id byte (0-255) that seeds the checksum.
        data: Hex bytes between the command id and the checksum, e.g. "00 96 FE".
    """
    try:
        payload = parse_hex(data) if data.strip() else b""
        checksum = _compute_checksum(seed, payload)
    except ValueError as e:
        return {"error": {"kind": "invalid_argument", "message": str(e)}}
    return {"checksum": checksum, "checksum_hex": f"0x{checksum:02X}"}


@mcp.tool()
def validate_frame(frame_hex: str, variant: str | None = None) -> dict[str, Any]:
    """Check a received frame's length, sync byte, command id and checksum.

    Args:
        frame_hex: The complete frame as hex, e.g. "55 81 00 96 FE E8".
        variant: Protocol variant name (default from COMCHIP_VARIANT).
    """
    parsed, error = _read_frame(frame_hex, variant)
    if error:
        return error
    data, proto = parsed
    try:
        frame = _validate_frame(data, proto)
    except FrameError as e:
        return _frame_error(e, data, proto)
    return {
        "valid": True,
        "variant": proto.name,
        "command": f"0x{frame.command:02X}",
        "checksum": f"0x{frame.checksum:02X}",
    }


@mcp.tool()
def decode_frame(frame_hex: str, variant: str | None = None) -> dict[str, Any]:
    """Validate a frame and decode its battery status fields.

    Args:
        frame_hex: The complete frame as hex.
        variant: Protocol variant name (default from COMCHIP_VARIANT).
    """
    parsed, error = _read_frame(frame_hex, variant)
    if error:
        return error
    data, proto = parsed
    try:
        status = _decode_frame(_validate_frame(data, proto))
    except FrameError as e:
        return _frame_error(e, data, proto)

    result = status.to_dict()
    result["valid"] = True
    result["voltage_v"] = millivolts_to_volts(status.voltage)
    result["flags"] = status_lines(status)
    return result


@mcp.tool()
def describe_frame(frame_hex: str, variant: str | None = None) -> dict[str, Any]:
    """Produce a human-readable report for a received frame.

    Args:
        frame_hex: The complete frame as hex.
        variant: Protocol variant name (default from COMCHIP_VARIANT).
    """
    parsed, error = _read_frame(frame_hex, variant)
    if error:
        return error
    data, proto = parsed
    try:
        status = _decode_frame(_validate_frame(data, proto))
    except FrameError as e:
        logger.debug("Rejected %s frame %s: %s", proto.name, data.hex(" "), e)
        return {"valid": False, "report": format_error(e)}
    return {"valid": True, "report": format_status(status)}


# ─── MCP RESOURCES ───────────────────────────────────────────────────

@mcp.resource("comchip://protocol/variants")
def resource_variants() -> str:
    """Frame layouts and status bit masks for every variant."""
    return json.dumps(list_variants(), indent=2)


# ─── MCP PROMPTS ─────────────────────────────────────────────────────

@mcp.prompt()
def diagnose_frame(frame_hex: str) -> str:
    """Guide the AI through diagnosing a frame that fails to decode.

    Args:
        frame_hex: The received frame as hex.
    """
    return f"""Diagnose the COMChip frame {frame_hex}.
Steps:
- Call validate_frame with each variant from list_variants
- For a checksum mismatch, compare the calculated and received bytes
- Use compute_checksum on the command id and payload to confirm
- Once a variant validates, call describe_frame for a readable report

Report which variant the frame matches and which check fails for the others."""


# ─── ENTRY POINT ─────────────────────────────────────────────────────

def main():
    """Run the MCP server with stdio transport."""
    logging.basicConfig(level=LOG_LEVEL.upper())
    logger.info("Starting COMChip MCP server (default variant: %s)", _default_variant.name)
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
