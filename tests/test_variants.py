"""Tests for protocol variant configuration."""

import pytest

from comchip_mcp.protocol.commands import Command, command_name
from comchip_mcp.protocol.variants import (
    ALARM,
    DEFAULT_VARIANT,
    SEVEN_BYTE,
    SIX_BYTE,
    VARIANTS,
    ProtocolVariant,
    StatusBits,
    get_variant,
)


def test_variant_registry():
    """All variants are registered by name."""
    assert set(VARIANTS) == {"six_byte", "seven_byte", "alarm"}
    assert DEFAULT_VARIANT is SIX_BYTE


def test_checksum_span_covers_status_to_checksum():
    """The span starts at the status byte and stops before the checksum."""
    assert SIX_BYTE.checksum_span == slice(2, 5)
    assert SEVEN_BYTE.checksum_span == slice(2, 6)
    assert SIX_BYTE.checksum_offset == 5
    assert SEVEN_BYTE.checksum_offset == 6


def test_seven_byte_requires_status_response():
    """Only the 7-byte variant pins the command id."""
    assert SEVEN_BYTE.expected_command == Command.GET_BATTERY_STATUS_RESP == 0x81
    assert SIX_BYTE.expected_command is None
    assert ALARM.expected_command is None
    assert SEVEN_BYTE.has_secondary_status
    assert not SIX_BYTE.has_secondary_status


def test_status_bit_layouts():
    """Bit positions for each variant."""
    assert SIX_BYTE.bits == StatusBits(
        error=0x80, under_voltage=0x40, not_supported=0x20, discharge_blocked=0x01
    )
    assert SEVEN_BYTE.bits.discharge_blocked is None
    assert ALARM.bits == StatusBits(no_battery=0x01)


def test_get_variant_lookup():
    """Names are case-insensitive and accept dashes."""
    assert get_variant("SEVEN-BYTE") is SEVEN_BYTE
    assert get_variant(" alarm ") is ALARM
    assert get_variant(None) is DEFAULT_VARIANT
    assert get_variant("") is DEFAULT_VARIANT


def test_get_variant_unknown():
    """Unknown names raise."""
    with pytest.raises(ValueError, match="Unknown protocol variant"):
        get_variant("eight_byte")


def test_variant_rejects_bad_length():
    """Only 6- and 7-byte frames exist."""
    with pytest.raises(ValueError):
        ProtocolVariant(name="bad", frame_length=8, bits=StatusBits())


def test_variant_to_dict():
    """Serialized layout is JSON friendly."""
    d = SEVEN_BYTE.to_dict()
    assert d["frame_length"] == 7
    assert d["expected_command"] == "0x81"
    assert d["checksum_span"] == [2, 6]
    assert d["status_bits"]["error"] == "0x80"
    assert d["status_bits"]["discharge_blocked"] is None


def test_command_name():
    """Known ids map to enum names."""
    assert command_name(0x81) == "GET_BATTERY_STATUS_RESP"
    assert command_name(0x42) == "0x42"
