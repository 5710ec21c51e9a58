"""Human-readable reports for decoded frames and frame errors."""

from __future__ import annotations

from .models.status import BatteryStatus
from .protocol.errors import FrameError


def millivolts_to_volts(millivolts: int) -> int:
    """Whole volts, truncated, as the device console prints them."""
    return millivolts // 1000


def status_lines(status: BatteryStatus) -> list[str]:
    """Describe each flag the decoding variant reports.

    A status without a bit layout reports the support, voltage and error
    flags every status carries.
    """
    bits = status.bits

    def reported(flag: str) -> bool:
        return bits is None or getattr(bits, flag) is not None

    lines: list[str] = []
    if bits is not None and bits.no_battery is not None:
        lines.append(
            "Battery present"
            if status.battery_present
            else "No battery alarm active"
        )
    if status.discharge_allowed is not None:
        lines.append(
            "Battery can be discharged"
            if status.discharge_allowed
            else "Battery can NOT be discharged"
        )
    if reported("not_supported"):
        lines.append(
            "Battery is supported"
            if status.is_supported
            else "Battery NOT supported"
        )
    if reported("under_voltage"):
        lines.append(
            "Battery voltage is OK"
            if status.is_voltage_ok
            else "Battery voltage NOT OK"
        )
    if reported("error"):
        lines.append(
            "Battery has error" if status.has_error else "Battery has NO error"
        )
    return lines


def should_display_voltage(status: BatteryStatus) -> bool:
    """The voltage is only meaningful for a present, supported, error-free battery."""
    return status.battery_present and status.is_supported and not status.has_error


def format_status(status: BatteryStatus) -> str:
    """Multi-line battery status report."""
    lines = ["Battery Status:"]
    lines.extend(f" {line}" for line in status_lines(status))
    if should_display_voltage(status):
        lines.append(
            f"Battery Voltage: {millivolts_to_volts(status.voltage)} V "
            f"({status.voltage} mV)"
        )
    elif not status.battery_present:
        lines.append("Skipping voltage read.")
    else:
        lines.append("Battery not supported or has error. Voltage not displayed.")
    return "\n".join(lines)


def format_error(error: FrameError) -> str:
    return f"Error: {error}"
