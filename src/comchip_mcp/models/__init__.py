"""Data models for decoded battery status."""

from .status import BatteryStatus
