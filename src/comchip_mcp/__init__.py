"""COMChip battery-status frame decoder with an MCP front end."""

__version__ = "0.1.0"
