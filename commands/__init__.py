"""CLI command modules.

This package contains:
- devices: Inspection commands (list, status)
- control: Switch commands (turnon, turnoff)
- setup: Setup and configure commands
"""
