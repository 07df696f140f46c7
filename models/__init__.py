"""Data models and utility functions.

This package contains:
- types: Device, Command and result types
- colors: Colour name to hue/saturation mapping
- utils: Utility functions (get_controller, report_results, etc.)
"""
