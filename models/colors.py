"""Colour name mapping for the colorControl capability.

SmartThings expects hue and saturation as percentages (0-100), so named
colours are looked up in a fixed table rather than converted from RGB.
"""

import click

from models.types import ColorMap

DEFAULT_COLOR = 'white'

# name -> (hue, saturation)
COLOR_TABLE: dict[str, tuple[int, int]] = {
    'blue': (70, 100),
    'red': (10, 100),
    'purple': (75, 100),
    'white': (79, 7),
    'green': (39, 100),
    'yellow': (25, 100),
    'orange': (10, 100),
    'pink': (83, 100),
}

SUPPORTED_COLORS = ', '.join(COLOR_TABLE)


def map_color(name: str) -> ColorMap:
    """Return the setColor argument for a colour name (case-insensitive).

    Unknown colours print a warning and fall back to white.

    Args:
        name: Colour name, e.g. "blue" or "Pink"

    Returns:
        Dict with 'hue' and 'saturation' keys
    """
    key = (name or '').strip().lower()
    if key not in COLOR_TABLE:
        click.secho(
            f"Warning: Color '{name}' not supported. Supported colors are {SUPPORTED_COLORS}. "
            f"Setting color to {DEFAULT_COLOR}.",
            fg='yellow',
            err=True
        )
        key = DEFAULT_COLOR

    hue, saturation = COLOR_TABLE[key]
    return {'hue': hue, 'saturation': saturation}
