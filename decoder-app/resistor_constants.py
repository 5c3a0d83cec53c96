from __future__ import annotations

"""
Resistor Decoder - Color Registry

The closed IEC 60062 color catalogue.  Each color carries up to four
independent numeric facets; a facet of ``None`` means the color cannot be
used for that band role.

Exports:
    Color        – immutable record (name, digit, multiplier, tolerance,
                   temp_coeff, rgb)
    COLORS       – name → Color, in registry order
    COLOR_NAMES  – tuple of names in registry order
    lookup       – case-insensitive name → Color
    all_colors   – ordered (name, Color) pairs for swatch rendering
"""

from collections import namedtuple

Color = namedtuple(
    "Color",
    ["name", "digit", "multiplier", "tolerance", "temp_coeff", "rgb"],
)

# ---------------------------------------------------------------------------
# Registry
#   name      digit  multiplier      tol %   ppm/K  rgb
# ---------------------------------------------------------------------------

_COLOR_TABLE = [
    ("black",  0,    1,              None,  250,  (26,  26,  26 )),
    ("brown",  1,    10,             1.0,   100,  (139, 69,  19 )),
    ("red",    2,    100,            2.0,   50,   (220, 38,  38 )),
    ("orange", 3,    1_000,          None,  15,   (249, 115, 22 )),
    ("yellow", 4,    10_000,         None,  25,   (250, 204, 21 )),
    ("green",  5,    100_000,        0.5,   20,   (34,  197, 94 )),
    ("blue",   6,    1_000_000,      0.25,  10,   (59,  130, 246)),
    ("violet", 7,    10_000_000,     0.1,   5,    (139, 92,  246)),
    ("grey",   8,    100_000_000,    0.05,  1,    (107, 114, 128)),
    ("white",  9,    1_000_000_000,  None,  None, (248, 250, 252)),
    # Metallic bands: multiplier / tolerance only
    ("gold",   None, 0.1,            5.0,   None, (212, 175, 55 )),
    ("silver", None, 0.01,           10.0,  None, (192, 192, 192)),
]

COLORS: dict[str, Color] = {row[0]: Color(*row) for row in _COLOR_TABLE}

COLOR_NAMES: tuple[str, ...] = tuple(COLORS)

# Tolerance assumed when a layout has no tolerance band.
DEFAULT_TOLERANCE = 20.0


def lookup(name: str) -> Color:
    """Return the :class:`Color` registered under *name* (case-insensitive).

    Raises:
        KeyError: If *name* is not one of the twelve registry colors.
    """
    try:
        return COLORS[name.lower()]
    except (KeyError, AttributeError):
        raise KeyError(f"Unknown color: {name!r}") from None


def all_colors() -> list[tuple[str, Color]]:
    """Return every (name, Color) pair in fixed registry order."""
    return list(COLORS.items())
