from __future__ import annotations

"""
Resistor Decoder - Color Band Decoding

Turns an ordered list of band colors into a resistance, tolerance and
temperature coefficient for a given band layout.

Exports:
    DecodedResult        – (resistance, tolerance, temp_coeff)
    valid_colors_for     – band role → colors legal at that position
    decode               – layout + selection → DecodedResult
    bands_to_description – layout + selection → 'Green-Red-Blue-Gold (52MΩ ±5%)'
"""

import logging
from collections import namedtuple

from band_layout import DIGIT, MULTIPLIER, TEMP_COEFF, TOLERANCE
from resistor_constants import COLORS, DEFAULT_TOLERANCE, lookup
from value_format import format_tolerance, format_value

log = logging.getLogger(__name__)

DecodedResult = namedtuple("DecodedResult", ["resistance", "tolerance", "temp_coeff"])


# ---------------------------------------------------------------------------
# Validity filter
# ---------------------------------------------------------------------------

def _is_valid(color, role) -> bool:
    if role.kind == DIGIT:
        if color.digit is None:
            return False
        return role.allow_zero or color.digit != 0
    if role.kind == MULTIPLIER:
        return color.multiplier is not None
    if role.kind == TOLERANCE:
        return color.tolerance is not None
    if role.kind == TEMP_COEFF:
        return color.temp_coeff is not None
    raise ValueError(f"Unknown band role: {role.kind!r}")


def valid_colors_for(role) -> list[str]:
    """Return the names of the colors that may be selected for *role*.

    The list follows registry order (black … white, gold, silver) so a UI can
    render swatches in a stable order and simply disable the rest.

    Raises:
        ValueError: If ``role.kind`` is not a known band role.
    """
    return [name for name, color in COLORS.items() if _is_valid(color, role)]


# ---------------------------------------------------------------------------
# Decoder
# ---------------------------------------------------------------------------

def decode(layout, selection) -> DecodedResult:
    """Decode *selection* (color names) against *layout* (band roles).

    Digit bands are concatenated left to right into the significant digits,
    which are then scaled by the multiplier band.  Without a tolerance band
    the IEC default of ±20 % applies; without a temperature-coefficient band
    ``temp_coeff`` is ``None``.  No rounding is applied.

    Raises:
        ValueError: If the lengths differ, or a color is not valid for the
                    role at its position (e.g. gold in a digit band, or black
                    as the first digit).
        KeyError:   If a color name is not in the registry.
    """
    if len(selection) != len(layout):
        raise ValueError(
            f"Selection has {len(selection)} colors but layout has "
            f"{len(layout)} bands"
        )

    digits = ""
    multiplier = 1
    tolerance = DEFAULT_TOLERANCE
    temp_coeff = None

    for position, (role, name) in enumerate(zip(layout, selection), start=1):
        color = lookup(name)
        if not _is_valid(color, role):
            raise ValueError(
                f"Band {position} ({role.label}): {name!r} is not a valid choice"
            )

        if role.kind == DIGIT:
            digits += str(color.digit)
        elif role.kind == MULTIPLIER:
            multiplier = color.multiplier
        elif role.kind == TOLERANCE:
            tolerance = color.tolerance
        elif role.kind == TEMP_COEFF:
            temp_coeff = color.temp_coeff

    resistance = float(int(digits)) * multiplier
    log.debug("Decoded %s → %r Ω ±%s%%", "-".join(selection), resistance, tolerance)
    return DecodedResult(resistance, tolerance, temp_coeff)


def bands_to_description(layout, selection) -> str:
    """Return e.g. ``'Green-Red-Black-Orange-Gold-Brown (520kΩ ±5% 100ppm/K)'``."""
    result = decode(layout, selection)
    name_str = "-".join(lookup(name).name.capitalize() for name in selection)

    value, unit = format_value(result.resistance)
    details = f"{value}{unit} {format_tolerance(result.tolerance)}"
    if result.temp_coeff is not None:
        details += f" {result.temp_coeff:g}ppm/K"

    return f"{name_str} ({details})"


# ---------------------------------------------------------------------------
# Self-test (run with: python color_code.py)
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    from band_layout import BAND_COUNTS, default_selection, layout_for
    from value_format import format_range

    cases = [
        (4, ["green", "red", "blue", "gold"],                    52_000_000.0),
        (6, ["green", "red", "black", "orange", "gold", "brown"], 520_000.0),
        (4, ["yellow", "violet", "red", "gold"],                 4_700.0),
        (3, ["brown", "black", "orange"],                        10_000.0),
    ]

    all_pass = True
    for band_count, selection, expected in cases:
        result = decode(layout_for(band_count), selection)
        status = "PASS" if abs(result.resistance - expected) < 1e-9 * expected else "FAIL"
        if status == "FAIL":
            all_pass = False
        print(f"{status}  {band_count}-band  {bands_to_description(layout_for(band_count), selection)}")

    print()
    for band_count in BAND_COUNTS:
        layout = layout_for(band_count)
        result = decode(layout, default_selection(band_count))
        print(f"default {band_count}-band: "
              f"{bands_to_description(layout, default_selection(band_count))}  "
              f"range {format_range(result.resistance, result.tolerance)}")

    print()
    print("All tests passed." if all_pass else "SOME TESTS FAILED.")
