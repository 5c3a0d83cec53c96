"""
Resistor Decoder - Band Layout Table

Static role layouts and demonstration selections for 3-, 4-, 5- and 6-band
resistors.

    3 bands:  digit digit multiplier
    4 bands:  digit digit multiplier tolerance
    5 bands:  digit digit digit multiplier tolerance
    6 bands:  digit digit digit multiplier tolerance tempCoeff

The first digit band never accepts black, so a code can't start with a
leading zero.
"""

from __future__ import annotations

from collections import namedtuple

# Band role kinds
DIGIT       = "digit"
MULTIPLIER  = "multiplier"
TOLERANCE   = "tolerance"
TEMP_COEFF  = "tempCoeff"

ROLE_KINDS = (DIGIT, MULTIPLIER, TOLERANCE, TEMP_COEFF)

BandRole = namedtuple("BandRole", ["kind", "label", "allow_zero"])

BAND_COUNTS: tuple[int, ...] = (3, 4, 5, 6)

# ---------------------------------------------------------------------------
# Role building blocks
# ---------------------------------------------------------------------------

_FIRST_DIGIT  = BandRole(DIGIT,      "1st Digit",    False)
_SECOND_DIGIT = BandRole(DIGIT,      "2nd Digit",    True)
_THIRD_DIGIT  = BandRole(DIGIT,      "3rd Digit",    True)
_MULTIPLIER   = BandRole(MULTIPLIER, "Multiplier",   True)
_TOLERANCE    = BandRole(TOLERANCE,  "Tolerance",    True)
_TEMP_COEFF   = BandRole(TEMP_COEFF, "Temp. Coeff.", True)

_LAYOUTS: dict[int, tuple[BandRole, ...]] = {
    3: (_FIRST_DIGIT, _SECOND_DIGIT, _MULTIPLIER),
    4: (_FIRST_DIGIT, _SECOND_DIGIT, _MULTIPLIER, _TOLERANCE),
    5: (_FIRST_DIGIT, _SECOND_DIGIT, _THIRD_DIGIT, _MULTIPLIER, _TOLERANCE),
    6: (_FIRST_DIGIT, _SECOND_DIGIT, _THIRD_DIGIT, _MULTIPLIER, _TOLERANCE,
        _TEMP_COEFF),
}

_DEFAULT_SELECTIONS: dict[int, tuple[str, ...]] = {
    3: ("green", "red", "blue"),                                # 5.2 MΩ ±20%
    4: ("green", "red", "blue", "gold"),                        # 52 MΩ ±5%
    5: ("green", "red", "black", "orange", "gold"),             # 520 kΩ ±5%
    6: ("green", "red", "black", "orange", "gold", "brown"),    # + 100 ppm/K
}


def _check_band_count(band_count: int) -> None:
    if band_count not in _LAYOUTS:
        expected = ", ".join(str(n) for n in BAND_COUNTS)
        raise ValueError(
            f"Unsupported band count: {band_count!r} (expected one of {expected})"
        )


def layout_for(band_count: int) -> tuple[BandRole, ...]:
    """Return the ordered band roles for *band_count*.

    Raises:
        ValueError: If *band_count* is not 3, 4, 5 or 6.
    """
    _check_band_count(band_count)
    return _LAYOUTS[band_count]


def default_selection(band_count: int) -> list[str]:
    """Return a fresh list of the demonstration colors for *band_count*.

    The list is a new object on every call so the caller may edit it in place.

    Raises:
        ValueError: If *band_count* is not 3, 4, 5 or 6.
    """
    _check_band_count(band_count)
    return list(_DEFAULT_SELECTIONS[band_count])
