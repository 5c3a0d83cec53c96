"""
Resistor Decoder - Engineering Unit Formatting

Display-only transforms; nothing here feeds back into the decoded value.

    >= 1e9  → GΩ
    >= 1e6  → MΩ
    >= 1e3  → kΩ
    >= 1    → Ω
    <  1    → mΩ  (value × 1000)

Values are rounded to two decimals (half away from zero) and trailing zeros
are stripped, so 4.70 becomes '4.7' and 5.00 becomes '5'.
"""

from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP

# (threshold, divisor, unit), checked top to bottom
_UNIT_BANDS = [
    (1_000_000_000, 1_000_000_000, "GΩ"),
    (1_000_000,     1_000_000,     "MΩ"),
    (1_000,         1_000,         "kΩ"),
    (1,             1,             "Ω"),
]

_TWO_PLACES = Decimal("0.01")


def _trim(scaled: float) -> str:
    """Round *scaled* to 2 places and strip trailing zeros / decimal point."""
    rounded = Decimal(scaled).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP)
    text = f"{rounded:f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_value(ohms: float) -> tuple[str, str]:
    """Scale *ohms* into an engineering unit.

    Returns:
        ``(value, unit)``, e.g. ``("4.7", "kΩ")`` for 4700.
    """
    for threshold, divisor, unit in _UNIT_BANDS:
        if ohms >= threshold:
            return _trim(ohms / divisor), unit
    return _trim(ohms * 1000), "mΩ"


def format_range(ohms: float, tolerance: float) -> str:
    """Return the min–max span of *ohms* at ±*tolerance* percent.

    When both ends land in the same unit it is printed once
    (``'95 - 105Ω'``); otherwise each end carries its own unit
    (``'950mΩ - 1.05Ω'``).
    """
    min_value, min_unit = format_value(ohms * (1 - tolerance / 100))
    max_value, max_unit = format_value(ohms * (1 + tolerance / 100))
    if min_unit == max_unit:
        return f"{min_value} - {max_value}{max_unit}"
    return f"{min_value}{min_unit} - {max_value}{max_unit}"


def format_tolerance(tolerance: float) -> str:
    """``5.0`` → ``'±5%'``, ``0.25`` → ``'±0.25%'``."""
    return f"±{tolerance:g}%"


def format_temp_coeff(temp_coeff: float | None) -> str:
    """``100`` → ``'100 ppm/K'``; ``None`` → ``''``."""
    if temp_coeff is None:
        return ""
    return f"{temp_coeff:g} ppm/K"
