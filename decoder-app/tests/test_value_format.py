"""
Tests for engineering-unit formatting of resistance values and ranges.
"""

import unittest

from value_format import (
    format_range,
    format_temp_coeff,
    format_tolerance,
    format_value,
)


class TestFormatValue(unittest.TestCase):
    """format_value(ohms) → (value, unit)."""

    def test_kilo_ohm(self):
        self.assertEqual(format_value(520_000), ("520", "kΩ"))

    def test_milli_ohm(self):
        self.assertEqual(format_value(0.47), ("470", "mΩ"))

    def test_plain_ohm(self):
        self.assertEqual(format_value(330), ("330", "Ω"))

    def test_one_ohm_boundary(self):
        self.assertEqual(format_value(1), ("1", "Ω"))
        self.assertEqual(format_value(0.99), ("990", "mΩ"))

    def test_mega_ohm(self):
        self.assertEqual(format_value(52_000_000), ("52", "MΩ"))

    def test_giga_threshold(self):
        self.assertEqual(format_value(999_999_999)[1], "MΩ")
        self.assertEqual(format_value(1_000_000_000), ("1", "GΩ"))

    def test_mega_just_below_giga_rounds_within_band(self):
        self.assertEqual(format_value(999_999_999), ("1000", "MΩ"))

    def test_trailing_zeros_stripped(self):
        self.assertEqual(format_value(4_700), ("4.7", "kΩ"))
        self.assertEqual(format_value(5_000), ("5", "kΩ"))
        self.assertEqual(format_value(10_000), ("10", "kΩ"))

    def test_rounds_to_two_places(self):
        self.assertEqual(format_value(1_234_567), ("1.23", "MΩ"))
        self.assertEqual(format_value(4.7), ("4.7", "Ω"))

    def test_fractional_decoded_value(self):
        # 47 × 0.1 is not exactly 4.7 in binary floating point
        self.assertEqual(format_value(47 * 0.1), ("4.7", "Ω"))

    def test_zero(self):
        self.assertEqual(format_value(0), ("0", "mΩ"))


class TestFormatRange(unittest.TestCase):
    """format_range(ohms, tolerance) shared / split unit rendering."""

    def test_shared_unit_collapses(self):
        self.assertEqual(format_range(100, 5), "95 - 105Ω")

    def test_shared_kilo_unit(self):
        self.assertEqual(format_range(4_700, 10), "4.23 - 5.17kΩ")

    def test_split_units(self):
        self.assertEqual(format_range(1, 5), "950mΩ - 1.05Ω")

    def test_split_across_kilo(self):
        self.assertEqual(format_range(1_000, 10), "900Ω - 1.1kΩ")

    def test_default_tolerance_range(self):
        self.assertEqual(format_range(5_200_000, 20), "4.16 - 6.24MΩ")


class TestToleranceAndTempCoeff(unittest.TestCase):

    def test_whole_percent(self):
        self.assertEqual(format_tolerance(5.0), "±5%")
        self.assertEqual(format_tolerance(20.0), "±20%")

    def test_fractional_percent(self):
        self.assertEqual(format_tolerance(0.25), "±0.25%")
        self.assertEqual(format_tolerance(0.05), "±0.05%")

    def test_temp_coeff(self):
        self.assertEqual(format_temp_coeff(100), "100 ppm/K")

    def test_no_temp_coeff(self):
        self.assertEqual(format_temp_coeff(None), "")


if __name__ == "__main__":
    unittest.main()
