"""
tests/test_formatting.py
========================
Buck Converter Calculator — Unit Tests for Value Formatting
"""

import math

import pytest

from buck.formatting import format_value, to_precision


class TestToPrecision:

    @pytest.mark.parametrize("value, digits, expected", [
        (0.41666666, 3, "0.417"),
        (1.5, 4, "1.500"),
        (1234.5, 4, "1235"),
        (12000.0, 4, "1.200e+4"),
        (0.0000015, 4, "0.000001500"),
        (1.5e-7, 4, "1.500e-7"),
        (9.9996, 4, "10.00"),
        (0.0, 4, "0.000"),
        (-0.5, 3, "-0.500"),
        (0.125, 2, "0.13"),
    ])
    def test_matches_to_precision_semantics(self, value, digits, expected):
        assert to_precision(value, digits) == expected

    def test_infinity(self):
        assert to_precision(math.inf, 4) == "Infinity"


class TestFormatValue:

    @pytest.mark.parametrize("value, unit, expected", [
        (1.5, "H", "1.500 H"),
        (0.0022, "H", "2.200 mH"),
        (0.00001, "H", "10.00 µH"),
        (0.0047, "F", "4.700 mF"),
        (0.0000015, "F", "1.500 µF"),
        (4.7e-9, "F", "4.700 nF"),
        (100e-12, "F", "100.0 pF"),
        (2_000_000.0, "Hz", "2.000 MHz"),
        (500_000.0, "Hz", "500.0 kHz"),
        (50.0, "Hz", "50.00 Hz"),
        (3.3, "V", "3.300 V"),
        (0.0125, "V", "12.50 mV"),
        (2.0, "A", "2.000 A"),
        (0.58333333, "A", "583.3 mA"),
        (10.0, "W", "10.00 W"),
        (0.5, "W", "500.0 mW"),
        (0.05, "Ω", "0.05000 Ω"),
        (4700.0, "Ω", "4.700 kΩ"),
        (2_200_000.0, "Ω", "2.200 MΩ"),
        (0.41666666, "%", "41.7%"),
        (0.05, "%", "5.00%"),
        (0.41666666, "ratio", "0.4167"),
    ])
    def test_unit_bands(self, value, unit, expected):
        assert format_value(value, unit) == expected

    def test_unknown_unit_renders_raw_value(self):
        assert format_value(0.41666666, "furlongs") == "0.4167"

    def test_default_unit_is_ratio(self):
        assert format_value(0.25) == "0.2500"

    def test_none_is_not_available(self):
        assert format_value(None, "V") == "N/A"

    def test_nan_is_not_available(self):
        assert format_value(float("nan"), "A") == "N/A"

    def test_micro_farad_band_keeps_four_digits(self):
        text = format_value(0.0000015, "F")
        number, unit = text.split(" ")
        assert unit == "µF"
        assert len(number.replace(".", "")) == 4
