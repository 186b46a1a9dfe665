"""
tests/test_inputs.py
====================
Buck Converter Calculator — Unit Tests for Input Collection
"""

import pytest

from buck.inputs import collect_parameters, parse_number, parse_quantity, unit_multiplier


class TestParseNumber:

    @pytest.mark.parametrize("raw", [None, "", "   ", "abc", "nan", "inf", "-inf", "1.2.3"])
    def test_unusable_entries_are_unknown(self, raw):
        assert parse_number(raw) is None

    @pytest.mark.parametrize("raw, expected", [
        ("12", 12.0), (" 3.3 ", 3.3), ("1e-6", 1e-6), ("-2", -2.0), (4.7, 4.7),
    ])
    def test_numeric_entries(self, raw, expected):
        assert parse_number(raw) == pytest.approx(expected)

    def test_quantity_is_scaled(self):
        assert parse_quantity("470", 1e-3) == pytest.approx(0.47)


class TestUnitMultiplier:

    def test_known_units(self):
        assert unit_multiplier("switching_frequency", "MHz") == 1e6
        assert unit_multiplier("capacitance", "pF") == 1e-12
        assert unit_multiplier("current_ripple_ratio", "%") == 0.01

    def test_unknown_unit_raises(self):
        with pytest.raises(ValueError, match="Unknown unit"):
            unit_multiplier("inductance", "kH")

    def test_unitless_parameter_raises(self):
        with pytest.raises(ValueError, match="no unit"):
            unit_multiplier("duty_cycle", "%")


class TestCollectParameters:

    def test_default_units_are_applied(self):
        params = collect_parameters({
            "input_voltage": "12",
            "switching_frequency": "500",
            "inductance": "10",
            "capacitance": "22",
            "output_voltage_ripple": "15",
            "current_ripple_ratio": "30",
        })
        assert params.input_voltage == pytest.approx(12.0)
        assert params.switching_frequency == pytest.approx(500_000.0)
        assert params.inductance == pytest.approx(10e-6)
        assert params.capacitance == pytest.approx(22e-6)
        assert params.output_voltage_ripple == pytest.approx(0.015)
        assert params.current_ripple_ratio == pytest.approx(0.3)

    def test_explicit_units_override_defaults(self):
        params = collect_parameters(
            {"switching_frequency": "1.2", "inductance": "2.2"},
            {"switching_frequency": "MHz", "inductance": "mH"},
        )
        assert params.switching_frequency == pytest.approx(1.2e6)
        assert params.inductance == pytest.approx(2.2e-3)

    def test_blank_entries_are_unknown(self):
        params = collect_parameters({"input_voltage": "", "output_voltage": None})
        assert params.known() == {}

    def test_duty_cycle_is_unitless(self):
        assert collect_parameters({"duty_cycle": "0.42"}).duty_cycle == pytest.approx(0.42)

    def test_zero_duty_cycle_is_unknown(self):
        assert collect_parameters({"duty_cycle": "0"}).duty_cycle is None

    def test_zero_quantity_is_kept(self):
        assert collect_parameters({"capacitance": "0"}).capacitance == 0.0

    def test_misspelled_unit_key_raises(self):
        with pytest.raises(ValueError, match="Unknown parameter name in units"):
            collect_parameters({"inductance": "2.2"}, {"inductnce": "mH"})

    def test_unit_for_unitless_parameter_raises(self):
        with pytest.raises(ValueError, match="no unit"):
            collect_parameters({"duty_cycle": "0.4"}, {"duty_cycle": "%"})

    def test_bad_unit_label_raises_without_entry(self):
        with pytest.raises(ValueError, match="Unknown unit for capacitance"):
            collect_parameters({}, {"capacitance": "kF"})

    def test_unknown_name_raises(self):
        with pytest.raises(ValueError, match="Unknown parameter"):
            collect_parameters({"load_resistance": "5"})
