"""
tests/test_parameters.py
========================
Buck Converter Calculator — Unit Tests for the Data Containers
"""

import dataclasses

import pytest

from buck.parameters import DerivedValues, ParameterSet, ValidationResult


class TestParameterSet:

    def test_unknown_by_default(self):
        assert ParameterSet().known() == {}

    def test_known_lists_present_values_only(self):
        params = ParameterSet(input_voltage=12.0, duty_cycle=0.5)
        assert params.known() == {"input_voltage": 12.0, "duty_cycle": 0.5}

    def test_integers_are_stored_as_floats(self):
        params = ParameterSet(input_voltage=12)
        assert isinstance(params.input_voltage, float)

    def test_out_of_range_ratios_are_stored(self):
        assert ParameterSet(duty_cycle=1.5).duty_cycle == 1.5

    @pytest.mark.parametrize("bad", [float("nan"), float("inf"), -float("inf")])
    def test_non_finite_values_rejected(self, bad):
        with pytest.raises(ValueError, match="finite"):
            ParameterSet(inductance=bad)

    def test_is_immutable(self):
        params = ParameterSet(input_voltage=12.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            params.input_voltage = 5.0

    def test_from_mapping_accepts_camel_case(self):
        params = ParameterSet.from_mapping({
            "inputVoltage": 12.0,
            "outputVoltage": 5.0,
            "switchingFrequency": 500_000.0,
            "currentRippleRatio": None,
        })
        assert params.input_voltage == 12.0
        assert params.switching_frequency == 500_000.0
        assert params.current_ripple_ratio is None

    def test_from_mapping_accepts_snake_case(self):
        params = ParameterSet.from_mapping({"inductor_current_ripple": 0.5})
        assert params.inductor_current_ripple == 0.5

    def test_from_mapping_rejects_unknown_names(self):
        with pytest.raises(ValueError, match="Unknown parameter"):
            ParameterSet.from_mapping({"outputPower": 10.0})

    def test_merged_with_fills_parameters_only(self):
        params = ParameterSet(input_voltage=12.0, output_voltage=5.0)
        derived = DerivedValues(duty_cycle=5.0 / 12.0, output_power=10.0)
        merged = params.merged_with(derived)
        assert merged.duty_cycle == pytest.approx(5.0 / 12.0)
        assert merged.input_voltage == 12.0
        assert params.duty_cycle is None


class TestDerivedValues:

    def test_as_dict_keeps_declaration_order(self):
        derived = DerivedValues(output_power=10.0, duty_cycle=0.5, input_current=1.0)
        assert list(derived.as_dict()) == ["duty_cycle", "input_current", "output_power"]

    def test_len_counts_present_values(self):
        assert len(DerivedValues()) == 0
        assert len(DerivedValues(input_power=1.0, output_power=1.0)) == 2


class TestValidationResult:

    def test_valid_without_errors(self):
        assert ValidationResult(warnings=("advisory",)).is_valid

    def test_invalid_with_errors(self):
        assert not ValidationResult(errors=("bad",)).is_valid
