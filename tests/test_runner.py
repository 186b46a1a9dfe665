"""
tests/test_runner.py
====================
Buck Converter Calculator — Command-Line Runner Tests
"""

import matplotlib

matplotlib.use("Agg")

import pytest

import calculator_runner
from calculator_runner import build_parser, collect_from_args, main


REFERENCE_ARGS = [
    "--input-voltage", "12",
    "--output-voltage", "5",
    "--switching-frequency", "500",
    "--inductance", "10",
    "--output-current", "2",
]


class TestArguments:

    def test_default_units(self):
        args = build_parser().parse_args([])
        assert args.switching_frequency_unit == "kHz"
        assert args.inductance_unit == "µH"
        assert args.output_voltage_ripple_unit == "mV"

    def test_collects_si_parameters(self):
        args = build_parser().parse_args(
            REFERENCE_ARGS + ["--capacitance", "22", "--capacitance-unit", "nF"]
        )
        params = collect_from_args(args)
        assert params.switching_frequency == pytest.approx(500_000.0)
        assert params.inductance == pytest.approx(10e-6)
        assert params.capacitance == pytest.approx(22e-9)
        assert params.duty_cycle is None

    def test_rejects_unknown_unit(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--inductance-unit", "kH"])

    def test_rejects_invalid_tolerance(self):
        with pytest.raises(SystemExit):
            main(REFERENCE_ARGS + ["--tolerance", "0"])


class TestReport:

    def test_reference_design_report(self, capsys):
        assert main(REFERENCE_ARGS) == 0
        out = capsys.readouterr().out
        assert "BASIC PARAMETERS" in out
        assert "Duty Cycle (D)" in out
        assert "0.4167" in out
        assert "583.3 mA" in out
        assert "Output Power (Pout)" in out
        assert "10.00 W" in out
        assert "2.292 A" in out
        assert "Validation Errors" not in out

    def test_supplied_values_are_not_listed(self, capsys):
        main(REFERENCE_ARGS)
        out = capsys.readouterr().out
        assert "Inductance (L)" not in out

    def test_errors_block_results(self, capsys):
        code = main(REFERENCE_ARGS + ["--duty-cycle", "0.9"])
        out = capsys.readouterr().out
        assert code == 1
        assert "Validation Errors" in out
        assert "Duty cycle mismatch: Input D = 0.900, but Vout/Vin = 0.417" in out
        assert "Fix the validation issues above" in out
        assert "BASIC PARAMETERS" not in out

    def test_warnings_are_listed_with_results(self, capsys):
        code = main(["--input-voltage", "5", "--output-voltage", "12"])
        out = capsys.readouterr().out
        assert code == 0
        assert "Design Warnings" in out
        assert "Buck converter requires Vout < Vin" in out
        assert "2.400" in out

    def test_empty_state(self, capsys):
        assert main([]) == 0
        assert "No calculations performed yet." in capsys.readouterr().out


class TestPlot:

    def test_plot_saved(self, tmp_path, capsys):
        target = tmp_path / "ripple.png"
        code = main(REFERENCE_ARGS + ["--capacitance", "22", "--plot", "--plot-file", str(target)])
        assert code == 0
        assert target.exists()
        assert "[plot] Saved" in capsys.readouterr().out

    def test_plot_skipped_without_ripple(self, tmp_path, capsys):
        target = tmp_path / "ripple.png"
        main(["--input-voltage", "12", "--output-voltage", "5", "--plot", "--plot-file", str(target)])
        assert not target.exists()
        assert "[plot] Skipped" in capsys.readouterr().out

    def test_build_waveforms_uses_inferred_values(self):
        args = build_parser().parse_args(REFERENCE_ARGS + ["--capacitance", "22"])
        params = collect_from_args(args)
        result = calculator_runner.BuckCalculator().calculate(params)
        wf = calculator_runner.build_waveforms(params, result)
        assert wf is not None
        assert wf.duty_cycle == pytest.approx(5.0 / 12.0)
        assert wf.output_voltage_v
