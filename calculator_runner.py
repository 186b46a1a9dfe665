"""
calculator_runner.py
====================
Buck Converter Calculator — Command-Line Runner

Connects the calculator modules for one design request:
    1. Parse raw entries and units from the command line  (argparse)
    2. Convert to SI and build the parameter set           (inputs.collect_parameters)
    3. Validate, then infer if no errors                   (calculator.BuckCalculator)
    4. Print validation errors and design warnings
    5. Print computed values grouped by category
    6. Optionally plot steady-state ripple waveforms       (waveforms.compute_ripple_waveforms)

Usage:
    python calculator_runner.py --input-voltage 12 --output-voltage 5 \\
        --switching-frequency 500 --inductance 10 --output-current 2
"""

from __future__ import annotations

import argparse
import logging
import sys

import matplotlib.pyplot as plt
import matplotlib.ticker as mticker

from buck.calculator import BuckCalculator, CalculationResult
from buck.config import (
    CALCULATION_TOLERANCE,
    DEFAULT_UNITS,
    FIELD_HELP,
    RESULT_CATEGORIES,
    UNIT_CHOICES,
)
from buck.formatting import format_value
from buck.inputs import collect_parameters
from buck.parameters import ParameterSet
from buck.waveforms import RippleWaveforms, compute_ripple_waveforms, peak_to_peak

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Runner parameters (execution configuration only)
# ---------------------------------------------------------------------------

PLOT_OUTPUT_FILE: str = "buck_ripple_waveforms.png"
WAVEFORM_PERIODS: int = 2
POINTS_PER_PERIOD: int = 200

INPUT_ORDER: list[str] = [
    "input_voltage",
    "output_voltage",
    "output_current",
    "switching_frequency",
    "duty_cycle",
    "inductance",
    "capacitance",
    "inductor_current_ripple",
    "output_voltage_ripple",
    "voltage_ripple_ratio",
    "current_ripple_ratio",
]


# ---------------------------------------------------------------------------
# Step 1: Command line
# ---------------------------------------------------------------------------

def _flag(name: str) -> str:
    return "--" + name.replace("_", "-")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=(
            "Buck converter design calculator: infers missing parameters and "
            "cross-checks redundant ones."
        )
    )
    for name in INPUT_ORDER:
        parser.add_argument(_flag(name), dest=name, default=None, help=FIELD_HELP.get(name))
        if name in UNIT_CHOICES:
            parser.add_argument(
                _flag(name) + "-unit",
                dest=f"{name}_unit",
                choices=list(UNIT_CHOICES[name]),
                default=DEFAULT_UNITS[name],
                help=f"Unit for {_flag(name)} (default: {DEFAULT_UNITS[name]})",
            )
    parser.add_argument(
        "--tolerance", type=float, default=CALCULATION_TOLERANCE,
        help="Consistency check tolerance (default: %(default)s)",
    )
    parser.add_argument("--plot", action="store_true", help="Save ripple waveform plot")
    parser.add_argument("--plot-file", default=PLOT_OUTPUT_FILE, help="Plot output path")
    parser.add_argument("--show", action="store_true", help="Also display the plot window")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


# ---------------------------------------------------------------------------
# Step 2: Parameter set
# ---------------------------------------------------------------------------

def collect_from_args(args: argparse.Namespace) -> ParameterSet:
    """Build the SI parameter set from parsed command-line entries."""
    raw_values = {name: getattr(args, name) for name in INPUT_ORDER}
    units = {name: getattr(args, f"{name}_unit") for name in UNIT_CHOICES}
    return collect_parameters(raw_values, units)


# ---------------------------------------------------------------------------
# Steps 4–5: Console report
# ---------------------------------------------------------------------------

def print_report(result: CalculationResult) -> None:
    """Print validation findings and computed values."""

    sep = "─" * 60

    print(f"\n{'═' * 60}")
    print("  BUCK CONVERTER DESIGN CALCULATOR — RESULTS")
    print(f"{'═' * 60}")

    if result.errors:
        print(f"\n{sep}")
        print("  ✘ Validation Errors")
        print(sep)
        for error in result.errors:
            print(f"    • {error}")

    if result.warnings:
        print(f"\n{sep}")
        print("  ⚠ Design Warnings")
        print(sep)
        for warning in result.warnings:
            print(f"    • {warning}")

    values = result.derived.as_dict()
    has_results = False
    for title, items in RESULT_CATEGORIES:
        present = [(key, label, unit) for key, label, unit in items if key in values]
        if not present:
            continue
        has_results = True
        print(f"\n{sep}")
        print(f"  {title.upper()}")
        print(sep)
        for key, label, unit in present:
            print(f"    {label:<32}:  {format_value(values[key], unit)}")

    if not has_results:
        if result.errors or result.warnings:
            print("\n  ℹ Fix the validation issues above to see calculated results.")
        else:
            print("\n  No calculations performed yet.")
            print("  Enter parameters and run again.")
    print(f"{'═' * 60}\n")


# ---------------------------------------------------------------------------
# Step 6: Plot — steady-state ripple waveforms
# ---------------------------------------------------------------------------

def build_waveforms(params: ParameterSet, result: CalculationResult) -> RippleWaveforms | None:
    """Reconstruct waveforms from supplied and inferred values together."""
    full = params.merged_with(result.derived)
    return compute_ripple_waveforms(
        full,
        periods=WAVEFORM_PERIODS,
        points_per_period=POINTS_PER_PERIOD,
        esr_ohm=result.derived.equivalent_series_resistance,
    )


def plot_ripple_waveforms(wf: RippleWaveforms, output_file: str, show: bool = False) -> None:
    """Render and save inductor current and output voltage vs time."""

    times_us = [t * 1e6 for t in wf.time_s]
    n_axes = 2 if wf.output_voltage_v else 1

    fig, axes = plt.subplots(n_axes, 1, figsize=(10, 3.5 * n_axes), sharex=True, squeeze=False)
    fig.suptitle(
        "Buck Converter — Steady-State Ripple\n"
        f"Fs = {format_value(1.0 / wf.period_s, 'Hz')}  |  D = {format_value(wf.duty_cycle)}",
        fontsize=12, fontweight="bold",
    )

    # ── Inductor current ─────────────────────────────────────────────────
    ax1 = axes[0][0]
    ax1.plot(times_us, wf.inductor_current_a, color="#2196F3", linewidth=2,
             label=f"iL (ΔIL = {format_value(peak_to_peak(wf.inductor_current_a), 'A')})")
    ax1.set_ylabel("Inductor Current [A]", fontsize=11)
    ax1.legend(fontsize=9, loc="lower right")
    ax1.grid(True, linestyle="--", alpha=0.5)

    # ── Output voltage ───────────────────────────────────────────────────
    if wf.output_voltage_v:
        ax2 = axes[1][0]
        ax2.plot(times_us, wf.output_voltage_v, color="#4CAF50", linewidth=2,
                 label=f"vout (ΔVout = {format_value(peak_to_peak(wf.output_voltage_v), 'V')})")
        ax2.set_ylabel("Output Voltage [V]", fontsize=11)
        ax2.yaxis.set_major_formatter(mticker.FormatStrFormatter("%.4f"))
        ax2.legend(fontsize=9, loc="lower right")
        ax2.grid(True, linestyle="--", alpha=0.5)

    axes[-1][0].set_xlabel("Time [µs]", fontsize=11)

    plt.tight_layout()
    plt.savefig(output_file, dpi=150, bbox_inches="tight")
    print(f"  [plot] Saved → {output_file}")
    if show:
        plt.show()
    plt.close(fig)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        calculator = BuckCalculator(tolerance=args.tolerance)
    except ValueError as exc:
        parser.error(str(exc))

    params = collect_from_args(args)
    log.debug("parameters: %r", params.known())

    result = calculator.calculate(params)
    print_report(result)

    if args.plot and not result.blocked:
        wf = build_waveforms(params, result)
        if wf is None:
            print("  [plot] Skipped — need D, Fs, ΔIL and Iout to draw the waveforms.")
        else:
            plot_ripple_waveforms(wf, args.plot_file, show=args.show)

    return 1 if result.blocked else 0


if __name__ == "__main__":
    sys.exit(main())
