"""
buck/validator.py
=================
Buck Converter Calculator — Input Consistency Validator

Re-derives every parameter that can be computed in more than one way and
compares the supplied value against the re-derivation.

Check order (fixed, part of the output contract):
    1. D      vs  Vout / Vin                     (absolute tolerance)
    2. ΔIL    vs  (Vin − Vout) · D / (L · Fs)    (relative tolerance)
    3. ΔVout  vs  ΔIL / (8 · Fs · C)             (relative tolerance)
    4. ΔV/V   vs  ΔVout / Vout                   (absolute tolerance)
    5. ΔI/I   vs  ΔIL / Iout                     (absolute tolerance)
    6. Range checks: duty cycle, buck topology, positive quantities,
       ripple ratios.

Zero denominators:
    - Checks 1-3 are skipped (Vin = 0, L · Fs = 0, Fs · C = 0).
    - Checks 4-5 treat ΔVout / 0 and ΔIL / 0 as infinite, so any supplied
      ratio is a mismatch ("Infinity%").  0 / 0 is undefined and skipped.
    Zero-valued physical quantities are also reported by the positivity
    checks.

Scope:
    - Pure function.  Findings are returned as data, never raised.
"""

from __future__ import annotations

import math

from buck.config import CALCULATION_TOLERANCE, OUTPUT_RIPPLE_FACTOR, POSITIVE_PARAMETERS
from buck.formatting import format_value, to_precision
from buck.parameters import ParameterSet, ValidationResult


def _ripple_ratio(numerator: float, denominator: float) -> float | None:
    """``numerator / denominator``, signed infinity for x / 0, ``None`` for 0 / 0."""
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0:
        return None
    return math.copysign(math.inf, numerator)


def validate(
    params: ParameterSet,
    tolerance: float = CALCULATION_TOLERANCE,
) -> ValidationResult:
    """Cross-check redundant inputs and flag physically invalid values.

    Args:
        params:    The user-supplied parameter set.
        tolerance: Mismatch tolerance.  Used as an absolute band for the
                   duty-cycle and ripple-ratio checks and as a fraction of
                   the expected value for the ripple-amplitude checks.

    Returns:
        :class:`ValidationResult` with errors and warnings in check order.

    Example:
        >>> validate(ParameterSet(input_voltage=5.0, output_voltage=12.0)).warnings
        ('Buck converter requires Vout < Vin. Current: Vout = 12.00 V, Vin = 5.000 V',)
    """
    p = params
    errors: list[str] = []
    warnings: list[str] = []

    vin, vout, d = p.input_voltage, p.output_voltage, p.duty_cycle
    fs, l, c = p.switching_frequency, p.inductance, p.capacitance
    iout = p.output_current
    delta_il, delta_vout = p.inductor_current_ripple, p.output_voltage_ripple

    # ------------------------------------------------------------------
    # 1. Duty cycle: D = Vout / Vin
    # ------------------------------------------------------------------
    if d is not None and vin is not None and vout is not None and vin != 0.0:
        expected = vout / vin
        if abs(d - expected) > tolerance:
            errors.append(
                f"Duty cycle mismatch: Input D = {to_precision(d, 3)}, "
                f"but Vout/Vin = {to_precision(expected, 3)}"
            )

    # ------------------------------------------------------------------
    # 2. Inductor ripple: ΔIL = (Vin − Vout) · D / (L · Fs)
    # ------------------------------------------------------------------
    if (delta_il is not None and vin is not None and vout is not None
            and d is not None and l is not None and fs is not None
            and l * fs != 0.0):
        expected = (vin - vout) * d / (l * fs)
        if abs(delta_il - expected) > abs(expected * tolerance):
            errors.append(
                f"Inductor ripple mismatch: Input ΔIL = {format_value(delta_il, 'A')}, "
                f"calculated = {format_value(expected, 'A')}"
            )

    # ------------------------------------------------------------------
    # 3. Output ripple: ΔVout = ΔIL / (8 · Fs · C)
    # ------------------------------------------------------------------
    if (delta_vout is not None and delta_il is not None and fs is not None
            and c is not None and fs * c != 0.0):
        expected = delta_il / (OUTPUT_RIPPLE_FACTOR * fs * c)
        if abs(delta_vout - expected) > abs(expected * tolerance):
            errors.append(
                f"Output ripple mismatch: Input ΔVout = {format_value(delta_vout, 'V')}, "
                f"calculated = {format_value(expected, 'V')}"
            )

    # ------------------------------------------------------------------
    # 4. Voltage ripple ratio: ΔV/V = ΔVout / Vout
    # ------------------------------------------------------------------
    ratio = p.voltage_ripple_ratio
    if ratio is not None and delta_vout is not None and vout is not None:
        expected = _ripple_ratio(delta_vout, vout)
        if expected is not None and abs(ratio - expected) > tolerance:
            errors.append(
                f"Voltage ripple ratio mismatch: Input ΔV/V = {format_value(ratio, '%')}, "
                f"but ΔVout/Vout = {format_value(expected, '%')}"
            )

    # ------------------------------------------------------------------
    # 5. Current ripple ratio: ΔI/I = ΔIL / Iout
    # ------------------------------------------------------------------
    ratio = p.current_ripple_ratio
    if ratio is not None and delta_il is not None and iout is not None:
        expected = _ripple_ratio(delta_il, iout)
        if expected is not None and abs(ratio - expected) > tolerance:
            errors.append(
                f"Current ripple ratio mismatch: Input ΔI/I = {format_value(ratio, '%')}, "
                f"but ΔIL/Iout = {format_value(expected, '%')}"
            )

    # ------------------------------------------------------------------
    # 6. Physical range checks
    # ------------------------------------------------------------------
    if d is not None and (d <= 0.0 or d >= 1.0):
        warnings.append(
            f"Duty cycle should be between 0 and 1. Current: {to_precision(d, 3)}"
        )

    if vin is not None and vout is not None and vout >= vin:
        warnings.append(
            f"Buck converter requires Vout < Vin. Current: "
            f"Vout = {format_value(vout, 'V')}, Vin = {format_value(vin, 'V')}"
        )

    for name, label in POSITIVE_PARAMETERS:
        value = getattr(p, name)
        if value is not None and value <= 0.0:
            errors.append(f"{label} must be positive")

    if p.voltage_ripple_ratio is not None and not (0.0 < p.voltage_ripple_ratio <= 1.0):
        warnings.append("Voltage ripple ratio should typically be 0-100%")

    if p.current_ripple_ratio is not None and not (0.0 < p.current_ripple_ratio <= 1.0):
        warnings.append("Current ripple ratio should typically be 0-100%")

    return ValidationResult(errors=tuple(errors), warnings=tuple(warnings))
