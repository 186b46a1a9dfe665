"""
buck/inference.py
=================
Buck Converter Calculator — Parameter Inference Engine

Fills in unknown quantities from known ones using a fixed, ordered table of
steady-state buck relationships, and computes the derived design outputs
(input current, power, peak switch current, capacitor ESR).

Evaluation:
    - Single top-to-bottom pass over ``INFERENCE_RULES``.
    - A parameter rule fires only when its target is unknown and every input
      is known; its result is visible to every later rule.
    - A derived-only rule fires whenever its inputs are known.
    - A rule whose denominator is zero, or whose result is not finite, does
      not fire.

Every rule's inputs are produced by earlier rules, so one pass reaches the
fixed point.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable

from buck.config import OUTPUT_RIPPLE_FACTOR
from buck.parameters import DerivedValues, ParameterSet

log = logging.getLogger(__name__)

Values = dict[str, float]


# ---------------------------------------------------------------------------
# Rule table
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class InferenceRule:
    """One algebraic relationship.

    Attributes:
        target:       Name of the quantity produced.
        requires:     Names that must be known before the rule can fire.
        formula:      Maps the known values to the result, or ``None`` when
                      the result is undefined for these values.
        nonzero:      Subset of ``requires`` used as denominators.
        derived_only: True for pure outputs that are never user inputs.
    """
    target:       str
    requires:     tuple[str, ...]
    formula:      Callable[[Values], float | None]
    nonzero:      tuple[str, ...] = ()
    derived_only: bool = False

    def applies(self, known: Values) -> bool:
        if not self.derived_only and self.target in known:
            return False
        if any(name not in known for name in self.requires):
            return False
        return all(known[name] != 0.0 for name in self.nonzero)


def _esr(v: Values) -> float | None:
    """ESR from the ripple left over after the capacitive component."""
    capacitor_ripple = v["inductor_current_ripple"] / (
        OUTPUT_RIPPLE_FACTOR * v["switching_frequency"] * v["capacitance"]
    )
    esr_ripple = v["output_voltage_ripple"] - capacitor_ripple
    if esr_ripple <= 0.0:
        return None
    return esr_ripple / (v["inductor_current_ripple"] / 2.0)


INFERENCE_RULES: list[InferenceRule] = [
    # 1. D = Vout / Vin
    InferenceRule(
        "duty_cycle",
        ("input_voltage", "output_voltage"),
        lambda v: v["output_voltage"] / v["input_voltage"],
        nonzero=("input_voltage",),
    ),
    # 2. Vin = Vout / D
    InferenceRule(
        "input_voltage",
        ("output_voltage", "duty_cycle"),
        lambda v: v["output_voltage"] / v["duty_cycle"],
        nonzero=("duty_cycle",),
    ),
    # 3. Vout = Vin · D
    InferenceRule(
        "output_voltage",
        ("input_voltage", "duty_cycle"),
        lambda v: v["input_voltage"] * v["duty_cycle"],
    ),
    # 4. ΔIL = (Vin − Vout) · D / (L · Fs)
    InferenceRule(
        "inductor_current_ripple",
        ("input_voltage", "output_voltage", "duty_cycle", "inductance", "switching_frequency"),
        lambda v: (v["input_voltage"] - v["output_voltage"]) * v["duty_cycle"]
        / (v["inductance"] * v["switching_frequency"]),
        nonzero=("inductance", "switching_frequency"),
    ),
    # 5. L = (Vin − Vout) · D / (ΔIL · Fs)
    InferenceRule(
        "inductance",
        ("input_voltage", "output_voltage", "duty_cycle", "switching_frequency",
         "inductor_current_ripple"),
        lambda v: (v["input_voltage"] - v["output_voltage"]) * v["duty_cycle"]
        / (v["inductor_current_ripple"] * v["switching_frequency"]),
        nonzero=("inductor_current_ripple", "switching_frequency"),
    ),
    # 6. Fs = (Vin − Vout) · D / (L · ΔIL)
    InferenceRule(
        "switching_frequency",
        ("input_voltage", "output_voltage", "duty_cycle", "inductance",
         "inductor_current_ripple"),
        lambda v: (v["input_voltage"] - v["output_voltage"]) * v["duty_cycle"]
        / (v["inductance"] * v["inductor_current_ripple"]),
        nonzero=("inductance", "inductor_current_ripple"),
    ),
    # 7. ΔVout = ΔIL / (8 · Fs · C)
    InferenceRule(
        "output_voltage_ripple",
        ("inductor_current_ripple", "switching_frequency", "capacitance"),
        lambda v: v["inductor_current_ripple"]
        / (OUTPUT_RIPPLE_FACTOR * v["switching_frequency"] * v["capacitance"]),
        nonzero=("switching_frequency", "capacitance"),
    ),
    # 8. C = ΔIL / (8 · Fs · ΔVout)
    InferenceRule(
        "capacitance",
        ("inductor_current_ripple", "switching_frequency", "output_voltage_ripple"),
        lambda v: v["inductor_current_ripple"]
        / (OUTPUT_RIPPLE_FACTOR * v["switching_frequency"] * v["output_voltage_ripple"]),
        nonzero=("switching_frequency", "output_voltage_ripple"),
    ),
    # 9. ΔV/V = ΔVout / Vout
    InferenceRule(
        "voltage_ripple_ratio",
        ("output_voltage_ripple", "output_voltage"),
        lambda v: v["output_voltage_ripple"] / v["output_voltage"],
        nonzero=("output_voltage",),
    ),
    # 10. ΔI/I = ΔIL / Iout
    InferenceRule(
        "current_ripple_ratio",
        ("inductor_current_ripple", "output_current"),
        lambda v: v["inductor_current_ripple"] / v["output_current"],
        nonzero=("output_current",),
    ),
    # 11. Iout = ΔIL / (ΔI/I)
    InferenceRule(
        "output_current",
        ("inductor_current_ripple", "current_ripple_ratio"),
        lambda v: v["inductor_current_ripple"] / v["current_ripple_ratio"],
        nonzero=("current_ripple_ratio",),
    ),
    # 12. Iin = Iout · D
    InferenceRule(
        "input_current",
        ("output_current", "duty_cycle"),
        lambda v: v["output_current"] * v["duty_cycle"],
        derived_only=True,
    ),
    # 13. Pout = Pin = Vout · Iout  (ideal, lossless)
    InferenceRule(
        "output_power",
        ("output_voltage", "output_current"),
        lambda v: v["output_voltage"] * v["output_current"],
        derived_only=True,
    ),
    InferenceRule(
        "input_power",
        ("output_voltage", "output_current"),
        lambda v: v["output_voltage"] * v["output_current"],
        derived_only=True,
    ),
    # 14. Ipk = Iout + ΔIL / 2  (ΔIL taken as 0 when unknown)
    InferenceRule(
        "peak_switch_current",
        ("output_current", "duty_cycle", "switching_frequency"),
        lambda v: v["output_current"] + v.get("inductor_current_ripple", 0.0) / 2.0,
        derived_only=True,
    ),
    # 15. ESR = (ΔVout − ΔIL / (8 · Fs · C)) / (ΔIL / 2)
    InferenceRule(
        "equivalent_series_resistance",
        ("output_voltage_ripple", "inductor_current_ripple", "capacitance",
         "switching_frequency"),
        _esr,
        nonzero=("inductor_current_ripple", "capacitance", "switching_frequency"),
        derived_only=True,
    ),
]


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------

def infer(
    params: ParameterSet,
    rules: list[InferenceRule] = INFERENCE_RULES,
) -> DerivedValues:
    """Compute every quantity reachable from the known parameters.

    Args:
        params: The user-supplied parameter set.
        rules:  Ordered rule table; defaults to :data:`INFERENCE_RULES`.

    Returns:
        :class:`DerivedValues` holding the newly computed parameters and
        the derived outputs.  Supplied values are never echoed back.

    Example:
        >>> derived = infer(ParameterSet(input_voltage=12.0, output_voltage=6.0))
        >>> derived.duty_cycle
        0.5
    """
    known: Values = params.known()
    computed: Values = {}

    for rule in rules:
        if not rule.applies(known):
            continue
        value = rule.formula(known)
        if value is None or not math.isfinite(value):
            log.debug("rule %s skipped: result %r", rule.target, value)
            continue
        log.debug("rule %s fired: %r", rule.target, value)
        known[rule.target] = value
        computed[rule.target] = value

    return DerivedValues(**computed)
