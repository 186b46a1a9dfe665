"""
buck/parameters.py
==================
Buck Converter Calculator — Data Containers

Every quantity is either a known finite number in SI base units or unknown
(``None``).  Containers are frozen; transformations return new objects.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field, fields, replace
from typing import Mapping

from buck.config import PARAMETER_NAMES


def _to_snake_case(name: str) -> str:
    """``inputVoltage`` → ``input_voltage``; snake_case names pass through."""
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()


# ---------------------------------------------------------------------------
# Parameter set (user-supplied knowns)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ParameterSet:
    """Known buck converter quantities for one calculation request.

    Attributes:
        input_voltage:           Vin [V].
        output_voltage:          Vout [V].
        output_current:          Iout [A].
        switching_frequency:     Fs [Hz].
        inductance:              L [H].
        capacitance:             C [F].
        inductor_current_ripple: ΔIL, peak-to-peak [A].
        output_voltage_ripple:   ΔVout, peak-to-peak [V].
        duty_cycle:              D, fraction of the switching period.
        voltage_ripple_ratio:    ΔVout / Vout (dimensionless).
        current_ripple_ratio:    ΔIL / Iout (dimensionless).

    Out-of-range values (e.g. a duty cycle of 1.2) are stored as given; it is
    the validator's job to flag them.

    Raises:
        ValueError: If any present value is NaN or infinite.
    """
    input_voltage:           float | None = None
    output_voltage:          float | None = None
    output_current:          float | None = None
    switching_frequency:     float | None = None
    inductance:              float | None = None
    capacitance:             float | None = None
    inductor_current_ripple: float | None = None
    output_voltage_ripple:   float | None = None
    duty_cycle:              float | None = None
    voltage_ripple_ratio:    float | None = None
    current_ripple_ratio:    float | None = None

    def __post_init__(self) -> None:
        for name in PARAMETER_NAMES:
            value = getattr(self, name)
            if value is None:
                continue
            value = float(value)
            if not math.isfinite(value):
                raise ValueError(
                    f"Parameter values must be finite; received {name}={value!r}"
                )
            object.__setattr__(self, name, value)

    @classmethod
    def from_mapping(cls, values: Mapping[str, float | None]) -> ParameterSet:
        """Build a parameter set from a name → value mapping.

        Entry point for external callers that already hold SI values, such
        as a JSON payload keyed in camelCase.  Raw text entries with units
        go through :func:`buck.inputs.collect_parameters` instead.

        Keys may be snake_case attribute names or their camelCase forms
        (``inputVoltage``, ``dutyCycle`` ...).

        Raises:
            ValueError: If a key does not name a recognised parameter.
        """
        kwargs: dict[str, float | None] = {}
        for key, value in values.items():
            name = _to_snake_case(key)
            if name not in PARAMETER_NAMES:
                raise ValueError(f"Unknown parameter name; received {key!r}")
            kwargs[name] = value
        return cls(**kwargs)

    def known(self) -> dict[str, float]:
        """Return the present values keyed by attribute name."""
        return {
            name: getattr(self, name)
            for name in PARAMETER_NAMES
            if getattr(self, name) is not None
        }

    def merged_with(self, derived: DerivedValues) -> ParameterSet:
        """Return a copy with every inferred parameter filled in.

        Derived-only quantities (power, peak current, ESR) are not
        parameters and are ignored.
        """
        updates = {
            name: value
            for name, value in derived.as_dict().items()
            if name in PARAMETER_NAMES
        }
        return replace(self, **updates)


# ---------------------------------------------------------------------------
# Inference output
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DerivedValues:
    """Quantities produced by the inference engine.

    Parameter fields are present only when they were unknown on input and
    became computable.  The trailing five fields are pure outputs that are
    never supplied by the user.
    """
    input_voltage:           float | None = None
    output_voltage:          float | None = None
    output_current:          float | None = None
    switching_frequency:     float | None = None
    inductance:              float | None = None
    capacitance:             float | None = None
    inductor_current_ripple: float | None = None
    output_voltage_ripple:   float | None = None
    duty_cycle:              float | None = None
    voltage_ripple_ratio:    float | None = None
    current_ripple_ratio:    float | None = None
    input_current:                float | None = None
    output_power:                 float | None = None
    input_power:                  float | None = None
    peak_switch_current:          float | None = None
    equivalent_series_resistance: float | None = None

    def as_dict(self) -> dict[str, float]:
        """Present values keyed by name, in declaration order."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }

    def __len__(self) -> int:
        return len(self.as_dict())


# ---------------------------------------------------------------------------
# Validation output
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a consistency check.

    Attributes:
        errors:   Hard findings; any entry suppresses inference.
        warnings: Advisory findings; inference still runs.
    """
    errors:   tuple[str, ...] = field(default_factory=tuple)
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        return not self.errors
