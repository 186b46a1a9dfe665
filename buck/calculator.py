"""
buck/calculator.py
==================
Buck Converter Calculator — Calculation Orchestrator

Sequence per request:
    1. Validate the supplied parameters       (validator.validate)
    2. Gate: any error suppresses computation
    3. Infer unknown and derived quantities   (inference.infer)

Scope:
    - Stateless: each call to calculate() is independent and idempotent.
    - Errors and warnings are returned as data for the display layer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from buck.config import CALCULATION_TOLERANCE
from buck.inference import infer
from buck.parameters import DerivedValues, ParameterSet
from buck.validator import validate

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Data containers
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CalculationResult:
    """Everything the display layer needs for one calculation.

    Attributes:
        derived:  Newly computed values.  Empty when ``errors`` is non-empty.
        warnings: Advisory validation findings.
        errors:   Blocking validation findings.
    """
    derived:  DerivedValues = field(default_factory=DerivedValues)
    warnings: tuple[str, ...] = ()
    errors:   tuple[str, ...] = ()

    @property
    def blocked(self) -> bool:
        """True if validation errors suppressed the computation."""
        return bool(self.errors)


# ---------------------------------------------------------------------------
# Orchestrator
# ---------------------------------------------------------------------------

class BuckCalculator:
    """Validate-then-infer pipeline for buck converter parameters.

    Args:
        tolerance: Cross-check tolerance passed to the validator.
                   Must be in (0.0, 1.0).  Default 0.05.

    Raises:
        ValueError: If ``tolerance`` is outside (0.0, 1.0).
    """

    def __init__(self, tolerance: float = CALCULATION_TOLERANCE) -> None:
        if not (0.0 < tolerance < 1.0):
            raise ValueError(
                f"tolerance must be in (0.0, 1.0); received tolerance={tolerance!r}"
            )
        self._tolerance: float = tolerance

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def calculate(self, params: ParameterSet) -> CalculationResult:
        """Validate ``params`` and, if no errors were found, infer the rest.

        Warnings never block the computation.

        Example:
            >>> calc = BuckCalculator()
            >>> result = calc.calculate(ParameterSet(input_voltage=12.0, output_voltage=3.0))
            >>> result.derived.duty_cycle
            0.25
            >>> result.errors
            ()
        """
        validation = validate(params, tolerance=self._tolerance)

        if validation.errors:
            log.debug("calculation blocked by %d error(s)", len(validation.errors))
            return CalculationResult(
                derived=DerivedValues(),
                warnings=validation.warnings,
                errors=validation.errors,
            )

        derived = infer(params)
        log.debug(
            "computed %d value(s) with %d warning(s)",
            len(derived), len(validation.warnings),
        )
        return CalculationResult(
            derived=derived,
            warnings=validation.warnings,
            errors=(),
        )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def tolerance(self) -> float:
        """Cross-check tolerance used by the validator."""
        return self._tolerance


def calculate(params: ParameterSet) -> CalculationResult:
    """Run the pipeline with the default tolerance."""
    return BuckCalculator().calculate(params)
