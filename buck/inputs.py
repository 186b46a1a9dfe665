"""
buck/inputs.py
==============
Buck Converter Calculator — Input Collection

Turns raw text entries and their selected units into a :class:`ParameterSet`
in SI base units.  Blank or unparseable text means "unknown".
"""

from __future__ import annotations

import math
from typing import Mapping

from buck.config import DEFAULT_UNITS, PARAMETER_NAMES, UNIT_CHOICES
from buck.parameters import ParameterSet


def unit_multiplier(name: str, unit: str) -> float:
    """Return the SI multiplier for ``unit`` on parameter ``name``.

    Raises:
        ValueError: If ``name`` takes no unit or ``unit`` is not offered for it.
    """
    try:
        choices = UNIT_CHOICES[name]
    except KeyError:
        raise ValueError(f"Parameter takes no unit; received name={name!r}") from None
    try:
        return choices[unit]
    except KeyError:
        raise ValueError(
            f"Unknown unit for {name}; received unit={unit!r}, "
            f"expected one of {list(choices)}"
        ) from None


def parse_number(raw: str | float | None) -> float | None:
    """Parse one entry; blank, non-numeric, NaN or infinite text → ``None``."""
    if raw is None:
        return None
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        text = raw.strip()
        if not text:
            return None
        try:
            value = float(text)
        except ValueError:
            return None
    return value if math.isfinite(value) else None


def parse_quantity(raw: str | float | None, multiplier: float) -> float | None:
    """Parse one entry and scale it to SI base units."""
    value = parse_number(raw)
    if value is None:
        return None
    return value * multiplier


def collect_parameters(
    raw_values: Mapping[str, str | float | None],
    units: Mapping[str, str] | None = None,
) -> ParameterSet:
    """Build a parameter set from raw form entries.

    Args:
        raw_values: Parameter name → raw entry.  Missing names are unknown.
        units:      Parameter name → unit label (e.g. ``"kHz"``).  Names not
                    listed use :data:`buck.config.DEFAULT_UNITS`.

    Returns:
        :class:`ParameterSet` in SI base units.  The duty cycle is read
        without a unit, and an entry of exactly zero counts as unknown.

    Raises:
        ValueError: On an unknown parameter name or unit label, in either
            mapping.

    Example:
        >>> params = collect_parameters(
        ...     {"input_voltage": "12", "switching_frequency": "500"},
        ... )
        >>> params.switching_frequency
        500000.0
    """
    selected = dict(DEFAULT_UNITS)
    for name, unit in (units or {}).items():
        if name not in PARAMETER_NAMES:
            raise ValueError(f"Unknown parameter name in units; received {name!r}")
        unit_multiplier(name, unit)
        selected[name] = unit

    values: dict[str, float | None] = {}
    for name, raw in raw_values.items():
        if name == "duty_cycle":
            values[name] = parse_number(raw) or None
            continue
        if name not in UNIT_CHOICES:
            raise ValueError(f"Unknown parameter name; received {name!r}")
        values[name] = parse_quantity(raw, unit_multiplier(name, selected[name]))

    return ParameterSet(**values)
