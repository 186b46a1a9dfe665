"""
buck/formatting.py
==================
Buck Converter Calculator — Engineering Value Formatting

Renders SI values with a magnitude-appropriate unit prefix.  Used by the
validator's messages and by the console report so both read identically.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

from buck.config import NOT_AVAILABLE, PERCENT_SIGNIFICANT_DIGITS, SIGNIFICANT_DIGITS


def to_precision(value: float, digits: int) -> str:
    """Format ``value`` with ``digits`` significant digits.

    Mirrors ECMAScript ``Number.prototype.toPrecision``: trailing zeros are
    kept, and exponential notation (``1.500e+4``) is used only when the
    decimal exponent is below -6 or at least ``digits``.

    Example:
        >>> to_precision(0.41666, 3)
        '0.417'
        >>> to_precision(12000.0, 4)
        '1.200e+4'
    """
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    # Ties round away from zero, as toPrecision does.
    exact = Decimal(value) if value != 0.0 else Decimal(0)
    exponent = exact.adjusted()
    rounded = exact.quantize(Decimal(1).scaleb(exponent - digits + 1), rounding=ROUND_HALF_UP)
    if rounded != 0 and rounded.adjusted() > exponent:
        exponent += 1
        rounded = exact.quantize(Decimal(1).scaleb(exponent - digits + 1), rounding=ROUND_HALF_UP)
    if exponent < -6 or exponent >= digits:
        sign = "+" if exponent >= 0 else "-"
        return f"{format(rounded.scaleb(-exponent), 'f')}e{sign}{abs(exponent)}"
    return format(rounded, "f")


def _with_unit(value: float, unit: str) -> str:
    return f"{to_precision(value, SIGNIFICANT_DIGITS)} {unit}"


def _format_henry(value: float) -> str:
    if value >= 1.0:
        return _with_unit(value, "H")
    if value >= 1e-3:
        return _with_unit(value * 1e3, "mH")
    return _with_unit(value * 1e6, "µH")


def _format_farad(value: float) -> str:
    if value >= 1e-3:
        return _with_unit(value * 1e3, "mF")
    if value >= 1e-6:
        return _with_unit(value * 1e6, "µF")
    if value >= 1e-9:
        return _with_unit(value * 1e9, "nF")
    return _with_unit(value * 1e12, "pF")


def _format_hertz(value: float) -> str:
    if value >= 1e6:
        return _with_unit(value / 1e6, "MHz")
    if value >= 1e3:
        return _with_unit(value / 1e3, "kHz")
    return _with_unit(value, "Hz")


def _format_ohm(value: float) -> str:
    if value >= 1e6:
        return _with_unit(value / 1e6, "MΩ")
    if value >= 1e3:
        return _with_unit(value / 1e3, "kΩ")
    return _with_unit(value, "Ω")


def _base_or_milli(unit: str):
    def _format(value: float) -> str:
        if value >= 1.0:
            return _with_unit(value, unit)
        return _with_unit(value * 1e3, f"m{unit}")
    return _format


def _format_percent(value: float) -> str:
    return f"{to_precision(value * 100.0, PERCENT_SIGNIFICANT_DIGITS)}%"


def _format_raw(value: float) -> str:
    return to_precision(value, SIGNIFICANT_DIGITS)


_FORMATTERS = {
    "H":     _format_henry,
    "F":     _format_farad,
    "Hz":    _format_hertz,
    "V":     _base_or_milli("V"),
    "A":     _base_or_milli("A"),
    "W":     _base_or_milli("W"),
    "Ω":     _format_ohm,
    "%":     _format_percent,
    "ratio": _format_raw,
}


def format_value(value: float | None, unit_kind: str = "ratio") -> str:
    """Render ``value`` for display.

    Args:
        value:     Quantity in SI base units, or ``None`` when unknown.
        unit_kind: One of ``H``, ``F``, ``Hz``, ``V``, ``A``, ``W``, ``Ω``,
                   ``%`` or ``ratio``.  Unrecognised kinds render the raw
                   value like ``ratio``.

    Returns:
        The formatted string, or ``"N/A"`` for ``None``/NaN.

    Example:
        >>> format_value(0.00001, "H")
        '10.00 µH'
        >>> format_value(500000, "Hz")
        '500.0 kHz'
        >>> format_value(0.05, "%")
        '5.00%'
    """
    if value is None or math.isnan(value):
        return NOT_AVAILABLE
    formatter = _FORMATTERS.get(unit_kind, _format_raw)
    return formatter(value)
