"""
buck/config.py
==============
Buck Converter Calculator — Constants and Display Tables

Rules:
    - No calculations or derived quantities here.
    - All physical quantities in SI base units (V, A, Hz, H, F, Ω).
    - Ratios (duty cycle, ripple ratios) are dimensionless fractions, 0.0–1.0.
    - No conditional expressions.
"""


# ---------------------------------------------------------------------------
# Consistency validation
# ---------------------------------------------------------------------------

CALCULATION_TOLERANCE: float = 0.05
"""Tolerance used when cross-checking redundant inputs (dimensionless).

Applied as an absolute band for the duty-cycle and ripple-ratio checks and as
a fraction of the expected magnitude for the ripple-amplitude checks.
"""

OUTPUT_RIPPLE_FACTOR: float = 8.0
"""Denominator constant in ΔVout = ΔIL / (8 · Fs · C)."""


# ---------------------------------------------------------------------------
# Parameter names
# ---------------------------------------------------------------------------

PARAMETER_NAMES: tuple[str, ...] = (
    "input_voltage",
    "output_voltage",
    "output_current",
    "switching_frequency",
    "inductance",
    "capacitance",
    "inductor_current_ripple",
    "output_voltage_ripple",
    "duty_cycle",
    "voltage_ripple_ratio",
    "current_ripple_ratio",
)

DERIVED_ONLY_NAMES: tuple[str, ...] = (
    "input_current",
    "output_power",
    "input_power",
    "peak_switch_current",
    "equivalent_series_resistance",
)

# Physical quantities that must be strictly positive, in report order.
POSITIVE_PARAMETERS: list[tuple[str, str]] = [
    ("switching_frequency", "Switching frequency"),
    ("inductance",          "Inductance"),
    ("capacitance",         "Capacitance"),
    ("output_current",      "Output current"),
]


# ---------------------------------------------------------------------------
# Value formatting
# ---------------------------------------------------------------------------

NOT_AVAILABLE: str = "N/A"
"""Marker rendered for absent or NaN values."""

SIGNIFICANT_DIGITS: int = 4
PERCENT_SIGNIFICANT_DIGITS: int = 3


# ---------------------------------------------------------------------------
# Input units (label → SI multiplier)
# ---------------------------------------------------------------------------

VOLTAGE_UNITS: dict[str, float] = {"V": 1.0, "mV": 1e-3}
CURRENT_UNITS: dict[str, float] = {"A": 1.0, "mA": 1e-3}
FREQUENCY_UNITS: dict[str, float] = {"Hz": 1.0, "kHz": 1e3, "MHz": 1e6}
INDUCTANCE_UNITS: dict[str, float] = {"H": 1.0, "mH": 1e-3, "µH": 1e-6, "nH": 1e-9}
CAPACITANCE_UNITS: dict[str, float] = {
    "F": 1.0, "mF": 1e-3, "µF": 1e-6, "nF": 1e-9, "pF": 1e-12,
}
RATIO_UNITS: dict[str, float] = {"%": 0.01, "ratio": 1.0}

UNIT_CHOICES: dict[str, dict[str, float]] = {
    "input_voltage":           VOLTAGE_UNITS,
    "output_voltage":          VOLTAGE_UNITS,
    "output_current":          CURRENT_UNITS,
    "switching_frequency":     FREQUENCY_UNITS,
    "inductance":              INDUCTANCE_UNITS,
    "capacitance":             CAPACITANCE_UNITS,
    "inductor_current_ripple": CURRENT_UNITS,
    "output_voltage_ripple":   VOLTAGE_UNITS,
    "voltage_ripple_ratio":    RATIO_UNITS,
    "current_ripple_ratio":    RATIO_UNITS,
}

# Unit selected for each field when the form is reset.
DEFAULT_UNITS: dict[str, str] = {
    "input_voltage":           "V",
    "output_voltage":          "V",
    "output_current":          "A",
    "switching_frequency":     "kHz",
    "inductance":              "µH",
    "capacitance":             "µF",
    "inductor_current_ripple": "A",
    "output_voltage_ripple":   "mV",
    "voltage_ripple_ratio":    "%",
    "current_ripple_ratio":    "%",
}

FIELD_HELP: dict[str, str] = {
    "input_voltage":         "DC input voltage to the buck converter",
    "output_voltage":        "Desired DC output voltage",
    "output_current":        "Maximum load current",
    "switching_frequency":   "MOSFET/transistor switching frequency",
    "duty_cycle":            "PWM duty cycle (0 to 1)",
    "inductance":            "Filter inductor value",
    "capacitance":           "Output filter capacitor value",
    "inductor_current_ripple": "Peak-to-peak inductor current variation",
    "output_voltage_ripple": "Peak-to-peak output voltage variation",
    "voltage_ripple_ratio":  "Output voltage ripple relative to Vout",
    "current_ripple_ratio":  "Inductor current ripple relative to Iout",
}


# ---------------------------------------------------------------------------
# Result display
# ---------------------------------------------------------------------------

# Each category is (title, [(key, label, unit_kind), ...]).
RESULT_CATEGORIES: list[tuple[str, list[tuple[str, str, str]]]] = [
    ("Basic Parameters", [
        ("duty_cycle",     "Duty Cycle (D)",        "ratio"),
        ("input_voltage",  "Input Voltage (Vin)",   "V"),
        ("output_voltage", "Output Voltage (Vout)", "V"),
        ("input_current",  "Input Current (Iin)",   "A"),
        ("output_current", "Output Current (Iout)", "A"),
    ]),
    ("Component Values", [
        ("inductance",                   "Inductance (L)",           "H"),
        ("capacitance",                  "Capacitance (C)",          "F"),
        ("switching_frequency",          "Switching Frequency (Fs)", "Hz"),
        ("equivalent_series_resistance", "ESR (Req)",                "Ω"),
    ]),
    ("Ripple Analysis", [
        ("inductor_current_ripple", "Inductor Current Ripple (ΔIL)", "A"),
        ("output_voltage_ripple",   "Output Voltage Ripple (ΔVout)", "V"),
        ("voltage_ripple_ratio",    "Voltage Ripple Ratio (ΔV/V)",   "%"),
        ("current_ripple_ratio",    "Current Ripple Ratio (ΔI/I)",   "%"),
    ]),
    ("Power & Performance", [
        ("output_power",        "Output Power (Pout)", "W"),
        ("input_power",         "Input Power (Pin)",   "W"),
        ("peak_switch_current", "Peak Switch Current", "A"),
    ]),
]
