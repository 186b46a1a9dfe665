"""
buck/waveforms.py
=================
Buck Converter Calculator — Steady-State Ripple Waveforms

Reconstructs the periodic inductor current and output voltage over a few
switching periods from a complete parameter set, for plotting.

Inductor current (continuous conduction, steady state):
    rises linearly by ΔIL for D · T, falls by ΔIL for (1 − D) · T,
    centred on Iout.

Output voltage:
    Vout + capacitor ripple + ESR · (iL − Iout)
    Capacitor ripple integrates dv/dt = (iL − Iout) / C with forward Euler
    over the sample grid, then is re-centred so it swings ±ΔVout_C / 2.

Scope:
    - Steady state only; no start-up or load-step transients.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from buck.parameters import ParameterSet


@dataclass
class RippleWaveforms:
    """Sampled steady-state waveforms.

    Attributes:
        time_s:             Sample times [s], starting at 0.
        inductor_current_a: Inductor current iL(t) [A].
        output_voltage_v:   Output voltage vout(t) [V].  Empty when the
                            capacitance or output voltage is unknown.
        period_s:           Switching period T = 1 / Fs [s].
        duty_cycle:         D used for the reconstruction.
    """
    time_s:             list[float] = field(default_factory=list)
    inductor_current_a: list[float] = field(default_factory=list)
    output_voltage_v:   list[float] = field(default_factory=list)
    period_s:           float = 0.0
    duty_cycle:         float = 0.0


def _inductor_current(fraction: float, d: float, i_min: float, delta_il: float) -> float:
    """iL at ``fraction`` (0–1) of the switching period."""
    if fraction <= d:
        return i_min + delta_il * fraction / d
    return i_min + delta_il - delta_il * (fraction - d) / (1.0 - d)


def compute_ripple_waveforms(
    params: ParameterSet,
    periods: int = 2,
    points_per_period: int = 200,
    esr_ohm: float | None = None,
) -> RippleWaveforms | None:
    """Sample iL(t) and vout(t) over ``periods`` switching periods.

    Args:
        params:            Complete parameter set (supplied values merged with
                           inferred ones).  Needs D, Fs, ΔIL and Iout; the
                           voltage trace additionally needs C and Vout.
        periods:           Number of switching periods to sample.
        points_per_period: Samples per period.
        esr_ohm:           Capacitor ESR [Ω]; omitted → ideal capacitor.

    Returns:
        :class:`RippleWaveforms`, or ``None`` when the current waveform
        cannot be drawn (missing quantities, D outside (0, 1), Fs ≤ 0).

    Raises:
        ValueError: If ``periods`` or ``points_per_period`` is not positive.
    """
    if periods <= 0:
        raise ValueError(f"periods must be positive; received periods={periods!r}")
    if points_per_period <= 0:
        raise ValueError(
            f"points_per_period must be positive; received points_per_period={points_per_period!r}"
        )

    d = params.duty_cycle
    fs = params.switching_frequency
    delta_il = params.inductor_current_ripple
    iout = params.output_current
    if d is None or fs is None or delta_il is None or iout is None:
        return None
    if not (0.0 < d < 1.0) or fs <= 0.0:
        return None

    period_s = 1.0 / fs
    dt = period_s / points_per_period
    i_min = iout - delta_il / 2.0
    n_samples = periods * points_per_period + 1

    result = RippleWaveforms(period_s=period_s, duty_cycle=d)
    for k in range(n_samples):
        fraction = (k % points_per_period) / points_per_period
        result.time_s.append(k * dt)
        result.inductor_current_a.append(_inductor_current(fraction, d, i_min, delta_il))

    c = params.capacitance
    vout = params.output_voltage
    if c is None or vout is None or c <= 0.0:
        return result

    # Forward Euler: v[n+1] = v[n] + (iL[n] − Iout) / C · dt
    capacitor_v: list[float] = [0.0]
    for current in result.inductor_current_a[:-1]:
        capacitor_v.append(capacitor_v[-1] + (current - iout) / c * dt)
    centre = (max(capacitor_v) + min(capacitor_v)) / 2.0

    esr = esr_ohm or 0.0
    result.output_voltage_v = [
        vout + (v_c - centre) + esr * (current - iout)
        for v_c, current in zip(capacitor_v, result.inductor_current_a)
    ]
    return result


def peak_to_peak(samples: list[float]) -> float:
    """Peak-to-peak amplitude of a sampled waveform."""
    if not samples:
        return 0.0
    return max(samples) - min(samples)
