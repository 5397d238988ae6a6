"""Sensitivity / tornado analysis on equity at the end of the loan term.

Vary one input at a time, rerun the engine, measure the swing in
term-end equity.  Produces tornado chart data sorted by impact.

Default sweep set:
  - annual_interest_rate_pct ± 15%
  - depreciation_rate_pct    ± 20%
  - unit_value               ± 10%
  - term_months              ± 20%

``sweep_parameter`` evaluates a single input over an evenly spaced grid,
for line charts of equity against that input.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from vehicle_equity_sim.config.parameters import Parameters
from vehicle_equity_sim.engine.orchestrator import compute_schedule


@dataclass(frozen=True)
class TornadoBar:
    """One bar in the tornado chart."""

    param_name: str
    """Human-readable parameter name."""

    param_path: str
    """Field name on Parameters (e.g. 'unit_value')."""

    base_value: float
    low_value: float
    high_value: float

    equity_at_low: float
    """Term-end equity when param = low_value."""

    equity_at_high: float
    """Term-end equity when param = high_value."""

    delta_equity: float
    """abs(equity_at_high − equity_at_low), the total swing width."""


@dataclass
class SensitivityResult:
    """Complete sensitivity analysis output."""

    base_equity: float
    """Term-end equity of the base parameters."""

    bars: list[TornadoBar] = field(default_factory=list)
    """Tornado bars sorted by delta_equity (descending)."""


@dataclass(frozen=True)
class SweepPoint:
    """Engine outputs at one grid value of a swept input."""

    value: float
    payment: float
    asset_value_after_one_year: float
    equity_at_term: float


DEFAULT_SWEEPS: list[tuple[str, str, float, float]] = [
    ("Interest rate", "annual_interest_rate_pct", -0.15, 0.15),
    ("Depreciation rate", "depreciation_rate_pct", -0.20, 0.20),
    ("Vehicle value", "unit_value", -0.10, 0.10),
    ("Loan term", "term_months", -0.20, 0.20),
]


def _with_value(params: Parameters, path: str, value: float) -> Parameters:
    """Copy ``params`` with one field replaced.

    Integer fields get the value rounded first so that fractional sweeps
    of ``term_months`` or ``unit_count`` stay whole.
    """
    field_info = Parameters.model_fields[path]
    if field_info.annotation is int:
        value = round(value)
    return params.model_copy(update={path: value})


def _equity_at_term(params: Parameters) -> float:
    return compute_schedule(params).summary.equity_at_term


def run_sensitivity(
    params: Parameters,
    sweeps: list[tuple[str, str, float, float]] | None = None,
) -> SensitivityResult:
    """Run a one-at-a-time sensitivity analysis.

    Parameters
    ----------
    params : Parameters
        Base parameters.
    sweeps : list[tuple[name, path, low_pct, high_pct]] | None
        Parameter sweeps. None = use DEFAULT_SWEEPS. Paths that are not
        fields of Parameters are skipped.

    Returns
    -------
    SensitivityResult
        Tornado bars sorted by term-end equity impact.
    """
    if sweeps is None:
        sweeps = DEFAULT_SWEEPS

    base_equity = _equity_at_term(params)
    bars: list[TornadoBar] = []

    for name, path, low_pct, high_pct in sweeps:
        if path not in Parameters.model_fields:
            continue
        base_val = float(getattr(params, path))

        low_params = _with_value(params, path, base_val * (1 + low_pct))
        high_params = _with_value(params, path, base_val * (1 + high_pct))
        low_val = float(getattr(low_params, path))
        high_val = float(getattr(high_params, path))

        equity_low = _equity_at_term(low_params)
        equity_high = _equity_at_term(high_params)

        bars.append(TornadoBar(
            param_name=name,
            param_path=path,
            base_value=round(base_val, 4),
            low_value=round(low_val, 4),
            high_value=round(high_val, 4),
            equity_at_low=round(equity_low, 2),
            equity_at_high=round(equity_high, 2),
            delta_equity=round(abs(equity_high - equity_low), 2),
        ))

    bars.sort(key=lambda b: b.delta_equity, reverse=True)

    return SensitivityResult(base_equity=round(base_equity, 2), bars=bars)


def sweep_parameter(
    params: Parameters,
    path: str,
    low: float,
    high: float,
    steps: int = 11,
) -> list[SweepPoint]:
    """Evaluate the engine at ``steps`` evenly spaced values of one input.

    Integer fields are rounded, so neighbouring grid points may coincide.
    """
    if path not in Parameters.model_fields:
        raise KeyError(f"Unknown parameter: {path}")
    if steps < 2:
        raise ValueError("steps must be at least 2")

    points: list[SweepPoint] = []
    for raw in np.linspace(low, high, steps):
        swept = _with_value(params, path, float(raw))
        summary = compute_schedule(swept).summary
        points.append(SweepPoint(
            value=float(getattr(swept, path)),
            payment=summary.total_period_payment,
            asset_value_after_one_year=summary.asset_value_after_one_year,
            equity_at_term=summary.equity_at_term,
        ))
    return points
