"""Depreciation strategies — one handler per model.

Each handler advances the aggregate fleet value by one elapsed period:

  monthly:    value ← value × (1 − rate/100)
  annual:     value ← base × (1 − rate/100)^(period / 12)
  heavy_use:  value ← value × (1 − rate × m(period) / 100)

            m(period) = 2.0   periods 1–6
                        1.5   periods 7–12
                        1.2   periods 13–24
                        1.0   after 24

The annual model does not compound on the running value: every period it
discards the previous value and recalculates from the untouched base.  The
other two compound.  This asymmetry is intentional and must stay.

``select_depreciation`` resolves the handler once per computation; the
schedule loop then calls it directly, with no per-period dispatch on the
model tag.
"""

from __future__ import annotations

from typing import Callable

from vehicle_equity_sim.config.parameters import DepreciationModel
from vehicle_equity_sim.config.presets import HEAVY_USE_MULTIPLIERS

DepreciationStep = Callable[[float, int], float]
"""(current_value, period) → next value."""


def depreciate_monthly(value: float, rate_pct: float) -> float:
    """Compound one month at ``rate_pct`` on the running value."""
    return value * (1 - rate_pct / 100)


def depreciate_annual(base_value: float, rate_pct: float, period: int) -> float:
    """Value after ``period`` months at an annual rate, from the base value."""
    return base_value * (1 - rate_pct / 100) ** (period / 12)


def heavy_use_multiplier(period: int) -> float:
    """Rate multiplier for the band containing ``period`` (1-indexed)."""
    for first, last, multiplier in HEAVY_USE_MULTIPLIERS:
        if period >= first and (last is None or period <= last):
            return multiplier
    return 1.0


def depreciate_heavy_use(value: float, rate_pct: float, period: int) -> float:
    """Compound one month at the banded effective rate on the running value."""
    effective = rate_pct * heavy_use_multiplier(period)
    return value * (1 - effective / 100)


def select_depreciation(
    model: DepreciationModel,
    rate_pct: float,
    base_value: float,
) -> DepreciationStep:
    """Bind a model's handler to its parameters.

    Parameters
    ----------
    model : DepreciationModel
        Which strategy to use.
    rate_pct : float
        Depreciation rate in percent (per month or per year, by model).
    base_value : float
        Untouched starting value; only the annual model reads it.

    Returns
    -------
    DepreciationStep
        ``step(current_value, period) -> next_value``.
    """
    model = DepreciationModel(model)
    if model is DepreciationModel.MONTHLY:
        return lambda value, period: depreciate_monthly(value, rate_pct)
    if model is DepreciationModel.ANNUAL:
        return lambda value, period: depreciate_annual(base_value, rate_pct, period)
    if model is DepreciationModel.HEAVY_USE:
        return lambda value, period: depreciate_heavy_use(value, rate_pct, period)
    raise ValueError(f"Unknown depreciation model: {model!r}")
