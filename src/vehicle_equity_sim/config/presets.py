"""Presentation bounds and per-model defaults.

The engine validates only its own domain (see ``engine.orchestrator``).
The ranges here are what an input form offers the user; they are published
so that a front end does not have to hard-code them, and so that a caller
can flag inputs that drift outside them.

Depreciation-rate bounds depend on the selected model:

  monthly / heavy_use:  0.5 – 2.0 % per month, step 0.1
  annual:               5   – 25  % per year,  step 1
"""

from __future__ import annotations

from dataclasses import dataclass

from vehicle_equity_sim.config.parameters import DepreciationModel, Parameters


@dataclass(frozen=True)
class InputRange:
    """Slider-style bounds for one numeric input."""

    minimum: float
    maximum: float
    step: float

    def contains(self, value: float) -> bool:
        return self.minimum <= value <= self.maximum


@dataclass(frozen=True)
class HeavyUseBand:
    """One time band of the heavy-use depreciation schedule."""

    first_period: int
    last_period: int | None
    """Inclusive; None means open-ended."""

    multiplier: float
    effective_rate_pct: float


UNIT_COUNT_RANGE = InputRange(minimum=1, maximum=200, step=1)
UNIT_VALUE_RANGE = InputRange(minimum=45_000, maximum=100_000, step=1_000)
TERM_MONTHS_RANGE = InputRange(minimum=36, maximum=60, step=1)
INTEREST_RATE_RANGE = InputRange(minimum=5.0, maximum=8.0, step=0.1)

DEPRECIATION_RATE_RANGES: dict[DepreciationModel, InputRange] = {
    DepreciationModel.MONTHLY: InputRange(minimum=0.5, maximum=2.0, step=0.1),
    DepreciationModel.ANNUAL: InputRange(minimum=5.0, maximum=25.0, step=1.0),
    DepreciationModel.HEAVY_USE: InputRange(minimum=0.5, maximum=2.0, step=0.1),
}

DEFAULT_DEPRECIATION_RATES: dict[DepreciationModel, float] = {
    DepreciationModel.MONTHLY: 1.0,
    DepreciationModel.ANNUAL: 15.0,
    DepreciationModel.HEAVY_USE: 1.0,
}

# (first_period, last_period, multiplier); last band is open-ended
HEAVY_USE_MULTIPLIERS: list[tuple[int, int | None, float]] = [
    (1, 6, 2.0),
    (7, 12, 1.5),
    (13, 24, 1.2),
    (25, None, 1.0),
]


def input_ranges(model: DepreciationModel) -> dict[str, InputRange]:
    """All presentation bounds for a given depreciation model, keyed by field name."""
    return {
        "unit_count": UNIT_COUNT_RANGE,
        "unit_value": UNIT_VALUE_RANGE,
        "annual_interest_rate_pct": INTEREST_RATE_RANGE,
        "term_months": TERM_MONTHS_RANGE,
        "depreciation_rate_pct": DEPRECIATION_RATE_RANGES[model],
    }


def switch_model(params: Parameters, model: DepreciationModel) -> Parameters:
    """Select a different depreciation model, resetting the rate to that model's default.

    A per-year rate is meaningless as a per-month rate (and vice versa), so
    the rate is never carried across a model change.
    """
    return params.model_copy(update={
        "depreciation_model": model,
        "depreciation_rate_pct": DEFAULT_DEPRECIATION_RATES[model],
    })


def out_of_range_fields(params: Parameters) -> list[str]:
    """Names of inputs outside the presentation bounds. Never raises."""
    ranges = input_ranges(params.depreciation_model)
    return [
        name for name, bounds in ranges.items()
        if not bounds.contains(getattr(params, name))
    ]


def heavy_use_bands(rate_pct: float) -> list[HeavyUseBand]:
    """Effective monthly rate in each heavy-use band for a base ``rate_pct``."""
    return [
        HeavyUseBand(
            first_period=first,
            last_period=last,
            multiplier=multiplier,
            effective_rate_pct=rate_pct * multiplier,
        )
        for first, last, multiplier in HEAVY_USE_MULTIPLIERS
    ]
