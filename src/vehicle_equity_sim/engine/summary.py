"""Summary extraction — fleet totals and milestone values from a schedule."""

from __future__ import annotations

from vehicle_equity_sim.config.parameters import Parameters
from vehicle_equity_sim.models.results import PeriodRecord, Summary

ONE_YEAR = 12


def _field_at(schedule: list[PeriodRecord], period: int, name: str) -> float:
    """``schedule[period].<name>``, or 0 when that period is absent."""
    if 0 <= period < len(schedule):
        return getattr(schedule[period], name)
    return 0.0


def extract_summary(
    params: Parameters,
    schedule: list[PeriodRecord],
    payment: float,
) -> Summary:
    """Derive totals, per-unit payment and milestones.

    Milestones read the value after one year and the balance/equity at
    the end of the loan term.  A missing period reports 0 instead of
    raising.
    """
    total = params.total_principal
    term = params.term_months
    return Summary(
        unit_count=params.unit_count,
        total_asset_value=total,
        total_loan_amount=total,
        total_period_payment=payment,
        payment_per_unit=payment / params.unit_count,
        periodic_rate=params.periodic_rate,
        asset_value_after_one_year=_field_at(schedule, ONE_YEAR, "asset_value"),
        loan_balance_at_term=_field_at(schedule, term, "loan_balance"),
        equity_at_term=_field_at(schedule, term, "equity"),
    )
