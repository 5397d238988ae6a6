"""Month-by-month schedule generator.

State carried between periods (both full precision):
  current_value       aggregate fleet value
  remaining_balance   outstanding principal

Each period t = 1 … term + 12, in this order:
  1. depreciate current_value
  2. if t ≤ term and balance > 0:
       interest  = balance × r
       principal = payment − interest
       balance   = max(0, balance − principal)
  3. equity = value − balance
  4. emit a record rounded to whole currency units

The 12 trailing periods keep depreciating after the loan is retired;
no payment logic applies there.  Rounding happens only on the emitted
record, never on the carried state.
"""

from __future__ import annotations

import logging
import math

from vehicle_equity_sim.config.parameters import DepreciationModel, Parameters
from vehicle_equity_sim.engine.depreciation import select_depreciation
from vehicle_equity_sim.models.results import PeriodRecord

logger = logging.getLogger(__name__)

TRAILING_PERIODS = 12
"""Periods simulated past the end of the loan term."""


def round_currency(amount: float) -> float:
    """Round to the nearest whole currency unit, halves rounding up."""
    return float(math.floor(amount + 0.5))


def generate_schedule(params: Parameters, payment: float) -> list[PeriodRecord]:
    """Run the state machine for ``params`` with a precomputed fixed ``payment``.

    Assumes ``params`` has already been validated.  Returns
    ``term_months + 13`` records indexed by period.
    """
    base_value = params.total_principal
    r = params.periodic_rate
    term = params.term_months
    step = select_depreciation(
        params.depreciation_model, params.depreciation_rate_pct, base_value,
    )

    current_value = base_value
    remaining_balance = base_value

    records: list[PeriodRecord] = [
        PeriodRecord(
            period=0,
            asset_value=current_value,
            loan_balance=remaining_balance,
            equity=0.0,
            period_payment=payment,
        )
    ]

    for t in range(1, term + TRAILING_PERIODS + 1):
        current_value = step(current_value, t)

        if t <= term and remaining_balance > 0:
            interest = remaining_balance * r
            principal = payment - interest
            remaining_balance = max(0.0, remaining_balance - principal)

        # Equity from the rounded fields keeps equity == value − balance exact
        asset_value = round_currency(current_value)
        loan_balance = round_currency(remaining_balance)
        records.append(PeriodRecord(
            period=t,
            asset_value=asset_value,
            loan_balance=loan_balance,
            equity=asset_value - loan_balance,
            period_payment=payment,
        ))

    logger.debug(
        "Generated %d periods (term=%d, model=%s)",
        len(records), term, DepreciationModel(params.depreciation_model).value,
    )
    return records
