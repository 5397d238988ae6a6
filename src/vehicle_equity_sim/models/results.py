"""Result types — the contract between engine and any presentation layer.

Every recomputation produces fresh instances; nothing here is ever edited
in place after the engine returns it.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from vehicle_equity_sim.config.parameters import Parameters


# ═══════════════════════════════════════════════════════════════════════════
# Per-period record
# ═══════════════════════════════════════════════════════════════════════════

class PeriodRecord(BaseModel):
    """One month of the schedule.

    ``asset_value``, ``loan_balance`` and ``equity`` are rounded to whole
    currency units for t > 0.  The t = 0 record is the raw initial snapshot.
    """

    model_config = ConfigDict(frozen=True)

    period: int
    asset_value: float
    """Aggregate value of all units after depreciation through this period."""

    loan_balance: float
    """Remaining principal, never negative."""

    equity: float
    """asset_value − loan_balance for t > 0; fixed at 0 for t = 0."""

    period_payment: float
    """The fixed total payment, full precision, identical on every record."""


# ═══════════════════════════════════════════════════════════════════════════
# Summary
# ═══════════════════════════════════════════════════════════════════════════

class Summary(BaseModel):
    """Fleet totals, per-unit payment, and milestone values from the schedule."""

    model_config = ConfigDict(frozen=True)

    unit_count: int

    total_asset_value: float
    """Fleet value at t = 0."""

    total_loan_amount: float
    """Amount financed at t = 0 (the whole fleet value)."""

    total_period_payment: float
    payment_per_unit: float
    """total_period_payment / unit_count."""

    periodic_rate: float
    """Monthly interest rate as a fraction (annual % / 100 / 12)."""

    # --- Milestones ---
    asset_value_after_one_year: float
    """schedule[12].asset_value, or 0 if absent."""

    loan_balance_at_term: float
    """schedule[term].loan_balance, or 0 if absent."""

    equity_at_term: float
    """schedule[term].equity, or 0 if absent."""

    @property
    def asset_value_after_one_year_per_unit(self) -> float:
        return self.asset_value_after_one_year / self.unit_count

    @property
    def loan_balance_at_term_per_unit(self) -> float:
        return self.loan_balance_at_term / self.unit_count

    @property
    def equity_at_term_per_unit(self) -> float:
        return self.equity_at_term / self.unit_count


# ═══════════════════════════════════════════════════════════════════════════
# Full result
# ═══════════════════════════════════════════════════════════════════════════

class ScheduleResult(BaseModel):
    """Everything one computation produces: the inputs, the schedule and its summary."""

    model_config = ConfigDict(frozen=True)

    parameters: Parameters
    schedule: list[PeriodRecord]
    summary: Summary
