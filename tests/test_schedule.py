"""Tests for engine/schedule.py — the month-by-month state machine.

Covers:
  - Schedule length and period indexing
  - Initial snapshot (raw values, equity fixed at 0)
  - Equity identity on every later record
  - Loan balance non-increasing and retired by the end of the term
  - Depreciation continues through the 12 trailing periods
  - Rounding only on emitted records (state stays full precision)
"""

from __future__ import annotations

import pytest

from vehicle_equity_sim.config import DepreciationModel, Parameters
from vehicle_equity_sim.engine.payment import compute_payment
from vehicle_equity_sim.engine.schedule import (
    TRAILING_PERIODS,
    generate_schedule,
    round_currency,
)


def _schedule(params: Parameters):
    payment = compute_payment(
        params.total_principal, params.annual_interest_rate_pct, params.term_months,
    )
    return generate_schedule(params, payment)


# ═══════════════════════════════════════════════════════════════════════════
# Shape
# ═══════════════════════════════════════════════════════════════════════════

class TestShape:
    @pytest.mark.parametrize("term", [1, 12, 36, 60])
    def test_length(self, single_vehicle: Parameters, term: int):
        params = single_vehicle.model_copy(update={"term_months": term})
        assert len(_schedule(params)) == term + 13

    def test_periods_indexed_in_order(self, single_vehicle: Parameters):
        schedule = _schedule(single_vehicle)
        assert [r.period for r in schedule] == list(range(single_vehicle.term_months + 13))

    def test_payment_constant(self, single_vehicle: Parameters):
        schedule = _schedule(single_vehicle)
        payments = {r.period_payment for r in schedule}
        assert len(payments) == 1

    def test_trailing_constant(self):
        assert TRAILING_PERIODS == 12


# ═══════════════════════════════════════════════════════════════════════════
# Invariants
# ═══════════════════════════════════════════════════════════════════════════

class TestInvariants:
    def test_initial_snapshot(self, any_model_params: Parameters):
        first = _schedule(any_model_params)[0]
        assert first.asset_value == any_model_params.total_principal
        assert first.loan_balance == any_model_params.total_principal
        assert first.equity == 0

    def test_initial_snapshot_not_rounded(self, single_vehicle: Parameters):
        params = single_vehicle.model_copy(update={"unit_value": 65_000.4, "unit_count": 3})
        first = _schedule(params)[0]
        assert first.asset_value == 3 * 65_000.4

    def test_equity_identity(self, any_model_params: Parameters):
        for record in _schedule(any_model_params)[1:]:
            assert record.equity == record.asset_value - record.loan_balance

    def test_balance_non_increasing(self, any_model_params: Parameters):
        schedule = _schedule(any_model_params)
        term = any_model_params.term_months
        for prev, cur in zip(schedule[:term], schedule[1:term + 1]):
            assert cur.loan_balance <= prev.loan_balance

    def test_balance_retired_at_term(self, any_model_params: Parameters):
        schedule = _schedule(any_model_params)
        term = any_model_params.term_months
        assert schedule[term].loan_balance == pytest.approx(0, abs=0.01)
        for record in schedule[term:]:
            assert record.loan_balance == 0

    def test_balance_never_negative(self, single_vehicle: Parameters):
        params = single_vehicle.model_copy(update={"annual_interest_rate_pct": 0.0, "term_months": 7})
        for record in _schedule(params):
            assert record.loan_balance >= 0


# ═══════════════════════════════════════════════════════════════════════════
# Depreciation through the schedule
# ═══════════════════════════════════════════════════════════════════════════

class TestDepreciationInSchedule:
    def test_monthly_value_after_one_year(self, single_vehicle: Parameters):
        schedule = _schedule(single_vehicle)
        assert schedule[12].asset_value == round_currency(65_000 * 0.99 ** 12)

    def test_monthly_non_increasing(self, single_vehicle: Parameters):
        schedule = _schedule(single_vehicle)
        for prev, cur in zip(schedule, schedule[1:]):
            assert cur.asset_value <= prev.asset_value

    def test_heavy_use_non_increasing(self, heavy_use_params: Parameters):
        schedule = _schedule(heavy_use_params)
        for prev, cur in zip(schedule, schedule[1:]):
            assert cur.asset_value <= prev.asset_value

    def test_heavy_use_first_month(self, heavy_use_params: Parameters):
        assert _schedule(heavy_use_params)[1].asset_value == 63_700

    def test_heavy_use_bands_compound(self, heavy_use_params: Parameters):
        expected = 65_000 * 0.98 ** 6 * 0.985 ** 6 * 0.988 ** 12
        assert _schedule(heavy_use_params)[24].asset_value == round_currency(expected)

    def test_annual_closed_form_every_period(self, annual_params: Parameters):
        schedule = _schedule(annual_params)
        for record in schedule[1:]:
            expected = 65_000 * (1 - 15.0 / 100) ** (record.period / 12)
            assert record.asset_value == round_currency(expected)

    def test_annual_one_year(self, annual_params: Parameters):
        assert _schedule(annual_params)[12].asset_value == 55_250

    def test_depreciation_continues_after_term(self, single_vehicle: Parameters):
        schedule = _schedule(single_vehicle)
        term = single_vehicle.term_months
        assert schedule[-1].asset_value < schedule[term].asset_value
        assert schedule[-1].equity == schedule[-1].asset_value

    def test_zero_rate_holds_value(self, single_vehicle: Parameters):
        params = single_vehicle.model_copy(update={"depreciation_rate_pct": 0.0})
        for record in _schedule(params):
            assert record.asset_value == 65_000


# ═══════════════════════════════════════════════════════════════════════════
# Rounding discipline
# ═══════════════════════════════════════════════════════════════════════════

class TestRounding:
    @pytest.mark.parametrize(
        "amount, expected",
        [(0.4, 0.0), (0.5, 1.0), (1.5, 2.0), (2.5, 3.0), (-0.4, 0.0), (-2.5, -2.0), (1234.49, 1234.0)],
    )
    def test_round_half_up(self, amount, expected):
        assert round_currency(amount) == expected

    def test_records_are_whole_units(self, heavy_use_params: Parameters):
        for record in _schedule(heavy_use_params)[1:]:
            assert record.asset_value == int(record.asset_value)
            assert record.loan_balance == int(record.loan_balance)

    def test_state_not_rounded_between_periods(self):
        """A value that loses < 0.5 per period still declines over many periods.

        If the carried value were rounded each period, 1% of 40 = 0.4 would
        round away and the value would never move.
        """
        params = Parameters(
            unit_count=1, unit_value=40, annual_interest_rate_pct=0,
            term_months=60, depreciation_model=DepreciationModel.MONTHLY,
            depreciation_rate_pct=1.0,
        )
        schedule = _schedule(params)
        assert schedule[60].asset_value == round_currency(40 * 0.99 ** 60)
        assert schedule[60].asset_value < 40
