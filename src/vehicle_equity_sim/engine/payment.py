"""Fixed-payment amortization.

  r       = annual_rate_pct / 100 / 12
  payment = P / n                               if r == 0
  payment = P × r / (1 − (1+r)^−n)              otherwise

The discounted form underflows towards P × r for very long terms
instead of overflowing.
"""

from __future__ import annotations

import logging

from vehicle_equity_sim.exceptions import InvalidParameter

logger = logging.getLogger(__name__)


def periodic_rate(annual_rate_pct: float) -> float:
    """Monthly rate as a fraction."""
    return annual_rate_pct / 100 / 12


def compute_payment(principal: float, annual_rate_pct: float, term_months: int) -> float:
    """Fixed monthly payment that fully retires ``principal`` over ``term_months``.

    Parameters
    ----------
    principal : float
        Amount financed.
    annual_rate_pct : float
        Nominal annual interest rate in percent (6.8 = 6.8%).
    term_months : int
        Number of monthly payments. Must be positive.

    Returns
    -------
    float
        Full-precision payment. Not rounded; callers reuse it unchanged
        for every period.
    """
    if term_months <= 0:
        raise InvalidParameter("term_months", term_months, "must be a positive number of periods")
    if annual_rate_pct < 0:
        raise InvalidParameter("annual_interest_rate_pct", annual_rate_pct, "must not be negative")

    r = periodic_rate(annual_rate_pct)
    if r == 0:
        payment = principal / term_months
    else:
        discount = 1 - (1 + r) ** -term_months
        if discount == 0:
            # r too small to register against 1.0
            payment = principal / term_months
        else:
            payment = principal * r / discount

    logger.debug(
        "Payment for principal=%s rate=%s%% term=%s: %s",
        principal, annual_rate_pct, term_months, payment,
    )
    return payment
