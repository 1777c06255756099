"""Annuity primitive — the one formula every calculator specializes.

  payment  = P × r × (1+r)^n / ((1+r)^n − 1)       (EMI)
  P        = payment × ((1+r)^n − 1) / (r × (1+r)^n)   (inverse, max loan)
  FV (due) = c × ((1+r)^n − 1) / r × (1+r)         (SIP, deposits at period start)

``r`` is the periodic (monthly) rate as a fraction; all three collapse to
straight multiplication or division when r = 0.  The growth term
(1+r)^n − 1 is taken as expm1(n · log1p(r)) so it stays non-zero for
rates too small to change ``1 + r`` in floating point.
"""

from __future__ import annotations

import math


def monthly_rate(annual_rate_percent: float) -> float:
    """8.5 (% p.a.) → 0.0070833…"""
    return annual_rate_percent / 100 / 12


def compound_growth(rate: float, periods: float) -> float:
    """(1+r)^n − 1.  Raises ``OverflowError`` when the result is out of range."""
    return math.expm1(periods * math.log1p(rate))


def annuity_payment(principal: float, rate: float, periods: int) -> float:
    """Fixed payment that fully amortizes ``principal`` over ``periods``."""
    growth = compound_growth(rate, periods)
    if growth == 0:
        return principal / periods
    return principal * rate * (1 + growth) / growth


def annuity_present_value(payment: float, rate: float, periods: int) -> float:
    """Loan amount a fixed ``payment`` can service — inverse of ``annuity_payment``."""
    growth = compound_growth(rate, periods)
    if growth == 0:
        return payment * periods
    return payment * growth / (rate * (1 + growth))


def annuity_due_future_value(contribution: float, rate: float, periods: int) -> float:
    """Future value of ``contribution`` paid at the start of each period."""
    growth = compound_growth(rate, periods)
    if growth == 0:
        return contribution * periods
    return contribution * growth / rate * (1 + rate)
