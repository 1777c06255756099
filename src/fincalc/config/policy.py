"""Shared policy constants — lending haircuts, credit tiers, down-payment rules.

Both the amortizing-loan calculator and the eligibility estimator read
from this module, so the forward EMI formula and its inverse always agree
on the same numbers.
"""

from typing import Literal

# --- Affordability ----------------------------------------------------------
EMI_INCOME_CAP = 0.40
"""Share of monthly income that may go to all EMIs combined."""

EMI_SAFETY_HAIRCUT = 0.80
"""Sustainable EMI = raw capacity × this (a 20% buffer)."""

RECOMMENDED_LOAN_HAIRCUT = 0.80
"""Recommended loan = credit-adjusted max loan × this."""

# --- Credit tiers -----------------------------------------------------------
# (lower bound inclusive, multiplier), highest tier first.
CREDIT_TIERS: tuple[tuple[int, float], ...] = (
    (750, 1.0),
    (700, 0.9),
    (650, 0.8),
)
CREDIT_FLOOR_MULTIPLIER = 0.7

MIN_CREDIT_SCORE = 300
MAX_CREDIT_SCORE = 900

# --- Down payment (property-secured loans) ---------------------------------
MIN_DOWN_PAYMENT_PCT = 0.10
RECOMMENDED_DOWN_PAYMENT_PCT = 0.20

LoanType = Literal["home", "personal", "car"]
PROPERTY_SECURED_LOAN_TYPES: frozenset[str] = frozenset({"home"})

# --- Rates & compounding ----------------------------------------------------
MAX_ANNUAL_RATE_PERCENT = 100.0
"""Upper bound for any annual rate / expected return (guards absurd inputs)."""

CompoundingPeriods = Literal[365, 12, 4, 1]
COMPOUNDING_FREQUENCIES: dict[str, int] = {
    "daily": 365,
    "monthly": 12,
    "quarterly": 4,
    "annually": 1,
}

# --- Schedules --------------------------------------------------------------
BALANCE_SETTLEMENT_TOLERANCE = 0.005
"""A loan balance below half a cent rounds (half-up) to zero and is settled."""

MAX_TERM_YEARS = 100
MAX_TERM_MONTHS = MAX_TERM_YEARS * 12
"""Longest accepted horizon; keeps (1+r)^n finite at the maximum rate."""

TenureUnit = Literal["years", "months"]


def credit_multiplier(credit_score: float) -> float:
    """Step-function multiplier for the credit-adjusted max loan.

    >= 750 → 1.0, >= 700 → 0.9, >= 650 → 0.8, otherwise 0.7.
    """
    for lower_bound, multiplier in CREDIT_TIERS:
        if credit_score >= lower_bound:
            return multiplier
    return CREDIT_FLOOR_MULTIPLIER


def is_property_secured(loan_type: str) -> bool:
    return loan_type in PROPERTY_SECURED_LOAN_TYPES
