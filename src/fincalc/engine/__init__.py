"""Engine — pure, stateless calculators over the input models."""

from fincalc.engine.annuity import (
    annuity_due_future_value,
    annuity_payment,
    annuity_present_value,
    compound_growth,
    monthly_rate,
)
from fincalc.engine.loan import compute_loan_schedule
from fincalc.engine.deposit import annual_percentage_yield, compute_deposit_growth
from fincalc.engine.investment import (
    compute_investment_growth,
    compute_lump_sum_growth,
    compute_recurring_growth,
)
from fincalc.engine.eligibility import compute_down_payment_analysis, compute_eligibility

__all__ = [
    "monthly_rate",
    "compound_growth",
    "annuity_payment",
    "annuity_present_value",
    "annuity_due_future_value",
    "compute_loan_schedule",
    "annual_percentage_yield",
    "compute_deposit_growth",
    "compute_investment_growth",
    "compute_recurring_growth",
    "compute_lump_sum_growth",
    "compute_eligibility",
    "compute_down_payment_analysis",
]
