"""Calculator input models."""

from fincalc.config.loan import LoanInput
from fincalc.config.deposit import DepositInput, compounding_periods
from fincalc.config.investment import (
    InvestmentInput,
    LumpSumInvestmentInput,
    RecurringInvestmentInput,
)
from fincalc.config.eligibility import EligibilityInput
from fincalc.config.tenure import term_in_months

__all__ = [
    "LoanInput",
    "DepositInput",
    "compounding_periods",
    "InvestmentInput",
    "RecurringInvestmentInput",
    "LumpSumInvestmentInput",
    "EligibilityInput",
    "term_in_months",
]
