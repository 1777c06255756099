"""Result models — calculator output contracts."""

from fincalc.models.results import (
    DepositGrowth,
    DownPaymentAnalysis,
    EligibilityResult,
    InvestmentMonthEntry,
    InvestmentResult,
    LoanSchedule,
    MonthEntry,
    PeriodEntry,
    SimpleVsCompoundComparison,
)

__all__ = [
    "DepositGrowth",
    "DownPaymentAnalysis",
    "EligibilityResult",
    "InvestmentMonthEntry",
    "InvestmentResult",
    "LoanSchedule",
    "MonthEntry",
    "PeriodEntry",
    "SimpleVsCompoundComparison",
]
