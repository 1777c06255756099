"""Result types — the contract between the engine and its callers.

Every compute function builds a fresh result; nothing is cached or
shared by reference.  Values are raw floats (no currency rounding) and
schedules are full length; trimming and formatting belong to the caller.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


# ═══════════════════════════════════════════════════════════════════════════
# Amortizing loan
# ═══════════════════════════════════════════════════════════════════════════

class PeriodEntry(BaseModel):
    """One row of an amortization schedule."""

    index: int
    """1-based period number."""

    payment: float
    interest_portion: float
    """Opening balance × monthly rate."""

    principal_portion: float
    """payment − interest_portion (plus any settled residue on the last row)."""

    remaining_balance: float
    """Closing balance; exactly 0 on the last row."""


class LoanSchedule(BaseModel):
    """EMI, totals and the period-by-period amortization schedule."""

    principal: float
    monthly_rate: float
    payment: float
    """The fixed EMI."""

    total_paid: float
    """payment × periods_generated."""

    total_interest: float
    """total_paid − principal."""

    periods_generated: int
    """Schedule length; can be shorter than the term if the balance settles early."""

    schedule: list[PeriodEntry] = Field(default_factory=list)


# ═══════════════════════════════════════════════════════════════════════════
# Compounding deposit
# ═══════════════════════════════════════════════════════════════════════════

class MonthEntry(BaseModel):
    """Deposit balance at the end of one month."""

    month: int
    balance: float
    interest_earned: float
    """Interest credited this month (balance × annual rate / 12)."""


class SimpleVsCompoundComparison(BaseModel):
    """What compounding adds over simple interest on the opening principal."""

    simple_interest_total: float
    """principal + principal × rate × years."""

    compound_total: float
    difference: float
    """compound_total − simple_interest_total."""


class DepositGrowth(BaseModel):
    apy: float
    """Effective annual yield from the chosen compounding frequency (0.04594 = 4.594%)."""

    final_balance: float
    total_deposited: float
    """Opening principal + all recurring deposits."""

    total_interest: float
    month_schedule: list[MonthEntry] = Field(default_factory=list)
    comparison: SimpleVsCompoundComparison


# ═══════════════════════════════════════════════════════════════════════════
# Investment growth
# ═══════════════════════════════════════════════════════════════════════════

class InvestmentMonthEntry(BaseModel):
    """SIP value at the end of one month."""

    month: int
    invested: float
    """Cumulative contributions to date."""

    value: float
    gain: float


class InvestmentResult(BaseModel):
    mode: Literal["recurring", "lump_sum"]
    total_contributed: float
    """SIP: contribution × months.  Lump sum: the initial amount."""

    final_value: float
    total_gain: float
    absolute_return_percent: float | None = None
    """(final − base) / base × 100; None when nothing was invested."""

    cagr: float | None = None
    """Compound annual growth rate as a fraction; None when undefined (base = 0)."""

    month_schedule: list[InvestmentMonthEntry] = Field(default_factory=list)
    """Recurring mode only; empty for lump sum."""


# ═══════════════════════════════════════════════════════════════════════════
# Loan eligibility
# ═══════════════════════════════════════════════════════════════════════════

class DownPaymentAnalysis(BaseModel):
    """Minimum vs recommended down payment on a property-secured loan."""

    minimum_down_payment: float
    recommended_down_payment: float
    loan_with_minimum_down: float
    resulting_loan_amount: float
    """Loan left after the recommended down payment."""

    emi_with_minimum_down: float
    emi_with_recommended_down: float
    lifetime_emi_savings: float
    """(emi_with_minimum_down − emi_with_recommended_down) × term months."""


class EligibilityResult(BaseModel):
    max_emi_capacity: float
    """income × 40% − existing debt (may be negative)."""

    max_sustainable_emi: float
    """max(0, capacity × 80%)."""

    credit_multiplier: float
    max_approved_loan_amount: float
    """Annuity present value of the sustainable EMI, times the credit multiplier."""

    recommended_loan_amount: float
    debt_to_income_ratio_percent: float
    residual_affordability_percent: float
    down_payment: DownPaymentAnalysis | None = None
    """Present only for property-secured loans."""

    guideline_breaches: list[str] = Field(default_factory=list)
