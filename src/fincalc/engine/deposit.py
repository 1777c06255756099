"""Compounding deposit growth & APY.

Two compounding conventions live side by side on purpose:
  APY      = (1 + rate/n)^n − 1   with n from the chosen frequency
  balance  advances monthly:  interest = balance × rate/12
                              balance += interest + recurring deposit

So a daily-compounded account shows a daily APY while its balance
trajectory still compounds monthly.  Displayed totals depend on this.
"""

from __future__ import annotations

from fincalc.config.deposit import DepositInput
from fincalc.config.policy import COMPOUNDING_FREQUENCIES
from fincalc.engine.guards import (
    require_finite_results,
    require_non_negative,
    require_rate,
    require_term_months,
)
from fincalc.errors import InvalidInput
from fincalc.models.results import DepositGrowth, MonthEntry, SimpleVsCompoundComparison


def annual_percentage_yield(annual_rate_percent: float, periods_per_year: int) -> float:
    """Effective annual yield as a fraction: 4.5% monthly → 0.045940."""
    rate = annual_rate_percent / 100
    return (1 + rate / periods_per_year) ** periods_per_year - 1


def compute_deposit_growth(deposit: DepositInput) -> DepositGrowth:
    """Compute APY, month-by-month balance and simple-vs-compound comparison.

    Raises ``InvalidInput`` for a negative principal, rate or deposit, a
    term outside 1..1200 months, an unsupported compounding frequency, or
    amounts large enough to overflow the balance.
    """
    require_non_negative(deposit.principal, "principal")
    require_rate(deposit.annual_rate_percent, "annual_rate_percent")
    require_term_months(deposit.term_months)
    require_non_negative(deposit.recurring_monthly_deposit, "recurring_monthly_deposit")
    if deposit.compounding_periods_per_year not in COMPOUNDING_FREQUENCIES.values():
        raise InvalidInput("compounding_periods_per_year", "one of 365, 12, 4, 1")

    rate = deposit.annual_rate_percent / 100
    months = int(deposit.term_months)
    top_up = deposit.recurring_monthly_deposit
    apy = annual_percentage_yield(deposit.annual_rate_percent, deposit.compounding_periods_per_year)

    monthly = rate / 12
    balance = float(deposit.principal)
    schedule: list[MonthEntry] = []

    for month in range(1, months + 1):
        interest = balance * monthly
        balance += interest + top_up
        schedule.append(MonthEntry(month=month, balance=balance, interest_earned=interest))

    total_deposited = deposit.principal + top_up * months
    total_interest = balance - total_deposited

    # Simple interest only accrues on the opening principal.
    simple_total = deposit.principal * rate * (months / 12) + deposit.principal
    require_finite_results(
        final_balance=balance,
        total_deposited=total_deposited,
        simple_interest_total=simple_total,
        difference=balance - simple_total,
    )

    return DepositGrowth(
        apy=apy,
        final_balance=balance,
        total_deposited=total_deposited,
        total_interest=total_interest,
        month_schedule=schedule,
        comparison=SimpleVsCompoundComparison(
            simple_interest_total=simple_total,
            compound_total=balance,
            difference=balance - simple_total,
        ),
    )
