"""Amortizing loan (EMI) schedule.

Key formulas:
  r   = annual_rate_percent / 100 / 12
  EMI = P × r × (1+r)^n / ((1+r)^n − 1)      (P / n when r = 0)
  per period: interest = balance × r, principal = EMI − interest

Rounding: balances stay at full float precision.  Once a closing balance
is under half a cent it rounds (half-up) to zero, so the residue is
folded into that period's principal and the schedule stops.  The final
period is always settled the same way, which makes the principal column
sum to the loan amount and the last balance exactly 0.
"""

from __future__ import annotations

from fincalc.config.loan import LoanInput
from fincalc.config.policy import BALANCE_SETTLEMENT_TOLERANCE
from fincalc.engine.annuity import annuity_payment, monthly_rate
from fincalc.engine.guards import (
    overflow_as_invalid,
    require_finite_results,
    require_positive,
    require_rate,
    require_term_months,
)
from fincalc.models.results import LoanSchedule, PeriodEntry


def compute_loan_schedule(loan: LoanInput) -> LoanSchedule:
    """Compute EMI, totals and the full amortization schedule.

    Parameters
    ----------
    loan : LoanInput
        Principal, annual rate in percent, and term in months.

    Returns
    -------
    LoanSchedule
        EMI, total paid/interest and one ``PeriodEntry`` per period.

    Raises
    ------
    InvalidInput
        principal <= 0, rate < 0 (or absurdly high), a term outside
        1..1200 months, or amounts so large the payment overflows.
    """
    require_positive(loan.principal, "principal")
    require_rate(loan.annual_rate_percent, "annual_rate_percent")
    require_term_months(loan.term_months)

    principal = float(loan.principal)
    n = int(loan.term_months)
    r = monthly_rate(loan.annual_rate_percent)
    with overflow_as_invalid("payment"):
        payment = annuity_payment(principal, r, n)
    require_finite_results(payment=payment, total_paid=payment * n)

    rows: list[PeriodEntry] = []
    balance = principal

    for period in range(1, n + 1):
        interest = balance * r
        principal_part = payment - interest
        closing = max(0.0, balance - principal_part)

        # Zero-rate loans amortize flat over every period; only the last one settles.
        settle = period == n or (r > 0 and closing < BALANCE_SETTLEMENT_TOLERANCE)
        if settle:
            principal_part = balance
            closing = 0.0

        rows.append(PeriodEntry(
            index=period,
            payment=interest + principal_part,
            interest_portion=interest,
            principal_portion=principal_part,
            remaining_balance=closing,
        ))

        balance = closing
        if balance == 0.0:
            break

    if r == 0:
        total_paid = payment * n
        total_interest = 0.0
    else:
        total_paid = payment * len(rows)
        total_interest = total_paid - principal

    return LoanSchedule(
        principal=principal,
        monthly_rate=r,
        payment=payment,
        total_paid=total_paid,
        total_interest=total_interest,
        periods_generated=len(rows),
        schedule=rows,
    )
