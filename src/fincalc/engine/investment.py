"""Recurring (SIP) and lump-sum investment growth.

SIP — contributions at the start of each month, r = annual return / 12:
  FV         = c × ((1+r)^n − 1) / r × (1+r)
  trajectory = value_m = (value_{m−1} + c) × (1+r)
The trajectory's last value equals FV; both paths are the same sum.

Lump sum — annual compounding over fractional years:
  FV = initial × (1 + annual return)^years

CAGR = (FV / base)^(1 / years) − 1, undefined (None) when base = 0.
"""

from __future__ import annotations

from fincalc.config.investment import LumpSumInvestmentInput, RecurringInvestmentInput
from fincalc.engine.annuity import annuity_due_future_value, monthly_rate
from fincalc.engine.guards import (
    overflow_as_invalid,
    require_finite_results,
    require_non_negative,
    require_rate,
    require_term_months,
    require_term_years,
)
from fincalc.errors import InvalidInput
from fincalc.models.results import InvestmentMonthEntry, InvestmentResult


def _returns(final_value: float, base: float, years: float) -> tuple[float | None, float | None]:
    """(absolute return %, CAGR) — both None when nothing was invested."""
    if base <= 0:
        return None, None
    absolute = (final_value - base) / base * 100
    with overflow_as_invalid("cagr"):
        cagr = (final_value / base) ** (1 / years) - 1
    return absolute, cagr


def compute_recurring_growth(sip: RecurringInvestmentInput) -> InvestmentResult:
    require_non_negative(sip.monthly_contribution, "monthly_contribution")
    require_rate(sip.expected_annual_return_percent, "expected_annual_return_percent")
    require_term_months(sip.term_months)

    c = sip.monthly_contribution
    n = int(sip.term_months)
    r = monthly_rate(sip.expected_annual_return_percent)

    final_value = annuity_due_future_value(c, r, n)
    total_contributed = c * n

    schedule: list[InvestmentMonthEntry] = []
    value = 0.0
    for month in range(1, n + 1):
        value = (value + c) * (1 + r)
        invested = c * month
        schedule.append(InvestmentMonthEntry(
            month=month, invested=invested, value=value, gain=value - invested,
        ))

    absolute, cagr = _returns(final_value, total_contributed, n / 12)
    require_finite_results(
        final_value=final_value,
        total_contributed=total_contributed,
        month_value=value,
        absolute_return_percent=absolute,
        cagr=cagr,
    )
    return InvestmentResult(
        mode="recurring",
        total_contributed=total_contributed,
        final_value=final_value,
        total_gain=final_value - total_contributed,
        absolute_return_percent=absolute,
        cagr=cagr,
        month_schedule=schedule,
    )


def compute_lump_sum_growth(lump: LumpSumInvestmentInput) -> InvestmentResult:
    require_non_negative(lump.initial_amount, "initial_amount")
    require_rate(lump.expected_annual_return_percent, "expected_annual_return_percent")
    require_term_years(lump.term_years)

    initial = float(lump.initial_amount)
    years = lump.term_years
    with overflow_as_invalid("final_value"):
        final_value = initial * (1 + lump.expected_annual_return_percent / 100) ** years

    absolute, cagr = _returns(final_value, initial, years)
    require_finite_results(
        final_value=final_value, absolute_return_percent=absolute, cagr=cagr,
    )
    return InvestmentResult(
        mode="lump_sum",
        total_contributed=initial,
        final_value=final_value,
        total_gain=final_value - initial,
        absolute_return_percent=absolute,
        cagr=cagr,
    )


def compute_investment_growth(
    investment: RecurringInvestmentInput | LumpSumInvestmentInput,
) -> InvestmentResult:
    """Dispatch on ``investment.mode``."""
    mode = getattr(investment, "mode", None)
    if mode == "recurring":
        return compute_recurring_growth(investment)
    if mode == "lump_sum":
        return compute_lump_sum_growth(investment)
    raise InvalidInput("mode", "'recurring' or 'lump_sum'")
