"""Amortizing loan input — EMI calculator."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from fincalc.config.policy import MAX_ANNUAL_RATE_PERCENT, MAX_TERM_MONTHS, TenureUnit
from fincalc.config.tenure import term_in_months


class LoanInput(BaseModel):
    """A fixed-payment loan: amount, nominal annual rate, and term."""

    model_config = ConfigDict(frozen=True)

    principal: float = Field(default=5_000_000, gt=0, description="Loan amount")
    annual_rate_percent: float = Field(
        default=8.5, ge=0, le=MAX_ANNUAL_RATE_PERCENT,
        description="Nominal annual interest rate in percent (8.5 = 8.5% p.a.)",
    )
    term_months: int = Field(
        default=240, ge=1, le=MAX_TERM_MONTHS, description="Repayment term in months",
    )

    @classmethod
    def from_tenure(
        cls,
        principal: float,
        annual_rate_percent: float,
        tenure: float,
        unit: TenureUnit = "years",
    ) -> "LoanInput":
        """Build from the form's (tenure, unit) pair, e.g. ``(20, "years")``."""
        return cls(
            principal=principal,
            annual_rate_percent=annual_rate_percent,
            term_months=term_in_months(tenure, unit, field="term_months"),
        )
