"""Loan eligibility input — affordability estimator."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from fincalc.config.policy import (
    MAX_ANNUAL_RATE_PERCENT,
    MAX_CREDIT_SCORE,
    MAX_TERM_YEARS,
    MIN_CREDIT_SCORE,
    LoanType,
)


class EligibilityInput(BaseModel):
    """Borrower profile plus the loan terms being considered."""

    model_config = ConfigDict(frozen=True)

    loan_type: LoanType = Field(
        default="home",
        description="'home' loans are property-secured and get a down-payment analysis; "
                    "'personal' and 'car' do not.",
    )
    monthly_income: float = Field(default=100_000, gt=0, description="Gross monthly income")
    existing_monthly_debt: float = Field(
        default=15_000, ge=0, description="Sum of EMIs already being paid each month",
    )
    monthly_expenses: float = Field(
        default=40_000, ge=0,
        description="Household expenses. Informational; not part of the affordability formula.",
    )
    credit_score: int = Field(
        default=750, ge=MIN_CREDIT_SCORE, le=MAX_CREDIT_SCORE, description="Credit bureau score",
    )
    annual_rate_percent: float = Field(
        default=8.5, ge=0, le=MAX_ANNUAL_RATE_PERCENT,
        description="Nominal annual interest rate in percent",
    )
    term_years: int = Field(
        default=20, ge=1, le=MAX_TERM_YEARS, description="Loan tenure in years",
    )
    property_value: float = Field(
        default=10_000_000, ge=0,
        description="Value of the property being financed (home loans only). 0 gives a zero down-payment analysis.",
    )

    @property
    def term_months(self) -> int:
        return self.term_years * 12
