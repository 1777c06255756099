"""Investment inputs — SIP (recurring) and lump-sum modes.

The two modes take different fields, so they are separate models joined
into ``InvestmentInput`` by a ``mode`` discriminator.  A request body of
``{"mode": "lump_sum", ...}`` validates straight into the right one.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from fincalc.config.policy import (
    MAX_ANNUAL_RATE_PERCENT,
    MAX_TERM_MONTHS,
    MAX_TERM_YEARS,
    TenureUnit,
)
from fincalc.config.tenure import term_in_months


class RecurringInvestmentInput(BaseModel):
    """Fixed monthly contribution, invested at the start of each month."""

    model_config = ConfigDict(frozen=True)

    mode: Literal["recurring"] = "recurring"
    monthly_contribution: float = Field(default=10_000, ge=0, description="SIP amount per month")
    expected_annual_return_percent: float = Field(
        default=12.0, ge=0, le=MAX_ANNUAL_RATE_PERCENT,
        description="Expected annual return in percent",
    )
    term_months: int = Field(
        default=120, ge=1, le=MAX_TERM_MONTHS, description="Investment horizon in months",
    )

    @classmethod
    def from_tenure(
        cls,
        monthly_contribution: float,
        expected_annual_return_percent: float,
        tenure: float,
        unit: TenureUnit = "years",
    ) -> "RecurringInvestmentInput":
        return cls(
            monthly_contribution=monthly_contribution,
            expected_annual_return_percent=expected_annual_return_percent,
            term_months=term_in_months(tenure, unit, field="term_months"),
        )


class LumpSumInvestmentInput(BaseModel):
    """One-time investment compounded annually over a (possibly fractional) horizon."""

    model_config = ConfigDict(frozen=True)

    mode: Literal["lump_sum"] = "lump_sum"
    initial_amount: float = Field(default=500_000, ge=0, description="One-time investment")
    expected_annual_return_percent: float = Field(
        default=12.0, ge=0, le=MAX_ANNUAL_RATE_PERCENT,
        description="Expected annual return in percent",
    )
    term_years: float = Field(
        default=10.0, gt=0, le=MAX_TERM_YEARS, description="Horizon in years (fractional allowed)",
    )

    @classmethod
    def from_months(
        cls,
        initial_amount: float,
        expected_annual_return_percent: float,
        term_months: float,
    ) -> "LumpSumInvestmentInput":
        """Horizon given in months; 18 months becomes 1.5 years."""
        return cls(
            initial_amount=initial_amount,
            expected_annual_return_percent=expected_annual_return_percent,
            term_years=term_months / 12,
        )


InvestmentModes = Union[RecurringInvestmentInput, LumpSumInvestmentInput]
"""Every investment input model; ``mode`` tells them apart."""

InvestmentInput = Annotated[InvestmentModes, Field(discriminator="mode")]
