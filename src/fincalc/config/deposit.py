"""Compounding deposit input — APY calculator."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from fincalc.config.policy import (
    COMPOUNDING_FREQUENCIES,
    MAX_ANNUAL_RATE_PERCENT,
    MAX_TERM_MONTHS,
    CompoundingPeriods,
    TenureUnit,
)
from fincalc.config.tenure import term_in_months
from fincalc.errors import InvalidInput


def compounding_periods(frequency: str) -> int:
    """Map ``daily|monthly|quarterly|annually`` to periods per year."""
    try:
        return COMPOUNDING_FREQUENCIES[frequency]
    except KeyError:
        raise InvalidInput(
            "compounding_frequency", "one of " + ", ".join(COMPOUNDING_FREQUENCIES)
        ) from None


class DepositInput(BaseModel):
    """A savings deposit with optional recurring monthly top-ups.

    ``compounding_periods_per_year`` only affects the reported APY.  The
    month-by-month balance always compounds monthly.
    """

    model_config = ConfigDict(frozen=True)

    principal: float = Field(default=100_000, ge=0, description="Initial deposit")
    annual_rate_percent: float = Field(
        default=4.5, ge=0, le=MAX_ANNUAL_RATE_PERCENT,
        description="Nominal annual interest rate in percent",
    )
    compounding_periods_per_year: CompoundingPeriods = Field(
        default=12,
        description="Compounding frequency for APY: 365 (daily), 12 (monthly), "
                    "4 (quarterly) or 1 (annually).",
    )
    term_months: int = Field(
        default=60, ge=1, le=MAX_TERM_MONTHS, description="Deposit term in months",
    )
    recurring_monthly_deposit: float = Field(
        default=0.0, ge=0, description="Amount added at the end of every month",
    )

    @classmethod
    def from_tenure(
        cls,
        principal: float,
        annual_rate_percent: float,
        tenure: float,
        unit: TenureUnit = "years",
        frequency: str = "monthly",
        recurring_monthly_deposit: float = 0.0,
    ) -> "DepositInput":
        return cls(
            principal=principal,
            annual_rate_percent=annual_rate_percent,
            compounding_periods_per_year=compounding_periods(frequency),
            term_months=term_in_months(tenure, unit, field="term_months"),
            recurring_monthly_deposit=recurring_monthly_deposit,
        )
