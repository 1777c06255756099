"""Shared test fixtures — the calculators' form defaults."""

from __future__ import annotations

import pytest

from fincalc.config import (
    DepositInput,
    EligibilityInput,
    LoanInput,
    LumpSumInvestmentInput,
    RecurringInvestmentInput,
)


@pytest.fixture
def home_loan() -> LoanInput:
    return LoanInput(principal=5_000_000, annual_rate_percent=8.5, term_months=240)


@pytest.fixture
def savings_deposit() -> DepositInput:
    return DepositInput(
        principal=100_000,
        annual_rate_percent=4.5,
        compounding_periods_per_year=12,
        term_months=60,
        recurring_monthly_deposit=0,
    )


@pytest.fixture
def sip() -> RecurringInvestmentInput:
    return RecurringInvestmentInput(
        monthly_contribution=10_000,
        expected_annual_return_percent=12,
        term_months=120,
    )


@pytest.fixture
def lump_sum() -> LumpSumInvestmentInput:
    return LumpSumInvestmentInput(
        initial_amount=500_000,
        expected_annual_return_percent=12,
        term_years=10,
    )


@pytest.fixture
def borrower() -> EligibilityInput:
    return EligibilityInput(
        loan_type="home",
        monthly_income=100_000,
        existing_monthly_debt=15_000,
        monthly_expenses=40_000,
        credit_score=750,
        annual_rate_percent=8.5,
        term_years=20,
        property_value=10_000_000,
    )
