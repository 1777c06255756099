"""Product presets — default rates, tenures and amount ranges per product.

The forms pre-fill from these when the user switches loan type, account
type or fund category.  The engine never reads them; they exist so every
caller offers the same defaults.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from fincalc.config.policy import LoanType
from fincalc.errors import InvalidInput


class LoanPreset(BaseModel):
    """Form defaults for one loan product."""

    model_config = ConfigDict(frozen=True)

    loan_type: LoanType
    label: str
    min_amount: float
    max_amount: float
    default_rate_percent: float
    default_tenure_years: int


class LoanGuideline(BaseModel):
    """Underwriting rules of thumb for one loan product.

    Used only to flag breaches; they never change computed amounts.
    """

    model_config = ConfigDict(frozen=True)

    loan_type: LoanType
    max_dti_percent: float
    min_credit_score: int
    max_tenure_years: int
    min_down_payment_percent: float
    description: str


class AccountPreset(BaseModel):
    model_config = ConfigDict(frozen=True)

    account_type: str
    label: str
    min_amount: float
    max_amount: float
    default_rate_percent: float
    default_tenure_years: int
    features: str


class FundCategory(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: str
    name: str
    risk: str
    expected_return_low_percent: float
    expected_return_high_percent: float
    suggested_horizon: str
    description: str


LOAN_PRESETS: dict[str, LoanPreset] = {
    "home": LoanPreset(
        loan_type="home", label="Home Loan",
        min_amount=500_000, max_amount=100_000_000,
        default_rate_percent=8.5, default_tenure_years=20,
    ),
    "personal": LoanPreset(
        loan_type="personal", label="Personal Loan",
        min_amount=50_000, max_amount=5_000_000,
        default_rate_percent=12.0, default_tenure_years=5,
    ),
    "car": LoanPreset(
        loan_type="car", label="Car Loan",
        min_amount=100_000, max_amount=5_000_000,
        default_rate_percent=10.0, default_tenure_years=7,
    ),
}

LOAN_GUIDELINES: dict[str, LoanGuideline] = {
    "home": LoanGuideline(
        loan_type="home", max_dti_percent=40, min_credit_score=650,
        max_tenure_years=30, min_down_payment_percent=10,
        description="Home loans typically have lower interest rates and longer tenures",
    ),
    "personal": LoanGuideline(
        loan_type="personal", max_dti_percent=50, min_credit_score=600,
        max_tenure_years=5, min_down_payment_percent=0,
        description="Personal loans are unsecured and have higher interest rates",
    ),
    "car": LoanGuideline(
        loan_type="car", max_dti_percent=45, min_credit_score=650,
        max_tenure_years=7, min_down_payment_percent=10,
        description="Car loans are secured by the vehicle and have moderate rates",
    ),
}

ACCOUNT_PRESETS: dict[str, AccountPreset] = {
    "savings": AccountPreset(
        account_type="savings", label="Savings Account",
        min_amount=1_000, max_amount=10_000_000,
        default_rate_percent=4.5, default_tenure_years=5,
        features="Regular savings account with moderate interest rates",
    ),
    "cd": AccountPreset(
        account_type="cd", label="Certificate of Deposit",
        min_amount=10_000, max_amount=50_000_000,
        default_rate_percent=6.5, default_tenure_years=3,
        features="Fixed deposit with higher rates and locked tenure",
    ),
    "high-yield": AccountPreset(
        account_type="high-yield", label="High-Yield Savings",
        min_amount=25_000, max_amount=100_000_000,
        default_rate_percent=7.5, default_tenure_years=5,
        features="High-yield savings with premium rates and higher minimums",
    ),
}

FUND_CATEGORIES: dict[str, FundCategory] = {
    "equity": FundCategory(
        category="equity", name="Equity Funds", risk="High",
        expected_return_low_percent=12, expected_return_high_percent=18,
        suggested_horizon="5+ years",
        description="Invest in stocks, suitable for long-term growth",
    ),
    "debt": FundCategory(
        category="debt", name="Debt Funds", risk="Low to Medium",
        expected_return_low_percent=6, expected_return_high_percent=9,
        suggested_horizon="1-3 years",
        description="Invest in bonds and fixed income securities",
    ),
    "hybrid": FundCategory(
        category="hybrid", name="Hybrid Funds", risk="Medium",
        expected_return_low_percent=9, expected_return_high_percent=12,
        suggested_horizon="3-5 years",
        description="Mix of equity and debt for balanced growth",
    ),
    "index": FundCategory(
        category="index", name="Index Funds", risk="Medium",
        expected_return_low_percent=10, expected_return_high_percent=15,
        suggested_horizon="5+ years",
        description="Track market indices, lower expense ratios",
    ),
}


def _lookup(table: dict, key: str, field: str):
    try:
        return table[key]
    except KeyError:
        raise InvalidInput(field, "one of " + ", ".join(table)) from None


def loan_preset(loan_type: str) -> LoanPreset:
    return _lookup(LOAN_PRESETS, loan_type, "loan_type")


def loan_guideline(loan_type: str) -> LoanGuideline:
    return _lookup(LOAN_GUIDELINES, loan_type, "loan_type")


def account_preset(account_type: str) -> AccountPreset:
    return _lookup(ACCOUNT_PRESETS, account_type, "account_type")


def fund_category(category: str) -> FundCategory:
    return _lookup(FUND_CATEGORIES, category, "fund_category")
