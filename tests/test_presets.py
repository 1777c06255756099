"""Tests for product presets and loan guidelines."""

import pytest

from fincalc.config import LoanInput
from fincalc.config.presets import (
    ACCOUNT_PRESETS,
    FUND_CATEGORIES,
    LOAN_GUIDELINES,
    LOAN_PRESETS,
    account_preset,
    fund_category,
    loan_guideline,
    loan_preset,
)
from fincalc.errors import InvalidInput


def test_loan_presets():
    assert set(LOAN_PRESETS) == {"home", "personal", "car"}
    home = loan_preset("home")
    assert home.default_rate_percent == 8.5
    assert home.default_tenure_years == 20
    assert loan_preset("personal").default_rate_percent == 12


def test_presets_build_valid_loans():
    for preset in LOAN_PRESETS.values():
        loan = LoanInput.from_tenure(
            preset.min_amount, preset.default_rate_percent, preset.default_tenure_years, "years",
        )
        assert loan.term_months == preset.default_tenure_years * 12


def test_guidelines_cover_every_loan_type():
    assert set(LOAN_GUIDELINES) == set(LOAN_PRESETS)
    assert loan_guideline("personal").min_down_payment_percent == 0
    assert loan_guideline("home").max_dti_percent == 40


def test_account_presets():
    assert set(ACCOUNT_PRESETS) == {"savings", "cd", "high-yield"}
    assert account_preset("cd").default_rate_percent == 6.5


def test_fund_categories():
    assert set(FUND_CATEGORIES) == {"equity", "debt", "hybrid", "index"}
    equity = fund_category("equity")
    assert equity.expected_return_low_percent < equity.expected_return_high_percent


@pytest.mark.parametrize("lookup,field", [
    (loan_preset, "loan_type"),
    (loan_guideline, "loan_type"),
    (account_preset, "account_type"),
    (fund_category, "fund_category"),
])
def test_unknown_key_rejected(lookup, field):
    with pytest.raises(InvalidInput) as exc:
        lookup("nope")
    assert exc.value.field == field
