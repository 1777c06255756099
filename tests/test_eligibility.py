"""Tests for loan eligibility and down-payment analysis."""

import pytest
from pydantic import ValidationError

from fincalc.config import EligibilityInput, LoanInput
from fincalc.config.policy import credit_multiplier
from fincalc.engine.annuity import annuity_payment, monthly_rate
from fincalc.engine.eligibility import compute_down_payment_analysis, compute_eligibility
from fincalc.engine.loan import compute_loan_schedule
from fincalc.errors import InvalidInput


class TestCreditTiers:
    @pytest.mark.parametrize("score,multiplier", [
        (900, 1.0),
        (750, 1.0),
        (749, 0.9),
        (700, 0.9),
        (699, 0.8),
        (650, 0.8),
        (649, 0.7),
        (300, 0.7),
    ])
    def test_step_function(self, score, multiplier):
        assert credit_multiplier(score) == multiplier


class TestEligibility:
    def test_reference_profile(self, borrower):
        result = compute_eligibility(borrower)
        assert result.max_emi_capacity == pytest.approx(25_000)
        assert result.max_sustainable_emi == pytest.approx(20_000)
        assert result.credit_multiplier == 1.0
        assert result.debt_to_income_ratio_percent == pytest.approx(15)
        assert result.residual_affordability_percent == pytest.approx(65)

    def test_max_loan_round_trips_through_emi(self, borrower):
        result = compute_eligibility(borrower)
        emi = annuity_payment(result.max_approved_loan_amount, monthly_rate(8.5), 240)
        assert emi == pytest.approx(20_000, abs=0.01)

    def test_max_loan_round_trips_through_loan_schedule(self, borrower):
        result = compute_eligibility(borrower)
        schedule = compute_loan_schedule(LoanInput(
            principal=result.max_approved_loan_amount, annual_rate_percent=8.5, term_months=240,
        ))
        assert schedule.payment == pytest.approx(result.max_sustainable_emi, abs=0.01)

    def test_recommended_is_eighty_percent(self, borrower):
        result = compute_eligibility(borrower)
        assert result.recommended_loan_amount == pytest.approx(result.max_approved_loan_amount * 0.8)

    def test_credit_multiplier_scales_max_loan(self, borrower):
        prime = compute_eligibility(borrower)
        fair = compute_eligibility(borrower.model_copy(update={"credit_score": 680}))
        assert fair.credit_multiplier == 0.8
        assert fair.max_approved_loan_amount == pytest.approx(prime.max_approved_loan_amount * 0.8)
        assert fair.max_sustainable_emi == prime.max_sustainable_emi

    def test_zero_rate(self, borrower):
        result = compute_eligibility(borrower.model_copy(update={"annual_rate_percent": 0}))
        assert result.max_approved_loan_amount == pytest.approx(20_000 * 240)

    def test_overcommitted_borrower_gets_nothing(self):
        result = compute_eligibility(EligibilityInput(
            loan_type="personal", monthly_income=10_000, existing_monthly_debt=5_000,
        ))
        assert result.max_emi_capacity == pytest.approx(-1_000)
        assert result.max_sustainable_emi == 0
        assert result.max_approved_loan_amount == 0
        assert result.recommended_loan_amount == 0
        assert result.residual_affordability_percent == pytest.approx(50)

    def test_expenses_do_not_change_amounts(self, borrower):
        base = compute_eligibility(borrower)
        frugal = compute_eligibility(borrower.model_copy(update={"monthly_expenses": 0}))
        assert frugal.max_approved_loan_amount == base.max_approved_loan_amount


class TestDownPayment:
    def test_home_loan_analysis(self, borrower):
        analysis = compute_down_payment_analysis(borrower)
        assert analysis is not None
        assert analysis.minimum_down_payment == pytest.approx(1_000_000)
        assert analysis.recommended_down_payment == pytest.approx(2_000_000)
        assert analysis.loan_with_minimum_down == pytest.approx(9_000_000)
        assert analysis.resulting_loan_amount == pytest.approx(8_000_000)

    def test_emis_and_savings(self, borrower):
        analysis = compute_down_payment_analysis(borrower)
        r = monthly_rate(8.5)
        assert analysis.emi_with_minimum_down == pytest.approx(annuity_payment(9_000_000, r, 240))
        assert analysis.emi_with_recommended_down == pytest.approx(annuity_payment(8_000_000, r, 240))
        assert analysis.lifetime_emi_savings == pytest.approx(
            (analysis.emi_with_minimum_down - analysis.emi_with_recommended_down) * 240
        )
        # The extra 10% down saves exactly the EMI on that 10% of the property.
        assert analysis.lifetime_emi_savings == pytest.approx(annuity_payment(1_000_000, r, 240) * 240)

    def test_included_in_eligibility_result(self, borrower):
        result = compute_eligibility(borrower)
        assert result.down_payment == compute_down_payment_analysis(borrower)

    @pytest.mark.parametrize("loan_type", ["personal", "car"])
    def test_absent_for_unsecured_types(self, borrower, loan_type):
        profile = borrower.model_copy(update={"loan_type": loan_type})
        assert compute_down_payment_analysis(profile) is None
        assert compute_eligibility(profile).down_payment is None

    def test_zero_property_value_gives_zero_analysis(self):
        profile = EligibilityInput(loan_type="home", property_value=0)
        result = compute_eligibility(profile)
        assert result.down_payment is not None
        assert result.down_payment.minimum_down_payment == 0
        assert result.down_payment.emi_with_minimum_down == 0
        assert result.down_payment.lifetime_emi_savings == 0
        assert result.max_approved_loan_amount > 0

    def test_engine_rejects_negative_property_value(self, borrower):
        with pytest.raises(InvalidInput) as exc:
            compute_down_payment_analysis(
                EligibilityInput.model_construct(**{**borrower.model_dump(), "property_value": -1})
            )
        assert exc.value.field == "property_value"

    def test_rate_below_float_resolution(self, borrower):
        tiny = compute_eligibility(borrower.model_copy(update={"annual_rate_percent": 1e-15}))
        flat = compute_eligibility(borrower.model_copy(update={"annual_rate_percent": 0}))
        assert tiny.max_approved_loan_amount == pytest.approx(flat.max_approved_loan_amount)
        assert tiny.down_payment.emi_with_minimum_down == pytest.approx(9_000_000 / 240)


class TestGuidelines:
    def test_reference_profile_is_clean(self, borrower):
        assert compute_eligibility(borrower).guideline_breaches == []

    def test_low_score_flagged(self, borrower):
        breaches = compute_eligibility(borrower.model_copy(update={"credit_score": 620})).guideline_breaches
        assert len(breaches) == 1
        assert "650" in breaches[0]

    def test_long_personal_loan_flagged(self, borrower):
        profile = borrower.model_copy(update={"loan_type": "personal", "term_years": 10})
        breaches = compute_eligibility(profile).guideline_breaches
        assert any("5-year" in b for b in breaches)

    def test_high_dti_flagged(self):
        profile = EligibilityInput(loan_type="car", monthly_income=50_000, existing_monthly_debt=25_000, term_years=5)
        breaches = compute_eligibility(profile).guideline_breaches
        assert any("45%" in b for b in breaches)


class TestInputValidation:
    @pytest.mark.parametrize("kwargs", [
        {"monthly_income": 0},
        {"existing_monthly_debt": -1},
        {"credit_score": 250},
        {"credit_score": 901},
        {"annual_rate_percent": -1},
        {"term_years": 0},
        {"term_years": 101},
        {"loan_type": "boat"},
    ])
    def test_model_rejects(self, kwargs):
        with pytest.raises(ValidationError):
            EligibilityInput(**kwargs)

    @pytest.mark.parametrize("field,value", [
        ("monthly_income", 0),
        ("monthly_income", -10),
        ("existing_monthly_debt", -1),
        ("annual_rate_percent", -1),
        ("term_years", 0),
        ("term_years", 101),
    ])
    def test_engine_rejects_unvalidated_input(self, field, value):
        data = EligibilityInput().model_dump()
        data[field] = value
        with pytest.raises(InvalidInput) as exc:
            compute_eligibility(EligibilityInput.model_construct(**data))
        assert exc.value.field == field


def test_idempotent(borrower):
    assert compute_eligibility(borrower) == compute_eligibility(borrower)
