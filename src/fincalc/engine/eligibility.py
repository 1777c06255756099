"""Loan eligibility — affordability-based maximum loan sizing.

Key formulas:
  DTI            = existing debt / income × 100
  EMI capacity   = income × 40% − existing debt
  sustainable    = max(0, capacity × 80%)
  max loan       = annuity PV of the sustainable EMI × credit multiplier
  recommended    = max loan × 80%
  residual       = (income − existing debt − sustainable) / income × 100

All percentages and tiers come from ``fincalc.config.policy``; the EMI
side reuses ``fincalc.engine.annuity`` so max loan → EMI round-trips.
"""

from __future__ import annotations

from fincalc.config.eligibility import EligibilityInput
from fincalc.config.policy import (
    EMI_INCOME_CAP,
    EMI_SAFETY_HAIRCUT,
    MAX_CREDIT_SCORE,
    MIN_CREDIT_SCORE,
    MIN_DOWN_PAYMENT_PCT,
    RECOMMENDED_DOWN_PAYMENT_PCT,
    RECOMMENDED_LOAN_HAIRCUT,
    credit_multiplier,
    is_property_secured,
)
from fincalc.config.presets import LOAN_GUIDELINES
from fincalc.engine.annuity import annuity_payment, annuity_present_value, monthly_rate
from fincalc.engine.guards import (
    require_finite,
    require_finite_results,
    require_non_negative,
    require_positive,
    require_rate,
    require_term_years,
)
from fincalc.errors import InvalidInput
from fincalc.models.results import DownPaymentAnalysis, EligibilityResult


def _validate(profile: EligibilityInput) -> None:
    require_positive(profile.monthly_income, "monthly_income")
    require_non_negative(profile.existing_monthly_debt, "existing_monthly_debt")
    require_rate(profile.annual_rate_percent, "annual_rate_percent")
    require_term_years(profile.term_years, whole=True)
    require_finite(profile.credit_score, "credit_score")
    if not MIN_CREDIT_SCORE <= profile.credit_score <= MAX_CREDIT_SCORE:
        raise InvalidInput("credit_score", f"between {MIN_CREDIT_SCORE} and {MAX_CREDIT_SCORE}")


def _guideline_breaches(profile: EligibilityInput, dti_percent: float) -> list[str]:
    guideline = LOAN_GUIDELINES.get(profile.loan_type)
    if guideline is None:
        return []

    notes: list[str] = []
    if dti_percent > guideline.max_dti_percent:
        notes.append(
            f"Debt-to-income {dti_percent:.1f}% exceeds the {guideline.max_dti_percent:g}% "
            f"guideline for {profile.loan_type} loans"
        )
    if profile.credit_score < guideline.min_credit_score:
        notes.append(
            f"Credit score {profile.credit_score} is below the {guideline.min_credit_score} "
            f"minimum for {profile.loan_type} loans"
        )
    if profile.term_years > guideline.max_tenure_years:
        notes.append(
            f"Tenure of {profile.term_years} years exceeds the {guideline.max_tenure_years}-year "
            f"maximum for {profile.loan_type} loans"
        )
    return notes


def compute_down_payment_analysis(profile: EligibilityInput) -> DownPaymentAnalysis | None:
    """Compare EMIs at the minimum (10%) and recommended (20%) down payment.

    Returns ``None`` when the loan type is not property-secured: the
    analysis does not apply, which is not the same as a zero result.  A
    property value of 0 yields an all-zero analysis.
    """
    if not is_property_secured(profile.loan_type):
        return None

    _validate(profile)
    require_non_negative(profile.property_value, "property_value")

    r = monthly_rate(profile.annual_rate_percent)
    n = profile.term_months

    minimum_down = profile.property_value * MIN_DOWN_PAYMENT_PCT
    recommended_down = profile.property_value * RECOMMENDED_DOWN_PAYMENT_PCT
    loan_min_down = profile.property_value - minimum_down
    loan_recommended_down = profile.property_value - recommended_down

    emi_min = annuity_payment(loan_min_down, r, n)
    emi_recommended = annuity_payment(loan_recommended_down, r, n)
    savings = (emi_min - emi_recommended) * n
    require_finite_results(emi_with_minimum_down=emi_min, lifetime_emi_savings=savings)

    return DownPaymentAnalysis(
        minimum_down_payment=minimum_down,
        recommended_down_payment=recommended_down,
        loan_with_minimum_down=loan_min_down,
        resulting_loan_amount=loan_recommended_down,
        emi_with_minimum_down=emi_min,
        emi_with_recommended_down=emi_recommended,
        lifetime_emi_savings=savings,
    )


def compute_eligibility(profile: EligibilityInput) -> EligibilityResult:
    """Size the maximum and recommended loan for a borrower profile.

    Raises ``InvalidInput`` for non-positive income, negative debt or
    rate, a term outside 1..100 years, or a credit score outside 300–900.
    """
    _validate(profile)

    income = profile.monthly_income
    debt = profile.existing_monthly_debt
    r = monthly_rate(profile.annual_rate_percent)
    n = profile.term_months

    dti_percent = debt / income * 100
    max_emi_capacity = income * EMI_INCOME_CAP - debt
    sustainable_emi = max(0.0, max_emi_capacity * EMI_SAFETY_HAIRCUT)

    multiplier = credit_multiplier(profile.credit_score)
    max_loan = annuity_present_value(sustainable_emi, r, n) * multiplier
    require_finite_results(max_approved_loan_amount=max_loan)

    return EligibilityResult(
        max_emi_capacity=max_emi_capacity,
        max_sustainable_emi=sustainable_emi,
        credit_multiplier=multiplier,
        max_approved_loan_amount=max_loan,
        recommended_loan_amount=max_loan * RECOMMENDED_LOAN_HAIRCUT,
        debt_to_income_ratio_percent=dti_percent,
        residual_affordability_percent=(income - debt - sustainable_emi) / income * 100,
        down_payment=compute_down_payment_analysis(profile),
        guideline_breaches=_guideline_breaches(profile, dti_percent),
    )
