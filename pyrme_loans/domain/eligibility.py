"""Eligibility scoring - heuristic suitability score for a loan applicant"""

from decimal import Decimal
from typing import List

from pyrme_loans.domain.exceptions import InvalidInput
from pyrme_loans.domain.models import ApplicantProfile, EligibilityFactor, EligibilityResult
from pyrme_loans.utils.currency import format_inr_compact
from pyrme_loans.utils.money import HUNDRED, Number, round_half_up, to_amount

MIN_CREDIT_SCORE = 300
MAX_CREDIT_SCORE = 900

# Frozen weights; changing them changes every published score
CREDIT_WEIGHT = Decimal("40")
AFFORDABILITY_WEIGHT = Decimal("40")
BASE_COMPONENT = Decimal("20")

# Loan of 10x annual income or more zeroes the affordability component
AFFORDABILITY_CEILING_RATIO = Decimal("10")

BAND_EXCELLENT = "Excellent"
BAND_GOOD = "Good"
BAND_FAIR = "Fair"
BAND_POOR = "Poor"

BAND_DESCRIPTIONS = {
    BAND_EXCELLENT: "You have a high chance of approval with competitive rates.",
    BAND_GOOD: "Your profile looks promising. A few improvements could boost your chances.",
    BAND_FAIR: "Consider improving your CIBIL score or adjusting loan amount.",
    BAND_POOR: "Focus on improving your credit score before applying.",
}


def _clamp(value: Decimal, low: Decimal = Decimal("0"), high: Decimal = Decimal("1")) -> Decimal:
    return max(low, min(value, high))


def build_applicant_profile(
    declared_credit_score: int,
    monthly_income: Number,
    requested_principal: Number,
) -> ApplicantProfile:
    """Validate raw inputs and wrap them in an ApplicantProfile"""
    if isinstance(declared_credit_score, bool) or not isinstance(declared_credit_score, int):
        raise InvalidInput("declared_credit_score must be an integer")
    if not MIN_CREDIT_SCORE <= declared_credit_score <= MAX_CREDIT_SCORE:
        raise InvalidInput(f"declared_credit_score must be between {MIN_CREDIT_SCORE} and {MAX_CREDIT_SCORE}")

    income = to_amount(monthly_income, "monthly_income")
    principal = to_amount(requested_principal, "requested_principal")
    if income <= 0:
        raise InvalidInput("monthly_income must be greater than 0")
    if principal <= 0:
        raise InvalidInput("requested_principal must be greater than 0")

    return ApplicantProfile(
        declared_credit_score=declared_credit_score,
        monthly_income=income,
        requested_principal=principal,
    )


def _validate_profile(profile: ApplicantProfile) -> ApplicantProfile:
    return build_applicant_profile(
        profile.declared_credit_score,
        profile.monthly_income,
        profile.requested_principal,
    )


def loan_to_annual_income_ratio(profile: ApplicantProfile) -> Decimal:
    """Requested principal relative to twelve months of income"""
    return profile.requested_principal / (profile.monthly_income * 12)


def determine_band(score: int) -> str:
    """
    Map a 0-100 score to its band. Lower bounds are inclusive.

    - 80+:   Excellent
    - 60-79: Good
    - 40-59: Fair
    - <40:   Poor
    """
    if score >= 80:
        return BAND_EXCELLENT
    elif score >= 60:
        return BAND_GOOD
    elif score >= 40:
        return BAND_FAIR
    else:
        return BAND_POOR


def describe_band(band: str) -> str:
    """Customer-facing guidance sentence for a band"""
    try:
        return BAND_DESCRIPTIONS[band]
    except KeyError:
        raise InvalidInput(f"Unknown eligibility band: {band}")


def score_eligibility(profile: ApplicantProfile) -> EligibilityResult:
    """
    Blend declared credit score and affordability into a 0-100 score.

    Scoring weights:
    - 40: credit score, linear from 300 (0) to 900 (40)
    - 40: affordability, 1 - (principal / annual income) / 10, clamped to [0, 1]
    - 20: flat base component

    Example:
        CIBIL 700, income 50000/month, loan 500000
        credit = 400/600 * 40 = 26.67
        ratio = 500000 / 600000 = 0.833 -> affordability = 0.9167 * 40 = 36.67
        score = round(26.67 + 36.67 + 20) = 83 -> Excellent

    Raises:
        InvalidInput: income or principal <= 0 or above MAX_AMOUNT, credit score
            outside [300, 900]
    """
    profile = _validate_profile(profile)

    credit_fraction = _clamp(
        Decimal(profile.declared_credit_score - MIN_CREDIT_SCORE) / (MAX_CREDIT_SCORE - MIN_CREDIT_SCORE)
    )
    credit_component = credit_fraction * CREDIT_WEIGHT

    ratio = loan_to_annual_income_ratio(profile)
    affordability_component = _clamp(1 - ratio / AFFORDABILITY_CEILING_RATIO) * AFFORDABILITY_WEIGHT

    raw_score = credit_component + affordability_component + BASE_COMPONENT
    score = int(_clamp(round_half_up(raw_score), Decimal("0"), HUNDRED))

    return EligibilityResult(score=score, band=determine_band(score))


def _credit_status(credit_score: int) -> str:
    if credit_score >= 750:
        return "good"
    if credit_score >= 650:
        return "fair"
    return "poor"


def contributing_factors(profile: ApplicantProfile) -> List[EligibilityFactor]:
    """
    Breakdown shown alongside the score.

    - CIBIL score: good at 750+, fair at 650+, poor below
    - Income: compact INR, always good
    - Loan/income ratio: percent of annual income; good while the loan is
      within 36 months of income
    """
    profile = _validate_profile(profile)

    ratio_percent = round_half_up(loan_to_annual_income_ratio(profile) * HUNDRED, 1)
    ratio_status = "good" if profile.requested_principal <= profile.monthly_income * 36 else "fair"

    return [
        EligibilityFactor(
            label="CIBIL Score",
            value=str(profile.declared_credit_score),
            status=_credit_status(profile.declared_credit_score),
        ),
        EligibilityFactor(
            label="Income",
            value=format_inr_compact(profile.monthly_income),
            status="good",
        ),
        EligibilityFactor(
            label="Loan/Income Ratio",
            value=f"{ratio_percent}%",
            status=ratio_status,
        ),
    ]
