"""Domain models - immutable dataclasses for loan calculations"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class LoanRequest:
    """Inputs to the EMI calculator"""

    principal: Decimal
    annual_rate_percent: Decimal  # 10.5 means 10.5% per year
    term_months: int


@dataclass(frozen=True)
class AmortizationResult:
    """Fixed installment and lifetime totals, whole currency units"""

    monthly_installment: int
    total_payment: int
    total_interest: int
    principal_share: float  # percent of total_payment
    interest_share: float


@dataclass(frozen=True)
class AmortizationEntry:
    """Single month in a repayment schedule"""

    month: int
    installment: int
    interest_component: int
    principal_component: int
    closing_balance: int


@dataclass(frozen=True)
class ApplicantProfile:
    """Self-declared applicant details used for the eligibility heuristic"""

    declared_credit_score: int
    monthly_income: Decimal
    requested_principal: Decimal


@dataclass(frozen=True)
class EligibilityResult:
    """Suitability score from 0 to 100 and its band"""

    score: int
    band: str  # Excellent | Good | Fair | Poor


@dataclass(frozen=True)
class EligibilityFactor:
    """One line of the contributing-factors breakdown"""

    label: str
    value: str
    status: str  # good | fair | poor


@dataclass(frozen=True)
class LoanOffer:
    """Candidate offer from a partner bank"""

    identifier: str
    annual_rate_percent: Decimal
    max_principal: Decimal
    processing_fee_descriptor: Optional[str] = None
    approval_probability_percent: Optional[int] = None
    bank_name: Optional[str] = None
    processing_time: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict, compare=False, hash=False)


@dataclass(frozen=True)
class RankedOffer:
    """Offer position in a ranked list"""

    offer: LoanOffer
    recommended: bool
