"""Pydantic schemas for API request/response validation"""

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, NonNegativeFloat, NonNegativeInt, PositiveFloat, PositiveInt
from pydantic.alias_generators import to_camel

from pyrme_loans.config import settings


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case accepted on input"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LoanRequestSchema(CamelModel):
    """Request body for POST /v1/emi and /v1/emi/schedule"""

    principal: float = Field(..., gt=0, le=settings.max_principal, description="Loan amount in rupees")
    annual_rate_percent: float = Field(
        ...,
        ge=0,
        le=settings.max_annual_rate_percent,
        description="Annual interest rate, 10.5 = 10.5% p.a.",
    )
    term_months: int = Field(..., ge=1, le=settings.max_term_months, description="Tenure in months")


class AmortizationResponse(CamelModel):
    """Response for POST /v1/emi"""

    monthly_installment: int
    total_payment: int
    total_interest: int
    principal_share: float
    interest_share: float


class AmortizationEntrySchema(CamelModel):
    """Single month in a repayment schedule"""

    month: int
    installment: int
    interest_component: int
    principal_component: int
    closing_balance: int


class ScheduleResponse(CamelModel):
    """Response for POST /v1/emi/schedule"""

    summary: AmortizationResponse
    schedule: List[AmortizationEntrySchema]


class EligibilityRequest(CamelModel):
    """Request body for POST /v1/eligibility"""

    declared_credit_score: int = Field(..., ge=300, le=900, description="Self-declared CIBIL score")
    monthly_income: float = Field(..., gt=0, le=settings.max_monthly_income, description="Net monthly income in rupees")
    requested_principal: float = Field(..., gt=0, le=settings.max_principal, description="Loan amount in rupees")


class EligibilityFactorSchema(CamelModel):
    label: str
    value: str
    status: str


class EligibilityResponse(CamelModel):
    """Response for POST /v1/eligibility"""

    score: int
    band: str
    description: str
    factors: List[EligibilityFactorSchema]


class LoanOfferSchema(CamelModel):
    """Partner bank offer; every field, known or not, is echoed back as sent"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    id: str = Field(..., min_length=1)
    # int | float keeps whole numbers as sent (4000000 is not echoed as 4000000.0)
    annual_rate_percent: Union[NonNegativeInt, NonNegativeFloat]
    max_principal: Union[PositiveInt, PositiveFloat]
    processing_fee: Optional[str] = None
    approval_probability_percent: Optional[int] = Field(None, ge=0, le=100)
    bank_name: Optional[str] = None
    processing_time: Optional[str] = None


class RankedOfferSchema(LoanOfferSchema):
    recommended: bool


class OfferRankRequest(CamelModel):
    """Request body for POST /v1/offers/rank"""

    offers: List[LoanOfferSchema] = Field(..., max_length=settings.max_offers)


class OfferRankResponse(CamelModel):
    """Response for POST /v1/offers/rank"""

    offers: List[RankedOfferSchema]
