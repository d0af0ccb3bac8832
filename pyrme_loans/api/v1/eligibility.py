"""POST /v1/eligibility - applicant eligibility score"""

import logging
import time

from fastapi import APIRouter, Depends, HTTPException

from pyrme_loans.api.dependencies import get_request_id
from pyrme_loans.api.v1.schemas import EligibilityFactorSchema, EligibilityRequest, EligibilityResponse
from pyrme_loans.domain.eligibility import (
    build_applicant_profile,
    contributing_factors,
    describe_band,
    score_eligibility,
)
from pyrme_loans.domain.exceptions import InvalidInput
from pyrme_loans.infrastructure.observability.logging import log_calculation
from pyrme_loans.infrastructure.observability.metrics import record_eligibility, record_invalid_input

router = APIRouter()


@router.post("/eligibility", response_model=EligibilityResponse)
def create_eligibility_score(
    request_body: EligibilityRequest,
    request_id: str = Depends(get_request_id),
):
    """
    Score an applicant from declared CIBIL score, income and loan amount.

    Flow:
    1. Validate inputs into an ApplicantProfile
    2. Compute the 0-100 score and band
    3. Attach band guidance and the contributing-factor breakdown
    """
    start_time = time.perf_counter()

    try:
        profile = build_applicant_profile(
            request_body.declared_credit_score,
            request_body.monthly_income,
            request_body.requested_principal,
        )
        result = score_eligibility(profile)
        factors = contributing_factors(profile)
    except InvalidInput as e:
        record_invalid_input("eligibility")
        logging.warning(f"Invalid eligibility input: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    duration_ms = (time.perf_counter() - start_time) * 1000
    record_eligibility(result.band)
    log_calculation(request_id, "eligibility", duration_ms, score=result.score, band=result.band)

    return EligibilityResponse(
        score=result.score,
        band=result.band,
        description=describe_band(result.band),
        factors=[
            EligibilityFactorSchema(label=f.label, value=f.value, status=f.status)
            for f in factors
        ],
    )
