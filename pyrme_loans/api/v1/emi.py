"""POST /v1/emi - EMI calculator endpoints"""

import logging
import time

from fastapi import APIRouter, Depends, HTTPException

from pyrme_loans.api.dependencies import get_request_id
from pyrme_loans.api.v1.schemas import (
    AmortizationEntrySchema,
    AmortizationResponse,
    LoanRequestSchema,
    ScheduleResponse,
)
from pyrme_loans.domain.amortization import calculate_amortization, generate_amortization_schedule
from pyrme_loans.domain.exceptions import InvalidInput
from pyrme_loans.domain.models import AmortizationResult
from pyrme_loans.infrastructure.observability.logging import log_calculation
from pyrme_loans.infrastructure.observability.metrics import (
    record_calculation,
    record_emi,
    record_invalid_input,
)

router = APIRouter()


def _to_response(result: AmortizationResult) -> AmortizationResponse:
    return AmortizationResponse(
        monthly_installment=result.monthly_installment,
        total_payment=result.total_payment,
        total_interest=result.total_interest,
        principal_share=result.principal_share,
        interest_share=result.interest_share,
    )


@router.post("/emi", response_model=AmortizationResponse)
def create_emi_quote(
    request_body: LoanRequestSchema,
    request_id: str = Depends(get_request_id),
):
    """
    Quote the fixed monthly installment for a loan.

    Returns:
        Installment, total payment and interest in whole rupees, plus the
        principal/interest split of the total as percentages
    """
    start_time = time.perf_counter()

    try:
        result = calculate_amortization(
            request_body.principal,
            request_body.annual_rate_percent,
            request_body.term_months,
        )
    except InvalidInput as e:
        record_invalid_input("emi")
        logging.warning(f"Invalid EMI input: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    duration_ms = (time.perf_counter() - start_time) * 1000
    record_emi(result.monthly_installment)
    log_calculation(
        request_id,
        "emi",
        duration_ms,
        term_months=request_body.term_months,
        monthly_installment=result.monthly_installment,
    )

    return _to_response(result)


@router.post("/emi/schedule", response_model=ScheduleResponse)
def create_emi_schedule(
    request_body: LoanRequestSchema,
    request_id: str = Depends(get_request_id),
):
    """
    Month-by-month amortization schedule.

    Returns:
        The same summary as POST /v1/emi plus one row per installment
    """
    start_time = time.perf_counter()

    try:
        result = calculate_amortization(
            request_body.principal,
            request_body.annual_rate_percent,
            request_body.term_months,
        )
        schedule = generate_amortization_schedule(
            request_body.principal,
            request_body.annual_rate_percent,
            request_body.term_months,
        )
    except InvalidInput as e:
        record_invalid_input("emi_schedule")
        logging.warning(f"Invalid schedule input: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    duration_ms = (time.perf_counter() - start_time) * 1000
    record_calculation("emi_schedule")
    log_calculation(request_id, "emi_schedule", duration_ms, term_months=request_body.term_months)

    return ScheduleResponse(
        summary=_to_response(result),
        schedule=[
            AmortizationEntrySchema(
                month=entry.month,
                installment=entry.installment,
                interest_component=entry.interest_component,
                principal_component=entry.principal_component,
                closing_balance=entry.closing_balance,
            )
            for entry in schedule
        ],
    )
