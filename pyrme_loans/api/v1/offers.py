"""POST /v1/offers/rank - order partner bank offers"""

import logging
import time

from fastapi import APIRouter, Depends, HTTPException

from pyrme_loans.api.dependencies import get_request_id
from pyrme_loans.api.v1.schemas import LoanOfferSchema, OfferRankRequest, OfferRankResponse, RankedOfferSchema
from pyrme_loans.domain.exceptions import InvalidInput
from pyrme_loans.domain.models import LoanOffer, RankedOffer
from pyrme_loans.domain.offers import rank_offers
from pyrme_loans.infrastructure.observability.logging import log_calculation
from pyrme_loans.infrastructure.observability.metrics import record_calculation, record_invalid_input
from pyrme_loans.utils.money import to_decimal

router = APIRouter()


def _to_domain(schema: LoanOfferSchema) -> LoanOffer:
    return LoanOffer(
        identifier=schema.id,
        annual_rate_percent=to_decimal(schema.annual_rate_percent, "annual_rate_percent"),
        max_principal=to_decimal(schema.max_principal, "max_principal"),
        processing_fee_descriptor=schema.processing_fee,
        approval_probability_percent=schema.approval_probability_percent,
        bank_name=schema.bank_name,
        processing_time=schema.processing_time,
        extra=dict(schema.model_extra or {}),
    )


def _to_schema(ranked: RankedOffer, source: LoanOfferSchema) -> RankedOfferSchema:
    # Echo only what the caller sent, so the single added field is `recommended`
    return RankedOfferSchema.model_validate(
        {
            **(source.model_extra or {}),
            **source.model_dump(exclude_unset=True),
            "recommended": ranked.recommended,
        }
    )


@router.post("/offers/rank", response_model=OfferRankResponse, response_model_exclude_unset=True)
def rank_loan_offers(
    request_body: OfferRankRequest,
    request_id: str = Depends(get_request_id),
):
    """
    Sort offers by interest rate and flag the cheapest as recommended.

    Offers with equal rates keep the order they were sent in. An empty list
    is returned unchanged.
    """
    start_time = time.perf_counter()

    try:
        offers = [_to_domain(o) for o in request_body.offers]
        ranked = rank_offers(offers)
    except InvalidInput as e:
        record_invalid_input("offer_rank")
        logging.warning(f"Invalid offer input: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    duration_ms = (time.perf_counter() - start_time) * 1000
    record_calculation("offer_rank")
    log_calculation(request_id, "offer_rank", duration_ms, offer_count=len(ranked))

    # rank_offers passes the same LoanOffer objects through
    sources = {id(offer): schema for offer, schema in zip(offers, request_body.offers)}
    return OfferRankResponse(offers=[_to_schema(r, sources[id(r.offer)]) for r in ranked])
