"""Claimable Routes — evaluate stream records supplied by the caller.

Invariants:
    - `at` query param is a non-negative unix timestamp in seconds (validated by FastAPI)
    - Omitted `at` means "now" according to the service clock
    - Malformed amounts surface as 400 INVALID_AMOUNT via the global handler
    - Batch results keep input order and share one calculated_at

Design Decisions:
    - The caller supplies the stream record: storage lives outside this service
    - Cache invalidation exposed as DELETE for operators and indexer hooks
"""

import logging

from fastapi import APIRouter, Depends, Query, Response, status

from streampay.api.dependencies import get_claimable_service
from streampay.schemas.claimable import (
    ClaimableBatchIn, ClaimableBatchOut, ClaimableResultOut, StreamStateIn,
)
from streampay.services.claimable_service import ClaimableAmountService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/claimable", tags=["claimable"])

_AT_DESCRIPTION = "Unix timestamp in seconds; defaults to now"


@router.post("", response_model=ClaimableResultOut)
async def get_claimable_amount(
    body: StreamStateIn,
    at: int | None = Query(None, ge=0, description=_AT_DESCRIPTION),
    service: ClaimableAmountService = Depends(get_claimable_service),
):
    """Claimable amount of one stream record."""
    result = service.get_claimable_amount(body.to_domain(), at)
    return ClaimableResultOut.from_domain(result)


@router.post("/batch", response_model=ClaimableBatchOut)
async def get_claimable_amounts(
    body: ClaimableBatchIn,
    at: int | None = Query(None, ge=0, description=_AT_DESCRIPTION),
    service: ClaimableAmountService = Depends(get_claimable_service),
):
    """Claimable amounts of several stream records at one timestamp."""
    results = service.get_claimable_amounts(
        [s.to_domain() for s in body.streams], at,
    )
    return ClaimableBatchOut(
        results=[ClaimableResultOut.from_domain(r) for r in results],
    )


@router.delete("/cache", status_code=status.HTTP_204_NO_CONTENT)
async def clear_claimable_cache(
    service: ClaimableAmountService = Depends(get_claimable_service),
):
    """Drop every memoized result."""
    service.clear_cache()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
