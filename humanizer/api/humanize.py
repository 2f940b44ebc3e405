"""
Rewrite route: POST /api/humanize

Body is a HumanizeRequest (camelCase). Validation failures are turned into
400 responses by the global handler in humanizer/main.py.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from humanizer.core.dependencies import get_aggregator, rate_limited
from humanizer.detection.aggregator import DetectionAggregator
from humanizer.schemas.humanize import HumanizeRequest, HumanizeResponse
from humanizer.services.humanize_service import humanize_text

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Humanize"])


@router.post(
    "/api/humanize",
    response_model=HumanizeResponse,
    dependencies=[Depends(rate_limited)],
)
async def humanize(
    request: HumanizeRequest,
    aggregator: DetectionAggregator = Depends(get_aggregator),
):
    """
    Rewrite text in a human voice and report how it fares against the detector roster.
    """
    try:
        return await humanize_text(request, aggregator)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"[HUMANIZE] Unexpected error: {e}")
        raise HTTPException(status_code=500, detail="Failed to process text")
