"""
System / health routes.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from humanizer.core.dependencies import get_aggregator

router = APIRouter(tags=["System"])


@router.get("/health")
async def health():
    return {"status": "healthy", "detectors": len(get_aggregator().roster)}


@router.get("/robots.txt", response_class=PlainTextResponse)
def robots():
    return "User-agent: *\nDisallow: /"
