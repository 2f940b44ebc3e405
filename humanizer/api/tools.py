"""
Auxiliary tool routes: summarize, score, citation conversion, and export.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from humanizer.core.dependencies import rate_limited
from humanizer.schemas.tools import (
    CitationRequest,
    CitationResponse,
    ExportRequest,
    ScoreRequest,
    ScoreResponse,
    SummarizeRequest,
    SummarizeResponse,
)
from humanizer.services import tools_service
from humanizer.services.export_service import render_export

router = APIRouter(tags=["Tools"])


@router.post("/api/summarize", response_model=SummarizeResponse, dependencies=[Depends(rate_limited)])
async def summarize(request: SummarizeRequest):
    return await tools_service.summarize(request)


@router.post("/api/score", response_model=ScoreResponse, dependencies=[Depends(rate_limited)])
async def score(request: ScoreRequest):
    return await tools_service.score(request)


@router.post(
    "/api/transform-citations",
    response_model=CitationResponse,
    dependencies=[Depends(rate_limited)],
)
async def transform_citations(request: CitationRequest):
    return await tools_service.transform_citations(request)


@router.post("/api/export")
def export(request: ExportRequest):
    """Returns the text as a downloadable .txt, .html, or .md attachment."""
    content, media_type, filename = render_export(request.text, request.format)
    return Response(
        content=content,
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
