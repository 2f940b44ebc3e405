"""
Auxiliary LLM tools: summarize, score, and citation-style conversion.

These forward a prompt to the completion service and shape the reply.
Completion failures become HTTP 502; there is no local fallback.
"""

import json
import logging
import re

from fastapi import HTTPException
from pydantic import ValidationError

from humanizer.integrations.completion import complete
from humanizer.integrations.errors import CompletionError
from humanizer.integrations.prompts import (
    build_citation_prompt,
    build_score_prompt,
    build_summarize_prompt,
)
from humanizer.schemas.tools import (
    CitationRequest,
    CitationResponse,
    ScoreRequest,
    ScoreResponse,
    SummarizeRequest,
    SummarizeResponse,
)

logger = logging.getLogger(__name__)

TOOLS_MODEL = "deepseek-chat"
SCORE_TEMPERATURE = 0.2

_JSON_OBJECT = re.compile(r"\{.*\}", re.DOTALL)


async def _complete_or_502(tool: str, system_prompt: str, text: str, **kwargs) -> str:
    try:
        return await complete(TOOLS_MODEL, system_prompt, text, **kwargs)
    except CompletionError as e:
        logger.error(f"[TOOLS] {tool} failed: {e}")
        raise HTTPException(status_code=502, detail="Completion service unavailable")


async def summarize(request: SummarizeRequest) -> SummarizeResponse:
    summary = await _complete_or_502("summarize", build_summarize_prompt(request), request.text)
    return SummarizeResponse(summary=summary)


def parse_score(raw: str) -> ScoreResponse:
    """Extracts {"score", "feedback"} from a reply that may be wrapped in prose or code fences."""
    match = _JSON_OBJECT.search(raw)
    if not match:
        raise ValueError("no JSON object in reply")
    data = json.loads(match.group(0))
    data["score"] = max(0, min(100, int(round(float(data["score"])))))
    return ScoreResponse(score=data["score"], feedback=str(data.get("feedback", "")).strip())


async def score(request: ScoreRequest) -> ScoreResponse:
    raw = await _complete_or_502(
        "score", build_score_prompt(request), request.text, temperature=SCORE_TEMPERATURE
    )
    try:
        return parse_score(raw)
    except (ValueError, KeyError, TypeError, ValidationError) as e:
        logger.error(f"[TOOLS] score reply was not valid JSON: {e}; raw={raw[:120]!r}")
        raise HTTPException(status_code=502, detail="Completion service returned an invalid score")


async def transform_citations(request: CitationRequest) -> CitationResponse:
    if request.from_style == request.to_style:
        return CitationResponse(text=request.text)
    text = await _complete_or_502("transform-citations", build_citation_prompt(request), request.text)
    return CitationResponse(text=text)
