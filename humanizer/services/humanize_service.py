"""
Rewrite orchestration for POST /api/humanize.

  1. Build the system prompt from the request options.
  2. Ask the completion service (cached) for the rewrite.
  3. On CompletionError, substitute the deterministic local fallback.
  4. Run the detection suite on whichever text we ended up with.
  5. Derive stats and the AI-detection risk band from the report.
"""

import logging

from humanizer.detection.aggregator import DetectionAggregator, risk_band
from humanizer.integrations.completion import complete
from humanizer.integrations.errors import CompletionError
from humanizer.integrations.prompts import build_humanize_prompt
from humanizer.schemas.detection import DetectionSummary
from humanizer.schemas.humanize import HumanizeRequest, HumanizeResponse, TextStats
from humanizer.services.detection_service import run_detection_suite
from humanizer.services.fallback import build_fallback_text
from humanizer.services.text_stats import count_words, reading_time

logger = logging.getLogger(__name__)


async def humanize_text(request: HumanizeRequest, aggregator: DetectionAggregator) -> HumanizeResponse:
    system_prompt = build_humanize_prompt(request)

    used_fallback = False
    try:
        text = await complete(request.model, system_prompt, request.text)
    except CompletionError as e:
        logger.warning(f"[HUMANIZE] Completion failed ({e}); using fallback transformation")
        text = build_fallback_text(request)
        used_fallback = True

    results, report = await run_detection_suite(text, aggregator)
    risk = risk_band(report.pass_rate)

    logger.info(
        f"[HUMANIZE] model={request.model} style={request.style} fallback={used_fallback} "
        f"pass_rate={report.pass_rate:.2f} risk={risk}"
    )

    return HumanizeResponse(
        text=text,
        stats=TextStats(
            word_count=count_words(text),
            reading_time=reading_time(text),
            ai_detection_risk=risk,
        ),
        detection_tests=results,
        detection_summary=DetectionSummary.from_report(report),
        used_fallback=used_fallback,
    )
