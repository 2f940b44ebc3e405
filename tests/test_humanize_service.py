from unittest.mock import AsyncMock, patch

import pytest

from humanizer.integrations.errors import CompletionError
from humanizer.schemas.detection import DetectionResult
from humanizer.schemas.humanize import HumanizeRequest
from humanizer.services.fallback import build_fallback_text
from humanizer.services.humanize_service import humanize_text
from tests.helpers import HUMAN_TEXT, HUMANIZE_PAYLOAD, ROBOTIC_TEXT

COMPLETE = "humanizer.services.humanize_service.complete"
REMOTE = "humanizer.services.detection_service.evaluate_remote"


@pytest.fixture
def request_model():
    return HumanizeRequest(**HUMANIZE_PAYLOAD)


async def test_rewrite_is_scored_and_counted(request_model, seeded_aggregator):
    with patch(COMPLETE, new=AsyncMock(return_value=HUMAN_TEXT)) as complete:
        response = await humanize_text(request_model, seeded_aggregator)

    model, system_prompt, user_text = complete.await_args.args
    assert model == "deepseek-chat"
    assert user_text == HUMANIZE_PAYLOAD["text"]
    assert "casual tone" in system_prompt

    assert response.text == HUMAN_TEXT
    assert response.used_fallback is False
    assert response.stats.word_count == 8
    assert response.stats.reading_time == 1
    assert response.stats.ai_detection_risk == "Very Low"
    assert response.detection_summary.overall_status == "passed"
    assert len(response.detection_tests) == len(seeded_aggregator.roster)


async def test_robotic_rewrite_is_high_risk(request_model, seeded_aggregator):
    with patch(COMPLETE, new=AsyncMock(return_value=ROBOTIC_TEXT)):
        response = await humanize_text(request_model, seeded_aggregator)

    assert response.stats.ai_detection_risk == "High"
    assert response.detection_summary.passed_count == 0


async def test_completion_failure_uses_fallback(request_model, seeded_aggregator):
    with patch(COMPLETE, new=AsyncMock(side_effect=CompletionError("down"))):
        response = await humanize_text(request_model, seeded_aggregator)

    assert response.used_fallback is True
    assert response.text == build_fallback_text(request_model)
    assert response.detection_summary is not None


async def test_remote_results_replace_heuristic_entries(request_model, seeded_aggregator):
    remote = {"GPTZero": DetectionResult.error("GPTZero", "HTTP 500")}
    with (
        patch(COMPLETE, new=AsyncMock(return_value=HUMAN_TEXT)),
        patch(REMOTE, new=AsyncMock(return_value=remote)),
    ):
        response = await humanize_text(request_model, seeded_aggregator)

    by_name = {r.detector_name: r for r in response.detection_tests}
    assert by_name["GPTZero"].status == "error"
    assert response.detection_summary.total_count == len(seeded_aggregator.roster) - 1
