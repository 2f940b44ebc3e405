"""
Tests for humanizer/integrations/detectors.py (GPTZero, Originality.ai).
"""

import asyncio

import pytest

from humanizer.config import settings
from humanizer.integrations.detectors import (
    REMOTE_DETECTORS,
    call_detector,
    configured_detectors,
    evaluate_remote,
    parse_response,
)
from tests.helpers import make_response, make_session, patch_session

GPTZERO, ORIGINALITY = REMOTE_DETECTORS
ROSTER = ["GPTZero", "Originality.ai", "Turnitin"]


@pytest.fixture
def both_keys(monkeypatch):
    monkeypatch.setattr(settings, "gptzero_api_key", "gz-key")
    monkeypatch.setattr(settings, "originality_api_key", "oa-key")


# ---------------------------------------------------------------------------
# parse_response
# ---------------------------------------------------------------------------


def test_gptzero_low_probability_passes():
    data = {"documents": [{"average_generated_prob": 0.12, "class": "HUMAN_ONLY"}]}
    result = parse_response(GPTZERO, data)
    assert result.human_score == 88
    assert result.ai_score == 12
    assert result.status == "passed"
    assert result.confidence == "HUMAN_ONLY"


def test_gptzero_boundary_probability_fails():
    result = parse_response(GPTZERO, {"documents": [{"average_generated_prob": 0.3}]})
    assert result.human_score == 70
    assert result.status == "failed"
    assert result.confidence == "Unknown"


def test_gptzero_missing_fields_default_to_coin_flip():
    result = parse_response(GPTZERO, {})
    assert result.human_score == 50
    assert result.status == "failed"


def test_zero_probability_is_fully_human():
    gptzero = parse_response(GPTZERO, {"documents": [{"average_generated_prob": 0.0}]})
    originality = parse_response(ORIGINALITY, {"score": {"ai": 0, "fake": False}})
    for result in (gptzero, originality):
        assert result.human_score == 100
        assert result.ai_score == 0
        assert result.status == "passed"


@pytest.mark.parametrize("probability", [1.7, -0.2, "nan", "very likely"])
def test_invalid_probability_is_rejected(probability):
    with pytest.raises(ValueError):
        parse_response(GPTZERO, {"documents": [{"average_generated_prob": probability}]})


def test_originality_flags_fake():
    result = parse_response(ORIGINALITY, {"score": {"ai": 0.91, "fake": True}})
    assert result.human_score == 9
    assert result.status == "failed"
    assert result.confidence == "High AI Detection"


def test_originality_likely_human():
    result = parse_response(ORIGINALITY, {"score": {"ai": 0.05, "fake": False}})
    assert result.status == "passed"
    assert result.confidence == "Likely Human"


# ---------------------------------------------------------------------------
# call_detector
# ---------------------------------------------------------------------------


async def test_call_sends_key_header_and_payload(both_keys):
    session = make_session(make_response(200, {"documents": [{"average_generated_prob": 0.2}]}))
    with patch_session(session):
        result = await call_detector(GPTZERO, "some text")

    assert result.status == "passed"
    kwargs = session.post.call_args.kwargs
    assert session.post.call_args.args[0] == GPTZERO.url
    assert kwargs["headers"]["x-api-key"] == "gz-key"
    assert kwargs["json"] == {"document": "some text"}


async def test_non_200_becomes_error_result(both_keys):
    session = make_session(make_response(401))
    with patch_session(session):
        result = await call_detector(ORIGINALITY, "text")
    assert result.status == "error"
    assert result.human_score == 0
    assert result.confidence.startswith("Error: HTTP 401")


async def test_timeout_becomes_error_result(both_keys):
    session = make_session(post_side_effect=asyncio.TimeoutError())
    with patch_session(session):
        result = await call_detector(GPTZERO, "text")
    assert result.status == "error"
    assert result.confidence.startswith("Error: TimeoutError")


async def test_malformed_body_becomes_error_result(both_keys):
    session = make_session(make_response(200, {"documents": ["not-a-dict"]}))
    with patch_session(session):
        result = await call_detector(GPTZERO, "text")
    assert result.status == "error"


@pytest.mark.parametrize("probability", [1.7, -0.5])
async def test_out_of_range_probability_becomes_error_result(both_keys, probability):
    session = make_session(make_response(200, {"documents": [{"average_generated_prob": probability}]}))
    with patch_session(session):
        result = await call_detector(GPTZERO, "text")

    assert result.status == "error"
    assert result.human_score == 0
    assert result.ai_score == 0
    assert result.confidence.startswith("Error: AI probability out of range")

# ---------------------------------------------------------------------------
# configured_detectors / evaluate_remote
# ---------------------------------------------------------------------------


def test_no_keys_means_no_remote_detectors():
    assert configured_detectors(ROSTER) == []


def test_only_keyed_detectors_in_roster_are_used(monkeypatch):
    monkeypatch.setattr(settings, "originality_api_key", "oa-key")
    assert [d.name for d in configured_detectors(ROSTER)] == ["Originality.ai"]
    assert configured_detectors(["Turnitin"]) == []


def test_remote_detection_can_be_disabled(both_keys, monkeypatch):
    monkeypatch.setattr(settings, "remote_detection_enabled", False)
    assert configured_detectors(ROSTER) == []


async def test_evaluate_remote_without_keys_makes_no_calls():
    session = make_session()
    with patch_session(session):
        assert await evaluate_remote("text", ROSTER) == {}
    session.post.assert_not_called()


async def test_evaluate_remote_keys_results_by_name(both_keys):
    def _post(url, **kwargs):
        if url == GPTZERO.url:
            return make_response(200, {"documents": [{"average_generated_prob": 0.1}]})
        return make_response(500)

    session = make_session(post_side_effect=_post)
    with patch_session(session):
        results = await evaluate_remote("text", ROSTER)

    assert set(results) == {"GPTZero", "Originality.ai"}
    assert results["GPTZero"].status == "passed"
    assert results["Originality.ai"].status == "error"
