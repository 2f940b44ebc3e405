"""
Real AI-detection APIs (GPTZero, Originality.ai).

A provider is called only when remote detection is enabled and its API key
is configured; otherwise the aggregator scores that roster entry
heuristically. A failed call becomes an `error` DetectionResult rather than
an exception, so one unreachable vendor never breaks a rewrite.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Callable

import aiohttp

from humanizer.config import settings
from humanizer.integrations import http_client as http_module
from humanizer.schemas.detection import DetectionResult

logger = logging.getLogger(__name__)

# Vendor AI probability below this → "passed".
REMOTE_PASS_AI_PROBABILITY = 0.3
DEFAULT_AI_PROBABILITY = 0.5


@dataclass(frozen=True)
class RemoteDetector:
    name: str
    url: str
    key_header: str
    key_setting: str                                  # attribute name on Settings
    payload: Callable[[str], dict]
    ai_probability: Callable[[dict], float]
    confidence: Callable[[dict], str]

    @property
    def api_key(self) -> str:
        return getattr(settings, self.key_setting)


def _or_default(probability):
    return DEFAULT_AI_PROBABILITY if probability is None else probability


def _gptzero_probability(data: dict) -> float:
    documents = data.get("documents") or [{}]
    return _or_default(documents[0].get("average_generated_prob"))


def _gptzero_confidence(data: dict) -> str:
    documents = data.get("documents") or [{}]
    return documents[0].get("class") or "Unknown"


def _originality_probability(data: dict) -> float:
    return _or_default((data.get("score") or {}).get("ai"))


def _originality_confidence(data: dict) -> str:
    return "High AI Detection" if (data.get("score") or {}).get("fake") else "Likely Human"


REMOTE_DETECTORS: tuple[RemoteDetector, ...] = (
    RemoteDetector(
        name="GPTZero",
        url="https://api.gptzero.me/v2/predict/text",
        key_header="x-api-key",
        key_setting="gptzero_api_key",
        payload=lambda text: {"document": text},
        ai_probability=_gptzero_probability,
        confidence=_gptzero_confidence,
    ),
    RemoteDetector(
        name="Originality.ai",
        url="https://api.originality.ai/api/v1/scan/ai",
        key_header="X-OAI-API-KEY",
        key_setting="originality_api_key",
        payload=lambda text: {"content": text},
        ai_probability=_originality_probability,
        confidence=_originality_confidence,
    ),
)


def parse_response(detector: RemoteDetector, data: dict[str, Any]) -> DetectionResult:
    """Raises ValueError when the vendor probability is not a number in [0, 1]."""
    ai_probability = float(detector.ai_probability(data))
    if not 0.0 <= ai_probability <= 1.0:
        raise ValueError(f"AI probability out of range: {ai_probability}")
    human_score = round((1 - ai_probability) * 100)
    return DetectionResult(
        detector_name=detector.name,
        human_score=human_score,
        ai_score=100 - human_score,
        status="passed" if ai_probability < REMOTE_PASS_AI_PROBABILITY else "failed",
        confidence=detector.confidence(data),
    )


async def call_detector(detector: RemoteDetector, text: str) -> DetectionResult:
    logger.info(f"[DETECTION] Testing with {detector.name}...")
    headers = {"Content-Type": "application/json", detector.key_header: detector.api_key}
    try:
        async with http_module.request_session() as session:
            async with session.post(
                detector.url,
                json=detector.payload(text),
                headers=headers,
                timeout=http_module.timeout(settings.remote_detection_timeout_sec),
            ) as response:
                if response.status != 200:
                    return DetectionResult.error(detector.name, f"HTTP {response.status}")
                data = await response.json()
        result = parse_response(detector, data)
    except (aiohttp.ClientError, asyncio.TimeoutError, ValueError, TypeError, AttributeError) as e:
        logger.error(f"[DETECTION] Error testing with {detector.name}: {e!r}")
        return DetectionResult.error(detector.name, str(e) or type(e).__name__)

    logger.info(f"[DETECTION] {detector.name} result: {result.human_score}% human")
    return result


def configured_detectors(roster: list[str] | tuple[str, ...]) -> list[RemoteDetector]:
    if not settings.remote_detection_enabled:
        return []
    return [d for d in REMOTE_DETECTORS if d.name in roster and d.api_key]


async def evaluate_remote(text: str, roster: list[str] | tuple[str, ...]) -> dict[str, DetectionResult]:
    """Runs every configured remote detector concurrently; keyed by detector name."""
    detectors = configured_detectors(roster)
    if not detectors:
        return {}
    results = await asyncio.gather(*(call_detector(d, text) for d in detectors))
    return {r.detector_name: r for r in results}
