"""
Detection suite: remote vendors first (when configured), heuristic for the rest.
"""

import logging

from humanizer.detection.aggregator import DetectionAggregator
from humanizer.integrations.detectors import evaluate_remote
from humanizer.schemas.detection import DetectionReport, DetectionResult

logger = logging.getLogger(__name__)


async def run_detection_suite(
    text: str,
    aggregator: DetectionAggregator,
) -> tuple[list[DetectionResult], DetectionReport]:
    remote = await evaluate_remote(text, aggregator.roster)
    if remote:
        logger.info(f"[DETECTION] Remote results for: {', '.join(remote)}")
    return aggregator.run_all(text, precomputed=remote)
