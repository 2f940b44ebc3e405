"""
Detection aggregator: runs every roster detector over one text and reports.

`run_all` is the single entry point used by the rewrite flow. Results from
real detection APIs can be passed in via `precomputed`; every other roster
entry is scored by the heuristic detector. Nothing here raises.
"""

import logging
import random
from typing import Mapping, Optional, Sequence

from humanizer.config import settings
from humanizer.detection.heuristic import HeuristicDetector
from humanizer.schemas.detection import DetectionReport, DetectionResult, RiskBand

logger = logging.getLogger(__name__)

# (minimum pass rate, band), checked top-down.
RISK_BANDS: tuple[tuple[float, RiskBand], ...] = (
    (0.8, "Very Low"),
    (0.6, "Low"),
    (0.4, "Medium"),
)


def risk_band(pass_rate: float) -> RiskBand:
    """Maps the share of passing detectors to an AI-detection risk label."""
    for floor, band in RISK_BANDS:
        if pass_rate >= floor:
            return band
    return "High"


def summarize(results: Sequence[DetectionResult]) -> DetectionReport:
    """Builds a DetectionReport from results; error entries carry no weight."""
    valid = [r for r in results if r.status != "error"]
    passed = sum(1 for r in valid if r.status == "passed")

    average = round(sum(r.human_score for r in valid) / len(valid)) if valid else 0

    if valid and passed == len(valid):
        overall = "passed"
    elif passed > len(valid) / 2:
        overall = "mixed"
    else:
        overall = "failed"

    return DetectionReport(
        valid_results=valid,
        passed_count=passed,
        total_count=len(valid),
        average_human_score=average,
        overall_status=overall,
    )


class DetectionAggregator:
    def __init__(self, detector: HeuristicDetector, roster: Sequence[str]):
        self.detector = detector
        self.roster = tuple(roster)

    def run_all(
        self,
        text: str,
        precomputed: Optional[Mapping[str, DetectionResult]] = None,
    ) -> tuple[list[DetectionResult], DetectionReport]:
        precomputed = precomputed or {}
        results = [
            precomputed[name] if name in precomputed else self.detector.evaluate(text, name)
            for name in self.roster
        ]
        report = summarize(results)
        logger.info(
            f"[DETECTION] {report.passed_count}/{report.total_count} passed, "
            f"avg {report.average_human_score}% human → {report.overall_status}"
        )
        return results, report


def build_aggregator(
    roster: Optional[Sequence[str]] = None,
    rng: Optional[random.Random] = None,
) -> DetectionAggregator:
    """Aggregator over `roster` (defaults to settings.detector_roster)."""
    if roster is None:
        roster = settings.detector_roster
    return DetectionAggregator(HeuristicDetector(rng=rng), roster)
