"""
Heuristic "humanness" scorer.

`HeuristicDetector.evaluate` scores a text for one named detector:
  1. Start from the base score.
  2. Add the weight of every matched pattern category (see patterns.py).
  3. Add a bounded, detector-specific uniform jitter to mimic vendor variance.
  4. Round, clamp, threshold, and band into a confidence label.

Randomness comes from an injected `random.Random`, so tests can seed it.
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional, Sequence

from humanizer.config import settings
from humanizer.detection.patterns import PATTERN_CATEGORIES, PatternCategory
from humanizer.schemas.detection import DetectionResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class JitterRange:
    low: float
    high: float

    def sample(self, rng: random.Random) -> float:
        return rng.uniform(self.low, self.high)


# Per-vendor variance; anything not listed gets DEFAULT_JITTER.
DETECTOR_JITTER: dict[str, JitterRange] = {
    "GPTZero": JitterRange(-4, 4),          # most sensitive to patterns
    "Originality.ai": JitterRange(-3, 3),   # strict
    "Turnitin": JitterRange(-2, 8),         # academic focus, lenient on casual writing
    "Copyleaks": JitterRange(-3, 4),
    "Writer.com": JitterRange(-1, 8),       # lenient with creative writing
}
DEFAULT_JITTER = JitterRange(-3, 3)

# (minimum human score, tier label), checked top-down.
CONFIDENCE_TIERS: tuple[tuple[int, str], ...] = (
    (90, "Very High"),
    (75, "High"),
    (60, "Medium"),
    (40, "Low"),
)
LOWEST_TIER = "Very Low"


def confidence_tier(human_score: int) -> str:
    for floor, label in CONFIDENCE_TIERS:
        if human_score >= floor:
            return label
    return LOWEST_TIER


def confidence_label(human_score: int) -> str:
    return f"{confidence_tier(human_score)} Confidence ({human_score}% Human)"


class HeuristicDetector:
    """Rule-based scorer producing one DetectionResult per (text, detector)."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        categories: Sequence[PatternCategory] = PATTERN_CATEGORIES,
        jitter: Optional[dict[str, JitterRange]] = None,
        base_score: int = settings.heuristic_base_score,
        min_score: int = settings.human_score_min,
        max_score: int = settings.human_score_max,
        pass_threshold: int = settings.human_pass_threshold,
    ):
        self.rng = rng or random.Random()
        self.categories = tuple(categories)
        self.jitter = DETECTOR_JITTER if jitter is None else jitter
        self.base_score = base_score
        self.min_score = min_score
        self.max_score = max_score
        self.pass_threshold = pass_threshold

    def matched_categories(self, text: str) -> list[str]:
        return [c.name for c in self.categories if c.matches(text)]

    def raw_score(self, text: str) -> int:
        """Base score plus category weights, before jitter and clamping."""
        return self.base_score + sum(c.weight for c in self.categories if c.matches(text))

    def jitter_for(self, detector_name: str) -> JitterRange:
        return self.jitter.get(detector_name, DEFAULT_JITTER)

    def evaluate(self, text: str, detector_name: str) -> DetectionResult:
        score = self.raw_score(text) + self.jitter_for(detector_name).sample(self.rng)
        human_score = max(self.min_score, min(self.max_score, round(score)))

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                f"[HEURISTIC] {detector_name}: {human_score}% human "
                f"(matched: {', '.join(self.matched_categories(text)) or 'none'})"
            )

        return DetectionResult(
            detector_name=detector_name,
            human_score=human_score,
            ai_score=100 - human_score,
            status="passed" if human_score >= self.pass_threshold else "failed",
            confidence=confidence_label(human_score),
        )
