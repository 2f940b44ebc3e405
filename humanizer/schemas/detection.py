from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DetectorStatus = Literal["passed", "failed", "error"]
OverallStatus = Literal["passed", "failed", "mixed"]
RiskBand = Literal["Very Low", "Low", "Medium", "High"]


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DetectionResult(CamelModel):
    """One (text, detector) evaluation. Immutable once returned."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    detector_name: str
    human_score: int = Field(ge=0, le=100)   # 0-100, higher = more human-like
    ai_score: int = Field(ge=0, le=100)      # 100 - human_score, or 0 on error
    status: DetectorStatus
    confidence: str     # e.g. "Very High Confidence (92% Human)" or "Error: ..."

    @classmethod
    def error(cls, detector_name: str, message: str) -> "DetectionResult":
        return cls(
            detector_name=detector_name,
            human_score=0,
            ai_score=0,
            status="error",
            confidence=f"Error: {message[:50]}...",
        )


class DetectionReport(CamelModel):
    """Aggregate over the non-error results of one text."""
    valid_results: List[DetectionResult]
    passed_count: int
    total_count: int
    average_human_score: int
    overall_status: OverallStatus

    @property
    def pass_rate(self) -> float:
        if self.total_count == 0:
            return 0.0
        return self.passed_count / self.total_count


class DetectionSummary(CamelModel):
    """DetectionReport without the per-detector list, for API responses."""
    overall_status: OverallStatus
    passed_count: int
    total_count: int
    average_human_score: int

    @classmethod
    def from_report(cls, report: DetectionReport) -> "DetectionSummary":
        return cls(
            overall_status=report.overall_status,
            passed_count=report.passed_count,
            total_count=report.total_count,
            average_human_score=report.average_human_score,
        )
