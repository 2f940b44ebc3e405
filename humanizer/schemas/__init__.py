from humanizer.schemas.detection import DetectionResult, DetectionReport, DetectionSummary
from humanizer.schemas.humanize import HumanizeRequest, HumanizeResponse, TextStats
from humanizer.schemas.tools import (
    CitationRequest,
    CitationResponse,
    ExportRequest,
    ScoreRequest,
    ScoreResponse,
    SummarizeRequest,
    SummarizeResponse,
    SynonymResponse,
    SynonymSuggestion,
)

__all__ = [
    "DetectionResult",
    "DetectionReport",
    "DetectionSummary",
    "HumanizeRequest",
    "HumanizeResponse",
    "TextStats",
    "SummarizeRequest",
    "SummarizeResponse",
    "ScoreRequest",
    "ScoreResponse",
    "CitationRequest",
    "CitationResponse",
    "ExportRequest",
    "SynonymSuggestion",
    "SynonymResponse",
]
