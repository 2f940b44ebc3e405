from typing import List, Literal

from pydantic import Field

from humanizer.config import settings
from humanizer.schemas.detection import CamelModel

CitationStyle = Literal["APA", "MLA", "Chicago", "Harvard"]


class SummarizeRequest(CamelModel):
    text: str = Field(min_length=1, max_length=settings.max_text_length)
    format: Literal["paragraph", "bullet-points", "key-insights"] = "paragraph"
    length: Literal["short", "medium", "long"] = "medium"


class SummarizeResponse(CamelModel):
    summary: str


class ScoreRequest(CamelModel):
    text: str = Field(min_length=1, max_length=settings.max_text_length)
    criteria: Literal["grammar", "coherence", "clarity", "academic", "formal"] = "grammar"


class ScoreResponse(CamelModel):
    score: int = Field(ge=0, le=100)
    feedback: str


class CitationRequest(CamelModel):
    text: str = Field(min_length=1, max_length=settings.max_text_length)
    from_style: CitationStyle
    to_style: CitationStyle


class CitationResponse(CamelModel):
    text: str


class ExportRequest(CamelModel):
    text: str = Field(max_length=settings.max_text_length)
    format: Literal["txt", "html", "md"] = "txt"


class SynonymSuggestion(CamelModel):
    word: str
    definition: str
    part_of_speech: str
    intensity: Literal["weaker", "similar", "stronger"]
    formality: Literal["casual", "neutral", "formal"]


class SynonymResponse(CamelModel):
    word: str
    synonyms: List[SynonymSuggestion]
