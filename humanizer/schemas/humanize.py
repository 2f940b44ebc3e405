from typing import List, Literal, Optional

from pydantic import Field, field_validator

from humanizer.config import settings
from humanizer.schemas.detection import CamelModel, DetectionResult, DetectionSummary, RiskBand

Style = Literal["casual", "formal", "academic", "creative", "technical", "conversational"]
Emotion = Literal["neutral", "positive", "critical"]
ParaphrasingLevel = Literal["minimal", "moderate", "extensive"]
SentenceStructure = Literal["simple", "varied", "complex"]
VocabularyLevel = Literal["basic", "intermediate", "advanced"]
EnglishVariant = Literal["us-english", "uk-english", "au-english", "ca-english"]
CompletionModel = Literal[
    "deepseek-chat",
    "deepseek-coder",
    "deepseek-instruct",
    "deepseek-v3",
    "gemini-3-flash-preview",
]


class HumanizeRequest(CamelModel):
    text: str = Field(min_length=settings.min_text_length, max_length=settings.max_text_length)
    style: Style
    emotion: Emotion
    paraphrasing_level: ParaphrasingLevel = "moderate"
    sentence_structure: SentenceStructure = "varied"
    vocabulary_level: VocabularyLevel = "intermediate"
    language: EnglishVariant = "us-english"
    model: CompletionModel = "deepseek-chat"
    bypass_ai_detection: bool = True
    improve_grammar: bool = True
    preserve_key_points: bool = True

    @field_validator("text")
    @classmethod
    def text_not_blank(cls, value: str) -> str:
        if len(value.strip()) < settings.min_text_length:
            raise ValueError(f"text must contain at least {settings.min_text_length} non-whitespace characters")
        return value


class TextStats(CamelModel):
    word_count: int
    reading_time: int   # minutes
    ai_detection_risk: RiskBand


class HumanizeResponse(CamelModel):
    text: str
    stats: TextStats
    detection_tests: Optional[List[DetectionResult]] = None
    detection_summary: Optional[DetectionSummary] = None
    used_fallback: bool = False
