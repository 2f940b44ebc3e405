"""
Synonym lookup backed by a small curated in-memory database.

Unknown words get generic suggestions so the UI always has something to show.
"""

from typing import Optional

from humanizer.schemas.tools import SynonymResponse, SynonymSuggestion


def _s(word, definition, part_of_speech, intensity, formality) -> SynonymSuggestion:
    return SynonymSuggestion(
        word=word,
        definition=definition,
        part_of_speech=part_of_speech,
        intensity=intensity,
        formality=formality,
    )


SYNONYM_DATABASE: dict[str, list[SynonymSuggestion]] = {
    "good": [
        _s("excellent", "extremely good; outstanding", "adjective", "stronger", "formal"),
        _s("great", "of an extent, amount, or intensity considerably above average", "adjective", "similar", "casual"),
        _s("superb", "excellent; of very high quality", "adjective", "stronger", "formal"),
        _s("nice", "pleasant; agreeable; satisfactory", "adjective", "weaker", "casual"),
        _s("outstanding", "clearly noticeable; exceptionally good", "adjective", "stronger", "formal"),
        _s("awesome", "extremely impressive or daunting", "adjective", "stronger", "casual"),
    ],
    "bad": [
        _s("terrible", "extremely bad or serious", "adjective", "stronger", "neutral"),
        _s("awful", "extremely bad or unpleasant", "adjective", "stronger", "casual"),
        _s("poor", "of a low or inferior standard or quality", "adjective", "weaker", "neutral"),
        _s("dreadful", "causing or involving great suffering, fear, or unhappiness", "adjective", "stronger", "formal"),
        _s("subpar", "below an average level", "adjective", "weaker", "formal"),
        _s("lousy", "very poor or bad", "adjective", "similar", "casual"),
    ],
    "big": [
        _s("enormous", "very large in size, quantity, or extent", "adjective", "stronger", "formal"),
        _s("huge", "extremely large; enormous", "adjective", "stronger", "casual"),
        _s("large", "of considerable or relatively great size", "adjective", "similar", "neutral"),
        _s("massive", "large and heavy or solid", "adjective", "stronger", "neutral"),
        _s("gigantic", "of very great size or extent", "adjective", "stronger", "formal"),
        _s("substantial", "of considerable importance, size, or worth", "adjective", "similar", "formal"),
    ],
    "small": [
        _s("tiny", "very small", "adjective", "stronger", "casual"),
        _s("minuscule", "extremely small", "adjective", "stronger", "formal"),
        _s("little", "small in size, amount, or degree", "adjective", "weaker", "casual"),
        _s("compact", "closely and neatly packed together", "adjective", "similar", "neutral"),
        _s("petite", "small and dainty", "adjective", "similar", "formal"),
        _s("microscopic", "so small as to be visible only with a microscope", "adjective", "stronger", "formal"),
    ],
    "said": [
        _s("stated", "expressed something definitely or clearly", "verb", "similar", "formal"),
        _s("mentioned", "referred to something briefly", "verb", "weaker", "neutral"),
        _s("declared", "announced something clearly and firmly", "verb", "stronger", "formal"),
        _s("remarked", "said something as a comment", "verb", "similar", "neutral"),
        _s("explained", "made something clear by describing it", "verb", "stronger", "neutral"),
        _s("noted", "observed or pointed out", "verb", "weaker", "formal"),
    ],
    "think": [
        _s("believe", "accept that something is true", "verb", "similar", "neutral"),
        _s("consider", "think carefully about something", "verb", "stronger", "formal"),
        _s("suppose", "assume that something is the case", "verb", "weaker", "neutral"),
        _s("contemplate", "look thoughtfully at something for a long time", "verb", "stronger", "formal"),
        _s("reckon", "establish by calculation or be of the opinion", "verb", "similar", "casual"),
        _s("ponder", "think about something carefully", "verb", "stronger", "formal"),
    ],
}

GENERIC_SUGGESTIONS = [
    _s("alternative", "Available as another possibility", "noun", "similar", "neutral"),
    _s("substitute", "A person or thing acting in place of another", "noun", "similar", "formal"),
]


def lookup_synonyms(word: str, formality: Optional[str] = None) -> SynonymResponse:
    normalized = word.strip().lower()
    suggestions = SYNONYM_DATABASE.get(normalized, GENERIC_SUGGESTIONS)
    if formality:
        suggestions = [s for s in suggestions if s.formality == formality]
    return SynonymResponse(word=normalized, synonyms=list(suggestions))
