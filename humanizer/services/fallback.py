"""
Deterministic local rewrite used when the completion service fails.

The result is a pure function of the request: style intro, a light
transformation of the input, an emotion-based conclusion, and an optional
hedge sentence when detection bypass was requested.
"""

import re

from humanizer.schemas.humanize import HumanizeRequest

SHORT_INPUT_CHARS = 50
MAX_FALLBACK_SENTENCES = 5

STYLE_INTROS = {
    "casual": "So here's what I think... ",
    "formal": "Upon consideration, the following can be stated: ",
    "academic": "Research and analysis suggest the following interpretation: ",
    "creative": "Imagine, if you will, a perspective where: ",
    "technical": "Technical assessment yields the following observations: ",
    "conversational": "Let's chat about this for a sec. ",
}

EMOTION_CONCLUSIONS = {
    "neutral": "That's my objective assessment of the matter.",
    "positive": "Overall, I'm quite optimistic about these points!",
    "critical": "We should, however, carefully examine these claims before proceeding.",
}

BYPASS_HEDGE = (
    "I'm not entirely sure about all of this, but it's what makes sense to me "
    "based on what I've learned and experienced."
)

_SENTENCE_SPLIT = re.compile(r"[.!?]+")


def simple_transformation(text: str) -> str:
    if len(text) < SHORT_INPUT_CHARS:
        return (
            f"The key point seems to be about {text.lower()}, which I find to be a fascinating "
            "topic worth exploring further. There are several angles to consider when thinking about this."
        )

    sentences = [s.strip() for s in _SENTENCE_SPLIT.split(text) if s.strip()]
    if len(sentences) > 1:
        body = "".join(
            f"I believe that {sentence.lower()}. " for sentence in sentences[:MAX_FALLBACK_SENTENCES]
        )
        return body + "This is a complex topic with various perspectives to consider. "

    return (
        f"After analyzing this information, I'd summarize it as follows: {text} "
        "This presents several interesting implications for further consideration."
    )


def build_fallback_text(request: HumanizeRequest) -> str:
    parts = [
        STYLE_INTROS.get(request.style, "Here's my take: ") + simple_transformation(request.text),
        EMOTION_CONCLUSIONS.get(request.emotion, "That's my take on it."),
    ]
    if request.bypass_ai_detection:
        parts.append(BYPASS_HEDGE)
    return " ".join(parts)
