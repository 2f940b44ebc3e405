"""
System prompt factories for the completion service.

All prompts are stateless: they take validated request models and return
the system instruction string. The user's text is always sent separately
as the user message.
"""

from humanizer.schemas.humanize import HumanizeRequest
from humanizer.schemas.tools import CitationRequest, ScoreRequest, SummarizeRequest

PARAPHRASING_GUIDANCE = {
    "minimal": "Keep close to the original wording; change only what is needed to sound natural.",
    "moderate": "Rephrase freely at the sentence level while keeping the original order of ideas.",
    "extensive": "Rewrite thoroughly: restructure paragraphs and reword ideas in your own voice.",
}

SENTENCE_GUIDANCE = {
    "simple": "Prefer short, simple sentences.",
    "varied": "Mix short punchy sentences with longer flowing ones.",
    "complex": "Favor compound and complex sentences with subordinate clauses.",
}

VOCABULARY_GUIDANCE = {
    "basic": "Use everyday vocabulary a general reader understands immediately.",
    "intermediate": "Use clear, moderately rich vocabulary.",
    "advanced": "Use precise, sophisticated vocabulary where it fits naturally.",
}

ENGLISH_VARIANTS = {
    "us-english": "American English",
    "uk-english": "British English",
    "au-english": "Australian English",
    "ca-english": "Canadian English",
}

HUMANIZATION_GUIDELINES = """Follow these specific guidelines to make the text more human-like:
1. Vary sentence lengths and structures
2. Use more transitional phrases and personal pronouns
3. Include occasional informal language elements where appropriate
4. Add natural thought progression markers like "however," "actually," or "I think"
5. Incorporate rhetorical questions occasionally
6. Introduce minor grammatical nuances that humans typically make
7. Replace complex words with simpler alternatives when possible
8. Add occasional hedging language like "probably," "seems like," "I believe"
9. Restructure ideas in a more human-like flow of thought
10. Insert occasional parenthetical asides or brief digressions"""


def build_humanize_prompt(request: HumanizeRequest) -> str:
    variant = ENGLISH_VARIANTS[request.language]

    intents = []
    if request.bypass_ai_detection:
        intents.append(
            "Importantly, modify the text to bypass AI detection tools by introducing natural "
            "human-like patterns, subtle imperfections, and varying sentence structures."
        )
    if request.improve_grammar:
        intents.append("Improve grammar and readability while maintaining a natural human voice.")
    if request.preserve_key_points:
        intents.append("Preserve all key points and arguments from the original text.")

    sections = [
        "You are an expert at making AI-generated text sound more human-like and natural.\n"
        "Your goal is to transform the following text to sound like it was written by a human.",
        f"For writing style, use a {request.style} tone.\n"
        f"For emotional tone, make the text sound {request.emotion}.\n"
        f"{PARAPHRASING_GUIDANCE[request.paraphrasing_level]}\n"
        f"{SENTENCE_GUIDANCE[request.sentence_structure]}\n"
        f"{VOCABULARY_GUIDANCE[request.vocabulary_level]}\n"
        f"Write in {variant}, using its spelling and idioms.",
    ]
    if intents:
        sections.append("\n".join(intents))
    sections.append(HUMANIZATION_GUIDELINES)
    sections.append(
        "Analyze the content and rewrite it while maintaining the core message and intent. "
        "Return only the rewritten text."
    )
    return "\n\n".join(sections)


SUMMARY_FORMATS = {
    "paragraph": "Write the summary as one cohesive paragraph.",
    "bullet-points": "Write the summary as a bulleted list, one idea per bullet.",
    "key-insights": "List the key insights and takeaways, each with a one-line explanation.",
}

SUMMARY_LENGTHS = {
    "short": "Keep it to about 2-3 sentences (or 3 bullets).",
    "medium": "Keep it to about 4-6 sentences (or 5 bullets).",
    "long": "Cover every major point, up to about 10 sentences (or 10 bullets).",
}


def build_summarize_prompt(request: SummarizeRequest) -> str:
    return (
        "You are a skilled editor who writes faithful, readable summaries.\n"
        f"{SUMMARY_FORMATS[request.format]}\n"
        f"{SUMMARY_LENGTHS[request.length]}\n"
        "Do not add information that is not in the source text. Return only the summary."
    )


SCORE_CRITERIA = {
    "grammar": "grammatical correctness, punctuation, and spelling",
    "coherence": "logical flow and how well ideas connect",
    "clarity": "how clear and easy to understand the writing is",
    "academic": "suitability for academic writing: register, precision, and argumentation",
    "formal": "formality and professional tone",
}


def build_score_prompt(request: ScoreRequest) -> str:
    return (
        "You are a strict writing assessor.\n"
        f"Score the text from 0 to 100 on {SCORE_CRITERIA[request.criteria]}.\n"
        'Respond with JSON only, exactly in this shape: {"score": <integer 0-100>, "feedback": "<two sentences>"}'
    )


def build_citation_prompt(request: CitationRequest) -> str:
    return (
        "You are an expert in academic citation styles.\n"
        f"Convert every in-text citation and reference entry in the text from {request.from_style} "
        f"format to {request.to_style} format.\n"
        "Leave all other wording unchanged. Return only the converted text."
    )
