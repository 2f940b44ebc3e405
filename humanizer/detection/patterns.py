"""
Pattern categories for the heuristic detector.

Each category is one row: name, compiled regex, score weight, tier.
Adding a signal means adding a row here; the scorer never changes.

Tiers:
  - core:  everyday human markers (pronouns, fillers, contractions, emotion)
  - chaos: strongest discriminators against template-like AI prose
  - flaw:  small imperfections and informal habits
"""

import re
from dataclasses import dataclass
from typing import Literal

Tier = Literal["core", "chaos", "flaw"]


@dataclass(frozen=True)
class PatternCategory:
    name: str
    pattern: re.Pattern
    weight: int
    tier: Tier

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None


def _words(*alternatives: str, flags: int = re.IGNORECASE) -> re.Pattern:
    """Whole-word alternation: \\b(a|b|c)\\b."""
    return re.compile(r"\b(?:" + "|".join(alternatives) + r")\b", flags)


PATTERN_CATEGORIES: tuple[PatternCategory, ...] = (
    # --- core --------------------------------------------------------- #
    PatternCategory(
        "personal_pronouns",
        _words("I", "me", "my", "mine", "myself", "we", "us", "our"),
        15, "core",
    ),
    PatternCategory(
        "filler_words",
        _words(
            "um", "uh", "like", "you know", "I mean", "actually", "basically",
            "literally", "honestly", "omg", "lol", "tbh", "ngl", "fr",
        ),
        20, "core",
    ),
    PatternCategory(
        "contractions",
        _words(
            "don't", "won't", "can't", "I'm", "we're", "it's", "that's",
            "gonna", "wanna", "coulda", "shoulda",
        ),
        12, "core",
    ),
    PatternCategory(
        "emotional_language",
        _words(
            "love", "hate", "excited", "frustrated", "amazing", "terrible",
            "annoying", "awesome", "great", "awful", "dude", "this is",
            "i love", "so much",
        ),
        18, "core",
    ),

    # --- chaos -------------------------------------------------------- #
    PatternCategory(
        "chaos_markers",
        _words(
            "wait", "so like", "idk", "maybe im wrong", "could be totally",
            "ugh", "btw", "periodt", "whatever",
        ),
        25, "chaos",
    ),
    PatternCategory(
        "interruptions",
        re.compile(
            r"\([^)]*cat[^)]*keyboard[^)]*\)"
            r"|\([^)]*\b(?:anyway|btw|lol|don't ask|long story|sorry|seriously)\b[^)]*\)"
            r"|\.\.\.and oh wait"
            r"|wait what was i saying"
            r"|\bsorry,? where was i\b",
            re.IGNORECASE,
        ),
        30, "chaos",
    ),
    PatternCategory(
        "stream_of_consciousness",
        re.compile(r"\.\.\.|--|\band then\b|\boh wait\b|\bactually no\b", re.IGNORECASE),
        22, "chaos",
    ),
    PatternCategory(
        "personal_stories",
        _words(
            "my mom", "my dad", "my friend", "happened to me", "last week",
            "this reminds me", "this one time", "netflix show",
        ),
        20, "chaos",
    ),
    PatternCategory(
        "self_correction",
        _words("i mean", "what i'm trying to say", "well actually", "on second thought", "or rather"),
        18, "chaos",
    ),

    # --- flaw --------------------------------------------------------- #
    PatternCategory(
        "typos",
        _words("thier", "recieve", "seperate", "occured", "definately", "wierd", "ducking"),
        15, "flaw",
    ),
    PatternCategory(
        "inconsistent_caps",
        # Case-sensitive on purpose: mid-word case flips such as "thIs" or "ThIs".
        re.compile(r"[a-z][A-Z][a-z]|[A-Z][a-z][A-Z]"),
        12, "flaw",
    ),
    PatternCategory(
        "vague_references",
        _words("that thing", "you know what i mean", "some guy", "stuff like that", "or something"),
        10, "flaw",
    ),
    PatternCategory(
        "hedging",
        _words(
            "i think", "i guess", "i believe", "probably", "maybe", "kind of",
            "sort of", "seems like", "not sure",
        ),
        10, "flaw",
    ),
    PatternCategory(
        "slang",
        _words("lowkey", "highkey", "imo", "imho", "smh", "kinda", "sorta", "dunno", "nah", "yep", "yeah", "y'all"),
        10, "flaw",
    ),
    PatternCategory(
        "sentence_fragments",
        # A one- or two-word sentence at the start or after a terminator: "Nope." "Totally worth it!"
        re.compile(r"(?:^|[.!?]\s+)[A-Za-z']+(?:\s+[A-Za-z']+)?[.!?](?:\s|$)"),
        8, "flaw",
    ),
    PatternCategory(
        "run_on_sentences",
        re.compile(r"[^.!?\n]{300,}"),
        8, "flaw",
    ),
)
