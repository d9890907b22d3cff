"""
Readability scoring.

A simplified Flesch Reading Ease score backed by a vowel-group syllable
heuristic that also treats the Swedish vowels å, ä and ö as vowels. The
arithmetic is kept exact so identical text always yields identical scores.
"""

import re
from typing import NamedTuple

from seo_analyzer.analysis.text import split_words


_SENTENCE_SPLIT = re.compile(r"[.!?]+")
_PUNCTUATION = re.compile(r"[,.!?;:()\-]")
_VOWEL_RUN = re.compile(r"[aeiouyåäö]+")

FLESCH_BASE = 206.835
SENTENCE_LENGTH_WEIGHT = 1.015
SYLLABLE_WEIGHT = 84.6


class ReadabilityLevel(NamedTuple):
    """Human-readable interpretation of a readability score."""

    label: str
    description: str


# (minimum score, level), checked top-down
READABILITY_LEVELS = [
    (90, ReadabilityLevel(
        "Mycket lätt",
        "Lätt att förstå för en genomsnittlig 10-11-åring. De flesta meningar "
        "innehåller vanliga ord och enkel meningsbyggnad.",
    )),
    (80, ReadabilityLevel(
        "Lätt",
        "Lätt att förstå för en genomsnittlig 12-13-åring. Innehåller mestadels "
        "korta, enkla meningar.",
    )),
    (70, ReadabilityLevel(
        "Ganska lätt",
        "Lätt att förstå för en genomsnittlig 14-15-åring. Innehåller några "
        "längre meningar.",
    )),
    (60, ReadabilityLevel(
        "Standard",
        "Lätt att förstå för en genomsnittlig 16-17-åring. Läsbar för de flesta "
        "internetanvändare.",
    )),
    (50, ReadabilityLevel(
        "Ganska svårt",
        "Ganska svårt att läsa. Bäst förståeligt för personer med gymnasieutbildning.",
    )),
    (30, ReadabilityLevel(
        "Svårt",
        "Svårt att läsa. Bäst förståeligt för universitetsutbildade.",
    )),
]
HARDEST_LEVEL = ReadabilityLevel(
    "Mycket svårt",
    "Mycket svårt att läsa. Bäst förståeligt för universitetsutbildade. "
    "Innehåller många svåra ord och komplexa meningar.",
)


def word_syllables(word: str) -> int:
    """
    Estimate syllables in a single lower-cased word.
    
    Words of up to three characters count as one syllable. Longer words
    count vowel groups, corrected for silent ``e``, a trailing ``le`` and
    the ``es``/``ed`` endings, with a floor of one.
    """
    if len(word) <= 3:
        return 1
    
    syllables = len(_VOWEL_RUN.findall(word))
    if word.endswith("e"):
        syllables -= 1
    if word.endswith("le") and len(word) > 2:
        syllables += 1
    if word.endswith("es") or word.endswith("ed"):
        syllables -= 1
    
    return max(1, syllables)


def count_syllables(text: str) -> int:
    """
    Count syllables across all words of a text.

    Only the first punctuation mark in the text is removed. Any later
    punctuation stays on its word and counts toward its length.
    
    Args:
        text: Plain text
        
    Returns:
        Total syllable count (0 for empty text)
    """
    # Only the first punctuation mark is removed; later ones stay on their words
    cleaned = _PUNCTUATION.sub("", (text or "").lower(), count=1)
    return sum(word_syllables(word) for word in split_words(cleaned))


def split_sentences(text: str) -> list[str]:
    """Split on runs of sentence terminators, dropping blank fragments."""
    return [s for s in _SENTENCE_SPLIT.split(text or "") if s.strip()]


def calculate_readability_score(text: str) -> float:
    """
    Calculate the simplified Flesch Reading Ease score.
    
    Args:
        text: Plain text (markup already stripped)
        
    Returns:
        Score clamped to 0-100, higher is easier; 0 for text without
        sentences or words
    """
    sentences = split_sentences(text)
    words = split_words(text)
    
    if not sentences or not words:
        return 0.0
    
    avg_sentence_length = len(words) / len(sentences)
    avg_syllables_per_word = count_syllables(text) / len(words)
    
    score = (
        FLESCH_BASE
        - SENTENCE_LENGTH_WEIGHT * avg_sentence_length
        - SYLLABLE_WEIGHT * avg_syllables_per_word
    )
    return max(0.0, min(100.0, score))


def readability_level(score: float) -> ReadabilityLevel:
    """Interpret a readability score."""
    for minimum, level in READABILITY_LEVELS:
        if score >= minimum:
            return level
    return HARDEST_LEVEL
