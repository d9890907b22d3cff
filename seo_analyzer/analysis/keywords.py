"""
Keyword density analysis.

Density is the share of whole-word, case-insensitive keyword occurrences
among all words of the plain text, as a percentage.
"""

import re
from typing import Literal, Sequence

from seo_analyzer.analysis.models import KeywordDensity
from seo_analyzer.analysis.text import split_words


LOW_DENSITY_THRESHOLD = 0.5
HIGH_DENSITY_THRESHOLD = 3.0

KeywordStatus = Literal["missing", "low", "high", "good"]


def keyword_pattern(keyword: str) -> re.Pattern[str]:
    """
    Build the whole-word pattern for a keyword.
    
    The keyword is escaped, so ``c++`` or ``node.js`` are matched literally
    instead of being interpreted as regular expressions.
    """
    return re.compile(r"\b" + re.escape(keyword.lower()) + r"\b", re.IGNORECASE)


def count_keyword(text: str, keyword: str) -> int:
    """Count whole-word occurrences of ``keyword`` in ``text``; blank keywords never match."""
    if not keyword.strip():
        return 0
    return len(keyword_pattern(keyword).findall(text.lower()))


def analyze_keyword_density(text: str, keywords: Sequence[str]) -> list[KeywordDensity]:
    """
    Calculate keyword density for target keywords.
    
    Args:
        text: Plain text (markup already stripped)
        keywords: Target keywords, order is preserved in the result
        
    Returns:
        One KeywordDensity per keyword
    """
    text_lower = (text or "").lower()
    total_words = len(split_words(text_lower))
    
    densities = []
    for keyword in keywords:
        count = count_keyword(text_lower, keyword)
        density = (count / total_words) * 100 if total_words and count else 0.0
        densities.append(KeywordDensity(keyword=keyword, count=count, density=density))
    
    return densities


def find_density(entries: Sequence[KeywordDensity], keyword: str) -> KeywordDensity | None:
    """Return the entry for ``keyword`` (exact match), if present."""
    return next((entry for entry in entries if entry.keyword == keyword), None)


def keyword_status(density: float) -> KeywordStatus:
    """Classify a density value into missing, low, high or good."""
    if density == 0:
        return "missing"
    if density < LOW_DENSITY_THRESHOLD:
        return "low"
    if density > HIGH_DENSITY_THRESHOLD:
        return "high"
    return "good"


def contains_any_keyword(text: str, keywords: Sequence[str]) -> bool:
    """Case-insensitive substring check used for title and meta description."""
    text_lower = (text or "").lower()
    return any(keyword.lower() in text_lower for keyword in keywords)
