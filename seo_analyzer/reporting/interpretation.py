"""
Interpretation helpers for analysis results.

Bands, labels and orderings used when presenting a result to a person.
None of these feed back into the score.
"""

from typing import NamedTuple, Sequence

from seo_analyzer.analysis.models import (
    Impact,
    KeywordDensity,
    Recommendation,
    RecommendationType,
)


class ScoreBand(NamedTuple):
    """Named range of the composite score."""

    name: str
    style: str


# (minimum score, band), checked top-down
SCORE_BANDS = [
    (90, ScoreBand("excellent", "bold green")),
    (70, ScoreBand("good", "green")),
    (50, ScoreBand("fair", "yellow")),
    (30, ScoreBand("poor", "dark_orange")),
]
CRITICAL_BAND = ScoreBand("critical", "bold red")

TYPE_ORDER = {
    RecommendationType.ERROR: 0,
    RecommendationType.WARNING: 1,
    RecommendationType.SUCCESS: 2,
}
IMPACT_ORDER = {Impact.HIGH: 0, Impact.MEDIUM: 1, Impact.LOW: 2}

KEYWORD_STATUS_LABELS = {
    "missing": "Saknas",
    "low": "För låg",
    "high": "För hög",
    "good": "Bra",
}


def score_band(score: float) -> ScoreBand:
    """Return the band a score falls in."""
    for minimum, band in SCORE_BANDS:
        if score >= minimum:
            return band
    return CRITICAL_BAND


def word_count_message(word_count: int) -> str:
    """Describe a word count relative to the recommended lengths."""
    if word_count < 300:
        return "För kort (minst 300 rekommenderas)"
    if word_count < 600:
        return "Acceptabel längd (mer än 600 rekommenderas)"
    if word_count < 1000:
        return "Bra längd"
    return "Utmärkt längd"


def sort_recommendations(recommendations: Sequence[Recommendation]) -> list[Recommendation]:
    """Errors first, then warnings, then successes; high impact first within a type."""
    return sorted(
        recommendations,
        key=lambda rec: (TYPE_ORDER[rec.type], IMPACT_ORDER[rec.impact]),
    )


def filter_recommendations(
    recommendations: Sequence[Recommendation],
    rec_type: RecommendationType | str | None = None,
) -> list[Recommendation]:
    """Keep only recommendations of one type; ``None`` keeps all."""
    if rec_type is None:
        return list(recommendations)
    wanted = RecommendationType(rec_type)
    return [rec for rec in recommendations if rec.type == wanted]


def count_by_type(recommendations: Sequence[Recommendation]) -> dict[str, int]:
    """Count recommendations per type, plus ``all``."""
    counts = {rec_type.value: 0 for rec_type in RecommendationType}
    for rec in recommendations:
        counts[rec.type.value] += 1
    counts["all"] = len(recommendations)
    return counts


def sort_keyword_density(entries: Sequence[KeywordDensity]) -> list[KeywordDensity]:
    """Most frequent keywords first; ties keep input order."""
    return sorted(entries, key=lambda entry: -entry.count)
