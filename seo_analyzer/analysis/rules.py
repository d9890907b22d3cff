"""
Recommendation rules.

Each ``check_*`` function covers one group of the rule table and returns
at most one outcome: the recommendation plus the points it deducts from
the score. Groups are evaluated independently of each other.
"""

from typing import NamedTuple, Sequence

from seo_analyzer.analysis.keywords import (
    HIGH_DENSITY_THRESHOLD,
    LOW_DENSITY_THRESHOLD,
    contains_any_keyword,
    find_density,
)
from seo_analyzer.analysis.models import (
    HeadingCounts,
    Impact,
    KeywordDensity,
    Recommendation,
    RecommendationType,
)


TITLE_MIN_LENGTH = 30
TITLE_MAX_LENGTH = 60
META_MIN_LENGTH = 120
META_MAX_LENGTH = 160
THIN_CONTENT_WORDS = 300
GOOD_CONTENT_WORDS = 600
LINKS_REQUIRED_ABOVE_WORDS = 300
POOR_READABILITY = 50
EXCELLENT_READABILITY = 80
IMAGE_ALT_PENALTY = 2


class RuleOutcome(NamedTuple):
    """A recommendation and the points it deducts."""

    recommendation: Recommendation
    deduction: int = 0


def _outcome(
    rec_id: str,
    rec_type: RecommendationType,
    message: str,
    impact: Impact,
    details: str | None = None,
    deduction: int = 0,
) -> RuleOutcome:
    recommendation = Recommendation(
        id=rec_id, type=rec_type, message=message, impact=impact, details=details
    )
    return RuleOutcome(recommendation, deduction)


def check_title_length(title: str) -> list[RuleOutcome]:
    """Title must exist and be 30-60 characters."""
    if not title:
        return [_outcome(
            "missing-title", RecommendationType.ERROR, "Title saknas", Impact.HIGH,
            "Lägg till en titel för innehållet. Titeln är en av de viktigaste SEO-faktorerna.",
            deduction=20,
        )]
    if len(title) < TITLE_MIN_LENGTH:
        return [_outcome(
            "short-title", RecommendationType.WARNING, "Titeln är kort", Impact.MEDIUM,
            "Titeln är kortare än rekommenderade 30-60 tecken. Överväg att göra den mer beskrivande.",
            deduction=5,
        )]
    if len(title) > TITLE_MAX_LENGTH:
        return [_outcome(
            "long-title", RecommendationType.WARNING, "Titeln är för lång", Impact.MEDIUM,
            "Titeln är längre än rekommenderade 60 tecken och kan bli avklippt i sökresultaten.",
            deduction=5,
        )]
    return [_outcome("good-title", RecommendationType.SUCCESS, "Titeln har bra längd", Impact.HIGH)]


def check_title_keywords(title: str, keywords: Sequence[str]) -> list[RuleOutcome]:
    """At least one target keyword should appear in the title."""
    if not keywords:
        return []
    if not contains_any_keyword(title, keywords):
        return [_outcome(
            "title-missing-keyword", RecommendationType.WARNING,
            "Titeln innehåller inte nyckelord", Impact.HIGH,
            "Inkludera minst ett av dina målnyckelord i titeln för bättre SEO.",
            deduction=10,
        )]
    return [_outcome(
        "title-has-keyword", RecommendationType.SUCCESS, "Titeln innehåller nyckelord", Impact.HIGH
    )]


def check_meta_length(meta_description: str) -> list[RuleOutcome]:
    """Meta description must exist and be 120-160 characters."""
    if not meta_description:
        return [_outcome(
            "missing-meta-description", RecommendationType.ERROR,
            "Metabeskrivning saknas", Impact.HIGH,
            "Lägg till en metabeskrivning. Den visas i sökresultaten och påverkar klickfrekvensen.",
            deduction=15,
        )]
    if len(meta_description) < META_MIN_LENGTH:
        return [_outcome(
            "short-meta-description", RecommendationType.WARNING,
            "Metabeskrivningen är kort", Impact.MEDIUM,
            "Metabeskrivningen är kortare än rekommenderade 120-160 tecken. Gör den mer beskrivande.",
            deduction=5,
        )]
    if len(meta_description) > META_MAX_LENGTH:
        return [_outcome(
            "long-meta-description", RecommendationType.WARNING,
            "Metabeskrivningen är för lång", Impact.MEDIUM,
            "Metabeskrivningen är längre än rekommenderade 160 tecken och kan bli avklippt i sökresultaten.",
            deduction=5,
        )]
    return [_outcome(
        "good-meta-description", RecommendationType.SUCCESS,
        "Metabeskrivningen har bra längd", Impact.MEDIUM,
    )]


def check_meta_keywords(meta_description: str, keywords: Sequence[str]) -> list[RuleOutcome]:
    """At least one target keyword should appear in the meta description."""
    if not keywords:
        return []
    if not contains_any_keyword(meta_description, keywords):
        return [_outcome(
            "meta-missing-keyword", RecommendationType.WARNING,
            "Metabeskrivningen innehåller inte nyckelord", Impact.MEDIUM,
            "Inkludera minst ett av dina målnyckelord i metabeskrivningen för bättre CTR.",
            deduction=5,
        )]
    return [_outcome(
        "meta-has-keyword", RecommendationType.SUCCESS,
        "Metabeskrivningen innehåller nyckelord", Impact.MEDIUM,
    )]


def check_content_length(word_count: int) -> list[RuleOutcome]:
    """Under 300 words is thin, under 600 is moderate."""
    if word_count < THIN_CONTENT_WORDS:
        return [_outcome(
            "thin-content", RecommendationType.WARNING, "Innehållet är tunt", Impact.HIGH,
            "Innehållet har mindre än 300 ord. Längre, mer uttömmande innehåll rangordnas ofta bättre.",
            deduction=15,
        )]
    if word_count < GOOD_CONTENT_WORDS:
        return [_outcome(
            "moderate-content", RecommendationType.WARNING,
            "Innehållet har måttlig längd", Impact.MEDIUM,
            "Överväg att expandera innehållet till minst 600-1000 ord för bättre rankning.",
            deduction=5,
        )]
    return [_outcome(
        "good-content-length", RecommendationType.SUCCESS, "Innehållet har bra längd", Impact.HIGH
    )]


def check_headings(headings: HeadingCounts) -> list[RuleOutcome]:
    """
    Exactly one H1, and at least one H2 when there are headings.
    
    The H1 rule and the heading-presence rule are separate groups, so an
    empty document gets both ``missing-h1`` and ``no-headings``.
    """
    outcomes = []
    
    if headings.h1 > 1:
        outcomes.append(_outcome(
            "multiple-h1", RecommendationType.ERROR, "Flera H1-rubriker hittades", Impact.MEDIUM,
            "Använd endast en H1-rubrik per sida, vanligtvis för huvudtiteln.",
            deduction=10,
        ))
    elif headings.h1 == 0:
        outcomes.append(_outcome(
            "missing-h1", RecommendationType.ERROR, "Ingen H1-rubrik hittades", Impact.HIGH,
            "Lägg till en H1-rubrik som innehåller ditt primära nyckelord.",
            deduction=15,
        ))
    
    if headings.total == 0:
        outcomes.append(_outcome(
            "no-headings", RecommendationType.WARNING, "Inga rubriker hittades", Impact.MEDIUM,
            "Använd rubriker (H1-H6) för att strukturera ditt innehåll och göra det mer läsbart.",
            deduction=10,
        ))
    elif headings.h2 == 0:
        outcomes.append(_outcome(
            "no-h2", RecommendationType.WARNING, "Inga H2-rubriker hittades", Impact.LOW,
            "Använd H2-rubriker för att dela upp ditt innehåll i logiska sektioner.",
            deduction=5,
        ))
    
    return outcomes


def check_primary_keyword_density(
    primary: str | None,
    densities: Sequence[KeywordDensity],
) -> list[RuleOutcome]:
    """The primary keyword should make up 0.5-3% of the words."""
    if primary is None:
        return []
    
    entry = find_density(densities, primary)
    
    if entry is None or entry.density == 0:
        return [_outcome(
            "missing-primary-keyword", RecommendationType.ERROR,
            "Primärt nyckelord saknas i innehållet", Impact.HIGH,
            f'Lägg till nyckelordet "{primary}" i innehållet.',
            deduction=20,
        )]
    if entry.density < LOW_DENSITY_THRESHOLD:
        return [_outcome(
            "low-keyword-density", RecommendationType.WARNING,
            "Låg nyckelordsdensitet", Impact.MEDIUM,
            f'Nyckelordet "{primary}" förekommer för sällan ({entry.density:.1f}%). Sikta på 1-2%.',
            deduction=10,
        )]
    if entry.density > HIGH_DENSITY_THRESHOLD:
        return [_outcome(
            "keyword-stuffing", RecommendationType.WARNING,
            "Möjlig nyckelordsstoppning upptäckt", Impact.HIGH,
            f'Nyckelordet "{primary}" används för ofta ({entry.density:.1f}%). '
            "Detta kan anses som nyckelordsstoppning.",
            deduction=15,
        )]
    return [_outcome(
        "good-keyword-density", RecommendationType.SUCCESS, "Bra nyckelordsdensitet", Impact.HIGH,
        f'Nyckelordet "{primary}" används med en bra frekvens ({entry.density:.1f}%).',
    )]


def check_internal_links(internal_links: int, word_count: int) -> list[RuleOutcome]:
    """Content over 300 words should link somewhere."""
    if internal_links == 0 and word_count > LINKS_REQUIRED_ABOVE_WORDS:
        return [_outcome(
            "no-internal-links", RecommendationType.WARNING, "Inga interna länkar", Impact.MEDIUM,
            "Lägg till interna länkar till relevant innehåll på din webbplats för bättre SEO.",
            deduction=5,
        )]
    return []


def check_image_alt(images_without_alt: int) -> list[RuleOutcome]:
    """Two points per image without alt text."""
    if images_without_alt > 0:
        return [_outcome(
            "images-missing-alt", RecommendationType.WARNING,
            "Bilder saknar alt-attribut", Impact.MEDIUM,
            f"{images_without_alt} bild(er) saknar alt-attribut. "
            "Lägg till beskrivande alt-text för alla bilder.",
            deduction=IMAGE_ALT_PENALTY * images_without_alt,
        )]
    return []


def check_readability(readability_score: float, word_count: int) -> list[RuleOutcome]:
    """
    Scores under 50 are penalized; 80 and above are called out.
    
    Content without words has nothing to read and is left to the content
    length rule.
    """
    if word_count == 0:
        return []
    if readability_score < POOR_READABILITY:
        return [_outcome(
            "poor-readability", RecommendationType.WARNING, "Svårläst innehåll", Impact.MEDIUM,
            "Innehållet kan vara svårt att läsa. Förenkla meningar och använd mer vanliga ord.",
            deduction=10,
        )]
    if readability_score >= EXCELLENT_READABILITY:
        return [_outcome(
            "excellent-readability", RecommendationType.SUCCESS, "Utmärkt läsbarhet", Impact.MEDIUM
        )]
    return []
