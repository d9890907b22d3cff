"""
SEO analyzer for editor content.

Combines the measurements into a scored analysis:
- Title and meta description length and keyword presence
- Content length
- Heading structure
- Primary keyword density
- Links and image alt text
- Readability
"""

from typing import Any, Iterable, Sequence

from seo_analyzer.analysis import rules
from seo_analyzer.analysis.keywords import analyze_keyword_density
from seo_analyzer.analysis.models import AnalysisInput, AnalysisResult, RecommendationType
from seo_analyzer.analysis.readability import calculate_readability_score
from seo_analyzer.analysis.structure import (
    count_images_without_alt,
    count_internal_links,
    extract_headings,
)
from seo_analyzer.analysis.text import count_words, strip_html
from seo_analyzer.utils.logger import setup_logger


logger = setup_logger(__name__)

BASE_SCORE = 100


def composite_score(deductions: Iterable[int]) -> int:
    """Subtract all deductions from 100 and clamp to 0-100."""
    score = BASE_SCORE - sum(deductions)
    return max(0, min(100, score))


def analyze_seo(params: AnalysisInput) -> AnalysisResult:
    """
    Analyze content and score it for SEO.
    
    Pure function of its input: no I/O beyond debug logging, and identical
    input always gives an identical result.
    
    Args:
        params: Content, title, meta description and target keywords
        
    Returns:
        AnalysisResult with score, recommendations and measurements
    """
    content_text = strip_html(params.content)
    word_count = count_words(content_text)
    keywords = params.target_keywords
    
    headings = extract_headings(params.content)
    internal_links = count_internal_links(params.content)
    images_without_alt = count_images_without_alt(params.content)
    keyword_density = analyze_keyword_density(content_text, keywords) if keywords else []
    readability_score = calculate_readability_score(content_text)
    
    logger.debug(
        f"Measured {word_count} words, {headings.total} headings, "
        f"{internal_links} links, {images_without_alt} images without alt, "
        f"readability {readability_score:.1f}"
    )
    
    outcomes = [
        *rules.check_title_length(params.title),
        *rules.check_title_keywords(params.title, keywords),
        *rules.check_meta_length(params.meta_description),
        *rules.check_meta_keywords(params.meta_description, keywords),
        *rules.check_content_length(word_count),
        *rules.check_headings(headings),
        *rules.check_primary_keyword_density(params.primary_keyword, keyword_density),
        *rules.check_internal_links(internal_links, word_count),
        *rules.check_image_alt(images_without_alt),
        *rules.check_readability(readability_score, word_count),
    ]
    
    score = composite_score(outcome.deduction for outcome in outcomes)
    
    return AnalysisResult(
        score=score,
        recommendations=[outcome.recommendation for outcome in outcomes],
        keyword_density=keyword_density,
        readability_score=readability_score,
        content_length=word_count,
        title_length=len(params.title),
        meta_description_length=len(params.meta_description),
    )


class SEOAnalyzer:
    """Entry point for scoring content, with logging around each analysis."""
    
    def __init__(self) -> None:
        """Initialize the SEO analyzer."""
        logger.debug("SEOAnalyzer initialized")
    
    def analyze(
        self,
        content: str = "",
        title: str = "",
        meta_description: str = "",
        target_keywords: Sequence[str] | None = None,
        url: str | None = None,
    ) -> AnalysisResult:
        """
        Perform a full SEO analysis from keyword arguments.
        
        Args:
            content: HTML markup of the body
            title: Page title
            meta_description: Meta description
            target_keywords: Target keywords, primary first
            url: Optional page URL
            
        Returns:
            AnalysisResult
        """
        params = AnalysisInput(
            content=content,
            title=title,
            meta_description=meta_description,
            target_keywords=list(target_keywords or []),
            url=url,
        )
        return self.analyze_input(params)
    
    def analyze_input(self, params: AnalysisInput) -> AnalysisResult:
        """Analyze an already built AnalysisInput."""
        logger.info(
            f"Starting SEO analysis: {params.title or '(untitled)'} "
            f"({len(params.target_keywords)} keywords)"
        )
        
        result = analyze_seo(params)
        
        issues = sum(1 for rec in result.recommendations if rec.type != RecommendationType.SUCCESS)
        logger.info(f"SEO analysis complete: score {result.score}/100, {issues} issues")
        return result
    
    def analyze_dict(self, data: dict[str, Any]) -> AnalysisResult:
        """
        Analyze a request payload using the dashboard's camelCase keys.
        
        Raises:
            ValueError: If the payload does not fit AnalysisInput
        """
        try:
            params = AnalysisInput.model_validate(data)
        except ValueError as e:
            logger.error(f"Invalid analysis payload: {e}")
            raise
        return self.analyze_input(params)
