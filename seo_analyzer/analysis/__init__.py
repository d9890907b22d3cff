"""Analysis module: measurements, scoring rules and the SEO analyzer."""

from .analyzer import SEOAnalyzer, analyze_seo
from .models import (
    AnalysisInput,
    AnalysisResult,
    HeadingCounts,
    Impact,
    KeywordDensity,
    Recommendation,
    RecommendationType,
)

__all__ = [
    "SEOAnalyzer",
    "analyze_seo",
    "AnalysisInput",
    "AnalysisResult",
    "HeadingCounts",
    "Impact",
    "KeywordDensity",
    "Recommendation",
    "RecommendationType",
]
