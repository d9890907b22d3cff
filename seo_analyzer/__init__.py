"""
Content SEO Analyzer

Scores marketing and blog content before it is published:
- Strips markup and counts words
- Counts headings, links and images without alt text
- Measures keyword density for target keywords
- Computes a heuristic Flesch reading-ease score
- Emits typed, impact-rated recommendations and a 0-100 SEO score
"""

__version__ = "0.1.0"

from .analysis import AnalysisInput, AnalysisResult, SEOAnalyzer, analyze_seo

__all__ = ["AnalysisInput", "AnalysisResult", "SEOAnalyzer", "analyze_seo", "__version__"]
