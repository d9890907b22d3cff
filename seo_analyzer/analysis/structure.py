"""
Structural checks over raw markup.

Headings, anchors and images are counted with tag patterns rather than a
DOM parser so that malformed editor output is still measured the same way.
"""

import re

from seo_analyzer.analysis.models import HeadingCounts


_HEADING_PATTERNS = {
    level: re.compile(rf"<h{level}[^>]*>", re.IGNORECASE) for level in range(1, 7)
}
_LINK_PATTERN = re.compile(r'<a[^>]*href="[^"]*"[^>]*>', re.IGNORECASE)
_IMAGE_PATTERN = re.compile(r"<img[^>]*>", re.IGNORECASE)
_IMAGE_WITH_ALT_PATTERN = re.compile(r'<img[^>]*alt="[^"]*"[^>]*>', re.IGNORECASE)


def extract_headings(markup: str) -> HeadingCounts:
    """
    Count opening heading tags per level.
    
    Args:
        markup: HTML markup
        
    Returns:
        HeadingCounts with h1..h6 and their total
    """
    counts = {
        f"h{level}": len(pattern.findall(markup or ""))
        for level, pattern in _HEADING_PATTERNS.items()
    }
    return HeadingCounts(**counts)


def count_internal_links(markup: str) -> int:
    """
    Count anchors carrying an ``href`` attribute.
    
    Every such anchor counts, external or not; same-origin filtering would
    need the page URL and is not done.
    """
    return len(_LINK_PATTERN.findall(markup or ""))


def count_images_without_alt(markup: str) -> int:
    """Count ``<img>`` tags lacking an ``alt="..."`` attribute."""
    markup = markup or ""
    all_images = len(_IMAGE_PATTERN.findall(markup))
    with_alt = len(_IMAGE_WITH_ALT_PATTERN.findall(markup))
    return max(0, all_images - with_alt)
