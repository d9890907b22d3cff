"""Markup stripping and word counting."""

import re


_TAG_PATTERN = re.compile(r"<[^>]*>")
_NBSP = "&nbsp;"
_WHITESPACE = re.compile(r"\s+")


def strip_html(markup: str) -> str:
    """
    Remove tags and non-breaking-space entities from markup.
    
    Every tag and every literal ``&nbsp;`` becomes a single space, then
    whitespace runs are collapsed and the result is trimmed.
    
    Args:
        markup: HTML markup (or plain text)
        
    Returns:
        Plain text
    """
    if not markup:
        return ""
    text = _TAG_PATTERN.sub(" ", markup)
    text = text.replace(_NBSP, " ")
    return _WHITESPACE.sub(" ", text).strip()


def split_words(text: str) -> list[str]:
    """Split text on whitespace runs, dropping empty tokens."""
    return text.split() if text else []


def count_words(text: str) -> int:
    """Count whitespace-separated words; empty text has 0 words."""
    return len(split_words(text))
