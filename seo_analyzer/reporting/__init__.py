"""Reporting module for presenting analysis results."""

from .console import render_report
from .interpretation import (
    count_by_type,
    filter_recommendations,
    score_band,
    sort_keyword_density,
    sort_recommendations,
    word_count_message,
)

__all__ = [
    "render_report",
    "count_by_type",
    "filter_recommendations",
    "score_band",
    "sort_keyword_density",
    "sort_recommendations",
    "word_count_message",
]
