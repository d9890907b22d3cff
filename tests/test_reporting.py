"""Tests for result interpretation and console rendering."""

import pytest
from rich.console import Console

from seo_analyzer.analysis import AnalysisInput, analyze_seo
from seo_analyzer.analysis.models import (
    Impact,
    KeywordDensity,
    Recommendation,
    RecommendationType,
)
from seo_analyzer.reporting import (
    count_by_type,
    filter_recommendations,
    render_report,
    score_band,
    sort_keyword_density,
    sort_recommendations,
    word_count_message,
)


def _rec(rec_id, rec_type, impact):
    return Recommendation(id=rec_id, type=rec_type, message=rec_id, impact=impact)


@pytest.fixture
def recommendations():
    return [
        _rec("ok", RecommendationType.SUCCESS, Impact.HIGH),
        _rec("warn-low", RecommendationType.WARNING, Impact.LOW),
        _rec("err-medium", RecommendationType.ERROR, Impact.MEDIUM),
        _rec("warn-high", RecommendationType.WARNING, Impact.HIGH),
        _rec("err-high", RecommendationType.ERROR, Impact.HIGH),
    ]


def test_sort_recommendations(recommendations):
    """Errors before warnings before successes, high impact first."""
    ordered = [rec.id for rec in sort_recommendations(recommendations)]
    assert ordered == ["err-high", "err-medium", "warn-high", "warn-low", "ok"]


def test_filter_recommendations(recommendations):
    assert [r.id for r in filter_recommendations(recommendations, "error")] == [
        "err-medium",
        "err-high",
    ]
    assert len(filter_recommendations(recommendations, None)) == 5
    
    with pytest.raises(ValueError):
        filter_recommendations(recommendations, "info")


def test_count_by_type(recommendations):
    assert count_by_type(recommendations) == {
        "error": 2,
        "warning": 2,
        "success": 1,
        "all": 5,
    }


def test_count_by_type_empty():
    assert count_by_type([]) == {"error": 0, "warning": 0, "success": 0, "all": 0}


@pytest.mark.parametrize(
    "score,band",
    [(100, "excellent"), (90, "excellent"), (75, "good"), (50, "fair"), (30, "poor"), (0, "critical")],
)
def test_score_band(score, band):
    assert score_band(score).name == band


@pytest.mark.parametrize(
    "words,fragment",
    [(0, "För kort"), (300, "Acceptabel"), (600, "Bra längd"), (1000, "Utmärkt")],
)
def test_word_count_message(words, fragment):
    assert fragment in word_count_message(words)


def test_sort_keyword_density_keeps_ties_in_order():
    entries = [
        KeywordDensity(keyword="a", count=1, density=0.1),
        KeywordDensity(keyword="b", count=5, density=0.5),
        KeywordDensity(keyword="c", count=1, density=0.1),
    ]
    assert [e.keyword for e in sort_keyword_density(entries)] == ["b", "a", "c"]


def test_render_report():
    """The report shows the score, recommendations and keyword table."""
    result = analyze_seo(AnalysisInput(
        content="<h1>SEO</h1><p>Kort text om seo.</p>",
        title="SEO",
        target_keywords=["seo"],
    ))
    console = Console(record=True, width=200)
    
    render_report(result, console)
    output = console.export_text()
    
    assert f"{result.score}/100" in output
    assert "Titeln är kort" in output
    assert "Nyckelordsdensitet" in output
    assert "seo" in output


def test_render_report_without_keywords():
    result = analyze_seo(AnalysisInput())
    console = Console(record=True, width=200)
    
    render_report(result, console, rec_type="error")
    output = console.export_text()
    
    assert "Title saknas" in output
    assert "Innehållet är tunt" not in output
    assert "Inga nyckelord att analysera" in output
