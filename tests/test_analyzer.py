"""Tests for the composite SEO analysis."""

import pytest
from seo_analyzer.analysis import AnalysisInput, SEOAnalyzer, analyze_seo
from seo_analyzer.analysis.analyzer import composite_score
from seo_analyzer.analysis.models import RecommendationType
from seo_analyzer.analysis.text import count_words, strip_html


GOOD_TITLE = "SEO tips that help small teams grow in Sweden"
GOOD_META = (
    "Learn practical SEO habits for small marketing teams: clear titles, useful "
    "meta descriptions, solid headings and content that readers enjoy."
)


def build_good_content() -> str:
    """700 words, one H1, one H2, one link, "seo" seven times (1.0%)."""
    parts = [
        "<h1>SEO tips</h1>",
        "<h2>Our plan</h2>",
        '<p>See <a href="/blog">this</a> now.</p>',
    ]
    parts += ["<p>We use seo a lot.</p>"] * 6
    parts += ["<p>The cat sat on the mat.</p>"] * 110
    parts.append("<p>Yes it is.</p>")
    return "\n".join(parts)


def ids(result):
    return [rec.id for rec in result.recommendations]


@pytest.fixture
def analyzer():
    """Create SEO analyzer."""
    return SEOAnalyzer()


def test_empty_input_scores_25():
    """Only the missing-title, missing-meta, thin, no-H1 and no-headings rules fire."""
    result = analyze_seo(AnalysisInput())
    
    assert ids(result) == [
        "missing-title",
        "missing-meta-description",
        "thin-content",
        "missing-h1",
        "no-headings",
    ]
    assert result.score == 25
    assert result.keyword_density == []
    assert result.readability_score == 0
    assert result.content_length == 0
    assert result.title_length == 0
    assert result.meta_description_length == 0


def test_ideal_input_scores_100():
    """Every rule resolves to a success or no-deduction branch."""
    content = build_good_content()
    assert len(GOOD_TITLE) == 45
    assert len(GOOD_META) == 140
    
    result = analyze_seo(AnalysisInput(
        content=content,
        title=GOOD_TITLE,
        meta_description=GOOD_META,
        target_keywords=["seo"],
    ))
    
    assert result.content_length == 700
    assert result.keyword_density[0].count == 7
    assert result.keyword_density[0].density == pytest.approx(1.0)
    assert result.readability_score >= 80
    assert result.score == 100
    assert all(rec.type == RecommendationType.SUCCESS for rec in result.recommendations)
    assert ids(result) == [
        "good-title",
        "title-has-keyword",
        "good-meta-description",
        "meta-has-keyword",
        "good-content-length",
        "good-keyword-density",
        "excellent-readability",
    ]


def test_missing_primary_keyword_in_long_document():
    """A primary keyword absent from 1000 words costs 20 even when others are present."""
    content = "<h1>Cats</h1><h2>More</h2>" + "<p>" + " ".join(["cat"] * 998) + ".</p>"
    params = AnalysisInput(
        content=content,
        title=GOOD_TITLE,
        meta_description=GOOD_META,
        target_keywords=["widget", "cat"],
    )
    
    result = analyze_seo(params)
    
    assert result.content_length == 1000
    assert "missing-primary-keyword" in ids(result)
    assert result.keyword_density[0].count == 0
    assert result.keyword_density[1].count > 0
    
    without_rule = analyze_seo(params.model_copy(update={"target_keywords": ["cat"]}))
    assert "missing-primary-keyword" not in ids(without_rule)


def test_keyword_density_one_entry_per_keyword():
    result = analyze_seo(AnalysisInput(
        content="<p>alpha beta beta</p>",
        target_keywords=["beta", "gamma", "alpha"],
    ))
    
    assert [d.keyword for d in result.keyword_density] == ["beta", "gamma", "alpha"]
    assert [d.count for d in result.keyword_density] == [2, 0, 1]


def test_keyword_matching_case_insensitive():
    result = analyze_seo(AnalysisInput(content="<p>seo is fun</p>", target_keywords=["SEO"]))
    assert result.keyword_density[0].count == 1


def test_content_length_matches_stripped_word_count():
    content = "<h1>Hej&nbsp;värld</h1><p>Det här är <b>fet</b> text.</p>"
    result = analyze_seo(AnalysisInput(content=content))
    
    assert result.content_length == count_words(strip_html(content)) == 7


def test_lengths_are_character_counts():
    result = analyze_seo(AnalysisInput(title="Smörgåsbord", meta_description="Åäö"))
    
    assert result.title_length == 11
    assert result.meta_description_length == 3


def test_score_clamped_at_zero():
    """Deductions beyond 100 clamp to 0."""
    result = analyze_seo(AnalysisInput(
        content='<img src="x.png">' * 10,
        title="x" * 100,
        target_keywords=["seo"],
    ))
    
    assert result.score == 0
    assert "images-missing-alt" in ids(result)


def test_analysis_is_deterministic():
    params = AnalysisInput(
        content=build_good_content(),
        title="Short",
        meta_description="Short description",
        target_keywords=["seo", "cat"],
    )
    
    first = analyze_seo(params)
    second = analyze_seo(params)
    
    assert first == second
    assert first.to_dict() == second.to_dict()


@pytest.mark.parametrize(
    "params",
    [
        AnalysisInput(),
        AnalysisInput(content="<p>!!!</p>", target_keywords=[""]),
        AnalysisInput(content="<h1></h1>" * 5, title=None, meta_description=None),
        AnalysisInput(content="a " * 2000, target_keywords=["a"]),
    ],
)
def test_score_and_readability_bounds(params):
    result = analyze_seo(params)
    
    assert 0 <= result.score <= 100
    assert 0 <= result.readability_score <= 100


def test_composite_score():
    assert composite_score([]) == 100
    assert composite_score([20, 15]) == 65
    assert composite_score([60, 60]) == 0


def test_analyzer_keyword_arguments(analyzer):
    """SEOAnalyzer.analyze builds the input from keyword arguments."""
    result = analyzer.analyze(
        content=build_good_content(),
        title=GOOD_TITLE,
        meta_description=GOOD_META,
        target_keywords=("seo",),
    )
    assert result.score == 100


def test_analyzer_dict_payload(analyzer):
    """Dashboard payloads use camelCase keys."""
    result = analyzer.analyze_dict({
        "content": "<h1>Hi</h1>",
        "title": GOOD_TITLE,
        "metaDescription": GOOD_META,
        "targetKeywords": ["seo"],
        "url": "https://example.com/seo",
    })
    
    assert result.title_length == 45
    assert result.meta_description_length == 140


def test_analyzer_dict_payload_invalid(analyzer):
    with pytest.raises(ValueError):
        analyzer.analyze_dict({"targetKeywords": "not-a-list"})
