"""Tests for keyword density analysis."""

import pytest
from seo_analyzer.analysis.keywords import (
    analyze_keyword_density,
    contains_any_keyword,
    count_keyword,
    find_density,
    keyword_status,
)


def test_keyword_density():
    """Density is occurrences over total words, as a percentage."""
    text = "Python is great. Python is powerful. Learn Python today."
    densities = analyze_keyword_density(text, ["Python", "JavaScript"])
    
    assert [d.keyword for d in densities] == ["Python", "JavaScript"]
    assert densities[0].count == 3
    assert densities[0].density == pytest.approx(3 / 9 * 100)
    assert densities[1].count == 0
    assert densities[1].density == 0


def test_keyword_density_preserves_order():
    """One entry per keyword, in input order."""
    keywords = ["zeta", "alpha", "mid"]
    densities = analyze_keyword_density("alpha mid zeta alpha", keywords)
    
    assert [d.keyword for d in densities] == keywords
    assert [d.count for d in densities] == [1, 2, 1]


def test_keyword_matching_is_case_insensitive():
    """An upper-case keyword matches lower-case content."""
    densities = analyze_keyword_density("seo matters and Seo pays", ["SEO"])
    
    assert densities[0].keyword == "SEO"
    assert densities[0].count == 2


def test_keyword_matches_whole_words_only():
    """Keywords inside longer words are not counted."""
    assert count_keyword("seo seofriendly preseo seo.", "seo") == 2


def test_multi_word_keyword():
    assert count_keyword("content marketing beats random content", "content marketing") == 1


def test_density_of_empty_text_is_zero():
    """No words means zero density rather than a division error."""
    densities = analyze_keyword_density("", ["seo"])
    
    assert densities[0].count == 0
    assert densities[0].density == 0.0


def test_keyword_with_regex_characters_is_literal():
    """Regex metacharacters in a keyword are matched literally."""
    # Unescaped, "a.c" would also match "abc".
    assert count_keyword("abc a.c", "a.c") == 1


def test_keyword_ending_in_symbol_needs_word_boundary():
    """A keyword ending in a non-word character cannot satisfy the trailing word boundary."""
    assert count_keyword("i like c++ and c", "c++") == 0


def test_blank_keyword_never_matches():
    assert count_keyword("some text here", "  ") == 0


def test_find_density():
    densities = analyze_keyword_density("seo text", ["seo", "text"])
    
    assert find_density(densities, "text").count == 1
    assert find_density(densities, "missing") is None


@pytest.mark.parametrize(
    "density,status",
    [(0, "missing"), (0.3, "low"), (0.5, "good"), (3.0, "good"), (3.01, "high")],
)
def test_keyword_status(density, status):
    assert keyword_status(density) == status


def test_contains_any_keyword():
    """Title and meta checks use case-insensitive substrings."""
    assert contains_any_keyword("Bästa SEO-tipsen", ["seo"])
    assert contains_any_keyword("Bästa tipsen", ["seo", "tips"])
    assert not contains_any_keyword("Bästa råden", ["seo", "tips"])
    assert not contains_any_keyword("", ["seo"])
