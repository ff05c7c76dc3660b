from __future__ import annotations

from stylometry_neutralizer.risk import annotate_risk
from tests.utils import DE_REQUEST


def _describe(text: str, language: str):
    return [
        (text[span.start : span.end], span.feature, span.risk_level)
        for span in annotate_risk(text, language)
    ]


def test_risk_levels_for_hapax_and_rare_words():
    """Common hapax words are medium risk; rare hapax words are high risk."""
    text = "Good people need time. Good people like quokkas."
    assert _describe(text, "en") == [
        ("need", "hapax", "medium"),
        ("time", "hapax", "medium"),
        ("like", "hapax", "medium"),
        ("quokkas", "hapax", "high"),
    ]


def test_repeated_rare_words_are_flagged_as_rare():
    """Rare words that repeat are flagged as rare_word."""
    assert _describe("quokkas and quokkas", "en") == [
        ("quokkas", "rare_word", "high"),
        ("quokkas", "rare_word", "high"),
    ]


def test_stopwords_are_never_flagged():
    """Stopwords are skipped even when they occur once."""
    assert annotate_risk("the and of", "en") == []


def test_frequency_is_case_insensitive():
    """'Good' and 'good' count as the same word."""
    assert _describe("Good people, good people.", "en") == []


def test_risk_offsets_lie_within_original_text():
    """Every span is a non-empty range inside the input."""
    spans = annotate_risk(DE_REQUEST, "de")
    assert spans
    for span in spans:
        assert 0 <= span.start < span.end <= len(DE_REQUEST)
        assert span.kind == "risk"
