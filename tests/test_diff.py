from __future__ import annotations

from stylometry_neutralizer.diff import (
    MAX_PARAGRAPH_TOKENS,
    compute_diff_spans,
    merge_nearby,
    paragraph_ranges,
    suppress_explained,
    word_diff_spans,
    word_tokenize,
)
from stylometry_neutralizer.models import AnnotatedSpan, DiffSpan, SubSpan
from tests.utils import DE_REQUEST


def test_identical_texts_have_no_diff():
    """Diffing a text against itself yields nothing."""
    assert compute_diff_spans(DE_REQUEST, DE_REQUEST) == []


def test_single_word_substitution():
    """A replaced word yields one span holding the original word."""
    transformed = "the dog sat"
    spans = compute_diff_spans("the cat sat", transformed)
    assert len(spans) == 1
    assert transformed[spans[0].start : spans[0].end] == "dog"
    assert spans[0].original_fragment == "cat"
    assert spans[0].sub_spans is None
    assert spans[0].kind == "diff"


def test_pure_insertion_has_empty_original_fragment():
    """An inserted word has no original counterpart."""
    transformed = "the cat sat"
    spans = compute_diff_spans("the sat", transformed)
    assert [(transformed[s.start : s.end], s.original_fragment) for s in spans] == [
        ("cat", "")
    ]


def test_paragraphs_are_diffed_in_isolation():
    """Unchanged paragraphs produce no spans even when words recur."""
    original = "Ein kurzen Satz hier.\n\nNoch ein kurzen Satz da."
    transformed = "Ein langer Satz hier.\n\nNoch ein kurzen Satz da."
    first_paragraph_end = transformed.index("\n\n")
    spans = compute_diff_spans(original, transformed)
    assert spans == [DiffSpan(4, 10, "kurzen")]
    assert all(span.start < first_paragraph_end for span in spans)


def test_added_paragraph_is_diffed_against_empty_text():
    """A paragraph without an original counterpart is entirely new."""
    transformed = "Eins.\n\nZwei.\n\nDrei."
    spans = compute_diff_spans("Eins.\n\nZwei.", transformed)
    assert spans == [DiffSpan(14, 19, "")]
    assert transformed[14:19] == "Drei."


def test_oversized_paragraph_is_skipped():
    """Paragraphs above the token ceiling contribute no spans."""
    original = "word " * 450
    transformed = "other " * 450
    assert len(word_tokenize(transformed)) > MAX_PARAGRAPH_TOKENS
    assert word_diff_spans(original, transformed) == []
    assert compute_diff_spans(original, transformed) == []


def test_paragraph_ranges_keep_offsets_and_skip_blank_paragraphs():
    """Paragraph starts are offsets into the source text."""
    paragraphs = paragraph_ranges("A\n\n\n\nB\n\n  \n\nC")
    assert [(p.text, p.start) for p in paragraphs] == [("A", 0), ("B", 5), ("C", 12)]


def test_merge_nearby_groups_close_spans():
    """Spans within the gap merge and keep their parts as sub-spans."""
    spans = [DiffSpan(0, 3, "x"), DiffSpan(10, 13, "y"), DiffSpan(50, 53, "z")]
    merged = merge_nearby(spans, gap=20)
    assert merged == [
        DiffSpan(
            0,
            13,
            "x",
            (SubSpan(0, 3, "x"), SubSpan(10, 13, "y")),
        ),
        DiffSpan(50, 53, "z"),
    ]


def test_suppress_explained_drops_contained_spans():
    """Diff spans inside an annotated span are already explained."""
    annotated = [
        AnnotatedSpan(0, 10, "TechCorp GmbH", "[ORG]", "entity_generalization", 1, "semantic")
    ]
    spans = [DiffSpan(2, 5, "a"), DiffSpan(8, 12, "b")]
    assert suppress_explained(spans, annotated) == [DiffSpan(8, 12, "b")]
