"""
Paragraph-scoped word diff between the original and the transformed text.

Used to surface edits that no transform recorded, typically those made by the
optional language-model rewrite.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List, Literal, Sequence, Tuple

from .models import AnnotatedSpan, DiffSpan, SubSpan

MAX_PARAGRAPH_TOKENS = 800
MERGE_GAP = 20

WORD_OR_SPACE_RE = re.compile(r"\S+|\s+")
PARAGRAPH_BREAK_RE = re.compile(r"\n{2,}")

DiffOpKind = Literal["equal", "insert", "delete"]


@dataclass(frozen=True, slots=True)
class DiffOp:
    op: DiffOpKind
    token: str


@dataclass(frozen=True, slots=True)
class Paragraph:
    text: str
    start: int


def word_tokenize(text: str) -> List[str]:
    """Split into alternating word and whitespace tokens; ``"".join`` restores the text."""
    return WORD_OR_SPACE_RE.findall(text)


def lcs_table(a: Sequence[str], b: Sequence[str]) -> List[List[int]]:
    rows, cols = len(a), len(b)
    table = [[0] * (cols + 1) for _ in range(rows + 1)]
    for i in range(1, rows + 1):
        for j in range(1, cols + 1):
            if a[i - 1] == b[j - 1]:
                table[i][j] = table[i - 1][j - 1] + 1
            else:
                table[i][j] = max(table[i - 1][j], table[i][j - 1])
    return table


def backtrack_ops(
    table: List[List[int]], a: Sequence[str], b: Sequence[str]
) -> List[DiffOp]:
    """
    Walk the LCS table back into an ordered edit script.

    Ties prefer ``insert`` so that, within a replaced region, inserted tokens
    come after the deleted ones once the script is reversed.
    """
    ops: List[DiffOp] = []
    i, j = len(a), len(b)
    while i > 0 or j > 0:
        if i > 0 and j > 0 and a[i - 1] == b[j - 1]:
            ops.append(DiffOp("equal", b[j - 1]))
            i -= 1
            j -= 1
        elif j > 0 and (i == 0 or table[i][j - 1] >= table[i - 1][j]):
            ops.append(DiffOp("insert", b[j - 1]))
            j -= 1
        else:
            ops.append(DiffOp("delete", a[i - 1]))
            i -= 1
    ops.reverse()
    return ops


def paragraph_ranges(text: str) -> List[Paragraph]:
    """Split on blank-line runs, keeping non-blank paragraphs with their start offsets."""
    paragraphs: List[Paragraph] = []
    last_end = 0
    for match in PARAGRAPH_BREAK_RE.finditer(text):
        chunk = text[last_end : match.start()]
        if chunk.strip():
            paragraphs.append(Paragraph(chunk, last_end))
        last_end = match.end()
    tail = text[last_end:]
    if tail.strip():
        paragraphs.append(Paragraph(tail, last_end))
    return paragraphs


def word_diff_spans(original: str, transformed: str, offset: int = 0) -> List[DiffSpan]:
    """
    Raw changed regions of one paragraph, positioned at ``offset`` in the full text.

    Paragraphs with more than ``MAX_PARAGRAPH_TOKENS`` tokens on either side
    are skipped and yield no spans.
    """
    original_tokens = word_tokenize(original)
    transformed_tokens = word_tokenize(transformed)
    if (
        len(original_tokens) > MAX_PARAGRAPH_TOKENS
        or len(transformed_tokens) > MAX_PARAGRAPH_TOKENS
    ):
        return []

    table = lcs_table(original_tokens, transformed_tokens)
    spans: List[DiffSpan] = []
    cursor = offset
    span_start = -1
    pending = ""

    for entry in backtrack_ops(table, original_tokens, transformed_tokens):
        if entry.op == "delete":
            pending += entry.token
            continue
        if entry.op == "insert" and not entry.token.isspace():
            if span_start == -1:
                span_start = cursor
        else:
            if span_start != -1:
                spans.append(DiffSpan(span_start, cursor, pending.strip()))
                span_start = -1
            pending = ""
        cursor += len(entry.token)

    if span_start != -1:
        spans.append(DiffSpan(span_start, cursor, pending.strip()))
    return spans


def merge_nearby(spans: Sequence[DiffSpan], gap: int = MERGE_GAP) -> List[DiffSpan]:
    """
    Merge spans separated by at most ``gap`` characters.

    A merged span keeps the first constituent's ``original_fragment`` and lists
    every constituent in ``sub_spans``; an unmerged span has no sub-spans.
    """
    groups: List[List[DiffSpan]] = []
    for span in spans:
        if groups and span.start - groups[-1][-1].end <= gap:
            groups[-1].append(span)
        else:
            groups.append([span])

    merged: List[DiffSpan] = []
    for group in groups:
        first = group[0]
        if len(group) == 1:
            merged.append(first)
            continue
        sub_spans: Tuple[SubSpan, ...] = tuple(
            SubSpan(item.start, item.end, item.original_fragment) for item in group
        )
        merged.append(
            DiffSpan(first.start, group[-1].end, first.original_fragment, sub_spans)
        )
    return merged


def compute_diff_spans(original: str, transformed: str) -> List[DiffSpan]:
    """
    Diff ``original`` against ``transformed`` paragraph by paragraph.

    Paragraphs are paired by index; a transformed paragraph without an original
    counterpart is diffed against the empty string. Text with at most one
    paragraph is diffed as a whole.
    """
    original_paragraphs = paragraph_ranges(original)
    transformed_paragraphs = paragraph_ranges(transformed)

    if len(transformed_paragraphs) <= 1:
        raw = word_diff_spans(original, transformed, 0)
    else:
        raw = []
        for index, paragraph in enumerate(transformed_paragraphs):
            source = (
                original_paragraphs[index].text
                if index < len(original_paragraphs)
                else ""
            )
            raw.extend(word_diff_spans(source, paragraph.text, paragraph.start))
    return merge_nearby(raw, MERGE_GAP)


def suppress_explained(
    diff_spans: Iterable[DiffSpan], annotated: Sequence[AnnotatedSpan]
) -> List[DiffSpan]:
    """Drop diff spans lying entirely inside an annotated span."""
    return [
        span
        for span in diff_spans
        if not any(
            known.start <= span.start and span.end <= known.end for known in annotated
        )
    ]
