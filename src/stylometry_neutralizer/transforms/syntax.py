from __future__ import annotations

import re
from typing import List

from ..models import EditRecord, TransformResult
from .base import Transform

HORIZONTAL_WS_RE = re.compile(r"[ \t]+")
SPACE_BEFORE_PUNCT_RE = re.compile(r"\s+([.,;:!?])")
MISSING_SPACE_RE = re.compile(r"([.,;:!?])(?=[a-zA-ZäöüßÄÖÜ])")
EXCESS_NEWLINES_RE = re.compile(r"\n{3,}")
ELLIPSIS_RE = re.compile(r"\.{2,}")


class SyntaxNormalization(Transform):
    """
    Minimal surface cleanup: whitespace, punctuation spacing, ellipses.

    Only the ellipsis collapse is recorded; spacing fixes are sub-token and
    carry no attributable signal.
    """

    name = "syntax_normalization"

    def apply(self, text: str, language: str) -> TransformResult:
        edits: List[EditRecord] = []

        def collapse_ellipsis(match: re.Match[str]) -> str:
            edits.append(self.edit(match.group(), "."))
            return "."

        result = HORIZONTAL_WS_RE.sub(" ", text)
        result = SPACE_BEFORE_PUNCT_RE.sub(r"\1", result)
        result = MISSING_SPACE_RE.sub(r"\1 ", result)
        result = EXCESS_NEWLINES_RE.sub("\n\n", result)
        result = ELLIPSIS_RE.sub(collapse_ellipsis, result)
        return TransformResult(text=result.strip(), edits=tuple(edits))
