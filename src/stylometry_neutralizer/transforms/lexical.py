from __future__ import annotations

import re
from typing import List

from ..models import EditRecord, TransformResult
from .base import Transform


def preserve_case(original: str, replacement: str) -> str:
    """Capitalize ``replacement`` when ``original`` starts with an uppercase letter."""
    first = original[:1]
    if first and first == first.upper() and first != first.lower():
        return replacement[:1].upper() + replacement[1:]
    return replacement


class LexicalNeutralization(Transform):
    """Swap high-intensity evaluative words for neutral ones (exact base forms only)."""

    name = "lexical_neutralization"

    def apply(self, text: str, language: str) -> TransformResult:
        lexicon = self.lexicon(language)
        edits: List[EditRecord] = []

        result = text
        for word, neutral in lexicon.synonyms.items():

            def swap(match: re.Match[str], neutral: str = neutral) -> str:
                replacement = preserve_case(match.group(), neutral)
                edits.append(self.edit(match.group(), replacement))
                return replacement

            result = re.sub(
                rf"\b{re.escape(word)}\b", swap, result, flags=re.IGNORECASE
            )

        return TransformResult(text=result, edits=tuple(edits))
