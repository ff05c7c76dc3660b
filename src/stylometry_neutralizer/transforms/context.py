from __future__ import annotations

import re
from typing import List

from ..models import EditRecord, TransformResult
from .base import Transform

WINDOW_CHARS = 200
MAX_OCCURRENCES = 2


class ContextDampening(Transform):
    """
    Thin out repeated first-person pronouns and collapse redundant discourse pairs.

    Each pronoun form is tracked separately. Once a form has occurred more than
    ``MAX_OCCURRENCES`` times with gaps no larger than ``WINDOW_CHARS``, further
    occurrences become the neutral pronoun. Matching is case-sensitive, so a
    sentence-initial "Ich" or "My" is left alone.
    """

    name = "context_dampening"

    def apply(self, text: str, language: str) -> TransformResult:
        lexicon = self.lexicon(language)
        edits: List[EditRecord] = []

        result = text
        for pronoun in lexicon.pronouns:
            result = self._dampen(result, pronoun, lexicon.neutral_pronoun, edits)

        for pattern, replacement in lexicon.discourse_pairs:

            def collapse(match: re.Match[str], replacement: str = replacement) -> str:
                edits.append(self.edit(match.group(), replacement))
                return replacement

            result = re.sub(pattern, collapse, result, flags=re.IGNORECASE)

        return TransformResult(text=result, edits=tuple(edits))

    def _dampen(
        self, text: str, pronoun: str, neutral: str, edits: List[EditRecord]
    ) -> str:
        last_index = -WINDOW_CHARS - 1
        count = 0

        def replace(match: re.Match[str]) -> str:
            nonlocal last_index, count
            if match.start() - last_index > WINDOW_CHARS:
                count = 0
            count += 1
            last_index = match.start()
            if count <= MAX_OCCURRENCES:
                return match.group()
            edits.append(self.edit(match.group(), neutral))
            return neutral

        return re.sub(rf"\b{re.escape(pronoun)}\b", replace, text)
