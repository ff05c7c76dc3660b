from __future__ import annotations

import re
from typing import List

from ..lexicon import Lexicon
from ..models import EditRecord, TransformResult
from .base import Transform

ORG_PLACEHOLDER = "[ORG]"
CITY_PLACEHOLDER = "[CITY]"
PERSON_PLACEHOLDER = "[PERSON]"

_CAPITALIZED = r"[A-ZÜÖÄ][a-zA-ZäöüßÄÖÜ]+"
NAME_PAIR_RE = re.compile(r"\b([A-ZÜÖÄ][a-züöäßÄÖÜ]+)\s+([A-ZÜÖÄ][a-züöäßÄÖÜ]+)\b")


def _org_pattern(lexicon: Lexicon) -> re.Pattern[str]:
    suffixes = "|".join(lexicon.org_suffixes)
    return re.compile(
        rf"\b{_CAPITALIZED}(?:\s+(?:&\s+)?{_CAPITALIZED})?\s+(?:{suffixes})\b"
    )


class EntityGeneralization(Transform):
    """
    High-precision placeholder substitution for organizations, cities and people.

    Passes run in a fixed order (organizations, cities, person names). The
    placeholders never appear in the city or name lists, so a later pass cannot
    re-match an earlier replacement.
    """

    name = "entity_generalization"

    def apply(self, text: str, language: str) -> TransformResult:
        lexicon = self.lexicon(language)
        edits: List[EditRecord] = []

        def replace_with(placeholder: str):
            def _replace(match: re.Match[str]) -> str:
                edits.append(self.edit(match.group(), placeholder))
                return placeholder

            return _replace

        def replace_person(match: re.Match[str]) -> str:
            if match.group(1) not in lexicon.first_names:
                return match.group()
            edits.append(self.edit(match.group(), PERSON_PLACEHOLDER))
            return PERSON_PLACEHOLDER

        result = _org_pattern(lexicon).sub(replace_with(ORG_PLACEHOLDER), text)
        for city in lexicon.cities:
            city_re = re.compile(rf"\b{re.escape(city)}\b")
            result = city_re.sub(replace_with(CITY_PLACEHOLDER), result)
        result = NAME_PAIR_RE.sub(replace_person, result)
        return TransformResult(text=result, edits=tuple(edits))
