from __future__ import annotations

from types import MappingProxyType
from typing import List, Mapping, Sequence

from .models import AnnotatedSpan, EditRecord, SignalType

SIGNAL_TYPES: Mapping[str, SignalType] = MappingProxyType(
    {
        "syntax_normalization": "structural",
        "entity_generalization": "semantic",
        "numbers_bucketing": "semantic",
        "context_dampening": "contextual",
        "lexical_neutralization": "lexical",
    }
)
DEFAULT_SIGNAL_TYPE: SignalType = "structural"


def resolve_span_offsets(
    text: str, edits: Sequence[EditRecord]
) -> List[AnnotatedSpan]:
    """
    Locate each edit's replacement in the final text with a forward-only cursor.

    Records are processed in execution order. A replacement is searched for at
    or after the end of the previously resolved span; records whose replacement
    cannot be found are dropped. A replacement word that also occurs naturally
    earlier in the text (for example "many") can be attributed to the wrong
    occurrence, and that occurrence then shadows later records.
    """
    spans: List[AnnotatedSpan] = []
    cursor = 0
    for edit in edits:
        if not edit.replaced_with:
            continue
        start = text.find(edit.replaced_with, cursor)
        if start == -1:
            continue
        end = start + len(edit.replaced_with)
        spans.append(
            AnnotatedSpan(
                start=start,
                end=end,
                original_fragment=edit.original_fragment,
                replaced_with=edit.replaced_with,
                transform=edit.transform,
                strength=edit.strength,
                signal_type=SIGNAL_TYPES.get(edit.transform, DEFAULT_SIGNAL_TYPE),
            )
        )
        cursor = end
    return spans
