from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Iterable, List, Mapping, Sequence

from .lexicon import Lexicon
from .models import STRENGTHS, ChainResult, EditRecord
from .transforms import (
    ContextDampening,
    EntityGeneralization,
    LexicalNeutralization,
    NumbersBucketing,
    SyntaxNormalization,
    Transform,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ChainStage:
    """A transform that runs once the requested strength reaches ``min_strength``."""

    transform: Transform
    min_strength: int


def default_stages(lexicons: Mapping[str, Lexicon] | None = None) -> List[ChainStage]:
    """Return the standard five-stage chain in execution order."""
    return [
        ChainStage(SyntaxNormalization(lexicons), 0),
        ChainStage(EntityGeneralization(lexicons), 1),
        ChainStage(NumbersBucketing(lexicons), 1),
        ChainStage(ContextDampening(lexicons), 2),
        ChainStage(LexicalNeutralization(lexicons), 3),
    ]


def validate_strength(strength: int) -> int:
    if isinstance(strength, bool) or strength not in STRENGTHS:
        raise ValueError(
            f"strength must be one of {list(STRENGTHS)}, got {strength!r}."
        )
    return strength


class TransformChain:
    """
    Folds text through an ordered list of stages gated by strength.

    Stages compose left to right; each sees the previous stage's output. Edit
    records from all stages are concatenated in execution order and stamped
    with the stage's strength tier.
    """

    def __init__(self, stages: Iterable[ChainStage] | None = None) -> None:
        self.stages: Sequence[ChainStage] = (
            tuple(stages) if stages is not None else tuple(default_stages())
        )

    def active_stages(self, strength: int) -> List[ChainStage]:
        validate_strength(strength)
        return [stage for stage in self.stages if stage.min_strength <= strength]

    def run(self, text: str, language: str, strength: int) -> ChainResult:
        edits: List[EditRecord] = []
        applied: List[str] = []
        current = text
        for stage in self.active_stages(strength):
            result = stage.transform.apply(current, language)
            logger.debug(
                "Stage %s produced %d edit(s) (%d -> %d chars).",
                stage.transform.name,
                len(result.edits),
                len(current),
                len(result.text),
            )
            edits.extend(
                replace(edit, strength=stage.min_strength) for edit in result.edits
            )
            applied.append(stage.transform.name)
            current = result.text
        return ChainResult(text=current, edits=tuple(edits), applied=tuple(applied))
