from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Literal, Optional, Tuple

Language = Literal["de", "en"]
SignalType = Literal["lexical", "structural", "semantic", "contextual"]
RiskFeature = Literal["hapax", "rare_word"]
RiskLevel = Literal["high", "medium"]
LLMStatus = Literal["used", "skipped", "failed_fallback"]

LANGUAGES: Tuple[str, ...] = ("de", "en")
STRENGTHS: Tuple[int, ...] = (0, 1, 2, 3)


@dataclass(frozen=True, slots=True)
class Token:
    """Represents a token and its inclusive-exclusive character offsets."""

    text: str
    start_char: int
    end_char: int


@dataclass(frozen=True, slots=True)
class EditRecord:
    """
    A single replacement made by a transform.

    Carries no offset: later stages keep mutating the text, so positions are
    resolved against the final text once the chain has finished.
    """

    original_fragment: str
    replaced_with: str
    transform: str
    strength: int = 0


@dataclass(frozen=True, slots=True)
class TransformResult:
    """Output of one transform stage."""

    text: str
    edits: Tuple[EditRecord, ...] = ()


@dataclass(frozen=True, slots=True)
class ChainResult:
    """Output of the whole transform chain."""

    text: str
    edits: Tuple[EditRecord, ...]
    applied: Tuple[str, ...]


@dataclass(frozen=True, slots=True)
class AnnotatedSpan:
    """An edit record resolved to a range of the final text."""

    start: int
    end: int
    original_fragment: str
    replaced_with: str
    transform: str
    strength: int
    signal_type: SignalType
    kind: Literal["annotated"] = "annotated"


@dataclass(frozen=True, slots=True)
class RiskSpan:
    """A high-signal token in the original (untransformed) text."""

    start: int
    end: int
    feature: RiskFeature
    risk_level: RiskLevel
    kind: Literal["risk"] = "risk"


@dataclass(frozen=True, slots=True)
class SubSpan:
    start: int
    end: int
    original_fragment: str


@dataclass(frozen=True, slots=True)
class DiffSpan:
    """A changed region of the transformed text found by word diffing."""

    start: int
    end: int
    original_fragment: str
    sub_spans: Optional[Tuple[SubSpan, ...]] = None
    kind: Literal["diff"] = "diff"


@dataclass(frozen=True, slots=True)
class Metrics:
    """Lexical and structural measurements of one text snapshot."""

    sentence_count: int = 0
    avg_sentence_length_tokens: float = 0.0
    stdev_sentence_length_tokens: float = 0.0
    punctuation_rate: float = 0.0
    type_token_ratio: float = 0.0
    hapax_rate: float = 0.0
    stopword_rate: float = 0.0
    rare_word_rate: float = 0.0
    basic_ngram_uniqueness: float = 0.0


@dataclass(frozen=True, slots=True)
class IndexScores:
    """A versioned composite score before and after transformation."""

    formula_version: str
    weights: Dict[str, float]
    value_before: float
    value_after: float
    delta: float


@dataclass(frozen=True, slots=True)
class PipelineResult:
    """Everything produced for one transformation request."""

    original_text: str
    transformed_text: str
    metrics_before: Metrics
    metrics_after: Metrics
    delta: Metrics
    uniqueness_reduction_score: float
    sui: IndexScores
    ssi: IndexScores
    annotated_spans: Tuple[AnnotatedSpan, ...]
    risk_annotations: Tuple[RiskSpan, ...]
    unattributed_spans: Tuple[DiffSpan, ...]
    applied: Tuple[str, ...]
    llm_status: LLMStatus
    semantic_similarity: Optional[float] = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dictionary representation."""
        return dict(asdict(self))
