from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .chain import TransformChain, validate_strength
from .config import LLMSettings, NeutralizerConfig
from .diff import compute_diff_spans, suppress_explained
from .llm.base import LLMClient
from .metrics import compute_delta, compute_metrics, round4
from .models import LANGUAGES, LLMStatus, PipelineResult
from .rewriting import LLMRewriter
from .risk import annotate_risk
from .scoring import compute_ssi, compute_sui, uniqueness_reduction_score
from .spans import resolve_span_offsets

logger = logging.getLogger(__name__)

LLM_USED = "llm_transform"
LLM_FAILED = "llm_failed_fallback"
DEFAULT_MAX_INPUT_CHARS = 100_000


@dataclass(slots=True)
class TransformRequest:
    """One text to neutralize, with its language, strength and model options."""

    text: str
    language: str = "de"
    strength: int = 1
    llm: LLMSettings = field(default_factory=LLMSettings)

    @classmethod
    def from_config(cls, text: str, config: NeutralizerConfig) -> "TransformRequest":
        return cls(
            text=text,
            language=config.language,
            strength=config.strength,
            llm=config.llm,
        )


def validate_request(
    request: TransformRequest, max_input_chars: int = DEFAULT_MAX_INPUT_CHARS
) -> None:
    """Raise ``ValueError`` for input that must not reach any stage."""
    if not isinstance(request.text, str) or not request.text.strip():
        raise ValueError("text must be a non-empty string.")
    if len(request.text) > max_input_chars:
        raise ValueError(
            f"text is {len(request.text)} characters; the limit is {max_input_chars}."
        )
    if request.language not in LANGUAGES:
        raise ValueError(
            f"language must be one of {list(LANGUAGES)}, got {request.language!r}."
        )
    validate_strength(request.strength)


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Cosine similarity rounded to four decimals; 0 when either vector has zero norm."""
    left = np.asarray(a, dtype=float)
    right = np.asarray(b, dtype=float)
    norm_left = float(np.linalg.norm(left))
    norm_right = float(np.linalg.norm(right))
    if norm_left == 0 or norm_right == 0:
        return 0.0
    return round4(float(np.dot(left, right)) / (norm_left * norm_right))


def _apply_llm(
    text: str,
    request: TransformRequest,
    client: LLMClient | None,
) -> Tuple[str, LLMStatus, Optional[str]]:
    if not request.llm.enabled or client is None:
        return text, "skipped", None
    rewriter = LLMRewriter(client, request.llm.model)
    try:
        rewritten = rewriter.rewrite(text, request.language, request.strength)
    except Exception as exc:
        logger.warning("LLM rewrite failed, keeping deterministic result: %s", exc)
        return text, "failed_fallback", LLM_FAILED
    if rewritten is None:
        return text, "failed_fallback", LLM_FAILED
    return rewritten, "used", LLM_USED


def _semantic_similarity(
    original: str, final: str, request: TransformRequest, client: LLMClient | None
) -> Optional[float]:
    model = request.llm.embedding_model
    if not model or client is None:
        return None
    try:
        before = client.embed(original, model)
        after = client.embed(final, model)
        return cosine_similarity(before, after)
    except Exception as exc:
        logger.warning("Embedding failed, similarity omitted: %s", exc)
        return None


def run_pipeline(
    request: TransformRequest,
    client: LLMClient | None = None,
    chain: TransformChain | None = None,
    max_input_chars: int = DEFAULT_MAX_INPUT_CHARS,
) -> PipelineResult:
    """
    Neutralize ``request.text`` and measure the effect.

    The deterministic chain always runs. The model rewrite and the similarity
    step only run when a client is supplied, and their failures are reported
    through ``llm_status`` and a missing ``semantic_similarity`` instead of
    raising.
    """
    validate_request(request, max_input_chars)
    chain = chain or TransformChain()
    original = request.text

    metrics_before = compute_metrics(original, request.language)
    chain_result = chain.run(original, request.language, request.strength)
    applied: List[str] = list(chain_result.applied)

    final, llm_status, llm_stage = _apply_llm(chain_result.text, request, client)
    if llm_stage is not None:
        applied.append(llm_stage)

    metrics_after = compute_metrics(final, request.language)
    annotated = resolve_span_offsets(final, chain_result.edits)
    unattributed = suppress_explained(compute_diff_spans(original, final), annotated)

    return PipelineResult(
        original_text=original,
        transformed_text=final,
        metrics_before=metrics_before,
        metrics_after=metrics_after,
        delta=compute_delta(metrics_before, metrics_after),
        uniqueness_reduction_score=uniqueness_reduction_score(
            metrics_before, metrics_after
        ),
        sui=compute_sui(metrics_before, metrics_after),
        ssi=compute_ssi(metrics_before, metrics_after),
        annotated_spans=tuple(annotated),
        risk_annotations=tuple(annotate_risk(original, request.language)),
        unattributed_spans=tuple(unattributed),
        applied=tuple(applied),
        llm_status=llm_status,
        semantic_similarity=_semantic_similarity(original, final, request, client),
    )
