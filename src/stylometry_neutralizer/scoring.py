"""
Versioned composite indices.

Any change to a weight or to the structure of a formula must come with a new
``*_FORMULA_VERSION`` string; consumers compare versions to decide whether two
stored scores are comparable.
"""

from __future__ import annotations

import math
from types import MappingProxyType
from typing import Mapping

from .models import IndexScores, Metrics

SUI_FORMULA_VERSION = "sui-v1.0"
SSI_FORMULA_VERSION = "ssi-v1.0"

# hapax and rare overlap heavily, so each gets a quarter; TTR is the more
# independent diversity signal.
SUI_WEIGHTS: Mapping[str, float] = MappingProxyType(
    {
        "hapax_rate": 0.25,
        "rare_word_rate": 0.25,
        "type_token_ratio": 0.20,
        "stdev_sentence_length_tokens": 0.30,
        "stdev_norm_factor": 10.0,
    }
)

SSI_WEIGHTS: Mapping[str, float] = MappingProxyType(
    {
        "basic_ngram_uniqueness": 0.40,
        "rare_word_rate": 0.35,
        "stopword_complement": 0.25,
    }
)

REDUCTION_WEIGHTS: Mapping[str, float] = MappingProxyType(
    {
        "hapax_rate": 0.25,
        "rare_word_rate": 0.25,
        "type_token_ratio": 0.20,
        "stdev_sentence_length_tokens": 0.30,
    }
)


def clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


def to_percent(score: float) -> float:
    """Scale a [0, 1] score to [0, 100] with two decimals, rounding half up."""
    return math.floor(score * 10000 + 0.5) / 100


def sui_value(metrics: Metrics) -> float:
    """Stylometric Uniqueness Index of a single snapshot, in [0, 100]."""
    w = SUI_WEIGHTS
    stdev_term = min(
        metrics.stdev_sentence_length_tokens / w["stdev_norm_factor"], 1.0
    )
    score = (
        w["hapax_rate"] * metrics.hapax_rate
        + w["rare_word_rate"] * metrics.rare_word_rate
        + w["type_token_ratio"] * metrics.type_token_ratio
        + w["stdev_sentence_length_tokens"] * stdev_term
    )
    return to_percent(score)


def ssi_value(metrics: Metrics) -> float:
    """Semantic Specificity Index of a single snapshot, in [0, 100]."""
    w = SSI_WEIGHTS
    score = (
        w["basic_ngram_uniqueness"] * metrics.basic_ngram_uniqueness
        + w["rare_word_rate"] * metrics.rare_word_rate
        + w["stopword_complement"] * (1 - metrics.stopword_rate)
    )
    return to_percent(score)


def _index(version: str, weights: Mapping[str, float], before: float, after: float) -> IndexScores:
    return IndexScores(
        formula_version=version,
        weights=dict(weights),
        value_before=before,
        value_after=after,
        delta=before - after,
    )


def compute_sui(before: Metrics, after: Metrics) -> IndexScores:
    return _index(SUI_FORMULA_VERSION, SUI_WEIGHTS, sui_value(before), sui_value(after))


def compute_ssi(before: Metrics, after: Metrics) -> IndexScores:
    return _index(SSI_FORMULA_VERSION, SSI_WEIGHTS, ssi_value(before), ssi_value(after))


def relative_reduction(before: float, after: float) -> float:
    """Fraction of ``before`` removed by the transformation; 0 without a baseline."""
    if before <= 0:
        return 0.0
    return clamp01((before - after) / before)


def uniqueness_reduction_score(before: Metrics, after: Metrics) -> float:
    """
    Weighted relative reduction of the identifying metrics, in [0, 100].

    A metric that was already zero contributes nothing: no baseline signal
    means no reduction was achieved.
    """
    score = sum(
        weight
        * relative_reduction(getattr(before, name), getattr(after, name))
        for name, weight in REDUCTION_WEIGHTS.items()
    )
    return to_percent(score)
