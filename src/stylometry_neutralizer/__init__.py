"""
stylometry_neutralizer package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .chain import ChainStage, TransformChain, default_stages
from .config import (
    LLMSettings,
    NeutralizerConfig,
    config_from_dict,
    config_from_yaml,
    load_config,
)
from .diff import compute_diff_spans
from .metrics import compute_delta, compute_metrics
from .pipeline import TransformRequest, run_pipeline
from .risk import annotate_risk
from .scoring import compute_ssi, compute_sui, uniqueness_reduction_score
from .spans import resolve_span_offsets
from .transforms import create_transform

__all__ = [
    "ChainStage",
    "TransformChain",
    "default_stages",
    "LLMSettings",
    "NeutralizerConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "compute_diff_spans",
    "compute_delta",
    "compute_metrics",
    "TransformRequest",
    "run_pipeline",
    "annotate_risk",
    "compute_ssi",
    "compute_sui",
    "uniqueness_reduction_score",
    "resolve_span_offsets",
    "create_transform",
]

__version__ = "0.1.0"
