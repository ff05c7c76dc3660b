from __future__ import annotations

from stylometry_neutralizer.metrics import compute_metrics
from stylometry_neutralizer.models import Metrics
from stylometry_neutralizer.scoring import (
    SSI_FORMULA_VERSION,
    SUI_FORMULA_VERSION,
    compute_ssi,
    compute_sui,
    relative_reduction,
    sui_value,
    uniqueness_reduction_score,
)
from tests.utils import DE_REQUEST


def test_indices_for_hand_computed_metrics():
    """SUI and SSI match hand-computed values."""
    metrics = compute_metrics("apple apple banana. cherry!", "en")
    sui = compute_sui(metrics, Metrics())
    ssi = compute_ssi(metrics, Metrics())
    assert sui.value_before == 55.5
    assert ssi.value_before == 100.0
    assert sui.value_after == 0.0
    assert ssi.value_after == 25.0


def test_index_delta_is_exact_difference():
    """Delta equals value_before - value_after exactly."""
    before = compute_metrics(DE_REQUEST, "de")
    after = compute_metrics("Ich wohne hier. Ich arbeite dort.", "de")
    for index in (compute_sui(before, after), compute_ssi(before, after)):
        assert index.delta == index.value_before - index.value_after
        assert 0.0 <= index.value_before <= 100.0
        assert 0.0 <= index.value_after <= 100.0


def test_indices_carry_version_and_weights():
    """Each index reports its formula version and full weight map."""
    sui = compute_sui(Metrics(), Metrics())
    ssi = compute_ssi(Metrics(), Metrics())
    assert sui.formula_version == SUI_FORMULA_VERSION == "sui-v1.0"
    assert ssi.formula_version == SSI_FORMULA_VERSION == "ssi-v1.0"
    assert sui.weights["stdev_norm_factor"] == 10.0
    assert sui.weights["hapax_rate"] == 0.25
    assert ssi.weights["basic_ngram_uniqueness"] == 0.40


def test_sui_clamps_sentence_length_spread():
    """Sentence-length spread contributes at most its full weight."""
    assert sui_value(Metrics(stdev_sentence_length_tokens=25.0)) == 30.0
    assert sui_value(Metrics(stdev_sentence_length_tokens=5.0)) == 15.0


def test_uniqueness_reduction_weights_relative_reductions():
    """Relative reductions are combined with the SUI weights."""
    before = Metrics(
        hapax_rate=0.5,
        rare_word_rate=1.0,
        type_token_ratio=0.75,
        stdev_sentence_length_tokens=1.0,
    )
    after = Metrics(
        hapax_rate=0.25,
        rare_word_rate=0.5,
        type_token_ratio=0.75,
        stdev_sentence_length_tokens=0.0,
    )
    assert uniqueness_reduction_score(before, after) == 55.0


def test_uniqueness_reduction_without_baseline_is_zero():
    """Zero baseline metrics count as no reduction."""
    after = Metrics(hapax_rate=0.4, rare_word_rate=0.2)
    assert uniqueness_reduction_score(Metrics(), after) == 0.0


def test_relative_reduction_is_clamped():
    """Increases clamp to 0 and the result never exceeds 1."""
    assert relative_reduction(0.2, 0.5) == 0.0
    assert relative_reduction(0.5, 0.0) == 1.0
    assert relative_reduction(0.0, 0.3) == 0.0
