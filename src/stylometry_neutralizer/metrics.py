from __future__ import annotations

import math
import re
import statistics
from collections import Counter
from dataclasses import fields
from typing import List, Sequence

from .lexicon import Lexicon, get_lexicon
from .models import Metrics
from .tokenization import count_punctuation, split_sentences, tokenize

WORD_TOKEN_RE = re.compile(r"[a-züöäß]{3,}")


def round_half_up(value: float, places: int = 4) -> float:
    """
    Round half up to ``places`` decimals.

    ``round()`` rounds ties to even, so it cannot be used for stored scores.
    """
    factor = 10**places
    return math.floor(value * factor + 0.5) / factor


def round4(value: float) -> float:
    return round_half_up(value, 4)


def population_stdev(values: Sequence[float]) -> float:
    return float(statistics.pstdev(values)) if len(values) > 1 else 0.0


def trigrams(tokens: Sequence[str]) -> List[str]:
    return [
        f"{tokens[i]}_{tokens[i + 1]}_{tokens[i + 2]}" for i in range(len(tokens) - 2)
    ]


def compute_metrics(
    text: str, language: str, lexicon: Lexicon | None = None
) -> Metrics:
    """
    Compute the nine stylometric metrics for ``text``.

    Every ratio is rounded to four decimals so identical input always yields
    identical output. Text without any token yields all zeros.
    """
    lexicon = lexicon or get_lexicon(language)
    tokens = tokenize(text)
    total = len(tokens)
    if total == 0:
        return Metrics()

    sentences = split_sentences(text)
    sentence_lengths = [len(tokenize(sentence)) for sentence in sentences]
    avg_length = sum(sentence_lengths) / len(sentence_lengths)

    frequencies = Counter(tokens)
    hapax_count = sum(1 for count in frequencies.values() if count == 1)
    stopword_count = sum(1 for token in tokens if token in lexicon.stopwords)

    word_tokens = [token for token in tokens if WORD_TOKEN_RE.search(token)]
    rare_count = sum(1 for token in word_tokens if lexicon.is_rare_word(token))
    rare_rate = rare_count / len(word_tokens) if word_tokens else 0.0

    grams = trigrams(tokens)
    ngram_uniqueness = len(set(grams)) / len(grams) if grams else 0.0

    return Metrics(
        sentence_count=len(sentences),
        avg_sentence_length_tokens=round4(avg_length),
        stdev_sentence_length_tokens=round4(population_stdev(sentence_lengths)),
        punctuation_rate=round4(count_punctuation(text) / total),
        type_token_ratio=round4(len(frequencies) / total),
        hapax_rate=round4(hapax_count / total),
        stopword_rate=round4(stopword_count / total),
        rare_word_rate=round4(rare_rate),
        basic_ngram_uniqueness=round4(ngram_uniqueness),
    )


def compute_delta(before: Metrics, after: Metrics) -> Metrics:
    """Per-field ``after - before``; the sentence count stays an integer."""
    values = {}
    for item in fields(Metrics):
        difference = getattr(after, item.name) - getattr(before, item.name)
        values[item.name] = (
            difference if item.name == "sentence_count" else round4(difference)
        )
    return Metrics(**values)
