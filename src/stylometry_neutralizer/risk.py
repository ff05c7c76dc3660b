from __future__ import annotations

from collections import Counter
from typing import List

from .lexicon import Lexicon, get_lexicon
from .models import RiskSpan
from .tokenization import tokenize_words


def annotate_risk(
    text: str, language: str, lexicon: Lexicon | None = None
) -> List[RiskSpan]:
    """
    Flag distinctive words of the original text.

    Offsets refer to ``text`` as given; run this on the untransformed input.
    Stopwords are never flagged.
    """
    lexicon = lexicon or get_lexicon(language)
    tokens = tokenize_words(text)
    frequencies = Counter(token.text.lower() for token in tokens)

    spans: List[RiskSpan] = []
    for token in tokens:
        word = token.text.lower()
        if word in lexicon.stopwords:
            continue
        is_hapax = frequencies[word] == 1
        is_rare = lexicon.is_rare_word(word)
        if is_rare:
            feature = "hapax" if is_hapax else "rare_word"
            spans.append(RiskSpan(token.start_char, token.end_char, feature, "high"))
        elif is_hapax:
            spans.append(RiskSpan(token.start_char, token.end_char, "hapax", "medium"))
    return spans
