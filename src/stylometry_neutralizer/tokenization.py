from __future__ import annotations

import re
from typing import List

from .models import Token

NON_WORD_RE = re.compile(r"[^a-zA-ZäöüßÄÖÜ0-9\s]")
SENTENCE_BOUNDARY_RE = re.compile(r"(?<=[.!?])\s+")
PUNCTUATION_RE = re.compile(r"[.,;:!?]")
ALPHA_WORD_RE = re.compile(r"\b[^\W\d_]{2,}\b")


def tokenize(text: str) -> List[str]:
    """Lowercase alphanumeric tokens (umlauts included) used by the metrics."""
    return NON_WORD_RE.sub(" ", text).lower().split()


def split_sentences(text: str) -> List[str]:
    """
    Split on sentence-ending punctuation followed by whitespace.

    Text without ``.``, ``!`` or ``?`` comes back as a single sentence.
    """
    parts = (part.strip() for part in SENTENCE_BOUNDARY_RE.split(text))
    return [part for part in parts if part]


def count_punctuation(text: str) -> int:
    return len(PUNCTUATION_RE.findall(text))


def tokenize_words(text: str) -> List[Token]:
    """Tokenize alphabetic words (2+ letters) with character offsets."""
    tokens: List[Token] = []
    for match in ALPHA_WORD_RE.finditer(text):
        tokens.append(
            Token(text=match.group(), start_char=match.start(), end_char=match.end())
        )
    return tokens
