from __future__ import annotations

import re
from typing import List

from ..lexicon import NumberLabels
from ..models import EditRecord, TransformResult
from .base import Transform

DATE_ISO_RE = re.compile(r"\b\d{4}-\d{2}-\d{2}\b")
DATE_EU_RE = re.compile(r"\b\d{1,2}[./]\d{1,2}[./]\d{2,4}\b")
YEAR_RE = re.compile(r"\b(?:1[0-9]{3}|20[0-9]{2})\b")
INTEGER_RE = re.compile(r"\b\d+\b")


def bucket_label(value: int, labels: NumberLabels) -> str:
    """Map a count to a coarse magnitude label."""
    if value <= 2:
        return labels.some
    if value <= 9:
        return labels.several
    return labels.many


def bucket_digits(digits: str, labels: NumberLabels) -> str:
    """Bucket a digit run of any length without converting all of it to an int."""
    significant = digits.lstrip("0")
    if len(significant) > 1:
        return labels.many
    return bucket_label(int(significant or "0"), labels)


class NumbersBucketing(Transform):
    """
    Replace dates and years with a vague time phrase and bucket bare integers.

    Dates run before years and years before integers; otherwise the digits of
    a date would be re-read as a year or a count.
    """

    name = "numbers_bucketing"

    def apply(self, text: str, language: str) -> TransformResult:
        labels = self.lexicon(language).number_labels
        edits: List[EditRecord] = []

        def to_time_ago(match: re.Match[str]) -> str:
            edits.append(self.edit(match.group(), labels.time_ago))
            return labels.time_ago

        def to_bucket(match: re.Match[str]) -> str:
            label = bucket_digits(match.group(), labels)
            edits.append(self.edit(match.group(), label))
            return label

        result = DATE_ISO_RE.sub(to_time_ago, text)
        result = DATE_EU_RE.sub(to_time_ago, result)
        result = YEAR_RE.sub(to_time_ago, result)
        result = INTEGER_RE.sub(to_bucket, result)
        return TransformResult(text=result, edits=tuple(edits))
