from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Mapping

from ..lexicon import DEFAULT_LEXICONS, Lexicon
from ..models import EditRecord, TransformResult


class Transform(ABC):
    """
    A pure text rewrite stage.

    Implementations must not keep state between calls: ``apply`` receives the
    text and language and returns the new text plus the edits it made.
    """

    name: str = ""

    def __init__(self, lexicons: Mapping[str, Lexicon] | None = None) -> None:
        self._lexicons = lexicons if lexicons is not None else DEFAULT_LEXICONS

    def lexicon(self, language: str) -> Lexicon:
        try:
            return self._lexicons[language]
        except KeyError:
            raise ValueError(f"Unsupported language '{language}'.") from None

    def edit(self, original: str, replacement: str) -> EditRecord:
        return EditRecord(
            original_fragment=original, replaced_with=replacement, transform=self.name
        )

    @abstractmethod
    def apply(self, text: str, language: str) -> TransformResult:
        """Return the rewritten text and the edits made."""
        raise NotImplementedError
