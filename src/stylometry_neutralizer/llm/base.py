from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List


class LLMClient(ABC):
    """Capability used by the pipeline for the optional rewrite and similarity steps."""

    @abstractmethod
    def generate(self, prompt: str, model: str) -> str:
        """Return the model's raw completion for ``prompt``."""
        raise NotImplementedError

    @abstractmethod
    def embed(self, text: str, model: str) -> List[float]:
        """Return an embedding vector for ``text``."""
        raise NotImplementedError
