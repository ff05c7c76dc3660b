from __future__ import annotations

from .base import LLMClient
from .ollama import list_ollama_models
from .openai_client import OpenAICompatibleClient

__all__ = ["LLMClient", "OpenAICompatibleClient", "list_ollama_models"]
