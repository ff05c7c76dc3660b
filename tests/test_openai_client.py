from __future__ import annotations

from typing import Any

import pytest
import requests

from stylometry_neutralizer.config import LLMSettings
from stylometry_neutralizer.llm import ollama
from stylometry_neutralizer.llm import openai_client as oa_client


class DummyMessage:
    def __init__(self, content: str | None) -> None:
        self.content = content


class DummyChoice:
    def __init__(self, content: str | None) -> None:
        self.message = DummyMessage(content)


class DummyCompletion:
    def __init__(self, content: str | None) -> None:
        self.choices = [DummyChoice(content)]


class DummyEmbedding:
    def __init__(self, vector: list[float]) -> None:
        self.embedding = vector


class DummyEmbeddingResponse:
    def __init__(self, vector: list[float]) -> None:
        self.data = [DummyEmbedding(vector)]


def _install_dummy(monkeypatch, completions: Any, embeddings: Any = None):
    created: dict[str, Any] = {}

    class DummyChat:
        def __init__(self) -> None:
            self.completions = completions

    class DummyOpenAI:
        def __init__(self, **kwargs: Any) -> None:
            created.update(kwargs)
            self.chat = DummyChat()
            self.embeddings = embeddings

    monkeypatch.setattr(oa_client, "OpenAI", DummyOpenAI)
    return created


def test_client_retries_then_succeeds(monkeypatch):
    """Failed completions are retried and the first success is returned."""
    attempts = {"count": 0}

    class FlakyCompletions:
        def create(self, **kwargs: Any):
            attempts["count"] += 1
            if attempts["count"] == 1:
                raise RuntimeError("transient error")
            assert kwargs["messages"] == [{"role": "user", "content": "prompt"}]
            return DummyCompletion('{"transformedText": "ok"}')

    _install_dummy(monkeypatch, FlakyCompletions())
    client = oa_client.OpenAICompatibleClient(LLMSettings(retry_delay=0))
    assert client.generate("prompt", "llama3.2") == '{"transformedText": "ok"}'
    assert attempts["count"] == 2


def test_client_raises_after_max_attempts(monkeypatch):
    """Persistent failures raise RuntimeError chained from the last error."""

    class BrokenCompletions:
        def create(self, **_: Any):
            raise ConnectionError("offline")

    _install_dummy(monkeypatch, BrokenCompletions())
    client = oa_client.OpenAICompatibleClient(LLMSettings(max_attempts=2, retry_delay=0))
    with pytest.raises(RuntimeError) as excinfo:
        client.generate("prompt", "llama3.2")
    assert isinstance(excinfo.value.__cause__, ConnectionError)


def test_client_targets_v1_endpoint_with_local_key(monkeypatch):
    """The client talks to <base>/v1 and uses a placeholder key for local servers."""
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)

    class Completions:
        def create(self, **_: Any):
            return DummyCompletion("reply")

    created = _install_dummy(monkeypatch, Completions())
    client = oa_client.OpenAICompatibleClient(
        LLMSettings(provider="openai_compatible", retry_delay=0)
    )
    client.generate("prompt", "model")
    assert created["base_url"] == "http://localhost:1234/v1"
    assert created["api_key"] == "local"


def test_client_rejects_empty_completion(monkeypatch):
    """A completion without content counts as a failed attempt."""

    class EmptyCompletions:
        def create(self, **_: Any):
            return DummyCompletion(None)

    _install_dummy(monkeypatch, EmptyCompletions())
    client = oa_client.OpenAICompatibleClient(LLMSettings(max_attempts=1))
    with pytest.raises(RuntimeError):
        client.generate("prompt", "model")


def test_client_embeds_text(monkeypatch):
    """Embeddings are returned as a list of floats."""

    class Embeddings:
        def create(self, **kwargs: Any):
            assert kwargs["input"] == "Hallo"
            return DummyEmbeddingResponse([1, 2.5])

    _install_dummy(monkeypatch, completions=None, embeddings=Embeddings())
    client = oa_client.OpenAICompatibleClient(LLMSettings(retry_delay=0))
    assert client.embed("Hallo", "nomic-embed-text") == [1.0, 2.5]


class DummyTagsResponse:
    def __init__(self, payload: Any) -> None:
        self._payload = payload

    def raise_for_status(self) -> None:
        return None

    def json(self) -> Any:
        return self._payload


def test_list_ollama_models(monkeypatch):
    """Model names are read from the /api/tags reply."""
    seen: dict[str, Any] = {}

    def fake_get(url: str, timeout: float):
        seen["url"] = url
        seen["timeout"] = timeout
        return DummyTagsResponse({"models": [{"name": "llama3.2"}, {"name": "qwen2.5"}]})

    monkeypatch.setattr(ollama.requests, "get", fake_get)
    assert ollama.list_ollama_models("http://host:11434/") == ["llama3.2", "qwen2.5"]
    assert seen == {"url": "http://host:11434/api/tags", "timeout": 3.0}


def test_list_ollama_models_returns_empty_on_error(monkeypatch):
    """An unreachable server yields an empty list."""

    def fake_get(url: str, timeout: float):
        raise requests.ConnectionError("refused")

    monkeypatch.setattr(ollama.requests, "get", fake_get)
    assert ollama.list_ollama_models() == []
