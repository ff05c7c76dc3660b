from __future__ import annotations

import importlib
import logging
import time
from typing import Any, Callable, List, cast

from ..config import LLMSettings
from .base import LLMClient

logger = logging.getLogger(__name__)

OpenAI: Callable[..., Any] | None = None


class OpenAICompatibleClient(LLMClient):
    """
    Chat-completion and embedding client for OpenAI-compatible servers.

    Ollama and LM Studio both expose this API under ``<base_url>/v1``. Every
    call is retried up to ``settings.max_attempts`` times with a fixed delay.
    """

    def __init__(self, settings: LLMSettings, api_key: str | None = None) -> None:
        self._settings = settings
        self._api_key = api_key or settings.resolved_api_key()
        self._client_factory: Callable[..., Any] = _load_openai_factory()
        self._client: Any | None = None
        self._max_attempts = max(1, settings.max_attempts)

    @property
    def settings(self) -> LLMSettings:
        return self._settings

    def generate(self, prompt: str, model: str) -> str:
        def call(client: Any) -> str:
            response: Any = client.chat.completions.create(
                model=model,
                messages=[{"role": "user", "content": prompt}],
                temperature=self._settings.temperature,
                timeout=self._settings.request_timeout,
            )
            return self._extract_text(response)

        return self._with_retries("generate", model, call)

    def embed(self, text: str, model: str) -> List[float]:
        def call(client: Any) -> List[float]:
            response: Any = client.embeddings.create(
                model=model,
                input=text,
                timeout=self._settings.request_timeout,
            )
            data = getattr(response, "data", None)
            if not data:
                raise RuntimeError("Embedding response contains no vectors.")
            return [float(value) for value in data[0].embedding]

        return self._with_retries("embed", model, call)

    def _with_retries(self, operation: str, model: str, call: Callable[[Any], Any]) -> Any:
        attempt = 0
        last_error: Exception | None = None
        while attempt < self._max_attempts:
            attempt += 1
            logger.debug(
                "%s attempt %s/%s (model=%s)", operation, attempt, self._max_attempts, model
            )
            try:
                return call(self._ensure_client())
            except Exception as exc:
                last_error = exc
                logger.warning(
                    "%s failed for model=%s (attempt %s/%s): %s",
                    operation,
                    model,
                    attempt,
                    self._max_attempts,
                    exc,
                )
                if attempt >= self._max_attempts:
                    break
                time.sleep(self._settings.retry_delay)
        raise RuntimeError(f"LLM {operation} failed after retries.") from last_error

    def _ensure_client(self) -> Any:
        if self._client is None:
            self._client = self._client_factory(
                api_key=self._api_key,
                base_url=f"{self._settings.resolved_base_url()}/v1",
            )
        return self._client

    @staticmethod
    def _extract_text(response: Any) -> str:
        choices = getattr(response, "choices", None)
        if not choices:
            raise RuntimeError("Completion response is missing choices.")
        message = getattr(choices[0], "message", None)
        content = getattr(message, "content", None)
        if content is None:
            raise RuntimeError("Completion response has no message content.")
        return cast(str, content)


def _load_openai_factory() -> Callable[..., Any]:
    """Dynamically import the OpenAI client factory to avoid hard dependency at import."""
    global OpenAI
    if OpenAI is not None:
        return OpenAI
    try:  # pragma: no cover - import guard
        module = importlib.import_module("openai")
    except Exception as exc:  # pragma: no cover - handled at runtime
        raise RuntimeError(
            "openai package is not installed. Install extras via 'pip install .[llm-openai]'."
        ) from exc
    openai_cls = getattr(module, "OpenAI", None)
    if openai_cls is None:  # pragma: no cover
        raise RuntimeError("openai.OpenAI client class is unavailable in this environment.")
    OpenAI = cast(Callable[..., Any], openai_cls)
    return OpenAI
