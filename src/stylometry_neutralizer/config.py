from __future__ import annotations

import os
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml

DEFAULT_BASE_URLS = {
    "ollama": "http://localhost:11434",
    "openai_compatible": "http://localhost:1234",
}
# Local model servers accept any key, but the OpenAI client refuses an empty one.
LOCAL_API_KEY = "local"


@dataclass(slots=True)
class LLMSettings:
    """Configuration block for the optional model-backed rewrite step."""

    enabled: bool = False
    provider: str = "ollama"
    base_url: str | None = None
    api_key: str | None = None
    api_key_env: str = "OPENAI_API_KEY"
    model: str = "llama3.2"
    embedding_model: str | None = None
    temperature: float = 0.0
    request_timeout: float = 30.0
    max_attempts: int = 3
    retry_delay: float = 1.0

    def resolved_base_url(self) -> str:
        if self.base_url:
            return self.base_url.rstrip("/")
        try:
            return DEFAULT_BASE_URLS[self.provider]
        except KeyError:
            raise ValueError(f"Unknown LLM provider '{self.provider}'.") from None

    def resolved_api_key(self) -> str:
        return self.api_key or os.environ.get(self.api_key_env) or LOCAL_API_KEY


@dataclass(slots=True)
class NeutralizerConfig:
    """Configuration options for a neutralization run."""

    language: str = "de"
    strength: int = 1
    max_input_chars: int = 100_000
    llm: LLMSettings = field(default_factory=LLMSettings)

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {item.name for item in fields(NeutralizerConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    if "llm" in data:
        llm_value = data["llm"]
        if isinstance(llm_value, LLMSettings):
            kwargs["llm"] = llm_value
        elif isinstance(llm_value, Mapping):
            kwargs["llm"] = _build_llm_settings(llm_value)
        elif llm_value is None:
            kwargs.pop("llm")
        else:
            raise ValueError("The llm configuration block must be a mapping.")
    return kwargs


def _build_llm_settings(data: Mapping[str, Any]) -> LLMSettings:
    llm_allowed = {item.name for item in fields(LLMSettings)}
    filtered = {key: data[key] for key in data if key in llm_allowed}
    provider = filtered.get("provider", "ollama")
    if provider not in DEFAULT_BASE_URLS:
        choices = ", ".join(sorted(DEFAULT_BASE_URLS))
        raise ValueError(f"Unknown LLM provider '{provider}'; expected one of: {choices}.")
    return LLMSettings(**filtered)


def config_from_dict(data: Mapping[str, Any] | None) -> NeutralizerConfig:
    """Build a NeutralizerConfig from a dictionary-like input."""
    if data is None:
        return NeutralizerConfig()
    return NeutralizerConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> NeutralizerConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> NeutralizerConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return NeutralizerConfig()
    return config_from_yaml(path)
