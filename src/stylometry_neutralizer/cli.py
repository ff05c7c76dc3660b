from __future__ import annotations

import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Any

import typer
import yaml

from .config import DEFAULT_BASE_URLS, NeutralizerConfig, load_config
from .diff import compute_diff_spans
from .llm import OpenAICompatibleClient, list_ollama_models
from .llm.base import LLMClient
from .llm.ollama import DEFAULT_OLLAMA_URL
from .metrics import compute_metrics
from .pipeline import TransformRequest, run_pipeline
from .textutils import unescape_json_sequences

app = typer.Typer(help="Stylometry Neutralizer CLI.", no_args_is_help=True)


@app.callback()
def configure(
    log_level: str = typer.Option(
        "WARNING", "--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)."
    ),
) -> None:
    """Reduce stylometric signal in text and measure the effect."""
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise typer.BadParameter(f"Unknown log level '{log_level}'.")
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@app.command()
def transform(
    input_path: Path | None = typer.Option(
        None, exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    text: str | None = typer.Option(None, "--text", "-t", help="Inline input text."),
    config: Path | None = typer.Option(None, "--config", "-c"),
    language: str | None = typer.Option(None, "--language", "-l", help="de or en."),
    strength: int | None = typer.Option(None, "--strength", "-s", help="0-3."),
    unescape: bool = typer.Option(
        False,
        "--unescape/--no-unescape",
        help="Decode JSON escapes (\\n, \\t, \\\") in the input first.",
    ),
    llm_enabled: bool | None = typer.Option(
        None,
        "--llm-enabled/--llm-disabled",
        help="Toggle the model-backed rewrite step.",
    ),
    llm_provider: str | None = typer.Option(
        None, "--llm-provider", help="ollama or openai_compatible."
    ),
    llm_base_url: str | None = typer.Option(
        None, "--llm-base-url", help="Model server base URL."
    ),
    llm_model: str | None = typer.Option(None, "--llm-model", help="Rewrite model."),
    embedding_model: str | None = typer.Option(
        None, "--embedding-model", help="Embedding model for semantic similarity."
    ),
) -> None:
    """Neutralize text and emit the full result bundle as JSON."""
    cfg = load_config(config)
    _apply_overrides(
        cfg,
        language,
        strength,
        llm_enabled,
        llm_provider,
        llm_base_url,
        llm_model,
        embedding_model,
    )
    source = _read_input(input_path, text)
    if unescape:
        source = unescape_json_sequences(source)
    client = _build_client(cfg)
    try:
        result = run_pipeline(
            TransformRequest.from_config(source, cfg),
            client=client,
            max_input_chars=cfg.max_input_chars,
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    typer.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))


@app.command()
def metrics(
    input_path: Path | None = typer.Option(
        None, exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    text: str | None = typer.Option(None, "--text", "-t", help="Inline input text."),
    language: str = typer.Option("de", "--language", "-l", help="de or en."),
) -> None:
    """Print the stylometric metrics of a text as JSON."""
    source = _read_input(input_path, text)
    try:
        values = compute_metrics(source, language)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    typer.echo(json.dumps(asdict(values), indent=2))


@app.command()
def diff(
    original_path: Path = typer.Option(
        ..., "--original", exists=True, readable=True, dir_okay=False
    ),
    transformed_path: Path = typer.Option(
        ..., "--transformed", exists=True, readable=True, dir_okay=False
    ),
) -> None:
    """Print the word-diff spans between two files as JSON."""
    original = original_path.read_text(encoding="utf-8")
    transformed = transformed_path.read_text(encoding="utf-8")
    spans = compute_diff_spans(original, transformed)
    typer.echo(
        json.dumps([asdict(span) for span in spans], indent=2, ensure_ascii=False)
    )


@app.command()
def models(
    base_url: str = typer.Option(
        DEFAULT_OLLAMA_URL, "--base-url", help="Ollama server base URL."
    ),
) -> None:
    """List models installed on a local Ollama server."""
    typer.echo(json.dumps({"models": list_ollama_models(base_url)}, indent=2))


@app.command("print-config")
def print_config(config: Path | None = typer.Option(None, "--config", "-c")) -> None:
    """Print the effective configuration as YAML."""
    cfg = load_config(config)
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False, allow_unicode=True))


def main() -> None:
    app()


def _read_input(input_path: Path | None, text: str | None) -> str:
    if (input_path is None) == (text is None):
        raise typer.BadParameter("Provide exactly one of --input-path or --text.")
    if input_path is not None:
        return input_path.read_text(encoding="utf-8")
    return text or ""


def _apply_overrides(
    config: NeutralizerConfig,
    language: str | None,
    strength: int | None,
    llm_enabled: bool | None,
    llm_provider: str | None,
    llm_base_url: str | None,
    llm_model: str | None,
    embedding_model: str | None,
) -> None:
    """Apply CLI overrides to config fields when provided."""
    overrides: dict[str, Any] = {
        "language": language,
        "strength": strength,
    }
    for name, value in overrides.items():
        if value is not None:
            setattr(config, name, value)
    llm_overrides: dict[str, Any] = {
        "enabled": llm_enabled,
        "provider": llm_provider,
        "base_url": llm_base_url,
        "model": llm_model,
        "embedding_model": embedding_model,
    }
    if llm_provider is not None and llm_provider not in DEFAULT_BASE_URLS:
        raise typer.BadParameter(
            f"Unknown LLM provider '{llm_provider}'.", param_hint="--llm-provider"
        )
    for name, value in llm_overrides.items():
        if value is not None:
            setattr(config.llm, name, value)


def _build_client(config: NeutralizerConfig) -> LLMClient | None:
    if not config.llm.enabled and not config.llm.embedding_model:
        return None
    try:
        return OpenAICompatibleClient(config.llm)
    except (RuntimeError, ValueError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--llm-enabled") from exc


if __name__ == "__main__":
    main()
