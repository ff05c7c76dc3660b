from __future__ import annotations

from typing import List

import pytest

from stylometry_neutralizer.llm.base import LLMClient
from stylometry_neutralizer.rewriting import (
    LLMRewriter,
    build_rewrite_prompt,
    extract_first_json,
    parse_rewrite_output,
)


class RecordingClient(LLMClient):
    def __init__(self, reply: str) -> None:
        self.reply = reply
        self.calls: List[tuple[str, str]] = []

    def generate(self, prompt: str, model: str) -> str:
        self.calls.append((prompt, model))
        return self.reply

    def embed(self, text: str, model: str) -> List[float]:
        raise NotImplementedError


def test_prompt_tiers_follow_strength():
    """Higher strengths request more aggressive rewriting."""
    assert "Replace ALL unusual" in build_rewrite_prompt("x", "en", 3)
    assert "aim for 10-18 words" in build_rewrite_prompt("x", "en", 2)
    conservative = build_rewrite_prompt("x", "en", 1)
    assert "Keep sentence structure and length close" in conservative
    assert build_rewrite_prompt("x", "en", 0) == conservative


def test_prompt_keeps_placeholders_and_language_note():
    """The prompt protects placeholders and asks for JSON in the right language."""
    prompt = build_rewrite_prompt("Ich wohne in [CITY].", "de", 1)
    assert "[PERSON], [CITY], [ORG]" in prompt
    assert "Antworte auf Deutsch. Keine Erklärungen." in prompt
    assert '{"transformedText":"..."}' in prompt
    assert prompt.endswith("Text:\nIch wohne in [CITY].")


def test_extract_first_json_ignores_braces_in_strings():
    """Braces inside string values do not end the object."""
    raw = 'Sure: {"transformedText": "a } b", "n": {"x": 1}} trailing'
    assert extract_first_json(raw) == '{"transformedText": "a } b", "n": {"x": 1}}'
    assert extract_first_json('{"transformedText": "open') is None
    assert extract_first_json("no braces") is None


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ('{"transformedText": "Ein ruhiger Text."}', "Ein ruhiger Text."),
        ('```json\n{"transformedText": "Eingezäunt."}\n```', "Eingezäunt."),
        ('{"transformedText": "Er sagte "Hallo" zu ihr."}', 'Er sagte "Hallo" zu ihr.'),
        ('{"transformedText": "Text mit {ok} darin."}', "Text mit {ok} darin."),
        ('Here you go: {"transformedText": "Zeile\\nZwei"}', "Zeile\nZwei"),
    ],
)
def test_parse_rewrite_output_accepts(raw: str, expected: str):
    """Fenced, embedded and loosely quoted replies are accepted."""
    assert parse_rewrite_output(raw) == expected


@pytest.mark.parametrize(
    "raw",
    [
        "42",
        '{"text": "falscher Schlüssel"}',
        '{"transformedText": 42}',
        "Kein JSON hier.",
    ],
)
def test_parse_rewrite_output_rejects(raw: str):
    """Replies without a string transformedText are rejected."""
    assert parse_rewrite_output(raw) is None


def test_rewriter_sends_prompt_to_model():
    """The rewriter uses the configured model and parses the reply."""
    client = RecordingClient('{"transformedText": "Neu."}')
    rewriter = LLMRewriter(client, model="qwen2.5")
    assert rewriter.rewrite("Alt.", "de", 2) == "Neu."
    prompt, model = client.calls[0]
    assert model == "qwen2.5"
    assert prompt.endswith("Text:\nAlt.")
