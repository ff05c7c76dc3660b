from __future__ import annotations

import json
import logging
import re
from typing import Any, List, Optional

from .llm.base import LLMClient
from .textutils import unescape_json_sequences

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "llama3.2"

LANGUAGE_NOTES = {
    "de": "Antworte auf Deutsch. Keine Erklärungen.",
    "en": "Respond in English. No explanations.",
}

AGGRESSIVE_RULES = (
    "- Replace ALL unusual, rare, or infrequent words with common everyday equivalents.",
    "  Where multiple synonyms exist, always pick the most frequent/common one.",
    "- Normalize sentence lengths aggressively: split long sentences, expand short ones",
    "  so all sentences are closer to average length, without adding new information.",
    "- Reduce distinctive vocabulary: never use the same uncommon word twice;",
    "  prefer generic phrasing over specific or idiosyncratic expressions.",
    "- Replace emphatic constructions (sehr, wirklich, absolut, extremely, truly)",
    "  with neutral phrasing or omit them entirely where meaning is preserved.",
    "- Prefer high-frequency function words over rare content words wherever possible.",
)

MODERATE_RULES = (
    "- Replace ALL adjectives and adverbs that sound elevated, literary, or unusual",
    "  with simple, common everyday alternatives.",
    '  Examples: "phänomenal"->"gut", "außergewöhnlich"->"bemerkenswert",',
    '  "tremendous"->"large", "extraordinary"->"notable".',
    "- Replace rare or infrequent content words with their most common synonyms.",
    "  When in doubt, use the simpler, more generic word.",
    "- Normalize sentence lengths: aim for 10-18 words per sentence.",
    "  Split sentences that exceed 25 words; join or expand those under 6 words.",
    "  Do not add new facts, rephrase only.",
)

CONSERVATIVE_RULES = (
    "- Replace words or short phrases that carry strong stylistic signals",
    "  (intensifiers, rare vocabulary, idiosyncratic phrasing).",
    "- Keep sentence structure and length close to the original.",
)

FENCE_OPEN_RE = re.compile(r"^```(?:json)?\s*", re.MULTILINE)
FENCE_CLOSE_RE = re.compile(r"\s*```\s*$", re.MULTILINE)
DIRECT_VALUE_RE = re.compile(r'"transformedText"\s*:\s*"(.*)"\s*}\s*$', re.DOTALL)


def build_rewrite_prompt(text: str, language: str, strength: int) -> str:
    """Build the rewrite instructions for the given strength tier."""
    if strength >= 3:
        rules = AGGRESSIVE_RULES
    elif strength >= 2:
        rules = MODERATE_RULES
    else:
        rules = CONSERVATIVE_RULES
    lines = [
        "You are a text editor reducing stylistic fingerprints. Rewrite the text below",
        "so it sounds natural and generic while minimizing distinctive language patterns.",
        "",
        "Rules:",
        *rules,
        "- Tokens in brackets like [PERSON], [CITY], [ORG] are placeholders.",
        "  Keep them exactly as-is; do NOT remove or rephrase them.",
        "- Do NOT add new information, facts, or entities.",
        "- Do NOT add commentary, meta-text, or explanations.",
        "- Preserve the original language.",
        f"- {LANGUAGE_NOTES.get(language, LANGUAGE_NOTES['en'])}",
        '- Respond ONLY with valid JSON: {"transformedText":"..."}',
        "",
        "Text:",
        text,
    ]
    return "\n".join(lines)


def strip_code_fence(raw: str) -> str:
    stripped = FENCE_OPEN_RE.sub("", raw, count=1)
    return FENCE_CLOSE_RE.sub("", stripped, count=1).strip()


def extract_first_json(raw: str) -> Optional[str]:
    """
    Return the first balanced ``{...}`` object in ``raw``.

    Braces inside string literals are ignored, so a value containing ``}``
    does not end the object early.
    """
    start = raw.find("{")
    if start == -1:
        return None
    depth = 0
    in_string = False
    escaped = False
    for index in range(start, len(raw)):
        char = raw[index]
        if escaped:
            escaped = False
            continue
        if char == "\\" and in_string:
            escaped = True
            continue
        if char == '"':
            in_string = not in_string
            continue
        if in_string:
            continue
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return raw[start : index + 1]
    return None


def _extract_direct(source: str) -> Optional[str]:
    match = DIRECT_VALUE_RE.search(source)
    if match is None:
        return None
    return unescape_json_sequences(match.group(1))


def parse_rewrite_output(raw: str) -> Optional[str]:
    """
    Pull ``transformedText`` out of a model reply.

    Accepts replies wrapped in Markdown code fences and replies whose value
    contains unescaped double quotes. Returns ``None`` when no usable value is
    found.
    """
    stripped = strip_code_fence(raw)
    source = stripped or raw
    candidate = extract_first_json(source)
    if candidate is None:
        recovered = _extract_direct(source)
        if recovered is None:
            logger.warning("No JSON object in model output: %r", raw[:200])
        return recovered
    try:
        parsed: Any = json.loads(candidate, strict=False)
    except json.JSONDecodeError as exc:
        recovered = _extract_direct(candidate)
        if recovered is None:
            logger.warning("Model output is not valid JSON (%s): %r", exc, raw[:200])
        return recovered
    if isinstance(parsed, dict) and isinstance(parsed.get("transformedText"), str):
        return parsed["transformedText"]
    keys: List[str] = list(parsed) if isinstance(parsed, dict) else []
    logger.warning("Unexpected model output shape; keys=%s", keys)
    return None


class LLMRewriter:
    """Sends the deterministic result to a model for a further rewrite."""

    def __init__(self, client: LLMClient, model: str = DEFAULT_MODEL) -> None:
        self._client = client
        self._model = model

    @property
    def model(self) -> str:
        return self._model

    def rewrite(self, text: str, language: str, strength: int) -> Optional[str]:
        """
        Return the rewritten text, or ``None`` when the reply is unusable.

        Client errors propagate to the caller.
        """
        prompt = build_rewrite_prompt(text, language, strength)
        logger.debug("Requesting rewrite from model=%s (%d chars)", self._model, len(text))
        raw = self._client.generate(prompt, self._model)
        return parse_rewrite_output(raw)
