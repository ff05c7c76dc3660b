from __future__ import annotations

import logging
from typing import List

import requests

logger = logging.getLogger(__name__)

DEFAULT_OLLAMA_URL = "http://localhost:11434"
TAGS_TIMEOUT_SECONDS = 3.0


def list_ollama_models(
    base_url: str = DEFAULT_OLLAMA_URL, timeout: float = TAGS_TIMEOUT_SECONDS
) -> List[str]:
    """
    Return the model names installed on a local Ollama server.

    An unreachable server or a malformed reply yields an empty list.
    """
    url = f"{base_url.rstrip('/')}/api/tags"
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        payload = response.json()
    except (requests.RequestException, ValueError) as exc:
        logger.warning("Could not list models from %s: %s", url, exc)
        return []
    models = payload.get("models") if isinstance(payload, dict) else None
    if not isinstance(models, list):
        return []
    return [
        entry["name"]
        for entry in models
        if isinstance(entry, dict) and isinstance(entry.get("name"), str)
    ]
