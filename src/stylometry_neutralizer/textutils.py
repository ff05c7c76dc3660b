from __future__ import annotations

from typing import List

_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", '"': '"', "\\": "\\"}


def unescape_json_sequences(text: str) -> str:
    """
    Decode the common JSON escapes in text pasted from a JSON payload.

    Only ``\\n``, ``\\t``, ``\\r``, ``\\"`` and ``\\\\`` are decoded. Unknown
    escapes and a trailing backslash are kept as-is.
    """
    if "\\" not in text:
        return text
    out: List[str] = []
    index = 0
    length = len(text)
    while index < length:
        char = text[index]
        if char == "\\" and index + 1 < length and text[index + 1] in _ESCAPES:
            out.append(_ESCAPES[text[index + 1]])
            index += 2
        else:
            out.append(char)
            index += 1
    return "".join(out)
