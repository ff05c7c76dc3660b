from __future__ import annotations

from stylometry_neutralizer.textutils import unescape_json_sequences


def test_unescape_known_sequences():
    """Newline, tab, carriage return, quote and backslash escapes are decoded."""
    assert unescape_json_sequences("a\\nb\\tc\\rd") == "a\nb\tc\rd"
    assert unescape_json_sequences('say \\"hi\\"') == 'say "hi"'
    assert unescape_json_sequences("\\\\n") == "\\n"


def test_unknown_escapes_and_trailing_backslash_are_kept():
    """Anything else passes through unchanged."""
    assert unescape_json_sequences("\\x41") == "\\x41"
    assert unescape_json_sequences("abc\\") == "abc\\"
    assert unescape_json_sequences("plain") == "plain"
