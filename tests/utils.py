from __future__ import annotations

from pathlib import Path

FIXTURES = Path(__file__).parent / "fixtures"

DE_REQUEST = (
    "Ich heiße Thomas Müller und ich wohne in Berlin. "
    "Ich arbeite bei TechCorp GmbH seit 2018. Ich verdiene gut."
)
DE_REQUEST_STRENGTH_1 = (
    "Ich heiße [PERSON] und ich wohne in [CITY]. "
    "Ich arbeite bei [ORG] seit vor einiger Zeit. Ich verdiene gut."
)
EN_REQUEST = (
    "My name is John Smith and I live in London. "
    "I work at Acme Corp. I earn a competitive salary."
)


def fixture_path(name: str) -> Path:
    """Return the path of a file under tests/fixtures."""
    return FIXTURES / name
