from __future__ import annotations

from typing import Any

from .base import Transform
from .context import ContextDampening
from .entities import EntityGeneralization
from .lexical import LexicalNeutralization
from .numbers import NumbersBucketing
from .syntax import SyntaxNormalization

__all__ = [
    "Transform",
    "SyntaxNormalization",
    "EntityGeneralization",
    "NumbersBucketing",
    "ContextDampening",
    "LexicalNeutralization",
    "TRANSFORMS",
    "create_transform",
]

TRANSFORMS = {
    cls.name: cls
    for cls in (
        SyntaxNormalization,
        EntityGeneralization,
        NumbersBucketing,
        ContextDampening,
        LexicalNeutralization,
    )
}


def create_transform(name: str, **kwargs: Any) -> Transform:
    """Factory for building transforms by name."""
    normalized = name.lower().strip()
    try:
        cls = TRANSFORMS[normalized]
    except KeyError:
        raise ValueError(f"Unknown transform '{name}'.") from None
    return cls(**kwargs)
