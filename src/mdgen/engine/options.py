from __future__ import annotations

from dataclasses import dataclass, field

from mdgen.engine.scanner import MarkerSyntax
from mdgen.engine.toc import DEFAULT_SLUG_LETTERS


@dataclass(frozen=True)
class EngineOptions:
    markers: MarkerSyntax = field(default_factory=MarkerSyntax)
    # Regex character-class body of letters kept in heading anchors.
    slug_letters: str = DEFAULT_SLUG_LETTERS
