"""
data_model/matches.py — kandydaci i dopasowania zwracane przez overlap.

Candidate — wstępny wspólny podciąg dwóch dokumentów (przed redukcją).
Match     — końcowe dopasowanie z podglądem i stronami w obu dokumentach.

Format JSON raportu (Match.to_json):
  {"type": "Common text string", "string_preview": "...",
   "num_characters": 312,
   "pages": [{"filename": "a.pdf", "page": "3"}, {"filename": "b.pdf", "page": "7"}]}
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

PAGE_NOT_FOUND = "Page not found"


class MatchKind(StrEnum):
    """Rodzaj dopasowania — wartość trafia wprost do pola "type" raportu."""
    TEXT  = "Common text string"
    DIGIT = "Common digit string"


@dataclass(frozen=True, slots=True)
class Candidate:
    text:    str
    start_a: int   # offset w buforze złączonym, wystąpienie w dokumencie A
    start_b: int   # offset w buforze złączonym, wystąpienie w dokumencie B

    @property
    def length(self) -> int:
        return len(self.text)


@dataclass(frozen=True, slots=True)
class PageRef:
    filename: str
    page:     int | None   # 1-based; None gdy tekstu nie znaleziono na żadnej stronie

    def to_json(self) -> dict[str, str]:
        page = str(self.page) if self.page is not None else PAGE_NOT_FOUND
        return {"filename": self.filename, "page": page}


@dataclass(frozen=True, slots=True)
class Match:
    kind:    MatchKind
    text:    str
    preview: str
    pages:   tuple[PageRef, PageRef]

    @property
    def length(self) -> int:
        return len(self.text)

    def to_json(self) -> dict[str, Any]:
        return {
            "type":           str(self.kind),
            "string_preview": self.preview,
            "num_characters": self.length,
            "pages":          [p.to_json() for p in self.pages],
        }
