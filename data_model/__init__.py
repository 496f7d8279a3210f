"""
data_model — struktury danych OverlapScan.

Użycie:
  from data_model import Document, Match, MatchKind, ...

Moduły:
  documents — Document (strony + widoki full_text / full_digits), DocumentFailure
  matches   — Candidate, Match, MatchKind, PageRef
"""

from .documents import Document, DocumentFailure
from .matches import (
    PAGE_NOT_FOUND,
    Candidate,
    Match,
    MatchKind,
    PageRef,
)

__all__ = [
    # documents
    "Document",
    "DocumentFailure",
    # matches
    "PAGE_NOT_FOUND",
    "Candidate",
    "Match",
    "MatchKind",
    "PageRef",
]
