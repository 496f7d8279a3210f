"""
overlap/types.py — ustawienia porównania i wynik całej partii dokumentów.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from data_model.documents import DocumentFailure
from data_model.matches import Match, MatchKind

DEFAULT_MIN_LEN       = 280   # próg dla pełnego tekstu (znaki)
DEFAULT_DIGIT_MIN_LEN = 15    # próg dla widoku samych cyfr


@dataclass(frozen=True)
class CompareSettings:
    """Progi długości; dopasowanie musi być dłuższe niż próg (ostra nierówność)."""
    min_len:       int = DEFAULT_MIN_LEN
    digit_min_len: int = DEFAULT_DIGIT_MIN_LEN

    def threshold(self, kind: MatchKind) -> int:
        return self.min_len if kind is MatchKind.TEXT else self.digit_min_len


@dataclass
class BatchResult:
    """
    Wynik porównania partii dokumentów.

    - matches:        dopasowania wszystkich par, w kolejności par (i < j)
    - pairs_compared: liczba porównanych par
    - failures:       dokumenty pominięte przy wczytywaniu
    """
    matches:        list[Match] = field(default_factory=list)
    pairs_compared: int = 0
    failures:       list[DocumentFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    def add_pair(self, matches: list[Match]) -> None:
        """Dopisuje wynik jednej porównanej pary."""
        self.matches.extend(matches)
        self.pairs_compared += 1

    def to_json(self) -> list[dict]:
        return [m.to_json() for m in self.matches]
