"""
data_model/documents.py — model dokumentu wczytanego do porównania.

Document trzyma teksty stron w kolejności (strona 1 = pages[0]) oraz
wyliczane raz i cache'owane widoki: page_digits, full_text, full_digits.
Po utworzeniu dokument jest niezmienny.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from pathlib import Path

from pdf.text_views import digits_only, join_pages, sanitize_page_text


@dataclass(frozen=True)
class Document:
    doc_id: str                # ścieżka w postaci podanej przez użytkownika
    display_name: str          # nazwa pliku bez katalogu (do raportu)
    pages: tuple[str, ...]     # tekst stron, 1-based przez pozycję

    @classmethod
    def from_pages(cls, doc_id: str, pages: list[str] | tuple[str, ...], display_name: str | None = None) -> Document:
        """Buduje dokument, usuwając z tekstu stron znaki zarezerwowane."""
        return cls(
            doc_id=doc_id,
            display_name=display_name or Path(doc_id).name,
            pages=tuple(sanitize_page_text(p) for p in pages),
        )

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @cached_property
    def page_digits(self) -> tuple[str, ...]:
        return tuple(digits_only(p) for p in self.pages)

    @cached_property
    def full_text(self) -> str:
        return join_pages(self.pages)

    @cached_property
    def full_digits(self) -> str:
        return join_pages(self.page_digits)


@dataclass(frozen=True, slots=True)
class DocumentFailure:
    """Dokument, którego nie udało się wczytać — ścieżka + opis przyczyny."""
    path:   str
    reason: str

    def __str__(self) -> str:
        return f"{self.path}: {self.reason}"
