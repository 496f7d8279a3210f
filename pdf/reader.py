"""
pdf/reader.py — wczytywanie tekstu stron dokumentów do porównania.

Obsługiwane formaty:
  .pdf  → fitz.open() → page.get_text() dla każdej strony (PyMuPDF)
  .txt  → strony rozdzielone znakiem \\f (konwencja pdftotext)

Kluczowe funkcje publiczne:
  read_pages(path)       -> list[str]
  load_document(path)    -> Document
  load_documents(paths)  -> (list[Document], list[DocumentFailure])

Błąd odczytu pojedynczego pliku to DocumentReadError (ścieżka + przyczyna),
nigdy pusty wynik.
"""

from __future__ import annotations

import logging
from pathlib import Path

import fitz  # PyMuPDF

from data_model.documents import Document, DocumentFailure

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".pdf", ".txt")

_FORM_FEED = "\f"


class DocumentReadError(RuntimeError):
    """Nie udało się wczytać dokumentu (brak pliku, zły format, błąd PyMuPDF)."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def read_pages(path: str | Path) -> list[str]:
    """Zwraca tekst kolejnych stron dokumentu (strona 1 = element 0)."""
    path = Path(path)
    if not path.is_file():
        raise DocumentReadError(path, "plik nie istnieje")

    suffix = path.suffix.lower()
    if suffix == ".pdf":
        return _read_pdf_pages(path)
    if suffix == ".txt":
        return _read_text_pages(path)
    raise DocumentReadError(
        path, f"nieobsługiwany format {suffix or '(brak rozszerzenia)'}; oczekiwano .pdf lub .txt"
    )


def load_document(path: str | Path) -> Document:
    pages = read_pages(path)
    logger.debug("Wczytano %s: %d stron", path, len(pages))
    return Document.from_pages(str(path), pages)


def load_documents(paths: list[str]) -> tuple[list[Document], list[DocumentFailure]]:
    """
    Wczytuje wszystkie dokumenty; błąd jednego pliku nie przerywa pozostałych.

    Zwraca (dokumenty w kolejności wejścia, lista niepowodzeń).
    """
    documents: list[Document] = []
    failures: list[DocumentFailure] = []
    for p in paths:
        try:
            documents.append(load_document(p))
        except DocumentReadError as e:
            logger.debug("Pominięto %s: %s", e.path, e.reason)
            failures.append(DocumentFailure(path=e.path, reason=e.reason))
    return documents, failures


# ---------------------------------------------------------------------------
# Wewnętrzna implementacja
# ---------------------------------------------------------------------------

def _read_pdf_pages(path: Path) -> list[str]:
    try:
        doc = fitz.open(str(path))
    except (fitz.FileDataError, RuntimeError) as e:
        raise DocumentReadError(path, f"błąd otwarcia PDF: {e}") from e

    try:
        if doc.needs_pass:
            raise DocumentReadError(path, "PDF jest zaszyfrowany (wymaga hasła)")
        pages: list[str] = []
        for page in doc:
            try:
                pages.append(page.get_text())
            except RuntimeError as e:
                raise DocumentReadError(path, f"błąd ekstrakcji strony {page.number + 1}: {e}") from e
        return pages
    finally:
        doc.close()


def _read_text_pages(path: Path) -> list[str]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentReadError(path, f"błąd odczytu pliku tekstowego: {e}") from e
    return text.split(_FORM_FEED)
