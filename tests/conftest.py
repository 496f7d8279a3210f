from __future__ import annotations

from pathlib import Path

import fitz
import pytest


@pytest.fixture
def make_pdf(tmp_path: Path):
    """Tworzy PDF z podanym tekstem stron (PyMuPDF) i zwraca ścieżkę."""
    def _make(name: str, pages: list[str]) -> Path:
        path = tmp_path / name
        doc = fitz.open()
        for text in pages:
            page = doc.new_page()
            page.insert_text((72, 72), text)
        doc.save(str(path))
        doc.close()
        return path
    return _make


@pytest.fixture
def make_txt(tmp_path: Path):
    """Tworzy plik .txt ze stronami rozdzielonymi \\f."""
    def _make(name: str, pages: list[str]) -> Path:
        path = tmp_path / name
        path.write_text("\f".join(pages), encoding="utf-8")
        return path
    return _make
