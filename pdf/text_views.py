"""
pdf/text_views.py — widoki tekstu dokumentu używane przy porównywaniu.

Każdy dokument ma dwa widoki:
  - pełny tekst    : strony złączone separatorem stron
  - same cyfry     : z każdej strony usunięte wszystkie znaki nie-cyfrowe,
                     złączone tym samym separatorem

Znaki separatora stron i granicy dokumentów są usuwane z tekstu stron przy
wczytywaniu (sanitize_page_text), więc nie mogą wystąpić w treści.
"""

from __future__ import annotations

import re

# ---------------------------------------------------------------------------
# Stałe
# ---------------------------------------------------------------------------

# ASCII RS — separator stron w widokach pełnych.
PAGE_SEPARATOR = "\x1e"

# Dwa znaki ASCII US — granica między dwoma złączonymi dokumentami.
DOCUMENT_BOUNDARY = "\x1f\x1f"

# Maksymalna długość podglądu (bez "...").
PREVIEW_MAX_CHARS = 97

_RESERVED_RE = re.compile("[\x1e\x1f]")
_NON_DIGIT_RE = re.compile(r"[^0-9]+")
_LINEBREAK_RE = re.compile("\r\n|[\r\n\x1e]")


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def sanitize_page_text(text: str) -> str:
    """Usuwa znaki zarezerwowane dla separatora stron i granicy dokumentów."""
    return _RESERVED_RE.sub("", text)


def digits_only(text: str) -> str:
    """Zostawia wyłącznie cyfry ASCII 0-9."""
    return _NON_DIGIT_RE.sub("", text)


def join_pages(pages: list[str] | tuple[str, ...]) -> str:
    return PAGE_SEPARATOR.join(pages)


def make_preview(s: str) -> str:
    """
    Podgląd dopasowania do raportu: łamania linii (i separator stron)
    zamienione na spacje, długie teksty ucięte do PREVIEW_MAX_CHARS + "...".
    """
    result = _LINEBREAK_RE.sub(" ", s)
    if len(result) >= PREVIEW_MAX_CHARS:
        result = result[:PREVIEW_MAX_CHARS] + "..."
    return result
