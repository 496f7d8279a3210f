"""overlap/pages.py — przypisanie dopasowania do strony dokumentu."""

from __future__ import annotations

from pdf.text_views import PAGE_SEPARATOR


def find_page(pages: list[str] | tuple[str, ...], substring: str) -> int | None:
    """
    Zwraca numer (1-based) pierwszej strony zawierającej substring albo None.

    Dopasowanie przechodzące przez granicę stron jest przycinane do części
    przed separatorem, tak żeby wskazać stronę, na której się zaczyna.
    Jeśli dopasowanie zaczyna się dokładnie na separatorze, szukamy
    pierwszego niepustego fragmentu.
    """
    if PAGE_SEPARATOR in substring:
        head = substring.lstrip(PAGE_SEPARATOR)
        substring = head.split(PAGE_SEPARATOR, 1)[0]

    if not substring:
        return None

    for i, page_text in enumerate(pages, 1):
        if substring in page_text:
            return i
    return None
