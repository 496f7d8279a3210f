"""
overlap/compare.py — porównanie dokumentów: para i cała partia.

Dla pary dokumentów:
  full_text   vs full_text   (próg settings.min_len)       → MatchKind.TEXT
  full_digits vs full_digits (próg settings.digit_min_len) → MatchKind.DIGIT

Każde zredukowane dopasowanie dostaje podgląd i numery stron w obu
dokumentach. Partia porównuje każdą nieuporządkowaną parę raz (górny
trójkąt macierzy), opcjonalnie w puli procesów.
"""

from __future__ import annotations

import itertools
import logging
from concurrent.futures import ProcessPoolExecutor

from data_model.documents import Document, DocumentFailure
from data_model.matches import Match, MatchKind, PageRef
from pdf.text_views import make_preview

from .common import find_common_substrings
from .pages import find_page
from .types import BatchResult, CompareSettings

logger = logging.getLogger(__name__)


def _views(doc: Document, kind: MatchKind) -> tuple[str, tuple[str, ...]]:
    """(widok pełny, widoki stron) dokumentu dla danego rodzaju dopasowania."""
    if kind is MatchKind.TEXT:
        return doc.full_text, doc.pages
    return doc.full_digits, doc.page_digits


def compare_views(doc_a: Document, doc_b: Document, kind: MatchKind, min_len: int) -> list[Match]:
    full_a, pages_a = _views(doc_a, kind)
    full_b, pages_b = _views(doc_b, kind)

    matches: list[Match] = []
    for s in find_common_substrings(full_a, full_b, min_len):
        matches.append(Match(
            kind=kind,
            text=s,
            preview=make_preview(s),
            pages=(
                PageRef(doc_a.display_name, find_page(pages_a, s)),
                PageRef(doc_b.display_name, find_page(pages_b, s)),
            ),
        ))
    return matches


def compare_documents(doc_a: Document, doc_b: Document, settings: CompareSettings | None = None) -> list[Match]:
    """Dopasowania tekstowe, a po nich cyfrowe, dla jednej pary dokumentów."""
    settings = settings or CompareSettings()
    results: list[Match] = []
    for kind in (MatchKind.TEXT, MatchKind.DIGIT):
        found = compare_views(doc_a, doc_b, kind, settings.threshold(kind))
        logger.debug(
            "%s × %s: %d dopasowań (%s)",
            doc_a.display_name, doc_b.display_name, len(found), kind.name,
        )
        results.extend(found)
    return results


def _compare_pair(args: tuple[Document, Document, CompareSettings]) -> list[Match]:
    # Funkcja modułowa — musi się dać zapiklować dla ProcessPoolExecutor
    doc_a, doc_b, settings = args
    return compare_documents(doc_a, doc_b, settings)


def compare_batch(
    documents: list[Document],
    settings:  CompareSettings | None = None,
    workers:   int = 1,
    failures:  list[DocumentFailure] | None = None,
) -> BatchResult:
    """
    Porównuje każdą parę (i < j) dokumentów i zbiera wyniki w BatchResult.

    Kolejność dopasowań: para po parze w kolejności dokumentów, niezależnie
    od liczby workerów. failures (z load_documents) są przenoszone do wyniku.
    """
    settings = settings or CompareSettings()
    result = BatchResult(failures=list(failures or []))

    pairs = [(a, b, settings) for a, b in itertools.combinations(documents, 2)]
    logger.debug("compare_batch: %d dokumentów, %d par, workers=%d", len(documents), len(pairs), workers)

    if workers > 1 and len(pairs) > 1:
        with ProcessPoolExecutor(max_workers=workers) as pool:
            for matches in pool.map(_compare_pair, pairs):
                result.add_pair(matches)
    else:
        for pair in pairs:
            result.add_pair(_compare_pair(pair))

    return result
