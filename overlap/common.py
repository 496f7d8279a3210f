"""
overlap/common.py — wspólne podciągi dwóch tekstów (suffix array + LCP).

Architektura:
  a, b → a + DOCUMENT_BOUNDARY + b → build_suffix_array → build_lcp_array
  → find_candidates()   (pary sąsiednich sufiksów z różnych dokumentów)
  → reduce_candidates() (usuwa kandydatów zawartych w dłuższych)

Przykład:
  find_common_substrings("abcde", "bcbcd", 2) -> ["bcd"]
  ("bc" i "cd" też są wspólne, ale zawierają się w "bcd")
"""

from __future__ import annotations

import logging

from data_model.matches import Candidate
from pdf.text_views import DOCUMENT_BOUNDARY, PAGE_SEPARATOR

from .lcp import build_lcp_array
from .suffix_array import build_suffix_array

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Kandydaci
# ---------------------------------------------------------------------------

def find_candidates(a: str, b: str, min_len: int) -> list[Candidate]:
    """
    Zwraca kandydatów: wspólne prefiksy sąsiednich sufiksów tekstu a+granica+b,
    dłuższe niż min_len (ostra nierówność), z jednym wystąpieniem w a
    i drugim w b, nieprzekraczające granicy dokumentów. Separatory stron na
    brzegach są obcinane; same separatory nie są kandydatem.
    """
    combined = a + DOCUMENT_BOUNDARY + b
    split_at = len(a)

    sa = build_suffix_array(combined)
    lcp = build_lcp_array(combined, sa)

    candidates: list[Candidate] = []
    for i in range(1, len(sa)):
        h = lcp[i]
        if h <= min_len:
            continue
        j_min = min(sa[i - 1], sa[i])
        j_max = max(sa[i - 1], sa[i])
        in_both = j_min < split_at and j_max > split_at
        crosses = j_min + h > split_at
        if not in_both or crosses:
            continue

        # separatory na brzegach nie należą do treści dopasowania
        text = combined[j_min:j_min + h]
        lead = len(text) - len(text.lstrip(PAGE_SEPARATOR))
        text = text.strip(PAGE_SEPARATOR)
        if len(text) <= min_len or not text.replace(PAGE_SEPARATOR, ""):
            continue
        candidates.append(Candidate(
            text=text,
            start_a=j_min + lead,
            start_b=j_max + lead,
        ))

    logger.debug(
        "find_candidates: len(a)=%d len(b)=%d min_len=%d -> %d kandydatów",
        len(a), len(b), min_len, len(candidates),
    )
    return candidates


# ---------------------------------------------------------------------------
# Redukcja
# ---------------------------------------------------------------------------

def reduce_candidates(candidates: list[Candidate]) -> list[Candidate]:
    """
    Zostawia minimalny zbiór pokrywający: kandydaci od najdłuższego, kandydat
    jest przyjmowany tylko gdy jego tekst nie jest podciągiem żadnego już
    przyjętego. Porównanie po treści, nie po pozycji.
    """
    # sorted() jest stabilne — remisy zostają w kolejności tablicy sufiksów
    ordered = sorted(candidates, key=lambda c: c.length, reverse=True)

    accepted: list[Candidate] = []
    for cand in ordered:
        if not any(cand.text in kept.text for kept in accepted):
            accepted.append(cand)
    return accepted


def find_common_substrings(a: str, b: str, min_len: int) -> list[str]:
    """Wszystkie wspólne, wzajemnie niezawierające się podciągi dłuższe niż min_len."""
    return [c.text for c in reduce_candidates(find_candidates(a, b, min_len))]
