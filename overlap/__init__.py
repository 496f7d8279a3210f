"""
overlap — wykrywanie dosłownie wspólnych fragmentów dokumentów.

Publiczne API:
  build_suffix_array(text)                   → list[int]
  build_lcp_array(text, sa)                  → list[int]  (Kasai)
  find_candidates(a, b, min_len)             → list[Candidate]
  reduce_candidates(candidates)              → list[Candidate]
  find_common_substrings(a, b, min_len)      → list[str]
  find_page(pages, substring)                → int | None
  compare_documents(doc_a, doc_b, settings)  → list[Match]
  compare_batch(documents, settings, ...)    → BatchResult
  CompareSettings, BatchResult               typy danych
"""

from .common       import find_candidates, find_common_substrings, reduce_candidates
from .compare      import compare_batch, compare_documents, compare_views
from .lcp          import build_lcp_array
from .pages        import find_page
from .suffix_array import build_suffix_array
from .types        import (
    DEFAULT_DIGIT_MIN_LEN,
    DEFAULT_MIN_LEN,
    BatchResult,
    CompareSettings,
)

__all__ = [
    "build_suffix_array",
    "build_lcp_array",
    "find_candidates",
    "reduce_candidates",
    "find_common_substrings",
    "find_page",
    "compare_views",
    "compare_documents",
    "compare_batch",
    "CompareSettings",
    "BatchResult",
    "DEFAULT_MIN_LEN",
    "DEFAULT_DIGIT_MIN_LEN",
]
