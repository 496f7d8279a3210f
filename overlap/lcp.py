"""
overlap/lcp.py — tablica LCP algorytmem Kasaia, O(n).

lcp[i] = długość najdłuższego wspólnego prefiksu sufiksów sa[i-1] i sa[i];
lcp[0] = 0 (brak poprzednika).

Przykład ("banana", sa = [5, 3, 1, 0, 4, 2]):
  a / ana      -> 1
  ana / anana  -> 3
  anana/banana -> 0
  banana / na  -> 0
  na / nana    -> 2
  lcp = [0, 1, 3, 0, 0, 2]
"""

from __future__ import annotations


def build_lcp_array(text: str | bytes, sa: list[int]) -> list[int]:
    n = len(sa)
    assert n == len(text), "tablica sufiksów nie pasuje do tekstu"

    lcp = [0] * n

    # rank[pos] = i  <=>  sa[i] = pos
    rank = [0] * n
    for i, pos in enumerate(sa):
        rank[pos] = i

    # Sufiksy przetwarzamy w kolejności pozycji w tekście. Usunięcie pierwszego
    # znaku zmniejsza wspólny prefiks z poprzednikiem co najwyżej o 1, więc
    # porównanie zaczynamy od k-1 zamiast od zera.
    k = 0
    for pos in range(n):
        r = rank[pos]
        if r == 0:
            k = 0
            continue
        prev = sa[r - 1]
        while pos + k < n and prev + k < n and text[pos + k] == text[prev + k]:
            k += 1
        lcp[r] = k
        if k > 0:
            k -= 1

    return lcp
