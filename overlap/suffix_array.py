"""
overlap/suffix_array.py — budowa tablicy sufiksów (prefix doubling).

Algorytm Manbera–Myersa: w rundzie k sufiksy są uporządkowane według
pierwszych k znaków; kolejna runda sortuje pary (rank[i], rank[i+k])
dwoma stabilnymi przebiegami sortowania przez zliczanie, więc każda runda
kosztuje O(n), a rund jest co najwyżej log2(n). Pętla kończy się wcześniej,
gdy wszystkie rangi są już różne.

Przykład:
  build_suffix_array("banana") -> [5, 3, 1, 0, 4, 2]
    a, ana, anana, banana, na, nana
"""

from __future__ import annotations


def build_suffix_array(text: str | bytes) -> list[int]:
    """Zwraca tablicę sufiksów: permutację 0..n-1 w porządku leksykograficznym sufiksów."""
    n = len(text)
    if n == 0:
        return []

    # Ranga początkowa = pozycja znaku w posortowanym alfabecie tekstu
    alphabet = sorted(set(text))
    code = {ch: i for i, ch in enumerate(alphabet)}
    rank = [code[ch] for ch in text]
    classes = len(alphabet)
    sa = sorted(range(n), key=rank.__getitem__)

    k = 1
    while classes < n:
        # Porządek według drugiego klucza rank[i+k]; sufiksy krótsze niż k+1
        # nie mają drugiej połowy (klucz -1), więc idą na początek.
        by_second = list(range(n - k, n))
        by_second.extend(p - k for p in sa if p >= k)

        # Stabilne sortowanie przez zliczanie według pierwszego klucza
        starts = [0] * (classes + 1)
        for r in rank:
            starts[r + 1] += 1
        for c in range(1, classes + 1):
            starts[c] += starts[c - 1]
        new_sa = [0] * n
        for p in by_second:
            r = rank[p]
            new_sa[starts[r]] = p
            starts[r] += 1
        sa = new_sa

        # Nowe rangi: ta sama klasa tylko przy równej parze kluczy
        new_rank = [0] * n
        cls = 0
        prev = sa[0]
        prev_second = rank[prev + k] if prev + k < n else -1
        for idx in range(1, n):
            cur = sa[idx]
            cur_second = rank[cur + k] if cur + k < n else -1
            if rank[cur] != rank[prev] or cur_second != prev_second:
                cls += 1
            new_rank[cur] = cls
            prev, prev_second = cur, cur_second
        rank = new_rank
        classes = cls + 1
        k *= 2

    return sa
