import random

from data_model import Candidate
from overlap import find_candidates, find_common_substrings, reduce_candidates
from pdf.text_views import DOCUMENT_BOUNDARY, PAGE_SEPARATOR


def test_example_abcde_bcbcd():
    assert find_common_substrings("abcde", "bcbcd", 2) == ["bcd"]


def test_example_abcde_bcbcd_lower_threshold_still_collapses():
    # "cd" jest też kandydatem przy min_len=1, ale zawiera się w "bcd"
    texts = [c.text for c in find_candidates("abcde", "bcbcd", 1)]
    assert "bcd" in texts and "cd" in texts
    assert find_common_substrings("abcde", "bcbcd", 1) == ["bcd"]


def test_digit_example():
    assert find_common_substrings("12345", "99123459", 3) == ["12345"]


def test_threshold_is_strict():
    a = "qqqqABCDErrrr"
    b = "zzzzABCDEwwww"
    assert find_common_substrings(a, b, 5) == []
    assert find_common_substrings(a, b, 4) == ["ABCDE"]


def test_identical_documents_give_full_text():
    text = "the quick brown fox jumps over the lazy dog"
    assert find_common_substrings(text, text, 10) == [text]


def test_no_common_text():
    assert find_common_substrings("aaaa", "bbbb", 0) == []
    assert find_common_substrings("", "abc", 0) == []


def test_candidates_have_one_occurrence_per_document():
    a = "xyzHELLO WORLDxyz"
    b = "HELLO WORLD and more"
    split_at = len(a)
    for cand in find_candidates(a, b, 3):
        assert cand.start_a < split_at < cand.start_b
        assert cand.start_a + cand.length <= split_at
        assert DOCUMENT_BOUNDARY not in cand.text


def test_random_pairs_properties():
    rng = random.Random(7)
    for _ in range(40):
        a = "".join(rng.choice("abc") for _ in range(rng.randint(0, 60)))
        b = "".join(rng.choice("abc") for _ in range(rng.randint(0, 60)))
        result = find_common_substrings(a, b, 3)
        for s in result:
            assert len(s) > 3
            assert s in a and s in b
            assert len(s) <= len(a) + len(b)
        for i, s in enumerate(result):
            for j, t in enumerate(result):
                if i != j:
                    assert s not in t


def test_idempotent():
    a = "lorem ipsum dolor sit amet, consectetur adipiscing elit " * 3
    b = "sed do eiusmod lorem ipsum dolor sit amet tempor incididunt elit " * 2
    assert find_common_substrings(a, b, 5) == find_common_substrings(a, b, 5)


def test_reduce_keeps_longest_and_drops_contained():
    cands = [
        Candidate("bc", 1, 10),
        Candidate("bcd", 1, 12),
        Candidate("xyz", 5, 20),
        Candidate("cd", 2, 13),
    ]
    reduced = [c.text for c in reduce_candidates(cands)]
    assert reduced == ["bcd", "xyz"]


def test_reduce_drops_duplicates():
    cands = [Candidate("abcd", 0, 10), Candidate("abcd", 0, 20)]
    assert reduce_candidates(cands) == [Candidate("abcd", 0, 10)]


def test_reduce_is_content_based_not_positional():
    # "ipsu" pochodzi z innego miejsca, ale jego treść zawiera się w "lorem ipsum"
    cands = [Candidate("ipsu", 40, 90), Candidate("lorem ipsum", 0, 60)]
    assert [c.text for c in reduce_candidates(cands)] == ["lorem ipsum"]


def test_page_separators_alone_are_not_common_text():
    run = PAGE_SEPARATOR * 20
    assert find_candidates(run, run, 5) == []
    assert find_common_substrings("1" + run, "2" + run, 5) == []


def test_page_separators_are_trimmed_from_match_edges():
    a = PAGE_SEPARATOR * 3 + "1234567" + PAGE_SEPARATOR * 4
    b = "9" + PAGE_SEPARATOR * 3 + "1234567" + PAGE_SEPARATOR * 4 + "8"
    assert find_common_substrings(a, b, 5) == ["1234567"]
    assert find_common_substrings(a, b, 7) == []
