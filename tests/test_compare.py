import pytest

from data_model import Document, MatchKind
from overlap import BatchResult, CompareSettings, compare_batch, compare_documents
from pdf.text_views import PAGE_SEPARATOR

SHARED = (
    "Wykonawca zobowiązuje się do wykonania przedmiotu umowy z należytą "
    "starannością, zgodnie z obowiązującymi przepisami prawa."
)


@pytest.fixture
def doc_a():
    return Document.from_pages("in/a.pdf", ["Umowa nr 1/2024", f"Paragraf 3. {SHARED} Koniec A."])


@pytest.fixture
def doc_b():
    return Document.from_pages("in/b.pdf", [f"§ 5 {SHARED} Dalsza treść.", "Załącznik"])


def test_text_match_with_pages(doc_a, doc_b):
    matches = compare_documents(doc_a, doc_b, CompareSettings(min_len=40, digit_min_len=15))
    assert len(matches) == 1
    m = matches[0]
    assert m.kind is MatchKind.TEXT
    assert SHARED in m.text
    assert m.text in doc_a.full_text and m.text in doc_b.full_text
    assert [(p.filename, p.page) for p in m.pages] == [("a.pdf", 2), ("b.pdf", 1)]
    assert m.preview.endswith("...")
    assert len(m.preview) == 100


def test_digit_match_example():
    a = Document.from_pages("a.txt", ["Faktura nr 12345", "brak"])
    b = Document.from_pages("b.txt", ["99", "ref 123459"])
    matches = compare_documents(a, b, CompareSettings(min_len=280, digit_min_len=3))
    assert len(matches) == 1
    m = matches[0]
    assert m.kind is MatchKind.DIGIT
    assert m.text == "12345"
    assert m.preview == "12345"
    assert [p.page for p in m.pages] == [1, 2]


def test_text_matches_come_before_digit_matches():
    page = "Rachunek bankowy 11 2222 3333 4444 5555 6666 7777 prowadzony w banku."
    a = Document.from_pages("a.txt", ["Pierwszy. " + page])
    b = Document.from_pages("b.txt", ["Drugi! " + page])
    matches = compare_documents(a, b, CompareSettings(min_len=20, digit_min_len=15))
    assert [m.kind for m in matches] == [MatchKind.TEXT, MatchKind.DIGIT]
    assert matches[1].text == "11222233334444555566667777"


def test_threshold_boundary_on_documents():
    run = "ABCDEFGHIJ"
    a = Document.from_pages("a.txt", ["qq" + run + "rr"])
    b = Document.from_pages("b.txt", ["ss" + run + "tt"])
    assert compare_documents(a, b, CompareSettings(min_len=10, digit_min_len=15)) == []
    found = compare_documents(a, b, CompareSettings(min_len=9, digit_min_len=15))
    assert [m.text for m in found] == [run]


def test_identical_documents(doc_a):
    twin = Document.from_pages("in/a-copy.pdf", list(doc_a.pages))
    matches = compare_documents(doc_a, twin, CompareSettings(min_len=20, digit_min_len=15))
    text = [m for m in matches if m.kind is MatchKind.TEXT]
    assert text[0].text == doc_a.full_text
    assert PAGE_SEPARATOR in text[0].text
    assert [p.page for p in text[0].pages] == [1, 1]


def test_idempotent(doc_a, doc_b):
    settings = CompareSettings(min_len=30, digit_min_len=3)
    assert compare_documents(doc_a, doc_b, settings) == compare_documents(doc_a, doc_b, settings)


def test_no_match_contains_another_of_same_kind(doc_a, doc_b):
    matches = compare_documents(doc_a, doc_b, CompareSettings(min_len=3, digit_min_len=0))
    for kind in MatchKind:
        texts = [m.text for m in matches if m.kind is kind]
        for i, s in enumerate(texts):
            for j, t in enumerate(texts):
                if i != j:
                    assert s not in t


def test_batch_compares_upper_triangle(doc_a, doc_b):
    doc_c = Document.from_pages("in/c.pdf", [f"Inny wstęp. {SHARED}"])
    settings = CompareSettings(min_len=40, digit_min_len=15)
    result = compare_batch([doc_a, doc_b, doc_c], settings)
    assert isinstance(result, BatchResult)
    assert result.ok
    assert result.pairs_compared == 3
    pairs = [(m.pages[0].filename, m.pages[1].filename) for m in result.matches]
    assert pairs == [("a.pdf", "b.pdf"), ("a.pdf", "c.pdf"), ("b.pdf", "c.pdf")]
    assert result.to_json()[0]["type"] == "Common text string"


def test_batch_with_workers_keeps_order(doc_a, doc_b):
    doc_c = Document.from_pages("in/c.pdf", [f"Inny wstęp. {SHARED}"])
    settings = CompareSettings(min_len=40, digit_min_len=15)
    serial = compare_batch([doc_a, doc_b, doc_c], settings)
    parallel = compare_batch([doc_a, doc_b, doc_c], settings, workers=2)
    assert parallel.matches == serial.matches


def test_batch_with_single_document_is_empty(doc_a):
    result = compare_batch([doc_a])
    assert result.matches == []
    assert result.pairs_compared == 0


def test_pages_without_digits_give_no_digit_match():
    # skany bez warstwy tekstu: widok cyfr to same separatory stron
    pages_a = [f"Strona bez numerów, wariant {chr(65 + i)}." for i in range(20)]
    pages_b = [f"Inny dokument, rozdział {chr(97 + i)}." for i in range(20)]
    a = Document.from_pages("in/a.pdf", pages_a)
    b = Document.from_pages("in/b.pdf", pages_b)
    assert set(a.page_digits) == {PAGE_SEPARATOR}

    matches = compare_documents(a, b, CompareSettings())
    assert [m for m in matches if m.kind is MatchKind.DIGIT] == []
