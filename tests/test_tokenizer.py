import pytest

from littlesearch.errors import NoiseWordsNotFoundError
from littlesearch.tokenizer import (
    extract_text_from_html,
    get_keyword,
    get_keywords,
    load_noise_words,
    read_document_text,
    strip_trailing_punctuation,
    tokenize,
)


@pytest.mark.parametrize(
    "word, expected",
    [
        ("Apple", "apple"),
        ("BANANA.", "banana"),
        ("banana,", "banana"),
        ("what?!", "what"),
        ("end...", "end"),
        ("list:;", "list"),
        ("a.", "a"),
    ],
)
def test_get_keyword_accepts(word, expected):
    assert get_keyword(word) == expected


@pytest.mark.parametrize(
    "word",
    [
        "don't",
        "e-mail",
        "abc9",
        "...abc",
        "a.b",
        "word)",
        "café",
        ".",
        "!!",
        "",
    ],
)
def test_get_keyword_rejects(word):
    assert get_keyword(word) is None


def test_single_character_is_never_stripped():
    assert strip_trailing_punctuation(".") == "."
    assert strip_trailing_punctuation("?!") == "?"
    assert strip_trailing_punctuation("X!") == "x"


@pytest.mark.parametrize("word", ["The", "the.", "IS!", "is,"])
def test_noise_words_rejected_regardless_of_case_and_punctuation(word, noise_words):
    assert get_keyword(word, noise_words) is None


@pytest.mark.parametrize("word", ["Apple", "banana!?", "Zebra.", "x", "what's", "a.b."])
def test_normalization_is_idempotent(word):
    once = get_keyword(word)
    if once is not None:
        assert get_keyword(once) == once


def test_tokenize_splits_on_whitespace_only():
    assert tokenize("  one\ttwo,\nthree!  ") == ["one", "two,", "three!"]
    assert tokenize("") == []


def test_get_keywords_keeps_document_order(noise_words):
    text = "Apple apple BANANA. banana, the"
    assert get_keywords(text, noise_words) == ["apple", "apple", "banana", "banana"]


def test_load_noise_words_lowercases(tmp_path):
    path = tmp_path / "noise.txt"
    path.write_text("The\nis\n\n  A \n", encoding="utf-8")
    assert load_noise_words(path) == frozenset({"the", "is", "a"})


def test_load_noise_words_missing_file(tmp_path):
    with pytest.raises(NoiseWordsNotFoundError) as excinfo:
        load_noise_words(tmp_path / "nope.txt")
    assert isinstance(excinfo.value, FileNotFoundError)
    assert excinfo.value.path == tmp_path / "nope.txt"


def test_extract_text_from_html_drops_scripts_and_tags():
    html = (
        "<html><head><style>p { color: red; }</style>"
        "<script>var hidden = 1;</script></head>"
        "<body><p>Hello <b>world</b></p></body></html>"
    )
    text = extract_text_from_html(html)
    assert "Hello" in text
    assert "world" in text
    assert "hidden" not in text
    assert "color" not in text
    assert "<" not in text


def test_read_document_text_html_and_plain(tmp_path):
    html_doc = tmp_path / "page.html"
    html_doc.write_text("<html><body><p>Kiwi kiwi.</p></body></html>", encoding="utf-8")
    plain_doc = tmp_path / "notes.txt"
    plain_doc.write_text("<p>kiwi</p>", encoding="utf-8")

    assert get_keywords(read_document_text(html_doc)) == ["kiwi", "kiwi"]
    # Plain text is not parsed as markup
    assert read_document_text(plain_doc) == "<p>kiwi</p>"


def test_load_noise_words_latin1_file(tmp_path):
    path = tmp_path / "noise.txt"
    path.write_bytes(b"the\nis\ncaf\xe9\n")
    assert load_noise_words(path) == frozenset({"the", "is", "café"})


def test_load_noise_words_unreadable_path(tmp_path):
    with pytest.raises(NoiseWordsNotFoundError):
        load_noise_words(tmp_path)
