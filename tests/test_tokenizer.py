"""Tests for the Unicode-letter tokenizer."""

from topicount import tokenize
from topicount._tokenizer import Tokenizer


def test_empty():
    assert tokenize("") == []
    assert tokenize("  ...!!! 123 ") == []


def test_cyrillic_punctuation():
    assert tokenize("  привет, мир!  ") == ["привет", "мир"]


def test_digits_and_underscores_split():
    assert tokenize("abc123def") == ["abc", "def"]
    assert tokenize("foo_bar") == ["foo", "bar"]


def test_numeric_symbols_split():
    """Superscripts and vulgar fractions are not letters."""
    assert tokenize("м²") == ["м"]
    assert tokenize("x½") == ["x"]
    assert tokenize("площадь 5 м² и x½") == ["площадь", "м", "и", "x"]
    assert tokenize("а²б") == ["а", "б"]


def test_hyphenated_word_splits():
    assert tokenize("сине-зелёный") == ["сине", "зелёный"]


def test_mixed_scripts():
    assert tokenize("tcp/ip и сеть") == ["tcp", "ip", "и", "сеть"]


def test_decomposed_letters_stay_in_token():
    """'е' + combining diaeresis is normalized to 'ё' instead of splitting."""
    assert tokenize("\u0435\u0308\u0436") == ["\u0451\u0436"]


def test_process_lowercases_and_aligns_stems():
    tokens, stems = Tokenizer().process("Алгоритмы и Классами")
    assert tokens == ["алгоритмы", "и", "классами"]
    assert stems == ["алгоритм", "и", "класс"]


def test_token_records_positions():
    records = Tokenizer().tokens("Сеть, сети.")
    assert [t.position for t in records] == [0, 1]
    assert [t.text for t in records] == ["сеть", "сети"]
    assert records[1].stem == "сет"
