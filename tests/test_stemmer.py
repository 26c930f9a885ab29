"""Tests for the suffix stemmer and backend selection."""

import pytest

from topicount import SUFFIXES, stem
from topicount._stemmer import make_stemmer


def test_short_words_unchanged():
    assert stem("кот") == "кот"
    assert stem("и") == "и"
    assert stem("") == ""


def test_plural_ending():
    assert stem("алгоритмы") == "алгоритм"
    assert stem("алгоритм") == "алгоритм"


def test_priority_longest_first():
    """'иями' is listed before 'ями' and 'ами'."""
    assert stem("линиями") == "лин"
    assert stem("конями") == "кон"
    assert stem("классами") == "класс"


def test_first_listed_suffix_wins():
    """'ием' comes before 'ением' in the list, so it is the one stripped."""
    assert stem("решением") == "решен"


def test_single_strip_only():
    assert stem("стеклами") == "стекл"
    assert stem("сетями") == "сет"
    assert stem("изменения") == "изменен"


def test_ii_ending_joins_ia_stem():
    assert stem("функции") == "функц"
    assert stem("функция") == "функц"
    assert stem("линии") == stem("линия") == "лин"
    assert SUFFIXES.index("ии") < SUFFIXES.index("и")


def test_no_suffix():
    assert stem("сеть") == "сеть"
    assert stem("маршрутизатор") == "маршрутизатор"


def test_suffix_list_order():
    assert SUFFIXES.index("иями") < SUFFIXES.index("ями") < SUFFIXES.index("ами")


def test_make_stemmer_default_is_suffix():
    assert make_stemmer() is stem


def test_snowball_backend():
    stem_en = make_stemmer("snowball", "english")
    assert stem_en("running") == "run"


def test_unknown_backend():
    with pytest.raises(ValueError, match="stemmer must be one of"):
        make_stemmer("porter")


def test_unknown_snowball_language():
    with pytest.raises(ValueError, match="no stemmer for language"):
        make_stemmer("snowball", "klingon")
