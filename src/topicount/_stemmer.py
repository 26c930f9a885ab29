"""Suffix-stripping stemmer and the Snowball backend switch.

The suffix stemmer is a heuristic for Russian inflections. It strips at most
one ending and makes no claim of linguistic correctness: over- and
under-stemming are expected and not bugs.
"""

from __future__ import annotations

from typing import Callable

StemFn = Callable[[str], str]

# Priority order: the first suffix the word ends with is stripped.
SUFFIXES: tuple[str, ...] = (
    "иями", "ями", "ами", "иях", "ием", "ете", "ить",
    "ение", "ением", "ений",
    "ов", "ев", "ёв", "ей", "ии", "ия", "ие",
    "ость", "остей", "ости",
    "ой", "ый", "ая", "ые", "ое", "ых", "их",
    "ам", "ям", "ом", "ем", "ах", "ях",
    "у", "ю", "а", "я", "е", "о", "и", "ы",
)

_MIN_STEMMABLE = 4

STEMMERS = ("suffix", "snowball")


def stem(word: str) -> str:
    """Strip the first matching suffix from a lowercase word."""
    if len(word) < _MIN_STEMMABLE:
        return word
    for suffix in SUFFIXES:
        if word.endswith(suffix):
            return word[: -len(suffix)]
    return word


def make_stemmer(name: str = "suffix", language: str = "russian") -> StemFn:
    """Return a ``str -> str`` stem function for the named backend.

    Args:
        name: ``"suffix"`` for the built-in heuristic, ``"snowball"`` for
            PyStemmer's Snowball algorithms.
        language: Snowball algorithm name. Ignored by the suffix backend.

    Raises:
        ValueError: If the backend or the Snowball language is unknown.
    """
    if name == "suffix":
        return stem
    if name == "snowball":
        import Stemmer

        try:
            stemmer = Stemmer.Stemmer(language)
        except KeyError:
            raise ValueError(
                f"Snowball has no stemmer for language {language!r}"
            ) from None
        return stemmer.stemWord
    raise ValueError(f"stemmer must be one of {STEMMERS}, got {name!r}")
