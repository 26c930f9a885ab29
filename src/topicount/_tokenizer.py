"""Unicode-letter tokenizer and per-token stemming."""

from __future__ import annotations

import re
import unicodedata
from itertools import groupby
from typing import TYPE_CHECKING

from ._stemmer import stem
from ._types import Token

if TYPE_CHECKING:
    from ._stemmer import StemFn

# Word characters minus digits and underscore. This still admits numeric
# characters such as "²" and "½", which _letter_runs splits out.
_WORD_RE = re.compile(r"[^\W\d_]+")


def _letter_runs(word: str) -> list[str]:
    if word.isalpha():
        return [word]
    return ["".join(run) for is_letter, run in groupby(word, str.isalpha) if is_letter]


def tokenize(text_lower: str) -> list[str]:
    """Split lowercased text into letter-run tokens, in order."""
    if not text_lower:
        return []
    text_lower = unicodedata.normalize("NFC", text_lower)
    tokens: list[str] = []
    for word in _WORD_RE.findall(text_lower):
        tokens.extend(_letter_runs(word))
    return tokens


class Tokenizer:
    __slots__ = ("_stem",)

    def __init__(self, stem_fn: StemFn = stem) -> None:
        self._stem = stem_fn

    def stems(self, tokens: list[str]) -> list[str]:
        """Stem each token once, reusing results for repeated words."""
        cache: dict[str, str] = {}
        out: list[str] = []
        for token in tokens:
            s = cache.get(token)
            if s is None:
                s = cache[token] = self._stem(token)
            out.append(s)
        return out

    def process(self, text: str) -> tuple[list[str], list[str]]:
        """Lowercase, tokenize and stem.

        Returns (tokens, stems), aligned by position.
        """
        tokens = tokenize(text.lower())
        return tokens, self.stems(tokens)

    def tokens(self, text: str) -> list[Token]:
        """Same as process() but as Token records."""
        tokens, stems = self.process(text)
        return [
            Token(text=t, stem=s, position=i)
            for i, (t, s) in enumerate(zip(tokens, stems))
        ]
