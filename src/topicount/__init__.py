"""Topicount: keyword and phrase based topic detection for free text."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._analyzer import TopicAnalyzer
from ._detect import UNDETERMINED, detect_topic
from ._dictionary import DictionarySnapshot, DictionaryStore
from ._errors import (
    BundleChecksumError,
    BundleVersionError,
    DictionaryError,
    ExtractionError,
    TopicountError,
    UnsupportedFormatError,
)
from ._extract import parse
from ._loader import load_bundle, save_bundle
from ._stemmer import SUFFIXES, stem
from ._tokenizer import tokenize
from ._types import AnalysisResult, Match, StemGroup, Token

if TYPE_CHECKING:
    from pathlib import Path

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "load",
    "AnalysisResult",
    "BundleChecksumError",
    "BundleVersionError",
    "DictionaryError",
    "DictionarySnapshot",
    "DictionaryStore",
    "ExtractionError",
    "Match",
    "StemGroup",
    "SUFFIXES",
    "Token",
    "TopicAnalyzer",
    "TopicountError",
    "UNDETERMINED",
    "UnsupportedFormatError",
    "detect_topic",
    "load_bundle",
    "parse",
    "save_bundle",
    "stem",
    "tokenize",
]


def load(
    data_dir: Path | str | None = None,
    *,
    fuzzy: bool = False,
    stemmer: str = "suffix",
) -> TopicAnalyzer:
    """Return a TopicAnalyzer over a fresh DictionaryStore.

    Args:
        data_dir: Directory of ``<topic>.txt`` dictionaries. If None, uses the
            bundled dictionaries.
        fuzzy: Match inflected forms through stems.
        stemmer: ``"suffix"`` or ``"snowball"``.
    """
    if data_dir is None:
        store = DictionaryStore.default()
    else:
        store = DictionaryStore()
        store.load_directory(data_dir)
    return TopicAnalyzer(store, fuzzy=fuzzy, stemmer=stemmer)
