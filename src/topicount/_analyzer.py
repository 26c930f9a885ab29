"""TopicAnalyzer: keyword and phrase counting engine over topic dictionaries."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Protocol

from ._index import build_index
from ._matcher import accept_phrases, find_phrase_matches, match_words
from ._stemmer import make_stemmer
from ._tokenizer import Tokenizer
from ._types import AnalysisResult

if TYPE_CHECKING:
    from ._dictionary import DictionarySnapshot

logger = logging.getLogger(__name__)


class DictionarySource(Protocol):
    def snapshot(self) -> DictionarySnapshot: ...


class TopicAnalyzer:
    """Counts topic keyword occurrences in text.

    Each analysis binds one dictionary snapshot, builds its own index and
    result, and shares nothing with other calls.
    """

    __slots__ = ("_source", "_fuzzy", "_stemmer", "_language")

    def __init__(
        self,
        source: DictionarySource,
        *,
        fuzzy: bool = False,
        stemmer: str = "suffix",
        language: str = "russian",
    ) -> None:
        # Fail fast on a bad backend name or language.
        make_stemmer(stemmer, language)
        self._source = source
        self._fuzzy = fuzzy
        self._stemmer = stemmer
        self._language = language

    @property
    def fuzzy(self) -> bool:
        return self._fuzzy

    @property
    def source(self) -> DictionarySource:
        return self._source

    # -- Public API --

    def analyze(
        self, text: str, topics: Iterable[str] | None = None
    ) -> AnalysisResult:
        """Count dictionary matches per topic.

        Args:
            text: Raw text; it is lowercased here.
            topics: Active topics, in index order. None means every topic of
                the current snapshot. Topics unknown to the snapshot are
                reported with zero counts.
        """
        snapshot = self._source.snapshot()
        return self._analyze(snapshot, text, topics)

    def analyze_batch(
        self, texts: list[str], topics: Iterable[str] | None = None
    ) -> list[AnalysisResult]:
        """Analyze several texts against a single snapshot."""
        snapshot = self._source.snapshot()
        if topics is not None:
            topics = list(topics)
        return [self._analyze(snapshot, t, topics) for t in texts]

    # -- Internal --

    def _analyze(
        self,
        snapshot: DictionarySnapshot,
        text: str,
        topics: Iterable[str] | None,
    ) -> AnalysisResult:
        if topics is None:
            active = snapshot.topics()
        else:
            active = list(dict.fromkeys(topics))

        if not active:
            return AnalysisResult(counts_by_topic={}, detailed={}, fuzzy=self._fuzzy)

        for topic in active:
            if topic not in snapshot:
                logger.warning("Topic %r is not in the dictionary", topic)

        # Snowball stemmers are not thread-safe, so each call gets its own.
        stem_fn = make_stemmer(self._stemmer, self._language)

        index = build_index(
            active, snapshot.words_for_topic, fuzzy=self._fuzzy, stem_fn=stem_fn,
        )
        tokens, stems = Tokenizer(stem_fn).process(text)

        counts = {topic: 0 for topic in active}
        detailed: dict[str, dict[str, int]] = {topic: {} for topic in active}
        claimed = bytearray(len(tokens))

        matches = find_phrase_matches(index, tokens, stems)
        n_phrases = accept_phrases(matches, claimed, counts, detailed)
        n_words = match_words(index, tokens, stems, claimed, counts, detailed)

        logger.debug(
            "Analyzed %d tokens over %d topics (fuzzy=%s): "
            "%d phrase candidates, %d accepted, %d words",
            len(tokens), len(active), self._fuzzy,
            len(matches), n_phrases, n_words,
        )

        return AnalysisResult(
            counts_by_topic=counts,
            detailed=detailed,
            n_tokens=len(tokens),
            matched_tokens=sum(claimed),
            fuzzy=self._fuzzy,
        )
