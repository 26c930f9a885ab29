"""Data structures for topicount."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from ._detect import detect_topic


@dataclass(slots=True, frozen=True)
class Token:
    text: str
    stem: str
    position: int   # 0-based index in the token sequence


@dataclass(slots=True)
class StemGroup:
    representative: str   # first single-word entry seen with this stem
    topics: set[str] = field(default_factory=set)


@dataclass(slots=True, frozen=True)
class Match:
    topics: frozenset[str]
    entry: str
    start: int
    end: int    # exclusive


@dataclass(slots=True, frozen=True)
class AnalysisResult:
    counts_by_topic: Mapping[str, int]
    detailed: Mapping[str, Mapping[str, int]]
    n_tokens: int = 0
    matched_tokens: int = 0
    fuzzy: bool = False

    def __post_init__(self) -> None:
        # Copied into read-only views so a result never changes after it is built.
        object.__setattr__(
            self, "counts_by_topic", MappingProxyType(dict(self.counts_by_topic))
        )
        object.__setattr__(
            self,
            "detailed",
            MappingProxyType(
                {t: MappingProxyType(dict(e)) for t, e in self.detailed.items()}
            ),
        )

    @property
    def coverage(self) -> float:
        """Share of tokens claimed by a phrase or word match."""
        if self.n_tokens == 0:
            return 0.0
        return self.matched_tokens / self.n_tokens

    def top_topic(self) -> str:
        """Shortcut for ``detect_topic(self.counts_by_topic)``."""
        return detect_topic(self.counts_by_topic)
