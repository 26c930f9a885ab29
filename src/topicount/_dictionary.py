"""Topic dictionaries: immutable snapshots behind a swappable store."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Iterable, Mapping

from ._decode import decode_text
from ._errors import DictionaryError

logger = logging.getLogger(__name__)

DEFAULT_TOPICS = (
    "medical",
    "history",
    "programming",
    "networks",
    "cryptography",
    "finance",
)


def _default_data_dir() -> Path:
    return Path(str(resources.files("topicount") / "data"))


def normalize_entries(lines: Iterable[str]) -> tuple[str, ...]:
    """Trim, lowercase, drop blanks and collapse duplicates, keeping order."""
    seen: dict[str, None] = {}
    for line in lines:
        entry = line.strip().lower()
        if entry:
            seen.setdefault(entry, None)
    return tuple(seen)


@dataclass(slots=True, frozen=True)
class DictionarySnapshot:
    """Read-only topic -> entries mapping bound by one analysis call."""

    entries: Mapping[str, tuple[str, ...]] = field(default_factory=dict)

    @classmethod
    def from_mapping(
        cls, topics: Mapping[str, Iterable[str]]
    ) -> DictionarySnapshot:
        return cls({t: normalize_entries(words) for t, words in topics.items()})

    def topics(self) -> list[str]:
        return list(self.entries)

    def words_for_topic(self, topic: str) -> tuple[str, ...]:
        return self.entries.get(topic, ())

    def snapshot(self) -> DictionarySnapshot:
        return self

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, topic: object) -> bool:
        return topic in self.entries


def read_dictionary_file(path: Path | str) -> tuple[str, tuple[str, ...]]:
    """Read one ``<topic>.txt`` file.

    Returns (topic, entries), the topic being the file name without suffix.

    Raises:
        DictionaryError: If the file is missing, unreadable or has no entries.
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except FileNotFoundError:
        raise DictionaryError(f"Dictionary file not found: {path}") from None
    except OSError as e:
        raise DictionaryError(f"Cannot read dictionary file {path}: {e}") from e

    entries = normalize_entries(decode_text(data, str(path)).splitlines())
    if not entries:
        raise DictionaryError(f"Dictionary file has no entries: {path}")
    return path.stem, entries


class DictionaryStore:
    """Holds the current dictionary snapshot; every change swaps in a new one.

    Readers call snapshot() once and keep using that object, so a reload
    running on another thread never changes an analysis halfway through.
    """

    __slots__ = ("_lock", "_snapshot")

    def __init__(
        self, topics: Mapping[str, Iterable[str]] | None = None
    ) -> None:
        self._lock = threading.Lock()
        self._snapshot = DictionarySnapshot.from_mapping(topics or {})

    @classmethod
    def default(cls) -> DictionaryStore:
        """Store preloaded with the bundled dictionaries."""
        store = cls()
        data_dir = _default_data_dir()
        for name in DEFAULT_TOPICS:
            store.load_dictionary_file(data_dir / f"{name}.txt")
        return store

    def snapshot(self) -> DictionarySnapshot:
        with self._lock:
            return self._snapshot

    def topics(self) -> list[str]:
        return self.snapshot().topics()

    def words_for_topic(self, topic: str) -> tuple[str, ...]:
        return self.snapshot().words_for_topic(topic)

    def _swap(self, update: Mapping[str, tuple[str, ...]], drop: str | None = None) -> None:
        with self._lock:
            merged = dict(self._snapshot.entries)
            if drop is not None:
                merged.pop(drop, None)
            merged.update(update)
            self._snapshot = DictionarySnapshot(merged)

    def add_topic(self, topic: str, words: Iterable[str]) -> None:
        """Add or replace a topic."""
        entries = normalize_entries(words)
        self._swap({topic: entries})
        logger.info("Topic %r set with %d entries", topic, len(entries))

    def remove_topic(self, topic: str) -> None:
        if topic not in self.snapshot():
            raise DictionaryError(f"Unknown topic: {topic!r}")
        self._swap({}, drop=topic)
        logger.info("Topic %r removed", topic)

    def replace(self, snapshot: DictionarySnapshot) -> None:
        """Swap in a whole snapshot, e.g. one read from a bundle."""
        with self._lock:
            self._snapshot = snapshot
        logger.info("Dictionary replaced: %d topics", len(snapshot))

    def load_dictionary_file(self, path: Path | str) -> str:
        """Load ``<topic>.txt`` and return the topic name it was stored under."""
        topic, entries = read_dictionary_file(path)
        self._swap({topic: entries})
        logger.info("Loaded dictionary %r (%d entries) from %s", topic, len(entries), path)
        return topic

    def load_directory(self, path: Path | str) -> list[str]:
        """Load every ``*.txt`` file of a directory, in file name order."""
        path = Path(path)
        if not path.is_dir():
            raise DictionaryError(f"Dictionary directory not found: {path}")
        files = sorted(path.glob("*.txt"))
        if not files:
            raise DictionaryError(f"No *.txt dictionaries in {path}")

        loaded = dict(read_dictionary_file(f) for f in files)
        self._swap(loaded)
        logger.info("Loaded %d dictionaries from %s", len(loaded), path)
        return list(loaded)
