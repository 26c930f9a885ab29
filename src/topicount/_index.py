"""Per-call dictionary index: entry topics, stem groups, phrase automaton."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Iterable

import ahocorasick

from ._stemmer import stem
from ._types import StemGroup

if TYPE_CHECKING:
    from ._stemmer import StemFn


@dataclass(slots=True)
class DictionaryIndex:
    entry_topics: dict[str, set[str]] = field(default_factory=dict)
    multiword: dict[str, set[str]] = field(default_factory=dict)
    singleword: dict[str, set[str]] = field(default_factory=dict)
    stem_index: dict[str, StemGroup] = field(default_factory=dict)
    # Multi-word entries in discovery order; automaton values index into it.
    phrases: list[str] = field(default_factory=list)
    phrase_lengths: list[int] = field(default_factory=list)
    phrase_ac: ahocorasick.Automaton | None = None
    fuzzy: bool = False


def phrase_key(parts: list[str]) -> str:
    """Space-delimited key; the outer spaces pin matches to token boundaries."""
    return " " + " ".join(parts) + " "


def _build_phrase_automaton(
    phrases: list[str], fuzzy: bool, stem_fn: StemFn
) -> tuple[ahocorasick.Automaton | None, list[int]]:
    # Distinct phrases can share a stem key in fuzzy mode, so each key maps
    # to every phrase index that produces it.
    by_key: dict[str, list[int]] = {}
    lengths: list[int] = []
    for idx, phrase in enumerate(phrases):
        parts = phrase.split(" ")
        lengths.append(len(parts))
        if fuzzy:
            parts = [stem_fn(p) for p in parts]
        by_key.setdefault(phrase_key(parts), []).append(idx)

    if not by_key:
        return None, lengths

    ac = ahocorasick.Automaton()
    for key, indices in by_key.items():
        ac.add_word(key, (len(key), tuple(indices)))
    ac.make_automaton()
    return ac, lengths


def build_index(
    topics: Iterable[str],
    words_for_topic: Callable[[str], Iterable[str]],
    *,
    fuzzy: bool = False,
    stem_fn: StemFn = stem,
) -> DictionaryIndex:
    """Build the matching index for the active topics.

    Args:
        topics: Active topic identifiers, in the order they should be indexed.
        words_for_topic: Returns the lowercase entries of one topic.
        fuzzy: Also build the stem index and stem-keyed phrase automaton.
        stem_fn: Stem function shared with the tokenizer.

    An entry listed under several topics maps to all of them. In fuzzy mode
    the representative of a stem group is the first single-word entry seen
    with that stem, so it depends on topic order and then entry order.
    """
    index = DictionaryIndex(fuzzy=fuzzy)

    # Step 1: entry -> topics, union on repeat
    entry_topics = index.entry_topics
    for topic in topics:
        for entry in words_for_topic(topic):
            owners = entry_topics.get(entry)
            if owners is None:
                entry_topics[entry] = {topic}
            else:
                owners.add(topic)

    # Step 2: partition
    for entry, owners in entry_topics.items():
        if " " in entry:
            index.multiword[entry] = owners
        else:
            index.singleword[entry] = owners

    # Step 3: stem groups from single words
    if fuzzy:
        stem_index = index.stem_index
        for entry, owners in index.singleword.items():
            key = stem_fn(entry)
            group = stem_index.get(key)
            if group is None:
                stem_index[key] = StemGroup(representative=entry, topics=set(owners))
            else:
                group.topics |= owners

    index.phrases = list(index.multiword)
    index.phrase_ac, index.phrase_lengths = _build_phrase_automaton(
        index.phrases, fuzzy, stem_fn,
    )
    return index
