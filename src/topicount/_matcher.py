"""Phrase scan with overlap resolution, then single-word scan."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._index import phrase_key
from ._types import Match

if TYPE_CHECKING:
    from ._index import DictionaryIndex


def find_phrase_matches(
    index: DictionaryIndex, tokens: list[str], stems: list[str]
) -> list[Match]:
    """Phase 1: every window matching a multi-word entry, overlaps included.

    Strict mode scans the token sequence, fuzzy mode the stem sequence; an
    exact token match always implies equal stems, so the stem scan covers
    both alternatives of the fuzzy rule.

    Returns matches in discovery order: by dictionary entry, then by start.
    """
    ac = index.phrase_ac
    if ac is None or not tokens:
        return []

    units = stems if index.fuzzy else tokens
    haystack = phrase_key(units)

    # Offset of the separator in front of each token -> token position.
    boundary: dict[int, int] = {}
    offset = 0
    for pos, unit in enumerate(units):
        boundary[offset] = pos
        offset += len(unit) + 1

    hits: list[tuple[int, int]] = []  # (phrase idx, start token)
    for end_inclusive, (key_len, phrase_ids) in ac.iter(haystack):
        start = boundary[end_inclusive - key_len + 1]
        for phrase_id in phrase_ids:
            hits.append((phrase_id, start))
    hits.sort()

    phrases = index.phrases
    lengths = index.phrase_lengths
    multiword = index.multiword
    return [
        Match(
            topics=frozenset(multiword[phrases[pid]]),
            entry=phrases[pid],
            start=start,
            end=start + lengths[pid],
        )
        for pid, start in hits
    ]


def accept_phrases(
    matches: list[Match],
    claimed: bytearray,
    counts: dict[str, int],
    detailed: dict[str, dict[str, int]],
) -> int:
    """Phase 2: accept matches whose positions are all unclaimed.

    Matches are taken in the given order; a match touching any claimed
    position is dropped whole. Returns the number of accepted matches.
    """
    accepted = 0
    for m in matches:
        if any(claimed[m.start:m.end]):
            continue
        for topic in m.topics:
            entries = detailed[topic]
            entries[m.entry] = entries.get(m.entry, 0) + 1
            counts[topic] += 1
        claimed[m.start:m.end] = b"\x01" * (m.end - m.start)
        accepted += 1
    return accepted


def match_words(
    index: DictionaryIndex,
    tokens: list[str],
    stems: list[str],
    claimed: bytearray,
    counts: dict[str, int],
    detailed: dict[str, dict[str, int]],
) -> int:
    """Phase 3: exact then stem lookup for each unclaimed token.

    Each position counts once per owning topic. Stem matches are recorded
    under the group's representative word. Returns the positions claimed.
    """
    singleword = index.singleword
    stem_index = index.stem_index if index.fuzzy else None
    n_claimed = 0

    for pos, token in enumerate(tokens):
        if claimed[pos]:
            continue

        owners = singleword.get(token)
        key = token
        if owners is None and stem_index is not None:
            group = stem_index.get(stems[pos])
            if group is not None:
                owners = group.topics
                key = group.representative
        if owners is None:
            continue

        for topic in owners:
            entries = detailed[topic]
            entries[key] = entries.get(key, 0) + 1
            counts[topic] += 1
        claimed[pos] = 1
        n_claimed += 1

    return n_claimed
