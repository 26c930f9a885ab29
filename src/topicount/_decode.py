"""UTF-8 decoding with a windows-1251 fallback for Cyrillic text."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

_BOM = "\ufeff"
_MIN_LETTER_RATIO = 0.3


def strip_bom(text: str) -> str:
    if text.startswith(_BOM):
        return text[1:]
    return text


def looks_garbled(text: str) -> bool:
    """Heuristic for mis-decoded text: replacement chars or too few letters."""
    if not text:
        return True
    letters = 0
    for ch in text:
        if ch == "\ufffd":
            return True
        if ch.isalpha():
            letters += 1
    return letters / len(text) < _MIN_LETTER_RATIO


def decode_text(data: bytes, source: str = "<bytes>") -> str:
    """Decode bytes as UTF-8, retrying as cp1251 when the result looks garbled.

    If both decodings look garbled the UTF-8 text is returned as is.
    """
    text = strip_bom(data.decode("utf-8", errors="replace"))
    if not looks_garbled(text):
        return text

    fallback = strip_bom(data.decode("cp1251", errors="replace"))
    if not looks_garbled(fallback):
        logger.info("Decoded %s as windows-1251", source)
        return fallback

    if data:
        logger.warning("Text in %s looks garbled in UTF-8 and windows-1251", source)
    return text
