"""Plain-text extraction from .txt and .docx documents."""

from __future__ import annotations

import logging
import zipfile
from pathlib import Path
from xml.etree import ElementTree

from ._decode import decode_text, strip_bom
from ._errors import ExtractionError, UnsupportedFormatError

logger = logging.getLogger(__name__)

_W_NS = "{http://schemas.openxmlformats.org/wordprocessingml/2006/main}"

SUPPORTED_SUFFIXES = (".txt", ".docx")


def _read_txt(path: Path) -> str:
    return decode_text(path.read_bytes(), str(path))


def _read_docx(path: Path) -> str:
    try:
        with zipfile.ZipFile(path) as zf:
            xml = zf.read("word/document.xml")
    except (zipfile.BadZipFile, KeyError) as e:
        raise ExtractionError(f"Not a valid .docx file: {path} ({e})") from e

    root = ElementTree.fromstring(xml)
    lines: list[str] = []
    for para in root.iter(f"{_W_NS}p"):
        parts: list[str] = []
        for node in para.iter():
            if node.tag == f"{_W_NS}t" and node.text:
                parts.append(node.text)
            elif node.tag == f"{_W_NS}tab":
                parts.append("\t")
            elif node.tag in (f"{_W_NS}br", f"{_W_NS}cr"):
                parts.append("\n")
        lines.append("".join(parts))
    return strip_bom("\n".join(lines) + "\n" if lines else "")


def parse(path: Path | str) -> str:
    """Extract the text of a document, chosen by file extension.

    Raises:
        UnsupportedFormatError: For extensions other than .txt and .docx.
        ExtractionError: If the file cannot be read or decoded.
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise UnsupportedFormatError(
            f"Unsupported file format {suffix or '(none)'!r}: {path}"
        )

    try:
        if suffix == ".txt":
            text = _read_txt(path)
        else:
            text = _read_docx(path)
    except OSError as e:
        raise ExtractionError(f"Cannot read {path}: {e}") from e
    except ElementTree.ParseError as e:
        raise ExtractionError(f"Malformed document XML in {path}: {e}") from e

    logger.info("Extracted %d characters from %s", len(text), path)
    return text
