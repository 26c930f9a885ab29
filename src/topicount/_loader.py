"""Compiled dictionary bundles: msgpack data, manifest and SHA-256 checks."""

from __future__ import annotations

import hashlib
import json
import logging
from pathlib import Path
from typing import Any

import msgpack

from ._dictionary import DictionarySnapshot, normalize_entries
from ._errors import BundleChecksumError, BundleVersionError, DictionaryError

logger = logging.getLogger(__name__)

BUNDLE_VERSION = "1.0"

_DATA_FILE = "dictionaries.bin"
_MANIFEST = "manifest.json"


def _sha256(path: Path) -> str:
    h = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(65536), b""):
            h.update(chunk)
    return h.hexdigest()


def _read_manifest(bundle_dir: Path) -> dict[str, Any]:
    manifest_path = bundle_dir / _MANIFEST
    if not manifest_path.exists():
        raise DictionaryError(f"{_MANIFEST} not found in {bundle_dir}")
    with open(manifest_path, encoding="utf-8") as f:
        return json.load(f)


def _validate_manifest(manifest: dict[str, Any], bundle_dir: Path) -> None:
    version = manifest.get("version")
    if version != BUNDLE_VERSION:
        raise BundleVersionError(
            f"Expected bundle version {BUNDLE_VERSION!r}, got {version!r}"
        )
    filepath = bundle_dir / _DATA_FILE
    if not filepath.exists():
        raise DictionaryError(f"Missing bundle file: {filepath}")
    expected = manifest.get("files", {}).get(_DATA_FILE)
    if expected is None:
        raise DictionaryError(f"No checksum in manifest for {_DATA_FILE}")
    actual = _sha256(filepath)
    if actual != expected:
        raise BundleChecksumError(
            f"Checksum mismatch for {_DATA_FILE}: "
            f"expected {expected[:16]}..., got {actual[:16]}..."
        )


def save_bundle(snapshot: DictionarySnapshot, bundle_dir: Path | str) -> Path:
    """Write a snapshot as ``dictionaries.bin`` plus ``manifest.json``.

    Topic and entry order are preserved, so an index built from the loaded
    bundle picks the same stem representatives as one built from the source.
    """
    bundle_dir = Path(bundle_dir)
    bundle_dir.mkdir(parents=True, exist_ok=True)

    payload = [[topic, list(words)] for topic, words in snapshot.entries.items()]
    data_path = bundle_dir / _DATA_FILE
    with open(data_path, "wb") as f:
        f.write(msgpack.packb(payload, use_bin_type=True))

    manifest = {
        "version": BUNDLE_VERSION,
        "files": {_DATA_FILE: _sha256(data_path)},
        "topics": len(payload),
    }
    with open(bundle_dir / _MANIFEST, "w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)

    logger.info("Saved bundle with %d topics to %s", len(payload), bundle_dir)
    return bundle_dir


def load_bundle(bundle_dir: Path | str) -> DictionarySnapshot:
    """Validate and read a bundle written by save_bundle()."""
    bundle_dir = Path(bundle_dir)
    manifest = _read_manifest(bundle_dir)
    _validate_manifest(manifest, bundle_dir)

    with open(bundle_dir / _DATA_FILE, "rb") as f:
        payload = msgpack.unpackb(f.read(), raw=False)

    entries: dict[str, tuple[str, ...]] = {}
    for topic, words in payload:
        entries[topic] = normalize_entries(words)

    logger.info("Loaded bundle with %d topics from %s", len(entries), bundle_dir)
    return DictionarySnapshot(entries)
