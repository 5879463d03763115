"""Corpus loading: plain word lists and checksummed msgpack corpora."""

from __future__ import annotations

import hashlib
import json
import logging
from pathlib import Path
from typing import Any

import msgpack

from ._errors import LetterbagChecksumError, LetterbagError, LetterbagVersionError
from ._profile import ALPHABET_SIZE
from ._types import WordEntry

logger = logging.getLogger(__name__)

_EXPECTED_VERSION = "1.0"

_CORPUS_FILE = "corpus.bin"
_MANIFEST_FILE = "manifest.json"


def _sha256(path: Path) -> str:
    h = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(65536), b""):
            h.update(chunk)
    return h.hexdigest()


def read_words(path: Path | str) -> list[WordEntry]:
    """Read one word per line, skipping blank lines, profiling each word once."""
    path = Path(path)
    if not path.is_file():
        raise LetterbagError(f"Word file not found: {path}")

    entries: list[WordEntry] = []
    try:
        with open(path, encoding="utf-8") as f:
            for line in f:
                word = line.strip()
                if word:
                    entries.append(WordEntry.from_word(word))
    except UnicodeDecodeError as e:
        raise LetterbagError(f"Cannot decode word file {path}: {e}") from e

    logger.info(f"Read {len(entries)} words from {path}")
    return entries


def compile_corpus(words_path: Path | str, out_dir: Path | str) -> Path:
    """Profile a word file and write corpus.bin plus manifest.json to out_dir."""
    entries = read_words(words_path)
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    corpus_path = out_dir / _CORPUS_FILE
    payload = [[e.value, list(e.profile)] for e in entries]
    with open(corpus_path, "wb") as f:
        f.write(msgpack.packb(payload, use_bin_type=True))

    manifest = {
        "version": _EXPECTED_VERSION,
        "n_words": len(entries),
        "files": {_CORPUS_FILE: _sha256(corpus_path)},
    }
    with open(out_dir / _MANIFEST_FILE, "w") as f:
        json.dump(manifest, f, indent=2)

    logger.info(f"Compiled {len(entries)} words into {out_dir}")
    return out_dir


def _read_manifest(data_dir: Path) -> dict[str, Any]:
    manifest_path = data_dir / _MANIFEST_FILE
    if not manifest_path.exists():
        raise LetterbagError(f"{_MANIFEST_FILE} not found in {data_dir}")
    try:
        with open(manifest_path) as f:
            manifest = json.load(f)
    except json.JSONDecodeError as e:
        raise LetterbagError(f"Invalid {_MANIFEST_FILE} in {data_dir}: {e}") from e
    if not isinstance(manifest, dict):
        raise LetterbagError(f"Invalid {_MANIFEST_FILE} in {data_dir}: not an object")
    return manifest


def _validate_manifest(manifest: dict[str, Any], data_dir: Path) -> None:
    version = manifest.get("version")
    if version != _EXPECTED_VERSION:
        raise LetterbagVersionError(
            f"Expected corpus version {_EXPECTED_VERSION!r}, got {version!r}"
        )
    corpus_path = data_dir / _CORPUS_FILE
    if not corpus_path.exists():
        raise LetterbagError(f"Missing corpus file: {corpus_path}")
    files = manifest.get("files")
    expected = files.get(_CORPUS_FILE) if isinstance(files, dict) else None
    if not isinstance(expected, str):
        raise LetterbagError(f"No checksum in manifest for {_CORPUS_FILE}")
    actual = _sha256(corpus_path)
    if actual != expected:
        raise LetterbagChecksumError(
            f"Checksum mismatch for {_CORPUS_FILE}: "
            f"expected {expected[:16]}..., got {actual[:16]}..."
        )


def _decode_entry(item: Any) -> WordEntry:
    if not (isinstance(item, list) and len(item) == 2):
        raise LetterbagError(f"Malformed {_CORPUS_FILE} entry: {item!r}")
    word, profile = item
    if not isinstance(word, str) or not isinstance(profile, list):
        raise LetterbagError(f"Malformed {_CORPUS_FILE} entry: {item!r}")
    if len(profile) != ALPHABET_SIZE:
        raise LetterbagError(
            f"Profile for {word!r} has {len(profile)} slots, "
            f"expected {ALPHABET_SIZE}"
        )
    if not all(isinstance(n, int) and n >= 0 for n in profile):
        raise LetterbagError(f"Profile for {word!r} has invalid counts")
    return WordEntry(value=word, profile=tuple(profile))


def load_corpus(data_dir: Path | str) -> list[WordEntry]:
    """Load and validate a compiled corpus directory."""
    data_dir = Path(data_dir)
    manifest = _read_manifest(data_dir)
    _validate_manifest(manifest, data_dir)

    with open(data_dir / _CORPUS_FILE, "rb") as f:
        data = f.read()
    try:
        raw = msgpack.unpackb(data, raw=False)
    except (ValueError, msgpack.UnpackException) as e:
        raise LetterbagError(f"Cannot decode {_CORPUS_FILE}: {e}") from e

    if not isinstance(raw, list):
        raise LetterbagError(f"Malformed {_CORPUS_FILE}: expected a list of entries")
    entries = [_decode_entry(item) for item in raw]

    logger.info(f"Loaded {len(entries)} words from {data_dir}")
    return entries
