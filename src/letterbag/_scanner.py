"""Corpus scanning: sequential and parallel-partition subset matching."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from concurrent.futures import ProcessPoolExecutor
from itertools import repeat
from typing import TypeVar, Union

from ._profile import Profile, build_profile, can_construct
from ._types import WordEntry

logger = logging.getLogger(__name__)

# Below this many words a process pool costs more than it saves.
PARALLEL_THRESHOLD: int = 5000

Candidate = Union[str, WordEntry]

T = TypeVar("T")


def scan_profiles(pool: Profile, entries: Iterable[Candidate]) -> list[str]:
    """Return the spellings of entries constructible from an already-built pool.

    Plain strings are profiled on the fly; WordEntry items reuse their
    stored profile.
    """
    matches: list[str] = []
    for entry in entries:
        if isinstance(entry, WordEntry):
            word, profile = entry.value, entry.profile
        else:
            word, profile = entry, build_profile(entry)
        if can_construct(pool, profile):
            matches.append(word)
    return matches


def partition(items: Sequence[T], n: int) -> list[Sequence[T]]:
    """Split items into at most n contiguous, non-empty, near-equal chunks."""
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")
    total = len(items)
    n = min(n, total)
    if n == 0:
        return []
    size, extra = divmod(total, n)
    chunks: list[Sequence[T]] = []
    start = 0
    for i in range(n):
        end = start + size + (1 if i < extra else 0)
        chunks.append(items[start:end])
        start = end
    return chunks


def _scan_chunk(chunk: Sequence[Candidate], pool: Profile) -> list[str]:
    return scan_profiles(pool, chunk)


def find_matches(
    pool_text: str,
    corpus: Iterable[Candidate],
    *,
    workers: int | None = None,
) -> list[str]:
    """Find every corpus word that can be spelled from the letters in pool_text.

    Args:
        pool_text: Available letters. Case is folded, non-letters are ignored.
        corpus: Words in order, as raw strings or pre-profiled WordEntry items.
        workers: Number of worker processes. None or 1 scans sequentially.
            Corpora smaller than PARALLEL_THRESHOLD are always scanned
            sequentially.

    Returns:
        Matching spellings in corpus order.
    """
    if workers is not None and workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")

    pool = build_profile(pool_text)

    if workers is None or workers == 1:
        return scan_profiles(pool, corpus)

    if not isinstance(corpus, Sequence):
        corpus = list(corpus)
    if len(corpus) < PARALLEL_THRESHOLD:
        logger.debug(
            f"Corpus of {len(corpus)} words below parallel threshold, "
            f"scanning sequentially"
        )
        return scan_profiles(pool, corpus)

    chunks = partition(corpus, workers)
    logger.debug(f"Scanning {len(corpus)} words in {len(chunks)} chunks")
    matches: list[str] = []
    with ProcessPoolExecutor(max_workers=len(chunks)) as executor:
        # map() yields results in submission order, so partition order holds.
        for sub in executor.map(_scan_chunk, chunks, repeat(pool)):
            matches.extend(sub)
    return matches


class WordFinder:
    """A corpus profiled once, ready to be matched against many letter pools."""

    __slots__ = ("_entries",)

    def __init__(self, entries: list[WordEntry]) -> None:
        self._entries = entries

    @classmethod
    def from_words(cls, words: Iterable[str]) -> WordFinder:
        """Profile raw words, keeping their order."""
        return cls([WordEntry.from_word(w) for w in words])

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> list[WordEntry]:
        return self._entries

    @property
    def words(self) -> list[str]:
        return [e.value for e in self._entries]

    def find(self, letters: str, *, workers: int | None = None) -> list[str]:
        """Return corpus words constructible from letters, in corpus order."""
        logger.debug(f"Matching {len(self._entries)} words against {letters!r}")
        return find_matches(letters, self._entries, workers=workers)
