"""Letterbag: find the words that can be spelled from a bag of letters."""

from __future__ import annotations

from pathlib import Path

from ._errors import LetterbagChecksumError, LetterbagError, LetterbagVersionError
from ._loader import compile_corpus, load_corpus, read_words
from ._profile import ALPHABET_SIZE, EMPTY_PROFILE, Profile, build_profile, can_construct
from ._random import generate_random_letters
from ._scanner import PARALLEL_THRESHOLD, WordFinder, find_matches, partition, scan_profiles
from ._types import WordEntry

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "load",
    "ALPHABET_SIZE",
    "EMPTY_PROFILE",
    "LetterbagChecksumError",
    "LetterbagError",
    "LetterbagVersionError",
    "PARALLEL_THRESHOLD",
    "Profile",
    "WordEntry",
    "WordFinder",
    "build_profile",
    "can_construct",
    "compile_corpus",
    "find_matches",
    "generate_random_letters",
    "load_corpus",
    "partition",
    "read_words",
    "scan_profiles",
]


def load(source: Path | str) -> WordFinder:
    """Load a corpus and return a ready-to-use WordFinder.

    Args:
        source: A compiled corpus directory (see compile_corpus) or a
            plain word file with one word per line.
    """
    source = Path(source)
    if source.is_dir():
        return WordFinder(load_corpus(source))
    return WordFinder(read_words(source))
