"""Letter profiles: fixed 26-slot letter counts and the subset predicate."""

from __future__ import annotations

ALPHABET_SIZE: int = 26

Profile = tuple[int, ...]

_ORD_A = ord("a")
EMPTY_PROFILE: Profile = (0,) * ALPHABET_SIZE


def build_profile(text: str) -> Profile:
    """Count ASCII letters in text, case-folded. Everything else is ignored."""
    counts = [0] * ALPHABET_SIZE
    for ch in text:
        # Fold ASCII only: some non-ASCII characters lowercase to ASCII letters.
        if not ch.isascii():
            continue
        idx = ord(ch.lower()) - _ORD_A
        if 0 <= idx < ALPHABET_SIZE:
            counts[idx] += 1
    return tuple(counts)


def can_construct(pool: Profile, word: Profile) -> bool:
    """True if every letter count in word fits within the pool."""
    for need, have in zip(word, pool):
        if need > have:
            return False
    return True
