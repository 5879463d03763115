"""Data structures for letterbag."""

from __future__ import annotations

from dataclasses import dataclass

from ._profile import Profile, build_profile


@dataclass(slots=True, frozen=True)
class WordEntry:
    value: str        # original spelling, returned on match
    profile: Profile  # 26-slot letter counts

    @classmethod
    def from_word(cls, word: str) -> WordEntry:
        return cls(value=word, profile=build_profile(word))
