"""Shared fixtures for letterbag tests."""

import pytest

import letterbag

_WORDS = [
    "arm", "art", "back", "bed", "camp", "cap", "cat", "act", "cub",
    "cup", "deed", "dog", "dodge", "goat", "mammal", "star", "tar",
]


@pytest.fixture
def words_file(tmp_path):
    """A small word file, one word per line."""
    path = tmp_path / "words.txt"
    path.write_text("\n".join(_WORDS) + "\n")
    return path


@pytest.fixture
def finder():
    return letterbag.WordFinder.from_words(_WORDS)
