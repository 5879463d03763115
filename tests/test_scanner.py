"""Tests for corpus scanning, partitioning and WordFinder."""

import pytest

import letterbag
from letterbag import WordEntry, WordFinder, build_profile, find_matches, partition, scan_profiles
from letterbag import _scanner

SAMPLE_WORDS = [
    "arm", "art", "back", "bed", "camp", "cap", "cat", "act", "cub",
    "cup", "deed", "dog", "dodge", "goat", "mammal", "star", "tar",
]


def test_order_preservation():
    assert find_matches("tac", ["cat", "dog", "act"]) == ["cat", "act"]


def test_empty_corpus():
    assert find_matches("abc", []) == []


def test_empty_pool():
    assert find_matches("", ["a", "cat"]) == []


def test_empty_pool_admits_empty_words():
    assert find_matches("", ["a", "", "cat", ""]) == ["", ""]


def test_duplicates_kept():
    assert find_matches("cat", ["cat", "act", "cat"]) == ["cat", "act", "cat"]


def test_original_spelling_returned():
    assert find_matches("ABC", ["Cab", "c-a-b", "abcd"]) == ["Cab", "c-a-b"]


def test_find_words_in_4_letter_list(finder):
    assert finder.find("cmbl") == []


def test_find_words_in_8_letter_list(finder):
    assert finder.find("wartsmrf") == ["arm", "art", "star", "tar"]


def test_find_words_in_20_letter_list(finder):
    assert finder.find("fsucwcaumvxvkfvpbkjw") == ["back", "camp", "cap", "cub", "cup"]


def test_accepts_word_entries_and_strings():
    corpus = [WordEntry.from_word("bed"), "deed", WordEntry.from_word("bde")]
    assert find_matches("bde", corpus) == ["bed", "bde"]


def test_word_entry_profile_is_used():
    """A pre-profiled entry is matched on its stored profile, not its spelling."""
    entry = WordEntry(value="display", profile=build_profile("ab"))
    assert find_matches("ab", [entry]) == ["display"]


def test_generator_corpus():
    assert find_matches("god", (w for w in ["dog", "cat", "god"])) == ["dog", "god"]


def test_corpus_not_mutated():
    corpus = ["cat", "dog", "act"]
    find_matches("tac", corpus, workers=2)
    assert corpus == ["cat", "dog", "act"]


def test_pool_profile_built_once(monkeypatch):
    calls = []
    real = _scanner.build_profile

    def counting(text):
        calls.append(text)
        return real(text)

    monkeypatch.setattr(_scanner, "build_profile", counting)
    entries = [WordEntry.from_word(w) for w in SAMPLE_WORDS]
    find_matches("wartsmrf", entries)
    assert calls == ["wartsmrf"]


@pytest.mark.parametrize("split", [0, 1, 5, len(SAMPLE_WORDS)])
def test_partition_equivalence(split):
    pool = build_profile("dodgecatbackmp")
    whole = scan_profiles(pool, SAMPLE_WORDS)
    halves = scan_profiles(pool, SAMPLE_WORDS[:split]) + scan_profiles(pool, SAMPLE_WORDS[split:])
    assert halves == whole


@pytest.mark.parametrize("n", [1, 2, 3, 5, 17, 100])
def test_partition_shape(n):
    chunks = partition(SAMPLE_WORDS, n)
    assert len(chunks) == min(n, len(SAMPLE_WORDS))
    assert all(chunks)
    assert [w for c in chunks for w in c] == SAMPLE_WORDS
    sizes = [len(c) for c in chunks]
    assert max(sizes) - min(sizes) <= 1


def test_partition_empty():
    assert partition([], 4) == []


def test_partition_invalid():
    with pytest.raises(ValueError):
        partition(SAMPLE_WORDS, 0)


def test_invalid_workers():
    with pytest.raises(ValueError):
        find_matches("abc", ["a"], workers=0)


def test_small_corpus_stays_sequential(monkeypatch):
    def boom(*args, **kwargs):
        raise AssertionError("process pool should not be used")

    monkeypatch.setattr(_scanner, "ProcessPoolExecutor", boom)
    assert find_matches("tac", ["cat", "dog", "act"], workers=4) == ["cat", "act"]


def test_parallel_matches_sequential(monkeypatch):
    monkeypatch.setattr(_scanner, "PARALLEL_THRESHOLD", 10)
    corpus = SAMPLE_WORDS * 7
    sequential = find_matches("wartsmrfbackcupdeg", corpus)
    parallel = find_matches("wartsmrfbackcupdeg", corpus, workers=3)
    assert parallel == sequential
    assert len(parallel) > 0


def test_finder_from_words():
    finder = WordFinder.from_words(["cat", "dog"])
    assert len(finder) == 2
    assert finder.words == ["cat", "dog"]
    assert finder.entries[0] == WordEntry("cat", build_profile("cat"))


def test_load_plain_file(words_file):
    finder = letterbag.load(words_file)
    assert finder.words == SAMPLE_WORDS
    assert finder.find("bde") == ["bed"]


def test_finder_logs_under_module_logger(caplog):
    finder = WordFinder.from_words(["cat", "dog"])
    with caplog.at_level("DEBUG", logger="letterbag._scanner"):
        finder.find("tac")
    assert any(
        r.name == "letterbag._scanner" and "Matching 2 words" in r.getMessage()
        for r in caplog.records
    )
