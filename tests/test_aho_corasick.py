import pytest

from algobox.aho_corasick import AhoCorasick

WORDS = ["test", "li", "line", "_", "t"]
TEXT = "test_line!"


@pytest.fixture
def automaton():
    ac = AhoCorasick()
    for word in WORDS:
        ac.add_word(word)
    ac.build()
    return ac


def test_source_example(automaton):
    assert list(automaton.search(TEXT)) == [
        (0, "t"),
        (3, "test"),
        (3, "t"),
        (4, "_"),
        (6, "li"),
        (8, "line"),
    ]


def test_every_match_ends_at_reported_index(automaton):
    matches = list(automaton.search(TEXT * 3))
    text = TEXT * 3
    assert matches
    for end, word in matches:
        assert text[end - len(word) + 1 : end + 1] == word


def test_match_count_equals_occurrences(automaton):
    text = "tttest_li_line"
    matches = list(automaton.search(text))
    for word in WORDS:
        expected = sum(text.startswith(word, i) for i in range(len(text)))
        assert sum(1 for _, w in matches if w == word) == expected


def test_overlapping_words():
    ac = AhoCorasick()
    for word in ["he", "she", "his", "hers"]:
        ac.add_word(word)
    found = {word for _, word in ac.search("ushers")}
    assert found == {"she", "he", "hers"}


def test_search_builds_lazily_and_after_new_words():
    ac = AhoCorasick()
    ac.add_word("ab")
    assert list(ac.search("xab")) == [(2, "ab")]
    ac.add_word("b")
    assert sorted(ac.search("xab")) == [(2, "ab"), (2, "b")]


def test_no_words_finds_nothing():
    assert list(AhoCorasick().search("anything")) == []