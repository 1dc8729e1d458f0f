"""Tests for read-only queries over word groups."""

import random

import pytest

from lexindex.core.lexical import NormalizedWord
from lexindex.processing.query import (
    flatten_groups,
    group_counts,
    paginate,
    sample_words,
    search_words,
    unique_by_id,
)


def _word(word_id, word, meanings, **kwargs):
    return NormalizedWord(id=word_id, word=word, meanings=meanings, **kwargs)


@pytest.fixture
def groups():
    return {
        "nouns": [
            _word("1", "λόγος", ["word", "reason", "account"]),
            _word("2", "θεός", ["god", "deity"]),
        ],
        "verbs": [_word("3", "γράφω", ["I write", "I record"], transliteration="grapho")],
        "empty": [],
    }


class TestFlattenGroups:
    def test_all_groups_in_order(self, groups):
        assert [w.id for w in flatten_groups(groups)] == ["1", "2", "3"]

    def test_selected_groups(self, groups):
        assert [w.id for w in flatten_groups(groups, ["verbs", "nouns"])] == ["3", "1", "2"]

    def test_unknown_group_ignored(self, groups):
        assert flatten_groups(groups, ["missing"]) == []


class TestSearchWords:
    @pytest.mark.parametrize(
        "term,expected",
        [
            ("λόγ", ["1"]),
            ("GOD", ["2"]),
            ("write", ["3"]),
            ("Graph", ["3"]),
            ("r", ["1", "3"]),
            ("nothing", []),
        ],
    )
    def test_matches(self, groups, term, expected):
        assert [w.id for w in search_words(groups, term)] == expected

    def test_blank_term_returns_everything(self, groups):
        assert len(search_words(groups, "  ")) == 3

    def test_accepts_word_list(self, groups):
        words = groups["nouns"]
        assert [w.id for w in search_words(words, "deity")] == ["2"]


def test_unique_by_id_keeps_first():
    first = _word("a", "amor", ["love"])
    duplicate = _word("a", "amor", ["love", "desire"])
    other = _word("b", "amor", ["love"])
    assert unique_by_id([first, duplicate, other]) == [first, other]


def test_group_counts(groups):
    assert group_counts(groups) == {"nouns": 2, "verbs": 1, "empty": 0}


class TestPaginate:
    @pytest.fixture
    def words(self):
        return [_word(str(i), f"w{i}", ["m"]) for i in range(7)]

    def test_pages(self, words):
        assert [w.id for w in paginate(words, 1, 3)] == ["0", "1", "2"]
        assert [w.id for w in paginate(words, 3, 3)] == ["6"]
        assert paginate(words, 4, 3) == []

    @pytest.mark.parametrize("page,size", [(0, 3), (1, 0), (-1, 5)])
    def test_invalid_arguments(self, words, page, size):
        with pytest.raises(ValueError):
            paginate(words, page, size)


class TestSampleWords:
    @pytest.fixture
    def words(self):
        return [_word(str(i), f"w{i}", ["m"]) for i in range(20)]

    def test_count_and_uniqueness(self, words):
        sample = sample_words(words, 10)
        assert len(sample) == 10
        assert len({w.id for w in sample}) == 10

    def test_seeded_rng_repeatable(self, words):
        first = sample_words(words, 5, rng=random.Random(7))
        second = sample_words(words, 5, rng=random.Random(7))
        assert first == second

    def test_count_larger_than_pool(self, words):
        assert len(sample_words(words[:3], 10)) == 3

    def test_input_untouched(self, words):
        before = list(words)
        sample_words(words, 5, rng=random.Random(1))
        assert words == before
