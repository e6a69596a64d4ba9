"""
Unit tests for line composition and rhythm refinement.
"""

import pytest

from versecard.domain.clause import Clause
from versecard.services.line_composer_service import LineComposer
from versecard.services.rhythm_service import RhythmRefiner


@pytest.fixture
def composer(config):
    return LineComposer(config)


@pytest.fixture
def refiner(config):
    return RhythmRefiner(config)


def clauses_of(*texts):
    return [Clause(text=t, words=tuple(t.split())) for t in texts]


class TestLineComposer:
    """Tests for the composition rules."""

    def test_connective_is_appended_past_max_length_and_breaks(self, composer):
        clauses = clauses_of("하나님께서 너희에게 지혜를 구하라.", " 그리하면 너의 길이 평탄하리라.")
        lines = composer.compose(clauses, {1}, max_length=15)
        assert lines == ["하나님께서 너희에게 지혜를 구하라. 그리하면 너의 길이 평탄하리라."]

    def test_break_index_flushes(self, composer):
        lines = composer.compose(clauses_of("주의 말씀", "진리라"), {1}, max_length=50)
        assert lines == ["주의 말씀", "진리라"]

    def test_max_length_flushes(self, composer):
        lines = composer.compose(clauses_of("주의 말씀", "진리라"), set(), max_length=6)
        assert lines == ["주의 말씀", "진리라"]

    def test_long_last_word_flushes(self, composer):
        lines = composer.compose(clauses_of("주의 말씀", "진리이니라"), set(), max_length=50)
        assert lines == ["주의 말씀", "진리이니라"]

    def test_short_clauses_are_joined(self, composer):
        lines = composer.compose(clauses_of("평안하라", "주의 말씀"), set(), max_length=50)
        assert lines == ["평안하라 주의 말씀"]

    def test_no_clauses(self, composer):
        assert composer.compose([], set(), max_length=15) == []


class TestRhythmRefiner:
    """Tests for merging short lines."""

    def test_short_line_without_long_word_is_merged(self, refiner):
        assert refiner.refine(["하나님께서 너희에게", "곧 주리라"]) == "하나님께서 너희에게 곧 주리라"

    def test_line_with_long_word_is_kept(self, refiner):
        assert refiner.refine(["주의 말씀", "평안하라"]) == "주의 말씀\n평안하라"

    def test_first_line_is_never_merged(self, refiner):
        assert refiner.refine(["곧"]) == "곧"

    def test_empty(self, refiner):
        assert refiner.refine([]) == ""
