"""
Unit tests for the break-point predicates.
"""

import pytest

from versecard.domain.break_rule import BreakRule
from versecard.services.break_point_service import BreakPointDetector


@pytest.fixture
def detector(config):
    return BreakPointDetector(config)


class TestBreakRule:
    """Tests for the declarative rule type."""

    def test_suffix_and_prefix(self):
        rule = BreakRule("demo", ("께서",), ("하나님",))
        assert rule.matches("예수께서", "하나님의")
        assert not rule.matches("예수께서", "말씀하신")
        assert not rule.matches("예수님", "하나님의")

    def test_empty_prefixes_accept_any_next_word(self):
        rule = BreakRule("demo", ("께서",))
        assert rule.matches("예수께서", "아무말이나")


class TestSharedPredicates:
    """Tests for the four predicates used while scanning tokens."""

    def test_subject_time(self, detector):
        assert detector.is_new_subject_start("사흘후에", "너희에게")

    def test_subject_divine(self, detector):
        assert detector.is_new_subject_start("하나님께서", "예수께서")
        assert not detector.is_new_subject_start("하나님께서", "너희에게")

    def test_action(self, detector):
        assert detector.is_new_action_start("후히주시고", "꾸짖지않으시는")

    def test_result(self, detector):
        assert detector.is_new_result_start("너희는구하라", "그리하면")

    def test_command(self, detector):
        assert detector.is_new_command_start("부족하거든", "하나님께")
        assert detector.is_new_command_start("아니하시는", "하나님께")

    def test_should_break_combines_predicates(self, detector):
        assert detector.should_break_clause("부족하거든", "하나님께")
        assert not detector.should_break_clause("부족하거든", "모든것을")


class TestLengthGuard:
    """Words shorter than four characters are never break points."""

    @pytest.mark.parametrize("current_word,next_word", [
        ("주께", "하나님께서"),
        ("구하라", "그리하면"),
        ("주시고", "꾸짖지않으시는"),
        ("부족하거든", "모든"),
        ("하나님께서", None),
        (None, "하나님께서"),
        ("", "하나님께서"),
    ])
    def test_short_or_missing_words_never_break(self, detector, current_word, next_word):
        assert not detector.should_break_clause(current_word, next_word)
        assert not detector.is_forced_break_point(current_word, next_word)


class TestForcedBreakPoint:
    """Tests for the predicate used by forced segmentation."""

    def test_includes_shared_predicates(self, detector):
        assert detector.is_forced_break_point("부족하거든", "하나님께")

    def test_extra_pairs(self, detector):
        assert detector.is_forced_break_point("부족하거든", "모든것을")
        assert detector.is_forced_break_point("지혜가부족하니", "모든것을") is False
        assert detector.is_forced_break_point("더하여주리니", "너의길을")

    def test_topic_rule_accepts_any_next_word(self, detector):
        assert detector.is_forced_break_point("하나님께서", "말씀하시기를")
        assert not detector.should_break_clause("하나님께서", "말씀하시기를")
