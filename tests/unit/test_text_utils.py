"""
Unit tests for text and markup helpers.
"""

import pytest

from versecard.utils.markup import from_card_markup, split_lines, to_card_markup
from versecard.utils.text_normalization import (
    clause_tail,
    last_word,
    normalize_whitespace,
    strip_break_markup,
)
from versecard.utils.timing import Timer


@pytest.mark.parametrize("raw", ["주의 말씀<br>", "주의 말씀<BR/>", "주의 말씀<br />", "  주의 말씀  "])
def test_strip_break_markup(raw):
    assert strip_break_markup(raw) == "주의 말씀"


def test_normalize_whitespace():
    assert normalize_whitespace(" 주의\t 말씀\n") == "주의 말씀"
    assert normalize_whitespace("") == ""


def test_clause_tail():
    assert clause_tail("구하라. ", (".", ",")) == "구하라"
    assert clause_tail("구하라!?", ("!", "?")) == "구하라"
    assert clause_tail("...", (".",)) == ""


def test_last_word():
    assert last_word("주의 말씀은 진리라.") == "진리라."
    assert last_word("   ") == ""


def test_card_markup():
    formatted = "하나님께서 너희에게\n지혜를 구하라"
    assert to_card_markup(formatted) == "하나님께서 너희에게<br>지혜를 구하라"
    assert split_lines(formatted) == ["하나님께서 너희에게", "지혜를 구하라"]
    assert from_card_markup(to_card_markup(formatted)) == "하나님께서 너희에게 지혜를 구하라"


def test_timer_measures_elapsed():
    with Timer("noop", log_level="DEBUG") as timer:
        pass
    assert timer.elapsed >= 0.0
