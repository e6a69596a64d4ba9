"""
Unit tests for the plain word wrapper.
"""

from versecard.services.fallback_service import format_verse_fallback


def test_packs_words_up_to_max_length():
    assert format_verse_fallback("하나님께서 너희에게 지혜를 구하라", 10) == "하나님께서 너희에게\n지혜를 구하라"


def test_long_word_is_kept_whole():
    assert format_verse_fallback("하나님께서너희에게 구하라", 5) == "하나님께서너희에게\n구하라"


def test_markup_is_stripped():
    assert "<br>" not in format_verse_fallback("항상 기뻐하라<br>", 25)
    assert format_verse_fallback("항상 기뻐하라<br>", 25) == "항상 기뻐하라"


def test_whitespace_runs_collapse():
    assert format_verse_fallback("항상   기뻐하라\n쉬지 말고", 25) == "항상 기뻐하라 쉬지 말고"


def test_blank_input():
    assert format_verse_fallback("") == ""
    assert format_verse_fallback("<br>") == ""
