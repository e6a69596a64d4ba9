"""
Unit tests for the verse formatter.
"""

from unittest.mock import MagicMock

import pytest

from versecard import format_verse_for_card
from versecard.lexicon import CONNECTIVES
from versecard.services.formatting_cache import MemoryFormattingCache
from versecard.services.formatting_service import VerseFormatter
from versecard.services.segmentation_service import ClauseSegmenter


class TestScenarios:
    """End-to-end formatting of known verses."""

    def test_connective_stays_with_command(self, formatter, wisdom_verse):
        result = formatter.format(wisdom_verse, 15)
        assert result == wisdom_verse
        assert "\n그리하면" not in result

    def test_single_word_is_never_split(self, formatter):
        assert formatter.format("하나님께서너희에게", 5) == "하나님께서너희에게"

    def test_short_clause_is_unchanged(self, formatter):
        assert formatter.format("주의 말씀은 진리라", 15) == "주의 말씀은 진리라"

    def test_repeated_punctuation_survives(self, formatter):
        result = formatter.format("주의 말씀은 진리라... 아멘!!", 15)
        assert result.count(".") == 3
        assert result.count("!") == 2
        assert all(line.strip() for line in result.split("\n"))

    def test_punctuation_only_input_is_not_emptied(self, formatter):
        result = formatter.format("...", 15)
        assert result
        assert result.count(".") == 3

    def test_blank_input(self, formatter):
        assert formatter.format("") == ""
        assert formatter.format("  <br> ") == ""

    def test_default_max_length(self, formatter, wisdom_verse):
        assert formatter.format(wisdom_verse) == formatter.format(wisdom_verse, 15)


class TestProperties:
    """Invariants that hold for every verse."""

    def test_deterministic(self, config, sample_verses):
        first = VerseFormatter(config=config, cache=MemoryFormattingCache())
        second = VerseFormatter(config=config, cache=MemoryFormattingCache())
        for verse in sample_verses:
            assert first.format(verse, 15) == second.format(verse, 15)

    def test_trailing_markup_is_ignored(self, formatter, sample_verses):
        for verse in sample_verses:
            assert formatter.format(verse, 15) == formatter.format(verse + "<br>", 15)

    def test_no_markup_and_no_empty_lines(self, formatter, sample_verses):
        for verse in sample_verses:
            for max_length in (10, 15, 25):
                result = formatter.format(verse, max_length)
                assert "<br" not in result
                assert all(line.strip() for line in result.split("\n"))

    def test_connective_never_starts_a_later_line(self, formatter, sample_verses):
        for verse in sample_verses:
            lines = formatter.format(verse, 10).split("\n")
            for line in lines[1:]:
                assert not line.startswith(CONNECTIVES), line


class TestCaching:
    """Tests for memoization."""

    def test_second_call_does_not_segment_again(self, config, wisdom_verse):
        segmenter = MagicMock(wraps=ClauseSegmenter(config))
        cache = MemoryFormattingCache()
        formatter = VerseFormatter(config=config, cache=cache, segmenter=segmenter)

        first = formatter.format(wisdom_verse, 15)
        second = formatter.format(wisdom_verse, 15)

        assert first == second
        assert segmenter.segment.call_count == 1
        assert cache.get_stats()["hits"] == 1

    def test_markup_variants_share_a_cache_entry(self, config, wisdom_verse):
        cache = MemoryFormattingCache()
        formatter = VerseFormatter(config=config, cache=cache)
        formatter.format(wisdom_verse, 15)
        formatter.format(f"  {wisdom_verse}<br/>", 15)
        assert len(cache) == 1

    def test_max_length_is_part_of_the_key(self, config, wisdom_verse):
        cache = MemoryFormattingCache()
        formatter = VerseFormatter(config=config, cache=cache)
        formatter.format(wisdom_verse, 15)
        formatter.format(wisdom_verse, 25)
        assert len(cache) == 2


class TestFormatSafe:
    """Tests for the fallback wrapper."""

    def test_success_does_not_use_fallback(self, formatter, wisdom_verse):
        assert formatter.format_safe(wisdom_verse, 15) == (wisdom_verse, False)

    def test_pipeline_failure_uses_fallback(self, config):
        segmenter = MagicMock()
        segmenter.segment.side_effect = RuntimeError("boom")
        cache = MemoryFormattingCache()
        formatter = VerseFormatter(config=config, cache=cache, segmenter=segmenter)

        text, fallback_used = formatter.format_safe("하나님께서 너희에게 지혜를 구하라", 10)

        assert fallback_used
        assert text == "하나님께서 너희에게\n지혜를 구하라"
        assert len(cache) == 0


def test_module_level_function(wisdom_verse):
    assert format_verse_for_card(wisdom_verse) == wisdom_verse
