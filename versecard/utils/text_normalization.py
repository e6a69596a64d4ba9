# versecard/utils/text_normalization.py
"""
Text normalization utilities shared by the line-breaking pipeline.
"""
import re
from typing import Iterable

# <br>, <br/>, <br />, any case
BREAK_MARKUP_PATTERN = re.compile(r'<br\s*/?>', re.IGNORECASE)


def normalize_whitespace(text: str) -> str:
    """
    Normalize all whitespace to single spaces.

    Args:
        text: Input text

    Returns:
        Text with normalized whitespace
    """
    if not text:
        return ""
    return " ".join(text.split())


def strip_break_markup(text: str) -> str:
    """
    Remove embedded line-break markup and trim surrounding whitespace.

    This is the cache-key normalization of the formatter.

    Args:
        text: Raw verse text, possibly containing <br> tags

    Returns:
        Clean text
    """
    if not text:
        return ""
    return BREAK_MARKUP_PATTERN.sub('', text).strip()


def clause_tail(text: str, punctuation: Iterable[str]) -> str:
    """
    Return the text with trailing whitespace and punctuation removed.

    End-anchored marker tests (conditional, imperative, ...) are made
    against this tail so that "구하라." still ends with "하라".
    """
    marks = ''.join(punctuation)
    return text.rstrip().rstrip(marks + ' \t\r\n').rstrip()


def last_word(text: str) -> str:
    """Last whitespace-delimited word of ``text`` ("" for blank text)."""
    words = text.split()
    return words[-1] if words else ""
