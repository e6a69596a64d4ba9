# versecard/services/fallback_service.py
"""
Plain character-count word wrapper.

Used when the semantic formatter raises: it knows nothing about clauses
and only packs words into lines of at most ``max_length`` characters.
"""
from typing import List

from ..utils.text_normalization import strip_break_markup


def format_verse_fallback(text: str, max_length: int = 25) -> str:
    """
    Wrap text by character count.

    Args:
        text: Verse text (may contain <br> markup)
        max_length: Maximum characters per line; longer single words
                    are kept whole on their own line

    Returns:
        Newline-separated lines
    """
    clean = strip_break_markup(text)
    if not clean:
        return ""

    lines: List[str] = []
    current = ''
    for word in clean.split():
        candidate = f"{current} {word}" if current else word
        if len(candidate) > max_length and current:
            lines.append(current)
            current = word
        else:
            current = candidate

    if current:
        lines.append(current)
    return '\n'.join(lines)
