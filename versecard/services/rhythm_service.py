# versecard/services/rhythm_service.py
"""
Reading-rhythm correction: merge short, low-content lines upward.
"""
from typing import List, Sequence

from ..config import AppConfig


class RhythmRefiner:
    """
    Merges a line into the previous one when it is shorter than
    ``short_line_length`` and has no word of four or more characters.
    The first line is never merged.
    """

    def __init__(self, config: AppConfig):
        self.short_line_length = config.line_break.short_line_length
        self.min_word_length = config.line_break.min_break_word_length

    def has_meaningful_word(self, line: str) -> bool:
        return any(len(word) >= self.min_word_length for word in line.split(' '))

    def should_merge(self, line: str) -> bool:
        return len(line) < self.short_line_length and not self.has_meaningful_word(line)

    def refine(self, lines: Sequence[str]) -> str:
        """
        Merge short lines and join the result with newlines.

        Args:
            lines: Candidate lines from the composer

        Returns:
            Final card text
        """
        refined: List[str] = []
        for line in lines:
            if refined and self.should_merge(line):
                refined[-1] = f"{refined[-1]} {line}"
            else:
                refined.append(line)
        return '\n'.join(refined)
