# versecard/domain/break_rule.py
"""
Declarative break-point rule.
"""
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class BreakRule:
    """
    A (suffix-set, prefix-set) pair describing a clause boundary.

    The rule fires when the current word ends with one of ``suffixes`` and
    the next word starts with one of ``prefixes``. An empty ``prefixes``
    tuple matches any next word.
    """
    name: str
    suffixes: Tuple[str, ...]
    prefixes: Tuple[str, ...] = ()

    def matches(self, current_word: str, next_word: str) -> bool:
        if not current_word.endswith(self.suffixes):
            return False
        if not self.prefixes:
            return True
        return next_word.startswith(self.prefixes)
