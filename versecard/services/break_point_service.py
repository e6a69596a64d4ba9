# versecard/services/break_point_service.py
"""
Break-point predicates: decide whether a clause boundary falls between
two adjacent words without any punctuation between them.
"""
from typing import Optional, Sequence

from ..config import AppConfig
from ..domain.break_rule import BreakRule
from ..logging_config import get_logger

logger = get_logger('break_point_service')


class BreakPointDetector:
    """
    Evaluates the declarative break rules against (current, next) word pairs.

    All predicates share a length guard: when either word is missing or
    shorter than ``min_break_word_length`` characters they return False.
    Short particles and endings are therefore never break points.
    """

    def __init__(self, config: AppConfig):
        self.min_length = config.line_break.min_break_word_length
        lex = config.lexicon
        self.subject_rules = lex.subject_start_rules
        self.action_rules = lex.action_start_rules
        self.result_rules = lex.result_start_rules
        self.command_rules = lex.command_start_rules
        self.forced_rules = lex.forced_break_rules

    def _passes_guard(self, current_word: Optional[str], next_word: Optional[str]) -> bool:
        if not current_word or not next_word:
            return False
        return len(current_word) >= self.min_length and len(next_word) >= self.min_length

    def _first_match(
        self,
        rules: Sequence[BreakRule],
        current_word: Optional[str],
        next_word: Optional[str]
    ) -> Optional[BreakRule]:
        if not self._passes_guard(current_word, next_word):
            return None
        for rule in rules:
            if rule.matches(current_word, next_word):
                return rule
        return None

    def is_new_subject_start(self, current_word: Optional[str], next_word: Optional[str]) -> bool:
        """'너희 중에' + '너희...', '...께서' + '하나님...'"""
        return self._first_match(self.subject_rules, current_word, next_word) is not None

    def is_new_action_start(self, current_word: Optional[str], next_word: Optional[str]) -> bool:
        """'주시고' + '꾸짖지...'"""
        return self._first_match(self.action_rules, current_word, next_word) is not None

    def is_new_result_start(self, current_word: Optional[str], next_word: Optional[str]) -> bool:
        """'...하라' + '그리하면...'"""
        return self._first_match(self.result_rules, current_word, next_word) is not None

    def is_new_command_start(self, current_word: Optional[str], next_word: Optional[str]) -> bool:
        """'부족하거든' + '하나님께...'"""
        return self._first_match(self.command_rules, current_word, next_word) is not None

    def should_break_clause(self, current_word: Optional[str], next_word: Optional[str]) -> bool:
        """Any of the four shared predicates."""
        return (
            self.is_new_subject_start(current_word, next_word)
            or self.is_new_action_start(current_word, next_word)
            or self.is_new_result_start(current_word, next_word)
            or self.is_new_command_start(current_word, next_word)
        )

    def is_forced_break_point(self, current_word: Optional[str], next_word: Optional[str]) -> bool:
        """
        Predicate used by forced segmentation.

        Recognizes the shared predicates plus the extra tuned pairs.
        """
        if self.should_break_clause(current_word, next_word):
            return True
        rule = self._first_match(self.forced_rules, current_word, next_word)
        if rule is not None:
            logger.debug(f"Forced break after '{current_word}' ({rule.name})")
            return True
        return False
