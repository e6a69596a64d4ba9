# versecard/services/line_composer_service.py
"""
Composition of candidate card lines from clauses and break decisions.
"""
from typing import AbstractSet, List, Sequence

from ..config import AppConfig
from ..domain.clause import Clause
from ..logging_config import get_logger
from ..utils.text_normalization import last_word

logger = get_logger('line_composer_service')


class LineComposer:
    """
    Walks the clauses once with a single line accumulator.

    Rules, in priority order:
    1. A clause starting with a connective is always appended.
    2. A break index, or a line that would exceed ``max_length``, flushes.
    3. A clause whose last word has four or more characters flushes.
    4. Otherwise the clause is appended.
    """

    def __init__(self, config: AppConfig):
        self.connectives = config.lexicon.connectives
        self.min_word_length = config.line_break.min_break_word_length

    def is_connective(self, clause: Clause) -> bool:
        return clause.content.startswith(self.connectives)

    def ends_with_long_word(self, text: str) -> bool:
        """True when the last word (punctuation included) has 4+ characters."""
        return len(last_word(text)) >= self.min_word_length

    def compose(
        self,
        clauses: Sequence[Clause],
        break_indices: AbstractSet[int],
        max_length: int
    ) -> List[str]:
        """
        Produce candidate lines.

        Args:
            clauses: Ordered clauses
            break_indices: Indices to break before
            max_length: Maximum characters per line (soft, see rule 1)

        Returns:
            Trimmed, non-empty lines
        """
        lines: List[str] = []
        current = ''

        def flush() -> None:
            if current.strip():
                lines.append(current.strip())

        for i, clause in enumerate(clauses):
            content = clause.content
            candidate = f"{current} {content}" if current else content

            if self.is_connective(clause):
                current = candidate
            elif i in break_indices or len(candidate) > max_length:
                flush()
                current = content
            elif self.ends_with_long_word(content):
                flush()
                current = content
            else:
                current = candidate

        flush()
        logger.debug(f"Composed {len(lines)} candidate lines (max_length={max_length})")
        return lines
