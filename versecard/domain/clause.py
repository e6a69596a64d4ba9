# versecard/domain/clause.py
"""
Domain model for a single clause of a verse.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class ClauseType(Enum):
    """Coarse grammatical role of a clause."""
    CONDITION = "CONDITION"
    COMMAND = "COMMAND"
    RESULT = "RESULT"
    STATEMENT = "STATEMENT"
    QUESTION = "QUESTION"
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True)
class Clause:
    """
    Represents one semantic unit of a verse used for line-break decisions.

    Attributes:
        text: Exact consumed substring, including leading separators and
              trailing punctuation
        words: Non-whitespace tokens in source order (punctuation included)
        head_verb: Last head-verb token seen while scanning the clause
        semantic_type: Clause type assigned when the clause was built
    """
    text: str
    words: Tuple[str, ...] = ()
    head_verb: Optional[str] = None
    semantic_type: ClauseType = ClauseType.UNKNOWN

    @property
    def content(self) -> str:
        """Clause text without surrounding whitespace."""
        return self.text.strip()

    @property
    def has_head_verb(self) -> bool:
        return self.head_verb is not None
