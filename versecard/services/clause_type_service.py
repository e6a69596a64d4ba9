# versecard/services/clause_type_service.py
"""
Clause type classification from surface patterns.
"""
from typing import Optional

from .. import lexicon
from ..config import AppConfig
from ..domain.clause import ClauseType
from ..utils.text_normalization import clause_tail


class ClauseTypeClassifier:
    """
    Labels a clause CONDITION, COMMAND, RESULT, STATEMENT, QUESTION or UNKNOWN.

    Precedence is fixed and the first match wins:

    1. CONDITION  - tail ends with a conditional marker (거든, 면, ...)
    2. COMMAND    - tail ends with an imperative (하라, 보라, ...)
    3. RESULT     - tail ends with a resultative connective (그러므로, ...)
    4. STATEMENT  - a head verb was found, or a copula appears anywhere
    5. QUESTION   - tail ends with an interrogative word
    6. UNKNOWN

    The tail is the clause text without trailing punctuation.
    """

    def __init__(self, config: AppConfig):
        self.punctuation = config.lexicon.clause_punctuation

    def classify(self, clause_text: str, head_verb: Optional[str] = None) -> ClauseType:
        """
        Classify a clause.

        Args:
            clause_text: Raw clause text
            head_verb: Head verb detected for the clause, if any

        Returns:
            ClauseType of the clause
        """
        tail = clause_tail(clause_text, self.punctuation)

        if tail.endswith(lexicon.CONDITION_ENDINGS):
            return ClauseType.CONDITION
        if tail.endswith(lexicon.COMMAND_ENDINGS):
            return ClauseType.COMMAND
        if tail.endswith(lexicon.RESULT_ENDINGS):
            return ClauseType.RESULT
        if head_verb or any(form in clause_text for form in lexicon.COPULA_FORMS):
            return ClauseType.STATEMENT
        if tail.endswith(lexicon.QUESTION_ENDINGS):
            return ClauseType.QUESTION
        return ClauseType.UNKNOWN
