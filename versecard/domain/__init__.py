# Domain models for the verse card generator
from .clause import Clause, ClauseType
from .break_rule import BreakRule
from .verse import VerseRecord, ShuffleState

__all__ = [
    'Clause',
    'ClauseType',
    'BreakRule',
    'VerseRecord',
    'ShuffleState'
]
