# versecard/lexicon.py
"""
Word catalogs and rule tables for the Korean line-breaking engine.

Every list the engine consults lives here as a plain constant so that the
rules stay declarative and can be overridden through ``LexiconConfig``.
The tables are tuned to a fixed corpus of verses (개역 wording) rather
than to general Korean grammar.
"""
from typing import Dict, Tuple

from .domain.break_rule import BreakRule


# Clause-initial connectives. Shared by forced segmentation, the shift
# detector and the line composer.
CONNECTIVES: Tuple[str, ...] = (
    '그리하면', '그러면', '그러므로', '그러나', '하지만',
    '그리고', '따라서', '이에', '이제', '곧', '다시',
    '그런데', '그런즉', '한편', '또한', '또는',
)

# Punctuation that closes a clause (ASCII + full-width)
CLAUSE_PUNCTUATION: Tuple[str, ...] = (
    ',', '.', '!', '?', ';', ':',
    '，', '。', '！', '？', '；', '：',
)


# ============================================================
# Head verbs (whole-token match)
# ============================================================

HEAD_VERB_FAMILIES: Dict[str, Tuple[str, ...]] = {
    'honorific': (
        '하시고', '하시며', '하시니', '하시어', '하시면', '하시는',
        '하신', '하시리라', '하시니라', '하시리', '하시어서',
    ),
    'plain': (
        '하다', '되다', '있다', '없다', '이다', '아니다',
        '주다', '받다', '구하다', '보라', '오라', '가라',
    ),
    'imperative': (
        '하라', '구하라', '보라', '오라', '가라', '일어나라', '들으라', '보시라',
    ),
    'connective': (
        '하며', '하고', '하니', '하여', '하면', '하는', '한', '함',
    ),
}


# ============================================================
# Clause type markers
# ============================================================

CONDITION_ENDINGS: Tuple[str, ...] = ('만약', '만일', '만', '거든', '면', '으면', '한다면')
COMMAND_ENDINGS: Tuple[str, ...] = ('하라', '구하라', '보라', '오라', '가라', '일어나라', '들으라')
RESULT_ENDINGS: Tuple[str, ...] = ('그리하면', '그러면', '그러므로', '따라서', '이에', '이제', '그리하여')
COPULA_FORMS: Tuple[str, ...] = ('하다', '되다', '있다', '없다', '이다', '아니다')
QUESTION_ENDINGS: Tuple[str, ...] = ('누구', '무엇', '어디', '언제', '어떻게', '왜', '어느')


# ============================================================
# Keyword buckets (substring match)
# ============================================================

# Used by the similarity score
SEMANTIC_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    'SUBJECT': ('하나님', '예수', '주', '그분', '너희', '우리', '그들', '이것', '저것'),
    'ACTION': ('주다', '받다', '구하다', '하시고', '하시며', '하시니'),
    'RESULT': ('리라', '니라', '이다', '이라', '되리라', '하시리라'),
    'CONDITION': ('만약', '만일', '거든', '면', '으면'),
}

# Subject-change signal
EXPLICIT_SUBJECTS: Tuple[str, ...] = (
    '하나님', '예수', '주', '그분', '너희', '우리', '그들',
    '이것', '저것', '너', '나', '그', '그녀',
)
SUBJECT_MARKERS: Tuple[str, ...] = ('은', '는', '이', '가')

# Action-change signal
ACTION_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    'GIVING_ACTION': (
        '주다', '받다', '구하다', '하시고', '하시며', '하시니', '하시어',
        '하시면', '하시는', '하신', '하시리라', '하시니라',
    ),
    'COMMAND_ACTION': ('보라', '오라', '가라', '하라', '구하라', '들으라', '보시라'),
    'STATE_ACTION': ('있다', '없다', '이다', '아니다', '되다', '하다'),
}


# ============================================================
# Break rules: (ending of current word) -> (start of next word)
# ============================================================

SUBJECT_START_RULES: Tuple[BreakRule, ...] = (
    BreakRule('subject:time', ('중에', '전의', '후에'), ('너희', '너의', '그들의', '우리의')),
    BreakRule('subject:divine', ('께', '께서'), ('하나님', '여호와', '주', '예수')),
)

ACTION_START_RULES: Tuple[BreakRule, ...] = (
    BreakRule('action:giving', ('주시고', '하시고', '하며'), ('꾸짖지', '말씀하신', '되게')),
)

RESULT_START_RULES: Tuple[BreakRule, ...] = (
    BreakRule('result:imperative', ('구하라', '하라'), ('그리하면', '그러면', '그러므로')),
)

COMMAND_START_RULES: Tuple[BreakRule, ...] = (
    BreakRule('command:lack', ('부족하거든', '하시는'), ('하나님께', '구하라')),
)

# Extra pairs recognized only by forced segmentation. An empty prefix
# tuple accepts any next word.
FORCED_BREAK_RULES: Tuple[BreakRule, ...] = (
    BreakRule('forced:topic', ('중에', '전의', '후에', '께서'), ()),
    BreakRule('forced:action', ('주시고', '하시고', '하며'), ('꾸짖지', '말씀하신', '되게')),
    BreakRule('forced:command', ('하시는',), ('하나님께', '구하라')),
    BreakRule('forced:result', ('구하라',), ('그리하면', '그러면')),
    BreakRule('forced:possessive', ('하시고',), ('그', '너의', '너로')),
    BreakRule('forced:lack', ('부족하거든',), ('모든', '하나님께')),
    BreakRule('forced:promise', ('주리니',), ('너의', '그들의')),
    BreakRule('forced:wisdom', ('지혜가',), ('부족하거든', '모든')),
    BreakRule('forced:giving', ('주시고',), ('꾸짖지', '말씀하신')),
    BreakRule('forced:speaking', ('하시고',), ('그', '말씀하신')),
)
