# Utils module for the verse card generator
from .text_normalization import normalize_whitespace, strip_break_markup, clause_tail, last_word
from .markup import to_card_markup, split_lines
from .csv_utils import detect_delimiter, detect_encoding

__all__ = [
    'normalize_whitespace',
    'strip_break_markup',
    'clause_tail',
    'last_word',
    'to_card_markup',
    'split_lines',
    'detect_delimiter',
    'detect_encoding'
]
