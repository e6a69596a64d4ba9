# Services module for the verse card generator
from .head_verb_service import HeadVerbClassifier
from .clause_type_service import ClauseTypeClassifier
from .break_point_service import BreakPointDetector
from .segmentation_service import ClauseSegmenter
from .semantic_shift_service import SemanticShiftDetector, ShiftScore
from .line_composer_service import LineComposer
from .rhythm_service import RhythmRefiner
from .formatting_cache import FormattingCache, MemoryFormattingCache
from .fallback_service import format_verse_fallback
from .formatting_service import VerseFormatter, format_verse_for_card
from .ingestion_service import VerseIngestionService
from .shuffle_service import ShuffleService, generate_shuffled_indices

__all__ = [
    'HeadVerbClassifier',
    'ClauseTypeClassifier',
    'BreakPointDetector',
    'ClauseSegmenter',
    'SemanticShiftDetector',
    'ShiftScore',
    'LineComposer',
    'RhythmRefiner',
    'FormattingCache',
    'MemoryFormattingCache',
    'format_verse_fallback',
    'VerseFormatter',
    'format_verse_for_card',
    'VerseIngestionService',
    'ShuffleService',
    'generate_shuffled_indices'
]
