# versecard: meaning-aware line breaking for Korean verse cards
from .services.formatting_service import VerseFormatter, format_verse_for_card
from .services.fallback_service import format_verse_fallback

__version__ = "1.0.0"

__all__ = ['VerseFormatter', 'format_verse_for_card', 'format_verse_fallback']
