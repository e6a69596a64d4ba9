# versecard/services/formatting_service.py
"""
Verse formatting orchestrator.

Pipeline:
1. Strip <br> markup and trim
2. Segment into clauses
3. Detect semantic shifts between clauses
4. Compose candidate lines bounded by max_length
5. Merge short lines for reading rhythm

Results are memoized by (clean_text, max_length) in an injected cache.
"""
from typing import Optional, Tuple

from ..config import AppConfig, load_config
from ..logging_config import get_logger
from ..utils.text_normalization import strip_break_markup
from ..utils.timing import Timer
from .fallback_service import format_verse_fallback
from .formatting_cache import FormattingCache, MemoryFormattingCache, get_default_cache
from .line_composer_service import LineComposer
from .rhythm_service import RhythmRefiner
from .segmentation_service import ClauseSegmenter
from .semantic_shift_service import SemanticShiftDetector

logger = get_logger('formatting_service')


class VerseFormatter:
    """
    Formats a verse into meaning-aware card lines.

    Every stage can be injected, which keeps the formatter testable
    (e.g. wrap the segmenter in a mock to count calls).
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        cache: Optional[FormattingCache] = None,
        segmenter: Optional[ClauseSegmenter] = None,
        shift_detector: Optional[SemanticShiftDetector] = None,
        composer: Optional[LineComposer] = None,
        refiner: Optional[RhythmRefiner] = None
    ):
        """
        Initialize the formatter.

        Args:
            config: Application configuration (defaults when omitted)
            cache: Formatting cache; a private in-memory cache when omitted
            segmenter: Optional clause segmenter
            shift_detector: Optional semantic shift detector
            composer: Optional line composer
            refiner: Optional rhythm refiner
        """
        self.config = config or load_config()
        self.cache = cache if cache is not None else MemoryFormattingCache()
        self.segmenter = segmenter or ClauseSegmenter(self.config)
        self.shift_detector = shift_detector or SemanticShiftDetector(self.config)
        self.composer = composer or LineComposer(self.config)
        self.refiner = refiner or RhythmRefiner(self.config)

    def format(self, text: str, max_length: Optional[int] = None) -> str:
        """
        Format a verse for the card.

        Args:
            text: Verse text, may contain <br> markup
            max_length: Maximum characters per line (default from config)

        Returns:
            Newline-separated lines; "" for blank input
        """
        if max_length is None:
            max_length = self.config.line_break.default_max_length

        clean_text = strip_break_markup(text)
        key: Tuple[str, int] = (clean_text, max_length)

        cached = self.cache.get(key)
        if cached is not None:
            logger.debug(f"Cache HIT for verse ({len(clean_text)} chars, max_length={max_length})")
            return cached

        with Timer(f"format verse ({len(clean_text)} chars)", log_level="DEBUG"):
            result = self._run_pipeline(clean_text, max_length)

        self.cache.set(key, result)
        return result

    def _run_pipeline(self, clean_text: str, max_length: int) -> str:
        logger.debug(f"🧠 Formatting verse: {clean_text}")

        clauses = self.segmenter.segment(clean_text)
        logger.debug(f"STAGE segment: {[c.content for c in clauses]}")

        breaks = self.shift_detector.detect_breaks(clauses)
        logger.debug(f"STAGE shifts: {sorted(breaks)}")

        lines = self.composer.compose(clauses, breaks, max_length)
        logger.debug(f"STAGE compose: {lines}")

        result = self.refiner.refine(lines)
        logger.debug(f"✨ Result: {result!r}")
        return result

    def format_safe(self, text: str, max_length: Optional[int] = None) -> Tuple[str, bool]:
        """
        Format with a plain word-wrap fallback if the pipeline raises.

        Returns:
            Tuple of (formatted_text, fallback_used)
        """
        if max_length is None:
            max_length = self.config.line_break.default_max_length
        try:
            return self.format(text, max_length), False
        except Exception as exc:
            logger.exception(f"❌ Semantic formatting failed, using FALLBACK wrapper: {exc}")
            return format_verse_fallback(text, max_length), True


_default_formatter: Optional[VerseFormatter] = None


def get_default_formatter() -> VerseFormatter:
    """Formatter bound to the process-wide default cache."""
    global _default_formatter
    if _default_formatter is None:
        _default_formatter = VerseFormatter(cache=get_default_cache())
    return _default_formatter


def format_verse_for_card(text: str, max_length: int = 15) -> str:
    """
    Format a verse with the default formatter.

    Args:
        text: Verse text, may contain <br> markup
        max_length: Maximum characters per line

    Returns:
        Newline-separated card text
    """
    return get_default_formatter().format(text, max_length)
