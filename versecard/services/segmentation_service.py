# versecard/services/segmentation_service.py
"""
Service for splitting verse text into ordered clauses.

Clause building is a small state machine over tokens:

    FLUSHED --token--> ACCUMULATING --punctuation / break point--> FLUSHED

Each token is handled by a pure transition (``step``) that returns the new
buffer and, when the clause closes, the finished buffer to emit. When the
whole verse ends up as a single clause, forced segmentation tries
connective words first and the tuned break pairs second.
"""
import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from ..config import AppConfig
from ..domain.clause import Clause
from ..logging_config import get_logger
from .break_point_service import BreakPointDetector
from .clause_type_service import ClauseTypeClassifier
from .head_verb_service import HeadVerbClassifier

logger = get_logger('segmentation_service')


class BuilderState(Enum):
    """State of the clause buffer."""
    FLUSHED = "FLUSHED"
    ACCUMULATING = "ACCUMULATING"


@dataclass(frozen=True)
class ClauseBuffer:
    """Immutable snapshot of the clause under construction."""
    text: str = ""
    words: Tuple[str, ...] = ()
    head_verb: Optional[str] = None

    @property
    def state(self) -> BuilderState:
        return BuilderState.ACCUMULATING if self.text else BuilderState.FLUSHED

    @property
    def is_blank(self) -> bool:
        return not self.text.strip()


@dataclass(frozen=True)
class Transition:
    """Result of feeding one token to the buffer."""
    buffer: ClauseBuffer
    emitted: Optional[ClauseBuffer] = None


class ClauseSegmenter:
    """
    Splits raw verse text into clauses.

    Uses:
    - punctuation (ASCII and full-width) as hard clause ends
    - the four break-point predicates between adjacent words
    - forced segmentation when only one clause results
    """

    def __init__(
        self,
        config: AppConfig,
        head_verbs: Optional[HeadVerbClassifier] = None,
        clause_types: Optional[ClauseTypeClassifier] = None,
        break_points: Optional[BreakPointDetector] = None
    ):
        """
        Initialize the segmenter.

        Args:
            config: Application configuration
            head_verbs: Optional head verb classifier (created from config if omitted)
            clause_types: Optional clause type classifier
            break_points: Optional break-point detector
        """
        self.config = config
        self.head_verbs = head_verbs or HeadVerbClassifier(config)
        self.clause_types = clause_types or ClauseTypeClassifier(config)
        self.break_points = break_points or BreakPointDetector(config)

        self.punctuation = frozenset(config.lexicon.clause_punctuation)
        self.connectives = config.lexicon.connectives
        separators = '|'.join(re.escape(p) for p in config.lexicon.clause_punctuation)
        self._token_pattern = re.compile(rf'(\s+|{separators})')
        self._trailing_marks = ''.join(config.lexicon.clause_punctuation)

    # ------------------------------------------------------------------
    # Tokenization
    # ------------------------------------------------------------------

    def tokenize(self, text: str) -> List[str]:
        """
        Split text on whitespace runs and punctuation, keeping separators.

        Args:
            text: Input text

        Returns:
            Tokens in order; concatenating them gives back ``text``
        """
        if not text:
            return []
        return [token for token in self._token_pattern.split(text) if token]

    def is_punctuation(self, token: str) -> bool:
        return token in self.punctuation

    @staticmethod
    def _next_words(tokens: Sequence[str]) -> List[Optional[str]]:
        """For every position, the next non-whitespace token (or None)."""
        result: List[Optional[str]] = [None] * len(tokens)
        upcoming: Optional[str] = None
        for i in range(len(tokens) - 1, -1, -1):
            result[i] = upcoming
            if tokens[i].strip():
                upcoming = tokens[i]
        return result

    # ------------------------------------------------------------------
    # State machine
    # ------------------------------------------------------------------

    def step(self, buffer: ClauseBuffer, token: str, next_word: Optional[str]) -> Transition:
        """
        Feed one token to the buffer.

        Args:
            buffer: Current buffer
            token: Token to consume
            next_word: Next non-whitespace token, used by the break predicates

        Returns:
            Transition with the new buffer and the closed buffer, if any
        """
        if not token.strip():
            return Transition(replace(buffer, text=buffer.text + token))

        # A mark on a blank buffer ("..." / "!!") closes a clause of its own
        grown = ClauseBuffer(
            text=buffer.text + token,
            words=buffer.words + (token,),
            head_verb=token if self.head_verbs.is_head_verb(token) else buffer.head_verb,
        )

        if self.is_punctuation(token):
            return Transition(ClauseBuffer(), emitted=grown)

        if self.break_points.should_break_clause(token, next_word):
            logger.debug(f"Break point after '{token}' (next: '{next_word}')")
            return Transition(ClauseBuffer(), emitted=grown)

        return Transition(grown)

    def build_clause(self, buffer: ClauseBuffer) -> Clause:
        """Classify a closed buffer and freeze it into a Clause."""
        return Clause(
            text=buffer.text,
            words=buffer.words,
            head_verb=buffer.head_verb,
            semantic_type=self.clause_types.classify(buffer.text, buffer.head_verb),
        )

    def clause_from_text(self, text: str) -> Clause:
        """Build a single clause from text without looking for boundaries."""
        buffer = ClauseBuffer()
        for token in self.tokenize(text):
            if token.strip():
                buffer = ClauseBuffer(
                    text=buffer.text + token,
                    words=buffer.words + (token,),
                    head_verb=token if self.head_verbs.is_head_verb(token) else buffer.head_verb,
                )
            else:
                buffer = replace(buffer, text=buffer.text + token)
        return self.build_clause(buffer)

    # ------------------------------------------------------------------
    # Segmentation
    # ------------------------------------------------------------------

    def segment(self, text: str) -> List[Clause]:
        """
        Split text into ordered clauses.

        Args:
            text: Clean verse text (markup already removed)

        Returns:
            List of clauses (empty for blank text)
        """
        tokens = self.tokenize(text)
        next_words = self._next_words(tokens)

        clauses: List[Clause] = []
        buffer = ClauseBuffer()
        for token, next_word in zip(tokens, next_words):
            transition = self.step(buffer, token, next_word)
            if transition.emitted is not None:
                clauses.append(self.build_clause(transition.emitted))
            buffer = transition.buffer

        if not buffer.is_blank:
            clauses.append(self.build_clause(buffer))

        logger.debug(f"Segmented into {len(clauses)} clauses")

        if len(clauses) == 1:
            return self.force_segmentation(clauses[0])
        return clauses

    def force_segmentation(self, clause: Clause) -> List[Clause]:
        """
        Split a single clause into smaller semantic units.

        Strategies, in order:
        1. Connective words (그리하면, 그러므로, ...) start a new segment
        2. Tuned break pairs between adjacent words

        Args:
            clause: The only clause of the verse

        Returns:
            New clauses, or ``[clause]`` when no split was found
        """
        segments = self._split_on_connectives(clause.text)
        strategy = 'connectives'
        if segments is None:
            segments = self._split_on_break_points(clause.text)
            strategy = 'break points'

        if len(segments) < 2:
            return [clause]

        logger.debug(f"Forced segmentation ({strategy}): {len(segments)} segments")
        return [self.clause_from_text(segment) for segment in segments]

    def _bare(self, word: str) -> str:
        return word.rstrip(self._trailing_marks)

    def _split_on_connectives(self, text: str) -> Optional[List[str]]:
        """
        Split before every connective word.

        Returns:
            Segments, or None when the text contains no connective word
        """
        words = text.split()
        if not any(self._bare(word) in self.connectives for word in words):
            return None

        segments: List[str] = []
        current = ''
        for word in words:
            if self._bare(word) in self.connectives:
                if current.strip():
                    segments.append(current.strip())
                current = word
            else:
                current = f"{current} {word}" if current else word

        if current.strip():
            segments.append(current.strip())
        return segments

    def _split_on_break_points(self, text: str) -> List[str]:
        """Split wherever the forced break predicate fires."""
        words = text.split()
        segments: List[str] = []
        current = ''
        for i, word in enumerate(words):
            next_word = words[i + 1] if i + 1 < len(words) else None
            current = f"{current} {word}" if current else word
            if self.break_points.is_forced_break_point(word, next_word):
                segments.append(current.strip())
                current = ''

        if current.strip():
            segments.append(current.strip())
        return segments
