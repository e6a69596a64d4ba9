# versecard/services/semantic_shift_service.py
"""
Service for detecting meaning shifts between adjacent clauses.

No embedding model is involved: similarity is a weighted blend of word
overlap, keyword-bucket overlap and structural likeness, combined with
clause-type, head-verb, subject and action change signals.
"""
from dataclasses import dataclass
from typing import Dict, List, Sequence, Set, Tuple

from .. import lexicon
from ..config import AppConfig
from ..domain.clause import Clause
from ..logging_config import get_logger
from ..utils.text_normalization import clause_tail

logger = get_logger('semantic_shift_service')


@dataclass(frozen=True)
class ShiftScore:
    """All signals computed for one adjacent clause pair."""
    index: int
    similarity: float
    type_change: bool
    new_head_verb: bool
    is_connective: bool
    subject_change: bool
    action_change: bool

    def is_break(self, threshold: float) -> bool:
        if self.is_connective:
            return False
        return (
            self.similarity < threshold
            or self.type_change
            or self.new_head_verb
            or self.subject_change
            or self.action_change
        )


def _bucket_hits(text: str, buckets: Dict[str, Tuple[str, ...]]) -> List[str]:
    """Names of the buckets with at least one keyword occurring in ``text``."""
    return [name for name, words in buckets.items() if any(w in text for w in words)]


def _overlap_ratio(first: Sequence[str], second: Sequence[str]) -> float:
    common = [item for item in first if item in second]
    return len(common) / max(len(first), len(second))


class SemanticShiftDetector:
    """
    Decides before which clauses a line break should be inserted.

    A break is inserted before clause i unless it starts with a connective,
    when the similarity to clause i-1 is below the threshold or the clause
    type, head verb, subject or action changes.
    """

    def __init__(self, config: AppConfig):
        self.threshold = config.line_break.similarity_threshold
        self.weights = config.line_break.weights
        self.min_word_length = config.line_break.min_break_word_length
        self.connectives = config.lexicon.connectives
        self.punctuation = config.lexicon.clause_punctuation

    def detect_breaks(self, clauses: Sequence[Clause]) -> Set[int]:
        """
        Compute the break-index set.

        Args:
            clauses: Ordered clauses of one verse

        Returns:
            Set of indices i meaning "break before clause i"
        """
        breaks: Set[int] = set()
        for i in range(1, len(clauses)):
            score = self.score(clauses[i - 1], clauses[i], index=i)
            if score.is_break(self.threshold):
                breaks.add(i)
            logger.debug(
                f"Pair {i - 1}->{i}: similarity={score.similarity:.2f} "
                f"type_change={score.type_change} new_verb={score.new_head_verb} "
                f"connective={score.is_connective} break={i in breaks}"
            )
        return breaks

    def score(self, prev: Clause, current: Clause, index: int = 0) -> ShiftScore:
        """Compute every shift signal for one clause pair."""
        return ShiftScore(
            index=index,
            similarity=self.similarity(prev, current),
            type_change=prev.semantic_type != current.semantic_type,
            new_head_verb=bool(current.head_verb) and (
                not prev.head_verb or current.head_verb != prev.head_verb
            ),
            is_connective=self.is_connective(current),
            subject_change=self.subject_change(prev, current),
            action_change=self.action_change(prev, current),
        )

    def is_connective(self, clause: Clause) -> bool:
        """True when the clause starts with a connective word."""
        return clause.content.startswith(self.connectives)

    # ------------------------------------------------------------------
    # Similarity
    # ------------------------------------------------------------------

    def similarity(self, first: Clause, second: Clause) -> float:
        """
        Weighted blend of lexical, keyword and structural similarity.

        Returns:
            Score between 0.0 and 1.0
        """
        w = self.weights
        return (
            w.lexical * self.lexical_overlap(first, second)
            + w.keyword * self.keyword_overlap(first, second)
            + w.structural * self.structural_similarity(first, second)
        )

    def lexical_overlap(self, first: Clause, second: Clause) -> float:
        """Share of common meaningful words (0.0 when either side has none)."""
        words1 = [w for w in first.words if len(w) >= self.min_word_length]
        words2 = [w for w in second.words if len(w) >= self.min_word_length]
        if not words1 or not words2:
            return 0.0
        return _overlap_ratio(words1, words2)

    def keyword_overlap(self, first: Clause, second: Clause) -> float:
        """
        Overlap of semantic keyword buckets.

        Both empty counts as identical (1.0); exactly one empty as 0.0.
        """
        keywords1 = _bucket_hits(first.content, lexicon.SEMANTIC_KEYWORDS)
        keywords2 = _bucket_hits(second.content, lexicon.SEMANTIC_KEYWORDS)
        if not keywords1 and not keywords2:
            return 1.0
        if not keywords1 or not keywords2:
            return 0.0
        return _overlap_ratio(keywords1, keywords2)

    def structural_similarity(self, first: Clause, second: Clause) -> float:
        w = self.weights
        similarity = 0.0
        if first.has_head_verb == second.has_head_verb:
            similarity += w.head_verb_presence

        len1, len2 = len(first.content), len(second.content)
        if max(len1, len2) > 0:
            similarity += w.length_ratio * (min(len1, len2) / max(len1, len2))

        if first.semantic_type == second.semantic_type:
            similarity += w.same_type
        return similarity

    # ------------------------------------------------------------------
    # Subject / action signals
    # ------------------------------------------------------------------

    def subject_signals(self, clause: Clause) -> List[str]:
        signals = []
        if any(word in clause.content for word in lexicon.EXPLICIT_SUBJECTS):
            signals.append('EXPLICIT_SUBJECT')
        if clause_tail(clause.text, self.punctuation).endswith(lexicon.SUBJECT_MARKERS):
            signals.append('SUBJECT_MARKER')
        return signals

    def action_signals(self, clause: Clause) -> List[str]:
        return _bucket_hits(clause.content, lexicon.ACTION_KEYWORDS)

    @staticmethod
    def _disjoint(first: List[str], second: List[str]) -> bool:
        # Only meaningful when both sides carry at least one signal
        if not first or not second:
            return False
        return not set(first) & set(second)

    def subject_change(self, prev: Clause, current: Clause) -> bool:
        return self._disjoint(self.subject_signals(prev), self.subject_signals(current))

    def action_change(self, prev: Clause, current: Clause) -> bool:
        return self._disjoint(self.action_signals(prev), self.action_signals(current))
