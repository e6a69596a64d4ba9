# versecard/domain/verse.py
"""
Domain models for verse records and the shuffle progress state.
"""
from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class VerseRecord:
    """
    A single verse as supplied by the verse store.

    Attributes:
        content: Verse text (may contain <br> markup)
        reference: Human-readable reference (e.g., "야고보서 1:5")
    """
    content: str
    reference: str = ""

    def __post_init__(self):
        """Validate verse data after initialization."""
        if not self.content or not self.content.strip():
            raise ValueError("Verse content cannot be empty")


@dataclass
class ShuffleState:
    """
    Shuffled permutation of verse indices plus a cursor into it.

    Attributes:
        order: Permutation of range(total)
        pointer: Index into ``order`` of the next verse to draw
    """
    order: List[int] = field(default_factory=list)
    pointer: int = 0

    def is_usable_for(self, total: int) -> bool:
        """Check whether this state can serve another draw for ``total`` verses."""
        if len(self.order) != total:
            return False
        if self.pointer < 0 or self.pointer >= len(self.order):
            return False
        return sorted(self.order) == list(range(total))
