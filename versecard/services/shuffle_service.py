# versecard/services/shuffle_service.py
"""
Service for drawing verses in a shuffled, non-repeating order.

The permutation and cursor live in an external key-value store so that a
user sees every verse once before any verse repeats. Stored state that
cannot be parsed or no longer fits the verse count is regenerated.
"""
import json
import random
import secrets
import threading
from typing import List, Optional, Protocol

from ..config import AppConfig
from ..domain.verse import ShuffleState
from ..logging_config import get_logger

logger = get_logger('shuffle_service')


class KeyValueStore(Protocol):
    """String key-value persistence (browser localStorage semantics)."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


def generate_shuffled_indices(total: int, rng: Optional[random.Random] = None) -> List[int]:
    """
    Fisher-Yates shuffle of range(total).

    Args:
        total: Number of indices
        rng: Random source; a cryptographically seeded SystemRandom by default

    Returns:
        A permutation of range(total)
    """
    rng = rng or secrets.SystemRandom()
    indices = list(range(total))
    for i in range(total - 1, 0, -1):
        j = rng.randrange(i + 1)
        indices[i], indices[j] = indices[j], indices[i]
    return indices


class ShuffleService:
    """
    Draws the next verse index from a persisted shuffled order.

    Regenerates the order when it is absent, malformed, the wrong length
    for the current verse count, or exhausted.
    """

    def __init__(self, config: AppConfig, store: KeyValueStore, rng: Optional[random.Random] = None):
        """
        Initialize the shuffle service.

        Args:
            config: Application configuration (storage keys)
            store: Key-value store holding the order and pointer
            rng: Optional random source (tests pass a seeded Random)
        """
        self.order_key = config.shuffle.order_key
        self.pointer_key = config.shuffle.pointer_key
        self.store = store
        self.rng = rng
        # Serializes load -> draw -> save across request threads
        self._lock = threading.Lock()

    def load_state(self) -> Optional[ShuffleState]:
        """
        Read the stored state.

        Returns:
            The stored state, or None when absent or unparseable
        """
        raw_order = self.store.get(self.order_key)
        raw_pointer = self.store.get(self.pointer_key)
        if raw_order is None:
            return None

        try:
            order = json.loads(raw_order)
            pointer = int(raw_pointer) if raw_pointer is not None else 0
        except (ValueError, TypeError) as exc:
            logger.warning(f"Stored shuffle state is malformed, regenerating: {exc}")
            return None

        if not isinstance(order, list) or not all(isinstance(i, int) for i in order):
            logger.warning("Stored shuffle order is not a list of integers, regenerating")
            return None

        return ShuffleState(order=order, pointer=pointer)

    def save_state(self, state: ShuffleState) -> None:
        self.store.set(self.order_key, json.dumps(state.order))
        self.store.set(self.pointer_key, str(state.pointer))

    def next_index(self, total: int) -> int:
        """
        Draw the next verse index and advance the persisted cursor.

        Args:
            total: Current number of verses

        Returns:
            Index into the verse list

        Raises:
            ValueError: If there are no verses to draw from
        """
        if total <= 0:
            raise ValueError("Cannot draw a verse from an empty verse store")

        with self._lock:
            state = self.load_state()
            if state is None or not state.is_usable_for(total):
                logger.info(f"🔀 Generating new shuffled order for {total} verses")
                state = ShuffleState(order=generate_shuffled_indices(total, self.rng), pointer=0)

            index = state.order[state.pointer]
            state.pointer += 1
            self.save_state(state)

        logger.debug(f"Drew verse index {index} ({state.pointer}/{total})")
        return index
