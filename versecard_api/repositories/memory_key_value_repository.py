"""
In-memory implementation of the key-value repository.

Suitable for development and tests. Progress is lost when the server
restarts, which only means the next draw starts a fresh shuffle.
"""

from threading import Lock
from typing import Dict, Optional

from .key_value_repository import KeyValueRepository


class MemoryKeyValueRepository(KeyValueRepository):
    """Thread-safe dictionary-backed storage."""

    def __init__(self) -> None:
        self._values: Dict[str, str] = {}
        self._lock = Lock()

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._values[key] = value

    def delete(self, key: str) -> bool:
        with self._lock:
            return self._values.pop(key, None) is not None

    def clear(self) -> int:
        """
        Clear all values (for testing).

        Returns:
            Number of values cleared
        """
        with self._lock:
            count = len(self._values)
            self._values.clear()
            return count
