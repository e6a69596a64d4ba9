# versecard/services/formatting_cache.py
"""
Cache for formatted verse text.

The formatter only needs a mapping with ``get``/``set``; callers own the
cache instance and can hand each test (or each tenant) a fresh one.
Entries never expire: the key space is bounded by the verse corpus.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional, Protocol, Tuple

from ..logging_config import get_logger

logger = get_logger('formatting_cache')

CacheKey = Tuple[str, int]


class FormattingCache(Protocol):
    """
    Protocol for the formatter cache.

    Keys are ``(normalized_text, max_length)`` tuples.
    """

    def get(self, key: CacheKey) -> Optional[str]:
        ...

    def set(self, key: CacheKey, value: str) -> None:
        ...


@dataclass
class CacheEntry:
    """Metadata for a cached formatting result"""
    value: str
    created_at: datetime
    access_count: int
    last_accessed: datetime


class MemoryFormattingCache:
    """
    Thread-safe in-memory formatting cache with statistics.

    The lock only guards the dict; a caller doing get-then-compute-then-set
    may compute the same value twice, which is harmless because
    formatting is deterministic.
    """

    def __init__(self):
        self._cache: Dict[CacheKey, CacheEntry] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def get(self, key: CacheKey) -> Optional[str]:
        with self._lock:
            entry = self._cache.get(key)
            if entry is None:
                self._misses += 1
                return None
            entry.access_count += 1
            entry.last_accessed = datetime.utcnow()
            self._hits += 1
            return entry.value

    def set(self, key: CacheKey, value: str) -> None:
        now = datetime.utcnow()
        with self._lock:
            self._cache[key] = CacheEntry(
                value=value,
                created_at=now,
                access_count=0,
                last_accessed=now
            )

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._cache

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)

    def clear(self) -> int:
        """Clear entire cache"""
        with self._lock:
            count = len(self._cache)
            self._cache.clear()
            self._hits = 0
            self._misses = 0
        logger.info(f"🗑️  Cleared formatting cache ({count} entries removed)")
        return count

    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics"""
        with self._lock:
            lookups = self._hits + self._misses
            return {
                'total_entries': len(self._cache),
                'hits': self._hits,
                'misses': self._misses,
                'hit_rate': round(self._hits / lookups, 3) if lookups else 0.0,
            }


_default_cache: Optional[MemoryFormattingCache] = None
_default_lock = threading.Lock()


def get_default_cache() -> MemoryFormattingCache:
    """Process-wide cache used by the module-level convenience function."""
    global _default_cache
    if _default_cache is None:
        with _default_lock:
            if _default_cache is None:
                _default_cache = MemoryFormattingCache()
    return _default_cache
