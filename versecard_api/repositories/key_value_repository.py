"""
Abstract repository interface for string key-value storage.

This interface defines the contract for shuffle-progress persistence,
allowing different implementations (in-memory, JSON file, Redis, etc.).
"""

from abc import ABC, abstractmethod
from typing import Optional


class KeyValueRepository(ABC):
    """
    Abstract interface for key-value storage.

    Implementations must be safe to call from concurrent requests.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """
        Retrieve a value.

        Args:
            key: Storage key

        Returns:
            The stored string, or None if absent
        """
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """
        Store or overwrite a value.

        Args:
            key: Storage key
            value: String value
        """
        pass

    @abstractmethod
    def delete(self, key: str) -> bool:
        """
        Delete a value.

        Returns:
            True if deleted, False if not found
        """
        pass
