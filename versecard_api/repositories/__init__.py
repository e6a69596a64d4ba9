"""
Repositories package for the verse card API.

Contains the key-value store interface and its implementations used to
persist the shuffle progress.
"""

from .key_value_repository import KeyValueRepository
from .memory_key_value_repository import MemoryKeyValueRepository
from .json_file_key_value_repository import JsonFileKeyValueRepository

__all__ = ["KeyValueRepository", "MemoryKeyValueRepository", "JsonFileKeyValueRepository"]
