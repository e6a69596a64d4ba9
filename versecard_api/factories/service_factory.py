"""
Service factory for creating and configuring the verse card services.

This factory centralizes the creation of the formatter, the verse store
and the shuffle service, supporting dependency injection and testability.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Optional

from versecard.config import AppConfig, load_config
from versecard.domain.verse import VerseRecord
from versecard.logging_config import get_logger, log_section
from versecard.services.formatting_cache import MemoryFormattingCache
from versecard.services.formatting_service import VerseFormatter
from versecard.services.ingestion_service import VerseIngestionService
from versecard.services.shuffle_service import ShuffleService
from versecard.settings import Settings, get_settings

from ..repositories import JsonFileKeyValueRepository, KeyValueRepository, MemoryKeyValueRepository

logger = get_logger("factory")


@dataclass
class ServiceContainer:
    """
    Container holding all instantiated services for the API.

    Built once per process; tests build their own with a fresh cache and
    an in-memory progress store.
    """
    # Configuration
    config: AppConfig
    settings: Settings

    # Formatting
    cache: MemoryFormattingCache
    formatter: VerseFormatter

    # Verse store and rotation
    verses: List[VerseRecord]
    progress_store: KeyValueRepository
    shuffle: ShuffleService


class ServiceFactory:
    """
    Factory for creating and configuring service instances.

    Applies environment settings on top of the dataclass configuration.
    """

    def __init__(self, settings: Optional[Settings] = None, config: Optional[AppConfig] = None):
        """
        Initialize the factory.

        Args:
            settings: Environment settings (cached settings when omitted)
            config: Application configuration (loaded from settings.config_path when omitted)
        """
        self.settings = settings or get_settings()
        config = config or load_config(self.settings.config_path)
        self.config = replace(config, card_max_length=self.settings.card_max_length)

    def create_cache(self) -> MemoryFormattingCache:
        return MemoryFormattingCache()

    def create_formatter(self, cache: MemoryFormattingCache) -> VerseFormatter:
        return VerseFormatter(config=self.config, cache=cache)

    def load_verses(self) -> List[VerseRecord]:
        """
        Load the verse store from ``settings.verses_path``.

        An unreadable store yields an empty list; the readiness probe then
        reports not ready and drawing a card answers 503.
        """
        path = self.settings.verses_path
        try:
            return VerseIngestionService(self.config).load_verses(path)
        except (OSError, ValueError) as e:
            logger.error(f"❌ Could not load verses from {path}: {e}")
            return []

    def create_progress_store(self) -> KeyValueRepository:
        if self.settings.progress_path:
            logger.info(f"Shuffle progress stored in {self.settings.progress_path}")
            return JsonFileKeyValueRepository(self.settings.progress_path)
        logger.info("Shuffle progress kept in memory")
        return MemoryKeyValueRepository()

    def create_container(self) -> ServiceContainer:
        """
        Create a fully wired service container.

        Returns:
            ServiceContainer with all services instantiated
        """
        log_section(logger, "Building verse card services")
        cache = self.create_cache()
        progress_store = self.create_progress_store()
        container = ServiceContainer(
            config=self.config,
            settings=self.settings,
            cache=cache,
            formatter=self.create_formatter(cache),
            verses=self.load_verses(),
            progress_store=progress_store,
            shuffle=ShuffleService(self.config, progress_store),
        )
        logger.info(f"✅ Service container ready ({len(container.verses)} verses)")
        return container
