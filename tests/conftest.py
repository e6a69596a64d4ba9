"""
Pytest configuration and fixtures for the verse card service.
"""

import os
import pytest
from fastapi.testclient import TestClient

# Set test environment before importing app
os.environ["VERSECARD_ENVIRONMENT"] = "test"
os.environ["VERSECARD_DEBUG"] = "false"
os.environ["VERSECARD_RATE_LIMIT_ENABLED"] = "false"
os.environ.pop("VERSECARD_PROGRESS_PATH", None)

from versecard.config import AppConfig, load_config
from versecard.services.formatting_cache import MemoryFormattingCache
from versecard.services.formatting_service import VerseFormatter
from versecard.services.segmentation_service import ClauseSegmenter
from versecard.settings import get_settings
from versecard_api.app import app
from versecard_api.dependencies import get_container
from versecard_api.factories import ServiceFactory


@pytest.fixture
def config() -> AppConfig:
    """Default application configuration."""
    return load_config()


@pytest.fixture
def segmenter(config):
    return ClauseSegmenter(config)


@pytest.fixture
def formatter(config):
    """Formatter with its own empty cache."""
    return VerseFormatter(config=config, cache=MemoryFormattingCache())


@pytest.fixture
def services():
    """Fresh service container (default verse file, in-memory progress)."""
    return ServiceFactory(settings=get_settings()).create_container()


@pytest.fixture
def client(services):
    """FastAPI test client bound to the ``services`` fixture."""
    app.dependency_overrides[get_container] = lambda: services
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def wisdom_verse():
    """Command followed by a connective result clause."""
    return "하나님께서 너희에게 지혜를 구하라. 그리하면 너의 길이 평탄하리라."


@pytest.fixture
def sample_verses():
    """Verses with mixed punctuation and connectives."""
    return [
        "너희 중에 누구든지 지혜가 부족하거든 모든 사람에게 후히 주시고 꾸짖지 아니하시는 하나님께 구하라 그리하면 주시리라",
        "여호와는 나의 목자시니 내게 부족함이 없으리로다",
        "수고하고 무거운 짐 진 자들아 다 내게로 오라<br>내가 너희를 쉬게 하리라",
        "아무 것도 염려하지 말고 다만 모든 일에 기도와 간구로, 너희 구할 것을 감사함으로 하나님께 아뢰라.",
        "너는 마음을 다하여 여호와를 신뢰하고 네 명철을 의지하지 말라. 너는 범사에 그를 인정하라. 그리하면 네 길을 지도하시리라.",
        "항상 기뻐하라! 쉬지 말고 기도하라! 범사에 감사하라！",
    ]
