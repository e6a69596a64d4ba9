"""
Unit tests for the progress key-value repositories.
"""

import json
import random

import pytest

from versecard.services.shuffle_service import ShuffleService
from versecard_api.repositories import JsonFileKeyValueRepository, MemoryKeyValueRepository


class TestMemoryKeyValueRepository:
    """Tests for the in-memory store."""

    def test_get_set_delete(self):
        repo = MemoryKeyValueRepository()
        assert repo.get("versePtr") is None

        repo.set("versePtr", "3")
        assert repo.get("versePtr") == "3"

        assert repo.delete("versePtr")
        assert not repo.delete("versePtr")

    def test_clear(self):
        repo = MemoryKeyValueRepository()
        repo.set("a", "1")
        repo.set("b", "2")
        assert repo.clear() == 2
        assert repo.get("a") is None


class TestJsonFileKeyValueRepository:
    """Tests for the JSON file store."""

    def test_values_survive_a_new_instance(self, tmp_path):
        path = tmp_path / "progress" / "state.json"
        JsonFileKeyValueRepository(path).set("verseOrder", "[1, 0]")

        assert JsonFileKeyValueRepository(path).get("verseOrder") == "[1, 0]"
        assert json.loads(path.read_text(encoding="utf-8")) == {"verseOrder": "[1, 0]"}

    def test_corrupt_file_is_treated_as_empty(self, tmp_path):
        path = tmp_path / "state.json"
        path.write_text("{not json", encoding="utf-8")
        repo = JsonFileKeyValueRepository(path)

        assert repo.get("verseOrder") is None
        repo.set("versePtr", "1")
        assert repo.get("versePtr") == "1"

    def test_delete(self, tmp_path):
        repo = JsonFileKeyValueRepository(tmp_path / "state.json")
        assert not repo.delete("versePtr")
        repo.set("versePtr", "1")
        assert repo.delete("versePtr")
        assert repo.get("versePtr") is None

    def test_drives_the_shuffle_service(self, config, tmp_path):
        path = tmp_path / "state.json"
        first = ShuffleService(config, JsonFileKeyValueRepository(path), rng=random.Random(1))
        drawn = [first.next_index(4) for _ in range(2)]

        # A restarted process continues the same rotation
        second = ShuffleService(config, JsonFileKeyValueRepository(path), rng=random.Random(2))
        drawn += [second.next_index(4) for _ in range(2)]

        assert sorted(drawn) == [0, 1, 2, 3]
