"""
Unit tests for configuration loading and logging setup.
"""

import json
import logging

import pytest

from versecard.config import AppConfig, load_config
from versecard.domain.break_rule import BreakRule
from versecard.lexicon import CONNECTIVES
from versecard.logging_config import get_logger, setup_logging
from versecard.services.break_point_service import BreakPointDetector


class TestLoadConfig:
    """Tests for JSON configuration overrides."""

    def test_defaults(self):
        config = load_config()
        assert isinstance(config, AppConfig)
        assert config.line_break.default_max_length == 15
        assert config.line_break.similarity_threshold == 0.8
        assert config.lexicon.connectives == CONNECTIVES
        assert config.card_max_length == 25

    def test_nested_overrides(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({
            "card_max_length": 30,
            "line_break": {"default_max_length": 18, "weights": {"keyword": 0.5}},
        }), encoding="utf-8")

        config = load_config(str(path))

        assert config.card_max_length == 30
        assert config.line_break.default_max_length == 18
        assert config.line_break.weights.keyword == 0.5
        assert config.line_break.weights.lexical == 0.3

    def test_lexicon_overrides(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({
            "lexicon": {
                "connectives": ["그리하면"],
                "forced_break_rules": [{"name": "custom", "suffixes": ["하였으니"]}],
            }
        }, ensure_ascii=False), encoding="utf-8")

        config = load_config(str(path))

        assert config.lexicon.connectives == ("그리하면",)
        assert config.lexicon.forced_break_rules == (BreakRule("custom", ("하였으니",), ()),)
        assert BreakPointDetector(config).is_forced_break_point("사랑하였으니", "아무말이나")

    def test_unknown_setting_raises(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"line_break": {"bogus": 1}}), encoding="utf-8")
        with pytest.raises(ValueError, match="bogus"):
            load_config(str(path))

    def test_unknown_lexicon_setting_raises(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"lexicon": {"bogus": []}}), encoding="utf-8")
        with pytest.raises(ValueError, match="bogus"):
            load_config(str(path))

    def test_defaults_are_not_shared(self):
        first = load_config()
        first.lexicon.head_verb_families["extra"] = ("무엇",)
        assert "extra" not in load_config().lexicon.head_verb_families


class TestLogging:
    """Tests for the logger tree."""

    def test_logger_names(self):
        assert get_logger("segmentation_service").name == "versecard.segmentation_service"

    def test_dev_mode_forces_debug(self, monkeypatch):
        monkeypatch.setenv("VERSECARD_DEV_MODE", "1")
        logger = setup_logging(level="WARNING", use_colors=False)
        assert logger.level == logging.DEBUG

    def test_explicit_level(self, monkeypatch):
        monkeypatch.delenv("VERSECARD_DEV_MODE", raising=False)
        logger = setup_logging(level="WARNING", use_colors=False)
        assert logger.level == logging.WARNING
        setup_logging(level=logging.INFO, use_colors=False)
