# versecard/config.py
"""
Central configuration for the verse card generator.
Uses dataclasses for type-safe configuration management.
"""
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional, Tuple
import json

from . import lexicon
from .domain.break_rule import BreakRule


@dataclass
class SimilarityWeights:
    """Weights of the clause similarity blend."""
    lexical: float = 0.3
    keyword: float = 0.4
    structural: float = 0.3

    # Structural sub-weights
    head_verb_presence: float = 0.3
    length_ratio: float = 0.2
    same_type: float = 0.5


@dataclass
class LineBreakConfig:
    """Configuration for the line-breaking pipeline."""
    default_max_length: int = 15

    # Words shorter than this are never break points or meaningful words
    min_break_word_length: int = 4

    # Below this blended similarity a break is inserted
    similarity_threshold: float = 0.8

    # Lines shorter than this without a meaningful word are merged upward
    short_line_length: int = 10

    weights: SimilarityWeights = field(default_factory=SimilarityWeights)


@dataclass
class LexiconConfig:
    """
    Word catalogs used by the engine.

    Defaults are the tuned tables from ``versecard.lexicon``; a JSON config
    file may replace any of them.
    """
    connectives: Tuple[str, ...] = lexicon.CONNECTIVES
    clause_punctuation: Tuple[str, ...] = lexicon.CLAUSE_PUNCTUATION
    head_verb_families: Dict[str, Tuple[str, ...]] = field(
        default_factory=lambda: dict(lexicon.HEAD_VERB_FAMILIES)
    )
    subject_start_rules: Tuple[BreakRule, ...] = lexicon.SUBJECT_START_RULES
    action_start_rules: Tuple[BreakRule, ...] = lexicon.ACTION_START_RULES
    result_start_rules: Tuple[BreakRule, ...] = lexicon.RESULT_START_RULES
    command_start_rules: Tuple[BreakRule, ...] = lexicon.COMMAND_START_RULES
    forced_break_rules: Tuple[BreakRule, ...] = lexicon.FORCED_BREAK_RULES


@dataclass
class IngestionConfig:
    """Configuration for loading verse files."""
    content_columns: List[str] = field(default_factory=lambda: [
        'content', '본문', '내용', 'text'
    ])
    reference_columns: List[str] = field(default_factory=lambda: [
        'reference', '출처', '구절', 'ref'
    ])

    csv_delimiters: List[str] = field(default_factory=lambda: [',', ';', '\t'])
    default_encoding: str = 'utf-8'
    fallback_encoding: str = 'cp949'


@dataclass
class ShuffleConfig:
    """Keys used to persist the shuffle progress."""
    order_key: str = 'verseOrder'
    pointer_key: str = 'versePtr'


@dataclass
class AppConfig:
    """Main application configuration combining all sub-configs."""
    line_break: LineBreakConfig = field(default_factory=LineBreakConfig)
    lexicon: LexiconConfig = field(default_factory=LexiconConfig)
    ingestion: IngestionConfig = field(default_factory=IngestionConfig)
    shuffle: ShuffleConfig = field(default_factory=ShuffleConfig)

    # Card rendering
    card_max_length: int = 25


_RULE_FIELDS = (
    'subject_start_rules',
    'action_start_rules',
    'result_start_rules',
    'command_start_rules',
    'forced_break_rules',
)


def _parse_rules(raw: List[Dict[str, Any]]) -> Tuple[BreakRule, ...]:
    """Build BreakRule tuples from JSON objects."""
    rules = []
    for i, item in enumerate(raw):
        rules.append(BreakRule(
            name=item.get('name', f'rule_{i}'),
            suffixes=tuple(item['suffixes']),
            prefixes=tuple(item.get('prefixes', ())),
        ))
    return tuple(rules)


def _apply_lexicon_overrides(target: LexiconConfig, overrides: Dict[str, Any]) -> None:
    for key, value in overrides.items():
        if key in _RULE_FIELDS:
            setattr(target, key, _parse_rules(value))
        elif key == 'head_verb_families':
            target.head_verb_families = {name: tuple(words) for name, words in value.items()}
        elif key in ('connectives', 'clause_punctuation'):
            setattr(target, key, tuple(value))
        else:
            raise ValueError(f"Unknown lexicon setting: {key}")


def _apply_overrides(target: Any, overrides: Dict[str, Any]) -> None:
    known = {f.name for f in fields(target)}
    for key, value in overrides.items():
        if key not in known:
            raise ValueError(f"Unknown setting '{key}' for {type(target).__name__}")
        current = getattr(target, key)
        if isinstance(value, dict) and hasattr(current, '__dataclass_fields__'):
            _apply_overrides(current, value)
        else:
            setattr(target, key, value)


def load_config(config_path: Optional[str] = None) -> AppConfig:
    """
    Load configuration from file or return defaults.

    The JSON file mirrors the dataclass tree, e.g.::

        {"line_break": {"default_max_length": 18},
         "lexicon": {"connectives": ["그리하면", "그러므로"]}}

    Args:
        config_path: Optional path to JSON config file

    Returns:
        AppConfig instance with loaded or default values

    Raises:
        ValueError: If the file contains unknown settings
    """
    config = AppConfig()
    if not config_path:
        return config

    with open(config_path, encoding='utf-8') as fh:
        raw = json.load(fh)

    lexicon_overrides = raw.pop('lexicon', None)
    if lexicon_overrides:
        _apply_lexicon_overrides(config.lexicon, lexicon_overrides)
    _apply_overrides(config, raw)
    return config
