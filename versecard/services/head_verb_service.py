# versecard/services/head_verb_service.py
"""
Recognition of Korean predicate (head verb) word forms.
"""
from typing import Dict, Optional, Tuple

from ..config import AppConfig


class HeadVerbClassifier:
    """
    Whole-token matcher for verb-ending surface forms.

    Four families are recognized: honorific, plain dictionary form,
    imperative and connective. A token is a head verb only when it equals
    a catalog entry exactly; substrings never match.
    """

    def __init__(self, config: AppConfig):
        self.families: Dict[str, Tuple[str, ...]] = config.lexicon.head_verb_families
        self._lookup: Dict[str, str] = {}
        for family, forms in self.families.items():
            for form in forms:
                # First family wins for forms listed twice (보라, 오라, 가라)
                self._lookup.setdefault(form, family)

    def is_head_verb(self, word: str) -> bool:
        return word in self._lookup

    def family_of(self, word: str) -> Optional[str]:
        """Return the family name of a head verb, or None."""
        return self._lookup.get(word)
