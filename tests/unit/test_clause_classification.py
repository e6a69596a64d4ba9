"""
Unit tests for head verb recognition and clause type classification.
"""

import pytest

from versecard.domain.clause import ClauseType
from versecard.services.clause_type_service import ClauseTypeClassifier
from versecard.services.head_verb_service import HeadVerbClassifier


@pytest.fixture
def head_verbs(config):
    return HeadVerbClassifier(config)


@pytest.fixture
def classifier(config):
    return ClauseTypeClassifier(config)


class TestHeadVerbClassifier:
    """Tests for whole-token head verb matching."""

    @pytest.mark.parametrize("word", ["하시고", "구하다", "구하라", "하면", "일어나라"])
    def test_catalog_forms_are_head_verbs(self, head_verbs, word):
        assert head_verbs.is_head_verb(word)

    @pytest.mark.parametrize("word", ["구하라.", "주시리라", "그리하면", "말씀"])
    def test_substrings_and_punctuated_forms_do_not_match(self, head_verbs, word):
        assert not head_verbs.is_head_verb(word)

    def test_family_lookup(self, head_verbs):
        assert head_verbs.family_of("하시고") == "honorific"
        assert head_verbs.family_of("하면") == "connective"
        assert head_verbs.family_of("일어나라") == "imperative"
        assert head_verbs.family_of("말씀") is None

    def test_form_listed_twice_keeps_first_family(self, head_verbs):
        # 보라 appears in both the plain and imperative tables
        assert head_verbs.family_of("보라") == "plain"


class TestClauseTypeClassifier:
    """Tests for clause type precedence."""

    def test_condition(self, classifier):
        assert classifier.classify("지혜가 부족하거든") == ClauseType.CONDITION

    def test_condition_wins_over_statement(self, classifier):
        # Contains the copula 이다 and a head verb, but ends with 거든
        result = classifier.classify("이것이 진리이다 하거든", head_verb="하다")
        assert result == ClauseType.CONDITION

    def test_command_ignores_trailing_punctuation(self, classifier):
        assert classifier.classify("하나님께 구하라.") == ClauseType.COMMAND
        assert classifier.classify("범사에 감사하라！") == ClauseType.COMMAND

    def test_result(self, classifier):
        assert classifier.classify("너는 그리하여") == ClauseType.RESULT

    def test_statement_from_copula(self, classifier):
        assert classifier.classify("하나님은 사랑이다") == ClauseType.STATEMENT

    def test_statement_from_head_verb(self, classifier):
        assert classifier.classify("말씀하시며", head_verb="하시며") == ClauseType.STATEMENT

    def test_question(self, classifier):
        assert classifier.classify("그가 누구") == ClauseType.QUESTION

    def test_unknown(self, classifier):
        assert classifier.classify("주의 말씀은 진리라") == ClauseType.UNKNOWN
        assert classifier.classify("") == ClauseType.UNKNOWN
