"""
Guards Test Suite for the "crazy" family of inclusive language rules

"crazy" is targeted by several rules: the phrases "to be crazy about",
"to not be crazy about", "crazy in love", "to go crazy", "to drive crazy" and
the plain word. Each guard proves that a specific construction is attributed to
exactly one rule and that the plain "crazy" rule still fires everywhere else.
"""

import itertools

import pytest
from rules.inclusive_language.engine import PhraseMatchEngine
from rules.inclusive_language.types import FilterKind, Match, Severity
from rules.language_and_grammar.services.language_vocabulary_service import LanguageVocabularyService

RULES = LanguageVocabularyService().get_inclusive_language_rules()


@pytest.fixture(scope="module")
def engine():
    """Build the engine once for all tests"""
    return PhraseMatchEngine(RULES)


def identifiers(engine, sentence):
    return [match.rule_identifier for match in engine.find_matches(sentence.split(" "))]


class TestGuard1ToGoCrazy:
    """
    GUARD 1: "crazy" after a form of "to go" belongs to "to go crazy"
    """

    @pytest.mark.parametrize("sentence", [
        "going crazy",
        "you will go crazy",
        "she went crazy last night",
        "the crowd goes crazy",
    ])
    def test_guard_1_prevents_duplicate_flag(self, engine, sentence):
        assert identifiers(engine, sentence) == ["to go crazy"]

    def test_guard_1_no_false_negatives(self, engine):
        assert identifiers(engine, "so crazy") == ["crazy"]
        assert identifiers(engine, "that was a crazy idea") == ["crazy"]


class TestGuard2ToDriveCrazy:
    """
    GUARD 2: "crazy" after "to drive" and an object pronoun belongs to "to drive crazy"
    """

    @pytest.mark.parametrize("sentence", [
        "this is driving me crazy",
        "you drive everyone crazy",
        "it drove them crazy",
    ])
    def test_guard_2_prevents_duplicate_flag(self, engine, sentence):
        assert identifiers(engine, sentence) == ["to drive crazy"]

    def test_guard_2_no_false_negatives(self, engine):
        # "drive" without an object pronoun is not the idiom
        assert identifiers(engine, "they drive crazy") == ["crazy"]


class TestGuard3CrazyAbout:
    """
    GUARD 3: "crazy about" after "to be" is "to be crazy about", after a negated
    "to be" it is "to not be crazy about"
    """

    @pytest.mark.parametrize("sentence,expected", [
        ("i am crazy about her", "to be crazy about"),
        ("they are so crazy about football", "to be crazy about"),
        ("i 'm crazy about pizza", "to be crazy about"),
        ("she is not crazy about it", "to not be crazy about"),
        ("he is not so crazy about it", "to not be crazy about"),
        ("she is n't crazy about it", "to not be crazy about"),
        ("she has never been crazy about it", "to not be crazy about"),
        ("she has not been crazy about it", "to not be crazy about"),
        ("she has n't been so crazy about it", "to not be crazy about"),
    ])
    def test_guard_3_prevents_duplicate_flag(self, engine, sentence, expected):
        assert identifiers(engine, sentence) == [expected]

    def test_guard_3_no_false_negatives(self, engine):
        # "about" without a form of "to be" before "crazy" is the plain word
        assert identifiers(engine, "crazy about town") == ["crazy"]
        # a form of "to be" without "about" is the plain word
        assert identifiers(engine, "she is so crazy") == ["crazy"]


class TestGuard4CrazyInLove:
    """
    GUARD 4: "crazy in love" is its own phrase
    """

    def test_guard_4_prevents_duplicate_flag(self, engine):
        assert identifiers(engine, "they are crazy in love") == ["crazy in love"]
        assert identifiers(engine, "going crazy in love") == ["crazy in love"]

    def test_guard_4_no_false_negatives(self, engine):
        assert identifiers(engine, "crazy in the head") == ["crazy"]


def overlapping_pairs(matches):
    return [
        ((a.rule_identifier, a.span), (b.rule_identifier, b.span))
        for a, b in itertools.combinations(matches, 2)
        if a.start_index < b.end_index and b.start_index < a.end_index
    ]


PRECEDING_KINDS = (FilterKind.NOT_PRECEDED_BY, FilterKind.PRECEDED_BY, FilterKind.NOT_FOLLOWED_AND_PRECEDED_BY)
FOLLOWING_KINDS = (FilterKind.NOT_FOLLOWED_BY, FilterKind.STANDALONE)


def rule_contexts(rule):
    """Sentences placing every phrase of a rule next to the phrases its filters name."""
    for phrase in rule.non_inclusive_phrases:
        words = phrase.split(" ")
        yield ["we", "noticed"] + words + ["yesterday"]
        for spec in rule.filters:
            preceding = spec.phrases if spec.kind in PRECEDING_KINDS else ()
            following = spec.phrases if spec.kind in FOLLOWING_KINDS else spec.following
            for before in preceding:
                yield before.split(" ") + words + ["today"]
            for after in following:
                yield ["we", "noticed"] + words + after.split(" ")
            if spec.kind is FilterKind.NOT_FOLLOWED_AND_PRECEDED_BY:
                for before in spec.phrases:
                    for after in spec.following:
                        yield before.split(" ") + words + after.split(" ")


class TestOneRulePerSpan:
    """No two rules fire on overlapping spans."""

    CORPUS = [
        "i am crazy about her",
        "she is not crazy about it",
        "he is not so crazy about it",
        "they are crazy in love",
        "this is driving me crazy",
        "you will go crazy",
        "that was a crazy idea",
        "that was crazier than ever",
        "the craziest day",
        "crazy going crazy and driving us crazy",
        "use the handicap parking",
        "she was called deaf and dumb",
        "he was called mentally retarded",
        "he has high functioning autism",
    ]

    @pytest.mark.parametrize("sentence", CORPUS)
    def test_corpus_sentence(self, engine, sentence):
        matches = engine.find_matches(sentence.split(" "))
        assert matches, f"Expected a match in: '{sentence}'"
        assert overlapping_pairs(matches) == [], f"Several rules fired on one span in: '{sentence}'"

    @pytest.mark.parametrize("rule", RULES, ids=[rule.identifier for rule in RULES])
    def test_rule_in_filter_contexts(self, engine, rule):
        for words in rule_contexts(rule):
            collisions = overlapping_pairs(engine.find_matches(words))
            assert collisions == [], f"Overlapping matches in '{' '.join(words)}': {collisions}"

    def test_overlap_is_detected(self):
        # "dumb" inside "deaf and dumb" starts at a different word than "deaf"
        deaf = Match('deaf', 'deaf and dumb', 3, 6, Severity.NON_INCLUSIVE, '')
        dumb = Match('dumb', 'dumb', 5, 6, Severity.NON_INCLUSIVE, '')
        assert overlapping_pairs([deaf, dumb]) == [(('deaf', (3, 6)), ('dumb', (5, 6)))]
