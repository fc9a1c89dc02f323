"""
Inclusive Language Package

This package provides:
- includes_consecutive_words: Finds phrase occurrences in a tokenized sentence
- Exception filters: Context predicates that suppress or confirm candidate matches
- build_rule_table: Builds validated, immutable rules from the YAML vocabulary
- PhraseMatchEngine: Applies the rule table to a tokenized sentence
- InclusiveLanguageAssessment: Aggregates matches of a document per rule
"""

from .types import Severity, FilterKind, FilterSpec, Rule, Match, AssessmentResult
from .consecutive_words import includes_consecutive_words
from .exception_filters import (
    is_preceded_by_exception,
    is_not_preceded_by_exception,
    is_followed_by_exception,
    is_not_followed_by_exception,
    is_not_followed_and_preceded_by_exception,
    not_inclusive_when_standalone,
    apply_filters,
)
from .feedback import render_feedback, strip_markup
from .rule_table import RuleTableError, build_rule_table
from .engine import PhraseMatchEngine
from .assessment import InclusiveLanguageAssessment

__all__ = [
    'Severity',
    'FilterKind',
    'FilterSpec',
    'Rule',
    'Match',
    'AssessmentResult',
    'includes_consecutive_words',
    'is_preceded_by_exception',
    'is_not_preceded_by_exception',
    'is_followed_by_exception',
    'is_not_followed_by_exception',
    'is_not_followed_and_preceded_by_exception',
    'not_inclusive_when_standalone',
    'apply_filters',
    'render_feedback',
    'strip_markup',
    'RuleTableError',
    'build_rule_table',
    'PhraseMatchEngine',
    'InclusiveLanguageAssessment',
]
