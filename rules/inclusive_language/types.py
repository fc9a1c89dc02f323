"""
Inclusive Language Types
Core data structures for the inclusive language rule table and its matches.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Any, Tuple


class Severity(Enum):
    """How strongly a rule's phrases are considered non-inclusive."""
    NON_INCLUSIVE = "non_inclusive"
    POTENTIALLY_NON_INCLUSIVE = "potentially_non_inclusive"

    @property
    def score(self) -> int:
        return _SCORES[self]

    @property
    def level(self) -> str:
        """Severity name used in rule error dictionaries."""
        return _LEVELS[self]


_SCORES = {
    Severity.NON_INCLUSIVE: 3,
    Severity.POTENTIALLY_NON_INCLUSIVE: 6,
}

_LEVELS = {
    Severity.NON_INCLUSIVE: 'high',
    Severity.POTENTIALLY_NON_INCLUSIVE: 'medium',
}


class FilterKind(Enum):
    NOT_PRECEDED_BY = "not_preceded_by"
    NOT_FOLLOWED_BY = "not_followed_by"
    PRECEDED_BY = "preceded_by"
    NOT_FOLLOWED_AND_PRECEDED_BY = "not_followed_and_preceded_by"
    STANDALONE = "standalone"


@dataclass(frozen=True)
class FilterSpec:
    """
    A context filter attached to a rule.

    `phrases` holds the exception phrases (or, for PRECEDED_BY, the phrases
    that must precede the match). For NOT_FOLLOWED_AND_PRECEDED_BY, `phrases`
    are the preceding half of the combination and `following` the following
    half. For STANDALONE, `phrases` are the continuations that still count as
    standalone use.
    """
    kind: FilterKind
    phrases: Tuple[str, ...] = ()
    following: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Rule:
    identifier: str
    non_inclusive_phrases: Tuple[str, ...]
    inclusive_alternatives: Tuple[str, ...]
    severity: Severity
    feedback_template: str
    filters: Tuple[FilterSpec, ...] = ()
    category: str = ""
    help_url: str = ""

    @property
    def score(self) -> int:
        return self.severity.score


@dataclass(frozen=True)
class Match:
    """A rule application that survived all of the rule's filters."""
    rule_identifier: str
    matched_phrase: str
    start_index: int
    end_index: int
    severity: Severity
    rendered_feedback: str
    category: str = ""
    help_url: str = ""

    @property
    def span(self) -> Tuple[int, int]:
        return (self.start_index, self.end_index)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'rule_identifier': self.rule_identifier,
            'matched_phrase': self.matched_phrase,
            'start_index': self.start_index,
            'end_index': self.end_index,
            'severity': self.severity.value,
            'score': self.severity.score,
            'feedback': self.rendered_feedback,
            'category': self.category,
            'help_url': self.help_url,
        }


@dataclass(frozen=True)
class AssessmentResult:
    """Aggregated result of one rule over a whole document."""
    identifier: str
    category: str
    score: int
    severity: Severity
    text: str
    marks: Tuple[Dict[str, Any], ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            'identifier': self.identifier,
            'category': self.category,
            'score': self.score,
            'severity': self.severity.value,
            'text': self.text,
            'marks': list(self.marks),
        }
