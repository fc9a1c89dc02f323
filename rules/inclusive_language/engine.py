"""
Phrase Match Engine
Applies the inclusive language rule table to a tokenized sentence.
"""
import logging
from typing import Iterable, List, Optional, Sequence

from .consecutive_words import includes_consecutive_words
from .exception_filters import apply_filters
from .feedback import render_feedback
from .types import Match, Rule

logger = logging.getLogger(__name__)


class PhraseMatchEngine:
    """
    Evaluates rules against a word sequence.

    Rules are evaluated in declaration order, each phrase of a rule in order,
    and each phrase's occurrences from left to right. The engine holds no state
    besides the rule table, so the same input always gives the same matches.
    """

    def __init__(self, rules: Iterable[Rule], disabled_rules: Optional[Iterable[str]] = None):
        self.rules = tuple(rules)
        self.disabled_rules = frozenset(disabled_rules or ())

    def match_rule(self, rule: Rule, words: Sequence[str]) -> List[Match]:
        matches = []
        for phrase in rule.non_inclusive_phrases:
            for span in includes_consecutive_words(words, phrase):
                if not apply_filters(rule.filters, words, span):
                    continue
                matches.append(Match(
                    rule_identifier=rule.identifier,
                    matched_phrase=phrase,
                    start_index=span[0],
                    end_index=span[1],
                    severity=rule.severity,
                    rendered_feedback=render_feedback(rule.feedback_template, phrase, rule.inclusive_alternatives),
                    category=rule.category,
                    help_url=rule.help_url,
                ))
        return matches

    def find_matches(self, words: Sequence[str], disabled_rules: Optional[Iterable[str]] = None) -> List[Match]:
        """
        Find every rule match in a sentence.

        Args:
            words: Lowercase tokens of one sentence
            disabled_rules: Rule identifiers to skip, in addition to the
                engine's own disabled rules

        Returns:
            Matches ordered by rule, phrase and position.
        """
        skipped = self.disabled_rules | frozenset(disabled_rules or ())
        words = [word.lower() for word in words]

        matches: List[Match] = []
        for rule in self.rules:
            if rule.identifier in skipped:
                continue
            matches.extend(self.match_rule(rule, words))

        if matches:
            logger.debug("Found %d inclusive language matches in %d words", len(matches), len(words))
        return matches
