"""
Inclusive Language Assessment
Aggregates phrase matches of a whole document into one scored result per rule.
"""
import logging
from collections import OrderedDict
from typing import Dict, List, Optional, Sequence

from .engine import PhraseMatchEngine
from .types import AssessmentResult, Match

logger = logging.getLogger(__name__)

LINK_TEMPLATE = "<a href='{url}' target='_blank'>{label}</a>"


def format_result_text(feedback: str, help_url: str) -> str:
    """Wrap rendered feedback in the 'Inclusive language' heading and 'Learn more' link."""
    if not help_url:
        return f"Inclusive language: {feedback}"
    heading = LINK_TEMPLATE.format(url=help_url, label="Inclusive language")
    learn_more = LINK_TEMPLATE.format(url=help_url, label="Learn more.")
    return f"{heading}: {feedback} {learn_more}"


class InclusiveLanguageAssessment:
    """
    Runs the phrase match engine over every sentence of a document.

    A rule that fires anywhere in the document yields one result, carrying the
    feedback of its first match and a mark for every flagged occurrence.
    """

    def __init__(self, engine: PhraseMatchEngine):
        self.engine = engine

    def assess(self, sentences: Sequence[Sequence[str]]) -> List[AssessmentResult]:
        """
        Args:
            sentences: Tokenized sentences of one document

        Returns:
            One result per rule that fired, in rule order.
        """
        found: Dict[str, List[tuple]] = {}
        for sentence_index, words in enumerate(sentences):
            for match in self.engine.find_matches(words):
                found.setdefault(match.rule_identifier, []).append((sentence_index, match))

        results: "OrderedDict[str, AssessmentResult]" = OrderedDict()
        for rule in self.engine.rules:
            occurrences = found.get(rule.identifier)
            if not occurrences:
                continue
            first: Match = occurrences[0][1]
            results[rule.identifier] = AssessmentResult(
                identifier=rule.identifier,
                category=rule.category,
                score=rule.score,
                severity=rule.severity,
                text=format_result_text(first.rendered_feedback, rule.help_url),
                marks=tuple(
                    {
                        'sentence_index': sentence_index,
                        'start_index': match.start_index,
                        'end_index': match.end_index,
                        'phrase': match.matched_phrase,
                    }
                    for sentence_index, match in occurrences
                ),
            )

        logger.debug("Inclusive language assessment produced %d results", len(results))
        return list(results.values())

    @staticmethod
    def overall_score(results: Sequence[AssessmentResult]) -> Optional[int]:
        """Lowest score among the results, or None when nothing was flagged."""
        if not results:
            return None
        return min(result.score for result in results)
