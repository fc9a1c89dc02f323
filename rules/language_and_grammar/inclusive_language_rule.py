"""
Inclusive Language Rule (YAML-based)
Flags non-inclusive disability-related terms and suggests inclusive alternatives.
Uses the YAML rule table and the phrase match engine; spaCy only supplies
sentences and tokens.
"""
from typing import List, Dict, Any, Optional, Iterable, Tuple
import logging

from ..base_rule import BaseRule
from ..inclusive_language.assessment import InclusiveLanguageAssessment
from ..inclusive_language.engine import PhraseMatchEngine
from ..inclusive_language.exception_filters import is_punctuation
from ..inclusive_language.feedback import strip_markup
from ..inclusive_language.types import AssessmentResult, Match, Severity
from .services.language_vocabulary_service import LanguageVocabularyService, get_inclusive_language_vocabulary

logger = logging.getLogger(__name__)

TYPOGRAPHIC_APOSTROPHE = "\u2019"


class InclusiveLanguageRule(BaseRule):
    """
    Checks for non-inclusive terms using the YAML-based rule table.
    Each sentence is turned into a lowercase word sequence and every rule of
    the table is applied to it; surviving matches become errors.
    """

    def __init__(self, vocabulary_service: Optional[LanguageVocabularyService] = None,
                 category: str = 'disability',
                 disabled_rules: Optional[Iterable[str]] = None,
                 min_severity: Optional[str] = None):
        super().__init__()
        self.vocabulary_service = vocabulary_service or get_inclusive_language_vocabulary()
        rules = self.vocabulary_service.get_inclusive_language_rules(category)
        self.engine = PhraseMatchEngine(rules, disabled_rules=disabled_rules)
        self.rules_by_identifier = {rule.identifier: rule for rule in rules}
        self.min_severity = Severity(min_severity) if min_severity else Severity.POTENTIALLY_NON_INCLUSIVE

    def _get_rule_type(self) -> str:
        return 'inclusive_language'

    def analyze(self, text: str, sentences: List[str], nlp=None, context=None) -> List[Dict[str, Any]]:
        """
        Analysis for non-inclusive language.
        Sentences come from the spaCy pipeline; the `sentences` argument is kept
        for interface compatibility with the other rules.
        """
        if self._is_code_context(context):
            return []
        errors = []
        if not nlp:
            return errors

        doc = nlp(text)
        for sentence_index, sent in enumerate(doc.sents):
            words, offsets = self._sentence_words(sent)
            for match in self.engine.find_matches(words):
                if not self._is_reportable(match):
                    continue
                start_char = offsets[match.start_index][0]
                end_char = offsets[match.end_index - 1][1]
                errors.append(self._create_error(
                    sentence=sent.text,
                    sentence_index=sentence_index,
                    message=strip_markup(match.rendered_feedback),
                    suggestions=self._generate_suggestions(match),
                    severity=match.severity.level,
                    text=text,
                    context=context,
                    span=(start_char, end_char),
                    flagged_text=text[start_char:end_char],
                    rule_identifier=match.rule_identifier,
                    category=match.category,
                    help_url=match.help_url,
                    score=match.severity.score
                ))

        logger.debug("Inclusive language rule found %d issues", len(errors))
        return errors

    def assess(self, text: str, nlp=None, context=None) -> List[AssessmentResult]:
        """Aggregate the document's matches into one result per rule."""
        if self._is_code_context(context) or not nlp:
            return []

        doc = nlp(text)
        sentences = [self._sentence_words(sent)[0] for sent in doc.sents]
        assessment = InclusiveLanguageAssessment(self.engine)
        return [
            result for result in assessment.assess(sentences)
            if result.severity.score <= self.min_severity.score
        ]

    # === HELPER METHODS ===

    def _is_reportable(self, match: Match) -> bool:
        # Lower scores are more severe
        return match.severity.score <= self.min_severity.score

    def _sentence_words(self, sent) -> Tuple[List[str], List[Tuple[int, int]]]:
        """
        Build the lowercase word sequence of a sentence with character offsets.

        spaCy splits "wheelchair-bound" into three tokens; hyphenated compounds
        written without spaces are joined back into one word.
        Typographic apostrophes ("isn\u2019t") are written as straight ones.
        """
        words: List[str] = []
        offsets: List[Tuple[int, int]] = []
        previous = None

        for token in sent:
            if token.is_space:
                previous = token
                continue
            start, end = token.idx, token.idx + len(token.text)
            word = token.lower_.replace(TYPOGRAPHIC_APOSTROPHE, "'")
            joins_previous = (
                words
                and previous is not None
                and not previous.whitespace_
                and (token.text == '-' or words[-1].endswith('-'))
                and not (token.text == '-' and is_punctuation(words[-1]))
            )
            if joins_previous:
                words[-1] += word
                offsets[-1] = (offsets[-1][0], end)
            else:
                words.append(word)
                offsets.append((start, end))
            previous = token

        return words, offsets

    def _generate_suggestions(self, match: Match) -> List[str]:
        rule = self.rules_by_identifier.get(match.rule_identifier)
        if rule is None:
            return []
        suggestions = [f"Consider using: {strip_markup(alternative)}." for alternative in rule.inclusive_alternatives]
        if match.severity is Severity.POTENTIALLY_NON_INCLUSIVE:
            suggestions.append("This term may be acceptable in some contexts, such as when referring to a medical condition.")
        if match.help_url:
            suggestions.append(f"Learn more: {match.help_url}")
        return suggestions
