"""
Unit tests for the document-level inclusive language assessment.
"""

import dataclasses
import unittest

from rules.inclusive_language.assessment import InclusiveLanguageAssessment, format_result_text
from rules.inclusive_language.engine import PhraseMatchEngine
from rules.inclusive_language.types import Severity
from rules.language_and_grammar.services.language_vocabulary_service import LanguageVocabularyService

HELP_URL = 'https://yoa.st/inclusive-language-disability'


class TestInclusiveLanguageAssessment(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        engine = PhraseMatchEngine(LanguageVocabularyService().get_inclusive_language_rules())
        cls.assessment = InclusiveLanguageAssessment(engine)

    def test_one_result_per_rule_with_all_marks(self):
        sentences = [
            ["she", "is", "an", "alcoholic"],
            ["they", "are", "alcoholics"],
            ["an", "alcoholic", "person"],
        ]
        results = self.assessment.assess(sentences)

        self.assertEqual([result.identifier for result in results], ['alcoholic', 'alcoholics'])
        alcoholic = results[0]
        self.assertEqual(alcoholic.score, 6)
        self.assertIs(alcoholic.severity, Severity.POTENTIALLY_NON_INCLUSIVE)
        self.assertEqual(alcoholic.category, 'disability')
        self.assertEqual(alcoholic.marks, (
            {'sentence_index': 0, 'start_index': 2, 'end_index': 4, 'phrase': 'an alcoholic'},
            {'sentence_index': 2, 'start_index': 0, 'end_index': 2, 'phrase': 'an alcoholic'},
        ))

    def test_results_are_immutable(self):
        result = self.assessment.assess([["that", "was", "lame"]])[0]
        self.assertIsInstance(result.marks, tuple)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            result.score = 6

    def test_result_text_links_to_help_page(self):
        result = self.assessment.assess([["she", "is", "an", "alcoholic"]])[0]
        self.assertTrue(result.text.startswith(
            f"<a href='{HELP_URL}' target='_blank'>Inclusive language</a>: "
            "Be careful when using <i>an alcoholic</i> as it is potentially harmful."
        ))
        self.assertTrue(result.text.endswith(f"<a href='{HELP_URL}' target='_blank'>Learn more.</a>"))

    def test_overall_score_is_most_severe(self):
        results = self.assessment.assess([
            ["she", "is", "an", "alcoholic"],
            ["that", "was", "so", "crazy"],
        ])
        self.assertEqual(InclusiveLanguageAssessment.overall_score(results), 3)

    def test_clean_document(self):
        results = self.assessment.assess([["a", "perfectly", "fine", "sentence"]])
        self.assertEqual(results, [])
        self.assertIsNone(InclusiveLanguageAssessment.overall_score(results))

    def test_to_dict(self):
        data = self.assessment.assess([["that", "was", "lame"]])[0].to_dict()
        self.assertEqual(data['identifier'], 'lame')
        self.assertEqual(data['severity'], 'non_inclusive')
        self.assertEqual(len(data['marks']), 1)

    def test_format_result_text_without_url(self):
        self.assertEqual(format_result_text("Avoid it.", ""), "Inclusive language: Avoid it.")


if __name__ == '__main__':
    unittest.main()
