"""
Base Rule Class - Abstract interface for all writing rules.
All rules must inherit from this class and implement the required methods.
Provides the standardized error dictionary every rule reports.
"""

from abc import ABC, abstractmethod
from typing import List, Dict, Any, Optional
import logging

logger = logging.getLogger(__name__)

# Block types that hold technical syntax rather than prose
CODE_BLOCK_TYPES = ['listing', 'literal', 'code_block', 'inline_code']


class BaseRule(ABC):
    """
    Abstract base class for all writing rules.
    """

    def __init__(self) -> None:
        self.rule_type = self._get_rule_type()
        self.severity_levels = ['low', 'medium', 'high']

    @abstractmethod
    def _get_rule_type(self) -> str:
        """Return the rule type identifier (e.g., 'inclusive_language')."""
        pass

    @abstractmethod
    def analyze(self, text: str, sentences: List[str], nlp=None, context=None) -> List[Dict[str, Any]]:
        """
        Analyze text and return list of errors found.

        Args:
            text: Full text to analyze
            sentences: List of sentences
            nlp: SpaCy nlp object (optional)
            context: Optional context information about the block being analyzed

        Returns:
            List of error dictionaries.
        """
        pass

    def _is_code_context(self, context: Optional[Dict[str, Any]]) -> bool:
        # === UNIVERSAL CODE CONTEXT GUARD ===
        # Code blocks, listings, and literal blocks are technical syntax, not prose
        return bool(context) and context.get('block_type') in CODE_BLOCK_TYPES

    def _create_error(self, sentence: str, sentence_index: int, message: str,
                      suggestions: List[str], severity: str = 'medium',
                      text: Optional[str] = None, context: Optional[Dict[str, Any]] = None,
                      **extra_data) -> Dict[str, Any]:
        """
        Create standardized error dictionary.

        Args:
            sentence: The sentence containing the error
            sentence_index: Index of the sentence
            message: Error message
            suggestions: List of suggestions for fixing the error
            severity: Error severity level ('low', 'medium', 'high')
            text: Full text context
            context: Additional context information
            **extra_data: Additional error data to include

        Returns:
            Error dictionary
        """
        if severity not in self.severity_levels:
            logger.debug("Unknown severity '%s' for rule %s, using 'medium'", severity, self.rule_type)
            severity = 'medium'

        error = {
            'type': self.rule_type,
            'message': str(message),
            'suggestions': [str(s) for s in suggestions],
            'sentence': str(sentence),
            'sentence_index': int(sentence_index),
            'severity': severity
        }

        if context and context.get('block_type'):
            error['block_type'] = context['block_type']

        for key, value in extra_data.items():
            error[str(key)] = self._make_serializable(value)

        return error

    def _make_serializable(self, data: Any) -> Any:
        """Recursively convert data structure to be JSON serializable."""
        if data is None:
            return None

        if isinstance(data, dict):
            return {str(key): self._make_serializable(value) for key, value in data.items()}

        if isinstance(data, (list, tuple, set, frozenset)):
            return [self._make_serializable(item) for item in data]

        if isinstance(data, (str, int, float, bool)):
            return data

        # Enums and other values
        if hasattr(data, 'value') and isinstance(data.value, (str, int)):
            return data.value

        return str(data)
