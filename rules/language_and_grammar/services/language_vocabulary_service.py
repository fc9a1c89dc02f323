"""
Language Vocabulary Service

Service for managing YAML-based vocabularies for language and grammar rules.
Provides centralized, cacheable, and reloadable vocabulary management.
"""

import logging
import yaml
from typing import Dict, Any, Set, Tuple, Optional
from pathlib import Path

from ...inclusive_language.rule_table import build_rule_table
from ...inclusive_language.types import Rule

logger = logging.getLogger(__name__)

INCLUSIVE_LANGUAGE_FILES = {
    'disability': "inclusive_language_disability.yaml",
}


class LanguageVocabularyService:
    """
    Service for managing language and grammar vocabularies.

    Features:
    - Lazy loading with caching
    - Rule tables built and validated once per vocabulary file
    - Runtime vocabulary reloads
    """

    def __init__(self, config_dir: Optional[str] = None):
        if config_dir is None:
            # Auto-detect config directory relative to this file
            current_dir = Path(__file__).parent
            config_dir = current_dir.parent / "config"

        self.config_dir = Path(config_dir)
        self._cache: Dict[str, Dict[str, Any]] = {}
        self._rule_tables: Dict[str, Tuple[Rule, ...]] = {}
        self._loaded_files: Set[str] = set()

    def _load_yaml_file(self, filename: str) -> Dict[str, Any]:
        """Load and cache a YAML vocabulary file."""
        if filename in self._cache:
            return self._cache[filename]

        file_path = self.config_dir / filename

        if not file_path.exists():
            logger.warning("Vocabulary file %s not found. Using empty vocabulary.", file_path)
            self._cache[filename] = {}
            return {}

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            logger.error("Error parsing vocabulary file %s: %s", file_path, e)
            raise

        self._cache[filename] = data
        self._loaded_files.add(filename)
        logger.info("Loaded language vocabulary: %s", filename)
        return data

    def reload_vocabulary(self, filename: str) -> None:
        """Reload a specific vocabulary file (useful for runtime updates)."""
        self._cache.pop(filename, None)
        self._rule_tables.pop(filename, None)
        self._load_yaml_file(filename)

    def reload_all_vocabularies(self) -> None:
        """Reload all cached vocabulary files."""
        loaded_files = list(self._loaded_files)
        self._cache.clear()
        self._rule_tables.clear()
        self._loaded_files.clear()

        for filename in loaded_files:
            self._load_yaml_file(filename)

    # === SPECIFIC VOCABULARY ACCESSORS ===

    def get_inclusive_language_terms(self, category: str = 'disability') -> Dict[str, Any]:
        """Get the raw inclusive language vocabulary of a category."""
        filename = INCLUSIVE_LANGUAGE_FILES.get(category, f"inclusive_language_{category}.yaml")
        return self._load_yaml_file(filename)

    def get_inclusive_language_rules(self, category: str = 'disability') -> Tuple[Rule, ...]:
        """
        Get the validated rule table of a category.

        Raises:
            RuleTableError: If a rule in the vocabulary is malformed
        """
        filename = INCLUSIVE_LANGUAGE_FILES.get(category, f"inclusive_language_{category}.yaml")
        if filename not in self._rule_tables:
            self._rule_tables[filename] = build_rule_table(self._load_yaml_file(filename))
        return self._rule_tables[filename]


# === GLOBAL SERVICE INSTANCES ===

_inclusive_language_service: Optional[LanguageVocabularyService] = None


def get_inclusive_language_vocabulary() -> LanguageVocabularyService:
    """Get the inclusive language vocabulary service instance."""
    global _inclusive_language_service
    if _inclusive_language_service is None:
        _inclusive_language_service = LanguageVocabularyService()
    return _inclusive_language_service
