"""
Configuration for Inclusive Language Assistant.
"""

import os
from dotenv import load_dotenv
from typing import Dict, Any, List

# Load environment variables (optional - only if .env file exists)
load_dotenv()


def _split_list(value: str) -> List[str]:
    return [item.strip() for item in value.split(',') if item.strip()]


class Config:
    """Application configuration."""

    TESTING = False

    # Logging Configuration
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # SpaCy model settings
    SPACY_MODEL = os.environ.get('SPACY_MODEL', 'en_core_web_sm')

    # Inclusive Language Configuration
    INCLUSIVE_LANGUAGE_VOCABULARY_DIR = os.environ.get('INCLUSIVE_LANGUAGE_VOCABULARY_DIR') or None
    INCLUSIVE_LANGUAGE_CATEGORY = os.environ.get('INCLUSIVE_LANGUAGE_CATEGORY', 'disability')
    INCLUSIVE_LANGUAGE_DISABLED_RULES = _split_list(os.environ.get('INCLUSIVE_LANGUAGE_DISABLED_RULES', ''))
    INCLUSIVE_LANGUAGE_MIN_SEVERITY = os.environ.get('INCLUSIVE_LANGUAGE_MIN_SEVERITY', 'potentially_non_inclusive')

    @classmethod
    def get_analysis_config(cls) -> Dict[str, Any]:
        """Get style analysis configuration."""
        return {
            'spacy_model': cls.SPACY_MODEL,
            'log_level': cls.LOG_LEVEL,
        }

    @classmethod
    def get_inclusive_language_config(cls) -> Dict[str, Any]:
        """Get inclusive language rule configuration."""
        return {
            'vocabulary_dir': cls.INCLUSIVE_LANGUAGE_VOCABULARY_DIR,
            'category': cls.INCLUSIVE_LANGUAGE_CATEGORY,
            'disabled_rules': list(cls.INCLUSIVE_LANGUAGE_DISABLED_RULES),
            'min_severity': cls.INCLUSIVE_LANGUAGE_MIN_SEVERITY,
        }


# For testing only
class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    LOG_LEVEL = 'DEBUG'
    INCLUSIVE_LANGUAGE_VOCABULARY_DIR = None
    INCLUSIVE_LANGUAGE_DISABLED_RULES = []
    INCLUSIVE_LANGUAGE_MIN_SEVERITY = 'potentially_non_inclusive'
