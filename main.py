"""Inclusive Language Assistant - Entry Point"""

import os
import sys
import json
import logging
import argparse
from pathlib import Path
from typing import List

import spacy

from config import Config
from rules.language_and_grammar.inclusive_language_rule import InclusiveLanguageRule
from rules.language_and_grammar.services.language_vocabulary_service import LanguageVocabularyService

LOG_LEVEL = os.getenv('LOG_LEVEL', Config.LOG_LEVEL).upper()

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stderr)]
)
logger = logging.getLogger(__name__)


def load_nlp(model_name: str):
    """Load the configured spaCy model, or a blank English pipeline with a sentencizer."""
    try:
        return spacy.load(model_name)
    except OSError:
        logger.warning(f"SpaCy model '{model_name}' not installed, using blank English pipeline")
        nlp = spacy.blank("en")
        nlp.add_pipe("sentencizer")
        return nlp


def create_rule(config=Config) -> InclusiveLanguageRule:
    settings = config.get_inclusive_language_config()
    return InclusiveLanguageRule(
        vocabulary_service=LanguageVocabularyService(settings['vocabulary_dir']),
        category=settings['category'],
        disabled_rules=settings['disabled_rules'],
        min_severity=settings['min_severity'],
    )


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Check text files for non-inclusive language.")
    p.add_argument("files", nargs="+", type=Path, help="Text files to analyze.")
    p.add_argument("--json", action="store_true", help="Print findings as JSON.")
    return p.parse_args(argv)


def format_error(error: dict) -> str:
    start, end = error['span']
    return f"  [{error['severity']}] {start}-{end} '{error['flagged_text']}': {error['message']}"


def main(argv=None) -> int:
    args = parse_args(argv)

    nlp = load_nlp(Config.get_analysis_config()['spacy_model'])
    rule = create_rule()

    report = {}
    read_errors = {}
    has_non_inclusive = False
    for path in args.files:
        try:
            text = path.read_text(encoding='utf-8')
        except OSError as e:
            logger.error(f"Could not read {path}: {e}")
            read_errors[str(path)] = str(e)
            continue

        errors: List[dict] = rule.analyze(text, [], nlp=nlp, context={'block_type': 'paragraph'})
        report[str(path)] = errors
        has_non_inclusive = has_non_inclusive or any(e['severity'] == 'high' for e in errors)
        logger.info(f"{path}: {len(errors)} finding(s)")

    if args.json:
        print(json.dumps({'files': report, 'read_errors': read_errors}, indent=2))
    else:
        for path, errors in report.items():
            print(f"{path}: {len(errors)} finding(s)")
            for error in errors:
                print(format_error(error))
        for path, message in read_errors.items():
            print(f"{path}: could not be read ({message})")

    if read_errors:
        return 2
    return 1 if has_non_inclusive else 0


if __name__ == '__main__':
    sys.exit(main())
