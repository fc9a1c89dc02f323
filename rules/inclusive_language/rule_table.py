"""
Rule Table Builder
Builds immutable, validated inclusive language rules from a YAML vocabulary.

The table is validated once when it is built: authoring defects such as a
feedback template whose placeholders do not line up with the rule's
alternatives raise RuleTableError instead of surfacing during analysis.
"""
import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .feedback import placeholder_indices
from .phrase_lists import PHRASE_LISTS
from .types import FilterKind, FilterSpec, Rule, Severity

logger = logging.getLogger(__name__)


class RuleTableError(ValueError):
    """Raised when a rule definition in the table is malformed."""


def _as_tuple(value: Any) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(str(item) for item in value)


def _resolve_phrases(entry: Mapping[str, Any], inline_key: str, list_key: str,
                     phrase_lists: Mapping[str, Tuple[str, ...]], identifier: str) -> Tuple[str, ...]:
    phrases = _as_tuple(entry.get(inline_key))
    list_name = entry.get(list_key)
    if list_name is not None:
        if list_name not in phrase_lists:
            raise RuleTableError(f"Rule '{identifier}': unknown phrase list '{list_name}'")
        phrases = phrases + tuple(phrase_lists[list_name])
    return phrases


def build_filter(entry: Mapping[str, Any], identifier: str,
                 phrase_lists: Mapping[str, Tuple[str, ...]] = PHRASE_LISTS) -> FilterSpec:
    try:
        kind = FilterKind(entry.get('kind'))
    except ValueError:
        raise RuleTableError(f"Rule '{identifier}': unknown filter kind '{entry.get('kind')}'")

    phrases = _resolve_phrases(entry, 'phrases', 'phrase_list', phrase_lists, identifier)
    following = _resolve_phrases(entry, 'following', 'following_list', phrase_lists, identifier)

    if not phrases and kind is not FilterKind.STANDALONE:
        raise RuleTableError(f"Rule '{identifier}': filter '{kind.value}' has no phrases")
    if kind is FilterKind.NOT_FOLLOWED_AND_PRECEDED_BY and not following:
        raise RuleTableError(f"Rule '{identifier}': filter '{kind.value}' needs following phrases")

    return FilterSpec(kind=kind, phrases=phrases, following=following)


def validate_template(identifier: str, template: str, alternatives: Tuple[str, ...]) -> None:
    """
    Check that a template's placeholders match the rule's alternatives.

    %1$s (the matched phrase) is optional. Every other placeholder must refer to
    an alternative, and every alternative must be referred to.
    """
    expected = set(range(2, len(alternatives) + 2))
    used = placeholder_indices(template) - {1}
    if used != expected:
        raise RuleTableError(
            f"Rule '{identifier}': feedback placeholders {sorted(used)} do not match "
            f"{len(alternatives)} alternative(s)"
        )


def build_rule(entry: Mapping[str, Any], templates: Mapping[str, str], category: str, help_url: str,
               phrase_lists: Mapping[str, Tuple[str, ...]] = PHRASE_LISTS) -> Rule:
    identifier = str(entry.get('identifier') or '').strip()
    if not identifier:
        raise RuleTableError(f"Rule without identifier: {dict(entry)}")

    phrases = tuple(phrase.lower() for phrase in _as_tuple(entry.get('phrases')) if phrase.strip())
    if not phrases:
        raise RuleTableError(f"Rule '{identifier}': no non-inclusive phrases")

    alternatives = _as_tuple(entry.get('alternatives'))
    if not alternatives:
        raise RuleTableError(f"Rule '{identifier}': no inclusive alternatives")

    try:
        severity = Severity(entry.get('severity'))
    except ValueError:
        raise RuleTableError(f"Rule '{identifier}': unknown severity '{entry.get('severity')}'")

    if 'feedback_format' in entry:
        template = str(entry['feedback_format'])
    else:
        template_name = entry.get('feedback')
        if template_name not in templates:
            raise RuleTableError(f"Rule '{identifier}': unknown feedback template '{template_name}'")
        template = templates[template_name]
    validate_template(identifier, template, alternatives)

    filters = tuple(
        build_filter(filter_entry, identifier, phrase_lists)
        for filter_entry in entry.get('filters') or []
    )

    return Rule(
        identifier=identifier,
        non_inclusive_phrases=phrases,
        inclusive_alternatives=alternatives,
        severity=severity,
        feedback_template=template,
        filters=filters,
        category=str(entry.get('category', category)),
        help_url=str(entry.get('learn_more_url', help_url)),
    )


def build_rule_table(vocabulary: Dict[str, Any],
                     phrase_lists: Optional[Mapping[str, Tuple[str, ...]]] = None) -> Tuple[Rule, ...]:
    """
    Build the rule table from a parsed vocabulary file.

    Args:
        vocabulary: Parsed YAML with `category`, `learn_more_url`,
            `feedback_templates` and `rules`
        phrase_lists: Named phrase lists filters may refer to

    Returns:
        Rules in declaration order.
    """
    if not vocabulary:
        return ()

    phrase_lists = PHRASE_LISTS if phrase_lists is None else phrase_lists
    category = str(vocabulary.get('category', ''))
    help_url = str(vocabulary.get('learn_more_url', ''))
    templates = vocabulary.get('feedback_templates') or {}

    rules: List[Rule] = []
    seen = set()
    for entry in vocabulary.get('rules') or []:
        if not isinstance(entry, Mapping):
            raise RuleTableError(f"Rule entry is not a mapping: {entry!r}")
        rule = build_rule(entry, templates, category, help_url, phrase_lists)
        if rule.identifier in seen:
            raise RuleTableError(f"Duplicate rule identifier '{rule.identifier}'")
        seen.add(rule.identifier)
        rules.append(rule)

    logger.debug("Built %d inclusive language rules for category '%s'", len(rules), category)
    return tuple(rules)
