"""
Feedback template rendering.

Templates use positional placeholders: %1$s is the matched phrase, %2$s the
first inclusive alternative and %3$s the second one.
"""
import re
from typing import Iterable, Set

PLACEHOLDER_PATTERN = re.compile(r"%(\d+)\$s")
MARKUP_PATTERN = re.compile(r"<[^>]+>")


def placeholder_indices(template: str) -> Set[int]:
    return {int(number) for number in PLACEHOLDER_PATTERN.findall(template)}


def render_feedback(template: str, matched_phrase: str, alternatives: Iterable[str]) -> str:
    values = [matched_phrase] + list(alternatives)

    def substitute(placeholder):
        position = int(placeholder.group(1)) - 1
        if 0 <= position < len(values):
            return values[position]
        return placeholder.group(0)

    return PLACEHOLDER_PATTERN.sub(substitute, template)


def strip_markup(text: str) -> str:
    """Remove HTML tags such as the <i> emphasis used in feedback strings."""
    return MARKUP_PATTERN.sub("", text)
