"""
Exception Filters
Context predicates that decide whether a candidate span of a phrase match is kept.

Every filter takes the sentence words, the candidate (start, end) span and the
phrase list it checks against, and returns True when the span is kept.
"""
from typing import Callable, Dict, Iterable, Sequence

from .consecutive_words import Span, split_phrase, words_equal
from .types import FilterKind, FilterSpec


def is_preceded_by_exception(words: Sequence[str], span: Span, exceptions: Iterable[str]) -> bool:
    """Check whether the words right before the span equal one of the exceptions."""
    start = span[0]
    for exception in exceptions:
        exception_words = split_phrase(exception)
        if exception_words and words_equal(words, start - len(exception_words), exception_words):
            return True
    return False


def is_not_preceded_by_exception(words: Sequence[str], span: Span, exceptions: Iterable[str]) -> bool:
    return not is_preceded_by_exception(words, span, exceptions)


def is_followed_by_exception(words: Sequence[str], span: Span, exceptions: Iterable[str]) -> bool:
    """Check whether the words right after the span equal one of the exceptions."""
    end = span[1]
    for exception in exceptions:
        exception_words = split_phrase(exception)
        if exception_words and words_equal(words, end, exception_words):
            return True
    return False


def is_not_followed_by_exception(words: Sequence[str], span: Span, exceptions: Iterable[str]) -> bool:
    return not is_followed_by_exception(words, span, exceptions)


def is_not_followed_and_preceded_by_exception(words: Sequence[str], span: Span,
                                              preceding: Iterable[str],
                                              following: Iterable[str]) -> bool:
    """
    Reject the span only when it is both preceded by one of `preceding` and
    followed by one of `following`. Either half on its own keeps the span.
    """
    return not (
        is_preceded_by_exception(words, span, preceding)
        and is_followed_by_exception(words, span, following)
    )


def is_punctuation(word: str) -> bool:
    return bool(word) and not any(char.isalnum() for char in word)


def not_inclusive_when_standalone(words: Sequence[str], span: Span, continuations: Iterable[str]) -> bool:
    """
    Keep the span only when the phrase is used on its own as a noun phrase.

    That is the case when the phrase ends the sentence, is followed by
    punctuation, or is followed by one of the `continuations` (auxiliaries,
    conjunctions, prepositions). Anything else after the phrase, such as a
    noun ("the disabled community") or a relative clause, rejects it.
    """
    end = span[1]
    if end >= len(words):
        return True
    if is_punctuation(words[end]):
        return True
    return is_followed_by_exception(words, span, continuations)


def _preceded_by(words, span, spec: FilterSpec) -> bool:
    return is_preceded_by_exception(words, span, spec.phrases)


def _not_preceded_by(words, span, spec: FilterSpec) -> bool:
    return is_not_preceded_by_exception(words, span, spec.phrases)


def _not_followed_by(words, span, spec: FilterSpec) -> bool:
    return is_not_followed_by_exception(words, span, spec.phrases)


def _not_followed_and_preceded_by(words, span, spec: FilterSpec) -> bool:
    return is_not_followed_and_preceded_by_exception(words, span, spec.phrases, spec.following)


def _standalone(words, span, spec: FilterSpec) -> bool:
    return not_inclusive_when_standalone(words, span, spec.phrases)


FILTERS: Dict[FilterKind, Callable[[Sequence[str], Span, FilterSpec], bool]] = {
    FilterKind.NOT_PRECEDED_BY: _not_preceded_by,
    FilterKind.NOT_FOLLOWED_BY: _not_followed_by,
    FilterKind.PRECEDED_BY: _preceded_by,
    FilterKind.NOT_FOLLOWED_AND_PRECEDED_BY: _not_followed_and_preceded_by,
    FilterKind.STANDALONE: _standalone,
}


def apply_filter(spec: FilterSpec, words: Sequence[str], span: Span) -> bool:
    return FILTERS[spec.kind](words, span, spec)


def apply_filters(filters: Iterable[FilterSpec], words: Sequence[str], span: Span) -> bool:
    """A span survives when every filter keeps it. No filters keeps every span."""
    return all(apply_filter(spec, words, span) for spec in filters)
