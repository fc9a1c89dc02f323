"""
Consecutive word matching over tokenized sentences.
"""
from typing import List, Sequence, Tuple, Union

Span = Tuple[int, int]


def split_phrase(phrase: Union[str, Sequence[str]]) -> List[str]:
    """Split a phrase into lowercase words. Sequences are taken as already split."""
    if isinstance(phrase, str):
        return [word for word in phrase.lower().split(" ") if word]
    return [word.lower() for word in phrase]


def words_equal(words: Sequence[str], start: int, phrase_words: Sequence[str]) -> bool:
    """Check whether `phrase_words` occur in `words` starting at `start`."""
    end = start + len(phrase_words)
    if start < 0 or end > len(words):
        return False
    return all(
        words[start + offset].lower() == phrase_word
        for offset, phrase_word in enumerate(phrase_words)
    )


def includes_consecutive_words(words: Sequence[str], phrase: Union[str, Sequence[str]]) -> List[Span]:
    """
    Find every occurrence of a phrase in a word sequence.

    Args:
        words: Tokenized sentence
        phrase: Phrase string (words separated by single spaces) or word list

    Returns:
        List of (start, end) spans in order of occurrence, `end` exclusive.
        Empty when the phrase does not occur or is empty.
    """
    phrase_words = split_phrase(phrase)
    if not phrase_words:
        return []

    length = len(phrase_words)
    return [
        (index, index + length)
        for index in range(len(words) - length + 1)
        if words_equal(words, index, phrase_words)
    ]
