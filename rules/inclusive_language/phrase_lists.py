"""
Shared phrase lists referenced by name from the inclusive language rule table.

Contractions appear both joined ("isn't") and split the way spaCy tokenizes
them ("is n't", "'m").
"""
from typing import Dict, List, Sequence, Tuple

INTENSIFIERS = [
    "so", "very", "that", "too", "really", "all that", "particularly",
    "especially", "quite", "totally", "super",
]

FORMS_OF_TO_BE = [
    "am", "is", "are", "was", "were", "be", "being", "been",
    "'m", "'re", "'s",
    "i'm", "you're", "we're", "they're", "he's", "she's", "it's", "that's",
]

_NEGATED_CONTRACTIONS = ["isn't", "aren't", "wasn't", "weren't", "ain't"]
_SPLIT_NEGATED_CONTRACTIONS = ["is n't", "are n't", "was n't", "were n't", "ai n't"]

FORMS_OF_TO_BE_NOT = (
    [f"{form} not" for form in ["am", "is", "are", "was", "were", "'m", "'re", "'s",
                                "i'm", "you're", "we're", "they're", "he's", "she's", "it's", "that's"]]
    + ["not be", "not being", "not been", "n't been", "never been"]
    + _NEGATED_CONTRACTIONS
    + _SPLIT_NEGATED_CONTRACTIONS
)

FORMS_OF_TO_GET = ["get", "gets", "got", "getting", "gotten"]

FORMS_OF_TO_GO = ["go", "goes", "going", "gone", "went"]

FORMS_OF_TO_DRIVE = ["drive", "drives", "driving", "drove", "driven"]

OBJECT_PRONOUNS = [
    "me", "you", "him", "her", "it", "us", "them",
    "everyone", "everybody", "someone", "somebody", "people",
]

STANDALONE_CONTINUATIONS = [
    # auxiliaries and copulas
    "is", "are", "was", "were", "be", "been", "being", "am",
    "have", "has", "had", "do", "does", "did",
    "can", "could", "will", "would", "shall", "should", "may", "might", "must",
    "'re", "'ve", "'ll", "'d", "'s",
    # conjunctions
    "and", "or", "but", "nor", "yet",
    # prepositions
    "in", "on", "at", "of", "for", "with", "from", "to", "by", "as", "into",
    "about", "among", "around", "across", "through", "during", "without",
    "within", "like", "than", "against", "under",
    # adverbs that commonly follow a subject
    "also", "often", "still", "always", "never", "too",
]


def with_optional_intensifier(forms: Sequence[str]) -> List[str]:
    """Return every form, on its own and followed by each intensifier."""
    return list(forms) + [f"{form} {intensifier}" for form in forms for intensifier in INTENSIFIERS]


def combine(first: Sequence[str], second: Sequence[str]) -> List[str]:
    return [f"{a} {b}" for a in first for b in second]


FORMS_OF_TO_BE_WITH_OPTIONAL_INTENSIFIER = with_optional_intensifier(FORMS_OF_TO_BE)
FORMS_OF_TO_BE_NOT_WITH_OPTIONAL_INTENSIFIER = with_optional_intensifier(FORMS_OF_TO_BE_NOT)
FORMS_OF_TO_BE_AND_TO_BE_NOT_WITH_OPTIONAL_INTENSIFIER = with_optional_intensifier(
    FORMS_OF_TO_BE + FORMS_OF_TO_BE_NOT + FORMS_OF_TO_GET
)
COMBINATIONS_OF_DRIVE_AND_OBJECT_PRONOUN = combine(FORMS_OF_TO_DRIVE, OBJECT_PRONOUNS)

# "crazy" is targeted by more specific rules in these constructions
SHOULD_NOT_PRECEDE_STANDALONE_CRAZY = FORMS_OF_TO_GO + COMBINATIONS_OF_DRIVE_AND_OBJECT_PRONOUN
SHOULD_NOT_FOLLOW_STANDALONE_CRAZY = ["in love"]
SHOULD_NOT_PRECEDE_STANDALONE_CRAZY_WHEN_FOLLOWED_BY_ABOUT = (
    FORMS_OF_TO_BE_WITH_OPTIONAL_INTENSIFIER + FORMS_OF_TO_BE_NOT_WITH_OPTIONAL_INTENSIFIER
)
SHOULD_NOT_FOLLOW_STANDALONE_CRAZY_WHEN_PRECEDED_BY_TO_BE = ["about"]


PHRASE_LISTS: Dict[str, Tuple[str, ...]] = {
    name: tuple(phrases) for name, phrases in {
        'intensifiers': INTENSIFIERS,
        'forms_of_to_be': FORMS_OF_TO_BE,
        'forms_of_to_be_not': FORMS_OF_TO_BE_NOT,
        'forms_of_to_go': FORMS_OF_TO_GO,
        'forms_of_to_be_with_optional_intensifier': FORMS_OF_TO_BE_WITH_OPTIONAL_INTENSIFIER,
        'forms_of_to_be_not_with_optional_intensifier': FORMS_OF_TO_BE_NOT_WITH_OPTIONAL_INTENSIFIER,
        'forms_of_to_be_and_to_be_not_with_optional_intensifier': FORMS_OF_TO_BE_AND_TO_BE_NOT_WITH_OPTIONAL_INTENSIFIER,
        'combinations_of_drive_and_object_pronoun': COMBINATIONS_OF_DRIVE_AND_OBJECT_PRONOUN,
        'should_not_precede_standalone_crazy': SHOULD_NOT_PRECEDE_STANDALONE_CRAZY,
        'should_not_follow_standalone_crazy': SHOULD_NOT_FOLLOW_STANDALONE_CRAZY,
        'should_not_precede_standalone_crazy_when_followed_by_about': SHOULD_NOT_PRECEDE_STANDALONE_CRAZY_WHEN_FOLLOWED_BY_ABOUT,
        'should_not_follow_standalone_crazy_when_preceded_by_to_be': SHOULD_NOT_FOLLOW_STANDALONE_CRAZY_WHEN_PRECEDED_BY_TO_BE,
        'standalone_continuations': STANDALONE_CONTINUATIONS,
    }.items()
}
