"""Answer normalization and matching."""

import re

from .config import ANSWER_DELIMITER, PUNCTUATION_CHARS
from .utils import turkish_lower

_PUNCTUATION_RE = re.compile('[' + re.escape(PUNCTUATION_CHARS) + ']')
_WHITESPACE_RE = re.compile(r'\s+')


def normalize(text: str) -> str:
    """Normalize an answer for comparison.

    Lowercases with Turkish rules, turns punctuation into spaces, collapses
    whitespace runs and trims the ends.
    """
    text = turkish_lower(text or '')
    text = _PUNCTUATION_RE.sub(' ', text)
    text = _WHITESPACE_RE.sub(' ', text)
    return text.strip()


def split_variants(truth: str) -> list[str]:
    """Split a truth string into its accepted variants."""
    return (truth or '').split(ANSWER_DELIMITER)


def matches_any(user_answer: str, variants: list[str]) -> bool:
    """Check an answer against a list of accepted variants.

    Variants that normalize to an empty string never match.
    """
    answer = normalize(user_answer)
    for variant in variants:
        option = normalize(variant)
        if option and answer == option:
            return True
    return False


def is_correct(user_answer: str, truth: str) -> bool:
    """Check an answer against a '|'-delimited truth string."""
    return matches_any(user_answer, split_variants(truth))
