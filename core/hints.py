"""Progressive hints for the current answer.

Both helpers are display-only and never touch session state.
"""

import re

from .config import MASK_CHAR, VOWELS, MASK_HINT_LEVEL, SYLLABLE_HINT_LEVEL

_VOWEL_RE = re.compile(f'([{VOWELS}])', re.IGNORECASE)


def mask(truth: str, revealed_count: int) -> str:
    """Mask all but the first revealed_count characters of truth.

    Spaces are always shown so word boundaries stay visible.
    """
    if not truth:
        return ''
    return ''.join(
        ch if i < revealed_count or ch == ' ' else MASK_CHAR
        for i, ch in enumerate(truth)
    )


def syllabify(truth: str) -> str:
    """Approximate syllables by putting a hyphen after every vowel.

    This is a rough heuristic, not real hyphenation.
    """
    if not truth:
        return ''
    return re.sub(r'-$', '', _VOWEL_RE.sub(r'\1-', truth))


def hint_view(truth: str, level: int) -> dict:
    """Build the hints shown for a given hint level."""
    hints = {}
    if level >= MASK_HINT_LEVEL:
        hints['mask'] = mask(truth, level)
    if level >= SYLLABLE_HINT_LEVEL:
        hints['syllables'] = syllabify(truth)
    return hints
