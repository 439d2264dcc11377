"""Utility functions for kelime."""

import unicodedata

# Turkish has two distinct I letters; the default Unicode lowering maps
# 'I' to 'i' and 'İ' to 'i' + combining dot, both wrong for Turkish.
_TURKISH_LOWER = str.maketrans({'I': 'ı', 'İ': 'i'})


def turkish_lower(text: str) -> str:
    """Lowercase text using Turkish casing rules for the dotted/dotless I."""
    # NFC folds 'I' + U+0307 into 'İ' so it lowers to 'i'
    return unicodedata.normalize('NFC', text).translate(_TURKISH_LOWER).lower()
