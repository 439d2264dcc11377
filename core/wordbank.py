"""Word bank loading and the built-in sample word list."""

import json
import logging

from .models import WordPair

logger = logging.getLogger(__name__)

# English to Turkish sample vocabulary, {front: back}.
# Several accepted Turkish answers are joined with '|'.
SAMPLE_WORDS = {
    'apple': 'elma',
    'book': 'kitap',
    'pen': 'kalem',
    'water': 'su',
    'bread': 'ekmek',
    'house': 'ev',
    'door': 'kapı',
    'window': 'pencere',
    'table': 'masa',
    'chair': 'sandalye',
    'car': 'araba',
    'road': 'yol',
    'city': 'şehir',
    'village': 'köy',
    'sea': 'deniz',
    'mountain': 'dağ',
    'tree': 'ağaç',
    'flower': 'çiçek',
    'dog': 'köpek',
    'cat': 'kedi',
    'bird': 'kuş',
    'fish': 'balık',
    'friend': 'arkadaş|dost',
    'teacher': 'öğretmen|hoca',
    'student': 'öğrenci',
    'school': 'okul',
    'island': 'ada',
    'light': 'ışık',
    'girl': 'kız',
    'sir': 'efendi|bey',
    'twice': 'iki kere|iki kez',
    'to go': 'gitmek',
    'to come': 'gelmek',
    'to read': 'okumak',
    'to write': 'yazmak',
    'beautiful': 'güzel|hoş',
    'big': 'büyük|iri',
    'small': 'küçük|ufak',
    'hot': 'sıcak',
    'cold': 'soğuk',
}


def sample_word_bank() -> list[WordPair]:
    """Return the built-in sample word list."""
    return [WordPair(front, back) for front, back in SAMPLE_WORDS.items()]


def parse_word_bank(records: list) -> list[WordPair]:
    """Build word pairs from raw records, skipping invalid ones.

    Records are dicts with front/back (or en/tr) string fields. A record
    whose back has no non-empty answer variant is skipped.
    """
    words = []
    for i, record in enumerate(records):
        if not isinstance(record, dict):
            logger.warning(f"Skipping word record {i}: not an object")
            continue
        try:
            pair = WordPair.from_dict(record)
        except ValueError as e:
            logger.warning(f"Skipping word record {i}: {e}")
            continue
        if not pair.is_valid():
            logger.warning(f"Skipping word record {i}: no accepted answer in {pair.back!r}")
            continue
        words.append(pair)
    return words


def load_word_bank(path: str) -> list[WordPair]:
    """Load a word bank from a JSON file holding a list of records."""
    with open(path, 'r', encoding='utf-8') as f:
        records = json.load(f)
    if not isinstance(records, list):
        raise ValueError(f"Word bank {path} must contain a JSON list")
    words = parse_word_bank(records)
    logger.info(f"Loaded {len(words)} words from {path}")
    return words
