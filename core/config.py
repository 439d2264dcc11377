"""Configuration constants for kelime."""

# Answers
ANSWER_DELIMITER = '|'
PUNCTUATION_CHARS = '.,/#!$%^&*;:{}=-_`~()\'"'

# Hints
MASK_CHAR = '.'
VOWELS = 'aeiouy'
MASK_HINT_LEVEL = 1       # Hint level at which the masked answer is shown
SYLLABLE_HINT_LEVEL = 2   # Hint level at which the hyphenated answer is shown

# Persistence
STORAGE_KEY = 'kelime_quiz_state_v2'
SNAPSHOT_VERSION = 2

# Session
DEFAULT_MODE = 'front_to_back'
