from .models import WordPair, QuizMode, Phase, SessionState, Snapshot, SnapshotError, decode_snapshot
from .interfaces import StateStore
from .matcher import normalize, split_variants, matches_any, is_correct
from .hints import mask, syllabify, hint_view
from .scheduler import Scheduler
from .stats import StatsTracker
from .session import SessionController
from .wordbank import sample_word_bank, load_word_bank, parse_word_bank
from .utils import turkish_lower

__all__ = [
    'WordPair', 'QuizMode', 'Phase', 'SessionState', 'Snapshot', 'SnapshotError', 'decode_snapshot',
    'StateStore',
    'normalize', 'split_variants', 'matches_any', 'is_correct',
    'mask', 'syllabify', 'hint_view',
    'Scheduler', 'StatsTracker', 'SessionController',
    'sample_word_bank', 'load_word_bank', 'parse_word_bank',
    'turkish_lower'
]
