"""Domain models for kelime."""

import random
from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, Field, ValidationError

from .config import SNAPSHOT_VERSION, DEFAULT_MODE
from .matcher import split_variants
from .scheduler import Scheduler
from .stats import StatsTracker


class SnapshotError(ValueError):
    """Raised when a saved session snapshot cannot be used."""


class QuizMode(str, Enum):
    """Which side of a word pair is asked."""

    FRONT_TO_BACK = 'front_to_back'
    BACK_TO_FRONT = 'back_to_front'

    def toggled(self) -> 'QuizMode':
        if self is QuizMode.FRONT_TO_BACK:
            return QuizMode.BACK_TO_FRONT
        return QuizMode.FRONT_TO_BACK


class Phase(str, Enum):
    """Where the current question is in its lifecycle."""

    ANSWERING = 'answering'
    REVEALED = 'revealed'


@dataclass(frozen=True)
class WordPair:
    """A prompt/answer record from the word bank.

    back holds one or more accepted answers joined by '|'.
    """

    front: str
    back: str

    def variants(self) -> list[str]:
        return split_variants(self.back)

    def prompt(self, mode: QuizMode) -> str:
        if mode is QuizMode.BACK_TO_FRONT:
            return self.variants()[0]
        return self.front

    def answer_text(self, mode: QuizMode) -> str:
        """The answer as shown to the user when revealed."""
        if mode is QuizMode.BACK_TO_FRONT:
            return self.front
        return self.back

    def accepted_answers(self, mode: QuizMode) -> list[str]:
        # front is a single answer, never delimiter-split
        if mode is QuizMode.BACK_TO_FRONT:
            return [self.front]
        return self.variants()

    def is_valid(self) -> bool:
        return any(v.strip() for v in self.variants())

    @classmethod
    def from_dict(cls, data: dict) -> 'WordPair':
        # Older word lists use 'en'/'tr' keys
        front = data.get('front', data.get('en'))
        back = data.get('back', data.get('tr'))
        if not isinstance(front, str) or not isinstance(back, str):
            raise ValueError(f"Word record needs string front/back fields: {data!r}")
        return cls(front, back)


class StatsSnapshot(BaseModel):
    correct: int = Field(default=0, ge=0)
    wrong: int = Field(default=0, ge=0)
    passed: int = Field(default=0, ge=0)


class Snapshot(BaseModel):
    """Persisted form of a session."""

    version: int = SNAPSHOT_VERSION
    order: list[int]
    cursor: int = Field(default=0, ge=0)
    stats: StatsSnapshot = Field(default_factory=StatsSnapshot)
    mode: QuizMode = QuizMode(DEFAULT_MODE)
    hint_level: int = Field(default=0, ge=0)


def decode_snapshot(blob: str, bank_size: int) -> Snapshot:
    """Parse and validate a saved blob against the current word bank size."""
    try:
        snapshot = Snapshot.model_validate_json(blob)
    except ValidationError as e:
        raise SnapshotError(f"Malformed snapshot: {e.error_count()} validation error(s)") from e
    if snapshot.version != SNAPSHOT_VERSION:
        raise SnapshotError(
            f"Snapshot version {snapshot.version} is not supported (expected {SNAPSHOT_VERSION})"
        )
    if len(snapshot.order) != bank_size:
        raise SnapshotError(
            f"Snapshot order has {len(snapshot.order)} items, word bank has {bank_size}"
        )
    if sorted(snapshot.order) != list(range(bank_size)):
        raise SnapshotError("Snapshot order is not a permutation of the word bank")
    return snapshot


class SessionState:
    """Live quiz state owned by a SessionController."""

    def __init__(self, words: list[WordPair], rng: random.Random = None,
                 mode: QuizMode = None):
        self.words = words
        self.scheduler = Scheduler(words, rng)
        self.stats = StatsTracker()
        self.mode = mode or QuizMode(DEFAULT_MODE)
        self.hint_level = 0
        self.phase = Phase.ANSWERING
        self.last_outcome = None

    @property
    def total(self) -> int:
        return len(self.words)

    @property
    def revealed(self) -> bool:
        return self.phase is Phase.REVEALED

    def current_pair(self) -> WordPair | None:
        return self.scheduler.current()

    def reset_question(self) -> None:
        """Clear per-question state when the current item changes."""
        self.hint_level = 0
        self.phase = Phase.ANSWERING

    def to_snapshot(self) -> Snapshot:
        return Snapshot(
            order=list(self.scheduler.order),
            cursor=self.scheduler.cursor,
            stats=StatsSnapshot(**self.stats.to_dict()),
            mode=self.mode,
            hint_level=self.hint_level
        )

    def encode(self) -> str:
        return self.to_snapshot().model_dump_json()

    def apply_snapshot(self, snapshot: Snapshot) -> None:
        """Load a validated snapshot into this state."""
        self.scheduler.restore(snapshot.order, snapshot.cursor)
        self.stats = StatsTracker.from_dict(snapshot.stats.model_dump())
        self.mode = snapshot.mode
        self.hint_level = snapshot.hint_level
        self.phase = Phase.ANSWERING
        self.last_outcome = None

    def reset(self) -> None:
        """Fresh permutation and zeroed counters. Mode is kept."""
        self.scheduler.reshuffle()
        self.stats.reset()
        self.reset_question()
        self.last_outcome = None
