"""Quiz session lifecycle."""

import logging
import random

from .hints import hint_view
from .interfaces import StateStore
from .matcher import matches_any
from .models import SessionState, QuizMode, Phase, WordPair, SnapshotError, decode_snapshot

logger = logging.getLogger(__name__)


class SessionController:
    """Drives a quiz over a fixed word bank.

    Every operation runs to completion, saves the session through the
    store and returns the updated view. Operations that do not apply in
    the current phase, or on an empty word bank, leave the state alone.
    """

    def __init__(self, words: list[WordPair], store: StateStore = None,
                 rng: random.Random = None):
        self.words = list(words)
        self.store = store
        self.state = SessionState(self.words, rng)
        self._listeners = []

    @property
    def has_items(self) -> bool:
        return bool(self.words)

    @property
    def phase(self) -> Phase:
        return self.state.phase

    def add_listener(self, callback) -> None:
        """Register a callable invoked with the view after each change."""
        self._listeners.append(callback)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def load(self) -> bool:
        """Restore the saved session. Returns True if a snapshot was used.

        A missing, unreadable or malformed snapshot leaves a fresh session.
        """
        if self.store is None or not self.has_items:
            return False
        try:
            blob = self.store.load()
        except Exception as e:
            logger.warning(f"Could not load saved session: {e}")
            self.state.reset()
            return False
        if not blob:
            return False
        try:
            snapshot = decode_snapshot(blob, len(self.words))
        except SnapshotError as e:
            logger.warning(f"Discarding saved session: {e}")
            self.state.reset()
            return False
        self.state.apply_snapshot(snapshot)
        logger.info(f"Restored session at {self.state.scheduler.cursor + 1}/{len(self.words)}")
        self._notify()
        return True

    def save(self) -> bool:
        """Save the session. A failing store is logged and ignored."""
        if self.store is None:
            return False
        try:
            self.store.save(self.state.encode())
            return True
        except Exception as e:
            logger.warning(f"Could not save session: {e}")
            return False

    def _changed(self) -> dict:
        self.save()
        return self._notify()

    def _notify(self) -> dict:
        view = self.view()
        for callback in self._listeners:
            callback(view)
        return view

    # ------------------------------------------------------------------
    # Current question
    # ------------------------------------------------------------------

    def current_pair(self) -> WordPair | None:
        return self.state.current_pair()

    def prompt(self) -> str | None:
        pair = self.current_pair()
        return pair.prompt(self.state.mode) if pair else None

    def answer_text(self) -> str | None:
        pair = self.current_pair()
        return pair.answer_text(self.state.mode) if pair else None

    def hints(self) -> dict:
        answer = self.answer_text()
        if answer is None:
            return {}
        return hint_view(answer, self.state.hint_level)

    def view(self) -> dict:
        """Read-only summary of the session for the presentation layer."""
        state = self.state
        total = state.total
        return {
            'has_items': self.has_items,
            'total': total,
            'position': state.scheduler.cursor,
            'mode': state.mode.value,
            'phase': state.phase.value,
            'prompt': self.prompt(),
            'answer': self.answer_text() if state.revealed else None,
            'hints': self.hints(),
            'hint_level': state.hint_level,
            'stats': state.stats.to_dict(),
            'remaining': state.stats.remaining(total),
            'progress_percent': state.stats.progress_percent(total),
            'last_outcome': state.last_outcome
        }

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def submit(self, answer: str) -> dict:
        """Judge an answer for the current item.

        A correct answer moves on to the next item; a wrong one reveals the
        answer and waits for next().
        """
        if not self.has_items or self.state.revealed:
            return self.view()
        if not answer or not answer.strip():
            return self.view()
        pair = self.current_pair()
        if matches_any(answer, pair.accepted_answers(self.state.mode)):
            self.state.stats.record_correct()
            self.state.scheduler.advance()
            self.state.reset_question()
            self.state.last_outcome = 'correct'
        else:
            self.state.stats.record_wrong()
            self.state.phase = Phase.REVEALED
            self.state.last_outcome = 'wrong'
        return self._changed()

    def pass_item(self) -> dict:
        """Send the current item to the back of the queue."""
        if not self.has_items or self.state.revealed:
            return self.view()
        self.state.stats.record_passed()
        self.state.scheduler.defer_to_end()
        self.state.reset_question()
        self.state.last_outcome = 'passed'
        return self._changed()

    def reveal(self) -> dict:
        """Show the answer without counting a guess."""
        if not self.has_items or self.state.revealed:
            return self.view()
        self.state.phase = Phase.REVEALED
        self.state.last_outcome = 'revealed'
        return self._changed()

    def request_hint(self) -> dict:
        """Disclose one more character of the answer."""
        if not self.has_items or self.state.revealed:
            return self.view()
        self.state.hint_level += 1
        return self._changed()

    def next(self) -> dict:
        """Move on after the answer has been revealed."""
        if not self.has_items or not self.state.revealed:
            return self.view()
        self.state.scheduler.advance()
        self.state.reset_question()
        return self._changed()

    def set_mode(self, mode: QuizMode) -> dict:
        """Switch the question direction."""
        if not self.has_items:
            return self.view()
        self.state.mode = QuizMode(mode)
        self.state.reset_question()
        return self._changed()

    def toggle_mode(self) -> dict:
        return self.set_mode(self.state.mode.toggled())

    def reshuffle(self) -> dict:
        """Shuffle the order and start from the first item. Counters are kept."""
        if not self.has_items:
            return self.view()
        self.state.scheduler.reshuffle()
        self.state.reset_question()
        return self._changed()

    def reset_progress(self) -> dict:
        """Start over with a new order and zeroed counters.

        The caller is responsible for confirming this with the user.
        """
        if not self.has_items:
            return self.view()
        self.state.reset()
        if self.store is not None:
            try:
                self.store.clear()
            except Exception as e:
                logger.warning(f"Could not clear saved session: {e}")
        logger.info("Progress reset")
        return self._notify()
