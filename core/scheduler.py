"""Working order of the word bank."""

import logging
import random

logger = logging.getLogger(__name__)


class Scheduler:
    """Keeps the quiz order as a permutation of word bank indices plus a cursor."""

    def __init__(self, words: list, rng: random.Random = None):
        self.words = words
        self.rng = rng or random.Random()
        self.order = []
        self.cursor = 0
        self.reshuffle()

    def __len__(self) -> int:
        return len(self.order)

    @property
    def is_empty(self) -> bool:
        return not self.order

    def current_index(self) -> int | None:
        """Word bank index under the cursor, or None for an empty bank."""
        if self.is_empty:
            return None
        return self.order[self.cursor]

    def current(self):
        """Word pair under the cursor, or None for an empty bank."""
        index = self.current_index()
        if index is None:
            return None
        return self.words[index]

    def advance(self) -> None:
        """Move the cursor to the next item, wrapping at the end."""
        if self.is_empty:
            return
        self.cursor = (self.cursor + 1) % len(self.order)

    def defer_to_end(self) -> None:
        """Move the current item to the back of the queue.

        The cursor value stays the same, so it now points at the item that
        followed the deferred one.
        """
        if self.is_empty:
            return
        index = self.order.pop(self.cursor)
        self.order.append(index)

    def reshuffle(self) -> None:
        """Replace the order with a fresh random permutation."""
        order = list(range(len(self.words)))
        self.rng.shuffle(order)
        self.order = order
        self.cursor = 0

    def is_valid_order(self, order) -> bool:
        """Check that order is a permutation of the word bank indices."""
        if not isinstance(order, list) or len(order) != len(self.words):
            return False
        return sorted(order) == list(range(len(self.words)))

    def restore(self, order: list, cursor: int) -> bool:
        """Restore a saved order and cursor.

        Falls back to a fresh shuffle and returns False if the order does
        not fit the current word bank. A cursor past the end is clamped.
        """
        if not self.is_valid_order(order):
            logger.info(f"Saved order does not match word bank of {len(self.words)} items, reshuffling")
            self.reshuffle()
            return False
        self.order = list(order)
        self.cursor = min(max(cursor, 0), max(len(self.order) - 1, 0))
        return True
