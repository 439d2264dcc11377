"""Unit tests for the quiz session controller."""

import json
import random
import unittest

from core.interfaces import StateStore
from core.models import WordPair, QuizMode, Phase
from core.session import SessionController


# ============================================================================
# Mock Implementations
# ============================================================================

class MockStateStore(StateStore):
    """In-memory state store for testing."""

    def __init__(self, blob: str = None):
        self.blob = blob
        self.save_calls = []
        self.clear_calls = 0
        self.fail_load = False
        self.fail_save = False
        self.fail_clear = False

    def load(self) -> str | None:
        if self.fail_load:
            raise IOError("storage unavailable")
        return self.blob

    def save(self, blob: str) -> None:
        if self.fail_save:
            raise IOError("storage unavailable")
        self.save_calls.append(blob)
        self.blob = blob

    def clear(self) -> None:
        self.clear_calls += 1
        if self.fail_clear:
            raise IOError("storage unavailable")
        self.blob = None


WORDS = [
    WordPair('apple', 'elma'),
    WordPair('book', 'kitap'),
    WordPair('friend', 'arkadaş|dost'),
    WordPair('light', 'ışık'),
]


def make_controller(words=None, store=None, seed=0) -> SessionController:
    return SessionController(WORDS if words is None else words, store, random.Random(seed))


# ============================================================================
# Test Cases
# ============================================================================

class TestSubmit(unittest.TestCase):
    """Tests for answering questions."""

    def setUp(self):
        self.store = MockStateStore()
        self.controller = make_controller(store=self.store)

    def test_correct_answer_advances(self):
        pair = self.controller.current_pair()
        view = self.controller.submit(pair.variants()[0])
        self.assertEqual(view['stats'], {'correct': 1, 'wrong': 0, 'passed': 0})
        self.assertEqual(view['position'], 1)
        self.assertEqual(view['phase'], 'answering')
        self.assertEqual(view['last_outcome'], 'correct')
        self.assertIsNone(view['answer'])
        self.assertEqual(len(self.store.save_calls), 1)

    def test_wrong_answer_reveals(self):
        pair = self.controller.current_pair()
        view = self.controller.submit('zzz')
        self.assertEqual(view['stats'], {'correct': 0, 'wrong': 1, 'passed': 0})
        self.assertEqual(view['position'], 0)
        self.assertEqual(view['phase'], 'revealed')
        self.assertEqual(view['answer'], pair.back)
        self.assertEqual(view['last_outcome'], 'wrong')

    def test_no_resubmission_while_revealed(self):
        self.controller.submit('zzz')
        pair = self.controller.current_pair()
        view = self.controller.submit(pair.variants()[0])
        self.assertEqual(view['stats'], {'correct': 0, 'wrong': 1, 'passed': 0})
        self.assertEqual(view['phase'], 'revealed')

    def test_blank_answer_is_ignored(self):
        for answer in ('', '   ', None):
            view = self.controller.submit(answer)
        self.assertEqual(view['stats'], {'correct': 0, 'wrong': 0, 'passed': 0})
        self.assertEqual(view['phase'], 'answering')
        self.assertEqual(self.store.save_calls, [])

    def test_turkish_casing(self):
        controller = make_controller(words=[WordPair('light', 'ışık')])
        view = controller.submit('IŞIK')
        self.assertEqual(view['stats']['correct'], 1)


class TestPassRevealHint(unittest.TestCase):
    """Tests for pass, reveal, hint and next."""

    def setUp(self):
        self.controller = make_controller()
        self.controller.state.scheduler.order = [0, 1, 2, 3]

    def test_pass_defers_item(self):
        view = self.controller.pass_item()
        self.assertEqual(view['stats']['passed'], 1)
        self.assertEqual(self.controller.state.scheduler.order, [1, 2, 3, 0])
        self.assertEqual(view['prompt'], 'book')
        self.assertEqual(view['last_outcome'], 'passed')

    def test_pass_resets_hint(self):
        self.controller.request_hint()
        view = self.controller.pass_item()
        self.assertEqual(view['hint_level'], 0)
        self.assertEqual(view['hints'], {})

    def test_correct_answer_resets_hint(self):
        self.controller.request_hint()
        view = self.controller.submit('elma')
        self.assertEqual(view['last_outcome'], 'correct')
        self.assertEqual(view['hint_level'], 0)
        self.assertEqual(view['hints'], {})

    def test_pass_ignored_while_revealed(self):
        self.controller.reveal()
        view = self.controller.pass_item()
        self.assertEqual(view['stats']['passed'], 0)
        self.assertEqual(self.controller.state.scheduler.order, [0, 1, 2, 3])

    def test_reveal_keeps_stats(self):
        view = self.controller.reveal()
        self.assertEqual(view['phase'], 'revealed')
        self.assertEqual(view['answer'], 'elma')
        self.assertEqual(view['stats'], {'correct': 0, 'wrong': 0, 'passed': 0})

    def test_hints_grow(self):
        view = self.controller.request_hint()
        self.assertEqual(view['hints'], {'mask': 'e...'})
        view = self.controller.request_hint()
        self.assertEqual(view['hints'], {'mask': 'el..', 'syllables': 'e-lma'})

    def test_hint_beyond_length(self):
        for _ in range(10):
            view = self.controller.request_hint()
        self.assertEqual(view['hint_level'], 10)
        self.assertEqual(view['hints']['mask'], 'elma')

    def test_hint_ignored_after_reveal(self):
        self.controller.reveal()
        view = self.controller.request_hint()
        self.assertEqual(view['hint_level'], 0)

    def test_next_only_from_revealed(self):
        view = self.controller.next()
        self.assertEqual(view['position'], 0)
        self.controller.request_hint()
        self.controller.reveal()
        view = self.controller.next()
        self.assertEqual(view['position'], 1)
        self.assertEqual(view['phase'], 'answering')
        self.assertEqual(view['hint_level'], 0)

    def test_next_wraps(self):
        self.controller.state.scheduler.cursor = 3
        self.controller.reveal()
        view = self.controller.next()
        self.assertEqual(view['position'], 0)

    def test_pass_then_answer_counts_twice(self):
        # Counters are not a partition of the word bank: a passed item that
        # is answered later is counted in both buckets.
        controller = make_controller(words=WORDS[:2])
        controller.state.scheduler.order = [0, 1]
        controller.pass_item()
        controller.submit('kitap')
        view = controller.submit('elma')
        self.assertEqual(view['stats'], {'correct': 2, 'wrong': 0, 'passed': 1})
        self.assertEqual(view['remaining'], 0)
        self.assertEqual(view['progress_percent'], 100)


class TestModeAndShuffle(unittest.TestCase):
    """Tests for mode switching, reshuffling and reset."""

    def setUp(self):
        self.store = MockStateStore()
        self.controller = make_controller(store=self.store)
        self.controller.state.scheduler.order = [2, 0, 1, 3]

    def test_back_to_front(self):
        view = self.controller.set_mode(QuizMode.BACK_TO_FRONT)
        self.assertEqual(view['mode'], 'back_to_front')
        self.assertEqual(view['prompt'], 'arkadaş')
        view = self.controller.submit('Friend')
        self.assertEqual(view['stats']['correct'], 1)

    def test_back_to_front_shows_front_when_revealed(self):
        self.controller.set_mode(QuizMode.BACK_TO_FRONT)
        view = self.controller.reveal()
        self.assertEqual(view['answer'], 'friend')

    def test_set_mode_accepts_value(self):
        view = self.controller.set_mode('back_to_front')
        self.assertEqual(view['mode'], 'back_to_front')

    def test_mode_switch_resets_question(self):
        self.controller.request_hint()
        self.controller.submit('wrong')
        view = self.controller.toggle_mode()
        self.assertEqual(view['phase'], 'answering')
        self.assertEqual(view['hint_level'], 0)
        self.assertEqual(view['mode'], 'back_to_front')

    def test_reshuffle_keeps_stats(self):
        self.controller.pass_item()
        self.controller.state.scheduler.cursor = 2
        self.controller.reveal()
        view = self.controller.reshuffle()
        self.assertEqual(view['position'], 0)
        self.assertEqual(view['phase'], 'answering')
        self.assertEqual(view['stats']['passed'], 1)
        self.assertEqual(sorted(self.controller.state.scheduler.order), [0, 1, 2, 3])

    def test_reset_progress(self):
        self.controller.submit('zzz')
        self.controller.next()
        self.controller.pass_item()
        view = self.controller.reset_progress()
        self.assertEqual(view['stats'], {'correct': 0, 'wrong': 0, 'passed': 0})
        self.assertEqual(view['position'], 0)
        self.assertEqual(view['phase'], 'answering')
        self.assertEqual(sorted(self.controller.state.scheduler.order), [0, 1, 2, 3])
        self.assertEqual(self.store.clear_calls, 1)
        self.assertIsNone(self.store.blob)

    def test_reset_survives_clear_failure(self):
        self.controller.pass_item()
        self.store.fail_clear = True
        with self.assertLogs('core.session', level='WARNING'):
            view = self.controller.reset_progress()
        self.assertEqual(view['stats']['passed'], 0)

    def test_reshuffle_resets_hint(self):
        self.controller.request_hint()
        self.controller.request_hint()
        view = self.controller.reshuffle()
        self.assertEqual(view['hint_level'], 0)
        self.assertEqual(view['hints'], {})

    def test_reset_progress_resets_hint(self):
        self.controller.request_hint()
        view = self.controller.reset_progress()
        self.assertEqual(view['hint_level'], 0)
        self.assertEqual(view['hints'], {})


class TestPersistence(unittest.TestCase):
    """Tests for saving and restoring a session."""

    def test_restore_round_trip(self):
        store = MockStateStore()
        first = make_controller(store=store, seed=1)
        first.submit('zzz')
        first.next()
        first.pass_item()
        first.set_mode(QuizMode.BACK_TO_FRONT)

        second = make_controller(store=store, seed=2)
        self.assertTrue(second.load())
        self.assertEqual(second.state.scheduler.order, first.state.scheduler.order)
        self.assertEqual(second.state.scheduler.cursor, first.state.scheduler.cursor)
        self.assertEqual(second.state.stats.to_dict(), first.state.stats.to_dict())
        self.assertIs(second.state.mode, QuizMode.BACK_TO_FRONT)
        self.assertIs(second.phase, Phase.ANSWERING)

    def test_load_without_snapshot(self):
        controller = make_controller(store=MockStateStore())
        self.assertFalse(controller.load())
        self.assertEqual(controller.state.stats.answered, 0)

    def test_load_without_store(self):
        self.assertFalse(make_controller().load())

    def test_wrong_length_resets_whole_session(self):
        blob = json.dumps({
            'order': [1, 0, 2],
            'cursor': 2,
            'stats': {'correct': 2, 'wrong': 1, 'passed': 0},
            'mode': 'back_to_front'
        })
        controller = make_controller(store=MockStateStore(blob))
        with self.assertLogs('core.session', level='WARNING'):
            self.assertFalse(controller.load())
        self.assertEqual(controller.state.stats.to_dict(), {'correct': 0, 'wrong': 0, 'passed': 0})
        self.assertEqual(controller.state.scheduler.cursor, 0)
        self.assertEqual(sorted(controller.state.scheduler.order), [0, 1, 2, 3])

    def test_garbage_snapshot(self):
        controller = make_controller(store=MockStateStore('{not json'))
        with self.assertLogs('core.session', level='WARNING'):
            self.assertFalse(controller.load())
        self.assertEqual(sorted(controller.state.scheduler.order), [0, 1, 2, 3])

    def test_old_snapshot_version_is_discarded(self):
        blob = json.dumps({'version': 1, 'order': [3, 2, 1, 0], 'stats': {'correct': 3}})
        controller = make_controller(store=MockStateStore(blob))
        with self.assertLogs('core.session', level='WARNING'):
            self.assertFalse(controller.load())
        self.assertEqual(controller.state.stats.correct, 0)

    def test_load_failure(self):
        store = MockStateStore()
        store.fail_load = True
        controller = make_controller(store=store)
        with self.assertLogs('core.session', level='WARNING'):
            self.assertFalse(controller.load())
        self.assertTrue(controller.has_items)

    def test_cursor_past_end_is_clamped(self):
        blob = json.dumps({'order': [3, 2, 1, 0], 'cursor': 9})
        controller = make_controller(store=MockStateStore(blob))
        self.assertTrue(controller.load())
        self.assertEqual(controller.state.scheduler.cursor, 3)
        self.assertEqual(controller.prompt(), 'apple')

    def test_save_failure_is_ignored(self):
        store = MockStateStore()
        store.fail_save = True
        controller = make_controller(store=store)
        with self.assertLogs('core.session', level='WARNING'):
            view = controller.pass_item()
        self.assertEqual(view['stats']['passed'], 1)
        store.fail_save = False
        controller.pass_item()
        saved = json.loads(store.blob)
        self.assertEqual(saved['stats']['passed'], 2)


class TestEmptyWordBank(unittest.TestCase):
    """Tests for the no-items condition."""

    def setUp(self):
        self.store = MockStateStore()
        self.controller = make_controller(words=[], store=self.store)

    def test_view(self):
        view = self.controller.view()
        self.assertFalse(view['has_items'])
        self.assertEqual(view['total'], 0)
        self.assertIsNone(view['prompt'])
        self.assertEqual(view['hints'], {})
        self.assertEqual(view['progress_percent'], 0)

    def test_operations_are_noops(self):
        self.controller.submit('elma')
        self.controller.pass_item()
        self.controller.reveal()
        self.controller.request_hint()
        self.controller.next()
        self.controller.set_mode(QuizMode.BACK_TO_FRONT)
        self.controller.reshuffle()
        view = self.controller.reset_progress()
        self.assertEqual(view['stats'], {'correct': 0, 'wrong': 0, 'passed': 0})
        self.assertEqual(view['phase'], 'answering')
        self.assertEqual(view['mode'], 'front_to_back')
        self.assertEqual(self.store.save_calls, [])
        self.assertEqual(self.store.clear_calls, 0)

    def test_load_ignores_snapshot(self):
        blob = json.dumps({'order': [], 'stats': {'correct': 5}, 'mode': 'back_to_front'})
        controller = make_controller(words=[], store=MockStateStore(blob))
        self.assertFalse(controller.load())
        view = controller.view()
        self.assertEqual(view['stats'], {'correct': 0, 'wrong': 0, 'passed': 0})
        self.assertEqual(view['mode'], 'front_to_back')


class TestListeners(unittest.TestCase):
    """Tests for change notification."""

    def test_listener_receives_views(self):
        controller = make_controller()
        views = []
        controller.add_listener(views.append)
        controller.request_hint()
        controller.pass_item()
        controller.submit('   ')
        self.assertEqual(len(views), 2)
        self.assertEqual(views[0]['hint_level'], 1)
        self.assertEqual(views[1]['stats']['passed'], 1)


if __name__ == '__main__':
    unittest.main()
