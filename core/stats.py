"""Answer counters and progress metrics."""

import math


class StatsTracker:
    """Counts correct, wrong and passed answers.

    Counters only ever go up; reset() is the only way back to zero.
    """

    def __init__(self, correct: int = 0, wrong: int = 0, passed: int = 0):
        self.correct = correct
        self.wrong = wrong
        self.passed = passed

    @property
    def answered(self) -> int:
        return self.correct + self.wrong + self.passed

    def record_correct(self) -> None:
        self.correct += 1

    def record_wrong(self) -> None:
        self.wrong += 1

    def record_passed(self) -> None:
        self.passed += 1

    def reset(self) -> None:
        self.correct = 0
        self.wrong = 0
        self.passed = 0

    def remaining(self, total: int) -> int:
        """Items not yet counted in any bucket."""
        return max(total - self.answered, 0)

    def progress_percent(self, total: int) -> int:
        """Completion percentage, rounded half up and clamped to 0..100."""
        if total <= 0:
            return 0
        percent = math.floor(100 * self.answered / total + 0.5)
        return min(max(percent, 0), 100)

    def to_dict(self) -> dict:
        return {
            'correct': self.correct,
            'wrong': self.wrong,
            'passed': self.passed
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'StatsTracker':
        return cls(
            data.get('correct', 0),
            data.get('wrong', 0),
            data.get('passed', 0)
        )
