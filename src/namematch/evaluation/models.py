"""Data models for classifier evaluation."""

from dataclasses import asdict, dataclass
from typing import Any

__all__ = ["ScoreBreakdown"]


@dataclass(frozen=True)
class ScoreBreakdown:
    """Aggregate accuracy of a classifier over a labeled test set.

    Attributes
    ----------
    correct : int
        Decisions matching the test record's collection.
    incorrect : int
        Decisions naming another collection.
    no_decision : int
        Test records for which no collection cleared the cutoff.
    score : int
        ``correct - incorrect * false_positive_cost``.
    """

    correct: int
    incorrect: int
    no_decision: int
    score: int

    @property
    def total(self) -> int:
        """Number of test records evaluated."""
        return self.correct + self.incorrect + self.no_decision

    def __repr__(self) -> str:
        return (
            f"ScoreBreakdown(score={self.score}, correct={self.correct}, "
            f"incorrect={self.incorrect}, no_decision={self.no_decision})"
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)
