"""Classifier evaluation with asymmetric false-positive cost."""

from namematch.evaluation.evaluator import classify_all, evaluate, tally
from namematch.evaluation.models import ScoreBreakdown

__all__ = ["ScoreBreakdown", "classify_all", "evaluate", "tally"]
