"""Collection inference for bibliographic name records.

This package provides:
- Data models (namematch.models): the immutable Record
- Scoring (namematch.scoring): params, pairwise scores and aggregation
- Decision (namematch.decision): top-choice classification
- Evaluation (namematch.evaluation): asymmetric-cost accuracy scoring
- Audit (namematch.audit): JSONL event logging
- CLI (namematch.cli): command-line interface
- Public API (namematch.api): JSONL record I/O
"""

__version__ = "0.1.0"
__license__ = "MIT"

from namematch.api import RecordFormatError, read_jsonl, write_jsonl
from namematch.decision import TopChoice, top_choice
from namematch.evaluation import ScoreBreakdown, evaluate
from namematch.models import Record
from namematch.scoring import (
    AuthorOverlap,
    ParamsError,
    ScoringParams,
    YearDecay,
    load_params,
    probabilities,
    score,
)

__all__ = [
    "__version__",
    "__license__",
    "AuthorOverlap",
    "ParamsError",
    "Record",
    "RecordFormatError",
    "ScoreBreakdown",
    "ScoringParams",
    "TopChoice",
    "YearDecay",
    "evaluate",
    "load_params",
    "probabilities",
    "read_jsonl",
    "score",
    "top_choice",
    "write_jsonl",
]
