"""Classifier evaluation against labeled test data.

Every test record is classified against the full training set. Correct
decisions add one point, incorrect decisions cost ``false_positive_cost``
points and records without a decision are counted but not scored.
"""

import time
from collections.abc import Iterable, Sequence
from concurrent.futures import ProcessPoolExecutor
from functools import partial

from namematch.audit.logger import AuditLogger
from namematch.decision import TopChoice, top_choice
from namematch.evaluation.models import ScoreBreakdown
from namematch.models import Record
from namematch.scoring import ScoringParams

__all__ = ["classify_all", "evaluate", "tally"]

_STAGE = "evaluate"


def classify_all(
    train: Sequence[Record],
    test: Sequence[Record],
    params: ScoringParams,
    cutoff: float,
    workers: int | None = None,
) -> list[TopChoice | None]:
    """Classify each test record against the training set.

    Parameters
    ----------
    train : Sequence[Record]
        Training records.
    test : Sequence[Record]
        Records to classify.
    params : ScoringParams
        Scoring parameters.
    cutoff : float
        Probability cutoff.
    workers : int | None, optional
        Worker processes. None or 1 classifies inline, by default None.

    Returns
    -------
    list[TopChoice | None]
        One decision per test record, in test order.
    """
    classify = partial(top_choice, candidates=train, params=params, cutoff=cutoff)

    if workers is None or workers <= 1 or len(test) < 2:
        return [classify(query) for query in test]

    chunksize = max(1, len(test) // (workers * 4))
    with ProcessPoolExecutor(max_workers=workers) as executor:
        return list(executor.map(classify, test, chunksize=chunksize))


def tally(
    test: Iterable[Record],
    choices: Iterable[TopChoice | None],
    false_positive_cost: int,
) -> ScoreBreakdown:
    """Count decisions against ground truth.

    Parameters
    ----------
    test : Iterable[Record]
        Test records carrying the true collection.
    choices : Iterable[TopChoice | None]
        Decisions aligned with ``test``.
    false_positive_cost : int
        Points subtracted per incorrect decision.

    Returns
    -------
    ScoreBreakdown
        Counts and derived score.
    """
    correct = 0
    incorrect = 0
    no_decision = 0

    for record, choice in zip(test, choices, strict=True):
        if choice is None:
            no_decision += 1
        elif choice.collection == record.collection:
            correct += 1
        else:
            incorrect += 1

    return ScoreBreakdown(
        correct=correct,
        incorrect=incorrect,
        no_decision=no_decision,
        score=correct - incorrect * false_positive_cost,
    )


def evaluate(
    train: Sequence[Record],
    test: Sequence[Record],
    params: ScoringParams,
    cutoff: float | None = None,
    *,
    workers: int | None = None,
    logger: AuditLogger | None = None,
) -> ScoreBreakdown:
    """Evaluate the classifier on a labeled test set.

    Parameters
    ----------
    train : Sequence[Record]
        Training records.
    test : Sequence[Record]
        Labeled test records.
    params : ScoringParams
        Scoring parameters; ``false_positive_cost`` sets the penalty.
    cutoff : float | None, optional
        Probability cutoff, by default ``params.probability_cutoff``.
    workers : int | None, optional
        Worker processes for classification, by default inline.
    logger : AuditLogger | None, optional
        Audit logger for events, by default None.

    Returns
    -------
    ScoreBreakdown
        Correct, incorrect and no-decision counts with the derived score.
    """
    if cutoff is None:
        cutoff = params.probability_cutoff

    start = time.perf_counter()
    if logger:
        logger.stage_started(
            _STAGE,
            data={
                "train_records": len(train),
                "test_records": len(test),
                "cutoff": cutoff,
                "workers": workers,
                "params": params.to_dict(),
            },
        )

    choices = classify_all(train, test, params, cutoff, workers=workers)
    breakdown = tally(test, choices, params.false_positive_cost)

    if logger:
        for record, choice in zip(test, choices, strict=True):
            logger.decision_made(
                record_id=record.id,
                collection=choice.collection if choice else None,
                probability=choice.probability if choice else None,
                expected=record.collection,
            )
        logger.stage_finished(
            _STAGE,
            duration_seconds=time.perf_counter() - start,
            counters={
                "correct": breakdown.correct,
                "incorrect": breakdown.incorrect,
                "no_decision": breakdown.no_decision,
                "score": breakdown.score,
            },
        )

    return breakdown
