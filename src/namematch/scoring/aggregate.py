"""Aggregate pairwise scores into a distribution over collections.

A query is scored against every candidate. Scores above ``score_cutoff``
accumulate in the bucket of the candidate's collection. The best score seen
(never below the 1.0 baseline) goes into the reserved bucket 0, which keeps
the distribution non-empty and damps confidence when no candidate scores
strongly. Buckets are then normalized to sum to 1.0.
"""

from collections import defaultdict
from collections.abc import Sequence

from namematch.models import Record
from namematch.scoring.params import ScoringParams
from namematch.scoring.scorer import BASELINE_SCORE, score

__all__ = [
    "RESERVED_COLLECTION",
    "bucket_scores",
    "probabilities",
    "score_candidates",
]

RESERVED_COLLECTION = 0


def score_candidates(
    query: Record,
    candidates: Sequence[Record],
    params: ScoringParams,
) -> list[float]:
    """Score a query against each candidate, preserving candidate order.

    This is the per-candidate unit of work; it has no dependency between
    elements and can be split across workers.
    """
    return [score(query, candidate, params) for candidate in candidates]


def bucket_scores(
    query: Record,
    candidates: Sequence[Record],
    params: ScoringParams,
) -> dict[int, float]:
    """Accumulate raw scores per collection.

    Parameters
    ----------
    query : Record
        Record being classified.
    candidates : Sequence[Record]
        Training records.
    params : ScoringParams
        Scoring parameters.

    Returns
    -------
    dict[int, float]
        Unnormalized bucket totals keyed by collection id. Always contains
        RESERVED_COLLECTION.
    """
    buckets: defaultdict[int, float] = defaultdict(float)
    highest = BASELINE_SCORE

    scores = score_candidates(query, candidates, params)
    for candidate, value in zip(candidates, scores, strict=True):
        if value > params.score_cutoff:
            buckets[candidate.collection] += value
        if value > highest:
            highest = value

    buckets[RESERVED_COLLECTION] += highest
    return dict(buckets)


def probabilities(
    query: Record,
    candidates: Sequence[Record],
    params: ScoringParams,
) -> dict[int, float]:
    """Compute the normalized probability of each collection.

    Parameters
    ----------
    query : Record
        Record being classified.
    candidates : Sequence[Record]
        Training records.
    params : ScoringParams
        Scoring parameters.

    Returns
    -------
    dict[int, float]
        Probability per collection id, summing to 1.0. Key
        RESERVED_COLLECTION holds the "no strong match" mass.

    Raises
    ------
    ValueError
        If the bucket total is not positive, which only root-linear decay
        with a negative cutoff can produce.
    """
    buckets = bucket_scores(query, candidates, params)
    total = sum(buckets.values())
    if total <= 0.0:
        raise ValueError(
            f"Bucket total must be positive to normalize, got {total} "
            f"(score_cutoff={params.score_cutoff}, year_decay={params.year_decay.value})"
        )
    return {collection: value / total for collection, value in buckets.items()}
