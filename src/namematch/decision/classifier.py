"""Top-choice classification.

Turns a probability distribution over collections into a single decision:
the most probable collection when it strictly exceeds the cutoff, otherwise
no decision.
"""

from collections.abc import Mapping, Sequence
from typing import NamedTuple

from namematch.models import Record
from namematch.scoring import ScoringParams, probabilities

__all__ = ["TopChoice", "select_top", "top_choice"]


class TopChoice(NamedTuple):
    """Selected collection and its normalized probability."""

    collection: int
    probability: float


def select_top(probs: Mapping[int, float], cutoff: float) -> TopChoice | None:
    """Pick the most probable collection above a cutoff.

    Parameters
    ----------
    probs : Mapping[int, float]
        Probability per collection id.
    cutoff : float
        Exclusive lower bound; nothing at or below it is selected.

    Returns
    -------
    TopChoice | None
        Best collection, or None when no probability exceeds the cutoff.

    Notes
    -----
    Collections are scanned in ascending id and only a strictly larger
    probability replaces the current best, so ties go to the lowest id.
    """
    best: TopChoice | None = None
    threshold = cutoff
    for collection in sorted(probs):
        probability = probs[collection]
        if probability > threshold:
            best = TopChoice(collection, probability)
            threshold = probability
    return best


def top_choice(
    query: Record,
    candidates: Sequence[Record],
    params: ScoringParams,
    cutoff: float | None = None,
) -> TopChoice | None:
    """Classify a query record against a training set.

    Parameters
    ----------
    query : Record
        Record being classified.
    candidates : Sequence[Record]
        Training records.
    params : ScoringParams
        Scoring parameters.
    cutoff : float | None, optional
        Probability cutoff, by default ``params.probability_cutoff``.

    Returns
    -------
    TopChoice | None
        Decision, or None for no decision.
    """
    if cutoff is None:
        cutoff = params.probability_cutoff
    return select_top(probabilities(query, candidates, params), cutoff)
