"""Pairwise similarity between two name records.

The score is an unnormalized product of multiplicative factors:
baseline 1.0, country match, citation group match, author overlap and
year difference. Each factor lives in its own pure function so the two
author strategies and the two year strategies can be tested in isolation.
"""

import math
import sys

from namematch.models import Record
from namematch.scoring.params import AuthorOverlap, ScoringParams, YearDecay

__all__ = [
    "BASELINE_SCORE",
    "author_factor",
    "author_overlap_proportion",
    "score",
    "year_factor",
]

BASELINE_SCORE = 1.0


def author_overlap_proportion(
    authors_a: frozenset[int],
    authors_b: frozenset[int],
    strategy: AuthorOverlap,
    author_boost: float,
) -> float:
    """Compute the partial overlap proportion of two author sets.

    Parameters
    ----------
    authors_a : frozenset[int]
        Authors of the first record.
    authors_b : frozenset[int]
        Authors of the second record.
    strategy : AuthorOverlap
        Overlap strategy.
    author_boost : float
        Author boost, used by the scaled membership strategy.

    Returns
    -------
    float
        Overlap proportion; 0.0 when nothing is shared or both sets are empty.

    Notes
    -----
    When one side has exactly one author the proportion is found by a single
    membership test against the other set instead of building the union.
    """
    if not authors_a and not authors_b:
        return 0.0

    single, other = _single_author_side(authors_a, authors_b)
    if single is not None:
        if single not in other:
            return 0.0
        if strategy is AuthorOverlap.SCALED_MEMBERSHIP:
            return author_boost / len(other)
        return 1.0 / len(other)

    shared = len(authors_a & authors_b)
    total = len(authors_a) + len(authors_b) - shared
    return shared / total


def author_factor(record_a: Record, record_b: Record, params: ScoringParams) -> float:
    """Return the author multiplier for a pair of records.

    Both sides empty skips the author term (factor 1.0). Identical non-empty
    sets get the full boost. Otherwise a positive overlap proportion yields
    ``proportion * author_boost`` and zero overlap leaves the score as is.
    """
    authors_a = record_a.authors
    authors_b = record_b.authors

    if not authors_a and not authors_b:
        return 1.0

    if authors_a == authors_b:
        return params.author_boost

    proportion = author_overlap_proportion(
        authors_a, authors_b, params.author_overlap, params.author_boost
    )
    if proportion > 0.0:
        return proportion * params.author_boost
    return 1.0


def year_factor(year_a: int, year_b: int, params: ScoringParams) -> float:
    """Return the year difference multiplier.

    Parameters
    ----------
    year_a : int
        Year of the first record.
    year_b : int
        Year of the second record.
    params : ScoringParams
        Scoring parameters.

    Returns
    -------
    float
        Year multiplier. Root-linear decay is negative for large gaps and is
        returned unclamped. Power-law decay is 0.0 once the denominator
        exceeds the float range; a factor below 1 whose power underflows is
        held at the smallest normal float so the result stays finite.
    """
    difference = abs(year_a - year_b)
    if params.year_decay is YearDecay.ROOT_LINEAR:
        return 1.0 - math.sqrt(difference) / params.year_decay_factor
    try:
        denominator = params.year_decay_factor**difference
    except OverflowError:
        return 0.0
    denominator = max(denominator, sys.float_info.min)
    return (1.0 / denominator) * params.year_boost


def score(record_a: Record, record_b: Record, params: ScoringParams) -> float:
    """Score the similarity of two records.

    Parameters
    ----------
    record_a : Record
        Query record.
    record_b : Record
        Candidate record.
    params : ScoringParams
        Scoring parameters.

    Returns
    -------
    float
        Unnormalized similarity; 0.0 when both records share an id.
    """
    if record_a.id == record_b.id:
        return 0.0

    result = BASELINE_SCORE
    if record_a.country == record_b.country:
        result *= params.country_boost
    if record_a.citation_group == record_b.citation_group:
        result *= params.citation_group_boost
    result *= author_factor(record_a, record_b, params)
    result *= year_factor(record_a.year, record_b.year, params)
    return result


def _single_author_side(
    authors_a: frozenset[int], authors_b: frozenset[int]
) -> tuple[int | None, frozenset[int]]:
    if len(authors_a) == 1:
        return next(iter(authors_a)), authors_b
    if len(authors_b) == 1:
        return next(iter(authors_b)), authors_a
    return None, authors_a
