"""Pairwise scoring and probability aggregation.

This module implements the scoring layer that compares two name records and
the aggregation layer that turns a query's scores against a training set into
a probability distribution over collections.
"""

from namematch.scoring.aggregate import (
    RESERVED_COLLECTION,
    bucket_scores,
    probabilities,
    score_candidates,
)
from namematch.scoring.params import (
    FALSE_POSITIVE_COST,
    AuthorOverlap,
    ParamsError,
    ScoringParams,
    YearDecay,
    load_params,
    params_from_dict,
)
from namematch.scoring.scorer import (
    author_factor,
    author_overlap_proportion,
    score,
    year_factor,
)

__all__ = [
    # Configuration
    "FALSE_POSITIVE_COST",
    "AuthorOverlap",
    "ParamsError",
    "ScoringParams",
    "YearDecay",
    "load_params",
    "params_from_dict",
    # Pairwise
    "author_factor",
    "author_overlap_proportion",
    "score",
    "year_factor",
    # Aggregation
    "RESERVED_COLLECTION",
    "bucket_scores",
    "probabilities",
    "score_candidates",
]
