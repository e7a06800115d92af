"""Pytest configuration and fixtures for test suite."""

import sys
from collections.abc import Callable, Iterable
from dataclasses import replace
from pathlib import Path

import pytest

# Add src directory to path for imports
SRC_PATH = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(SRC_PATH))

from namematch.models import Record  # noqa: E402
from namematch.scoring import ScoringParams  # noqa: E402

_BASE_PARAMS = ScoringParams(
    country_boost=2.0,
    citation_group_boost=2.0,
    author_boost=3.0,
    year_decay_factor=2.0,
    score_cutoff=1.5,
    probability_cutoff=0.5,
)


@pytest.fixture
def make_record() -> Callable[..., Record]:
    """Factory for test records with minimal boilerplate.

    Two records built with only different ids agree on country, citation
    group and year and have no authors.
    """

    def _factory(
        id: int = 1,
        *,
        collection: int = 1,
        country: int = 10,
        year: int = 1900,
        authors: Iterable[int] = (),
        citation_group: int = 100,
    ) -> Record:
        return Record(
            collection=collection,
            country=country,
            year=year,
            authors=authors,
            citation_group=citation_group,
            id=id,
        )

    return _factory


@pytest.fixture
def params() -> ScoringParams:
    """Power-law, Jaccard params with small integer boosts."""
    return _BASE_PARAMS


@pytest.fixture
def make_params() -> Callable[..., ScoringParams]:
    """Factory overriding individual fields of the base params."""

    def _factory(**overrides: object) -> ScoringParams:
        return replace(_BASE_PARAMS, **overrides)

    return _factory
