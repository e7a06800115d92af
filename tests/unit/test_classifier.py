"""Tests for top-choice classification."""

from collections.abc import Callable

import pytest

from namematch.decision import TopChoice, select_top, top_choice
from namematch.models import Record
from namematch.scoring import RESERVED_COLLECTION, ScoringParams, probabilities

# ---------------------------------------------------------------------------
# select_top
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_select_top_picks_largest_above_cutoff() -> None:
    probs = {0: 0.2, 5: 0.7, 6: 0.1}
    assert select_top(probs, 0.5) == TopChoice(5, 0.7)


@pytest.mark.unit
def test_select_top_probability_equal_to_cutoff_is_no_decision() -> None:
    assert select_top({0: 0.4, 5: 0.6}, 0.6) is None


@pytest.mark.unit
def test_select_top_nothing_above_cutoff_is_no_decision() -> None:
    assert select_top({0: 0.5, 5: 0.5}, 0.9) is None


@pytest.mark.unit
@pytest.mark.parametrize(
    "probs",
    [
        {9: 0.4, 3: 0.4, 0: 0.2},
        {3: 0.4, 9: 0.4, 0: 0.2},
        {0: 0.2, 9: 0.4, 3: 0.4},
    ],
)
def test_select_top_tie_goes_to_lowest_collection_id(probs: dict[int, float]) -> None:
    """Insertion order of the mapping does not affect ties."""
    assert select_top(probs, 0.1) == TopChoice(3, 0.4)


@pytest.mark.unit
def test_select_top_tie_with_reserved_bucket_picks_reserved() -> None:
    assert select_top({20: 0.5, RESERVED_COLLECTION: 0.5}, 0.3) == TopChoice(0, 0.5)


@pytest.mark.unit
def test_select_top_empty_mapping() -> None:
    assert select_top({}, 0.0) is None


# ---------------------------------------------------------------------------
# top_choice
# ---------------------------------------------------------------------------


@pytest.mark.unit
@pytest.mark.parametrize(
    ("cutoff", "expected"),
    [
        pytest.param(0.0, TopChoice(RESERVED_COLLECTION, 1.0), id="below_one"),
        pytest.param(0.999, TopChoice(RESERVED_COLLECTION, 1.0), id="just_below_one"),
        pytest.param(1.0, None, id="at_one"),
    ],
)
def test_empty_training_set_boundary(
    make_record: Callable[..., Record],
    params: ScoringParams,
    cutoff: float,
    expected: TopChoice | None,
) -> None:
    """Reserved bucket alone holds probability 1.0."""
    assert top_choice(make_record(1), [], params, cutoff) == expected


@pytest.mark.unit
def test_cutoff_defaults_to_params_probability_cutoff(
    make_record: Callable[..., Record], make_params: Callable[..., ScoringParams]
) -> None:
    query = make_record(1)
    assert top_choice(query, [], make_params(probability_cutoff=0.5)) == TopChoice(0, 1.0)
    assert top_choice(query, [], make_params(probability_cutoff=1.0)) is None


@pytest.mark.unit
def test_explicit_cutoff_overrides_params(
    make_record: Callable[..., Record], make_params: Callable[..., ScoringParams]
) -> None:
    p = make_params(probability_cutoff=1.0)
    assert top_choice(make_record(1), [], p, cutoff=0.2) == TopChoice(0, 1.0)


@pytest.mark.unit
def test_matching_collection_selected_when_above_cutoff(
    make_record: Callable[..., Record], make_params: Callable[..., ScoringParams]
) -> None:
    p = make_params(score_cutoff=3.0, probability_cutoff=0.55)
    query = make_record(1, authors=[8])
    train = [
        make_record(11, collection=10, country=1, citation_group=1),
        make_record(12, collection=20, authors=[8]),
        make_record(13, collection=20, authors=[8, 9]),
        make_record(14, collection=30, country=3, citation_group=3),
    ]

    choice = top_choice(query, train, p)

    assert choice is not None
    assert choice.collection == 20
    assert choice.probability == pytest.approx(0.6)


@pytest.mark.unit
def test_matching_collection_below_cutoff_is_no_decision(
    make_record: Callable[..., Record], make_params: Callable[..., ScoringParams]
) -> None:
    p = make_params(score_cutoff=3.0, probability_cutoff=0.65)
    query = make_record(1, authors=[8])
    train = [
        make_record(12, collection=20, authors=[8]),
        make_record(13, collection=20, authors=[8, 9]),
    ]

    assert top_choice(query, train, p) is None


@pytest.mark.unit
@pytest.mark.parametrize("cutoff", [0.0, 0.25, 0.5, 0.75, 0.95])
def test_never_returns_probability_at_or_below_cutoff(
    make_record: Callable[..., Record], params: ScoringParams, cutoff: float
) -> None:
    query = make_record(1, authors=[1, 2])
    train = [
        make_record(2, collection=5, authors=[1, 2]),
        make_record(3, collection=6, year=1901),
        make_record(4, collection=6, country=4),
        make_record(5, collection=7, authors=[2, 3]),
    ]

    choice = top_choice(query, train, params, cutoff)
    probs = probabilities(query, train, params)

    if choice is None:
        assert max(probs.values()) <= cutoff
    else:
        assert choice.probability > cutoff
        assert choice.probability == max(probs.values())
