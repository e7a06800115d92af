"""Scoring configuration.

This module defines ScoringParams, the immutable bundle of boost factors,
decision thresholds and strategy selectors consumed by every pipeline layer,
plus the JSON loader that validates a configuration file against the bundled
JSON Schema.
"""

import json
import math
from dataclasses import asdict, dataclass
from enum import StrEnum
from importlib import resources
from pathlib import Path
from typing import Any

import jsonschema

__all__ = [
    "FALSE_POSITIVE_COST",
    "AuthorOverlap",
    "ParamsError",
    "ScoringParams",
    "YearDecay",
    "load_params",
    "load_params_schema",
    "params_from_dict",
]

FALSE_POSITIVE_COST = 10


class AuthorOverlap(StrEnum):
    """Strategy for the partial author overlap proportion.

    Attributes
    ----------
    JACCARD : str
        Shared authors over all distinct authors. A single author on one side
        is resolved by membership test as ``1 / len(other)``.
    SCALED_MEMBERSHIP : str
        Single author on one side found in the other set gives
        ``author_boost / len(other)``; other shapes fall back to Jaccard.
    """

    JACCARD = "jaccard"
    SCALED_MEMBERSHIP = "scaled_membership"


class YearDecay(StrEnum):
    """Strategy for the year difference term.

    Attributes
    ----------
    POWER_LAW : str
        ``(1 / year_decay_factor ** diff) * year_boost``.
    ROOT_LINEAR : str
        ``1 - sqrt(diff) / year_decay_factor``; negative for large gaps.
    """

    POWER_LAW = "power_law"
    ROOT_LINEAR = "root_linear"


class ParamsError(ValueError):
    """Raised when a configuration file does not match the params schema."""


@dataclass(frozen=True, slots=True)
class ScoringParams:
    """Boost factors, thresholds and strategies for name matching.

    Attributes
    ----------
    country_boost : float
        Multiplier applied when countries match.
    citation_group_boost : float
        Multiplier applied when citation groups match.
    author_boost : float
        Multiplier applied for identical or overlapping author sets.
    year_decay_factor : float
        Controls how fast similarity falls with year difference (> 0).
    score_cutoff : float
        Minimum raw pairwise score counted toward a collection bucket.
    probability_cutoff : float
        Minimum normalized probability for a decision (0.0-1.0).
    year_boost : float
        Constant multiplier of the power-law year term.
    author_overlap : AuthorOverlap
        Partial author overlap strategy.
    year_decay : YearDecay
        Year difference strategy.
    false_positive_cost : int
        Evaluation penalty per incorrect decision.
    """

    country_boost: float
    citation_group_boost: float
    author_boost: float
    year_decay_factor: float
    score_cutoff: float
    probability_cutoff: float
    year_boost: float = 1.0
    author_overlap: AuthorOverlap = AuthorOverlap.JACCARD
    year_decay: YearDecay = YearDecay.POWER_LAW
    false_positive_cost: int = FALSE_POSITIVE_COST

    def __post_init__(self) -> None:
        """Coerce strategy names and validate."""
        object.__setattr__(self, "author_overlap", AuthorOverlap(self.author_overlap))
        object.__setattr__(self, "year_decay", YearDecay(self.year_decay))

        for name in ("country_boost", "citation_group_boost", "author_boost", "year_boost"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise ValueError(f"{name} must be finite, got {value}")

        if not math.isfinite(self.year_decay_factor) or self.year_decay_factor <= 0.0:
            raise ValueError(f"year_decay_factor must be > 0, got {self.year_decay_factor}")

        if math.isnan(self.score_cutoff):
            raise ValueError("score_cutoff must not be NaN")

        if not 0.0 <= self.probability_cutoff <= 1.0:
            raise ValueError(f"probability_cutoff must be in [0, 1], got {self.probability_cutoff}")

        if self.false_positive_cost < 0:
            raise ValueError(f"false_positive_cost must be >= 0, got {self.false_positive_cost}")

    def __repr__(self) -> str:
        return (
            f"ScoringParams(country_boost={self.country_boost:.3f}, "
            f"citation_group_boost={self.citation_group_boost:.3f}, "
            f"author_boost={self.author_boost:.3f}, "
            f"year_decay_factor={self.year_decay_factor:.3f}, "
            f"year_boost={self.year_boost:.3f}, "
            f"score_cutoff={self.score_cutoff:.3f}, "
            f"probability_cutoff={self.probability_cutoff:.3f}, "
            f"author_overlap={self.author_overlap.value}, "
            f"year_decay={self.year_decay.value}, "
            f"false_positive_cost={self.false_positive_cost})"
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        data = asdict(self)
        data["author_overlap"] = self.author_overlap.value
        data["year_decay"] = self.year_decay.value
        return data


def load_params_schema() -> dict[str, Any]:
    """Load the bundled JSON Schema for scoring parameters.

    Returns
    -------
    dict[str, Any]
        Parsed JSON Schema.
    """
    schema_file = resources.files("namematch") / "schemas" / "scoring_params.schema.json"
    return json.loads(schema_file.read_text(encoding="utf-8"))


def params_from_dict(data: dict[str, Any]) -> ScoringParams:
    """Validate a configuration mapping and build ScoringParams.

    Parameters
    ----------
    data : dict[str, Any]
        Configuration mapping.

    Returns
    -------
    ScoringParams
        Validated parameters.

    Raises
    ------
    ParamsError
        If the mapping does not match the schema.
    ValueError
        If values pass the schema but fail ScoringParams validation.
    """
    try:
        jsonschema.validate(instance=data, schema=load_params_schema())
    except jsonschema.ValidationError as e:
        location = "/".join(str(p) for p in e.absolute_path) or "<root>"
        raise ParamsError(f"Invalid scoring params at {location}: {e.message}") from e

    return ScoringParams(**data)


def load_params(params_path: Path | str) -> ScoringParams:
    """Load scoring parameters from a JSON file.

    Parameters
    ----------
    params_path : Path | str
        Path to params JSON file.

    Returns
    -------
    ScoringParams
        Loaded parameters.

    Raises
    ------
    FileNotFoundError
        If the file is not found.
    ParamsError
        If the configuration is invalid.
    """
    path = Path(params_path)
    if not path.exists():
        raise FileNotFoundError(f"Params file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)

    return params_from_dict(data)
