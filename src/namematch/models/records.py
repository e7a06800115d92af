"""Name record data model.

This module defines the immutable record describing one name attribution.
All scoring, decision and evaluation modules consume records in this form.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

__all__ = ["Record"]


@dataclass(frozen=True, slots=True)
class Record:
    """One name attribution.

    Attributes
    ----------
    collection : int
        Collection the record belongs to (ground truth during evaluation,
        or the label being inferred).
    country : int
        Territorial/linguistic attribute code.
    year : int
        Publication or event year.
    authors : frozenset[int]
        Author identifiers. Any iterable of ints is accepted and frozen,
        a bare int is one author and None means no known authors.
    citation_group : int
        Citation cluster identifier.
    id : int
        Identifier unique within one pipeline invocation.
    """

    collection: int
    country: int
    year: int
    authors: frozenset[int]
    citation_group: int
    id: int

    def __post_init__(self) -> None:
        """Freeze the author collection."""
        if not isinstance(self.authors, frozenset):
            object.__setattr__(self, "authors", _freeze_authors(self.authors))

    def __repr__(self) -> str:
        return (
            f"Record(collection={self.collection}, country={self.country}, "
            f"year={self.year}, authors={sorted(self.authors)}, "
            f"citation_group={self.citation_group}, id={self.id})"
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization.

        Returns
        -------
        dict[str, Any]
            Dictionary with authors as a sorted list.
        """
        return {
            "collection": self.collection,
            "country": self.country,
            "year": self.year,
            "authors": sorted(self.authors),
            "citation_group": self.citation_group,
            "id": self.id,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Record":
        """Build a record from a dictionary.

        Parameters
        ----------
        data : dict[str, Any]
            Mapping with all record fields. ``authors`` may be omitted or null.

        Returns
        -------
        Record
            New record.

        Raises
        ------
        KeyError
            If a required field is missing.
        TypeError
            If a field is not an integer or ``authors`` is not a list of
            integers. Booleans, strings and fractional numbers are rejected.
        """
        return cls(
            collection=_as_int(data["collection"], "collection"),
            country=_as_int(data["country"], "country"),
            year=_as_int(data["year"], "year"),
            authors=_authors_from_json(data.get("authors")),
            citation_group=_as_int(data["citation_group"], "citation_group"),
            id=_as_int(data["id"], "id"),
        )


def _as_int(value: Any, name: str) -> int:
    if isinstance(value, bool):
        raise TypeError(f"{name} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise TypeError(f"{name} must be an integer, got {value!r}")


def _authors_from_json(value: Any) -> frozenset[int]:
    if value is None:
        return frozenset()
    if isinstance(value, list):
        return frozenset(_as_int(a, "authors") for a in value)
    return frozenset((_as_int(value, "authors"),))


def _freeze_authors(authors: Iterable[int] | int | None) -> frozenset[int]:
    if authors is None:
        return frozenset()
    if isinstance(authors, int):
        return frozenset((authors,))
    if isinstance(authors, (str, bytes)):
        raise TypeError(f"authors must be integers, got {authors!r}")
    return frozenset(int(a) for a in authors)
