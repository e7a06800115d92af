"""Public API for reading and writing name records.

This module provides JSONL import/export of Record objects, one JSON
object per line, for the command line and for callers that keep their
training and test sets on disk.
"""

import json
from collections.abc import Iterable
from pathlib import Path

from namematch.models import Record

__all__ = [
    "RecordFormatError",
    "read_jsonl",
    "write_jsonl",
]


class RecordFormatError(ValueError):
    """Raised when a JSONL line cannot be turned into a Record."""

    def __init__(
        self,
        message: str,
        file: str | None = None,
        line: int | None = None,
    ) -> None:
        """Initialize record format error.

        Parameters
        ----------
        message : str
            Error message.
        file : str | None, optional
            File where the error occurred.
        line : int | None, optional
            1-based line number.
        """
        super().__init__(message)
        self.file = file
        self.line = line


def read_jsonl(path: str | Path) -> list[Record]:
    """Read records from a JSONL file.

    Blank lines are skipped.

    Parameters
    ----------
    path : str | Path
        Path to JSONL file.

    Returns
    -------
    list[Record]
        Records in file order.

    Raises
    ------
    FileNotFoundError
        If file does not exist.
    RecordFormatError
        If a line is not valid JSON or lacks a required field.

    Examples
    --------
        >>> from namematch import read_jsonl
        >>> train = read_jsonl("train.jsonl")
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"Records file not found: {file_path}")

    records: list[Record] = []
    with file_path.open("r", encoding="utf-8") as f:
        for lineno, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                records.append(Record.from_dict(json.loads(line)))
            except json.JSONDecodeError as e:
                raise RecordFormatError(
                    f"{file_path}:{lineno}: invalid JSON: {e.msg}",
                    file=str(file_path),
                    line=lineno,
                ) from e
            except KeyError as e:
                raise RecordFormatError(
                    f"{file_path}:{lineno}: missing field {e.args[0]!r}",
                    file=str(file_path),
                    line=lineno,
                ) from e
            except (TypeError, ValueError) as e:
                raise RecordFormatError(
                    f"{file_path}:{lineno}: {e}",
                    file=str(file_path),
                    line=lineno,
                ) from e
    return records


def write_jsonl(records: Iterable[Record], path: str | Path) -> None:
    """Write records to a JSONL file.

    Parameters
    ----------
    records : Iterable[Record]
        Records to export.
    path : str | Path
        Output file path.
    """
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with file_path.open("w", encoding="utf-8", newline="\n") as f:
        for record in records:
            f.write(json.dumps(record.to_dict(), sort_keys=True) + "\n")
