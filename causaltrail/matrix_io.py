"""Reading matrices from tab or space delimited text files."""

from __future__ import annotations

import os
import re
from typing import Any, Callable, Collection, Sequence

from causaltrail.matrix import Matrix

_SEPARATOR = re.compile(r"[ \t]+")


def _read_lines(path: str | os.PathLike[str]) -> list[str]:
    with open(path, encoding="utf-8") as handle:
        return [line.rstrip("\n") for line in handle]


def _build(
    lines: Sequence[str],
    has_col_names: bool,
    has_row_names: bool,
    convert: Callable[[str], Any],
    expected_tokens: int,
    col_count: int,
    keep: Callable[[int], bool],
) -> Matrix:
    header: list[str] = []
    body = lines
    if has_col_names and lines:
        tokens = [token for token in _SEPARATOR.split(lines[0]) if token]
        header = [token for number, token in enumerate(tokens, start=1) if keep(number)]
        body = lines[1:]

    names: list[str] = []
    rows: list[list[Any]] = []
    for number, line in enumerate(body, start=1 + int(has_col_names)):
        pieces = _SEPARATOR.split(line)
        if has_row_names:
            names.append(pieces.pop(0))
        tokens = [piece for piece in pieces if piece]
        if len(tokens) != expected_tokens:
            raise ValueError(
                f"Row {number} does not contain the specified number of samples"
            )
        rows.append(
            [convert(token) for position, token in enumerate(tokens, start=1) if keep(position)]
        )

    if rows:
        return Matrix.from_rows(rows, header, names)
    return Matrix(col_count, 0, 0, header, names)


def read_matrix(
    path: str | os.PathLike[str],
    col_names: bool = False,
    row_names: bool = False,
    convert: Callable[[str], Any] = str,
) -> Matrix:
    """Read a tab or space delimited matrix file.

    ``col_names`` marks a header line, ``row_names`` a leading name on every
    data line. Every value is passed through ``convert``.
    """
    lines = _read_lines(path)
    width = len(lines[0].split()) if lines else 0
    col_count = width - int(row_names)
    row_count = len(lines) - int(col_names)
    if row_count < 0:
        raise ValueError(
            "Matrix containing data is improperly formatted. No features were found."
        )
    if col_count < 0:
        raise ValueError(
            "Matrix containing data is improperly formatted. No samples were found."
        )
    return _build(lines, col_names, row_names, convert, col_count, col_count, lambda _: True)


def read_matrix_deleting(
    path: str | os.PathLike[str],
    col_names: bool,
    row_names: bool,
    deleted_samples: Collection[int],
    convert: Callable[[str], Any] = str,
) -> Matrix:
    """Read a matrix file, leaving out the given samples.

    Sample numbers count file columns from 1, the row-name column included:
    the n-th value of a line is dropped when ``n + 1`` is in
    ``deleted_samples``.
    """
    deleted = set(deleted_samples)
    lines = _read_lines(path)
    width = len(lines[0].split()) if lines else 0

    if width < len(deleted_samples):
        raise ValueError("Attempted to delete more samples than present in the matrix.")

    col_count = width - len(deleted_samples) - int(row_names)
    row_count = len(lines) - int(col_names)
    if row_count <= 0:
        raise ValueError(
            "Matrix containing data is improperly formatted. No features were found."
        )
    if col_count <= 0:
        raise ValueError(
            "Matrix containing data is improperly formatted. No samples were found."
        )

    return _build(
        lines,
        col_names,
        row_names,
        convert,
        col_count + len(deleted_samples),
        col_count,
        lambda position: position + 1 not in deleted,
    )