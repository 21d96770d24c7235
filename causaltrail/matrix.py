"""A dense two-dimensional matrix addressed by column and row."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Iterable, Sequence

_MISSING = object()


class Axis(IntEnum):
    """Selects whether a column or a row is inspected."""

    COL = 0
    ROW = 1


class Matrix:
    """Matrix stored row by row, indexed as ``matrix[col, row]``."""

    def __init__(
        self,
        col_count: int = 0,
        row_count: int = 0,
        initial_value: Any = 0,
        col_names: Sequence[str] = ("NA",),
        row_names: Sequence[str] = ("NA",),
    ) -> None:
        if col_count < 0 or row_count < 0:
            raise ValueError("Matrix dimensions must not be negative")
        self._col_count = col_count
        self._row_count = row_count
        self._rows: list[list[Any]] = [
            [initial_value] * col_count for _ in range(row_count)
        ]
        self._col_names: list[str] = []
        self._row_names: list[str] = []
        self._col_index: dict[str, int] = {}
        self._row_index: dict[str, int] = {}
        self.col_names = col_names
        self.row_names = row_names

    @classmethod
    def from_names(
        cls,
        col_names: Sequence[str],
        row_names: Sequence[str] = ("NA",),
        initial_value: Any = 0,
    ) -> "Matrix":
        """Create a matrix whose size follows the given names."""
        return cls(len(col_names), len(row_names), initial_value, col_names, row_names)

    @classmethod
    def from_rows(
        cls,
        rows: Iterable[Sequence[Any]],
        col_names: Sequence[str] | None = None,
        row_names: Sequence[str] | None = None,
    ) -> "Matrix":
        """Create a matrix from a sequence of equally long rows."""
        data = [list(row) for row in rows]
        width = len(data[0]) if data else 0
        for number, row in enumerate(data, start=1):
            if len(row) != width:
                raise ValueError(
                    f"Row {number} does not contain the specified number of samples"
                )
        matrix = cls(width, len(data), 0, col_names or (), row_names or ())
        matrix._rows = data
        return matrix

    @property
    def col_count(self) -> int:
        return self._col_count

    @property
    def row_count(self) -> int:
        return self._row_count

    @property
    def row_names(self) -> list[str]:
        return list(self._row_names)

    @row_names.setter
    def row_names(self, names: Sequence[str]) -> None:
        self._row_names = list(names)
        self._row_index = {name: index for index, name in enumerate(self._row_names)}

    @property
    def col_names(self) -> list[str]:
        return list(self._col_names)

    @col_names.setter
    def col_names(self, names: Sequence[str]) -> None:
        self._col_names = list(names)
        self._col_index = {name: index for index, name in enumerate(self._col_names)}

    def _check(self, col: int, row: int) -> None:
        if not (0 <= col < self._col_count and 0 <= row < self._row_count):
            raise IndexError(f"Invalid matrix position {col} {row}")

    def __getitem__(self, key: tuple[int, int]) -> Any:
        col, row = key
        self._check(col, row)
        return self._rows[row][col]

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        col, row = key
        self._check(col, row)
        self._rows[row][col] = value

    def __contains__(self, query: Any) -> bool:
        return any(query in row for row in self._rows)

    def __str__(self) -> str:
        header = "\t" + "".join(f"{name}\t" for name in self._col_names)
        lines = []
        for index, row in enumerate(self._rows):
            name = self._row_names[index] if index < len(self._row_names) else ""
            lines.append(f"{name}\t" + "".join(f"{value}\t" for value in row))
        return header + "\n" + "\n".join(lines)

    def find_row(self, name: str) -> int | None:
        """Index of the row with this name, or None."""
        return self._row_index.get(name)

    def find_col(self, name: str) -> int | None:
        """Index of the column with this name, or None."""
        return self._col_index.get(name)

    def value_by_names(self, col_name: str, row_name: str) -> Any:
        col = self.find_col(col_name)
        row = self.find_row(row_name)
        if col is None or row is None:
            raise KeyError("Specified elements not found")
        return self[col, row]

    def _row(self, row: int) -> list[Any]:
        if not 0 <= row < self._row_count:
            raise IndexError(f"Invalid row {row}")
        return self._rows[row]

    def _col(self, col: int) -> list[Any]:
        if not 0 <= col < self._col_count:
            raise IndexError(f"Invalid column {col}")
        return [row[col] for row in self._rows]

    def _line(self, axis: Axis | int, index: int) -> list[Any]:
        try:
            axis = Axis(axis)
        except ValueError:
            raise ValueError("First argument must be 0 (col) or 1 (row)") from None
        return self._row(index) if axis is Axis.ROW else self._col(index)

    def row_sum(self, row: int) -> Any:
        values = self._row(row)
        return sum(values[1:], values[0]) if values else 0

    def col_sum(self, col: int) -> Any:
        values = self._col(col)
        return sum(values[1:], values[0]) if values else 0

    def unique_row_values(self, row: int, exclude: Any = _MISSING) -> list[Any]:
        """Sorted distinct values of a row, optionally without ``exclude``."""
        return sorted({v for v in self._row(row) if exclude is _MISSING or v != exclude})

    def unique_col_values(self, col: int, exclude: Any = _MISSING) -> list[Any]:
        """Sorted distinct values of a column, optionally without ``exclude``."""
        return sorted({v for v in self._col(col) if exclude is _MISSING or v != exclude})

    def count_element(self, axis: Axis | int, index: int, value: Any) -> int:
        return sum(1 for item in self._line(axis, index) if item == value)

    def contains_element(self, axis: Axis | int, index: int, value: Any) -> bool:
        return value in self._line(axis, index)

    def resize(self, col_count: int, row_count: int, initial_value: Any = 0) -> None:
        """Enlarge the matrix, keeping existing values in place."""
        if col_count < self._col_count or row_count < self._row_count:
            raise ValueError("Matrices can not be shrinked")
        extra = col_count - self._col_count
        for row in self._rows:
            row.extend([initial_value] * extra)
        self._rows.extend(
            [initial_value] * col_count for _ in range(row_count - self._row_count)
        )
        self._col_count = col_count
        self._row_count = row_count

    def has_na_col(self) -> bool:
        return "NA" in self._col_index

    def has_na_row(self) -> bool:
        return "NA" in self._row_index

    def clear(self) -> None:
        """Drop all values; names are kept."""
        self._col_count = 0
        self._row_count = 0
        self._rows = []