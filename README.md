# causaltrail

This package provides building blocks for working with discrete observation data:

- `causaltrail.combinations` has `combinations(keys, values)`. It enumerates every assignment of candidate values to a set of keyed positions.
- `causaltrail.matrix` has `Matrix` and `Axis`. `Matrix` is a grid indexed by `(column, row)`, with optional column and row names. It offers lookup by name, row and column sums, sorted unique values, counting and membership along an axis, and growing in place.
- `causaltrail.matrix_io` has `read_matrix` and `read_matrix_deleting`. They read tab- or space-delimited matrix files. Column names and row names in the file are optional.

## Installation

```
pip install .
```

To install the test requirements as well:

```
pip install ".[test]"
```

## Usage

### Combinations

`values[k]` lists the candidates for position `k`. Only the positions named in `keys` are filled, and every other position is `None`. In the output, the first key changes slowest and the last key changes fastest.

```python
from causaltrail.combinations import combinations

combinations([0, 1], [[1, 2], [1, 2, 3]])
# [[1, 1], [1, 2], [1, 3], [2, 1], [2, 2], [2, 3]]
```

### Matrix

```python
from causaltrail.matrix import Matrix, Axis

m = Matrix(3, 2, 0, col_names=["A", "B", "C"], row_names=["A", "B"])
m[0, 0] = 1
m[1, 0] = 3
m[2, 0] = 5

m.row_sum(0)                        # 9
m.find_col("C")                     # 2
m.find_row("Z")                     # None
m.value_by_names("A", "A")          # 1
m.unique_row_values(0, exclude=3)   # [1, 5]
m.count_element(Axis.ROW, 0, 1)     # 1
m.contains_element(Axis.COL, 0, 1)  # True
5 in m                              # True
m.resize(5, 2, 0)                   # now 5 columns; existing cells are kept
print(m)                            # tab-separated table with the names
```

`Matrix.from_names(col_names, row_names, initial_value)` takes its size from the lists of names. `Matrix.from_rows(rows, col_names, row_names)` builds a matrix from rows that all have the same length.

The following operations raise errors:

| Operation | Error | When |
| --- | --- | --- |
| Indexing, sums, per-row or per-column queries | `IndexError` | The position is out of range |
| `value_by_names` | `KeyError` | A name is unknown |
| `resize` | `ValueError` | The matrix would shrink |
| `from_rows` | `ValueError` | The rows have different lengths |

`clear()` removes all values and keeps the names. `has_na_col()` and `has_na_row()` tell whether a column or row is named `"NA"`.

### Reading files

Every cell goes through `convert`. The default `convert` is `str`.

```python
from causaltrail.matrix_io import read_matrix, read_matrix_deleting

# Each data line starts with its row name; there is no header line.
m = read_matrix("observations.txt", col_names=False, row_names=True, convert=int)

# Samples are numbered as in the file, with the row-name column counted
# as 1: the value at position n on a line is dropped when n + 1 is listed.
# Listing [2, 3] drops the first two values of every line.
m = read_matrix_deleting("observations.txt", False, True, [2, 3], convert=int)
```

The readers raise `ValueError` in these cases:

- A line holds a different number of values from the first line.
- The file has no data lines or no sample columns.
- `read_matrix_deleting` is asked to delete more samples than the file has columns.

A missing file raises `FileNotFoundError`.

## Scope

This package covers only matrices, file reading and enumeration. It has no network model, no parameter training, no probability queries and no command-line program.

## Running the tests

```
pytest
```