"""Enumeration of value assignments over a set of keyed positions."""

from __future__ import annotations

from itertools import product
from typing import Sequence, TypeVar

T = TypeVar("T")


def combinations(keys: Sequence[int], values: Sequence[Sequence[T]]) -> list[list[T | None]]:
    """Return every assignment of values to the positions named by ``keys``.

    ``values[k]`` holds the candidate values for position ``k``. Each result
    is a list as long as ``values``; positions that are not among ``keys``
    are ``None``. The first key varies slowest, the last fastest.
    """
    size = len(values)
    result: list[list[T | None]] = []
    for choice in product(*(values[key] for key in keys)):
        assignment: list[T | None] = [None] * size
        for key, value in zip(keys, choice):
            assignment[key] = value
        result.append(assignment)
    return result