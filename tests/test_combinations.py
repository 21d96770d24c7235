import pytest

from causaltrail.combinations import combinations


@pytest.fixture
def keys():
    return [0, 1]


def test_int_values(keys):
    result = combinations(keys, [[1, 2], [1, 2, 3]])
    assert len(result) == 6
    assert result == [[1, 1], [1, 2], [1, 3], [2, 1], [2, 2], [2, 3]]


def test_string_values(keys):
    result = combinations(keys, [["A", "B"], ["A", "B", "C"]])
    assert len(result) == 6
    assert result == [
        ["A", "A"],
        ["A", "B"],
        ["A", "C"],
        ["B", "A"],
        ["B", "B"],
        ["B", "C"],
    ]


def test_positions_outside_keys_are_none():
    result = combinations([2], [[7], [8], [1, 2]])
    assert result == [[None, None, 1], [None, None, 2]]


def test_no_keys_gives_single_empty_assignment():
    assert combinations([], [[1, 2], [3]]) == [[None, None]]


def test_key_order_controls_variation():
    result = combinations([1, 0], [[1, 2], [5, 6]])
    assert result == [[1, 5], [2, 5], [1, 6], [2, 6]]


def test_empty_candidate_list_gives_nothing():
    assert combinations([0, 1], [[1, 2], []]) == []