import pytest

from dslab.circular import CircularList


def test_values_kept_in_order():
    items = CircularList([1, 2, 3])
    assert (list(items), len(items)) == ([1, 2, 3], 3)


@pytest.mark.parametrize("index", [0, 1, 2])
def test_get_wraps_around(index):
    items = CircularList([4, 5, 6])
    assert items.get(index) == items.get(index + 3) == [4, 5, 6][index]


@pytest.mark.parametrize(
    "start, index, value, expected",
    [
        ([1, 2], 0, 9, [9, 1, 2]),
        ([1, 2], 2, 7, [1, 2, 7]),
        ([1, 3], 1, 2, [1, 2, 3]),
    ],
)
def test_insert(start, index, value, expected):
    items = CircularList(start)
    items.insert(index, value)
    assert list(items) == expected
    assert items.get(0) == expected[0]


@pytest.mark.parametrize(
    "index, removed, rest",
    [(0, 1, [2, 3]), (1, 2, [1, 3]), (2, 3, [1, 2])],
)
def test_delete(index, removed, rest):
    items = CircularList([1, 2, 3])
    assert items.delete(index) == removed
    assert list(items) == rest
    assert items.get(0) == rest[0]


def test_delete_only_item_empties_list():
    items = CircularList([8])
    assert items.delete(0) == 8
    assert (len(items), list(items)) == (0, [])
    with pytest.raises(IndexError):
        items.get(0)


def test_insert_past_head_on_empty_list_fails():
    with pytest.raises(IndexError):
        CircularList().insert(1, 5)


@pytest.mark.parametrize("method", ["get", "delete"])
def test_negative_index_rejected(method):
    items = CircularList([1, 2])
    with pytest.raises(IndexError):
        getattr(items, method)(-1)
    assert list(items) == [1, 2]