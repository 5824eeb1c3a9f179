import io

import pytest

from dslab.hashing import HashTable, TableFullError, main


def test_home_slot_is_digit_sum():
    assert HashTable().slot(123) == 6


def test_put_then_get_and_slot():
    table = HashTable()
    assert table.put(57, 3) == table.slot(57)
    assert table.get(57) == 3


def test_overwrite_existing_key():
    table = HashTable()
    first = table.put(42, 7)
    assert table.put(42, 9) == first
    assert table.get(42) == 9


def test_colliding_keys_probe_linearly():
    table = HashTable()
    assert table.slot(12) == table.slot(21)
    home = table.put(12, 1)
    assert table.slot(21) == (home + 1) % 10
    table.put(21, 2)
    assert (table.get(12), table.get(21)) == (1, 2)


def test_negative_key_shares_home_slot():
    table = HashTable()
    assert table.slot(-12) == table.slot(12)


@pytest.mark.parametrize(
    "action, error",
    [
        (lambda t: t.slot(0), ValueError),
        (lambda t: t.get(0), KeyError),
        (lambda t: t.put(5, 0), ValueError),
        (lambda t: t.get(99), KeyError),
        (lambda t: t.delete(99), KeyError),
    ],
)
def test_rejected_requests(action, error):
    with pytest.raises(error):
        action(HashTable())


def test_delete_removes_key():
    table = HashTable()
    table.put(33, 4)
    table.delete(33)
    with pytest.raises(KeyError):
        table.get(33)


def test_full_table():
    table = HashTable(size=3)
    for key in (1, 2, 3):
        table.put(key, key)
    with pytest.raises(TableFullError):
        table.put(4, 4)
    table.put(1, 5)
    assert table.get(1) == 5
    with pytest.raises(KeyError):
        table.get(4)


def test_size_must_be_at_least_two():
    with pytest.raises(ValueError):
        HashTable(size=1)


def test_main_put_and_get(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n12\n5\n2\n12\n4\n"))
    assert main([]) == 0
    shown = capsys.readouterr().out
    assert "The value is 5" in shown
    assert "Exiting..." in shown