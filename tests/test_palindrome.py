import io

import pytest

from dslab.palindrome import is_palindrome, main


@pytest.mark.parametrize(
    "values, expected",
    [
        ([], True),
        ([7], True),
        ([1, 2, 1], True),
        ([4, 5, 5, 4], True),
        ([0, -3, 0], True),
        ((v for v in (3, 1, 3)), True),
        ([1, 2], False),
        ([1, 2, 3], False),
        ([4, 5, 4, 5], False),
        ([1, 1, 2], False),
    ],
)
def test_is_palindrome(values, expected):
    assert is_palindrome(values) is expected


@pytest.mark.parametrize("values", [[1, 2, 3], [9, 8], [6]])
def test_sequence_plus_reverse_is_palindrome(values):
    assert is_palindrome(values + values[::-1]) is True


@pytest.mark.parametrize(
    "typed, verdict",
    [("3\n1\n2\n1\n", "List is palindrome"), ("2\n1\n2\n", "List is not palindrome")],
)
def test_main_reports(monkeypatch, capsys, typed, verdict):
    monkeypatch.setattr("sys.stdin", io.StringIO(typed))
    assert main([]) == 0
    assert verdict in capsys.readouterr().out