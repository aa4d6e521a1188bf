import io

import pytest

from coursekit.arrays import delete_repeats, echo_sum, main


def test_echo_sum_ascending():
    numbers = list(range(1, 11))
    assert echo_sum(numbers) == (55, numbers)


def test_echo_sum_descending():
    numbers = list(range(10, 0, -1))
    total, values = echo_sum(numbers)
    assert total == 55
    assert values == numbers


def test_echo_sum_accepts_iterators():
    total, values = echo_sum(iter([4, -4, 9]))
    assert values == [4, -4, 9]
    assert total == sum(values)


def test_delete_all_same():
    remaining, steps = delete_repeats("1" * 10)
    assert remaining == ["1"]
    assert len(steps) == 9
    assert all(step[:3] == (1, 2, "1") for step in steps)
    assert [len(step[3]) for step in steps] == list(range(9, 0, -1))


def test_delete_mixed_sample():
    remaining, steps = delete_repeats("aaat503jna")
    assert remaining == list("at503jn")
    assert [step[:2] for step in steps] == [(1, 2), (1, 2), (1, 8)]
    assert steps[0][3] == tuple("aat503jna")
    assert steps[-1][3] == tuple(remaining)


def test_delete_later_repeats():
    remaining, steps = delete_repeats("12312")
    assert remaining == ["1", "2", "3"]
    assert [step[:3] for step in steps] == [(1, 4, "1"), (2, 4, "2")]


def test_delete_empty_and_unique():
    assert delete_repeats("") == ([], [])
    assert delete_repeats("xyz") == (["x", "y", "z"], [])


@pytest.mark.parametrize("text", ["abcabc", "zzyyxx", "mississippi", "q"])
def test_delete_invariants(text):
    remaining, steps = delete_repeats(text)
    assert len(remaining) == len(set(remaining))
    assert set(remaining) == set(text)
    assert len(steps) == len(text) - len(remaining)


def test_main_echo(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 2 3 4 5\n6 7 8 9 10\n"))
    assert main(["echo"]) == 0
    out = capsys.readouterr().out
    assert "Sum is: 55" in out
    assert "The list of numbers were: 1 2 3 4 5 6 7 8 9 10 " in out


def test_main_echo_too_few(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 2 3\n"))
    assert main(["echo"]) == 1
    assert "not enough numbers" in capsys.readouterr().err


def test_main_repeats(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("5\n1\n2\n3\n1\n2\nn\n"))
    assert main(["repeats"]) == 0
    out = capsys.readouterr().out
    assert "Found duplicates at 1 and 4 : 1 and 1" in out
    assert "The array after delete repeats\nUpdated array: 1 2 3 " in out


def test_main_repeats_rejects_bad_size(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("5000\n-20\n0\nN\n"))
    assert main(["repeats"]) == 0
    captured = capsys.readouterr()
    assert captured.err.count("Invalid size. Please enter a size between 0 and 1024") == 2
    assert captured.out.count("What is the size:") == 3