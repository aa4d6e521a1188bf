import random

import pytest

from coursekit.sorted_list import SortedAList
from coursekit.stock import Stock

SORTS = ["selection_sort", "quick_sort", "heap_sort"]


def make_list(values, size=10):
    result = SortedAList(size)
    for value in values:
        result.insert(value)
    return result


def sample(seed, count=30):
    rng = random.Random(seed)
    return [rng.randrange(100) for _ in range(count)]


def test_new_list_is_empty_with_minimum_capacity():
    lst = SortedAList(3)
    assert lst.is_empty()
    assert len(lst) == 0
    assert lst.capacity() == 10


def test_requested_capacity_above_minimum_kept():
    assert SortedAList(25).capacity() == 25


def test_fills_then_grows_by_ten():
    lst = make_list(range(10))
    assert lst.is_full()
    assert lst.capacity() == 10
    lst.insert(10)
    assert lst.capacity() == 20
    assert not lst.is_full()
    assert list(lst) == list(range(11))


@pytest.mark.parametrize("method", SORTS)
@pytest.mark.parametrize("seed", [1, 2, 3])
def test_sorts_ascending(method, seed):
    values = sample(seed)
    lst = make_list(values)
    getattr(lst, method)()
    assert list(lst) == sorted(values)


@pytest.mark.parametrize("method", SORTS)
@pytest.mark.parametrize("seed", [4, 5, 6])
def test_sorts_descending(method, seed):
    values = sample(seed)
    lst = make_list(values)
    getattr(lst, method)(descending=True)
    assert list(lst) == sorted(values, reverse=True)


@pytest.mark.parametrize("method", SORTS)
def test_sort_empty_and_single(method):
    empty = SortedAList()
    getattr(empty, method)()
    assert list(empty) == []
    single = make_list([7])
    getattr(single, method)(descending=True)
    assert list(single) == [7]


@pytest.mark.parametrize("method", SORTS)
def test_sorts_stocks_by_symbol(method):
    stocks = [Stock("Tesla", "TSLA", 564.33), Stock("Apple", "AAPL", 121.73), Stock("Intel", "INTC", 60.78)]
    lst = make_list(stocks)
    getattr(lst, method)()
    assert [s.symbol for s in lst] == ["AAPL", "INTC", "TSLA"]


def test_randomise_is_permutation():
    values = list(range(20))
    lst = make_list(values)
    lst.randomise(random.Random(42))
    assert sorted(lst) == values
    assert len(lst) == 20


def test_randomise_is_deterministic_for_seed():
    first = make_list(range(15))
    second = make_list(range(15))
    first.randomise(random.Random(7))
    second.randomise(random.Random(7))
    assert list(first) == list(second)


def test_randomise_empty_list():
    lst = SortedAList()
    lst.randomise(random.Random(1))
    assert lst.is_empty()