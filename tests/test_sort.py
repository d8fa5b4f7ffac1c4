import random

import pytest

from dsexercises.seqlist import SeqList
from dsexercises.sort import bubble_sort, select_sort, shell_sort

SORTERS = [bubble_sort, select_sort, shell_sort]

CASES = [
    [],
    [1],
    [2, 1],
    [3, 2, 1],
    [5, 1, 4, 2, 8, 0, 2],
    [1, 1, 1, 1],
    [9, -3, 7, -3, 0, 12, 5, 5, 6],
    list(range(20, 0, -1)),
]

FRUITS = ["pear", "apple", "fig", "banana"]
SORTED_FRUITS = ["apple", "banana", "fig", "pear"]


@pytest.mark.parametrize("sorter", SORTERS)
@pytest.mark.parametrize("values", CASES)
def test_sorts_seqlist(sorter, values):
    data = SeqList(values)
    sorter(data)
    assert list(data) == sorted(values)


def test_bubble_sort_plain_list():
    values = list(FRUITS)
    bubble_sort(values)
    assert values == SORTED_FRUITS


def test_select_sort_plain_list():
    values = list(FRUITS)
    select_sort(values)
    assert values == SORTED_FRUITS


def test_shell_sort_plain_list():
    values = list(FRUITS)
    shell_sort(values)
    assert values == SORTED_FRUITS


@pytest.mark.parametrize("sorter", SORTERS)
def test_random_data_is_permutation_and_ordered(sorter):
    rng = random.Random(1234)
    for _ in range(20):
        values = [rng.randint(-50, 50) for _ in range(rng.randint(0, 40))]
        data = SeqList(values)
        sorter(data)
        result = list(data)
        assert sorted(result) == sorted(values)
        assert all(a <= b for a, b in zip(result, result[1:]))


@pytest.mark.parametrize("sorter", SORTERS)
def test_sorted_input_unchanged(sorter):
    values = [1, 2, 3, 4, 5]
    data = SeqList(values)
    sorter(data)
    assert list(data) == values