import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsalgo.sorting import (
    bubble_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    radix_sort,
    selection_sort,
    shell_sort,
)


@given(values=st.lists(st.integers(min_value=0, max_value=10**6), max_size=60))
def test_sorts_non_negative(values):
    expected = sorted(values)

    data = list(values)
    assert bubble_sort(data) is data
    assert data == expected

    data = list(values)
    assert heap_sort(data) is data
    assert data == expected

    data = list(values)
    assert insertion_sort(data) is data
    assert data == expected

    data = list(values)
    assert merge_sort(data) is data
    assert data == expected

    data = list(values)
    assert quick_sort(data) is data
    assert data == expected

    data = list(values)
    assert radix_sort(data) is data
    assert data == expected

    data = list(values)
    assert selection_sort(data) is data
    assert data == expected

    data = list(values)
    assert shell_sort(data) is data
    assert data == expected


@given(values=st.lists(st.integers(min_value=-1000, max_value=1000), max_size=60))
def test_comparison_sorts_handle_negatives(values):
    expected = sorted(values)
    assert bubble_sort(list(values)) == expected
    assert heap_sort(list(values)) == expected
    assert insertion_sort(list(values)) == expected
    assert merge_sort(list(values)) == expected
    assert quick_sort(list(values)) == expected
    assert selection_sort(list(values)) == expected
    assert shell_sort(list(values)) == expected


def test_empty_and_single():
    assert bubble_sort([]) == [] and bubble_sort([7]) == [7]
    assert heap_sort([]) == [] and heap_sort([7]) == [7]
    assert insertion_sort([]) == [] and insertion_sort([7]) == [7]
    assert merge_sort([]) == [] and merge_sort([7]) == [7]
    assert quick_sort([]) == [] and quick_sort([7]) == [7]
    assert radix_sort([]) == [] and radix_sort([7]) == [7]
    assert selection_sort([]) == [] and selection_sort([7]) == [7]
    assert shell_sort([]) == [] and shell_sort([7]) == [7]


def test_sample_with_duplicates():
    data = [56, 12, 99, 45, 66, 12, 17, 4, 5, 9, 1, 100, 0, 56]
    expected = [0, 1, 4, 5, 9, 12, 12, 17, 45, 56, 56, 66, 99, 100]
    assert bubble_sort(list(data)) == expected
    assert heap_sort(list(data)) == expected
    assert insertion_sort(list(data)) == expected
    assert merge_sort(list(data)) == expected
    assert quick_sort(list(data)) == expected
    assert radix_sort(list(data)) == expected
    assert selection_sort(list(data)) == expected
    assert shell_sort(list(data)) == expected


def test_already_sorted_and_reversed():
    ascending = list(range(300))
    descending = list(reversed(ascending))
    assert bubble_sort(list(ascending)) == ascending
    assert bubble_sort(list(descending)) == ascending
    assert heap_sort(list(ascending)) == ascending
    assert heap_sort(list(descending)) == ascending
    assert insertion_sort(list(ascending)) == ascending
    assert insertion_sort(list(descending)) == ascending
    assert merge_sort(list(ascending)) == ascending
    assert merge_sort(list(descending)) == ascending
    assert quick_sort(list(ascending)) == ascending
    assert quick_sort(list(descending)) == ascending
    assert radix_sort(list(ascending)) == ascending
    assert radix_sort(list(descending)) == ascending
    assert selection_sort(list(ascending)) == ascending
    assert selection_sort(list(descending)) == ascending
    assert shell_sort(list(ascending)) == ascending
    assert shell_sort(list(descending)) == ascending


def test_radix_sort_rejects_negative():
    with pytest.raises(ValueError):
        radix_sort([3, -1, 2])


def test_radix_sort_multi_digit():
    data = [456, 10, 134, 1, 112, 91, 22]
    assert radix_sort(list(data)) == [1, 10, 22, 91, 112, 134, 456]