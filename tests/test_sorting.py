import random

import pytest

from dsakit.sorting import (
    bubble_sort,
    counting_sort,
    cycle_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    radix_sort,
    selection_sort,
)

SOURCE_EXAMPLES = [
    [12, 11, 13, 5, 6, 7],
    [12, 11, 13, 5, 6],
    [170, 45, 75, 90, 802, 24, 2, 66],
    [1, 7, 8, 3, 5],
    [1, 8, 5, 2, 4],
]


def _assert_all(results, expected):
    for result in results:
        assert result == expected


@pytest.mark.parametrize("values", SOURCE_EXAMPLES)
def test_source_examples(values):
    results = [
        heap_sort(values),
        insertion_sort(values),
        bubble_sort(values),
        radix_sort(values),
        counting_sort(values),
        cycle_sort(values),
        merge_sort(values),
        quick_sort(values),
        selection_sort(values),
    ]
    _assert_all(results, sorted(values))


def test_heap_example_pinned():
    values = [12, 11, 13, 5, 6, 7]
    expected = [5, 6, 7, 11, 12, 13]
    assert heap_sort(values) == expected
    assert insertion_sort(values) == expected
    assert bubble_sort(values) == expected
    assert radix_sort(values) == expected
    assert counting_sort(values) == expected
    assert cycle_sort(values) == expected
    assert merge_sort(values) == expected
    assert quick_sort(values) == expected
    assert selection_sort(values) == expected


@pytest.mark.parametrize("values", [[], [4]])
def test_empty_and_single(values):
    results = [
        heap_sort(values),
        insertion_sort(values),
        bubble_sort(values),
        radix_sort(values),
        counting_sort(values),
        cycle_sort(values),
        merge_sort(values),
        quick_sort(values),
        selection_sort(values),
    ]
    _assert_all(results, list(values))


def test_random_non_negative_with_duplicates():
    rng = random.Random(7)
    for _ in range(30):
        values = [rng.randrange(0, 50) for _ in range(rng.randrange(0, 40))]
        results = [
            heap_sort(values),
            insertion_sort(values),
            bubble_sort(values),
            radix_sort(values),
            counting_sort(values),
            cycle_sort(values),
            merge_sort(values),
            quick_sort(values),
            selection_sort(values),
        ]
        _assert_all(results, sorted(values))


def test_random_with_negatives():
    rng = random.Random(11)
    for _ in range(30):
        values = [rng.randrange(-100, 100) for _ in range(rng.randrange(0, 40))]
        results = [
            heap_sort(values),
            insertion_sort(values),
            bubble_sort(values),
            cycle_sort(values),
            merge_sort(values),
            quick_sort(values),
            selection_sort(values),
        ]
        _assert_all(results, sorted(values))


def test_input_left_unchanged():
    values = [5, 3, 9, 1, 3]
    snapshot = list(values)
    results = [
        heap_sort(values),
        insertion_sort(values),
        bubble_sort(values),
        radix_sort(values),
        counting_sort(values),
        cycle_sort(values),
        merge_sort(values),
        quick_sort(values),
        selection_sort(values),
    ]
    assert values == snapshot
    _assert_all(results, sorted(snapshot))


def test_accepts_iterables():
    expected = [1, 2, 3]
    assert heap_sort(iter([3, 1, 2])) == expected
    assert insertion_sort(iter([3, 1, 2])) == expected
    assert bubble_sort(iter([3, 1, 2])) == expected
    assert radix_sort(iter([3, 1, 2])) == expected
    assert counting_sort(iter([3, 1, 2])) == expected
    assert cycle_sort(iter([3, 1, 2])) == expected
    assert merge_sort(iter([3, 1, 2])) == expected
    assert quick_sort(iter([3, 1, 2])) == expected
    assert selection_sort(iter([3, 1, 2])) == expected


@pytest.mark.parametrize("values", [list(range(200))[::-1], list(range(200))])
def test_reverse_and_sorted_inputs(values):
    ascending = list(range(200))
    results = [
        heap_sort(values),
        insertion_sort(values),
        bubble_sort(values),
        cycle_sort(values),
        merge_sort(values),
        quick_sort(values),
        selection_sort(values),
    ]
    _assert_all(results, ascending)


def test_radix_sort_rejects_negative_values():
    with pytest.raises(ValueError):
        radix_sort([3, -1, 2])


def test_counting_sort_rejects_negative_values():
    with pytest.raises(ValueError):
        counting_sort([3, -1, 2])


def test_all_zeros():
    assert radix_sort([0, 0, 0]) == [0, 0, 0]
    assert counting_sort([0, 0, 0]) == [0, 0, 0]