import random

import pytest

from algolab.sorting import (
    bubble_sort,
    hoare_quick_sort,
    heap_sort,
    insertion_heap_sort,
    insertion_sort,
    iterative_heap_sort,
    make_heap,
    merge_sort,
    quick_sort,
    quick_sort_chars,
    recursive_insertion_sort,
    recursive_selection_sort,
    selection_sort,
)


def _random_lists():
    rng = random.Random(20240601)
    cases = []
    for size in (2, 3, 5, 8, 13, 40, 90):
        cases.append([rng.randint(-50, 50) for _ in range(size)])
        cases.append([rng.randint(0, 3) for _ in range(size)])
    return cases


FIXED = [
    [],
    [7],
    [2, 1],
    [1, 2],
    [5, 5, 5, 5],
    list(range(20)),
    list(range(20, 0, -1)),
    [0, -1, 1, -1, 0],
]


def test_bubble_example_from_source():
    data = [3, 5, 8, 4, 1, 9, -2]
    expected = [-2, 1, 3, 4, 5, 8, 9]
    results = {
        "bubble": bubble_sort(data),
        "insertion": insertion_sort(data),
        "recursive_insertion": recursive_insertion_sort(data),
        "selection": selection_sort(data),
        "recursive_selection": recursive_selection_sort(data),
        "quick": quick_sort(data),
        "hoare_quick": hoare_quick_sort(data),
        "merge": merge_sort(data),
        "heap": heap_sort(data),
        "insertion_heap": insertion_heap_sort(data),
        "iterative_heap": iterative_heap_sort(data),
    }
    assert results == {name: expected for name in results}


def test_insertion_example_from_source():
    data = [34, 7, 12, 90, 51]
    expected = [7, 12, 34, 51, 90]
    results = {
        "bubble": bubble_sort(data),
        "insertion": insertion_sort(data),
        "recursive_insertion": recursive_insertion_sort(data),
        "selection": selection_sort(data),
        "recursive_selection": recursive_selection_sort(data),
        "quick": quick_sort(data),
        "hoare_quick": hoare_quick_sort(data),
        "merge": merge_sort(data),
        "heap": heap_sort(data),
        "insertion_heap": insertion_heap_sort(data),
        "iterative_heap": iterative_heap_sort(data),
    }
    assert results == {name: expected for name in results}


@pytest.mark.parametrize("data", FIXED + _random_lists())
def test_matches_builtin_sorted(data):
    expected = sorted(data)
    results = {
        "bubble": bubble_sort(data),
        "insertion": insertion_sort(data),
        "recursive_insertion": recursive_insertion_sort(data),
        "selection": selection_sort(data),
        "recursive_selection": recursive_selection_sort(data),
        "quick": quick_sort(data),
        "hoare_quick": hoare_quick_sort(data),
        "merge": merge_sort(data),
        "heap": heap_sort(data),
        "insertion_heap": insertion_heap_sort(data),
        "iterative_heap": iterative_heap_sort(data),
    }
    assert results == {name: expected for name in results}


def test_input_left_untouched():
    data = [4, 2, 9, 1, 1, 0]
    copy = list(data)
    expected = sorted(copy)
    results = {
        "bubble": bubble_sort(data),
        "insertion": insertion_sort(data),
        "recursive_insertion": recursive_insertion_sort(data),
        "selection": selection_sort(data),
        "recursive_selection": recursive_selection_sort(data),
        "quick": quick_sort(data),
        "hoare_quick": hoare_quick_sort(data),
        "merge": merge_sort(data),
        "heap": heap_sort(data),
        "insertion_heap": insertion_heap_sort(data),
        "iterative_heap": iterative_heap_sort(data),
    }
    assert data == copy
    assert results == {name: expected for name in results}


def test_accepts_any_iterable():
    source = (3, 1, 2)
    expected = [1, 2, 3]
    results = {
        "bubble": bubble_sort(x for x in source),
        "insertion": insertion_sort(x for x in source),
        "recursive_insertion": recursive_insertion_sort(x for x in source),
        "selection": selection_sort(x for x in source),
        "recursive_selection": recursive_selection_sort(x for x in source),
        "quick": quick_sort(x for x in source),
        "hoare_quick": hoare_quick_sort(x for x in source),
        "merge": merge_sort(x for x in source),
        "heap": heap_sort(x for x in source),
        "insertion_heap": insertion_heap_sort(x for x in source),
        "iterative_heap": iterative_heap_sort(x for x in source),
    }
    assert results == {name: expected for name in results}


def test_sorts_strings():
    words = ["pear", "apple", "fig", "banana", "apple"]
    expected = sorted(words)
    results = {
        "bubble": bubble_sort(words),
        "insertion": insertion_sort(words),
        "recursive_insertion": recursive_insertion_sort(words),
        "selection": selection_sort(words),
        "recursive_selection": recursive_selection_sort(words),
        "quick": quick_sort(words),
        "hoare_quick": hoare_quick_sort(words),
        "merge": merge_sort(words),
        "heap": heap_sort(words),
        "insertion_heap": insertion_heap_sort(words),
        "iterative_heap": iterative_heap_sort(words),
    }
    assert results == {name: expected for name in results}


def test_quick_sort_chars_polynomial():
    assert quick_sort_chars("POLYNOMIAL") == "".join(sorted("POLYNOMIAL"))


@pytest.mark.parametrize("text", ["", "a", "zz", "hello world", "dcbaABCD"])
def test_quick_sort_chars_is_sorted_permutation(text):
    result = quick_sort_chars(text)
    assert sorted(result) == sorted(text)
    assert list(result) == sorted(result)


def _is_max_heap(items):
    return all(items[(i - 1) // 2] >= items[i] for i in range(1, len(items)))


@pytest.mark.parametrize(
    "data",
    [[45, 33, 35, 12, 16, 24, 34, 10], [], [1], [1, 2, 3, 4, 5, 6, 7]] + _random_lists(),
)
def test_make_heap_property(data):
    heap = make_heap(data)
    assert _is_max_heap(heap)
    assert sorted(heap) == sorted(data)


def test_make_heap_root_is_maximum():
    data = [45, 33, 35, 12, 16, 24, 34, 10]
    assert make_heap(data)[0] == 45


def test_iterative_heap_sort_source_example():
    data = [45, 33, 35, 12, 16, 24, 34, 10]
    assert iterative_heap_sort(data) == sorted(data)


def test_iterative_heap_sort_two_items_out_of_heap_order():
    assert iterative_heap_sort([1, 2, 0]) == [0, 1, 2]


def test_incomparable_items_raise():
    with pytest.raises(TypeError):
        merge_sort([1, "a", 2])