import pytest

from learnkit.search import binary_search, linear_search, main

SORTED = [1, 3, 5, 7, 9, 11]


def test_linear_search_examples():
    assert linear_search([3, 5, 7], 5) == 1
    assert linear_search([3, 5, 7], 9) == -1


def test_linear_search_empty():
    assert linear_search([], 1) == -1


def test_linear_search_first_match():
    items = ["a", "b", "a", "c"]
    assert linear_search(items, "a") == items.index("a")


def test_linear_search_accepts_iterators():
    assert linear_search(iter([4, 8, 15]), 15) == 2


def test_binary_search_examples():
    assert binary_search(SORTED, 5) == 2
    assert binary_search(SORTED, 6) == -1


def test_binary_search_empty():
    assert binary_search([], 3) == -1


@pytest.mark.parametrize("size", range(0, 12))
def test_binary_search_finds_every_element(size):
    items = list(range(0, size * 2, 2))
    for value in items:
        index = binary_search(items, value)
        assert items[index] == value


@pytest.mark.parametrize("size", range(0, 12))
def test_binary_search_misses_absent_values(size):
    items = list(range(0, size * 2, 2))
    for value in range(-1, size * 2 + 1, 2):
        assert binary_search(items, value) == -1


def test_binary_search_agrees_with_linear_on_distinct_items():
    items = [2, 4, 8, 16, 32, 64, 128]
    for value in items:
        assert binary_search(items, value) == linear_search(items, value)


def test_binary_search_on_strings():
    words = ["apple", "banana", "cherry", "date"]
    assert words[binary_search(words, "cherry")] == "cherry"
    assert binary_search(words, "fig") == -1