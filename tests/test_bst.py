import pytest

from learnkit.bst import BST, main

DEMO = [10, 5, 15, 3, 7, 12, 18]


@pytest.fixture
def demo_tree():
    return BST.from_values(DEMO)


def test_empty_tree():
    tree = BST()
    assert len(tree) == 0
    assert tree.height() == 0
    assert tree.min_value() is None
    assert tree.in_order() == []
    assert tree.search(1) is False


def test_search_present_and_absent(demo_tree):
    assert demo_tree.search(7) is True
    assert demo_tree.search(20) is False
    demo_tree.insert(20)
    assert demo_tree.search(20) is True


def test_every_inserted_value_is_found(demo_tree):
    assert all(value in demo_tree for value in DEMO)
    assert 4 not in demo_tree


def test_in_order_is_sorted(demo_tree):
    assert demo_tree.in_order() == sorted(DEMO)
    assert list(demo_tree) == sorted(DEMO)


def test_min_value(demo_tree):
    assert demo_tree.min_value() == min(DEMO)


def test_duplicates_are_ignored():
    tree = BST.from_values([5, 5, 3, 3, 8])
    assert len(tree) == 3
    assert tree.in_order() == [3, 5, 8]


def test_len_counts_distinct_values(demo_tree):
    assert len(demo_tree) == len(DEMO)
    demo_tree.insert(DEMO[0])
    assert len(demo_tree) == len(DEMO)


def test_height_of_chain_equals_size():
    values = list(range(50))
    tree = BST.from_values(values)
    assert tree.height() == len(values)
    assert tree.in_order() == values


def test_height_of_demo_tree(demo_tree):
    assert demo_tree.height() == 3
    demo_tree.insert(20)
    assert demo_tree.height() == 4


def test_height_single_node():
    tree = BST()
    tree.insert(42)
    assert tree.height() == 1
    assert tree.min_value() == 42


def test_long_chain_does_not_recurse():
    values = list(range(5000, 0, -1))
    tree = BST.from_values(values)
    assert tree.min_value() == 1
    assert tree.in_order() == sorted(values)
    assert tree.height() == len(values)


def test_main_prints_demo(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Search 7: true"
    assert lines[1] == "Search 20: false"
    assert lines[2] == "Search 20: true"
    assert lines[4] == "Min value: 3"
    assert lines[5] == f"In-order traversal: {sorted(DEMO + [20])}"