import pytest
from hypothesis import given, strategies as st

from ftlib.linkedlist import LinkedList, Node


def _linked_correctly(lst):
    nodes = list(lst.nodes())
    for before, after in zip(nodes, nodes[1:]):
        if before.next is not after or after.prev is not before:
            return False
    return not nodes or (nodes[0].prev is None and nodes[-1].next is None)


@given(st.lists(st.integers(), max_size=20))
def test_add_back_keeps_order_and_indices(values):
    lst = LinkedList()
    for value in values:
        lst.add_back(Node(value))
    assert list(lst) == values
    assert len(lst) == len(values)
    assert [node.index for node in lst.nodes()] == list(range(len(values)))
    assert _linked_correctly(lst)


@given(st.lists(st.integers(), min_size=1, max_size=20))
def test_add_front_reverses_and_decrements(values):
    lst = LinkedList()
    for value in values:
        lst.add_front(Node(value))
    assert list(lst) == values[::-1]
    indices = [node.index for node in lst.nodes()]
    assert all(b - a == 1 for a, b in zip(indices, indices[1:]))
    assert lst.last().index == 0
    assert _linked_correctly(lst)


def test_none_nodes_are_ignored():
    lst = LinkedList(["a"])
    lst.add_back(None)
    lst.add_front(None)
    assert list(lst) == ["a"]


def test_last_of_empty_list():
    assert LinkedList().last() is None
    assert len(LinkedList()) == 0


def test_last_returns_final_node():
    lst = LinkedList(["a", "b", "c"])
    assert lst.last().content == "c"


def test_remove_middle_calls_delete():
    deleted = []
    lst = LinkedList(["a", "b", "c"])
    middle = lst.head.next
    lst.remove(middle, deleted.append)
    assert deleted == ["b"]
    assert list(lst) == ["a", "c"]
    assert _linked_correctly(lst)


def test_remove_head_moves_head():
    lst = LinkedList(["a", "b"])
    lst.remove(lst.head)
    assert list(lst) == ["b"]
    assert lst.head.prev is None


def test_remove_foreign_node_raises():
    lst = LinkedList(["a"])
    with pytest.raises(ValueError):
        lst.remove(Node("a"))


def test_clear_deletes_every_content():
    deleted = []
    lst = LinkedList(["a", None, "c"])
    lst.clear(deleted.append)
    assert deleted == ["a", "c"]
    assert len(lst) == 0
    assert lst.head is None


def test_apply_visits_in_order():
    seen = []
    LinkedList(["x", "y", "z"]).apply(seen.append)
    assert seen == ["x", "y", "z"]


@given(st.lists(st.integers(), max_size=20))
def test_map_builds_new_list(values):
    original = LinkedList(values)
    mapped = original.map(lambda v: v * 2, None)
    assert list(mapped) == [v * 2 for v in values]
    assert list(original) == values
    assert all(a is not b for a, b in zip(original.nodes(), mapped.nodes()))


def test_map_failure_deletes_partial_results():
    deleted = []

    def f(value):
        if value == "boom":
            raise RuntimeError(value)
        return value.upper()

    lst = LinkedList(["a", "b", "boom", "c"])
    with pytest.raises(RuntimeError):
        lst.map(f, deleted.append)
    assert deleted == ["A", "B"]
    assert list(lst) == ["a", "b", "boom", "c"]