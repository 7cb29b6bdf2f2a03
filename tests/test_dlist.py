import pytest

from spaceshooter.dlist import DList, DNode


def build(*values):
    lst = DList()
    for value in reversed(values):
        lst.insert_head(DNode(value))
    return lst


def values(lst):
    return [node.value for node in lst]


def test_insert_head_orders_front_first():
    lst = build(1, 2, 3)
    assert values(lst) == [1, 2, 3]
    assert len(lst) == 3
    assert lst.head.prev is None


def test_empty_list():
    lst = DList()
    assert len(lst) == 0
    assert lst.find(1) is None


def test_links_are_consistent():
    lst = build(1, 2, 3)
    nodes = list(lst)
    for left, right in zip(nodes, nodes[1:]):
        assert left.next is right
        assert right.prev is left


def test_insert_after_middle():
    lst = build(1, 3)
    anchor = lst.find(1)
    lst.insert_after(anchor, DNode(2))
    assert values(lst) == [1, 2, 3]
    assert lst.find(3).prev is lst.find(2)


def test_insert_after_tail():
    lst = build(1)
    lst.insert_after(lst.head, DNode(2))
    assert values(lst) == [1, 2]


def test_find_returns_first_match():
    lst = build(5, 7, 7)
    assert lst.find(7) is lst.head.next


def test_remove_head_and_middle():
    lst = build(1, 2, 3)
    lst.remove(lst.find(2))
    assert values(lst) == [1, 3]
    lst.remove(lst.head)
    assert values(lst) == [3]
    assert lst.head.prev is None


def test_remove_on_empty_is_noop():
    lst = DList()
    lst.remove(DNode(1))
    assert len(lst) == 0


def test_detach_returns_node():
    lst = build(1, 2, 3)
    node = lst.find(3)
    assert lst.detach(node) is node
    assert values(lst) == [1, 2]
    assert node.next is None and node.prev is None


def test_detach_missing_raises():
    lst = build(1, 2)
    with pytest.raises(ValueError):
        lst.detach(DNode(1))


def test_clear():
    lst = build(1, 2, 3)
    lst.clear()
    assert lst.head is None
    assert values(lst) == []