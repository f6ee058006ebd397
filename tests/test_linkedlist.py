import pytest

from pipex.linkedlist import LinkedList, Node


def test_new_list_from_items_keeps_order():
    items = ["A", "B", "C"]
    assert list(LinkedList(items)) == items


def test_empty_list_has_no_length_and_no_last():
    empty = LinkedList()
    assert len(empty) == 0
    assert empty.last() is None
    assert list(empty) == []


def test_push_front_order():
    lst = LinkedList()
    lst.push_back("Added first")
    lst.push_back("Added second")
    lst.push_front("Added third")
    lst.push_front("Added last")
    assert list(lst) == ["Added last", "Added third", "Added first", "Added second"]


def test_push_back_order():
    lst = LinkedList(["Added first", "Added second", "Added third"])
    lst.push_back("Added last")
    assert list(lst) == ["Added first", "Added second", "Added third", "Added last"]


def test_push_returns_linked_node():
    lst = LinkedList()
    node = lst.push_back("x")
    assert isinstance(node, Node)
    assert node.content == "x"
    assert lst.head is node
    front = lst.push_front("y")
    assert front.next is node


def test_len_counts_nodes():
    lst = LinkedList([0, 1, 2, 3])
    assert len(lst) == 4
    lst.push_front(-1)
    assert len(lst) == 5


def test_last_returns_final_node():
    lst = LinkedList(["a", "b", "c", "d"])
    tail = lst.last()
    assert tail.content == "d"
    assert tail.next is None


def test_remove_first_calls_delete_and_returns_content():
    deleted = []
    lst = LinkedList([0, 1, 2])
    assert lst.remove_first(deleted.append) == 0
    assert deleted == [0]
    assert list(lst) == [1, 2]


def test_remove_first_without_delete():
    lst = LinkedList(["only"])
    assert lst.remove_first() == "only"
    assert len(lst) == 0


def test_remove_first_on_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().remove_first()


def test_clear_deletes_every_content_in_order():
    deleted = []
    items = [0, 1, 2, 3]
    lst = LinkedList(items)
    lst.clear(deleted.append)
    assert deleted == items
    assert lst.head is None
    assert len(lst) == 0


def test_clear_without_delete_empties_list():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []


def test_iterate_visits_each_content():
    cells = [[0], [1], [2], [3]]
    lst = LinkedList(cells)

    def add_one(cell):
        cell[0] += 1

    lst.iterate(add_one)
    assert [cell[0] for cell in lst] == [1, 2, 3, 4]


def test_map_builds_new_list_and_leaves_original():
    original = LinkedList([0, 1, 2, 3])
    mapped = original.map(lambda value: value + 1)
    assert list(mapped) == [1, 2, 3, 4]
    assert list(original) == [0, 1, 2, 3]
    assert mapped.head is not original.head


def test_map_of_empty_list_is_empty():
    assert len(LinkedList().map(str)) == 0


def test_map_failure_deletes_produced_contents():
    deleted = []

    def func(value):
        if value == 2:
            raise RuntimeError("boom")
        return value * 10

    with pytest.raises(RuntimeError):
        LinkedList([0, 1, 2, 3]).map(func, deleted.append)
    assert deleted == [0, 10]


def test_repr_shows_contents():
    assert repr(LinkedList(["a", "b"])) == "LinkedList(['a', 'b'])"