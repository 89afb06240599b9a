import pytest

from raycub.lists import LinkedList


def test_add_back_keeps_order():
    items = LinkedList()
    for value in ("a", "b", "c"):
        items.add_back(value)
    assert list(items) == ["a", "b", "c"]
    assert len(items) == 3


def test_add_front_reverses_order():
    items = LinkedList()
    for value in (1, 2, 3):
        items.add_front(value)
    assert list(items) == [3, 2, 1]


def test_constructor_from_iterable():
    assert list(LinkedList([4, 5, 6])) == [4, 5, 6]


def test_last_node():
    items = LinkedList(["x", "y"])
    assert items.last().content == "y"
    assert LinkedList().last() is None


def test_empty_list_length():
    assert len(LinkedList()) == 0
    assert list(LinkedList()) == []


def test_clear_calls_delete_in_order():
    deleted = []
    items = LinkedList([1, 2, 3])
    items.clear(deleted.append)
    assert deleted == [1, 2, 3]
    assert len(items) == 0


def test_remove_first():
    deleted = []
    items = LinkedList(["a", "b"])
    items.remove_first(deleted.append)
    assert deleted == ["a"]
    assert list(items) == ["b"]


def test_remove_first_on_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().remove_first()


def test_for_each_visits_all():
    seen = []
    LinkedList([3, 1, 2]).for_each(seen.append)
    assert seen == [3, 1, 2]


def test_map_builds_new_list():
    source = LinkedList([1, 2, 3])
    mapped = source.map(lambda v: v * 10)
    assert list(mapped) == [10, 20, 30]
    assert list(source) == [1, 2, 3]


def test_map_failure_deletes_partial_results():
    deleted = []
    source = LinkedList([1, 2, 3])
    with pytest.raises(ValueError):
        source.map(lambda v: None if v == 3 else str(v), deleted.append)
    assert deleted == ["1", "2"]


def test_map_of_empty_list_is_empty():
    assert list(LinkedList().map(lambda v: v)) == []