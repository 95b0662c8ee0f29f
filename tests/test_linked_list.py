import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.linked_list import LinkedList


def test_construction_round_trip():
    values = [4, 8, 15, 16, 23, 42]
    linked = LinkedList(values)
    assert list(linked) == values
    assert len(linked) == len(values)


def test_empty_list():
    linked = LinkedList()
    assert list(linked) == []
    assert len(linked) == 0
    assert str(linked) == ""


def test_str_separates_with_comma_space():
    assert str(LinkedList([1, 2, 3])) == "1, 2, 3"


def test_append_onto_empty_and_nonempty():
    linked = LinkedList()
    linked.append(5)
    linked.append(6)
    assert list(linked) == [5, 6]
    assert len(linked) == 2


@pytest.mark.parametrize("position", [1, 2, 3, 4])
def test_insert_positions(position):
    values = [10, 20, 30]
    linked = LinkedList(values)
    linked.insert(position, 99)
    expected = list(values)
    expected.insert(position - 1, 99)
    assert list(linked) == expected
    assert len(linked) == 4


def test_insert_at_end_keeps_tail_for_append():
    linked = LinkedList([1, 2])
    linked.insert(3, 3)
    linked.append(4)
    assert list(linked) == [1, 2, 3, 4]


def test_insert_into_empty_list():
    linked = LinkedList()
    linked.insert(1, 7)
    linked.append(8)
    assert list(linked) == [7, 8]


@pytest.mark.parametrize("position", [0, -1, 5])
def test_insert_out_of_range(position):
    linked = LinkedList([1, 2, 3])
    with pytest.raises(IndexError):
        linked.insert(position, 0)
    assert list(linked) == [1, 2, 3]


@pytest.mark.parametrize("position", [1, 2, 3])
def test_delete_positions(position):
    values = [10, 20, 30]
    linked = LinkedList(values)
    removed = linked.delete(position)
    assert removed == values[position - 1]
    expected = list(values)
    del expected[position - 1]
    assert list(linked) == expected


def test_delete_last_then_append_uses_new_tail():
    linked = LinkedList([1, 2, 3])
    linked.delete(3)
    linked.append(9)
    assert list(linked) == [1, 2, 9]


def test_delete_only_item_empties_list():
    linked = LinkedList([1])
    assert linked.delete(1) == 1
    assert len(linked) == 0
    linked.append(2)
    assert list(linked) == [2]


def test_delete_from_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().delete(1)


@pytest.mark.parametrize("position", [0, 4])
def test_delete_out_of_range(position):
    linked = LinkedList([1, 2, 3])
    with pytest.raises(IndexError):
        linked.delete(position)


def test_pop_removes_last():
    linked = LinkedList([1, 2, 3])
    assert linked.pop() == 3
    assert list(linked) == [1, 2]
    linked.append(4)
    assert list(linked) == [1, 2, 4]


def test_pop_single_and_empty():
    linked = LinkedList(["a"])
    assert linked.pop() == "a"
    with pytest.raises(IndexError):
        linked.pop()


def test_reverse_relinks_and_keeps_tail_correct():
    linked = LinkedList([1, 2, 3])
    linked.reverse()
    assert list(linked) == [3, 2, 1]
    linked.append(0)
    assert list(linked) == [3, 2, 1, 0]


def test_reverse_empty():
    linked = LinkedList()
    linked.reverse()
    assert list(linked) == []


@given(st.lists(st.integers()))
def test_reverse_matches_reversed(values):
    linked = LinkedList(values)
    linked.reverse()
    assert list(linked) == values[::-1]
    linked.reverse()
    assert list(linked) == values


@given(st.lists(st.integers(), max_size=50))
def test_reverse_values_matches_reverse(values):
    by_links = LinkedList(values)
    by_stack = LinkedList(values)
    by_links.reverse()
    by_stack.reverse_values()
    assert list(by_stack) == list(by_links) == values[::-1]


def test_merge_moves_nodes_and_empties_other():
    first = LinkedList([1, 2])
    second = LinkedList([3, 4])
    first.merge(second)
    assert list(first) == [1, 2, 3, 4]
    assert len(first) == 4
    assert list(second) == []
    assert len(second) == 0
    first.append(5)
    assert list(first) == [1, 2, 3, 4, 5]


def test_merge_into_empty_and_with_empty():
    empty = LinkedList()
    other = LinkedList([7, 8])
    empty.merge(other)
    assert list(empty) == [7, 8]
    empty.merge(LinkedList())
    assert list(empty) == [7, 8]


def test_merge_with_itself_raises():
    linked = LinkedList([1])
    with pytest.raises(ValueError):
        linked.merge(linked)


def test_contains():
    linked = LinkedList([23, 45, 12, 67, 34])
    assert 67 in linked
    assert 5 not in linked
    assert 1 not in LinkedList()


@given(st.lists(st.integers()), st.integers())
def test_contains_matches_list(values, key):
    assert (key in LinkedList(values)) == (key in values)