import pytest

from dsalab.linked_list import LinkedList


def test_construction_round_trip():
    values = [4, 8, 15, 16, 23, 42]
    linked = LinkedList(values)
    assert list(linked) == values
    assert len(linked) == len(values)


def test_empty_list():
    linked = LinkedList()
    assert list(linked) == []
    assert len(linked) == 0
    assert 1 not in linked


def test_append_grows_tail():
    linked = LinkedList()
    linked.append(5)
    linked.append(7)
    assert list(linked) == [5, 7]
    assert len(linked) == 2


def test_insert_after_middle_and_tail():
    linked = LinkedList([1, 2, 3])
    linked.insert_after(1, 10)
    assert list(linked) == [1, 10, 2, 3]
    linked.insert_after(4, 20)
    assert list(linked) == [1, 10, 2, 3, 20]
    linked.append(30)
    assert list(linked)[-1] == 30
    assert len(linked) == 6


@pytest.mark.parametrize("position", [0, -1, 4])
def test_insert_after_invalid_position(position):
    linked = LinkedList([1, 2, 3])
    with pytest.raises(IndexError):
        linked.insert_after(position, 9)
    assert list(linked) == [1, 2, 3]


def test_insert_after_on_empty_list():
    with pytest.raises(IndexError):
        LinkedList().insert_after(1, 9)


def test_remove_at_head_middle_tail():
    linked = LinkedList([1, 2, 3, 4])
    assert linked.remove_at(1) == 1
    assert linked.remove_at(2) == 3
    assert linked.remove_at(2) == 4
    assert list(linked) == [2]
    linked.append(6)
    assert list(linked) == [2, 6]


def test_remove_at_last_element_empties_list():
    linked = LinkedList([9])
    assert linked.remove_at(1) == 9
    assert len(linked) == 0
    linked.append(3)
    assert list(linked) == [3]


@pytest.mark.parametrize("position", [0, 3])
def test_remove_at_invalid_position(position):
    linked = LinkedList([1, 2])
    with pytest.raises(IndexError):
        linked.remove_at(position)
    assert len(linked) == 2


def test_remove_value():
    linked = LinkedList([5, 6, 5, 7])
    assert linked.remove_value(5) is True
    assert list(linked) == [6, 5, 7]
    assert linked.remove_value(7) is True
    linked.append(8)
    assert list(linked) == [6, 5, 8]
    assert linked.remove_value(99) is False
    assert len(linked) == 3


def test_update_replaces_value():
    linked = LinkedList([1, 2, 3])
    linked.update(2, 20)
    assert list(linked) == [1, 20, 3]
    with pytest.raises(IndexError):
        linked.update(4, 5)


def test_update_on_empty_list_appends():
    linked = LinkedList()
    linked.update(3, 11)
    assert list(linked) == [11]


def test_index_and_contains():
    linked = LinkedList([7, 8, 9, 8])
    assert linked.index(7) == 1
    assert linked.index(8) == 2
    assert 9 in linked
    assert 10 not in linked
    with pytest.raises(ValueError):
        linked.index(10)


def test_minimum_and_maximum():
    values = [3, -4, 12, 0]
    linked = LinkedList(values)
    assert linked.minimum() == min(values)
    assert linked.maximum() == max(values)
    with pytest.raises(ValueError):
        LinkedList().minimum()
    with pytest.raises(ValueError):
        LinkedList().maximum()


def test_reverse_in_place_and_back():
    values = [1, 2, 3, 4, 5]
    linked = LinkedList(values)
    linked.reverse()
    assert list(linked) == list(reversed(values))
    linked.append(0)
    assert list(linked)[-1] == 0
    linked.reverse()
    assert list(linked) == [0] + values


def test_reverse_empty_list():
    linked = LinkedList()
    linked.reverse()
    assert list(linked) == []


@pytest.mark.parametrize(
    "values, expected",
    [
        ([1, 2, 1], True),
        ([1, 2, 2, 1], True),
        ([1, 2, 3], False),
        ([4], True),
    ],
)
def test_is_palindrome(values, expected):
    linked = LinkedList(values)
    assert linked.is_palindrome() is expected
    assert list(linked) == values


def test_remove_duplicates_keeps_first_occurrence():
    linked = LinkedList([1, 2, 1, 1, 3, 2])
    assert linked.remove_duplicates() == 3
    assert list(linked) == [1, 2, 3]
    assert len(linked) == 3
    linked.append(4)
    assert list(linked) == [1, 2, 3, 4]


def test_remove_duplicates_when_all_distinct():
    linked = LinkedList([3, 1, 2])
    assert linked.remove_duplicates() == 0
    assert list(linked) == [3, 1, 2]


def test_swap_kth():
    linked = LinkedList([1, 2, 3, 4, 5])
    linked.swap_kth(2)
    assert list(linked) == [1, 4, 3, 2, 5]
    linked.swap_kth(1)
    assert list(linked) == [5, 4, 3, 2, 1]


def test_swap_kth_is_its_own_inverse():
    values = [10, 20, 30, 40]
    linked = LinkedList(values)
    linked.swap_kth(3)
    linked.swap_kth(3)
    assert list(linked) == values


@pytest.mark.parametrize("k", [0, 6])
def test_swap_kth_invalid(k):
    with pytest.raises(IndexError):
        LinkedList([1, 2, 3, 4, 5]).swap_kth(k)