from dsalab.circular import CircularList


def test_append_and_iterate():
    values = [4, 8, 15, 16]
    ring = CircularList(values)
    assert list(ring) == values
    assert len(ring) == len(values)


def test_reversed_walks_backwards_from_last():
    values = [1, 2, 3, 4]
    ring = CircularList(values)
    assert list(reversed(ring)) == values[::-1]


def test_empty_ring():
    ring = CircularList()
    assert list(ring) == []
    assert list(reversed(ring)) == []
    assert len(ring) == 0


def test_single_element_ring():
    ring = CircularList([42])
    assert list(ring) == [42]
    assert list(reversed(ring)) == [42]


def test_remove_odd_positions_keeps_even_positions():
    values = [10, 20, 30, 40, 50, 60, 70]
    ring = CircularList(values)
    removed = ring.remove_odd_positions()
    assert list(ring) == values[1::2]
    assert removed == len(values) - len(ring)
    assert list(reversed(ring)) == values[1::2][::-1]


def test_remove_odd_positions_even_length():
    ring = CircularList([1, 2, 3, 4])
    assert ring.remove_odd_positions() == 2
    assert list(ring) == [2, 4]


def test_remove_odd_positions_single_element_empties():
    ring = CircularList([5])
    assert ring.remove_odd_positions() == 1
    assert len(ring) == 0
    assert list(ring) == []


def test_remove_odd_positions_on_empty():
    ring = CircularList()
    assert ring.remove_odd_positions() == 0
    assert list(ring) == []


def test_append_after_removal_keeps_ring_consistent():
    ring = CircularList([1, 2, 3])
    ring.remove_odd_positions()
    ring.append(9)
    assert list(ring) == [2, 9]
    assert list(reversed(ring)) == [9, 2]


def test_append_after_emptying():
    ring = CircularList([1])
    ring.remove_odd_positions()
    ring.append(6)
    ring.append(7)
    assert list(ring) == [6, 7]
    assert list(reversed(ring)) == [7, 6]