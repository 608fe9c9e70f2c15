import pytest

from kaige_ecs.indexed import IndexedIter, ZippedSlices


def test_iter_slice_single():
    values = [1, 2, 3, 4, 5]
    collected = [x for (x,) in IndexedIter(ZippedSlices(values))]
    assert collected == values


def test_iter_slice_single_rev():
    values = [1, 2, 3, 4, 5]
    it = IndexedIter(ZippedSlices(values))
    collected = []
    while (item := it.next_back()) is not None:
        collected.insert(0, item[0])
    assert collected == values


def test_iter_slice_single_empty():
    it = IndexedIter(ZippedSlices([]))
    assert next(it, None) is None


def test_iter_slice_multiple():
    a = [1, 2, 3, 4, 5]
    b = [1, 2, 3, 4, 5]
    collected = list(IndexedIter(ZippedSlices(a, b)))
    assert len(collected) == 5
    assert collected == list(zip(a, b))


def test_iter_slice_multiple_jagged():
    a = [1, 2, 3, 4, 5, 6, 7]
    b = [1, 2, 3, 4, 5]
    collected = list(IndexedIter(ZippedSlices(a, b)))
    assert len(collected) == 5
    assert collected == list(zip(a, b))


def test_plain_sequence():
    assert list(IndexedIter(["a", "b", "c"])) == ["a", "b", "c"]


def test_len_and_size_hint_track_progress():
    it = IndexedIter([10, 20, 30])
    assert len(it) == 3
    next(it)
    assert len(it) == 2
    assert it.size_hint() == (2, 2)
    it.next_back()
    assert len(it) == 1


def test_nth():
    it = IndexedIter([10, 20, 30, 40])
    assert it.nth(1) == 20
    assert next(it) == 30
    assert it.nth(5) is None
    assert len(it) == 0


def test_nth_back():
    it = IndexedIter([10, 20, 30, 40])
    assert it.nth_back(1) == 30
    assert it.next_back() == 20
    assert it.nth_back(3) is None


def test_last_and_count():
    assert IndexedIter([1, 2, 3]).last() == 3
    assert IndexedIter([]).last() is None
    it = IndexedIter([1, 2, 3])
    next(it)
    assert it.count() == 2
    assert len(it) == 0


def test_get_unchecked_uses_source_positions():
    it = IndexedIter([5, 6, 7])
    next(it)
    assert it.get_unchecked(0) == 5


def test_split_at_after_progress():
    it = IndexedIter(ZippedSlices([1, 2, 3, 4, 5, 6], "abcdef"))
    next(it)
    left, right = it.split_at(2)
    assert list(left) == [(2, "b"), (3, "c")]
    assert list(right) == [(4, "d"), (5, "e"), (6, "f")]


def test_split_at_jagged_right_length():
    it = IndexedIter(ZippedSlices([1, 2, 3, 4, 5, 6, 7], [1, 2, 3, 4, 5]))
    left, right = it.split_at(2)
    assert len(left) == 2
    assert len(right) == 3
    assert list(right) == [(3, 3), (4, 4), (5, 5)]


def test_split_at_out_of_range():
    it = IndexedIter([1, 2])
    with pytest.raises(IndexError):
        it.split_at(3)


def test_zipped_slices_len_and_getitem():
    z = ZippedSlices([1, 2, 3], "xy")
    assert len(z) == 2
    assert z[1] == (2, "y")


def test_zipped_slices_split_writes_through():
    data = [0, 0, 0, 0]
    left, right = ZippedSlices(data).split_at(2)
    assert len(left) == 2 and len(right) == 2
    assert right[0] == (0,)
    with pytest.raises(TypeError):
        ZippedSlices()


def test_nested_indexed_iter_as_source():
    inner = IndexedIter([1, 2, 3])
    z = ZippedSlices(inner, [4, 5, 6])
    assert list(IndexedIter(z)) == [(1, 4), (2, 5), (3, 6)]