from __future__ import annotations

import pytest

from positionless import (
    ArrayCollection,
    ChunkedDeque,
    ChunkedSlice,
    ContractViolation,
    EmptyPartError,
    SegmentedCollection,
    rotate,
)


@pytest.mark.parametrize("chunk_size", [1, 2, 3, 4, 7, 16])
@pytest.mark.parametrize("n", [0, 1, 5, 12])
def test_segmented_count_and_order_match_contiguous(n: int, chunk_size: int) -> None:
    values = list(range(n))
    deque = ChunkedDeque.from_iterable(values, chunk_size=chunk_size)
    plain = ArrayCollection(list(values))

    assert isinstance(deque, SegmentedCollection)
    assert deque.count() == plain.count() == n
    assert deque.to_list() == list(plain)
    assert list(deque) == list(plain)


def test_segments_are_abutting_and_in_order() -> None:
    deque = ChunkedDeque([[1, 2], [], [3], [4, 5, 6]])

    assert deque.segment_count() == 4
    assert [list(s) for s in deque.segments] == [[1, 2], [], [3], [4, 5, 6]]
    assert deque.count() == 6
    assert deque.to_list() == [1, 2, 3, 4, 5, 6]


def test_for_each_until_crosses_segments_and_stops_early() -> None:
    deque = ChunkedDeque([["a", "b"], ["c"], ["d", "e"]])
    visited = []

    def op(v: str) -> bool:
        visited.append(v)
        return v == "d"

    assert deque.for_each_until(op) is True
    assert visited == ["a", "b", "c", "d"]
    assert deque.for_each_until(lambda v: False) is False


def test_reduce_over_segments() -> None:
    deque = ChunkedDeque([[1, 2, 3], [4], [5, 6]])

    assert deque.reduce(0, lambda acc, v: acc + v) == 21


def test_bisection_grows_across_buffer_boundaries() -> None:
    deque = ChunkedDeque([[1, 2], [], [3, 4]])
    b = deque.mutable_bisection()
    for _ in range(3):
        b.grow_prefix_by_1()

    assert list(b.prefix) == [1, 2, 3]
    assert list(b.suffix) == [4]
    assert b.prefix.count() == 3
    assert [list(s) for s in b.prefix.segments] == [[1, 2], [3]]

    b.grow_prefix_by_1()
    assert b.suffix.is_empty()
    with pytest.raises(EmptyPartError):
        b.grow_prefix_by_1()


def test_swap_first_elements_across_buffers() -> None:
    deque = ChunkedDeque([["a", "b"], ["c", "d"]])
    b = deque.mutable_bisection()
    b.grow_prefix_by_1()
    b.grow_prefix_by_1()

    b.swap_first_elements()

    assert deque.buffers == [["c", "b"], ["a", "d"]]


def test_first_writes_into_the_owning_buffer() -> None:
    deque = ChunkedDeque([[], [1, 2]])
    deque.first = 9

    assert deque.buffers == [[], [9, 2]]
    with pytest.raises(EmptyPartError):
        _ = ChunkedDeque([[], []]).first


def test_append_and_appendleft_open_new_buffers_when_full() -> None:
    deque = ChunkedDeque.from_iterable([2, 3], chunk_size=2)
    deque.append(4)
    deque.appendleft(1)
    deque.appendleft(0)

    assert deque.to_list() == [0, 1, 2, 3, 4]
    assert deque.count() == 5
    assert deque.buffers == [[0, 1], [2, 3], [4]]


def test_chunk_size_must_be_positive() -> None:
    with pytest.raises(ValueError):
        ChunkedDeque.from_iterable([1], chunk_size=0)


def test_deque_follows_edits_to_borrowed_buffers() -> None:
    buffers = [[1, 2], [3]]
    deque = ChunkedDeque(buffers)

    buffers[1].append(4)

    assert deque.count() == 4
    assert list(deque) == deque.to_list() == [1, 2, 3, 4]

    rotate(deque, 3)
    assert deque.to_list() == [4, 1, 2, 3]


def test_deque_emptied_through_its_buffers() -> None:
    buffers = [[1], [2]]
    deque = ChunkedDeque(buffers)

    buffers[0].clear()
    buffers[1].clear()

    assert deque.is_empty()
    assert deque.count() == 0
    assert list(deque) == []
    with pytest.raises(EmptyPartError):
        _ = deque.first


def test_chunked_slice_longer_than_its_buffers_is_a_contract_violation() -> None:
    with pytest.raises(ContractViolation):
        ChunkedSlice([[1, 2], [3]], 0, 1, 3)
    with pytest.raises(ContractViolation):
        ChunkedSlice([[1, 2]], 0, 0, -1)

    view = ChunkedSlice([[1, 2], [3]], 0, 1, 2)
    assert list(view) == [2, 3]
