# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
Chunked deque.

A deque whose elements live in an ordered list of independent buffers.
It is a SegmentedCollection (each buffer is a segment) and also a
MutableCollection whose bisections grow and swap across buffer
boundaries, so the rotation engine runs over it unchanged.

A position is a (buffer, offset) cursor. Cursors of non-empty views are
kept normalized: they always point at an existing element, skipping
empty buffers.
"""

from typing import Iterable, List, MutableSequence, Tuple

from ..collection.base import Collection, T
from ..collection.mutable import MutableCollection, MutableCollectionBisection
from ..collection.segmented import SegmentedCollection
from ..core.constants import DEFAULT_CHUNK_SIZE
from ..core.errors import ContractViolation, EmptyPartError
from .array import ArrayCollection, ArraySlice


def _normalize(
    buffers: List[MutableSequence[T]], seg: int, off: int
) -> Tuple[int, int]:
    """Move a cursor forward past exhausted and empty buffers."""
    while seg < len(buffers) and off >= len(buffers[seg]):
        seg += 1
        off = 0
    return seg, off


class ChunkedSlice(SegmentedCollection[T], MutableCollection[T]):
    """A mutable view of `length` elements starting at a cursor."""

    def __init__(
        self,
        buffers: List[MutableSequence[T]],
        seg: int,
        off: int,
        length: int,
        check: bool = True,
    ):
        """
        Args:
            buffers: Backing buffers, borrowed for the view's lifetime
            seg: Buffer index of the first element
            off: Offset of the first element within that buffer
            length: Number of elements covered
            check: Validate that the cursor and length fit the buffers.
                   Bisections pass False for parts derived from a checked view.

        Raises:
            ContractViolation: If the view reaches past the buffers
        """
        if check:
            _check_bounds(buffers, seg, off, length)
        self._buffers = buffers
        self._seg, self._off = _normalize(buffers, seg, off)
        self._length = length

    def is_empty(self) -> bool:
        return self._length == 0

    @property
    def first(self) -> T:
        if self._length == 0:
            raise EmptyPartError("first")
        return self._buffers[self._seg][self._off]

    @first.setter
    def first(self, value: T) -> None:
        if self._length == 0:
            raise EmptyPartError("first")
        self._buffers[self._seg][self._off] = value

    def bisection(self) -> "ChunkedBisection[T]":
        return ChunkedBisection(self._buffers, self._seg, self._off, self._length)

    def mutable_bisection(self) -> "ChunkedBisection[T]":
        return ChunkedBisection(self._buffers, self._seg, self._off, self._length)

    @property
    def segments(self) -> Collection[Collection[T]]:
        """The covered run of each buffer, in order, empty buffers skipped."""
        pieces: List[ArraySlice[T]] = []
        seg, off, remaining = self._seg, self._off, self._length
        while remaining > 0:
            buf = self._buffers[seg]
            take = min(len(buf) - off, remaining)
            pieces.append(ArraySlice(buf, off, off + take))
            remaining -= take
            seg, off = _normalize(self._buffers, seg + 1, 0)
        return ArrayCollection(pieces)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


def _check_bounds(
    buffers: List[MutableSequence[T]], seg: int, off: int, length: int
) -> None:
    """Raise ContractViolation unless `length` elements exist from the cursor."""
    if seg < 0 or off < 0 or length < 0:
        raise ContractViolation(
            "ChunkedSlice", f"negative cursor or length ({seg}, {off}, {length})"
        )
    available = sum(len(b) for b in buffers[seg:]) - off
    if length > available:
        raise ContractViolation(
            "ChunkedSlice",
            f"length {length} exceeds the {max(available, 0)} elements "
            f"from cursor ({seg}, {off})",
        )


class ChunkedBisection(MutableCollectionBisection[T]):
    """
    A bisection of a chunked view.

    Tracks the view's start cursor, the split cursor and the prefix
    length. Swapping uses the generic exchange of the parts' first
    elements, which may sit in different buffers.
    """

    def __init__(
        self,
        buffers: List[MutableSequence[T]],
        seg: int,
        off: int,
        length: int,
    ):
        self._buffers = buffers
        self._start = _normalize(buffers, seg, off)
        self._split = self._start
        self._prefix_length = 0
        self._length = length

    @property
    def parts(self) -> Tuple[ChunkedSlice[T], ChunkedSlice[T]]:
        start_seg, start_off = self._start
        split_seg, split_off = self._split
        return (
            ChunkedSlice(
                self._buffers,
                start_seg,
                start_off,
                self._prefix_length,
                check=False,
            ),
            ChunkedSlice(
                self._buffers,
                split_seg,
                split_off,
                self._length - self._prefix_length,
                check=False,
            ),
        )

    def grow_prefix_by_1(self) -> None:
        if self._prefix_length >= self._length:
            raise EmptyPartError("grow_prefix_by_1", "suffix")
        seg, off = self._split
        self._split = _normalize(self._buffers, seg, off + 1)
        self._prefix_length += 1


class ChunkedDeque(ChunkedSlice[T]):
    """
    A double-ended queue stored as an ordered list of buffers.

    The buffers are borrowed, so the caller may keep editing them. Every
    read goes back to the buffers; no length or cursor is cached.

    Usage:
        d = ChunkedDeque.from_iterable(range(10), chunk_size=4)
        rotate(d, 3)
        d.to_list()  # [3, 4, 5, 6, 7, 8, 9, 0, 1, 2]
    """

    def __init__(
        self,
        buffers: List[MutableSequence[T]],
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ):
        """
        Args:
            buffers: Backing buffers, in element order. Borrowed, not copied.
            chunk_size: Capacity used for buffers created by append/appendleft
        """
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be >= 1, got {chunk_size}")
        # No ChunkedSlice state: the whole-deque view is rebuilt per call
        self._buffers = buffers
        self.chunk_size = chunk_size

    @classmethod
    def from_iterable(
        cls,
        items: Iterable[T],
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> "ChunkedDeque[T]":
        """Build a deque, filling buffers of `chunk_size` elements in order."""
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be >= 1, got {chunk_size}")
        values = list(items)
        buffers = [
            values[i : i + chunk_size] for i in range(0, len(values), chunk_size)
        ]
        return cls(buffers, chunk_size=chunk_size)

    @property
    def buffers(self) -> List[MutableSequence[T]]:
        return self._buffers

    def is_empty(self) -> bool:
        return all(len(b) == 0 for b in self._buffers)

    @property
    def first(self) -> T:
        return self._whole().first

    @first.setter
    def first(self, value: T) -> None:
        self._whole().first = value

    def bisection(self) -> ChunkedBisection[T]:
        return self._whole().bisection()

    def mutable_bisection(self) -> ChunkedBisection[T]:
        return self._whole().mutable_bisection()

    @property
    def segments(self) -> Collection[Collection[T]]:
        """Every buffer, in order, empty ones included."""
        return ArrayCollection([ArrayCollection(b) for b in self._buffers])

    def append(self, value: T) -> None:
        """Add `value` at the back, opening a new buffer when the last is full."""
        if not self._buffers or len(self._buffers[-1]) >= self.chunk_size:
            self._buffers.append([])
        self._buffers[-1].append(value)

    def appendleft(self, value: T) -> None:
        """Add `value` at the front, opening a new buffer when the first is full."""
        if not self._buffers or len(self._buffers[0]) >= self.chunk_size:
            self._buffers.insert(0, [])
        self._buffers[0].insert(0, value)

    def to_list(self) -> List[T]:
        out: List[T] = []
        self.for_each(out.append)
        return out

    def _whole(self) -> ChunkedSlice[T]:
        return ChunkedSlice(
            self._buffers, 0, 0, sum(len(b) for b in self._buffers), check=False
        )


__all__ = ["ChunkedSlice", "ChunkedBisection", "ChunkedDeque"]
