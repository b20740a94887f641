# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
Contiguous array views.

ArraySlice adapts any MutableSequence (list, bytearray, array.array) to
the MutableCollection contract as a (storage, start, end) triple. Views
never copy: every write lands in the caller's storage.
"""

from typing import MutableSequence, Optional, Tuple

from ..collection.base import T
from ..collection.mutable import MutableCollection, MutableCollectionBisection
from ..core.errors import ContractViolation, EmptyPartError


class ArraySlice(MutableCollection[T]):
    """A mutable view of storage[start:end]."""

    def __init__(
        self,
        storage: MutableSequence[T],
        start: int = 0,
        end: Optional[int] = None,
    ):
        """
        Args:
            storage: Backing sequence, borrowed for the view's lifetime
            start: Offset of the first element in the view
            end: Offset one past the last element (defaults to len(storage))

        Raises:
            ContractViolation: If not 0 <= start <= end <= len(storage)
        """
        if end is None:
            end = len(storage)
        if not 0 <= start <= end <= len(storage):
            raise ContractViolation(
                "ArraySlice",
                f"bounds [{start}, {end}) outside storage of length {len(storage)}",
            )
        self._storage = storage
        self._start = start
        self._end = end

    @property
    def start(self) -> int:
        return self._start

    @property
    def end(self) -> int:
        return self._end

    def is_empty(self) -> bool:
        return self._start >= self._end

    @property
    def first(self) -> T:
        if self._start >= self._end:
            raise EmptyPartError("first")
        return self._storage[self._start]

    @first.setter
    def first(self, value: T) -> None:
        if self._start >= self._end:
            raise EmptyPartError("first")
        self._storage[self._start] = value

    def count(self) -> int:
        return self._end - self._start

    def bisection(self) -> "ArrayBisection[T]":
        return ArrayBisection(self._storage, self._start, self._end)

    def mutable_bisection(self) -> "ArrayBisection[T]":
        return ArrayBisection(self._storage, self._start, self._end)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class ArrayCollection(ArraySlice[T]):
    """A mutable view of a whole MutableSequence."""

    def __init__(self, storage: MutableSequence[T]):
        super().__init__(storage, 0, len(storage))


class ArrayBisection(MutableCollectionBisection[T]):
    """A bisection of storage[start:end] at a forward-only split."""

    def __init__(self, storage: MutableSequence[T], start: int, end: int):
        self._storage = storage
        self._start = start
        self._split = start
        self._end = end

    @property
    def parts(self) -> Tuple[ArraySlice[T], ArraySlice[T]]:
        return (
            ArraySlice(self._storage, self._start, self._split),
            ArraySlice(self._storage, self._split, self._end),
        )

    def grow_prefix_by_1(self) -> None:
        if self._split >= self._end:
            raise EmptyPartError("grow_prefix_by_1", "suffix")
        self._split += 1

    def swap_first_elements(self) -> None:
        # Direct index swap; same contract as the generic version.
        if self._split == self._start:
            raise EmptyPartError("swap_first_elements", "prefix")
        if self._split >= self._end:
            raise EmptyPartError("swap_first_elements", "suffix")
        storage = self._storage
        i, j = self._start, self._split
        storage[i], storage[j] = storage[j], storage[i]


__all__ = ["ArraySlice", "ArrayCollection", "ArrayBisection"]
