# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
Read-only collection contracts.

A Collection is a multi-pass sequence that can always be split into an
adjacent (prefix, suffix) pair over its own storage. Every traversal
algorithm in this module is written once against that split, so any
conforming container gets them for free.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, Iterator, Tuple, TypeVar

T = TypeVar("T")
R = TypeVar("R")


class CollectionBisection(ABC, Generic[T]):
    """
    A separation of some collection into two parts: a prefix and a suffix.

    The parts are adjacent views over the same storage and their
    concatenation is the bisected collection. A bisection starts with an
    empty prefix; the split point only ever moves forward.
    """

    @property
    @abstractmethod
    def parts(self) -> Tuple["Collection[T]", "Collection[T]"]:
        """The (prefix, suffix) views."""
        ...

    @property
    def prefix(self) -> "Collection[T]":
        """The first part."""
        return self.parts[0]

    @property
    def suffix(self) -> "Collection[T]":
        """The second (last) part."""
        return self.parts[1]

    @abstractmethod
    def grow_prefix_by_1(self) -> None:
        """
        Move the split point one element forward.

        The first element of the suffix becomes the last element of the
        prefix. No element value changes.

        Raises:
            EmptyPartError: If the suffix is empty
        """
        ...


class Collection(ABC, Generic[T]):
    """
    A multi-pass sequence of elements.

    Implementations provide is_empty(), first and bisection(); the
    traversal algorithms below are derived from those three.
    """

    @abstractmethod
    def is_empty(self) -> bool:
        """True iff the collection has no elements."""
        ...

    @property
    @abstractmethod
    def first(self) -> T:
        """
        The first element of the collection.

        Raises:
            EmptyPartError: If the collection is empty
        """
        ...

    @abstractmethod
    def bisection(self) -> CollectionBisection[T]:
        """Return a new bisection of self whose prefix is empty."""
        ...

    # =========================================================================
    # ALGORITHMS
    # =========================================================================

    def for_each_until(self, op: Callable[[T], Any]) -> bool:
        """
        Apply `op` to each element in turn until it returns a truthy value
        or the collection is exhausted.

        Args:
            op: Called with each element, in order

        Returns:
            True iff `op` ever returned a truthy value
        """
        b = self.bisection()
        while not b.suffix.is_empty():
            if op(b.suffix.first):
                return True
            b.grow_prefix_by_1()
        return False

    def for_each(self, op: Callable[[T], Any]) -> None:
        """Apply `op` to each element in turn."""

        def visit(element: T) -> bool:
            op(element)
            return False

        self.for_each_until(visit)

    def count(self) -> int:
        """Return the number of elements."""
        total = 0

        def tally(_: T) -> None:
            nonlocal total
            total += 1

        self.for_each(tally)
        return total

    def reduce(self, initial: R, combine: Callable[[R, T], R]) -> R:
        """
        Fold the elements from the left.

        Args:
            initial: Starting accumulator
            combine: Called as combine(accumulator, element), returns the
                     next accumulator

        Returns:
            The final accumulator
        """
        result = initial

        def step(element: T) -> None:
            nonlocal result
            result = combine(result, element)

        self.for_each(step)
        return result

    def __iter__(self) -> Iterator[T]:
        b = self.bisection()
        while not b.suffix.is_empty():
            yield b.suffix.first
            b.grow_prefix_by_1()


__all__ = ["CollectionBisection", "Collection"]
