# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
Mutable collection contracts.

Element values change only through `first` on a mutable view, and the
only way two elements trade places is exchange_first(). The rotation
engine is written against these two facts alone.
"""

from abc import abstractmethod
from typing import Tuple

from .base import Collection, CollectionBisection, T
from ..core.errors import EmptyPartError


class MutableCollection(Collection[T]):
    """A collection whose elements can be written in place."""

    @property
    @abstractmethod
    def first(self) -> T:
        """
        The first element of the collection.

        Raises:
            EmptyPartError: If the collection is empty
        """
        ...

    @first.setter
    @abstractmethod
    def first(self, value: T) -> None: ...

    @abstractmethod
    def mutable_bisection(self) -> "MutableCollectionBisection[T]":
        """Return a new mutable bisection of self whose prefix is empty."""
        ...


class MutableCollectionBisection(CollectionBisection[T]):
    """
    A collection bisection whose parts can be mutated.

    The rotation engine does not call swap_first_elements(): the prefix
    of a forward-only bisection always starts at the same element, so a
    block swap steps two separate cursors instead. It moves elements
    with exchange_first(), which needs `first` to be settable on every
    part. Overriding swap_first_elements() changes only direct callers.
    """

    @property
    @abstractmethod
    def parts(self) -> Tuple[MutableCollection[T], MutableCollection[T]]:
        """The (prefix, suffix) mutable views."""
        ...

    @property
    def prefix(self) -> MutableCollection[T]:
        return self.parts[0]

    @property
    def suffix(self) -> MutableCollection[T]:
        return self.parts[1]

    def swap_first_elements(self) -> None:
        """
        Swap the first element of the prefix with the first element of
        the suffix. No other element moves.

        Raises:
            EmptyPartError: If either part is empty
        """
        prefix, suffix = self.parts
        if prefix.is_empty():
            raise EmptyPartError("swap_first_elements", "prefix")
        if suffix.is_empty():
            raise EmptyPartError("swap_first_elements", "suffix")
        exchange_first(prefix, suffix)


def exchange_first(a: MutableCollection[T], b: MutableCollection[T]) -> None:
    """
    Exchange the first elements of two mutable views.

    Both views must borrow from the same container and be non-empty.
    """
    a.first, b.first = b.first, a.first


__all__ = [
    "MutableCollection",
    "MutableCollectionBisection",
    "exchange_first",
]
