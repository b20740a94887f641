# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
Segmented collections.

A collection such as a deque may keep its elements in several
independent buffers. Exposing those buffers as segments lets whole-sequence
algorithms be composed from per-segment ones while remaining observably
identical to working on a single contiguous run.
"""

from abc import abstractmethod
from typing import Any, Callable

from .base import Collection, T


class SegmentedCollection(Collection[T]):
    """
    A collection with an internally partitioned structure.

    `segments` must be abutting and exhaustive: every element belongs to
    exactly one segment and segment order is element order.
    """

    @property
    @abstractmethod
    def segments(self) -> Collection[Collection[T]]:
        """All the partitions, in element order."""
        ...

    def segment_count(self) -> int:
        """Return the number of segments, empty ones included."""
        return self.segments.count()

    def count(self) -> int:
        """Return the number of elements, summed segment by segment."""
        return self.segments.reduce(0, lambda total, s: total + s.count())

    def for_each_until(self, op: Callable[[T], Any]) -> bool:
        """
        Apply `op` to each element in turn until it returns a truthy value
        or the collection is exhausted.

        Segments are visited in order and never skipped.

        Returns:
            True iff `op` ever returned a truthy value
        """
        return self.segments.for_each_until(lambda s: s.for_each_until(op))


__all__ = ["SegmentedCollection"]
