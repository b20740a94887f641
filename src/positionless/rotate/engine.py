# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
Rotation engine.

Rotates a MutableCollection in place with the Gries-Mills block-swap
method: the shorter of the two regions is exchanged with the front of
the longer one, the exhausted region drops out of the problem, and the
process repeats on what remains. Only pairwise exchanges are used, and
the extra state is a handful of cursors and counters.

Cursors are forward-only bisections. Three are live during a stage:
- write: front of the unsettled region (elements before it are final)
- work: the working split, stepping through the B-region
- b_start: a remembered view starting at the B-region, replaced only
  when a region is exhausted. When the working split runs into the end
  of the storage, the next stage restarts it from here.
"""

import logging
from typing import Optional

from ..collection.mutable import MutableCollection, exchange_first
from ..core.config import load_rotation_config
from ..core.constants import LIB_LOGGER_NAME
from ..core.errors import PivotOutOfRangeError
from ..core.types import RotationConfig, RotationResult

lib_logger = logging.getLogger(LIB_LOGGER_NAME)


class RotationEngine:
    """
    Block-swap rotation over the MutableCollection contract.

    The engine never looks at a concrete container type beyond resolving
    its configuration.
    """

    def __init__(self, config: Optional[RotationConfig] = None):
        """
        Initialize rotation engine.

        Args:
            config: Fixed configuration. If None, the configuration is
                    resolved per container type on every call.
        """
        self._config = config

    def rotate(
        self,
        collection: MutableCollection,
        pivot: int,
    ) -> RotationResult:
        """
        Rotate `collection` so that the element at offset `pivot` becomes
        the first element.

        The result equals S[pivot:] + S[:pivot]. The caller must hold the
        only live handle to the collection for the duration of the call.

        Args:
            collection: Collection to rotate in place
            pivot: Offset in [0, count] of the new first element

        Returns:
            RotationResult with the discovered boundary and step counts

        Raises:
            PivotOutOfRangeError: If pivot is outside [0, count] and
                precondition checks are enabled
        """
        config = self._config or load_rotation_config(type(collection))
        count = collection.count()

        if config.check_preconditions and not 0 <= pivot <= count:
            raise PivotOutOfRangeError(pivot, count)

        # Unchecked out-of-range pivots land here too and move nothing
        if pivot <= 0 or pivot >= count:
            return RotationResult.identity(count, pivot)

        split = collection.mutable_bisection()
        for _ in range(pivot):
            split.grow_prefix_by_1()

        region: MutableCollection = collection
        b_start: MutableCollection = split.suffix
        a_length, b_length = pivot, count - pivot
        settled = 0
        boundary: Optional[int] = None
        result = RotationResult(boundary=count - pivot)

        while True:
            step = min(a_length, b_length)
            write = region.mutable_bisection()
            work = b_start.mutable_bisection()
            for _ in range(step):
                exchange_first(write.suffix, work.suffix)
                write.grow_prefix_by_1()
                work.grow_prefix_by_1()

            settled += step
            result.swaps += step
            result.stages += 1
            region = write.suffix

            if config.log_stages:
                lib_logger.debug(
                    f"Rotate stage {result.stages}: exchanged {step} "
                    f"(A={a_length}, B={b_length}, settled={settled})"
                )

            if a_length == b_length:
                if boundary is None:
                    boundary = settled
                    lib_logger.debug(f"Rotate boundary discovered at {boundary}")
                break

            if a_length < b_length:
                # A-region exhausted; the moved A block now starts the problem
                b_length -= a_length
                b_start = work.suffix
            else:
                # Working split reached the storage end
                if boundary is None:
                    boundary = settled
                    lib_logger.debug(f"Rotate boundary discovered at {boundary}")
                a_length -= b_length

        result.boundary = boundary
        return result


_default_engine = RotationEngine()


def rotate_forward(
    collection: MutableCollection,
    pivot: int,
    config: Optional[RotationConfig] = None,
) -> RotationResult:
    """
    Rotate `collection` in place and report what happened.

    Args:
        collection: Collection to rotate
        pivot: Offset of the element that becomes first
        config: Optional configuration overriding the loaded one

    Returns:
        RotationResult
    """
    engine = _default_engine if config is None else RotationEngine(config)
    return engine.rotate(collection, pivot)


def rotate(collection: MutableCollection, pivot: int) -> None:
    """Rotate `collection` in place so that offset `pivot` becomes first."""
    _default_engine.rotate(collection, pivot)


__all__ = ["RotationEngine", "rotate", "rotate_forward"]
