# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
positionless: in-place rotation over an abstract collection contract.

Public API:
    rotate: Rotate a MutableCollection in place
    rotate_forward: Same, returning a RotationResult

Contracts (for implementing new containers):
    Collection, CollectionBisection
    MutableCollection, MutableCollectionBisection
    SegmentedCollection

Reference containers:
    ArrayCollection, ArraySlice: views over a MutableSequence
    ChunkedDeque: a segmented deque over several buffers
"""

# Core first (no dependencies on other modules)
from .core import (
    ConfigLoader,
    ContractViolation,
    EmptyPartError,
    PivotOutOfRangeError,
    RotationConfig,
    RotationResult,
    load_rotation_config,
)

# Contracts
from .collection import (
    Collection,
    CollectionBisection,
    MutableCollection,
    MutableCollectionBisection,
    SegmentedCollection,
    exchange_first,
)

# Containers
from .containers import (
    ArrayBisection,
    ArrayCollection,
    ArraySlice,
    ChunkedBisection,
    ChunkedDeque,
    ChunkedSlice,
)

# Engine
from .rotate import RotationEngine, rotate, rotate_forward

__all__ = [
    # Main public API
    "rotate",
    "rotate_forward",
    "RotationEngine",
    # Contracts
    "Collection",
    "CollectionBisection",
    "MutableCollection",
    "MutableCollectionBisection",
    "SegmentedCollection",
    "exchange_first",
    # Containers
    "ArraySlice",
    "ArrayCollection",
    "ArrayBisection",
    "ChunkedSlice",
    "ChunkedBisection",
    "ChunkedDeque",
    # Core
    "RotationConfig",
    "RotationResult",
    "ConfigLoader",
    "load_rotation_config",
    "ContractViolation",
    "EmptyPartError",
    "PivotOutOfRangeError",
]
