# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""Collection, bisection and segmentation contracts."""

from .base import Collection, CollectionBisection
from .mutable import MutableCollection, MutableCollectionBisection, exchange_first
from .segmented import SegmentedCollection

__all__ = [
    "Collection",
    "CollectionBisection",
    "MutableCollection",
    "MutableCollectionBisection",
    "SegmentedCollection",
    "exchange_first",
]
