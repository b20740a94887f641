# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""Reference containers satisfying the collection contracts."""

from .array import ArrayBisection, ArrayCollection, ArraySlice
from .chunked import ChunkedBisection, ChunkedDeque, ChunkedSlice

__all__ = [
    "ArraySlice",
    "ArrayCollection",
    "ArrayBisection",
    "ChunkedSlice",
    "ChunkedBisection",
    "ChunkedDeque",
]
