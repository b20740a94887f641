# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
Error types for the positionless library.

Every failure the library can report is a violated precondition of the
collection abstraction, i.e. a programmer error. They all derive from
AssertionError so that they read as failed assertions at the call site
and are never mistaken for recoverable runtime conditions.
"""

from typing import Optional


class ContractViolation(AssertionError):
    """
    A precondition of a collection or bisection operation was not met.

    Attributes:
        operation: Name of the operation whose precondition failed
        message: Human-readable description
    """

    def __init__(self, operation: str, message: str):
        super().__init__(f"{operation}: {message}")
        self.operation = operation
        self.message = message


class EmptyPartError(ContractViolation):
    """
    An operation needed a non-empty part but found an empty one.

    Raised by grow_prefix_by_1() on an empty suffix, by
    swap_first_elements() when either part is empty, and by reading or
    writing `first` on an empty view.
    """

    def __init__(self, operation: str, part: Optional[str] = None):
        what = f"{part} is empty" if part else "collection is empty"
        super().__init__(operation, what)
        self.part = part


class PivotOutOfRangeError(ContractViolation):
    """
    A rotation pivot lies outside [0, count].

    Attributes:
        pivot: The offending pivot offset
        count: Number of elements in the rotated collection
    """

    def __init__(self, pivot: int, count: int):
        super().__init__(
            "rotate", f"pivot {pivot} is outside the range [0, {count}]"
        )
        self.pivot = pivot
        self.count = count


__all__ = [
    "ContractViolation",
    "EmptyPartError",
    "PivotOutOfRangeError",
]
