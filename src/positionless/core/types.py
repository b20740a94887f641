# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
Shared dataclasses for the positionless library.
"""

from dataclasses import dataclass


@dataclass
class RotationConfig:
    """
    Resolved configuration for one container type.

    Produced by ConfigLoader from defaults, container class attributes
    and environment variables.
    """

    check_preconditions: bool = True  # Validate pivot range before rotating
    log_stages: bool = False  # Debug record per block-swap stage


@dataclass
class RotationResult:
    """
    Outcome of a single rotation call.

    The rotated container is mutated in place; this only reports what
    happened.
    """

    boundary: int  # Final offset of the element that was first
    swaps: int = 0  # Element exchanges performed
    stages: int = 0  # Block-swap stages performed

    @classmethod
    def identity(cls, count: int, pivot: int) -> "RotationResult":
        """Result of a rotation that moves nothing."""
        return cls(boundary=count - pivot)


__all__ = ["RotationConfig", "RotationResult"]
