# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""In-place block-swap rotation."""

from .engine import RotationEngine, rotate, rotate_forward

__all__ = ["RotationEngine", "rotate", "rotate_forward"]
