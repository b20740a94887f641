# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
Core package for the positionless library.

Provides shared infrastructure used by collections, containers and the
rotation engine:
- types: Shared dataclasses
- errors: Contract violation exceptions
- config: ConfigLoader for centralized configuration
- constants: Default values
"""

from .types import RotationConfig, RotationResult

from .errors import (
    ContractViolation,
    EmptyPartError,
    PivotOutOfRangeError,
)

from .config import ConfigLoader, load_rotation_config, clear_config_cache

__all__ = [
    # Types
    "RotationConfig",
    "RotationResult",
    # Errors
    "ContractViolation",
    "EmptyPartError",
    "PivotOutOfRangeError",
    # Config
    "ConfigLoader",
    "load_rotation_config",
    "clear_config_cache",
]
