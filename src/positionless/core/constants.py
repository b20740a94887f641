# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
Constants and default values for the positionless library.

All tunable defaults live here so that the ConfigLoader and the
rotation engine share a single import point.
"""

# =============================================================================
# DEFAULTS
# =============================================================================

# Contract checks (pivot range, empty parts) are on unless disabled
DEFAULT_CHECK_PRECONDITIONS = True

# Per-stage debug records from the rotation engine
DEFAULT_LOG_STAGES = False

# Buffer size used by ChunkedDeque.from_iterable when none is given
DEFAULT_CHUNK_SIZE = 16

# =============================================================================
# ENVIRONMENT
# =============================================================================

# Global key, or suffixed with _{CONTAINER} for one container type
ENV_PREFIX_CHECK_PRECONDITIONS = "POSITIONLESS_CHECK_PRECONDITIONS"
ENV_PREFIX_LOG_STAGES = "POSITIONLESS_LOG_STAGES"

TRUTHY_ENV_VALUES = frozenset({"true", "1", "yes"})

# Logging
LIB_LOGGER_NAME = "positionless"

__all__ = [
    "DEFAULT_CHECK_PRECONDITIONS",
    "DEFAULT_LOG_STAGES",
    "DEFAULT_CHUNK_SIZE",
    "ENV_PREFIX_CHECK_PRECONDITIONS",
    "ENV_PREFIX_LOG_STAGES",
    "TRUTHY_ENV_VALUES",
    "LIB_LOGGER_NAME",
]
