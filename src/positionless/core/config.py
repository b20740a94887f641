# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
Centralized configuration loader for the positionless library.

This module provides a ConfigLoader class that resolves a RotationConfig
for a container type from:
1. System defaults (from core/constants.py)
2. Container class attributes
3. Environment variables (ALWAYS override container defaults)
"""

import os
import logging
from typing import Dict, Optional

from .types import RotationConfig
from .constants import (
    DEFAULT_CHECK_PRECONDITIONS,
    DEFAULT_LOG_STAGES,
    ENV_PREFIX_CHECK_PRECONDITIONS,
    ENV_PREFIX_LOG_STAGES,
    TRUTHY_ENV_VALUES,
    LIB_LOGGER_NAME,
)

lib_logger = logging.getLogger(LIB_LOGGER_NAME)


class ConfigLoader:
    """
    Centralized configuration loader.

    Resolves configuration from:
    1. System defaults
    2. Container class attributes
    3. Environment variables (ALWAYS override container defaults)

    Usage:
        loader = ConfigLoader()
        config = loader.load_rotation_config(ChunkedDeque)
    """

    def __init__(self):
        self._cache: Dict[Optional[type], RotationConfig] = {}

    def load_rotation_config(
        self,
        container_type: Optional[type] = None,
        force_reload: bool = False,
    ) -> RotationConfig:
        """
        Load complete configuration for a container type.

        Configuration is loaded in this order (later overrides earlier):
        1. System defaults
        2. Container class attributes
        3. Environment variables (ALWAYS win)

        Args:
            container_type: Concrete collection class, or None for the
                            library-wide configuration
            force_reload: If True, bypass cache and reload

        Returns:
            Complete RotationConfig for the container type
        """
        if not force_reload and container_type in self._cache:
            return self._cache[container_type]

        config = self._get_system_defaults()

        if container_type is not None:
            config = self._apply_container_defaults(config, container_type)

        config = self._apply_env_overrides(config, container_type)

        self._cache[container_type] = config
        return config

    def clear_cache(self, container_type: Optional[type] = None) -> None:
        """
        Clear cached configurations.

        Args:
            container_type: If provided, only clear that type's entry.
                            If None, clear all cached configs.
        """
        if container_type is not None:
            self._cache.pop(container_type, None)
        else:
            self._cache.clear()

    # =========================================================================
    # INTERNAL METHODS
    # =========================================================================

    def _get_system_defaults(self) -> RotationConfig:
        """Get a RotationConfig with all system defaults."""
        return RotationConfig(
            check_preconditions=DEFAULT_CHECK_PRECONDITIONS,
            log_stages=DEFAULT_LOG_STAGES,
        )

    def _apply_container_defaults(
        self,
        config: RotationConfig,
        container_type: type,
    ) -> RotationConfig:
        """
        Apply container class default attributes to config.

        Args:
            config: Current configuration
            container_type: Container class

        Returns:
            Updated configuration
        """
        check = getattr(container_type, "default_check_preconditions", None)
        if check is not None:
            config.check_preconditions = bool(check)

        log_stages = getattr(container_type, "default_log_stages", None)
        if log_stages is not None:
            config.log_stages = bool(log_stages)

        return config

    def _apply_env_overrides(
        self,
        config: RotationConfig,
        container_type: Optional[type],
    ) -> RotationConfig:
        """
        Apply environment variable overrides to config.

        The container-specific key (PREFIX_{CONTAINER}) beats the global
        key (PREFIX).

        Args:
            config: Current configuration
            container_type: Container class, or None

        Returns:
            Updated configuration with env overrides applied
        """
        value = self._read_flag(ENV_PREFIX_CHECK_PRECONDITIONS, container_type)
        if value is not None:
            config.check_preconditions = value

        value = self._read_flag(ENV_PREFIX_LOG_STAGES, container_type)
        if value is not None:
            config.log_stages = value

        return config

    def _read_flag(
        self,
        prefix: str,
        container_type: Optional[type],
    ) -> Optional[bool]:
        """Read a boolean flag, preferring the container-specific key."""
        keys = [prefix]
        if container_type is not None:
            keys.insert(0, f"{prefix}_{container_type.__name__.upper()}")

        for env_key in keys:
            env_val = os.getenv(env_key)
            if env_val is None or not env_val.strip():
                continue
            flag = env_val.strip().lower() in TRUTHY_ENV_VALUES
            if not flag and env_val.strip().lower() not in ("false", "0", "no"):
                lib_logger.warning(
                    f"Invalid {env_key}='{env_val}'. Treating as false."
                )
            lib_logger.debug(f"Config override from {env_key}: {flag}")
            return flag

        return None


_default_loader = ConfigLoader()


def load_rotation_config(
    container_type: Optional[type] = None,
) -> RotationConfig:
    """Resolve configuration through the shared default loader."""
    return _default_loader.load_rotation_config(container_type)


def clear_config_cache() -> None:
    """Drop every configuration cached by the shared default loader."""
    _default_loader.clear_cache()
