"""Centralized configuration management for gridlayout.

Provides unified access to all configuration via the `get_environment()` function.

Example:
    >>> from gridlayout.config import EnvVar, get_environment
    >>>
    >>> enabled = get_environment(EnvVar.SNAP_ENABLED)  # Returns bool: True
    >>> width = get_environment(EnvVar.CELL_WIDTH, override=64)
    >>>
    >>> for var in list_environment_variables("snap"):
    ...     info = get_environment_info(var)
    ...     print(f"{info.name}: {info.description}")

Environment Variable Categories:
    logging: Log level for the CLI and library loggers
    snap: Snap-to-grid threshold and rendered cell size
"""

from .lib import (
    # Core types
    EnvConfig,
    EnvVar,
    # Main interface
    get_environment,
    get_environment_info,
    get_log_level,
    # Introspection
    list_environment_variables,
)

__all__ = [
    # Core types
    "EnvConfig",
    "EnvVar",
    # Main interface
    "get_environment",
    "get_environment_info",
    "get_log_level",
    # Introspection
    "list_environment_variables",
]
