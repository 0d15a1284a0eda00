"""
Utility helpers for bumpwise.

- Console output helpers (Rich-based)
- Logging configuration and retrieval
- Version parsing and bump classification

Only symbols listed in ``__all__`` are considered part of the public API.
"""

from __future__ import annotations

from bumpwise.utils.logger import (
    disable_logging,
    get_logger,
    is_logging_configured,
    setup_logging,
)
from bumpwise.utils.console import (
    colorize_bump,
    print_error,
    print_json,
    print_table,
    print_warning,
    reconfigure_console,
)
from bumpwise.utils.version_utils import classify_bump, normalize_release, parse_release

__all__ = [
    # Console
    "colorize_bump",
    "print_error",
    "print_json",
    "print_table",
    "print_warning",
    "reconfigure_console",
    # Logging
    "disable_logging",
    "get_logger",
    "is_logging_configured",
    "setup_logging",
    # Versions
    "classify_bump",
    "normalize_release",
    "parse_release",
]
