"""
Centralized constants for bumpwise.

This module defines immutable values used across bumpwise, including
environment variable names, configuration defaults, and logging formats.
All values are intended to be treated as read-only.
"""

from typing import Final, Sequence

# ---------------------------------------------------------------------------
# Environment variables
# ---------------------------------------------------------------------------

#: Enables before/after tracing of every ``order_candidates`` call.
DEBUG_RESOLVER_ENV: Final[str] = "BUMPWISE_DEBUG_RESOLVER"

#: Explicit configuration file path.
CONFIG_ENV: Final[str] = "BUMPWISE_CONFIG"

#: Values of ``BUMPWISE_DEBUG_RESOLVER`` that leave tracing disabled.
FALSEY_ENV_VALUES: Final[Sequence[str]] = ("", "0", "false", "no", "off")

# ---------------------------------------------------------------------------
# Configuration files
# ---------------------------------------------------------------------------

#: Dedicated configuration file, settings under ``[bumpwise]``.
CONFIG_FILE_NAME: Final[str] = "bumpwise.toml"

#: Shared project file, settings under ``[tool.bumpwise]``.
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"

# ---------------------------------------------------------------------------
# Promotion defaults
# ---------------------------------------------------------------------------

#: Bump level used when none is configured.
DEFAULT_LEVEL: Final[str] = "major"

#: Strict filtering is opt-in.
DEFAULT_STRICT: Final[bool] = False

#: Resolver tracing is opt-in.
DEFAULT_DEBUG_RESOLVER: Final[bool] = False

#: Platform assigned to candidate groups built without explicit platforms.
DEFAULT_PLATFORM: Final[str] = "any"

# ---------------------------------------------------------------------------
# Logging configuration
# ---------------------------------------------------------------------------

#: Timestamp format for verbose logging.
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

#: Default log format (non-verbose).
LOG_DEFAULT_FORMAT: Final[str] = "%(levelname)s: %(message)s"

#: Verbose log format including timestamp and logger name.
LOG_VERBOSE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
