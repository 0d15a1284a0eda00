"""Configuration file loader for bumpwise.

Supports two formats:

- ``bumpwise.toml`` — settings under ``[bumpwise]`` table
- ``pyproject.toml`` — settings under ``[tool.bumpwise]`` table

Discovery order:

1. Explicit path from ``--config`` or ``BUMPWISE_CONFIG``
2. ``bumpwise.toml`` in current directory
3. ``pyproject.toml`` with ``[tool.bumpwise]`` section

Configuration precedence: defaults < config file < CLI args.

Example (``bumpwise.toml``)::

    [bumpwise]
    level = "minor"
    strict = true
    debug_resolver = false
"""

from __future__ import annotations

import tomli as tomllib
from pathlib import Path
from typing import Any, Dict, Optional
from dataclasses import dataclass, field

from bumpwise.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_DEBUG_RESOLVER,
    DEFAULT_LEVEL,
    DEFAULT_STRICT,
    PYPROJECT_FILE_NAME,
)
from bumpwise.exceptions import ConfigError
from bumpwise.models import BumpLevel
from bumpwise.utils.logger import get_logger

logger = get_logger("config")

_KNOWN_KEYS = frozenset({"level", "strict", "debug_resolver"})


@dataclass
class BumpwiseConfig:
    """Parsed and validated bumpwise configuration.

    Attributes:
        level: Default bump level for promotion.
        strict: Filter candidates outside the level instead of demoting.
        debug_resolver: Trace every ``order_candidates`` call.
        source_path: Path to loaded config file, or ``None`` if using defaults.
    """

    level: BumpLevel = field(default_factory=lambda: BumpLevel.coerce(DEFAULT_LEVEL))
    strict: bool = DEFAULT_STRICT
    debug_resolver: bool = DEFAULT_DEBUG_RESOLVER

    source_path: Optional[Path] = field(default=None, repr=False)

    def to_log_dict(self) -> Dict[str, Any]:
        """Return configuration as dictionary for debug logging."""
        return {
            "level": self.level.value,
            "strict": self.strict,
            "debug_resolver": self.debug_resolver,
        }

    def promoter_options(self) -> Dict[str, Any]:
        """Keyword arguments for :class:`~bumpwise.core.VersionPromoter`.

        ``debug`` is only forced on; when off, the environment variable
        still decides.
        """
        return {
            "level": self.level,
            "strict": self.strict,
            "debug": True if self.debug_resolver else None,
        }


def discover_config_file(explicit_path: Optional[Path] = None) -> Optional[Path]:
    """Find the configuration file to load.

    Args:
        explicit_path: Explicit config path. If provided, must exist.

    Returns:
        Resolved path to config file, or ``None`` if not found.

    Raises:
        ConfigError: Explicit path provided but does not exist.
    """
    if explicit_path is not None:
        resolved = explicit_path.resolve()
        if not resolved.is_file():
            raise ConfigError(
                f"Configuration file not found: {explicit_path}",
                config_path=str(explicit_path),
            )
        logger.debug("Using explicit config: %s", resolved)
        return resolved

    cwd = Path.cwd()

    bumpwise_toml = cwd / CONFIG_FILE_NAME
    if bumpwise_toml.is_file():
        logger.debug("Found %s: %s", CONFIG_FILE_NAME, bumpwise_toml)
        return bumpwise_toml

    pyproject_toml = cwd / PYPROJECT_FILE_NAME
    if pyproject_toml.is_file() and _pyproject_has_bumpwise_section(pyproject_toml):
        logger.debug("Found [tool.bumpwise] in pyproject.toml: %s", pyproject_toml)
        return pyproject_toml

    logger.debug("No configuration file found")
    return None


def _pyproject_has_bumpwise_section(path: Path) -> bool:
    """Check if pyproject.toml contains a [tool.bumpwise] section.

    An unreadable pyproject.toml is treated as having no section.
    """
    try:
        raw = _read_toml(path)
    except ConfigError:
        return False
    tool = raw.get("tool", {})
    return isinstance(tool, dict) and "bumpwise" in tool


def load_config(config_path: Optional[Path] = None) -> BumpwiseConfig:
    """Load and validate bumpwise configuration.

    Args:
        config_path: Explicit path to config file. If ``None``, uses
            auto-discovery (see :func:`discover_config_file`).

    Returns:
        Validated :class:`BumpwiseConfig` with values from file or defaults.

    Raises:
        ConfigError: File cannot be parsed, has unknown keys, or invalid values.
    """
    resolved = discover_config_file(config_path)

    if resolved is None:
        logger.debug("No config file found, using defaults")
        return BumpwiseConfig()

    logger.info("Loading configuration from %s", resolved)
    raw = _read_toml(resolved)

    if resolved.name == PYPROJECT_FILE_NAME:
        table_name = "tool.bumpwise"
        tool = raw.get("tool", {})
        section = tool.get("bumpwise", {}) if isinstance(tool, dict) else {}
    else:
        table_name = "bumpwise"
        section = raw.get("bumpwise", {})

    if not isinstance(section, dict):
        raise ConfigError(
            f"[{table_name}] must be a table, got {type(section).__name__}",
            config_path=str(resolved),
            option=table_name,
        )

    if not section:
        logger.debug("Config file found but no bumpwise section, using defaults")
        return BumpwiseConfig(source_path=resolved)

    config = _parse_section(section, config_path=str(resolved))
    config.source_path = resolved

    logger.debug("Loaded configuration: %s", config.to_log_dict())
    return config


def _read_toml(path: Path) -> Dict[str, Any]:
    """Read and parse a TOML file.

    Raises:
        ConfigError: File cannot be read or is not valid TOML.
    """
    try:
        with open(path, "rb") as fh:
            return tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(
            f"Invalid TOML in {path.name}: {exc}",
            config_path=str(path),
        ) from exc
    except OSError as exc:
        raise ConfigError(
            f"Cannot read configuration file {path}: {exc}",
            config_path=str(path),
        ) from exc


def _parse_section(
    section: Dict[str, Any],
    *,
    config_path: str,
) -> BumpwiseConfig:
    """Validate a ``[bumpwise]`` or ``[tool.bumpwise]`` table.

    Raises:
        ConfigError: Unknown keys, wrong types, or an unknown level.
    """
    config = BumpwiseConfig()

    unknown = set(section.keys()) - _KNOWN_KEYS
    if unknown:
        raise ConfigError(
            f"Unknown configuration keys: {', '.join(sorted(unknown))}",
            config_path=config_path,
        )

    if "level" in section:
        val = section["level"]
        if not isinstance(val, str):
            raise ConfigError(
                f"level must be a string, got {type(val).__name__}",
                config_path=config_path,
                option="level",
            )
        # InvalidBumpLevelError is a ConfigError; attach the file path.
        try:
            config.level = BumpLevel.coerce(val)
        except ConfigError as exc:
            exc.config_path = config_path
            exc.details["path"] = config_path
            raise

    for option in ("strict", "debug_resolver"):
        if option in section:
            val = section[option]
            if not isinstance(val, bool):
                raise ConfigError(
                    f"{option} must be a boolean, got {type(val).__name__}",
                    config_path=config_path,
                    option=option,
                )
            setattr(config, option, val)

    return config
