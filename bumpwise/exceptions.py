"""
Custom exception hierarchy for bumpwise.

All exceptions inherit from :class:`BumpwiseError` and carry optional
structured metadata via the ``details`` attribute, which is rendered into
``str(exc)`` for logging and CLI output.
"""

from __future__ import annotations

from typing import Any, Mapping, MutableMapping, Optional


class BumpwiseError(Exception):
    """Base exception for all bumpwise errors.

    Args:
        message: Human-readable error message.
        details: Optional structured metadata describing the error.
    """

    __slots__ = ("message", "details")

    def __init__(
        self,
        message: str,
        details: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.message: str = message
        self.details: MutableMapping[str, Any] = dict(details) if details else {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        formatted = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({formatted})"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, details={dict(self.details)!r})"
        )


def _add_if(details: MutableMapping[str, Any], key: str, value: Any) -> None:
    """Add a key to ``details`` only if ``value`` is not ``None``."""
    if value is not None:
        details[key] = value


class ConfigError(BumpwiseError):
    """Raised when configuration is missing, malformed, or invalid.

    Args:
        message: Error description.
        config_path: Path of the configuration file involved.
        option: Name of the offending option.
    """

    __slots__ = ("config_path", "option")

    def __init__(
        self,
        message: str,
        *,
        config_path: Optional[str] = None,
        option: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "path", config_path)
        _add_if(details, "option", option)

        super().__init__(message, details)

        self.config_path = config_path
        self.option = option


class InvalidBumpLevelError(ConfigError):
    """Raised when a bump level is not one of major, minor or patch.

    Args:
        value: The rejected value.
        **kwargs: Forwarded to :class:`ConfigError`.
    """

    __slots__ = ("value",)

    def __init__(self, value: Any, **kwargs: Any) -> None:
        kwargs.setdefault("option", "level")
        super().__init__(
            f"Unexpected level {value!r}. Must be major, minor or patch",
            **kwargs,
        )
        self.value = value


class VersionParseError(BumpwiseError):
    """Raised when a version string cannot be parsed.

    Args:
        version: The raw version string.
        package_name: Package the version belongs to, if known.
    """

    __slots__ = ("version", "package_name")

    def __init__(
        self,
        version: str,
        *,
        package_name: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "package", package_name)

        super().__init__(f"Invalid version string: {version!r}", details)

        self.version = version
        self.package_name = package_name


class PromoterInvariantError(BumpwiseError):
    """Raised when candidate ordering reaches an impossible state.

    The locked-version rule requires exactly one of the two compared
    versions to equal the locked version. Seeing neither or both means the
    candidate set holds duplicate versions for one package.

    Args:
        locked_version: The locked version being matched.
        left: First compared version.
        right: Second compared version.
    """

    __slots__ = ("locked_version", "left", "right")

    def __init__(self, locked_version: Any, left: Any, right: Any) -> None:
        if left == locked_version and right == locked_version:
            problem = "Both versions"
        else:
            problem = "Neither version"
        super().__init__(
            f"{problem} ({left} or {right}) matches {locked_version}",
            {"locked": str(locked_version)},
        )

        self.locked_version = locked_version
        self.left = left
        self.right = right
