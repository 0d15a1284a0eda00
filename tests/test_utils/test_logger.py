from __future__ import annotations

import io
import logging
from unittest.mock import patch

import pytest

from bumpwise.utils.logger import (
    ColoredFormatter,
    disable_logging,
    get_logger,
    is_logging_configured,
    setup_logging,
)


def _record(level: int = logging.INFO, msg: str = "Test message") -> logging.LogRecord:
    return logging.LogRecord(
        name="bumpwise.test",
        level=level,
        pathname="test.py",
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


@pytest.mark.unit
class TestColoredFormatter:
    """Tests for ColoredFormatter ANSI color formatting."""

    def test_init_default_values(self) -> None:
        formatter = ColoredFormatter("%(levelname)s: %(message)s")

        assert formatter.use_color is True
        assert formatter._fmt == "%(levelname)s: %(message)s"

    def test_format_with_color(self) -> None:
        formatter = ColoredFormatter("%(levelname)s: %(message)s", use_color=True)

        with patch.object(ColoredFormatter, "_should_use_color", return_value=True):
            result = formatter.format(_record())

        assert result == f"{ColoredFormatter.COLORS['INFO']}INFO{ColoredFormatter.RESET}: Test message"

    def test_format_restores_levelname(self) -> None:
        """Other handlers must still see the plain level name."""
        formatter = ColoredFormatter("%(levelname)s", use_color=True)
        record = _record(logging.WARNING)

        with patch.object(ColoredFormatter, "_should_use_color", return_value=True):
            formatter.format(record)

        assert record.levelname == "WARNING"

    def test_format_without_color(self) -> None:
        formatter = ColoredFormatter("%(levelname)s: %(message)s", use_color=False)

        assert formatter.format(_record()) == "INFO: Test message"

    @pytest.mark.parametrize("env_var", ["NO_COLOR", "CI"])
    def test_env_disables_color(
        self, monkeypatch: pytest.MonkeyPatch, env_var: str
    ) -> None:
        monkeypatch.setenv(env_var, "1")

        assert ColoredFormatter._should_use_color() is False


@pytest.mark.unit
class TestSetupLogging:
    """Tests for setup_logging, disable_logging and is_logging_configured."""

    def test_setup_writes_to_stream(self) -> None:
        stream = io.StringIO()

        setup_logging(level=logging.DEBUG, stream=stream)
        get_logger("promoter").debug("ordered %d", 3)

        assert "ordered 3" in stream.getvalue()
        assert is_logging_configured()

    def test_level_filters_messages(self) -> None:
        stream = io.StringIO()

        setup_logging(level=logging.WARNING, stream=stream)
        get_logger("promoter").info("hidden")

        assert stream.getvalue() == ""

    def test_verbose_format_includes_logger_name(self) -> None:
        stream = io.StringIO()

        setup_logging(level=logging.INFO, verbose=True, stream=stream)
        get_logger("config").info("loaded")

        assert "bumpwise.config" in stream.getvalue()

    def test_repeated_setup_keeps_one_handler(self) -> None:
        setup_logging(stream=io.StringIO())
        setup_logging(stream=io.StringIO())

        assert len(logging.getLogger("bumpwise").handlers) == 1

    def test_disable_logging(self) -> None:
        setup_logging(stream=io.StringIO())

        disable_logging()

        root = logging.getLogger("bumpwise")
        assert not is_logging_configured()
        assert all(isinstance(h, logging.NullHandler) for h in root.handlers)


@pytest.mark.unit
class TestGetLogger:
    """Tests for get_logger naming."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            (None, "bumpwise"),
            ("bumpwise", "bumpwise"),
            ("trace", "bumpwise.trace"),
            ("bumpwise.cli", "bumpwise.cli"),
        ],
    )
    def test_names(self, name, expected: str) -> None:
        assert get_logger(name).name == expected
