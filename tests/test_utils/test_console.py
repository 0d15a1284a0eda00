from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
from rich.table import Table

from bumpwise.utils import console as console_module
from bumpwise.utils.console import (
    colorize_bump,
    print_error,
    print_json,
    print_table,
    print_warning,
    reconfigure_console,
)


@pytest.fixture
def mock_console():
    console = MagicMock()
    with patch.object(console_module, "_get_console", return_value=console):
        yield console


@pytest.mark.unit
class TestStatusMessages:
    """Tests for print_error and print_warning."""

    def test_print_error(self, mock_console: MagicMock) -> None:
        print_error("bad [level]")

        mock_console.print.assert_called_once_with(
            "[ERROR] bad [level]", style="error", markup=False
        )

    def test_print_warning_custom_prefix(self, mock_console: MagicMock) -> None:
        print_warning("careful", prefix="!")

        mock_console.print.assert_called_once_with("! careful", style="warning", markup=False)

    def test_print_json(self, mock_console: MagicMock) -> None:
        print_json({"a": 1})

        mock_console.print_json.assert_called_once_with(data={"a": 1}, highlight=False)


@pytest.mark.unit
class TestPrintTable:
    """Tests for print_table."""

    def test_empty_data_prints_nothing(self, mock_console: MagicMock) -> None:
        print_table([])

        mock_console.print.assert_not_called()

    def test_renders_table(self, mock_console: MagicMock) -> None:
        print_table(
            [{"Version": "1.0", "Try": 2}, {"Version": "2.0", "Try": 1}],
            title="rack",
            row_styler=lambda row: "highlight" if row["Try"] == 1 else None,
        )

        table = mock_console.print.call_args.args[0]
        assert isinstance(table, Table)
        assert [c.header for c in table.columns] == ["Version", "Try"]
        assert table.row_count == 2
        assert table.rows[1].style == "highlight"


@pytest.mark.unit
class TestConsoleLifecycle:
    """Tests for the console singleton."""

    def test_reconfigure_creates_new_console(self) -> None:
        first = console_module._get_console()

        reconfigure_console()

        assert console_module._get_console() is not first


@pytest.mark.unit
class TestColorizeBump:
    """Tests for colorize_bump."""

    @pytest.mark.parametrize(
        "bump,expected",
        [
            ("major", "[red]major[/red]"),
            ("patch", "[green]patch[/green]"),
            ("downgrade", "[magenta]downgrade[/magenta]"),
            ("same", "same"),
        ],
    )
    def test_colorize(self, bump: str, expected: str) -> None:
        assert colorize_bump(bump) == expected
