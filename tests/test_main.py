from __future__ import annotations

from unittest.mock import patch

import pytest

from bumpwise.__main__ import main


@pytest.mark.unit
class TestMain:
    """Tests for ``python -m bumpwise``."""

    @pytest.mark.parametrize("exit_code", [0, 1, 130])
    def test_returns_cli_exit_code(self, exit_code: int) -> None:
        with patch("bumpwise.cli.main", return_value=exit_code) as cli_main:
            assert main() == exit_code

        cli_main.assert_called_once_with()
