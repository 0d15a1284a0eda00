from __future__ import annotations

from pathlib import Path

import click
import pytest
from click.testing import CliRunner

from bumpwise.config import BumpwiseConfig
from bumpwise.context import BumpwiseContext, pass_context


@pytest.mark.unit
class TestBumpwiseContext:
    """Tests for BumpwiseContext."""

    def test_default_initialization(self) -> None:
        ctx = BumpwiseContext()

        assert ctx.config_path is None
        assert ctx.verbose == 0
        assert ctx.color is True
        assert ctx.config == BumpwiseConfig()

    def test_attributes_can_be_set(self) -> None:
        ctx = BumpwiseContext()
        ctx.config_path = Path("/tmp/bumpwise.toml")
        ctx.verbose = 2

        assert ctx.config_path == Path("/tmp/bumpwise.toml")
        assert ctx.verbose == 2

    def test_slots_prevent_arbitrary_attributes(self) -> None:
        ctx = BumpwiseContext()

        with pytest.raises(AttributeError):
            ctx.unknown = True  # type: ignore[attr-defined]


@pytest.mark.unit
class TestPassContext:
    """Tests for the pass_context decorator."""

    def test_injects_context(self) -> None:
        seen = []

        @click.command()
        @pass_context
        def command(ctx: BumpwiseContext) -> None:
            seen.append(ctx)

        result = CliRunner().invoke(command, [])

        assert result.exit_code == 0
        assert isinstance(seen[0], BumpwiseContext)
