"""
Command-line interface for bumpwise.

This module provides the main CLI entry point and handles global options,
configuration loading, and command registration.
"""

from __future__ import annotations

import os
import sys
import logging
from pathlib import Path
from typing import Optional

import click

from bumpwise.config import load_config
from bumpwise.__version__ import __version__
from bumpwise.context import BumpwiseContext
from bumpwise.exceptions import BumpwiseError, ConfigError
from bumpwise.utils.logger import get_logger, setup_logging
from bumpwise.utils.console import print_error, print_warning, reconfigure_console

logger = get_logger("cli")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file.",
    envvar="BUMPWISE_CONFIG",
)
@click.option(
    "--verbose",
    "-v",
    count=True,
    help="Increase verbosity (can be repeated: -v, -vv).",
)
@click.option(
    "--color/--no-color",
    default=True,
    help="Enable or disable colored output.",
    envvar="BUMPWISE_COLOR",
)
@click.version_option(
    version=__version__,
    prog_name="bumpwise",
    message="%(prog)s %(version)s",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[Path],
    verbose: int,
    color: bool,
) -> None:
    """bumpwise — version promotion for dependency resolvers.

    \b
    Available commands:
      bumpwise order NAME VERSION...   Order candidates for a resolver

    \b
    Examples:
      bumpwise order rack 2.1.0 2.1.4 2.2.0 --locked 2.1.0 --level patch
      bumpwise -v order rack 1.0 2.0 --format json
    """
    _configure_logging(verbose)

    try:
        loaded_config = load_config(config)
    except ConfigError as exc:
        print_error(str(exc))
        raise SystemExit(1) from exc

    bumpwise_ctx = BumpwiseContext()
    bumpwise_ctx.config_path = config or loaded_config.source_path
    bumpwise_ctx.color = color
    bumpwise_ctx.verbose = verbose
    bumpwise_ctx.config = loaded_config
    ctx.obj = bumpwise_ctx

    # Respect NO_COLOR for downstream libraries
    if color:
        os.environ.pop("NO_COLOR", None)
    else:
        os.environ["NO_COLOR"] = "1"
    reconfigure_console()

    logger.debug("bumpwise v%s", __version__)
    logger.debug("Config path: %s", bumpwise_ctx.config_path)
    logger.debug("Configuration: %s", loaded_config.to_log_dict())
    logger.debug("Verbosity: %s | Color: %s", verbose, color)


def _configure_logging(verbose: int) -> None:
    """Configure logging level based on verbosity flags."""
    if verbose <= 0:
        level = logging.WARNING
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    setup_logging(level=level, verbose=verbose > 1)
    logger.debug("Logging initialized at %s level", logging.getLevelName(level))


from bumpwise.commands.order import order  # noqa: E402

cli.add_command(order)


def main() -> int:
    """Main entry point for the bumpwise CLI.

    Returns:
        Exit code:
            0   Success
            1   Unhandled or application error
            2   Usage error (Click)
            130 Interrupted by user (Ctrl+C)
    """
    try:
        cli(standalone_mode=False)
        return 0

    except click.ClickException as exc:
        exc.show()
        return exc.exit_code

    except click.exceptions.Exit as exc:
        return exc.exit_code

    except click.exceptions.Abort:
        print_warning("\nOperation cancelled by user")
        return 130

    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 1

    except BumpwiseError as exc:
        print_error(str(exc))
        logger.debug(
            "BumpwiseError details: %s",
            exc.details or "<none>",
            exc_info=True,
        )
        return 1

    except KeyboardInterrupt:
        print_warning("\nOperation cancelled by user")
        return 130

    except Exception as exc:
        print_error(f"Unexpected error: {exc}")
        logger.exception("Unhandled exception in CLI")
        return 1


if __name__ == "__main__":
    sys.exit(main())
