from __future__ import annotations

import os
import logging
from typing import Generator

import pytest

from bumpwise.constants import DEBUG_RESOLVER_ENV
from bumpwise.utils.console import reconfigure_console


@pytest.fixture(autouse=True)
def isolated_state(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Reset logging, console and environment shared across tests.

    The CLI installs handlers on the ``bumpwise`` logger and disables
    propagation, which would hide records from ``caplog`` in later tests.
    """
    monkeypatch.delenv(DEBUG_RESOLVER_ENV, raising=False)
    no_color = os.environ.get("NO_COLOR")

    root_logger = logging.getLogger("bumpwise")
    yield

    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)
    root_logger.propagate = True

    import bumpwise.utils.logger as logger_module

    logger_module._logging_configured = False

    if no_color is None:
        os.environ.pop("NO_COLOR", None)
    else:
        os.environ["NO_COLOR"] = no_color
    reconfigure_console()
