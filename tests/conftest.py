"""Global pytest configuration for SDKUTILS."""

import logging
from logging.handlers import MemoryHandler

import pytest
from rich.logging import RichHandler


@pytest.fixture(autouse=True)
def _drop_cli_log_handlers():
    """Detach handlers the CLI installs on the root logger.

    The CLI reconfigures the root logger with ``force=True``; without this,
    console and flight-recorder handlers from one test would leak into the
    next.
    """
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if isinstance(handler, (RichHandler, MemoryHandler)):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
