"""Fixtures and helpers for end-to-end CLI tests.

Provides a test-only `log-demo` command that emits log messages at every
level, fixtures to register it, a CliRunner whose flight recorder writes
into the working directory, and an isolated filesystem per test.
"""

import json
import logging
from pathlib import Path

import click
import pytest
from click.testing import CliRunner

from sdkutils.entrypoints.cli.main import sdkutils

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit representative log messages on project and third-party loggers."""
    logger = logging.getLogger("sdkutils.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")
    logger.debug("This is a final debug-level test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and any internal sections."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register the 'log-demo' command for the duration of a test."""
    sdkutils.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(sdkutils, "log-demo")


@pytest.fixture
def runner():
    """Return a CliRunner that keeps the flight recorder in the working dir."""
    return CliRunner(env={"SDKUTILS_LOG_PATH": "latest.log"})


@pytest.fixture
def fs(runner):
    """Run the test inside an isolated filesystem."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def write_json(fs):  # pylint: disable=unused-argument
    """Return a helper that writes a JSON document and returns its file name."""

    def _write(name: str, data) -> str:
        Path(name).write_text(json.dumps(data), encoding="utf-8")
        return name

    return _write
