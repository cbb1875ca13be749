"""Configuration utilities for SDKUTILS.

Centralizes the constants and environment lookups used by the CLI. The
helpers in :mod:`sdkutils.utils` take no configuration.
"""

import logging
import os
from pathlib import Path

from platformdirs import user_log_dir

from sdkutils.errors import InvalidConfigError

ENV_PREFIX = "SDKUTILS"  # pragma: no mutate
LOG_PATH_ENVVAR = f"{ENV_PREFIX}_LOG_PATH"
JSON_INDENT_ENVVAR = f"{ENV_PREFIX}_JSON_INDENT"

# Third-party loggers quieted unless overridden with -L NAME=LEVEL
DEFAULT_LIB_LEVELS = {"click_extra": logging.WARNING, "rich": logging.WARNING}


def default_log_path() -> Path:
    """Return the default flight-recorder file.

    Returns:
        ``latest.log`` inside the per-user log directory for ``sdkutils``.
        The directory is created if needed.
    """
    return Path(user_log_dir("sdkutils", appauthor=False, ensure_exists=True)) / "latest.log"


def get_json_indent() -> int | None:
    """Get the JSON indentation used by the CLI from the environment.

    Returns:
        The value of ``SDKUTILS_JSON_INDENT`` as an int, or ``None`` (compact
        output) when the variable is unset or empty.

    Raises:
        InvalidConfigError: If the value is not a non-negative integer.
    """
    if not (raw := os.environ.get(JSON_INDENT_ENVVAR, "").strip()):
        return None
    try:
        indent = int(raw)
    except ValueError as e:
        raise InvalidConfigError(JSON_INDENT_ENVVAR, raw, "not an integer") from e
    if indent < 0:
        raise InvalidConfigError(JSON_INDENT_ENVVAR, raw, "must not be negative")
    return indent
