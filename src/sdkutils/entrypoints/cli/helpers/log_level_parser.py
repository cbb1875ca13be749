"""Helpers for parsing logger-level CLI options.

Options of the form NAME=LEVEL may be repeated or given as one comma/space
separated string (e.g. from an environment variable). Level names are
validated and converted to their numeric logging levels.
"""

import logging

import click

from sdkutils.config import DEFAULT_LIB_LEVELS

from .pairs import normalize_items


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback that parses NAME=LEVEL pairs into a name->level dict.

    Starts from `DEFAULT_LIB_LEVELS`; later items override earlier ones.

    Args:
        ctx (click.Context): Click context (unused).
        param (click.Parameter | None): Click parameter (unused).
        value (str | list[str] | tuple[str, ...]): The raw option value(s).

    Returns:
        dict[str, int]: Mapping of logger names to numeric logging levels.

    Raises:
        click.BadParameter: If an item is not NAME=LEVEL or LEVEL is unknown.
    """

    levels = dict(DEFAULT_LIB_LEVELS)
    for item in normalize_items(value):
        try:
            name, level_str = item.split("=", 1)
        except ValueError as e:
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}") from e
        lvl = logging.getLevelNamesMapping().get(level_str.strip().upper())
        if lvl is None:
            raise click.BadParameter(f"Invalid log level: {level_str}")
        levels[name.strip()] = lvl
    return levels
