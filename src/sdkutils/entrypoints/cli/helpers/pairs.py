"""Parsing of KEY=VALUE command-line arguments."""

import re

import click


def normalize_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Normalize an option value into a flat list of items.

    Splits on commas and whitespace and drops empty fragments. Accepts a
    single string or a sequence of strings (as given by repeatable options).

    Args:
        value (str | list[str] | tuple[str, ...]): The option value from Click.

    Returns:
        list[str]: A flat list of non-empty items.
    """
    values = value if isinstance(value, (tuple, list)) else [value]
    return [s for v in values for s in re.split(r"[,\s]+", v) if s]


def parse_pairs(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: tuple[str, ...],
) -> dict[str, str]:
    """Click callback that turns KEY=VALUE arguments into an ordered dict.

    Unlike `normalize_items`, values are taken verbatim: they may contain
    spaces, commas or further ``=`` signs. Argument order is preserved and a
    repeated key keeps its first position but takes the last value.

    Raises:
        click.BadParameter: If an argument has no ``=`` or an empty key.
    """
    pairs: dict[str, str] = {}
    for item in value:
        key, sep, val = item.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"Expected KEY=VALUE, got {item!r}")
        pairs[key] = val
    return pairs
