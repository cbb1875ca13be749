"""SDKUTILS helper commands.

Thin shell wrappers over :mod:`sdkutils.utils`, handy when debugging request
URLs or option files.

Behavior
- Results (query strings, paths, JSON) go to **stdout**; status lines go to
  **stderr** so the commands compose with pipes.
- ``compare`` exits 0 when the documents are equal and 1 when they differ.
- ``check-keys`` exits 1 when validation fails.
- Unreadable or malformed input is a usage error (exit 2).
"""

from __future__ import annotations

import json
import logging
from typing import IO, Any

import click

from sdkutils import config
from sdkutils.errors import InvalidConfigError, KeyValidationError
from sdkutils.utils.compare import deep_compare
from sdkutils.utils.encoding import encode_params, encode_uri
from sdkutils.utils.keys import (
    check_object_has_keys,
    check_object_has_no_additional_keys,
)

from .helpers import error, parse_pairs, success, warn

logger = logging.getLogger(__name__)


def _load_json(stream: IO[str], param_hint: str) -> Any:
    try:
        return json.load(stream)
    except json.JSONDecodeError as e:
        raise click.BadParameter(
            f"{stream.name} is not valid JSON: {e}", param_hint=param_hint
        ) from e


@click.command("encode-params")
@click.argument("pairs", nargs=-1, callback=parse_pairs, metavar="KEY=VALUE...")
def encode_params_cmd(pairs: dict[str, str]) -> None:
    """Print a percent-encoded query string built from KEY=VALUE pairs."""
    logger.debug("Encoding %d query parameter(s)", len(pairs))
    click.echo(encode_params(pairs))


@click.command("encode-uri")
@click.argument("template")
@click.argument(
    "substitutions", nargs=-1, callback=parse_pairs, metavar="PLACEHOLDER=VALUE..."
)
def encode_uri_cmd(template: str, substitutions: dict[str, str]) -> None:
    """Substitute placeholders in TEMPLATE with percent-encoded values.

    Placeholders must not be substrings of one another.
    """
    for placeholder in substitutions:
        if placeholder not in template:
            warn(f"Placeholder {placeholder!r} does not occur in the template.")
    click.echo(encode_uri(template, substitutions))


@click.command("compare")
@click.argument("left", type=click.File("r", encoding="utf-8"))
@click.argument("right", type=click.File("r", encoding="utf-8"))
@click.pass_context
def compare_cmd(ctx: click.Context, left: IO[str], right: IO[str]) -> None:
    """Deep-compare two JSON documents.

    Object key order is ignored, array order is not.
    """
    equal = deep_compare(_load_json(left, "LEFT"), _load_json(right, "RIGHT"))
    logger.info("Compared %s with %s: %s", left.name, right.name, equal)
    click.echo("equal" if equal else "different")
    ctx.exit(0 if equal else 1)


@click.command("check-keys")
@click.argument("file", type=click.File("r", encoding="utf-8"))
@click.option(
    "--require",
    "-r",
    "required",
    multiple=True,
    help="Key that must be present. Repeatable.",
)
@click.option(
    "--allow",
    "-a",
    "allowed",
    multiple=True,
    help=(
        "Key that may be present. Repeatable. When given, any key not listed "
        "(or required) is rejected."
    ),
)
@click.pass_context
def check_keys_cmd(
    ctx: click.Context,
    file: IO[str],
    required: tuple[str, ...],
    allowed: tuple[str, ...],
) -> None:
    """Validate the keys of the JSON object in FILE and echo it back."""
    obj = _load_json(file, "FILE")
    if not isinstance(obj, dict):
        raise click.BadParameter(
            f"{file.name} does not hold a JSON object", param_hint="FILE"
        )
    try:
        indent = config.get_json_indent()
    except InvalidConfigError as e:
        raise click.ClickException(str(e)) from e

    try:
        check_object_has_keys(obj, required)
        if allowed:
            check_object_has_no_additional_keys(obj, allowed + required)
    except KeyValidationError as e:
        error(str(e))
        ctx.exit(1)

    success(f"{file.name}: keys OK")
    click.echo(json.dumps(obj, indent=indent))


COMMANDS = [encode_params_cmd, encode_uri_cmd, compare_cmd, check_keys_cmd]
