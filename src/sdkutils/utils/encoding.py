"""Percent-encoding helpers for building request URLs.

Values are escaped per URI-component rules: everything except ASCII letters,
digits and ``-_.!~*'()`` becomes a UTF-8 ``%XX`` sequence.
"""

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

# quote() always keeps letters, digits and "_.-~" intact
URI_COMPONENT_SAFE = "!*'()"  # pragma: no mutate


def encode_uri_component(value: Any) -> str:
    """Percent-encode a single value for use inside a URL.

    Args:
        value: The value to encode. Non-strings are converted with ``str()``,
            except booleans, which render as ``true``/``false``, and ``None``,
            which renders as ``null``.

    Returns:
        The escaped string.

    Example:
        >>> encode_uri_component("beer@")
        'beer%40'
    """
    if value is None:
        value = "null"
    elif isinstance(value, bool):
        value = "true" if value else "false"
    return quote(str(value), safe=URI_COMPONENT_SAFE)


def encode_params(params: Mapping[str, Any]) -> str:
    """Build a query string from a mapping.

    Keys and values are both percent-encoded, joined with ``=`` and the pairs
    joined with ``&`` in the mapping's iteration order.

    Args:
        params: The query parameters.

    Returns:
        The query string, without a leading ``?``. Empty for an empty mapping.

    Example:
        >>> encode_params({"foo": "bar", "baz": "beer@"})
        'foo=bar&baz=beer%40'
    """
    return "&".join(
        f"{encode_uri_component(key)}={encode_uri_component(value)}"
        for key, value in params.items()
    )


def encode_uri(template: str, substitutions: Mapping[str, Any]) -> str:
    """Substitute placeholders in a path template with encoded values.

    Every literal occurrence of each key is replaced with the percent-encoded
    value, keys being applied in the mapping's iteration order.

    Args:
        template: The path template, e.g. ``"/rooms/$roomId/state"``.
        substitutions: Placeholder to value mapping.

    Returns:
        The path with all placeholders replaced.

    Note:
        Placeholders must not be substrings of one another (``%here`` and
        ``%here2``). When they are, the result depends on iteration order.
        Prefix tokens with a sentinel character and keep them distinct.
    """
    for placeholder, value in substitutions.items():
        template = template.replace(placeholder, encode_uri_component(value))
    return template
