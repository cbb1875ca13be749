"""Runtime type predicates."""

from typing import Any


def is_function(value: Any = None) -> bool:
    """Return True if ``value`` can be called."""
    return callable(value)


def is_array(value: Any = None) -> bool:
    """Return True if ``value`` is a list.

    Tuples, strings and other sequences are not arrays.
    """
    return isinstance(value, list)
