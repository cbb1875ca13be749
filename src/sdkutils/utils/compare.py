"""Deep structural equality.

`deep_compare` classifies both operands into a `ValueKind` and only compares
values of the same kind, each kind with its own rule:

* ``NULL``: ``None``; only equal to itself.
* ``PRIMITIVE``: strings, bytes, numbers and booleans, compared by value. A
  boolean never equals a number (``True`` vs ``1``).
* ``PATTERN``: compiled regular expressions, equal when both the source
  pattern and the flags match.
* ``DATE``: dates and datetimes, equal when they denote the same day or
  instant. A date never equals a datetime.
* ``SEQUENCE``: lists and tuples, compared position by position.
* ``MAPPING``: equal key sets (order-independent) and pairwise equal values.
  Keys follow the same rule as values, so ``{1: "x"}`` and ``{True: "x"}``
  differ.
* ``CALLABLE``: equal only to itself. Two distinct functions can close over
  different state even when their source is identical.
* ``OTHER``: anything else; equal only to itself.

Identity always wins, so any value is equal to itself regardless of kind.
"""

import datetime
import re
from collections.abc import Callable, Mapping
from enum import Enum
from numbers import Number
from types import MethodType
from typing import Any, TypeAlias


class ValueKind(Enum):
    """Structural kind of a value, as seen by `deep_compare`."""

    NULL = "null"
    PRIMITIVE = "primitive"
    PATTERN = "pattern"
    DATE = "date"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    CALLABLE = "callable"
    OTHER = "other"


def classify(value: Any) -> ValueKind:
    """Return the `ValueKind` of ``value``.

    Checks run in a fixed order, so a value that fits several kinds gets the
    first one (e.g. a callable mapping is a ``MAPPING``).
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, (str, bytes, bool, Number)):
        return ValueKind.PRIMITIVE
    if isinstance(value, re.Pattern):
        return ValueKind.PATTERN
    if isinstance(value, datetime.date):
        return ValueKind.DATE
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    if callable(value):
        return ValueKind.CALLABLE
    return ValueKind.OTHER


def _compare_primitives(a: Any, b: Any) -> bool:
    if isinstance(a, bool) != isinstance(b, bool):
        return False
    return bool(a == b)


def _compare_patterns(a: re.Pattern, b: re.Pattern) -> bool:
    return a.pattern == b.pattern and a.flags == b.flags


def _compare_dates(a: datetime.date, b: datetime.date) -> bool:
    if isinstance(a, datetime.datetime) != isinstance(b, datetime.datetime):
        return False
    # naive vs aware datetimes compare unequal rather than raising
    return a == b


def _compare_callables(a: Callable, b: Callable) -> bool:
    # obj.method builds a new bound method on every access
    if isinstance(a, MethodType) and isinstance(b, MethodType):
        return a.__self__ is b.__self__ and a.__func__ is b.__func__
    return False


def _never_equal(a: Any, b: Any) -> bool:  # pylint: disable=unused-argument
    return False


_COMPARERS: dict[ValueKind, Callable[[Any, Any], bool]] = {
    ValueKind.NULL: _never_equal,  # None is None is caught by the identity check
    ValueKind.PRIMITIVE: _compare_primitives,
    ValueKind.PATTERN: _compare_patterns,
    ValueKind.DATE: _compare_dates,
    ValueKind.CALLABLE: _compare_callables,
    ValueKind.OTHER: _never_equal,
}

_Seen: TypeAlias = set[tuple[int, int]]


def _compare_sequences(a: list | tuple, b: list | tuple, seen: _Seen) -> bool:
    if len(a) != len(b):
        return False
    return all(_deep_compare(x, y, seen) for x, y in zip(a, b))


def _compare_mappings(a: Mapping, b: Mapping, seen: _Seen) -> bool:
    if a.keys() != b.keys():
        return False
    # hash lookup matches 1 with True; pair each key with b's own key object
    b_keys = {key: key for key in b}
    return all(
        _deep_compare(key, b_keys[key], seen) and _deep_compare(value, b[key], seen)
        for key, value in a.items()
    )


_CONTAINER_COMPARERS: dict[ValueKind, Callable[[Any, Any, _Seen], bool]] = {
    ValueKind.SEQUENCE: _compare_sequences,
    ValueKind.MAPPING: _compare_mappings,
}


def _deep_compare(a: Any, b: Any, seen: _Seen) -> bool:
    if a is b:
        return True
    kind = classify(a)
    if kind is not classify(b):
        return False
    if kind not in _CONTAINER_COMPARERS:
        return _COMPARERS[kind](a, b)
    pair = (id(a), id(b))
    # pair is still being compared further up; a difference shows up there
    if pair in seen:
        return True
    seen.add(pair)
    return _CONTAINER_COMPARERS[kind](a, b, seen)


def deep_compare(a: Any, b: Any) -> bool:
    """Compare two values for deep structural equality.

    Self-referential containers are supported: a pair of containers met
    again while it is still being compared is taken as equal, so two cyclic
    structures of the same shape compare equal instead of recursing forever.

    Args:
        a: First value.
        b: Second value.

    Returns:
        True if ``a`` and ``b`` are the same object, or are of the same
        `ValueKind` and equal under that kind's rule. Never raises for
        mismatched types; they simply compare unequal.

    Example:
        >>> deep_compare({"a": [1, 2]}, {"a": [1, 2]})
        True
        >>> deep_compare({}, None)
        False
    """
    return _deep_compare(a, b, set())
