"""Search and removal helpers for ordered sequences."""

from collections.abc import Callable, MutableSequence, Sequence
from typing import TypeVar

T = TypeVar("T")


def for_each(sequence: Sequence[T], fn: Callable[[T], object]) -> None:
    """Call ``fn`` once for every element of ``sequence``, front to back."""
    for element in sequence:
        fn(element)


def _indices(length: int, reverse: bool) -> range:
    return range(length - 1, -1, -1) if reverse else range(length)


def find_element(
    sequence: Sequence[T], predicate: Callable[[T], object], reverse: bool = False
) -> T | None:
    """Return the first element matching ``predicate``.

    Scanning stops at the first match.

    Args:
        sequence: The sequence to search.
        predicate: Called with each element; a truthy result is a match.
        reverse: Scan from the end instead of the start.

    Returns:
        The matching element, or ``None`` when nothing matches.
    """
    for i in _indices(len(sequence), reverse):
        if predicate(sequence[i]):
            return sequence[i]
    return None


def remove_element(
    sequence: MutableSequence[T],
    predicate: Callable[[T], object],
    reverse: bool = False,
) -> bool:
    """Remove the first element matching ``predicate``, in place.

    At most one element is removed; the elements after it shift down to close
    the gap. The sequence is left untouched when nothing matches.

    Args:
        sequence: The sequence to modify.
        predicate: Called with each element; a truthy result is a match.
        reverse: Scan from the end, so the last match is removed.

    Returns:
        ``True`` if an element was removed.
    """
    for i in _indices(len(sequence), reverse):
        if predicate(sequence[i]):
            del sequence[i]
            return True
    return False
