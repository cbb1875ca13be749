"""Validation of option mappings against required and allowed key sets."""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from sdkutils.errors import MissingKeyError, UnexpectedKeyError

logger = logging.getLogger(__name__)


def check_object_has_keys(obj: Mapping[str, Any], required_keys: Iterable[str]) -> None:
    """Ensure every required key is present in ``obj``.

    Args:
        obj: The mapping to check.
        required_keys: Keys that must be present.

    Raises:
        MissingKeyError: If any required key is absent. All absent keys are
            reported, in the order given.
    """
    if missing := [key for key in required_keys if key not in obj]:
        logger.debug("Missing required keys %s", missing)
        raise MissingKeyError(missing)


def check_object_has_no_additional_keys(
    obj: Mapping[str, Any], allowed_keys: Iterable[str]
) -> None:
    """Ensure ``obj`` has no keys outside ``allowed_keys``.

    Args:
        obj: The mapping to check.
        allowed_keys: Keys that may be present.

    Raises:
        UnexpectedKeyError: If ``obj`` holds any other key. All such keys are
            reported, in the mapping's iteration order.
    """
    allowed = set(allowed_keys)
    if unexpected := [key for key in obj if key not in allowed]:
        logger.debug("Unexpected keys %s (allowed: %s)", unexpected, sorted(allowed))
        raise UnexpectedKeyError(unexpected)
