"""Error definitions for SDKUTILS."""

from collections.abc import Iterable

# ============================================================================
#                           General errors
# ============================================================================


class SdkUtilsError(Exception):
    """Base class for all SDKUTILS errors."""


class InvalidConfigError(SdkUtilsError):
    """Raised when an SDKUTILS environment variable holds an unusable value."""

    def __init__(self, name: str, value: str, reason: str) -> None:
        super().__init__(f"Invalid value {value!r} for {name}: {reason}")
        self.name = name
        self.value = value


# ============================================================================
#                        Key validation errors
# ============================================================================


def _format_keys(keys: tuple[str, ...]) -> str:
    return ", ".join(repr(key) for key in keys)


class KeyValidationError(SdkUtilsError, ValueError):
    """Base class for errors raised by the mapping key validators."""

    def __init__(self, keys: Iterable[str], message: str) -> None:
        super().__init__(message)
        self.keys = tuple(keys)


class MissingKeyError(KeyValidationError):
    """Raised when one or more required keys are absent from a mapping."""

    def __init__(self, keys: Iterable[str]) -> None:
        keys = tuple(keys)
        super().__init__(keys, f"Missing required key(s): {_format_keys(keys)}")


class UnexpectedKeyError(KeyValidationError):
    """Raised when a mapping holds keys outside its allow-list."""

    def __init__(self, keys: Iterable[str]) -> None:
        keys = tuple(keys)
        super().__init__(keys, f"Unexpected key(s): {_format_keys(keys)}")
