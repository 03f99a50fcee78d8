"""Exception hierarchy for mpd-search."""

from pathlib import Path


class MpdSearchError(Exception):
    """Base exception for all mpd-search errors.

    All exceptions in this package inherit from this class,
    allowing callers to catch all mpd-search errors with
    a single except clause.
    """

    pass


# Configuration Errors
class ConfigError(MpdSearchError):
    """Configuration-related errors."""

    pass


class ConfigParseError(ConfigError):
    """Configuration file has invalid syntax."""

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Invalid config at {path}: {detail}")


class ConfigValidationError(ConfigError):
    """Configuration value is invalid."""

    def __init__(self, key: str, value: object, reason: str) -> None:
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid config value for '{key}': {reason}")


# Validation Errors
class ValidationError(MpdSearchError):
    """Invalid input value."""

    def __init__(self, field: str, value: object, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field}: {reason}")
