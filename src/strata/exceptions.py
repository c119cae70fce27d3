"""Custom exceptions for world generation."""


class StrataError(Exception):
    """Base exception for strata errors."""

    pass


class ConfigurationError(StrataError, ValueError):
    """Raised when a generation config is invalid.

    Attributes:
        field: Dotted path of the offending option, e.g. ``ores.1.rarity``.
    """

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")
