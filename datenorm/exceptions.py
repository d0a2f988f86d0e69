"""Exception hierarchy for datenorm.

Every error carries a human-readable ``message`` and an optional ``details``
dict that the Flask error handlers render into the JSON error body.
"""


class DateNormError(Exception):
    """Base exception for all datenorm errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(DateNormError):
    """Client input failed validation (HTTP 400)."""


class DateDecodeError(ValidationError, ValueError):
    """A date or date-time token could not be decoded.

    Also a ValueError so pydantic reports it as a field-level error when
    raised from inside a validator.
    """

    def __init__(self, message: str, value=None):
        super().__init__(message, {"value": value})
        self.value = value


class TimeZoneError(ValidationError):
    """Client declared a time zone that could not be resolved."""
