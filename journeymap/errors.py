"""
Exception types raised by the journeymap data layer.

The HTTP layer maps them to status codes:
    DataUnavailable   -> 500
    InvalidParameter  -> 400
MalformedBounds never reaches the HTTP layer; bounds parsing falls back to
"no bounds" when it is raised.
"""


class JourneyMapError(Exception):
    """Base class for journeymap errors."""


class DataUnavailable(JourneyMapError):
    """No dataset source could be read or parsed."""

    def __init__(self, message, sources=None):
        super().__init__(message)
        self.sources = list(sources or [])


class InvalidParameter(JourneyMapError):
    """A query parameter is outside its recognized enumeration."""

    def __init__(self, param, value, valid):
        self.param = param
        self.value = value
        self.valid = list(valid)
        super().__init__(f"Invalid {param} parameter: {value!r}")


class MalformedBounds(JourneyMapError, ValueError):
    """Bounds input is not a four-field numeric object."""
