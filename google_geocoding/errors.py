"""Exceptions raised by the geocoding client."""

from typing import Optional

from .codes import describe_status


class GeocodingError(Exception):
    """Base class for every error raised by this package."""


class InvalidArgument(GeocodingError, ValueError):
    """Raised before any request when the caller supplied unusable input."""


class MalformedResponse(GeocodingError):
    """Raised when the service answered with something that is not XML."""


class ProviderError(GeocodingError):
    """
    Raised when the service answered with a non-success status code.

    When no message is given, the description is looked up in the status
    table; unknown codes get a generic message.

    Attributes:
        code: The status code returned by the service, if any.
    """

    def __init__(self, message: Optional[str] = None, code: Optional[int] = None) -> None:
        if message is None:
            message = describe_status(code) if code is not None else None
        if message is None:
            message = f"provider returned status {code}"
        super().__init__(message)
        self.code = code
