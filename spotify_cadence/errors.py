"""Exception types raised by Spotify Cadence Demo."""

from typing import Optional


class CadenceDemoError(Exception):
    """Base class for all errors raised by this package."""


class ConfigError(CadenceDemoError):
    """Required configuration is missing or invalid."""

    def __init__(self, message: str, missing: Optional[list[str]] = None):
        super().__init__(message)
        self.missing = missing or []


class NetworkError(CadenceDemoError):
    """Transport failure: DNS, refused connection, timeout or elapsed deadline."""


class DecodeError(CadenceDemoError):
    """Response body is not the JSON shape we expect."""


class HTTPStatusError(CadenceDemoError):
    """An endpoint answered with an unexpected HTTP status.

    Args:
        status_code: HTTP status code
        reason: HTTP reason phrase (may be empty)
        body: Response body text
    """

    prefix = "status"

    def __init__(self, status_code: int, reason: str = "", body: str = ""):
        self.status_code = status_code
        self.reason = reason or ""
        self.body = body or ""
        super().__init__(f"{self.prefix} {self.status_text}: {self.body}")

    @property
    def status_text(self) -> str:
        """Status line text, e.g. '400 Bad Request'."""
        if self.reason:
            return f"{self.status_code} {self.reason}"
        return str(self.status_code)


class AuthError(HTTPStatusError):
    """Token endpoint returned something other than 200."""


class SearchError(HTTPStatusError):
    """Search endpoint returned a non-2xx status."""

    prefix = "search failed:"


class InvalidInputError(CadenceDemoError, ValueError):
    """Cadence inputs outside the range the formula is defined for."""
