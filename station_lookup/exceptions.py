"""
Exceptions raised while resolving a station or relaying a request.

Every error carries the user-facing message sent back as the ``error``
payload and the HTTP status code the web layer answers with.
"""


class StationLookupError(Exception):
    """Base class for all station lookup errors."""

    message = "Station lookup failed"
    status_code = 500

    def __init__(self, message: str = None):
        super().__init__(message or self.message)
        if message:
            self.message = message

    def to_dict(self) -> dict:
        """Error payload for JSON serialization."""
        return {'error': self.message}


class ParamMissing(StationLookupError):
    """No identifier supplied with the request."""

    message = "No ICAO provided"
    status_code = 400


class DatasetUnavailable(StationLookupError):
    """A reference file is missing or cannot be read."""

    message = "Database files missing on server"
    status_code = 503


class NotFound(StationLookupError):
    """The identifier is not present in the airport dataset."""

    message = "Station not found"
    status_code = 404


class MalformedRow(StationLookupError):
    """A data row has a required numeric field that does not parse."""

    message = "Malformed data row"


class UrlNotAllowed(StationLookupError):
    """The relay target does not start with an allowed prefix."""

    message = "URL not in allowlist"
    status_code = 403


class TransportError(StationLookupError):
    """The upstream server could not be reached."""

    message = "Failed to fetch remote URL"
    status_code = 502
