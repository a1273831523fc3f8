"""Errors raised by the transit API client. All derive from TransitAPIError."""


class TransitAPIError(RuntimeError):
    pass


class RequestConstructionError(TransitAPIError):
    """Base URL and endpoint did not combine into a usable request."""


class NetworkError(TransitAPIError):
    """Transport failed: DNS, refused connection, timeout, broken read."""


class UnexpectedStatusError(TransitAPIError):
    def __init__(self, status_code: int, body: str = ""):
        super().__init__(f"bad status code: {status_code}")
        self.status_code = status_code
        self.body = body


class DecodeError(TransitAPIError):
    """Response body was not valid JSON or did not match the StopData shape."""
