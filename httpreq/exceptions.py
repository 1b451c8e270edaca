"""
Exception classes for httpreq.
"""

from typing import Any, Optional


class HttpRequestError(Exception):
    """Base exception for all httpreq errors."""

    pass


class UnsupportedPayloadMethodError(HttpRequestError, ValueError):
    """
    Payload supplied for a method that cannot carry one.

    Raised before any network activity. This is the only error that
    escapes ``request``.
    """

    def __init__(self, method: str):
        self.method = method
        super().__init__(f"Payload data is not supported for method {method}")


class TransportError(HttpRequestError):
    """
    Transport-level failure.

    Captured into the response envelope, never raised out of ``request``.
    """

    def __init__(self, message: str, response: Optional[Any] = None):
        """
        Initialize transport error.

        Args:
            message: Error message
            response: TransportResponse, if one was received
        """
        super().__init__(message)
        self.response = response


class NetworkError(TransportError):
    """Connection, DNS or protocol failure."""

    pass


class RequestTimeoutError(TransportError):
    """The configured timeout elapsed before the call completed."""

    pass


class HTTPStatusError(TransportError):
    """The server answered with a status outside 2xx."""

    @property
    def status_code(self) -> int:
        return self.response.status if self.response is not None else -1

    def __repr__(self) -> str:
        return f"HTTPStatusError(status_code={self.status_code})"


class RequestTooLargeError(TransportError):
    """Encoded request body exceeds ``max_request_bytes``."""

    pass


class ResponseTooLargeError(TransportError):
    """Response body exceeds ``max_response_bytes``."""

    pass
