"""
Base transport interfaces.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..codec import encode_body
from ..exceptions import HTTPStatusError, RequestTooLargeError
from ..models import RequestDescriptor, TransportResponse


class Transport(ABC):
    """
    Abstract base class for blocking transports.

    Allows pluggable HTTP clients for different use cases.
    """

    @abstractmethod
    def send(
        self, request: RequestDescriptor, timeout: Optional[float] = None
    ) -> TransportResponse:
        """
        Perform one HTTP call.

        Args:
            request: Request descriptor
            timeout: Seconds before the call is abandoned

        Returns:
            TransportResponse with a 2xx status

        Raises:
            HTTPStatusError: On non-2xx responses
            NetworkError: On network connectivity issues
            RequestTimeoutError: On request timeout
        """
        raise NotImplementedError

    def close(self) -> None:
        """Release underlying resources."""


class AsyncTransport(ABC):
    """
    Abstract base class for asyncio transports.

    Cancelling the task that awaits ``send`` aborts the in-flight call.
    """

    @abstractmethod
    async def send(self, request: RequestDescriptor) -> TransportResponse:
        """
        Perform one HTTP call.

        Args:
            request: Request descriptor

        Returns:
            TransportResponse with a 2xx status

        Raises:
            HTTPStatusError: On non-2xx responses
            NetworkError: On network connectivity issues
        """
        raise NotImplementedError

    async def close(self) -> None:
        """Release underlying resources."""


def prepare_body(request: RequestDescriptor) -> Optional[bytes]:
    """
    Encode the request body and enforce ``max_request_bytes``.

    Raises:
        RequestTooLargeError: If the encoded body exceeds the ceiling
    """
    body = encode_body(request.data, request.headers)
    limit = request.max_request_bytes
    if body is not None and limit is not None and len(body) > limit:
        raise RequestTooLargeError(
            f"Request body of {len(body)} bytes exceeds max_request_bytes={limit}"
        )
    return body


def check_status(response: TransportResponse) -> TransportResponse:
    """
    Raise for statuses outside 2xx.

    Raises:
        HTTPStatusError: Carrying the decoded response
    """
    if not (200 <= response.status < 300):
        raise HTTPStatusError(
            f"Request failed with status code {response.status}", response=response
        )
    return response
