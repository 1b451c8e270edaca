"""
Aiohttp-based transport (asynchronous).
"""

from typing import Any, Dict, Optional

import aiohttp

from ..codec import build_url, decode_body, encode_query
from ..exceptions import NetworkError, ResponseTooLargeError
from ..models import RequestDescriptor, TransportResponse
from .adapter import AsyncTransport, check_status, prepare_body

CHUNK_SIZE = 64 * 1024


def fold_headers(headers: Any) -> Dict[str, str]:
    """Join repeated header values with ", ", keeping the first spelling of each name"""
    folded: Dict[str, str] = {}
    seen = set()
    for key in headers.keys():
        if key.lower() in seen:
            continue
        seen.add(key.lower())
        folded[key] = ", ".join(headers.getall(key))
    return folded


class AiohttpTransport(AsyncTransport):
    """
    Asynchronous transport using aiohttp library.

    Features:
    - Non-blocking requests for async applications
    - Request and response size ceilings
    - Cancellation through the awaiting task

    The transport sets no timeout of its own; the client bounds each call
    by cancelling it.
    """

    def __init__(self, session: Optional[aiohttp.ClientSession] = None):
        """
        Initialize aiohttp transport.

        Args:
            session: Optional aiohttp.ClientSession instance
        """
        self._external_session = session is not None
        self.session = session

    async def __aenter__(self) -> "AiohttpTransport":
        """Context manager entry."""
        self._get_session()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Context manager exit."""
        await self.close()

    def _get_session(self) -> aiohttp.ClientSession:
        if self.session is None or self.session.closed:
            self.session = aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=None))
        return self.session

    async def send(self, request: RequestDescriptor) -> TransportResponse:
        """
        Send HTTP request using aiohttp library.

        Args:
            request: Request descriptor

        Returns:
            TransportResponse

        Raises:
            HTTPStatusError: On non-2xx responses
            NetworkError: On network connectivity issues
            RequestTooLargeError: Body above max_request_bytes
            ResponseTooLargeError: Response above max_response_bytes
        """
        body = prepare_body(request)
        session = self._get_session()

        try:
            async with session.request(
                method=request.method,
                url=build_url(request.base_url, request.url),
                headers=request.headers,
                params=encode_query(request.params),
                data=body,
            ) as resp:
                raw = await self._read_body(resp, request.max_response_bytes)
                response = TransportResponse(
                    status=resp.status,
                    reason=resp.reason,
                    headers=fold_headers(resp.headers),
                    content=decode_body(raw, request.response_type, resp.charset),
                    url=str(resp.url),
                )

        except aiohttp.ClientError as e:
            raise NetworkError(f"Network request failed: {e}") from e

        return check_status(response)

    @staticmethod
    async def _read_body(resp: aiohttp.ClientResponse, limit: Optional[int]) -> bytes:
        chunks = []
        size = 0
        async for chunk in resp.content.iter_chunked(CHUNK_SIZE):
            size += len(chunk)
            if limit is not None and size > limit:
                raise ResponseTooLargeError(
                    f"Response body exceeds max_response_bytes={limit}"
                )
            chunks.append(chunk)
        return b"".join(chunks)

    async def close(self) -> None:
        """Close the session."""
        if not self._external_session and self.session and not self.session.closed:
            await self.session.close()
