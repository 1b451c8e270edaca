"""
Requests-based transport (synchronous).
"""

import time
from typing import Optional

import requests

from ..codec import build_url, decode_body, encode_query
from ..exceptions import NetworkError, RequestTimeoutError, ResponseTooLargeError
from ..models import RequestDescriptor, TransportResponse
from .adapter import Transport, check_status, prepare_body

CHUNK_SIZE = 64 * 1024

# urllib3 rejects a zero timeout
MIN_TIMEOUT = 0.001


def declared_charset(resp: requests.Response) -> Optional[str]:
    """
    Charset announced in Content-Type, None when absent.

    requests falls back to ISO-8859-1 for text/* without a charset; the
    body is decoded as UTF-8 in that case instead.
    """
    content_type = resp.headers.get("Content-Type", "")
    if "charset=" not in content_type.lower():
        return None
    return requests.utils.get_encoding_from_headers(resp.headers)


class RequestsTransport(Transport):
    """
    Synchronous transport using requests library.

    Features:
    - Connection reuse via session
    - Total deadline checked while the body is read
    - Request and response size ceilings
    """

    def __init__(self, session: Optional[requests.Session] = None):
        """
        Initialize requests transport.

        Args:
            session: Optional requests.Session instance
        """
        self._external_session = session is not None
        self.session = session or requests.Session()

    def send(
        self, request: RequestDescriptor, timeout: Optional[float] = None
    ) -> TransportResponse:
        """
        Send HTTP request using requests library.

        Args:
            request: Request descriptor
            timeout: Seconds allowed for the whole call

        Returns:
            TransportResponse

        Raises:
            HTTPStatusError: On non-2xx responses
            NetworkError: On network connectivity issues
            RequestTimeoutError: On request timeout
            RequestTooLargeError: Body above max_request_bytes
            ResponseTooLargeError: Response above max_response_bytes
        """
        body = prepare_body(request)
        deadline = None
        if timeout is not None:
            timeout = max(timeout, MIN_TIMEOUT)
            deadline = time.monotonic() + timeout

        try:
            with self.session.request(
                method=request.method,
                url=build_url(request.base_url, request.url),
                headers=request.headers,
                params=encode_query(request.params),
                data=body,
                timeout=timeout,
                stream=True,
            ) as resp:
                raw = self._read_body(resp, request.max_response_bytes, deadline)
                response = TransportResponse(
                    status=resp.status_code,
                    reason=resp.reason,
                    headers=dict(resp.headers),
                    content=decode_body(raw, request.response_type, declared_charset(resp)),
                    url=resp.url,
                )

        except requests.exceptions.Timeout as e:
            raise RequestTimeoutError(f"Request timed out: {e}") from e

        except requests.exceptions.RequestException as e:
            raise NetworkError(f"Network request failed: {e}") from e

        return check_status(response)

    @staticmethod
    def _read_body(
        resp: requests.Response, limit: Optional[int], deadline: Optional[float]
    ) -> bytes:
        chunks = []
        size = 0
        for chunk in resp.iter_content(chunk_size=CHUNK_SIZE):
            if deadline is not None and time.monotonic() > deadline:
                raise RequestTimeoutError("Request timed out while reading response body")
            size += len(chunk)
            if limit is not None and size > limit:
                raise ResponseTooLargeError(
                    f"Response body exceeds max_response_bytes={limit}"
                )
            chunks.append(chunk)
        return b"".join(chunks)

    def close(self) -> None:
        """Close the session."""
        if not self._external_session:
            self.session.close()
