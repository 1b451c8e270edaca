"""
httpreq Synchronous Client
"""

import time
from typing import Any, Optional

from httpreq.base import BaseRequestClient, Options
from httpreq.config import ClientConfig
from httpreq.http.adapter import Transport
from httpreq.http.requests_adapter import RequestsTransport
from httpreq.models import RequestDescriptor, ResponseEnvelope


class SyncHttpRequestClient(BaseRequestClient):
    """
    Blocking HTTP request client

    Same contract as HttpRequestClient for code that does not run an
    event loop. The timeout bounds connecting, each read, and the total
    time spent reading the body.

    Example:
        >>> from httpreq import SyncHttpRequestClient, ClientConfig
        >>> client = SyncHttpRequestClient(ClientConfig(base_url="https://api.example.com"))
        >>> envelope = client.post("/items", data={"name": "widget"})
        >>> envelope.status_code
        201
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        transport: Optional[Transport] = None,
    ):
        """
        Initialize sync client

        Args:
            config: Client configuration (defaults apply when omitted)
            transport: Transport performing the calls (requests by default)
        """
        super().__init__(config)
        self.transport = transport or RequestsTransport()

    def __enter__(self) -> "SyncHttpRequestClient":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying transport"""
        self.transport.close()

    def _perform(self, request: RequestDescriptor) -> ResponseEnvelope:
        start = time.monotonic()
        self._log_request(request)

        try:
            response = self.transport.send(request, timeout=self.timeout)
        except Exception as e:
            return self._failure(request, e, time.monotonic() - start)

        return self._success(request, response, time.monotonic() - start)

    def request(self, method: str, url: str, options: Options = None) -> ResponseEnvelope:
        """
        Make an HTTP call

        Args:
            method: HTTP verb, case-insensitive
            url: Absolute URL, or path relative to base_url
            options: RequestOptions or dict with keys headers, response_type,
                data, max_request_bytes, max_response_bytes

        Returns:
            ResponseEnvelope

        Raises:
            UnsupportedPayloadMethodError: Payload given for a verb other
                than GET, POST or PUT (no request is sent)
        """
        return self._perform(self.build_request(method, url, options))

    def get(self, url: str, **options: Any) -> ResponseEnvelope:
        return self.request("GET", url, options)

    def post(self, url: str, **options: Any) -> ResponseEnvelope:
        return self.request("POST", url, options)

    def put(self, url: str, **options: Any) -> ResponseEnvelope:
        return self.request("PUT", url, options)

    def patch(self, url: str, **options: Any) -> ResponseEnvelope:
        return self.request("PATCH", url, options)

    def delete(self, url: str, **options: Any) -> ResponseEnvelope:
        return self.request("DELETE", url, options)

    def head(self, url: str, **options: Any) -> ResponseEnvelope:
        return self.request("HEAD", url, options)

    def options(self, url: str, **options: Any) -> ResponseEnvelope:
        return self.request("OPTIONS", url, options)
