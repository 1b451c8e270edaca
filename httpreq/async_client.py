"""
Asynchronous Client for httpreq

Provides non-blocking calls using aiohttp.
Ideal for async frameworks like FastAPI, aiohttp, or async scripts.
"""

import asyncio
import logging
import time
from typing import Any, Optional

from .base import BaseRequestClient, Options
from .config import ClientConfig
from .exceptions import RequestTimeoutError
from .http.adapter import AsyncTransport
from .http.aiohttp_adapter import AiohttpTransport
from .models import RequestDescriptor, ResponseEnvelope

logger = logging.getLogger("httpreq.async")


def _caller_cancelling() -> bool:
    """True when the running task itself has a pending cancellation (3.11+)"""
    current = asyncio.current_task()
    cancelling = getattr(current, "cancelling", None)
    return bool(cancelling and cancelling())


class HttpRequestClient(BaseRequestClient):
    """
    Asynchronous HTTP request client

    Every call resolves to a ResponseEnvelope: transport failures and
    timeouts are reported through ``has_error`` instead of being raised.
    Higher-level API clients can subclass it and call ``request``.

    Example:
        >>> import asyncio
        >>> from httpreq import HttpRequestClient, ClientConfig
        >>>
        >>> async def main():
        ...     config = ClientConfig(base_url="https://api.example.com", timeout_millis=5000)
        ...     async with HttpRequestClient(config) as client:
        ...         envelope = await client.get("/users", data={"page": 2})
        ...         if not envelope.has_error:
        ...             print(envelope.content)
        >>>
        >>> asyncio.run(main())
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        transport: Optional[AsyncTransport] = None,
    ):
        """
        Initialize async client.

        Args:
            config: Client configuration (defaults apply when omitted)
            transport: Transport performing the calls (aiohttp by default)
        """
        super().__init__(config)
        self.transport = transport or AiohttpTransport()

    async def __aenter__(self) -> "HttpRequestClient":
        """Context manager entry"""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Context manager exit - closes transport"""
        await self.close()

    async def close(self) -> None:
        """Close the underlying transport"""
        await self.transport.close()

    async def _perform(self, request: RequestDescriptor) -> ResponseEnvelope:
        """
        Run one transport call under the cancellation timer.

        The timer and the transport race; whichever finishes first decides
        the outcome and the timer is disarmed once the call resolves.
        """
        loop = asyncio.get_running_loop()
        task = asyncio.ensure_future(self.transport.send(request))
        expired = False

        def expire() -> None:
            nonlocal expired
            if not task.done():
                expired = True
                logger.debug(
                    "Cancelling %s %s after %dms",
                    request.method,
                    request.url,
                    self.config.timeout_millis,
                )
                task.cancel()

        timer = loop.call_later(self.timeout, expire)
        start = time.monotonic()
        self._log_request(request)

        try:
            response = await task
        except asyncio.CancelledError:
            if not expired or _caller_cancelling():
                raise
            error = RequestTimeoutError(
                f"timeout of {self.config.timeout_millis}ms exceeded"
            )
            return self._failure(request, error, time.monotonic() - start)
        except Exception as e:
            return self._failure(request, e, time.monotonic() - start)
        finally:
            timer.cancel()

        return self._success(request, response, time.monotonic() - start)

    async def request(self, method: str, url: str, options: Options = None) -> ResponseEnvelope:
        """
        Make an HTTP call.

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
        return await self._perform(self.build_request(method, url, options))

    async def get(self, url: str, **options: Any) -> ResponseEnvelope:
        """GET, ``data`` is sent as query parameters"""
        return await self.request("GET", url, options)

    async def post(self, url: str, **options: Any) -> ResponseEnvelope:
        """POST, ``data`` is sent as the body"""
        return await self.request("POST", url, options)

    async def put(self, url: str, **options: Any) -> ResponseEnvelope:
        """PUT, ``data`` is sent as the body"""
        return await self.request("PUT", url, options)

    async def patch(self, url: str, **options: Any) -> ResponseEnvelope:
        return await self.request("PATCH", url, options)

    async def delete(self, url: str, **options: Any) -> ResponseEnvelope:
        return await self.request("DELETE", url, options)

    async def head(self, url: str, **options: Any) -> ResponseEnvelope:
        return await self.request("HEAD", url, options)

    async def options(self, url: str, **options: Any) -> ResponseEnvelope:
        return await self.request("OPTIONS", url, options)
