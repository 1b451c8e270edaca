"""
HTTP transports for httpreq.
"""

from .adapter import AsyncTransport, Transport
from .aiohttp_adapter import AiohttpTransport
from .requests_adapter import RequestsTransport

__all__ = ["Transport", "AsyncTransport", "RequestsTransport", "AiohttpTransport"]
