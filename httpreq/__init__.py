"""
httpreq - HTTP request adapter

Uniform request/response envelope over requests and aiohttp, with
timeout cancellation and error capture.
"""

from httpreq.async_client import HttpRequestClient
from httpreq.client import SyncHttpRequestClient
from httpreq.config import ClientConfig, RequestOptions
from httpreq.models import (
    HttpMethod,
    ResponseType,
    RequestDescriptor,
    TransportResponse,
    RawExchange,
    ResponseEnvelope,
)
from httpreq.placement import PayloadPlacement, resolve_payload_placement
from httpreq.exceptions import (
    HttpRequestError,
    UnsupportedPayloadMethodError,
    TransportError,
    NetworkError,
    RequestTimeoutError,
    HTTPStatusError,
    RequestTooLargeError,
    ResponseTooLargeError,
)
from httpreq.__version__ import __version__

__all__ = [
    "HttpRequestClient",
    "SyncHttpRequestClient",
    "ClientConfig",
    "RequestOptions",
    "HttpMethod",
    "ResponseType",
    "RequestDescriptor",
    "TransportResponse",
    "RawExchange",
    "ResponseEnvelope",
    "PayloadPlacement",
    "resolve_payload_placement",
    "HttpRequestError",
    "UnsupportedPayloadMethodError",
    "TransportError",
    "NetworkError",
    "RequestTimeoutError",
    "HTTPStatusError",
    "RequestTooLargeError",
    "ResponseTooLargeError",
    "__version__",
]
