"""
Request building and envelope normalization shared by the sync and async
clients.
"""

import logging
from typing import Any, Dict, Optional, Union

from httpreq.codec import merge_headers
from httpreq.config import ClientConfig, RequestOptions
from httpreq.metrics import metrics_request
from httpreq.models import (
    NO_STATUS,
    RawExchange,
    RequestDescriptor,
    ResponseEnvelope,
    TransportResponse,
)
from httpreq.placement import PayloadPlacement, resolve_payload_placement
from httpreq.utils import sanitize_for_logging, setup_logging

logger = logging.getLogger("httpreq.client")

Options = Union[RequestOptions, Dict[str, Any], None]


class BaseRequestClient:
    """
    Common part of the httpreq clients.

    Holds the immutable configuration, turns ``(method, url, options)`` into
    a RequestDescriptor and folds transport outcomes into a ResponseEnvelope.
    """

    def __init__(self, config: Optional[ClientConfig] = None):
        self.config = config or ClientConfig()

        if self.config.debug:
            setup_logging(debug=True)

    @property
    def base_url(self) -> Optional[str]:
        return self.config.base_url

    @property
    def headers(self) -> Dict[str, str]:
        """Default headers sent with every request"""
        return dict(self.config.default_headers)

    @property
    def timeout(self) -> float:
        """Call timeout in seconds"""
        return self.config.timeout_seconds

    @staticmethod
    def _coerce_options(options: Options) -> RequestOptions:
        if options is None:
            return RequestOptions()
        if isinstance(options, RequestOptions):
            return options
        return RequestOptions.model_validate(options)

    def build_request(self, method: str, url: str, options: Options = None) -> RequestDescriptor:
        """
        Build the descriptor for one call.

        Args:
            method: HTTP verb, case-insensitive
            url: Absolute URL, or path relative to base_url
            options: RequestOptions or dict with the same keys

        Returns:
            RequestDescriptor

        Raises:
            UnsupportedPayloadMethodError: Payload given for a verb other
                than GET, POST or PUT
        """
        opts = self._coerce_options(options)
        verb = getattr(method, "value", method).upper()
        placement = resolve_payload_placement(verb, opts.data)

        return RequestDescriptor(
            method=verb,
            url=url,
            base_url=self.config.base_url,
            headers=merge_headers(self.config.default_headers, opts.headers),
            response_type=opts.response_type,
            params=opts.data if placement is PayloadPlacement.QUERY else None,
            data=opts.data if placement is PayloadPlacement.BODY else None,
            max_request_bytes=opts.max_request_bytes,
            max_response_bytes=opts.max_response_bytes,
        )

    def _log_request(self, request: RequestDescriptor) -> None:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "%s %s headers=%s",
                request.method,
                request.url,
                sanitize_for_logging(request.headers),
            )

    def _success(
        self, request: RequestDescriptor, response: TransportResponse, latency: float
    ) -> ResponseEnvelope:
        metrics_request(request.method, response.status, latency)
        logger.debug("%s %s -> %d (%.3fs)", request.method, request.url, response.status, latency)

        return ResponseEnvelope(
            has_error=False,
            status_code=response.status,
            headers=response.headers,
            content=response.content,
            raw=RawExchange(request=request, response=response),
        )

    def _failure(
        self, request: RequestDescriptor, error: BaseException, latency: float
    ) -> ResponseEnvelope:
        response = getattr(error, "response", None)
        if not isinstance(response, TransportResponse):
            response = None

        status_code = response.status if response is not None else NO_STATUS
        metrics_request(request.method, status_code, latency)
        logger.warning("%s %s failed: %s", request.method, request.url, error)

        return ResponseEnvelope(
            has_error=True,
            status_code=status_code,
            headers=response.headers if response is not None else {},
            content=response.content if response is not None else None,
            raw=RawExchange(request=request, error=error),
        )
