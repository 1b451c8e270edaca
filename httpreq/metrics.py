"""
Per-call Prometheus metrics.

Series are registered on the default prometheus_client registry; exposing
it is left to the application.
"""

import logging

from prometheus_client import Counter, Histogram

logger = logging.getLogger("httpreq.metrics")

REQUEST_COUNT = Counter(
    "httpreq_requests_total",
    "HTTP calls completed by httpreq clients",
    ["method", "code"],
)

REQUEST_LATENCY = Histogram(
    "httpreq_request_latency_seconds",
    "Time from dispatch to envelope, in seconds",
    ["method"],
)


def metrics_request(method: str, code: int, latency: float) -> None:
    """
    Count one finished call and observe its latency.

    ``code`` is the response status, or -1 when the call ended without one.
    """
    try:
        REQUEST_COUNT.labels(method=method, code=str(code)).inc()
        REQUEST_LATENCY.labels(method=method).observe(latency)
    except Exception as e:
        logger.debug("Could not record metrics for %s: %s", method, e)
