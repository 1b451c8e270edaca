"""
Tests for request metrics and logging helpers.
"""

import logging

from prometheus_client import REGISTRY

from httpreq import ClientConfig, SyncHttpRequestClient, TransportResponse
from httpreq.exceptions import NetworkError
from httpreq.http.adapter import Transport
from httpreq.metrics import metrics_request
from httpreq.utils import sanitize_for_logging


class StaticTransport(Transport):
    def __init__(self, status=200, error=None):
        self.status = status
        self.error = error

    def send(self, request, timeout=None):
        if self.error is not None:
            raise self.error
        return TransportResponse(status=self.status)


def sample(method, code):
    value = REGISTRY.get_sample_value(
        "httpreq_requests_total", {"method": method, "code": code}
    )
    return value or 0.0


def test_metrics_request_increments_counter():
    before = sample("PURGE", "204")

    metrics_request("PURGE", 204, 0.01)

    assert sample("PURGE", "204") == before + 1


def test_successful_call_recorded():
    before = sample("PATCH", "202")
    client = SyncHttpRequestClient(transport=StaticTransport(status=202))

    client.patch("https://api.example.com/items/1")

    assert sample("PATCH", "202") == before + 1


def test_failed_call_recorded_without_status():
    before = sample("OPTIONS", "-1")
    client = SyncHttpRequestClient(transport=StaticTransport(error=NetworkError("down")))

    client.options("https://api.example.com/items")

    assert sample("OPTIONS", "-1") == before + 1


def test_failure_logged_as_warning(caplog):
    client = SyncHttpRequestClient(transport=StaticTransport(error=NetworkError("down")))

    with caplog.at_level(logging.WARNING, logger="httpreq.client"):
        client.get("https://api.example.com/items")

    assert "GET https://api.example.com/items failed: down" in caplog.text


def test_request_log_redacts_credentials(caplog):
    config = ClientConfig(default_headers={"Authorization": "Bearer sk_secret"})
    client = SyncHttpRequestClient(config, transport=StaticTransport())

    with caplog.at_level(logging.DEBUG, logger="httpreq.client"):
        client.get("https://api.example.com/items")

    assert "sk_secret" not in caplog.text
    assert "***REDACTED***" in caplog.text


def test_sanitize_for_logging():
    sanitized = sanitize_for_logging(
        {"Authorization": "Bearer abc", "X-Api-Key": "k", "Accept": "*/*"}
    )

    assert sanitized == {
        "Authorization": "***REDACTED***",
        "X-Api-Key": "***REDACTED***",
        "Accept": "*/*",
    }


def test_setup_logging_sets_package_level():
    from httpreq.utils import setup_logging

    package_logger = logging.getLogger("httpreq")
    previous = package_logger.level
    try:
        setup_logging(debug=True)
        assert package_logger.level == logging.DEBUG

        setup_logging(debug=False)
        assert package_logger.level == logging.INFO
    finally:
        package_logger.setLevel(previous)


def test_metrics_request_observes_latency():
    before = REGISTRY.get_sample_value(
        "httpreq_request_latency_seconds_count", {"method": "TRACE"}
    ) or 0.0

    metrics_request("TRACE", 200, 0.25)

    after = REGISTRY.get_sample_value(
        "httpreq_request_latency_seconds_count", {"method": "TRACE"}
    )
    assert after == before + 1
