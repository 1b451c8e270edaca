"""
httpreq Utilities
"""

import logging
from typing import Dict, Mapping

SENSITIVE_HEADERS = {"authorization", "proxy-authorization", "cookie", "set-cookie"}
SENSITIVE_KEYS = {"api_key", "token", "secret", "password"}


def setup_logging(debug: bool = False) -> None:
    """
    Route httpreq log records to stderr.

    Called by the clients when ``ClientConfig.debug`` is set. Only the
    ``httpreq`` logger level is changed; the root handler is installed
    once through ``logging.basicConfig``.
    """
    logging.basicConfig(format="%(asctime)s %(levelname)s [%(name)s] %(message)s")
    logging.getLogger("httpreq").setLevel(logging.DEBUG if debug else logging.INFO)


def sanitize_for_logging(headers: Mapping[str, str]) -> Dict[str, str]:
    """
    Redact credentials from a header mapping before logging it

    Args:
        headers: Headers to sanitize

    Returns:
        Sanitized copy

    Example:
        >>> sanitize_for_logging({"Authorization": "Bearer abc", "Accept": "*/*"})
        {'Authorization': '***REDACTED***', 'Accept': '*/*'}
    """
    sanitized = {}

    for key, value in headers.items():
        lowered = key.lower()
        if lowered in SENSITIVE_HEADERS or any(s in lowered for s in SENSITIVE_KEYS):
            sanitized[key] = "***REDACTED***"
        else:
            sanitized[key] = value

    return sanitized
