"""
Payload placement by HTTP method.
"""

from enum import Enum
from typing import Any

from httpreq.exceptions import UnsupportedPayloadMethodError


class PayloadPlacement(str, Enum):
    """Where a call's payload goes"""

    NONE = "none"
    QUERY = "query"
    BODY = "body"


def resolve_payload_placement(method: str, data: Any) -> PayloadPlacement:
    """
    Decide where ``data`` is attached for ``method``.

    GET sends it as query parameters, POST and PUT as the body. Without a
    payload any verb is accepted.

    Args:
        method: HTTP verb, case-insensitive
        data: Payload, None when absent

    Returns:
        PayloadPlacement

    Raises:
        UnsupportedPayloadMethodError: Payload given for any other verb

    Example:
        >>> resolve_payload_placement("get", {"a": 1})
        <PayloadPlacement.QUERY: 'query'>
    """
    if data is None:
        return PayloadPlacement.NONE

    verb = getattr(method, "value", method).lower()
    if verb == "get":
        return PayloadPlacement.QUERY
    if verb in ("post", "put"):
        return PayloadPlacement.BODY

    raise UnsupportedPayloadMethodError(getattr(method, "value", method))
