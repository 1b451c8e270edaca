"""
Wire helpers shared by the transports: URL joining, header merging,
query/body encoding and body decoding.
"""

import io
import json
import logging
from datetime import date, datetime
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union
from urllib.parse import urlencode, urlsplit

logger = logging.getLogger("httpreq.codec")

QueryPairs = List[Tuple[str, str]]

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def is_absolute_url(url: str) -> bool:
    parts = urlsplit(url)
    return bool(parts.scheme and parts.netloc)


def build_url(base_url: Optional[str], url: str) -> str:
    """
    Resolve ``url`` against ``base_url``.

    Absolute URLs are returned unchanged. Relative URLs are appended to the
    base with exactly one slash between them.

    Example:
        >>> build_url("https://api.example.com/v1/", "/users")
        'https://api.example.com/v1/users'
    """
    if not base_url or is_absolute_url(url):
        return url
    if not url:
        return base_url
    return base_url.rstrip("/") + "/" + url.lstrip("/")


def get_header(headers: Mapping[str, str], name: str) -> Optional[str]:
    """Case-insensitive header lookup"""
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return value
    return None


def merge_headers(
    base: Mapping[str, str], override: Optional[Mapping[str, str]] = None
) -> Dict[str, str]:
    """
    Merge two header mappings, ``override`` wins on collision.

    Keys collide case-insensitively; the override keeps its own spelling.
    """
    merged = dict(base)
    for key, value in (override or {}).items():
        for existing in [k for k in merged if k.lower() == key.lower()]:
            del merged[existing]
        merged[key] = value
    return merged


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, default=str)
    return str(value)


def encode_query(params: Any) -> Union[str, QueryPairs, None]:
    """
    Serialize a GET payload into query parameters.

    Mappings become ``(key, value)`` pairs: sequences repeat the key,
    ``None`` values are skipped, nested mappings are JSON encoded. A string
    is taken as an already formatted query string.

    Raises:
        TypeError: If params is neither a mapping nor a string
    """
    if params is None:
        return None
    if isinstance(params, str):
        return params.lstrip("?")
    if not isinstance(params, Mapping):
        raise TypeError(f"Query parameters must be a mapping, got {type(params).__name__}")

    pairs: QueryPairs = []
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple, set)):
            pairs.extend((str(key), _query_value(item)) for item in value if item is not None)
        else:
            pairs.append((str(key), _query_value(value)))
    return pairs


def encode_body(data: Any, headers: Mapping[str, str]) -> Optional[bytes]:
    """
    Serialize a POST/PUT payload.

    ``bytes`` pass through, ``str`` is UTF-8 encoded, a mapping is form
    encoded when the Content-Type is form-urlencoded, anything else is JSON.
    """
    if data is None:
        return None
    if isinstance(data, (bytes, bytearray)):
        return bytes(data)
    if isinstance(data, str):
        return data.encode("utf-8")

    content_type = (get_header(headers, "Content-Type") or "").lower()
    if content_type.startswith(FORM_CONTENT_TYPE) and isinstance(data, Mapping):
        return urlencode(encode_query(data)).encode("utf-8")

    return json.dumps(data, default=str).encode("utf-8")


def decode_body(raw: bytes, response_type: str, encoding: Optional[str] = None) -> Any:
    """
    Decode a response body according to ``response_type``.

    Args:
        raw: Raw body bytes
        response_type: One of json, text, arraybuffer, binary, stream
        encoding: Charset announced by the server (default utf-8)

    Returns:
        Parsed JSON (or the text when it does not parse), str, bytes or a
        binary file object
    """
    kind = getattr(response_type, "value", response_type)

    if kind in ("arraybuffer", "binary"):
        return raw
    if kind == "stream":
        return io.BytesIO(raw)

    try:
        text = raw.decode(encoding or "utf-8", errors="replace")
    except LookupError:
        text = raw.decode("utf-8", errors="replace")
    if kind == "text":
        return text

    if not text.strip():
        return None
    try:
        return json.loads(text)
    except ValueError:
        logger.debug("Response body is not valid JSON, returning text")
        return text
