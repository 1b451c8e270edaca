"""
httpreq Data Models
"""

from enum import Enum
from typing import Any, Dict, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")

# Status reported when no HTTP response was received
NO_STATUS = -1


class HttpMethod(str, Enum):
    """Standard HTTP verbs"""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


class ResponseType(str, Enum):
    """How the response body is decoded"""

    JSON = "json"
    TEXT = "text"
    ARRAYBUFFER = "arraybuffer"
    BINARY = "binary"
    STREAM = "stream"


class RequestDescriptor(BaseModel):
    """Transport-level description of one outgoing call"""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    method: str = Field(..., description="Upper-cased HTTP verb")
    url: str = Field(..., description="Absolute URL or path relative to base_url")
    base_url: Optional[str] = Field(None, description="Origin used for relative URLs")
    headers: Dict[str, str] = Field(default_factory=dict, description="Merged request headers")
    response_type: ResponseType = Field(ResponseType.JSON, description="Body decoding mode")
    params: Any = Field(None, description="Query parameters (GET payload)")
    data: Any = Field(None, description="Request body (POST/PUT payload)")
    max_request_bytes: Optional[int] = Field(None, description="Body size ceiling")
    max_response_bytes: Optional[int] = Field(None, description="Response size ceiling")


class TransportResponse(BaseModel):
    """Response as returned by a transport, body already decoded"""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    status: int
    reason: Optional[str] = None
    headers: Dict[str, str] = Field(default_factory=dict)
    content: Any = None
    url: Optional[str] = None


class RawExchange(BaseModel):
    """Underlying request, response and error of a call"""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    request: RequestDescriptor
    response: Optional[TransportResponse] = None
    error: Optional[BaseException] = None


class ResponseEnvelope(BaseModel, Generic[T]):
    """
    Normalized result of a call.

    ``has_error`` is true when the transport failed or no response was
    received (``status_code == -1``). Callers check it before trusting
    ``content``.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    has_error: bool
    status_code: int = NO_STATUS
    headers: Dict[str, str] = Field(default_factory=dict)
    content: Optional[T] = None
    raw: RawExchange

    @property
    def ok(self) -> bool:
        return not self.has_error

    def raise_for_error(self) -> "ResponseEnvelope[T]":
        """
        Re-raise the captured transport error, if any.

        Returns:
            The envelope itself when the call succeeded

        Raises:
            TransportError: The error captured during the call
        """
        if self.has_error and self.raw.error is not None:
            raise self.raw.error
        return self
