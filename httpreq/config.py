"""
Configuration module for httpreq.
"""

import os
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from httpreq.codec import get_header, is_absolute_url
from httpreq.models import ResponseType

DEFAULT_TIMEOUT_MILLIS = 10000
DEFAULT_CONTENT_TYPE = "application/json"


class ClientConfig(BaseModel):
    """
    Client configuration.

    Immutable once built, so one instance can be shared by any number of
    concurrent calls.

    Supports environment variables through ``from_env``:
    - HTTPREQ_BASE_URL: Base origin for relative URLs
    - HTTPREQ_TIMEOUT_MS: Call timeout in milliseconds (default: 10000)
    """

    model_config = ConfigDict(frozen=True)

    timeout_millis: int = Field(
        DEFAULT_TIMEOUT_MILLIS, ge=0, description="Cancel a call after this many milliseconds"
    )
    default_headers: Dict[str, str] = Field(
        default_factory=dict,
        validate_default=True,
        description="Headers merged into every request",
    )
    base_url: Optional[str] = Field(None, description="Base origin for relative URLs")
    debug: bool = Field(False, description="Enable debug logging")

    @field_validator("default_headers")
    @classmethod
    def add_content_type(cls, v):
        if get_header(v, "Content-Type") is None:
            return {"Content-Type": DEFAULT_CONTENT_TYPE, **v}
        return v

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v):
        if v is None:
            return v
        if not is_absolute_url(v) or not v.lower().startswith(("http://", "https://")):
            raise ValueError("base_url must be an absolute http(s) URL")
        return v

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_millis / 1000.0

    @classmethod
    def from_env(cls, **overrides: Any) -> "ClientConfig":
        """
        Build configuration from environment variables.

        Args:
            **overrides: Explicit values, taking precedence over the environment

        Returns:
            ClientConfig
        """
        values: Dict[str, Any] = {}
        base_url = os.getenv("HTTPREQ_BASE_URL")
        if base_url:
            values["base_url"] = base_url
        timeout = os.getenv("HTTPREQ_TIMEOUT_MS")
        if timeout:
            values["timeout_millis"] = timeout
        values.update(overrides)
        return cls(**values)


class RequestOptions(BaseModel):
    """Per-call options"""

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="forbid")

    headers: Dict[str, str] = Field(default_factory=dict, description="Per-call header overrides")
    response_type: ResponseType = Field(ResponseType.JSON, description="Body decoding mode")
    data: Any = Field(None, description="Payload: query for GET, body for POST/PUT")
    max_request_bytes: Optional[int] = Field(None, ge=0, description="Request body ceiling")
    max_response_bytes: Optional[int] = Field(None, ge=0, description="Response body ceiling")
