"""Public pydantic models for fetchwrap requests and results."""

from typing import Any, Literal

import httpx
from pydantic import BaseModel, Field

# =============================================================================
# Types
# =============================================================================

# Response body: False when absent, str for text, bytes for binary, otherwise parsed JSON
Body = Any

HTTPMethod = Literal["HEAD", "OPTIONS", "GET", "POST", "PUT", "PATCH", "DELETE"]

HTTP_METHODS: frozenset[str] = frozenset(
    {"HEAD", "OPTIONS", "GET", "POST", "PUT", "PATCH", "DELETE"}
)

# Methods whose response body is never read
HEADERS_ONLY_METHODS: frozenset[str] = frozenset({"HEAD", "OPTIONS"})

# =============================================================================
# Request Models
# =============================================================================


class RequestOptions(BaseModel):
    """Named options for a single request.

    Optional fields:
        headers: Request headers, merged over transport_options["headers"]
        transport_options: Passed through to httpx (params, cookies, timeout,
            extensions, follow_redirects, auth)
        include_headers: Return a FullResponse instead of the bare body
    """

    headers: dict[str, str] | None = None
    transport_options: dict[str, Any] | None = None
    include_headers: bool = False

    model_config = {"extra": "forbid"}


# =============================================================================
# Response Models
# =============================================================================


class HeadersResponse(BaseModel):
    """Result of HEAD and OPTIONS requests."""

    headers: httpx.Headers

    model_config = {"arbitrary_types_allowed": True}


class FullResponse(BaseModel):
    """Body together with the response headers."""

    headers: httpx.Headers
    body: Body = Field(default=False)

    model_config = {"arbitrary_types_allowed": True}


__all__ = [
    "Body",
    "FullResponse",
    "HEADERS_ONLY_METHODS",
    "HTTP_METHODS",
    "HTTPMethod",
    "HeadersResponse",
    "RequestOptions",
]
