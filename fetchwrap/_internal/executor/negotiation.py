"""Response body classification by content type."""

import re
from typing import Literal

import httpx

from fetchwrap.models import Body

BodyKind = Literal["json", "text", "binary"]

JSON_PATTERN = re.compile(r"application/[^;]*json", re.IGNORECASE)
TEXT_PATTERN = re.compile(r"^text/|^application/(?:[^;]*\+)?xml\b|charset=utf-8$", re.IGNORECASE)


def classify_content_type(content_type: str | None) -> BodyKind:
    """Pick how a body with this content type is decoded.

    JSON wins over text, so ``application/json;charset=utf-8`` is parsed.
    A missing content type is read as text.
    """
    if content_type and JSON_PATTERN.search(content_type):
        return "json"
    if not content_type or TEXT_PATTERN.search(content_type.strip()):
        return "text"
    return "binary"


def _content_length_is_zero(value: str | None) -> bool:
    if value is None:
        return False
    try:
        return float(value.strip() or 0) == 0
    except ValueError:
        return False


def is_empty_body(response: httpx.Response) -> bool:
    """Check whether a response has no body, without reading it."""
    if response.status_code == 204:
        return True
    return _content_length_is_zero(response.headers.get("content-length"))


async def read_body(response: httpx.Response) -> Body:
    """Read and decode a streamed response body.

    Returns:
        False for an empty body, otherwise parsed JSON, str or bytes.
    """
    if is_empty_body(response):
        return False

    kind = classify_content_type(response.headers.get("content-type"))
    await response.aread()
    if kind == "json":
        return response.json()
    if kind == "text":
        return response.text
    return response.content
