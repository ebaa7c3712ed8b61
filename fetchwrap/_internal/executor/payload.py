"""Header assembly and payload serialization for outgoing requests."""

import json
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

JSON_CONTENT_TYPE = "application/json;charset=utf-8"

BINARY_TYPES = (bytes, bytearray, memoryview)


def has_header(headers: Mapping[str, str], name: str) -> bool:
    """Check for a header key, ignoring case."""
    name = name.lower()
    return any(key.lower() == name for key in headers)


def merge_headers(
    base: Mapping[str, str] | None, overrides: Mapping[str, str] | None
) -> dict[str, str]:
    """Merge two header mappings into a new dict.

    Keys from `overrides` win and replace any `base` key that differs only in
    case. Neither input is mutated.
    """
    merged: dict[str, str] = dict(base or {})
    for key, value in (overrides or {}).items():
        for existing in [k for k in merged if k.lower() == key.lower()]:
            del merged[existing]
        merged[key] = value
    return merged


def assemble_headers(
    transport_headers: Mapping[str, str] | None,
    caller_headers: Mapping[str, str] | None,
    user_agent: str,
) -> dict[str, str]:
    """Build outgoing headers, adding `user_agent` when none was given."""
    headers = merge_headers(transport_headers, caller_headers)
    if not has_header(headers, "user-agent"):
        headers["user-agent"] = user_agent
    return headers


def encode_json(payload: Any) -> str:
    """Encode a payload compactly, like JSON.stringify."""
    if isinstance(payload, BaseModel):
        return payload.model_dump_json()
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False, allow_nan=False)


def serialize_payload(
    payload: Any, headers: Mapping[str, str]
) -> tuple[bytes | str, dict[str, str]]:
    """Prepare a request body.

    Binary payloads are returned unmodified with the headers untouched.
    Anything else that is not a string is JSON encoded, and a JSON
    content-type is added unless one is already present.

    Args:
        payload: The request payload (must not be None).
        headers: Outgoing headers, already assembled.

    Returns:
        The body to send and a new headers dict.

    Raises:
        TypeError: If the payload is not JSON serializable.
        ValueError: If the payload holds NaN or infinite floats.
    """
    headers = dict(headers)
    if isinstance(payload, BINARY_TYPES):
        return bytes(payload), headers

    body = payload if isinstance(payload, str) else encode_json(payload)
    if not has_header(headers, "content-type"):
        headers["content-type"] = JSON_CONTENT_TYPE
    return body, headers
