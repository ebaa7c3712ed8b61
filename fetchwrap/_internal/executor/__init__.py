"""Request/response normalization for fetchwrap.

WARNING: This is an internal module. Use `fetchwrap.client.HTTPClient`
or the module-level `http_*` functions instead.
"""

from fetchwrap._internal.executor.executor import RequestExecutor
from fetchwrap._internal.executor.negotiation import classify_content_type, read_body
from fetchwrap._internal.executor.payload import (
    JSON_CONTENT_TYPE,
    assemble_headers,
    has_header,
    merge_headers,
    serialize_payload,
)

__all__ = [
    "RequestExecutor",
    "classify_content_type",
    "read_body",
    "JSON_CONTENT_TYPE",
    "assemble_headers",
    "has_header",
    "merge_headers",
    "serialize_payload",
]
