"""fetchwrap: verb-per-function async HTTP helpers over httpx.

Public API:
    HTTPClient - Client with head/options/get/post/put/patch/delete coroutines
    http_head, http_options, http_get, http_post, http_put, http_patch,
    http_delete - Module-level coroutines using a client from the environment
    AgentConfig - Identity used for the default user-agent header
    RequestOptions, FullResponse, HeadersResponse - Request/result models
    HTTPClientError - Raised for responses with status >= 400
"""

from fetchwrap._internal.http import AgentConfig
from fetchwrap._version import __version__
from fetchwrap.client import (
    HTTPClient,
    get_http_client,
    http_delete,
    http_get,
    http_head,
    http_options,
    http_patch,
    http_post,
    http_put,
)
from fetchwrap.exceptions import (
    FetchwrapConfigError,
    FetchwrapError,
    FetchwrapValidationError,
    HTTPClientError,
)
from fetchwrap.models import FullResponse, HeadersResponse, RequestOptions

__all__ = [
    "__version__",
    "AgentConfig",
    "HTTPClient",
    "get_http_client",
    "http_head",
    "http_options",
    "http_get",
    "http_post",
    "http_put",
    "http_patch",
    "http_delete",
    "FetchwrapError",
    "FetchwrapConfigError",
    "FetchwrapValidationError",
    "HTTPClientError",
    "RequestOptions",
    "FullResponse",
    "HeadersResponse",
]
