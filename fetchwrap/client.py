"""User-facing HTTP client with one coroutine per HTTP verb.

Example usage:
    from fetchwrap import HTTPClient

    client = HTTPClient.from_env()

    data = await client.get("https://api.example.com/items")
    created = await client.post("https://api.example.com/items", {"name": "x"})

    # Body together with response headers
    full = await client.get("https://api.example.com/items", include_headers=True)

    # Legacy call shape: a bool in the headers position means include_headers
    full = await client.get("https://api.example.com/items", True)
"""

import os
from typing import Any

import httpx

from fetchwrap._internal.executor import RequestExecutor
from fetchwrap._internal.http import AgentConfig
from fetchwrap.exceptions import FetchwrapValidationError
from fetchwrap.models import Body, FullResponse, HeadersResponse, RequestOptions

Headers = dict[str, str]
TransportOptions = dict[str, Any]


def resolve_options(
    headers: Headers | bool | None = None,
    transport_options: TransportOptions | bool | None = None,
    include_headers: bool | None = None,
    options: RequestOptions | None = None,
) -> RequestOptions:
    """Normalize the arguments of a verb call into RequestOptions.

    A bool passed in the `headers` or `transport_options` position is taken
    as `include_headers` unless that was given explicitly, and the position
    is treated as not given.

    Raises:
        FetchwrapValidationError: If `options` is combined with any other argument.
    """
    if options is not None:
        if headers is not None or transport_options is not None or include_headers is not None:
            raise FetchwrapValidationError(
                "Pass either options or headers/transport_options/include_headers, not both"
            )
        return options

    legacy_flag: bool | None = None
    if isinstance(headers, bool):
        legacy_flag = headers
        headers = None
    if isinstance(transport_options, bool):
        legacy_flag = transport_options
        transport_options = None
    if include_headers is None:
        include_headers = legacy_flag

    return RequestOptions(
        headers=headers,
        transport_options=transport_options,
        include_headers=bool(include_headers),
    )


class HTTPClient:
    """Async HTTP client returning normalized bodies.

    Responses with status >= 400 raise `HTTPClientError`. Bodies are decoded
    by content type: JSON is parsed, text is returned as str, anything else as
    bytes, and an empty body is returned as False.

    Use `HTTPClient.from_env()` to create a client configured from
    environment variables.
    """

    def __init__(
        self,
        config: AgentConfig | None = None,
        *,
        client: httpx.AsyncClient | None = None,
        debug: bool = False,
    ) -> None:
        """Initialize the client.

        Args:
            config: Agent identity for the default user-agent header.
            client: Optional shared httpx.AsyncClient. The caller owns it and
                is responsible for closing it.
            debug: Enable debug logging to stderr.
        """
        self._executor = RequestExecutor(config or AgentConfig(), client=client, debug=debug)

    @classmethod
    def from_env(cls, *, client: httpx.AsyncClient | None = None) -> "HTTPClient":
        """Create a client from environment variables.

        Optional environment variables:
            FETCHWRAP_AGENT_NAME: Agent name for the user-agent header.
            FETCHWRAP_AGENT_VERSION: Agent version for the user-agent header.
            FETCHWRAP_DEBUG: Set to "1" to enable debug logging.

        Raises:
            FetchwrapConfigError: If the agent variables are invalid.
        """
        debug = os.environ.get("FETCHWRAP_DEBUG", "") == "1"
        return cls(AgentConfig.from_env(), client=client, debug=debug)

    @property
    def config(self) -> AgentConfig:
        return self._executor.config

    async def head(
        self,
        url: httpx.URL | str,
        headers: Headers | bool | None = None,
        transport_options: TransportOptions | bool | None = None,
        *,
        options: RequestOptions | None = None,
    ) -> HeadersResponse:
        """Send a HEAD request and return the response headers."""
        opts = resolve_options(headers, transport_options, options=options)
        return await self._executor.execute("HEAD", url, None, opts)

    async def options(
        self,
        url: httpx.URL | str,
        headers: Headers | bool | None = None,
        transport_options: TransportOptions | bool | None = None,
        *,
        options: RequestOptions | None = None,
    ) -> HeadersResponse:
        """Send an OPTIONS request and return the response headers."""
        opts = resolve_options(headers, transport_options, options=options)
        return await self._executor.execute("OPTIONS", url, None, opts)

    async def get(
        self,
        url: httpx.URL | str,
        headers: Headers | bool | None = None,
        transport_options: TransportOptions | bool | None = None,
        include_headers: bool | None = None,
        *,
        options: RequestOptions | None = None,
    ) -> FullResponse | Body:
        """Send a GET request.

        Args:
            url: Target URL.
            headers: Request headers, or a bool meaning include_headers.
            transport_options: httpx options (params, cookies, timeout,
                extensions, follow_redirects, auth, headers), or a bool
                meaning include_headers.
            include_headers: Return a FullResponse with headers and body.
            options: All of the above as one RequestOptions object.

        Returns:
            The decoded body, or a FullResponse if headers were requested.
        """
        opts = resolve_options(headers, transport_options, include_headers, options)
        return await self._executor.execute("GET", url, None, opts)

    async def post(
        self,
        url: httpx.URL | str,
        payload: Any = None,
        headers: Headers | bool | None = None,
        transport_options: TransportOptions | bool | None = None,
        include_headers: bool | None = None,
        *,
        options: RequestOptions | None = None,
    ) -> FullResponse | Body:
        """Send a POST request.

        Args:
            url: Target URL.
            payload: Request body. Bytes are sent unmodified, strings as-is,
                anything else as JSON.
            headers: Request headers, or a bool meaning include_headers.
            transport_options: httpx options, or a bool meaning include_headers.
            include_headers: Return a FullResponse with headers and body.
            options: All of the above as one RequestOptions object.

        Returns:
            The decoded body, or a FullResponse if headers were requested.
        """
        opts = resolve_options(headers, transport_options, include_headers, options)
        return await self._executor.execute("POST", url, payload, opts)

    async def put(
        self,
        url: httpx.URL | str,
        payload: Any = None,
        headers: Headers | bool | None = None,
        transport_options: TransportOptions | bool | None = None,
        include_headers: bool | None = None,
        *,
        options: RequestOptions | None = None,
    ) -> FullResponse | Body:
        """Send a PUT request. Arguments as for `post`."""
        opts = resolve_options(headers, transport_options, include_headers, options)
        return await self._executor.execute("PUT", url, payload, opts)

    async def patch(
        self,
        url: httpx.URL | str,
        payload: Any = None,
        headers: Headers | bool | None = None,
        transport_options: TransportOptions | bool | None = None,
        include_headers: bool | None = None,
        *,
        options: RequestOptions | None = None,
    ) -> FullResponse | Body:
        """Send a PATCH request. Arguments as for `post`."""
        opts = resolve_options(headers, transport_options, include_headers, options)
        return await self._executor.execute("PATCH", url, payload, opts)

    async def delete(
        self,
        url: httpx.URL | str,
        payload: Any = None,
        headers: Headers | bool | None = None,
        transport_options: TransportOptions | bool | None = None,
        include_headers: bool | None = None,
        *,
        options: RequestOptions | None = None,
    ) -> FullResponse | Body:
        """Send a DELETE request. Arguments as for `post`."""
        opts = resolve_options(headers, transport_options, include_headers, options)
        return await self._executor.execute("DELETE", url, payload, opts)


def get_http_client() -> HTTPClient:
    """Get an HTTP client configured from environment variables.

    A new client is built on every call, so changes to the environment are
    picked up and nothing is initialized at import time.

    Returns:
        A configured HTTPClient instance.
    """
    return HTTPClient.from_env()


# =========================================================================
# Module-level convenience functions
# =========================================================================


async def http_head(url: httpx.URL | str, *args: Any, **kwargs: Any) -> HeadersResponse:
    """HEAD with a client from `get_http_client()`. Arguments as for `HTTPClient.head`."""
    return await get_http_client().head(url, *args, **kwargs)


async def http_options(url: httpx.URL | str, *args: Any, **kwargs: Any) -> HeadersResponse:
    """OPTIONS with a client from `get_http_client()`. Arguments as for `HTTPClient.options`."""
    return await get_http_client().options(url, *args, **kwargs)


async def http_get(url: httpx.URL | str, *args: Any, **kwargs: Any) -> FullResponse | Body:
    """GET with a client from `get_http_client()`. Arguments as for `HTTPClient.get`."""
    return await get_http_client().get(url, *args, **kwargs)


async def http_post(url: httpx.URL | str, *args: Any, **kwargs: Any) -> FullResponse | Body:
    """POST with a client from `get_http_client()`. Arguments as for `HTTPClient.post`."""
    return await get_http_client().post(url, *args, **kwargs)


async def http_put(url: httpx.URL | str, *args: Any, **kwargs: Any) -> FullResponse | Body:
    """PUT with a client from `get_http_client()`. Arguments as for `HTTPClient.put`."""
    return await get_http_client().put(url, *args, **kwargs)


async def http_patch(url: httpx.URL | str, *args: Any, **kwargs: Any) -> FullResponse | Body:
    """PATCH with a client from `get_http_client()`. Arguments as for `HTTPClient.patch`."""
    return await get_http_client().patch(url, *args, **kwargs)


async def http_delete(url: httpx.URL | str, *args: Any, **kwargs: Any) -> FullResponse | Body:
    """DELETE with a client from `get_http_client()`. Arguments as for `HTTPClient.delete`."""
    return await get_http_client().delete(url, *args, **kwargs)
