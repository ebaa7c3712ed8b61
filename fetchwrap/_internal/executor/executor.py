"""Request executor: turns one verb call into a normalized result."""

import sys
from contextlib import AsyncExitStack
from typing import Any

import httpx

from fetchwrap._internal.executor.negotiation import read_body
from fetchwrap._internal.executor.payload import assemble_headers, serialize_payload
from fetchwrap._internal.http import AgentConfig, create_http_client
from fetchwrap.exceptions import FetchwrapValidationError, HTTPClientError
from fetchwrap.models import (
    HEADERS_ONLY_METHODS,
    HTTP_METHODS,
    Body,
    FullResponse,
    HeadersResponse,
    RequestOptions,
)

# Transport options handled by httpx.AsyncClient.send() rather than build_request()
SEND_OPTIONS = ("follow_redirects", "auth")

# Transport options replaced by the verb and target of the call
OVERRIDDEN_OPTIONS = ("method", "url")


class RequestExecutor:
    """Executes requests and normalizes their responses.

    Each call is independent: headers and transport options are copied
    before use, so caller-owned objects are never modified. The executor has
    no timeout or retry of its own; pass ``timeout`` in the transport options
    to bound a request.
    """

    def __init__(
        self,
        config: AgentConfig,
        *,
        client: httpx.AsyncClient | None = None,
        debug: bool = False,
    ) -> None:
        """Initialize the executor.

        Args:
            config: Agent identity used for the default user-agent header.
            client: Optional shared httpx.AsyncClient. When omitted, a client
                is opened and closed around every request.
            debug: Enable debug logging to stderr.
        """
        self._config = config
        self._client = client
        self._debug = debug

    @property
    def config(self) -> AgentConfig:
        return self._config

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            print(f"[fetchwrap] {message}", file=sys.stderr)

    def _prepare(
        self, payload: Any, options: RequestOptions
    ) -> tuple[dict[str, str], bytes | str | None, dict[str, Any], dict[str, Any]]:
        """Assemble headers, body, and the build/send keyword arguments."""
        transport_options = dict(options.transport_options or {})
        headers = assemble_headers(
            transport_options.pop("headers", None),
            options.headers,
            self._config.user_agent,
        )

        for key in OVERRIDDEN_OPTIONS:
            transport_options.pop(key, None)

        # A raw transport body is sent only when there is no payload
        content: bytes | str | None = transport_options.pop("content", None)
        if payload is not None:
            content, headers = serialize_payload(payload, headers)

        send_kwargs = {
            key: transport_options.pop(key) for key in SEND_OPTIONS if key in transport_options
        }
        return headers, content, transport_options, send_kwargs

    async def execute(
        self,
        method: str,
        url: httpx.URL | str,
        payload: Any = None,
        options: RequestOptions | None = None,
    ) -> HeadersResponse | FullResponse | Body:
        """Send a request and normalize the response.

        Args:
            method: HTTP verb (case-insensitive).
            url: Target URL.
            payload: Optional request payload. Bytes are sent as-is; other
                non-string values are JSON encoded.
            options: Headers, transport options and the include_headers flag.

        Returns:
            HeadersResponse for HEAD and OPTIONS. Otherwise the body, or a
            FullResponse when ``options.include_headers`` is set. The body is
            False when the response has none.

        Raises:
            HTTPClientError: If the response status is >= 400.
            FetchwrapValidationError: If the method is not supported.
            httpx.HTTPError: Transport failures are propagated unchanged.
        """
        method = method.upper()
        if method not in HTTP_METHODS:
            raise FetchwrapValidationError(f"Unsupported HTTP method: {method}")
        options = options or RequestOptions()

        headers, content, build_kwargs, send_kwargs = self._prepare(payload, options)

        async with AsyncExitStack() as stack:
            client = self._client
            if client is None:
                client = await stack.enter_async_context(create_http_client())

            request = client.build_request(
                method, url, headers=headers, content=content, **build_kwargs
            )
            self._log_debug(f"Sending {method} {request.url}")
            response = await client.send(request, stream=True, **send_kwargs)
            stack.push_async_callback(response.aclose)

            if response.status_code >= 400:
                if method not in HEADERS_ONLY_METHODS:
                    await response.aread()
                self._log_debug(f"{method} {request.url} failed with status {response.status_code}")
                raise HTTPClientError(response.reason_phrase, response.status_code, response)

            if method in HEADERS_ONLY_METHODS:
                return HeadersResponse(headers=response.headers)

            body = await read_body(response)
            self._log_debug(
                f"{method} {request.url} -> {response.status_code}, {type(body).__name__} body"
            )

        if options.include_headers:
            return FullResponse(headers=response.headers, body=body)
        return body
