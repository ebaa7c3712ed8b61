"""Public exceptions for fetchwrap."""

from typing import Any


class FetchwrapError(Exception):
    """Base exception for all fetchwrap errors."""


class HTTPClientError(FetchwrapError):
    """Response with status code >= 400.

    The message is the response status text. The raw ``httpx.Response`` is kept
    so callers can inspect headers and the (already read) body.
    """

    def __init__(self, status_text: str, status_code: int, response: Any = None) -> None:
        super().__init__(status_text)
        self.status_text = status_text
        self.status_code = status_code
        self.response = response

    def get_status_code(self) -> int:
        return self.status_code

    def get_http_response(self) -> Any:
        return self.response


class FetchwrapConfigError(FetchwrapError):
    """Configuration error (invalid agent name/version in env or arguments)."""


class FetchwrapValidationError(FetchwrapError):
    """Invalid call shape (unknown method, conflicting options)."""
