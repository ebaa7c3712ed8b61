"""Shared HTTP client configuration."""

import os

import httpx
from pydantic import BaseModel, ValidationError, field_validator

from fetchwrap._version import __version__
from fetchwrap.exceptions import FetchwrapConfigError

DEFAULT_AGENT_NAME = "fetchwrap"


class AgentConfig(BaseModel):
    """Identity sent in the default ``user-agent`` header.

    Built once by the caller and passed to the executor. Use
    `AgentConfig.from_env()` to read it from environment variables.
    """

    agent_name: str = DEFAULT_AGENT_NAME
    agent_version: str = __version__

    model_config = {"frozen": True}

    @field_validator("agent_name", "agent_version")
    @classmethod
    def token_like(cls, v: str) -> str:
        if not v:
            raise ValueError("must not be empty")
        if "/" in v or any(ch.isspace() for ch in v):
            raise ValueError("must not contain '/' or whitespace")
        return v

    @property
    def user_agent(self) -> str:
        """Value of the default ``user-agent`` header."""
        return f"{self.agent_name}/{self.agent_version}"

    @classmethod
    def from_env(cls) -> "AgentConfig":
        """Create an agent config from environment variables.

        Optional environment variables:
            FETCHWRAP_AGENT_NAME: Agent name (default: "fetchwrap").
            FETCHWRAP_AGENT_VERSION: Agent version (default: package version).

        Returns:
            A validated AgentConfig.

        Raises:
            FetchwrapConfigError: If a variable holds an invalid value.
        """
        agent_name = os.environ.get("FETCHWRAP_AGENT_NAME") or DEFAULT_AGENT_NAME
        agent_version = os.environ.get("FETCHWRAP_AGENT_VERSION") or __version__
        try:
            return cls(agent_name=agent_name, agent_version=agent_version)
        except ValidationError as e:
            raise FetchwrapConfigError(f"Invalid agent configuration: {e}") from e


def create_http_client(
    *,
    timeout: float | None = None,
    base_url: str | None = None,
    follow_redirects: bool = True,
) -> httpx.AsyncClient:
    """Create configured async HTTP client.

    Args:
        timeout: Request timeout in seconds. None waits until the server answers.
        base_url: Optional base URL for all requests.
        follow_redirects: Follow redirects unless a request says otherwise.

    Returns:
        Configured httpx.AsyncClient instance.
    """
    return httpx.AsyncClient(
        timeout=timeout,
        base_url=base_url or "",
        follow_redirects=follow_redirects,
    )
