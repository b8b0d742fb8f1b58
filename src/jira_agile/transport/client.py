"""HttpClient protocol and its httpx-backed implementation."""

from __future__ import annotations

from types import TracebackType
from typing import Any, Protocol

import httpx

from jira_agile.config import AgileConfig, ConfigError
from jira_agile.logging import get_logger, sanitize_for_log, truncate_output
from jira_agile.transport.exceptions import TransportError
from jira_agile.transport.models import HttpResponse

logger = get_logger("transport")

# Longest response body kept on a TransportError and in log lines
MAX_ERROR_BODY = 2000


class HttpClient(Protocol):
    """Interface the Agile query layer needs from a transport."""

    def get(self, url: str) -> HttpResponse:
        """GET a server-relative URL (path plus query string) and return the response."""
        ...


class HttpxClient:
    """Synchronous transport backed by ``httpx.Client``.

    Sends exactly one request per call. Non-2xx answers and network failures
    are raised as TransportError; nothing is retried.
    """

    def __init__(
        self,
        base_url: str,
        auth: httpx.Auth | tuple[str, str] | None = None,
        headers: dict[str, str] | None = None,
        timeout: float = 30.0,
    ) -> None:
        """Initialize the transport.

        Args:
            base_url: Tracker server root, e.g. "https://jira.example.com"
            auth: Anything httpx accepts as ``auth`` (passed through untouched)
            headers: Extra headers sent with every request
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.auth = auth
        self.headers = {"Accept": "application/json", **(headers or {})}
        self.timeout = timeout
        self._client: httpx.Client | None = None

    @classmethod
    def from_config(cls, config: AgileConfig, **kwargs: Any) -> HttpxClient:
        """Build a transport from an AgileConfig.

        Raises:
            ConfigError: If the config has no base_url
        """
        if not config.base_url:
            raise ConfigError("base_url is required to build an HTTP transport")
        return cls(config.base_url, timeout=config.timeout, **kwargs)

    @property
    def client(self) -> httpx.Client:
        """Get or create the underlying httpx client."""
        if self._client is None:
            self._client = httpx.Client(
                base_url=self.base_url,
                auth=self.auth,
                headers=self.headers,
                timeout=self.timeout,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> HttpxClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def get(self, url: str) -> HttpResponse:
        """Send a GET request.

        Args:
            url: Server-relative URL including any query string

        Returns:
            The response with its body as text

        Raises:
            TransportError: On network failure or a non-2xx status
        """
        logger.debug("GET %s", sanitize_for_log(url))
        try:
            response = self.client.get(url)
        except httpx.HTTPError as e:
            logger.warning("GET %s failed: %s", sanitize_for_log(url), e)
            raise TransportError(f"GET {url} failed: {e}", url=url) from e

        if not response.is_success:
            body = truncate_output(response.text, MAX_ERROR_BODY)
            logger.warning(
                "GET %s returned %d: %s",
                sanitize_for_log(url),
                response.status_code,
                sanitize_for_log(body),
            )
            raise TransportError(
                f"GET {url} returned {response.status_code}",
                url=url,
                status_code=response.status_code,
                body=body,
            )

        return HttpResponse(
            status_code=response.status_code,
            body=response.text,
            headers=dict(response.headers),
        )
