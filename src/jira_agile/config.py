"""Connection configuration for the Agile client."""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TypeVar

DEFAULT_PAGE_SIZE = 100
DEFAULT_TIMEOUT = 30.0

N = TypeVar("N", int, float)


class ConfigError(Exception):
    """Raised when configuration is invalid or missing."""


@dataclass(frozen=True)
class AgileConfig:
    """Where the tracker lives and how its REST resources are laid out.

    Paths are built relative to the server root, so a tracker mounted under
    ``https://example.com/jira`` uses ``context_path="/jira"`` and every
    request goes to ``/jira/rest/...``.
    """

    base_url: str | None = None
    context_path: str = ""
    rest_api_version: str = "2"
    agile_api_version: str = "1.0"
    timeout: float = DEFAULT_TIMEOUT
    default_page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.context_path and not self.context_path.startswith("/"):
            raise ConfigError(f"context_path must start with '/': {self.context_path!r}")
        if self.default_page_size <= 0:
            raise ConfigError(f"default_page_size must be positive: {self.default_page_size}")
        if self.timeout <= 0:
            raise ConfigError(f"timeout must be positive: {self.timeout}")

    @property
    def agile_base_path(self) -> str:
        """Base path of the Agile resource group, e.g. ``/rest/agile/1.0``."""
        return f"{self.context_path.rstrip('/')}/rest/agile/{self.agile_api_version}"

    @property
    def rest_base_path(self) -> str:
        """Base path of the core REST API, e.g. ``/rest/api/2``."""
        return f"{self.context_path.rstrip('/')}/rest/api/{self.rest_api_version}"

    @property
    def search_path(self) -> str:
        """Path of the generic issue search endpoint."""
        return f"{self.rest_base_path}/search"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AgileConfig:
        """Create config from environment variables.

        Recognized variables: JIRA_BASE_URL, JIRA_CONTEXT_PATH,
        JIRA_REST_API_VERSION, JIRA_AGILE_API_VERSION, JIRA_TIMEOUT and
        JIRA_PAGE_SIZE. Unset variables fall back to the defaults.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.

        Returns:
            Parsed configuration object.

        Raises:
            ConfigError: If a numeric variable cannot be parsed.
        """
        env = os.environ if environ is None else environ

        return cls(
            base_url=env.get("JIRA_BASE_URL") or None,
            context_path=env.get("JIRA_CONTEXT_PATH", ""),
            rest_api_version=env.get("JIRA_REST_API_VERSION", "2"),
            agile_api_version=env.get("JIRA_AGILE_API_VERSION", "1.0"),
            timeout=_parse_number(env, "JIRA_TIMEOUT", float, DEFAULT_TIMEOUT),
            default_page_size=_parse_number(env, "JIRA_PAGE_SIZE", int, DEFAULT_PAGE_SIZE),
        )


def _parse_number(env: Mapping[str, str], name: str, kind: Callable[[str], N], default: N) -> N:
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    try:
        return kind(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from e
