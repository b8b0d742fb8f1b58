"""Data models for the HTTP transport."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class HttpResponse:
    """A completed HTTP response as seen by the query layer."""

    status_code: int
    body: str
    headers: dict[str, str] = field(default_factory=dict)
