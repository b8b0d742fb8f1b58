"""Data models for the Agile query layer."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from jira_agile.agile.exceptions import InvalidOptionsError


class _Resource(BaseModel):
    """Base for objects deserialized from tracker responses."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )


class Board(_Resource):
    """A board as returned by the board listing."""

    id: int
    name: str
    type: str | None = None
    self_url: str | None = Field(default=None, alias="self")


class Sprint(_Resource):
    """A sprint attached to a board."""

    id: int
    name: str
    state: str | None = None
    start_date: datetime | None = Field(default=None, alias="startDate")
    end_date: datetime | None = Field(default=None, alias="endDate")
    complete_date: datetime | None = Field(default=None, alias="completeDate")
    origin_board_id: int | None = Field(default=None, alias="originBoardId")
    goal: str | None = None
    self_url: str | None = Field(default=None, alias="self")


class Project(_Resource):
    """A project linked to a board."""

    id: str
    key: str
    name: str | None = None
    self_url: str | None = Field(default=None, alias="self")


class Issue(_Resource):
    """An issue in summary or full form.

    Agile listings return summary issues (``expanded=False``) whose ``fields``
    may be partial or empty. Issues fetched through the search endpoint carry
    the complete field set and are marked ``expanded=True``.
    """

    id: str
    key: str
    fields: dict[str, Any] = Field(default_factory=dict)
    self_url: str | None = Field(default=None, alias="self")
    expanded: bool = False

    @property
    def summary(self) -> str | None:
        """The issue's summary field, if present."""
        value = self.fields.get("summary")
        return value if isinstance(value, str) else None


class PageOptions(BaseModel):
    """Pagination cursor plus pass-through query parameters.

    ``start_at`` and ``max_results`` are omitted from the query string when
    None. ``extra`` is appended as-is, sorted by key, for parameters this
    package does not model (e.g. ``jql``, ``fields``).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    start_at: int | None = Field(default=None, ge=0, alias="startAt")
    max_results: int | None = Field(default=None, ge=0, alias="maxResults")
    extra: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def coerce(cls, options: PageOptions | Mapping[str, Any] | None) -> PageOptions:
        """Accept PageOptions, a plain mapping of query parameters, or None.

        Mapping keys ``startAt``/``start_at`` and ``maxResults``/``max_results``
        fill the typed fields; every other key lands in ``extra``.

        Raises:
            InvalidOptionsError: If a cursor value is not a non-negative integer
        """
        if options is None:
            return cls()
        if isinstance(options, PageOptions):
            return options

        known = {
            "startAt": "start_at",
            "start_at": "start_at",
            "maxResults": "max_results",
            "max_results": "max_results",
        }
        typed: dict[str, Any] = {}
        extra: dict[str, Any] = {}
        for key, value in options.items():
            if key in known:
                typed[known[key]] = value
            else:
                extra[key] = value
        try:
            return cls(**typed, extra=extra)
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(part) for part in first["loc"])
            raise InvalidOptionsError(f"{field}: {first['msg']}") from e

    def with_default_max_results(self, default: int) -> PageOptions:
        """Return a copy whose max_results falls back to ``default``."""
        if self.max_results is not None:
            return self
        return self.model_copy(update={"max_results": default})
