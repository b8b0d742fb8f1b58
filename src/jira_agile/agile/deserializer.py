"""Turn tracker JSON responses into typed Agile objects."""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from jira_agile.agile.exceptions import DeserializationError
from jira_agile.agile.models import Board, Issue, Project, Sprint

M = TypeVar("M", bound=BaseModel)

ROOT = "$"


def format_path(base: str, loc: Sequence[str | int]) -> str:
    """Append a pydantic error location to a ``$``-rooted path.

    >>> format_path("$.values[2]", ("location", "projectId"))
    '$.values[2].location.projectId'
    """
    path = base
    for part in loc:
        path += f"[{part}]" if isinstance(part, int) else f".{part}"
    return path


def parse_json(text: str | bytes) -> Any:
    """Parse a response body.

    Raises:
        DeserializationError: If the body is not valid JSON
    """
    try:
        return json.loads(text)
    except (ValueError, TypeError) as e:
        raise DeserializationError(ROOT, f"invalid JSON: {e}") from e


def parse_model(data: Any, model: type[M], path: str = ROOT, **overrides: Any) -> M:
    """Validate one JSON object into ``model``.

    Args:
        data: Decoded JSON value
        model: Target model class
        path: Location of ``data`` in the response, used in error messages
        **overrides: Values set on the object that do not come from the payload

    Raises:
        DeserializationError: If ``data`` is not an object or fails validation
    """
    if not isinstance(data, dict):
        raise DeserializationError(path, f"expected object, got {type(data).__name__}")
    try:
        return model.model_validate({**data, **overrides})
    except ValidationError as e:
        first = e.errors()[0]
        raise DeserializationError(format_path(path, first["loc"]), first["msg"]) from e


def parse_collection(
    data: Any,
    key: str,
    model: type[M],
    allow_bare_list: bool = False,
    **overrides: Any,
) -> list[M]:
    """Validate the list stored under ``key`` of a paged response.

    Args:
        data: Decoded JSON value
        key: Name of the collection field ("values" or "issues")
        model: Target model class for each element
        allow_bare_list: Also accept a top-level JSON array
        **overrides: Passed to every element, see parse_model

    Raises:
        DeserializationError: If the collection is missing or an element is invalid
    """
    if allow_bare_list and isinstance(data, list):
        items, base = data, ROOT
    else:
        if not isinstance(data, dict):
            raise DeserializationError(ROOT, f"expected object, got {type(data).__name__}")
        base = f"{ROOT}.{key}"
        if key not in data:
            raise DeserializationError(base, "missing field")
        items = data[key]
        if not isinstance(items, list):
            raise DeserializationError(base, f"expected array, got {type(items).__name__}")

    return [
        parse_model(item, model, f"{base}[{index}]", **overrides)
        for index, item in enumerate(items)
    ]


def parse_boards(text: str) -> list[Board]:
    return parse_collection(parse_json(text), "values", Board)


def parse_board(text: str) -> Board:
    return parse_model(parse_json(text), Board)


def parse_sprints(text: str) -> list[Sprint]:
    return parse_collection(parse_json(text), "values", Sprint)


def parse_sprint(text: str) -> Sprint:
    return parse_model(parse_json(text), Sprint)


def parse_projects(text: str) -> list[Project]:
    """Parse board projects; the ``project/full`` variant answers with a bare array."""
    return parse_collection(parse_json(text), "values", Project, allow_bare_list=True)


def parse_issues(text: str, expanded: bool) -> list[Issue]:
    """Parse an ``issues`` page, tagging every issue with ``expanded``."""
    return parse_collection(parse_json(text), "issues", Issue, expanded=expanded)
