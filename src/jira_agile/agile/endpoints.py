"""URL construction for Agile resources and the issue search endpoint.

Paths returned here are relative to the Agile base path (``board/1/sprint?...``);
AgileClient prefixes them with ``AgileConfig.agile_base_path``.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any
from urllib.parse import quote_plus, urlencode

from jira_agile.agile.models import PageOptions

# maxResults sent when the caller does not pick a page size
DEFAULT_MAX_RESULTS = 100


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_format_value(v) for v in value)
    return str(value)


def build_query(options: PageOptions) -> str:
    """Serialize options in a stable order: startAt, maxResults, then extras by key.

    Extras named ``startAt`` or ``maxResults`` are dropped; the typed fields own them.
    Extras set to None are omitted.
    Values are form-encoded (space as ``+``).
    """
    pairs: list[tuple[str, str]] = []
    if options.start_at is not None:
        pairs.append(("startAt", _format_value(options.start_at)))
    if options.max_results is not None:
        pairs.append(("maxResults", _format_value(options.max_results)))
    for key in sorted(options.extra):
        value = options.extra[key]
        if key in ("startAt", "maxResults") or value is None:
            continue
        pairs.append((key, _format_value(value)))
    return urlencode(pairs, quote_via=quote_plus)


def boards() -> str:
    return "board"


def board(board_id: int | str) -> str:
    return f"board/{board_id}"


def backlog_issues(board_id: int | str) -> str:
    """Backlog listing; the page size is fixed."""
    return f"board/{board_id}/backlog?" + build_query(PageOptions(max_results=DEFAULT_MAX_RESULTS))


def board_issues(board_id: int | str, options: PageOptions) -> str:
    """Board issue listing. Keeps the ``?`` even when there is nothing after it."""
    return f"board/{board_id}/issue?" + build_query(options)


def sprints(
    board_id: int | str, options: PageOptions, default_max: int = DEFAULT_MAX_RESULTS
) -> str:
    return f"board/{board_id}/sprint?" + build_query(options.with_default_max_results(default_max))


def sprint(sprint_id: int | str) -> str:
    return f"sprint/{sprint_id}"


def sprint_issues(
    sprint_id: int | str, options: PageOptions, default_max: int = DEFAULT_MAX_RESULTS
) -> str:
    return f"sprint/{sprint_id}/issue?" + build_query(options.with_default_max_results(default_max))


def projects(
    board_id: int | str, options: PageOptions, default_max: int = DEFAULT_MAX_RESULTS
) -> str:
    return f"board/{board_id}/project?" + build_query(options.with_default_max_results(default_max))


def full_projects(board_id: int | str) -> str:
    return f"board/{board_id}/project/full"


def id_in_jql(issue_ids: Sequence[str | int]) -> str:
    """JQL predicate matching exactly the given issue ids.

    Raises:
        ValueError: If ``issue_ids`` is empty; ``id IN()`` is not valid JQL
    """
    if not issue_ids:
        raise ValueError("at least one issue id is required")
    return f"id IN({', '.join(str(i) for i in issue_ids)})"


def search(
    search_path: str,
    jql: str,
    max_results: int | None = None,
    fields: Iterable[str] | None = None,
) -> str:
    """Full URL of a search request.

    >>> search("/rest/api/2/search", "id IN(1, 2)", max_results=2)
    '/rest/api/2/search?jql=id+IN%281%2C+2%29&maxResults=2'
    """
    url = f"{search_path}?jql={quote_plus(jql)}"
    if max_results is not None:
        url += f"&maxResults={max_results}"
    field_names = list(fields or ())
    if field_names:
        url += f"&fields={quote_plus(','.join(field_names))}"
    return url
