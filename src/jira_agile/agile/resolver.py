"""Resolve summary issues into full issues through the search endpoint."""

from __future__ import annotations

from collections.abc import Sequence

from jira_agile.agile import endpoints
from jira_agile.agile.deserializer import parse_issues
from jira_agile.agile.models import Issue
from jira_agile.logging import get_logger
from jira_agile.transport import HttpClient

logger = get_logger("agile")


def resolve_issues(
    http: HttpClient,
    search_path: str,
    issue_ids: Sequence[str | int],
    max_results: int | None = None,
) -> list[Issue]:
    """Fetch full issues for a page of issue ids with a single search request.

    The ids are sent as one ``id IN(...)`` predicate. ``max_results`` is
    forwarded so the search page matches the listing page; when None the
    parameter is left off. Results keep the order the search endpoint
    returns, which is not necessarily the order of ``issue_ids``.

    Args:
        http: Transport used for the search request
        search_path: Server-relative path of the search endpoint
        issue_ids: Ids taken from a summary page
        max_results: Page size of the originating listing, if the caller set one

    Returns:
        Full issues, each with ``expanded=True``. Empty without any request
        when ``issue_ids`` is empty.

    Raises:
        DeserializationError: If the search response cannot be parsed
    """
    if not issue_ids:
        logger.debug("No issue ids to resolve, skipping search")
        return []

    url = endpoints.search(search_path, endpoints.id_in_jql(issue_ids), max_results=max_results)
    logger.debug("Resolving %d issue(s): GET %s", len(issue_ids), url)
    response = http.get(url)
    issues = parse_issues(response.body, expanded=True)

    if len(issues) != len(issue_ids):
        logger.warning(
            "Search returned %d issue(s) for %d id(s)", len(issues), len(issue_ids)
        )
    return issues
