"""AgileClient - Boards, sprints, backlogs and board projects."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from jira_agile.agile import deserializer, endpoints
from jira_agile.agile.models import Board, Issue, PageOptions, Project, Sprint
from jira_agile.agile.resolver import resolve_issues
from jira_agile.config import AgileConfig
from jira_agile.logging import get_logger
from jira_agile.transport import HttpClient, HttpResponse

logger = get_logger("agile")

Options = PageOptions | Mapping[str, Any] | None


class AgileClient:
    """Query interface for the tracker's Agile resource group.

    Every call is independent: it builds a URL, performs one GET through the
    injected transport (two for board issues) and deserializes the answer.
    Transport errors propagate untouched.
    """

    def __init__(self, http: HttpClient, config: AgileConfig | None = None) -> None:
        """Initialize the client.

        Args:
            http: Transport that performs the GET requests
            config: Path layout and defaults; AgileConfig() when omitted
        """
        self.http = http
        self.config = config or AgileConfig()

    def _get(self, path: str) -> HttpResponse:
        url = f"{self.config.agile_base_path}/{path}"
        logger.debug("GET %s", url)
        return self.http.get(url)

    def list_boards(self) -> list[Board]:
        """List every board visible to the caller."""
        boards = deserializer.parse_boards(self._get(endpoints.boards()).body)
        logger.info("Found %d board(s)", len(boards))
        return boards

    def get_board(self, board_id: int | str) -> Board:
        """Get a single board by id."""
        return deserializer.parse_board(self._get(endpoints.board(board_id)).body)

    def list_backlog_issues(self, board_id: int | str) -> list[Issue]:
        """List the backlog of a board as summary issues."""
        response = self._get(endpoints.backlog_issues(board_id))
        issues = deserializer.parse_issues(response.body, expanded=False)
        logger.info("Found %d backlog issue(s) on board %s", len(issues), board_id)
        return issues

    def list_board_issues(self, board_id: int | str, options: Options = None) -> list[Issue]:
        """List the issues of a board as full issues.

        The board listing only yields summary issues, so their ids are
        resolved through the search endpoint in a second request. The
        caller's ``maxResults`` is carried over to that request; ``startAt``
        is not.

        Args:
            board_id: Board id
            options: Pagination (``startAt``, ``maxResults``) and extra query parameters

        Returns:
            Full issues in the order the search endpoint returns them
        """
        page = PageOptions.coerce(options)
        response = self._get(endpoints.board_issues(board_id, page))
        summaries = deserializer.parse_issues(response.body, expanded=False)
        if not summaries:
            logger.info("Board %s has no issues in this page", board_id)
            return []

        issues = resolve_issues(
            self.http,
            self.config.search_path,
            [issue.id for issue in summaries],
            max_results=page.max_results,
        )
        logger.info("Resolved %d issue(s) on board %s", len(issues), board_id)
        return issues

    def list_sprints(self, board_id: int | str, options: Options = None) -> list[Sprint]:
        """List the sprints of a board. ``maxResults`` defaults to the configured page size."""
        path = endpoints.sprints(
            board_id, PageOptions.coerce(options), self.config.default_page_size
        )
        sprints = deserializer.parse_sprints(self._get(path).body)
        logger.info("Found %d sprint(s) on board %s", len(sprints), board_id)
        return sprints

    def get_sprint(self, sprint_id: int | str) -> Sprint:
        """Get a single sprint by id."""
        return deserializer.parse_sprint(self._get(endpoints.sprint(sprint_id)).body)

    def list_sprint_issues(self, sprint_id: int | str, options: Options = None) -> list[Issue]:
        """List the issues of a sprint as summary issues."""
        path = endpoints.sprint_issues(
            sprint_id, PageOptions.coerce(options), self.config.default_page_size
        )
        issues = deserializer.parse_issues(self._get(path).body, expanded=False)
        logger.info("Found %d issue(s) in sprint %s", len(issues), sprint_id)
        return issues

    def list_projects(self, board_id: int | str, options: Options = None) -> list[Project]:
        """List the projects linked to a board."""
        path = endpoints.projects(
            board_id, PageOptions.coerce(options), self.config.default_page_size
        )
        return deserializer.parse_projects(self._get(path).body)

    def list_full_projects(self, board_id: int | str) -> list[Project]:
        """List the projects linked to a board, including those reached through its filter."""
        return deserializer.parse_projects(self._get(endpoints.full_projects(board_id)).body)

    def search_issues(
        self,
        jql: str,
        max_results: int | None = None,
        fields: Iterable[str] | None = None,
    ) -> list[Issue]:
        """Run a JQL search and return full issues.

        Args:
            jql: JQL query
            max_results: Page size; omitted from the request when None
            fields: Restrict the returned fields

        Returns:
            Issues with ``expanded=True``
        """
        url = endpoints.search(self.config.search_path, jql, max_results=max_results, fields=fields)
        logger.debug("GET %s", url)
        return deserializer.parse_issues(self.http.get(url).body, expanded=True)
