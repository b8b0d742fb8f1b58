"""Agile - Board, sprint, backlog and board project queries."""

from jira_agile.agile.client import AgileClient
from jira_agile.agile.exceptions import AgileError, DeserializationError, InvalidOptionsError
from jira_agile.agile.models import Board, Issue, PageOptions, Project, Sprint
from jira_agile.agile.resolver import resolve_issues

__all__ = [
    "AgileClient",
    "AgileError",
    "Board",
    "DeserializationError",
    "InvalidOptionsError",
    "Issue",
    "PageOptions",
    "Project",
    "Sprint",
    "resolve_issues",
]
