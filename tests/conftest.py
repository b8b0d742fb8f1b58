"""Shared pytest fixtures and configuration."""

from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from jira_agile.transport import HttpResponse

FIXTURES_DIR = Path(__file__).parent / "fixtures"


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")
    config.addinivalue_line("markers", "real: runs against a live tracker (local only)")


def get_mock_response(name: str) -> str:
    """Read a JSON fixture, e.g. ``board/1_issues.json``."""
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


# Shared fixtures


@pytest.fixture
def fixture_body() -> Callable[[str], str]:
    """Loader for JSON fixtures under tests/fixtures."""
    return get_mock_response


@pytest.fixture
def fixture_response() -> Callable[[str], HttpResponse]:
    """Build a 200 HttpResponse from a JSON fixture."""

    def _load(name: str) -> HttpResponse:
        return HttpResponse(status_code=200, body=get_mock_response(name))

    return _load


@pytest.fixture
def mock_http() -> MagicMock:
    """Fake transport; set ``get.return_value`` or ``get.side_effect`` per test."""
    return MagicMock()
