"""
Pytest fixtures and payload factories for ghcollect testing.

The factories build JSON objects shaped like GitHub REST responses, carrying
only the fields ghcollect reads plus a few identifying ones.
"""

from datetime import date
from typing import Any, Generator

import pytest

from ghcollect.testing.mock import MockGitHubClient


# ============================================================================
# Payload factories
# ============================================================================


def create_mock_issue(
    number: int = 1,
    created_at: str = "2020-01-15T10:00:00Z",
    closed_at: str | None = None,
    title: str | None = None,
    is_pull_request: bool = False,
) -> dict[str, Any]:
    """
    Create an issue payload.

    With ``is_pull_request`` the payload carries the ``pull_request`` key
    GitHub adds to pull requests listed through the issues endpoint.
    """
    issue: dict[str, Any] = {
        "number": number,
        "title": title or f"Issue {number}",
        "state": "closed" if closed_at else "open",
        "created_at": created_at,
        "closed_at": closed_at,
        "user": {"login": "octocat"},
    }
    if is_pull_request:
        issue["pull_request"] = {"url": f"https://api.github.com/repos/octo/hello/pulls/{number}"}
    return issue


def create_mock_pull_request(
    number: int = 1,
    created_at: str = "2020-01-15T10:00:00Z",
    merged_at: str | None = None,
    closed_at: str | None = None,
    title: str | None = None,
) -> dict[str, Any]:
    """Create a pull request payload. A merged pull request is also closed."""
    return {
        "number": number,
        "title": title or f"Pull request {number}",
        "state": "closed" if (closed_at or merged_at) else "open",
        "created_at": created_at,
        "closed_at": closed_at or merged_at,
        "merged_at": merged_at,
        "user": {"login": "octocat"},
    }


def create_mock_contributor(login: str = "octocat", total: int = 1) -> dict[str, Any]:
    """Create a /stats/contributors element."""
    return {"author": {"login": login}, "total": total, "weeks": []}


def create_mock_member(login: str = "octocat", user_id: int = 1) -> dict[str, Any]:
    """Create a user payload as returned for members and collaborators."""
    return {"login": login, "id": user_id, "type": "User"}


def create_mock_team(name: str = "Core", team_id: int = 1, slug: str | None = None) -> dict[str, Any]:
    """Create a team payload."""
    return {"id": team_id, "name": name, "slug": slug or name.lower().replace(" ", "-")}


def iso(day: date, hour: int = 12) -> str:
    """Format a day as a GitHub timestamp at ``hour`` UTC."""
    return f"{day.isoformat()}T{hour:02d}:00:00Z"


# ============================================================================
# Mock Client Fixtures
# ============================================================================


@pytest.fixture
def mock_client() -> Generator[MockGitHubClient, None, None]:
    """
    Provide a MockGitHubClient for testing.

    Example:
        ```python
        def test_my_report(mock_client):
            mock_client.transport.configure("/repos/octo/hello/pulls", [])
            assert my_report(mock_client) == []
        ```
    """
    client = MockGitHubClient(token="test-token")
    yield client
    client.reset()


@pytest.fixture
def repository_url() -> str:
    """Provide a test repository URL."""
    return "https://github.com/octo/hello"


@pytest.fixture
def sample_issues() -> list[dict[str, Any]]:
    """January 2020 issues: two in the month, one pull request, one earlier."""
    return [
        create_mock_issue(number=1, created_at="2020-01-05T09:00:00Z"),
        create_mock_issue(number=2, created_at="2020-01-20T17:30:00Z", closed_at="2020-01-25T08:00:00Z"),
        create_mock_issue(number=3, created_at="2020-01-10T12:00:00Z", is_pull_request=True),
        create_mock_issue(number=4, created_at="2019-12-28T12:00:00Z"),
    ]


@pytest.fixture
def sample_pull_requests() -> list[dict[str, Any]]:
    """Pull requests: merged, closed unmerged, and open."""
    return [
        create_mock_pull_request(number=10, created_at="2020-01-02T10:00:00Z", merged_at="2020-01-03T10:00:00Z"),
        create_mock_pull_request(number=11, created_at="2020-01-04T10:00:00Z", closed_at="2020-01-06T10:00:00Z"),
        create_mock_pull_request(number=12, created_at="2020-01-08T10:00:00Z"),
    ]


@pytest.fixture
def sample_contributors() -> list[dict[str, Any]]:
    """Contributor statistics with a repeated author."""
    return [
        create_mock_contributor("a", total=5),
        create_mock_contributor("b", total=3),
        create_mock_contributor("a", total=1),
    ]


@pytest.fixture
def mock_client_with_issues(
    mock_client: MockGitHubClient,
    sample_issues: list[dict[str, Any]],
) -> MockGitHubClient:
    """Provide a MockGitHubClient serving ``sample_issues`` for octo/hello."""
    mock_client.transport.configure("/repos/octo/hello/issues", sample_issues)
    return mock_client


@pytest.fixture
def mock_client_with_pulls(
    mock_client: MockGitHubClient,
    sample_pull_requests: list[dict[str, Any]],
) -> MockGitHubClient:
    """Provide a MockGitHubClient serving ``sample_pull_requests`` for octo/hello."""
    mock_client.transport.configure("/repos/octo/hello/pulls", sample_pull_requests)
    return mock_client
