"""
Tests for ghcollect testing utilities.

Verifies that MockTransport, MockGitHubClient and the factories work correctly.
"""

import pytest

from ghcollect.exceptions import GitHubError, NotFoundError, ServerError
from ghcollect.testing import (
    MockGitHubClient,
    MockTransport,
    create_mock_contributor,
    create_mock_issue,
    create_mock_pull_request,
    create_mock_team,
)


class TestMockTransport:
    """Tests for MockTransport."""

    def test_configured_responses(self) -> None:
        transport = MockTransport()
        transport.configure("/orgs/octo/members", [{"login": "a"}])

        assert transport.get("/orgs/octo/members") == [{"login": "a"}]

    def test_unconfigured_path_is_not_found(self) -> None:
        transport = MockTransport()

        with pytest.raises(NotFoundError) as exc_info:
            transport.get("/repos/octo/missing/issues")

        assert exc_info.value.status_code == 404

    def test_default_response(self) -> None:
        transport = MockTransport(default=[])

        assert transport.get_collection("/anything") == []

    def test_configured_errors(self) -> None:
        transport = MockTransport()
        transport.configure("/orgs/octo/teams", error=ServerError("SERVER_ERROR", "boom", 500))

        with pytest.raises(ServerError):
            transport.get("/orgs/octo/teams")

    def test_collection_requires_list(self) -> None:
        transport = MockTransport()
        transport.configure("/repos/octo/hello/issues", {"message": "oops"})

        with pytest.raises(GitHubError) as exc_info:
            transport.get_collection("/repos/octo/hello/issues")

        assert exc_info.value.code == "UNEXPECTED_RESPONSE"

    def test_call_tracking(self) -> None:
        transport = MockTransport(token="default", default=[])

        transport.get("/a", params={"state": "open"})
        transport.get("/a", token="override")
        transport.get("/b")

        assert transport.was_called("/a")
        assert transport.call_count("/a") == 2
        assert transport.call_count() == 3
        assert not transport.was_called("/c")

        calls = transport.get_calls("/a")
        assert calls[0].params == {"state": "open"}
        assert calls[0].token == "default"
        assert calls[1].token == "override"

    def test_reset(self) -> None:
        transport = MockTransport()
        transport.configure("/a", [])
        transport.get("/a")

        transport.reset()

        assert transport.call_count() == 0
        with pytest.raises(NotFoundError):
            transport.get("/a")


class TestMockGitHubClient:
    """Tests for MockGitHubClient."""

    def test_resource_clients_use_mock_transport(self) -> None:
        mock = MockGitHubClient(token="t")

        for resource in (mock.issues, mock.pulls, mock.repos, mock.orgs):
            assert resource.transport is mock.transport

    def test_context_manager(self) -> None:
        with MockGitHubClient() as mock:
            mock.transport.configure("/repos/octo/hello/issues", [create_mock_issue()])
            assert len(mock.issues.list("octo/hello")) == 1


class TestHelperFunctions:
    """Tests for payload factories."""

    def test_create_mock_issue(self) -> None:
        issue = create_mock_issue(number=3, closed_at="2020-01-02T00:00:00Z")

        assert issue["number"] == 3
        assert issue["state"] == "closed"
        assert "pull_request" not in issue

    def test_create_mock_issue_as_pull_request(self) -> None:
        issue = create_mock_issue(is_pull_request=True)

        assert issue["pull_request"] is not None

    def test_create_mock_pull_request_merged_is_closed(self) -> None:
        pr = create_mock_pull_request(merged_at="2020-01-03T10:00:00Z")

        assert pr["state"] == "closed"
        assert pr["closed_at"] == pr["merged_at"]

    def test_create_mock_contributor(self) -> None:
        assert create_mock_contributor("a", total=4)["author"] == {"login": "a"}

    def test_create_mock_team_slug(self) -> None:
        assert create_mock_team("Platform Team")["slug"] == "platform-team"
