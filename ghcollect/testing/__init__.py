"""ghcollect testing utilities.

Provides a mock transport, a mock client and payload factories for testing
applications that use ghcollect.
"""

from ghcollect.testing.fixtures import (
    create_mock_contributor,
    create_mock_issue,
    create_mock_member,
    create_mock_pull_request,
    create_mock_team,
)
from ghcollect.testing.mock import MockCall, MockGitHubClient, MockResponse, MockTransport

__all__ = [
    # Mock client
    "MockGitHubClient",
    "MockTransport",
    "MockCall",
    "MockResponse",
    # Helper functions
    "create_mock_issue",
    "create_mock_pull_request",
    "create_mock_contributor",
    "create_mock_member",
    "create_mock_team",
]
