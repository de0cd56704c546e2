"""Shared fixtures for the ghcollect test suite."""

from ghcollect.testing.fixtures import (  # noqa: F401
    mock_client,
    mock_client_with_issues,
    mock_client_with_pulls,
    repository_url,
    sample_contributors,
    sample_issues,
    sample_pull_requests,
)
