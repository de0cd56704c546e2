"""
Pytest plugin for ghcollect testing fixtures.

This module re-exports all fixtures from fixtures.py so they can be
automatically discovered by pytest when this package is installed.

To use these fixtures in your tests, add this to your conftest.py:

    pytest_plugins = ["ghcollect.testing.conftest"]

Or import the fixtures directly:

    from ghcollect.testing.fixtures import mock_client, sample_issues
"""

# Re-export all fixtures for pytest auto-discovery
from ghcollect.testing.fixtures import (
    mock_client,
    mock_client_with_issues,
    mock_client_with_pulls,
    repository_url,
    sample_contributors,
    sample_issues,
    sample_pull_requests,
)

__all__ = [
    "mock_client",
    "mock_client_with_issues",
    "mock_client_with_pulls",
    "repository_url",
    "sample_contributors",
    "sample_issues",
    "sample_pull_requests",
]
