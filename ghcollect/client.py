"""
ghcollect main client.

Provides the primary interface for querying the GitHub REST API.
"""

import os
from typing import Any

from ghcollect.clients import IssuesClient, OrgsClient, PullsClient, ReposClient
from ghcollect.exceptions import ConfigurationError
from ghcollect.transport import HTTPTransport

__version__ = "0.1.0"


class GitHubClient:
    """
    Main client for the GitHub REST API.

    Aggregates all resource clients and holds the default credential. Any
    operation also accepts ``token=`` to override it for a single call.

    Example:
        ```python
        from ghcollect import GitHubClient

        with GitHubClient(token="ghp_...") as client:
            issues = client.issues.list(
                ["https://github.com/octo/hello"],
                state="all",
                created_on_or_after=date(2020, 1, 1),
            )
            weekly = client.pulls.weekly("https://github.com/octo/hello", number_of_weeks=4)

        # Or create from environment variables
        client = GitHubClient.from_env()
        ```
    """

    DEFAULT_BASE_URL = "https://api.github.com"
    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        token: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """
        Initialize the GitHub client.

        Args:
            token: Default credential; None runs unauthenticated at a lower quota
            base_url: Base URL for API requests (default: https://api.github.com)
            timeout: Request timeout in seconds (default: 30.0)
        """
        self.token = token
        self.base_url = base_url
        self.timeout = timeout

        self._transport = HTTPTransport(
            base_url=base_url,
            token=token,
            timeout=timeout,
            user_agent=f"ghcollect/{__version__}",
        )

        # Initialize resource clients
        self.issues = IssuesClient(self._transport)
        self.pulls = PullsClient(self._transport)
        self.repos = ReposClient(self._transport)
        self.orgs = OrgsClient(self._transport)

    @classmethod
    def from_env(cls) -> "GitHubClient":
        """
        Create a client from environment variables.

        Environment variables:
            GITHUB_TOKEN: Default credential (optional, anonymous if unset)
            GITHUB_API_URL: Base URL for API (optional, default: https://api.github.com)
            GHCOLLECT_TIMEOUT: Request timeout in seconds (optional, default: 30)

        Returns:
            Configured GitHubClient instance

        Raises:
            ConfigurationError: If GHCOLLECT_TIMEOUT is not a positive number
        """
        token = os.environ.get("GITHUB_TOKEN") or None
        base_url = os.environ.get("GITHUB_API_URL") or cls.DEFAULT_BASE_URL
        raw_timeout = os.environ.get("GHCOLLECT_TIMEOUT")

        timeout = cls.DEFAULT_TIMEOUT
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise ConfigurationError(
                    f"Invalid GHCOLLECT_TIMEOUT: {raw_timeout!r}. Must be a number of seconds"
                ) from None
            if timeout <= 0:
                raise ConfigurationError(
                    f"Invalid GHCOLLECT_TIMEOUT: {raw_timeout!r}. Must be positive"
                )

        return cls(token=token, base_url=base_url, timeout=timeout)

    @property
    def transport(self) -> HTTPTransport:
        """Get the underlying HTTP transport (for advanced use cases)."""
        return self._transport

    def close(self) -> None:
        """Close the client and release resources."""
        self._transport.close()

    def __enter__(self) -> "GitHubClient":
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit - closes the client."""
        self.close()
