"""ghcollect - issue, pull request and people queries over the GitHub REST API."""

from ghcollect.client import GitHubClient, __version__
from ghcollect.clients import unique_contributors
from ghcollect.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    GitHubError,
    InvalidArgumentError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    ValidationError,
)
from ghcollect.logging import configure_logging, get_logger
from ghcollect.transport import HTTPTransport
from ghcollect.types import (
    DateFilter,
    RankingEntry,
    RepositoryRef,
    WeeklyBucket,
    parse_repository_urls,
)

__all__ = [
    "__version__",
    # Main Client
    "GitHubClient",
    # Exceptions
    "GitHubError",
    "ConfigurationError",
    "InvalidArgumentError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "RateLimitedError",
    "ValidationError",
    "ServerError",
    # Types
    "RepositoryRef",
    "parse_repository_urls",
    "DateFilter",
    "WeeklyBucket",
    "RankingEntry",
    "unique_contributors",
    # Transport
    "HTTPTransport",
    # Logging
    "configure_logging",
    "get_logger",
]
