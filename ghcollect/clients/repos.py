"""Repository people resource client: collaborators and contributors."""

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from ghcollect.types.repos import parse_repository_urls

if TYPE_CHECKING:
    from ghcollect.transport import HTTPTransport


def unique_contributors(contributors: Iterable[dict[str, Any]]) -> list[str]:
    """
    Return the distinct ``author.login`` values in first-seen order.

    Entries without an author login (deleted accounts) are skipped.
    """
    seen: dict[str, None] = {}
    for contributor in contributors:
        author = contributor.get("author") or {}
        login = author.get("login")
        if login:
            seen.setdefault(login, None)
    return list(seen)


class ReposClient:
    """Client for repository collaborator and contributor queries."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the repos client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def collaborators(
        self,
        repository_urls: str | Iterable[str],
        token: str | None = None,
    ) -> list[dict[str, Any]]:
        """
        List collaborators of one or more repositories.

        Listing collaborators requires push access, so an unauthenticated
        call normally fails with AuthenticationError or AuthorizationError.

        Args:
            repository_urls: Repository URL or URLs
            token: Credential for this call (default: the client's token)

        Returns:
            Raw user objects, in repository input order
        """
        return self._fetch_each(repository_urls, "collaborators", token)

    def contributors(
        self,
        repository_urls: str | Iterable[str],
        token: str | None = None,
    ) -> list[dict[str, Any]]:
        """
        Get contributor statistics for one or more repositories.

        Each element carries ``author`` and ``total`` (commit count). While
        GitHub is still computing the statistics the repository contributes
        nothing; call again later.

        Args:
            repository_urls: Repository URL or URLs
            token: Credential for this call (default: the client's token)

        Returns:
            Raw contributor statistics, in repository input order
        """
        return self._fetch_each(repository_urls, "stats/contributors", token)

    @staticmethod
    def unique_contributors(contributors: Iterable[dict[str, Any]]) -> list[str]:
        """Deduplicate contributor logins, preserving first-seen order."""
        return unique_contributors(contributors)

    def _fetch_each(
        self,
        repository_urls: str | Iterable[str],
        endpoint: str,
        token: str | None,
    ) -> list[dict[str, Any]]:
        results: list[dict[str, Any]] = []
        for ref in parse_repository_urls(repository_urls):
            results.extend(
                self.transport.get_collection(f"{ref.api_path}/{endpoint}", token=token)
            )
        return results
