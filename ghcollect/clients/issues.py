"""Issues resource client."""

from collections.abc import Iterable
from datetime import date
from typing import TYPE_CHECKING, Any

from ghcollect.collection import ISSUES, fetch_filtered, top_ranking, weekly_histogram
from ghcollect.types.filters import DateBound, DateFilter
from ghcollect.types.reports import RankingEntry, WeeklyBucket

if TYPE_CHECKING:
    from ghcollect.transport import HTTPTransport


class IssuesClient:
    """Client for repository issue queries."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the issues client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def weekly(
        self,
        repository_urls: str | Iterable[str],
        number_of_weeks: int = 12,
        data_type: str = "created",
        today: date | None = None,
        token: str | None = None,
    ) -> list[WeeklyBucket]:
        """
        Count issues created or closed in each trailing week.

        Args:
            repository_urls: Repository URL or URLs
            number_of_weeks: How many weeks to look back (default: 12)
            data_type: "created" or "closed" (default: "created")
            today: Last day of the most recent week (default: today, UTC)
            token: Credential for this call

        Returns:
            number_of_weeks buckets, most recent first, then a "total" bucket
        """
        return weekly_histogram(
            self.transport, ISSUES, repository_urls, number_of_weeks, data_type, today, token
        )

    def top(
        self,
        repository_urls: str | Iterable[str],
        state: str = "open",
        created_on_or_after: DateBound | None = None,
        closed_on_or_after: DateBound | None = None,
        token: str | None = None,
    ) -> list[RankingEntry]:
        """
        Rank repositories by number of matching issues.

        Raises:
            InvalidArgumentError: If closed_on_or_after is given with state "open"
        """
        return top_ranking(
            self.transport,
            ISSUES,
            repository_urls,
            state,
            created_on_or_after,
            closed_on_or_after,
            token,
        )

    def list(
        self,
        repository_urls: str | Iterable[str],
        state: str = "open",
        created_on_or_after: DateBound | None = None,
        created_on_or_before: DateBound | None = None,
        closed_on_or_after: DateBound | None = None,
        closed_on_or_before: DateBound | None = None,
        token: str | None = None,
    ) -> list[dict[str, Any]]:
        """
        List issues across one or more repositories.

        Pull requests, which GitHub also reports as issues, are skipped.
        Only the first page of each repository is fetched.

        Args:
            repository_urls: Repository URL or URLs ("https://github.com/owner/name")
            state: "open", "closed" or "all" (default: "open")
            created_on_or_after: Keep issues created on or after this date
            created_on_or_before: Keep issues created on or before this date
            closed_on_or_after: Keep issues closed on or after this date
            closed_on_or_before: Keep issues closed on or before this date
            token: Credential for this call (default: the client's token)

        Returns:
            Raw issue objects, in repository input order

        Raises:
            InvalidArgumentError: If state is unknown or a URL cannot be parsed
            NotFoundError: If a repository does not exist
        """
        date_filter = DateFilter(
            created_on_or_after=created_on_or_after,
            created_on_or_before=created_on_or_before,
            completed_on_or_after=closed_on_or_after,
            completed_on_or_before=closed_on_or_before,
        )
        return fetch_filtered(self.transport, ISSUES, repository_urls, state, date_filter, token)
